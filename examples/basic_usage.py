#!/usr/bin/env python3
"""
Basic Usage Example - TripDash Dashboard Engine

This script demonstrates the basic usage of the dashboard engine with a
handful of trip and action item records shaped like the data API's
responses. It shows how to:
- Initialize the engine
- Build a snapshot from raw records
- Read summary stats, the calendar grid and ranked action items

Run: python examples/basic_usage.py
"""

from datetime import datetime, timezone

from tripdash_app.engine import DashboardEngine
from tripdash_app.logging import configure_logging
from tripdash_app.presentation.display import classify_action_item, priority_display, status_display

TRIP_RECORDS = [
    {
        "id": 1, "schoolName": "Lincoln High School", "groupName": "Marching Band",
        "location": "Orlando, FL", "startDate": "2024-03-04", "endDate": "2024-03-08",
        "totalTravelers": 62, "contractSigned": True, "status": "confirmed",
        "createdAt": "2024-02-10T15:30:00Z",
    },
    {
        "id": 2, "schoolName": "Westview Middle", "groupName": "Choir",
        "location": "Washington, DC", "startDate": "2024-03-12", "endDate": "2024-03-14",
        "totalTravelers": 38, "contractSigned": False, "status": "pending",
        "createdAt": "2024-02-20T09:00:00Z",
    },
    {
        "id": 3, "schoolName": "Central Academy", "groupName": "Orchestra",
        "location": "Orlando, FL", "startDate": "2024-03-28", "endDate": "2024-04-02",
        "totalTravelers": None, "contractSigned": False, "status": "processing",
        "createdAt": "2024-01-05T12:00:00Z",
    },
    {
        # Rejected: ends before it starts
        "id": 4, "schoolName": "Broken Record", "groupName": "Test",
        "location": "Nowhere", "startDate": "2024-03-20", "endDate": "2024-03-18",
    },
]

ACTION_ITEM_RECORDS = [
    {"id": 11, "title": "Collect final roster", "priority": "normal", "status": "pending"},
    {"id": 12, "title": "Contract signature for Choir", "priority": "urgent",
     "dueDate": "2024-03-08", "status": "pending"},
    {"id": 13, "title": "Bus deposit payment", "priority": "high", "dueDate": "2024-03-15",
     "status": "pending"},
    {"id": 14, "title": "Hotel rooming list", "priority": "urgent", "status": "done"},
]


def main():
    configure_logging(level="INFO")

    engine = DashboardEngine()
    now = datetime(2024, 3, 6, 14, 0, tzinfo=timezone.utc)
    snapshot = engine.build_snapshot_from_records(TRIP_RECORDS, ACTION_ITEM_RECORDS, now)

    stats = snapshot.stats
    print("\n📊 Summary")
    print(f"  Active trips:        {len(stats.active_trips)} ({stats.active_trip_pct}% of total)")
    print(f"  Total travelers:     {stats.total_travelers}")
    print(f"  Upcoming departures: {len(stats.upcoming_departures)} (next: {stats.next_departure})")
    print(f"  Pending contracts:   {len(stats.pending_contracts)} "
          f"({len(stats.urgent_pending_contracts)} urgent)")
    print(f"  Rejected records:    {snapshot.rejected_record_count}")

    print(f"\n📅 Calendar {snapshot.calendar.year}-{snapshot.calendar.month:02d}")
    for week in snapshot.calendar.weeks:
        row = []
        for cell in week:
            marker = "*" if cell.total_trips else " "
            day = f"{cell.date.day:2d}" if cell.in_current_month else "  "
            row.append(f"{day}{marker}")
        print("  " + " ".join(row))

    print("\n✅ Action items")
    for item in snapshot.top_action_items:
        meta = priority_display(item.priority)
        print(f"  [{meta.label:<11}] {item.title} ({classify_action_item(item.title).value}, due {item.due_date})")
    print(f"  {snapshot.pending_action_count} pending")

    print("\n🚌 Upcoming trips")
    for trip in snapshot.upcoming_trips:
        print(f"  {trip.start_date} {trip.school_name} - {trip.group_name} [{status_display(trip.status).label}]")


if __name__ == "__main__":
    main()
