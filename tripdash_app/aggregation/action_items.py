"""Action item prioritization"""

from collections.abc import Iterable, Sequence
from datetime import date

from ..data.models import ActionItem, Priority
from ..utils.time import DateLike, as_calendar_date

PRIORITY_RANK = {
    Priority.URGENT: 0,
    Priority.HIGH: 1,
    Priority.NORMAL: 2,
    Priority.LOW: 3,
}
UNRANKED = len(PRIORITY_RANK)


def priority_rank(item: ActionItem) -> int:
    """Rank of an item's priority tier, unrecognized values rank last"""
    tier = item.priority_tier
    if tier is None:
        return UNRANKED
    return PRIORITY_RANK[tier]


def _sort_key(item: ActionItem) -> tuple[int, bool, date]:
    # Dated items sort before undated ones; undated items share a key so
    # the stable sort keeps their input order
    if item.due_date is None:
        return priority_rank(item), True, date.min
    return priority_rank(item), False, as_calendar_date(item.due_date)


def rank_action_items(items: Iterable[ActionItem]) -> list[ActionItem]:
    """
    Order action items by priority tier, then due date

    1. urgent, high, normal, low, then anything unrecognized
    2. earlier due date first
    3. an item with a due date before one without
    4. otherwise input order

    Returns a new list; the input is not modified.
    """
    return sorted(items, key=_sort_key)


def top_action_items(items: Iterable[ActionItem], limit: int) -> list[ActionItem]:
    """The first `limit` items of the ranking"""
    return rank_action_items(items)[:max(limit, 0)]


def count_pending(items: Sequence[ActionItem]) -> int:
    """Number of items whose status is pending"""
    return sum(1 for item in items if item.status == "pending")


def is_overdue(item: ActionItem, now: DateLike) -> bool:
    """True when the item's due date is before today"""
    if item.due_date is None:
        return False
    return as_calendar_date(item.due_date) < as_calendar_date(now)
