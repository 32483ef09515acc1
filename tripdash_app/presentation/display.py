"""Display metadata for priorities, trip statuses and action item categories."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..data.models import Priority, TripStatus


@dataclass(frozen=True)
class DisplayMeta:
    """Label and color tone for a badge."""
    label: str
    tone: str


class ActionCategory(str, Enum):
    """Action item category, chosen from keywords in the title."""
    CONTRACT = "contract"
    PAYMENT = "payment"
    ROSTER = "roster"
    ROOMING = "rooming"
    GENERAL = "general"


PRIORITY_DISPLAY = {
    Priority.URGENT: DisplayMeta(label="Urgent", tone="red"),
    Priority.HIGH: DisplayMeta(label="Due Soon", tone="amber"),
    Priority.NORMAL: DisplayMeta(label="In Progress", tone="blue"),
    Priority.LOW: DisplayMeta(label="Can Start", tone="green"),
}
DEFAULT_PRIORITY_DISPLAY = DisplayMeta(label="Normal", tone="muted")

STATUS_DISPLAY = {
    TripStatus.ACTIVE: DisplayMeta(label="Active", tone="primary"),
    TripStatus.CONFIRMED: DisplayMeta(label="Confirmed", tone="green"),
    TripStatus.PENDING: DisplayMeta(label="Pending", tone="amber"),
    TripStatus.PROCESSING: DisplayMeta(label="Processing", tone="purple"),
    TripStatus.COMPLETED: DisplayMeta(label="Completed", tone="blue"),
    TripStatus.UNKNOWN: DisplayMeta(label="Unknown", tone="gray"),
}

# Checked in order, first match wins
CATEGORY_KEYWORDS = (
    (ActionCategory.CONTRACT, ("contract", "signature", "agreement")),
    (ActionCategory.PAYMENT, ("payment", "deposit", "fee", "cost")),
    (ActionCategory.ROSTER, ("roster", "student", "traveler")),
    (ActionCategory.ROOMING, ("room", "accommodation", "hotel")),
)


def priority_display(value: Any) -> DisplayMeta:
    """Badge metadata for a raw priority value."""
    tier = Priority.from_raw(value)
    if tier is None:
        return DEFAULT_PRIORITY_DISPLAY
    return PRIORITY_DISPLAY[tier]


def status_display(value: Any) -> DisplayMeta:
    """Badge metadata for a raw trip status value."""
    return STATUS_DISPLAY[TripStatus.from_raw(value)]


def classify_action_item(title: str) -> ActionCategory:
    """Category of an action item from keywords in its title."""
    lowered = (title or "").lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return category
    return ActionCategory.GENERAL
