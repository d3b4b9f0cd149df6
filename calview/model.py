"""
Central data model definitions used across the project.

This module defines the canonical structure of calendar events and the
derived grid cells so that:
- the core (dates, bucketing, layout, validation) and the terminal UI share the same field names
- events can be stored as JSON and read back without loss
- the code stays readable and beginner-friendly
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, List, Optional, Tuple


# Palette offered by the event form. The first entry is the form default.
EVENT_COLORS: List[Tuple[str, str]] = [
    ("Blue", "#3b82f6"),
    ("Green", "#10b981"),
    ("Orange", "#f59e0b"),
    ("Purple", "#8b5cf6"),
    ("Pink", "#ec4899"),
    ("Red", "#ef4444"),
]

# Used by the presentation layer when an event has no color of its own.
DEFAULT_EVENT_COLOR = "#e4e4e7"

# Suggested categories. Validation never restricts category to this list.
CATEGORIES: List[str] = ["Meeting", "Work", "Personal", "Design", "Development"]


@dataclass(frozen=True)
class CalendarEvent:
    """
    Represents one calendar event (single start/end time slot).

    Instances are never mutated; edits produce a new event via
    dataclasses.replace (see calview.state).
    """

    id: str
    title: str
    start_date: datetime
    end_date: datetime
    description: Optional[str] = None
    color: Optional[str] = None
    category: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize to a JSON-friendly dict (timestamps as ISO-8601 text).
        """
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "start_date": self.start_date.isoformat(timespec="minutes"),
            "end_date": self.end_date.isoformat(timespec="minutes"),
            "color": self.color,
            "category": self.category,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CalendarEvent":
        """
        Build an event from a dict produced by to_dict().

        Raises KeyError / ValueError / TypeError for incomplete or malformed records.
        """
        return cls(
            id=str(data["id"]),
            title=str(data["title"]),
            description=data.get("description"),
            start_date=datetime.fromisoformat(data["start_date"]),
            end_date=datetime.fromisoformat(data["end_date"]),
            color=data.get("color"),
            category=data.get("category"),
        )


@dataclass(frozen=True)
class CalendarGridCell:
    """
    One cell of the month grid (derived, never stored).
    """

    date: date
    muted: bool
    is_today: bool
    events: Tuple[CalendarEvent, ...] = ()


@dataclass(frozen=True)
class EventForm:
    """
    Field values of the create/edit event form.

    event_id is None while creating a new event and holds the id of the
    event being edited otherwise.
    """

    title: str = ""
    description: str = ""
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    color: str = EVENT_COLORS[0][1]
    category: str = ""
    event_id: Optional[str] = None

    @property
    def is_edit(self) -> bool:
        return self.event_id is not None


@dataclass(frozen=True)
class FormResult:
    """
    Outcome of submitting an EventForm: either an event or field errors.
    """

    event: Optional[CalendarEvent]
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors
