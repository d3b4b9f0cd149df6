"""
Validation of a candidate event before it is committed.

Returns a dict mapping field name -> message. An empty dict means the
candidate is safe to commit. Validation problems are data and are never
raised as exceptions.

Checks (all of them run, no short-circuit):
- title blank or missing
- title longer than 100 characters (overwrites the blank-title message)
- description longer than 500 characters
- start/end missing
- end not strictly after start (reported on end_date)
"""

from __future__ import annotations

from typing import Any, Mapping

MAX_TITLE_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 500

_FIELDS = ("title", "description", "start_date", "end_date")


def _fields(candidate: Any) -> dict[str, Any]:
    """
    Read the validated fields from an event/form object or a plain mapping.
    """
    if isinstance(candidate, Mapping):
        return {name: candidate.get(name) for name in _FIELDS}
    return {name: getattr(candidate, name, None) for name in _FIELDS}


def validate_event(candidate: Any) -> dict[str, str]:
    data = _fields(candidate)
    title = data["title"]
    description = data["description"]
    start = data["start_date"]
    end = data["end_date"]

    errors: dict[str, str] = {}

    if not title or not str(title).strip():
        errors["title"] = "Title is required"
    # overwrites the blank-title message
    if title and len(title) > MAX_TITLE_LENGTH:
        errors["title"] = f"Title must be {MAX_TITLE_LENGTH} characters or less"

    if description and len(description) > MAX_DESCRIPTION_LENGTH:
        errors["description"] = f"Description must be {MAX_DESCRIPTION_LENGTH} characters or less"

    if start is None:
        errors["start_date"] = "Start is required"
    if end is None:
        errors["end_date"] = "End is required"
    if start is not None and end is not None and end <= start:
        errors["end_date"] = "End date/time must be after start date/time"

    return errors
