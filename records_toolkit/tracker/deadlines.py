"""
Deadline calculator for state public records requests.

Accounts for:
- Business days vs calendar days
- Jurisdiction-specific response periods
- A 10 business day fallback for states with no fixed period

Public holidays are not excluded; a business day is any weekday.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional

from records_toolkit.data.jurisdictions import WindowKind, get_profile
from records_toolkit.tracker.models import CLOSED_STATUSES, RequestRecord, RequestStatus

# Used when a state sets no fixed response period.
DEFAULT_BUSINESS_DAYS = 10


def _is_weekend(d: date) -> bool:
    return d.weekday() >= 5


def add_business_days(start: date, days: int) -> date:
    """Add N business days to a start date, skipping weekends."""
    step = 1 if days >= 0 else -1
    current = start
    remaining = abs(days)
    while remaining > 0:
        current += timedelta(days=step)
        if _is_weekend(current):
            continue
        remaining -= 1
    return current


def add_calendar_days(start: date, days: int) -> date:
    """Add N calendar days."""
    return start + timedelta(days=days)


def business_days_between(start: date, end: date) -> int:
    """Signed count of weekdays after ``start`` up to and including ``end``."""
    if end == start:
        return 0
    step = 1 if end > start else -1
    count = 0
    current = start
    while current != end:
        current += timedelta(days=step)
        if not _is_weekend(current):
            count += 1
    return count * step


def compute_due_date(jurisdiction: Optional[str], submitted_on: date) -> Optional[date]:
    """
    Calculate the statutory response deadline.

    Returns None for an empty (federal/other) or unrecognized jurisdiction.
    """
    profile = get_profile(jurisdiction)
    if profile is None:
        return None

    window = profile.response_window
    if window.kind is WindowKind.NONE or not window.days:
        return add_business_days(submitted_on, DEFAULT_BUSINESS_DAYS)
    if window.kind is WindowKind.BUSINESS_DAYS:
        return add_business_days(submitted_on, window.days)
    return add_calendar_days(submitted_on, window.days)


def is_overdue(record: RequestRecord, today: Optional[date] = None) -> bool:
    if record.status in CLOSED_STATUSES:
        return False
    if record.due_date is None:
        return False
    return _as_date(today or date.today()) > record.due_date


def display_status(record: RequestRecord, today: Optional[date] = None) -> RequestStatus:
    """Stored status, or OVERDUE when the deadline has passed."""
    if is_overdue(record, today):
        return RequestStatus.OVERDUE
    return record.status


def _as_date(value: date) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def days_until_due(due_date: date, today: Optional[date] = None) -> int:
    """Whole calendar days remaining; negative when overdue. Time of day is ignored."""
    return (_as_date(due_date) - _as_date(today or date.today())).days


def business_days_until_due(due_date: date, today: Optional[date] = None) -> int:
    return business_days_between(today or date.today(), due_date)
