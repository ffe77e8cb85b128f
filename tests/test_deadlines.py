"""
Tests for the deadline calculator.
"""

from datetime import date, datetime, timedelta

from records_toolkit.tracker.deadlines import (
    DEFAULT_BUSINESS_DAYS,
    add_business_days,
    add_calendar_days,
    business_days_between,
    business_days_until_due,
    compute_due_date,
    days_until_due,
    display_status,
    is_overdue,
)
from records_toolkit.tracker.models import RequestRecord, RequestStatus
from records_toolkit.tracker.stats import compute_stats

MONDAY = date(2026, 3, 2)


def _record(**kwargs) -> RequestRecord:
    return RequestRecord.create(title="Budget emails", **kwargs)


class TestBusinessDays:
    def test_within_week(self):
        assert add_business_days(MONDAY, 3) == date(2026, 3, 5)

    def test_skips_weekend(self):
        assert add_business_days(MONDAY, 5) == date(2026, 3, 9)
        assert add_business_days(date(2026, 3, 6), 1) == date(2026, 3, 9)

    def test_start_on_weekend(self):
        assert add_business_days(date(2026, 3, 7), 1) == date(2026, 3, 9)

    def test_zero_days(self):
        assert add_business_days(MONDAY, 0) == MONDAY

    def test_negative_days(self):
        assert add_business_days(date(2026, 3, 9), -1) == date(2026, 3, 6)

    def test_calendar_days(self):
        assert add_calendar_days(MONDAY, 30) == date(2026, 4, 1)

    def test_between(self):
        assert business_days_between(MONDAY, date(2026, 3, 9)) == 5
        assert business_days_between(date(2026, 3, 9), MONDAY) == -5
        assert business_days_between(MONDAY, MONDAY) == 0


class TestComputeDueDate:
    def test_calendar_window(self):
        # California: 10 calendar days
        assert compute_due_date("CA", MONDAY) == date(2026, 3, 12)

    def test_business_window(self):
        # New York: 5 business days
        assert compute_due_date("NY", MONDAY) == date(2026, 3, 9)
        # Texas: 10 business days
        assert compute_due_date("TX", MONDAY) == date(2026, 3, 16)

    def test_no_fixed_window_uses_default(self):
        assert DEFAULT_BUSINESS_DAYS == 10
        assert compute_due_date("FL", MONDAY) == date(2026, 3, 16)
        assert compute_due_date("NC", MONDAY) == date(2026, 3, 16)

    def test_long_calendar_window(self):
        assert compute_due_date("MD", MONDAY) == date(2026, 4, 1)

    def test_empty_or_unknown(self):
        assert compute_due_date("", MONDAY) is None
        assert compute_due_date(None, MONDAY) is None
        assert compute_due_date("ZZ", MONDAY) is None


class TestOverdue:
    def test_past_due(self):
        req = _record(status=RequestStatus.SUBMITTED, due_date=date(2026, 3, 9))
        assert is_overdue(req, today=date(2026, 3, 10))
        assert display_status(req, today=date(2026, 3, 10)) == RequestStatus.OVERDUE

    def test_due_today_not_overdue(self):
        req = _record(status=RequestStatus.SUBMITTED, due_date=date(2026, 3, 9))
        assert not is_overdue(req, today=date(2026, 3, 9))
        assert display_status(req, today=date(2026, 3, 9)) == RequestStatus.SUBMITTED

    def test_closed_never_overdue(self):
        for status in (RequestStatus.FULFILLED, RequestStatus.DENIED):
            req = _record(status=status, due_date=date(2026, 1, 1))
            assert not is_overdue(req, today=date(2026, 3, 10))

    def test_open_statuses_can_be_overdue(self):
        req = _record(status=RequestStatus.APPEALED, due_date=date(2026, 1, 1))
        assert is_overdue(req, today=date(2026, 3, 10))

    def test_no_due_date(self):
        req = _record(status=RequestStatus.SUBMITTED)
        assert not is_overdue(req, today=date(2030, 1, 1))

    def test_accepts_datetime_today(self):
        req = _record(status=RequestStatus.SUBMITTED, due_date=date(2026, 3, 9))
        assert is_overdue(req, today=datetime(2026, 3, 10, 9, 0))
        assert not is_overdue(req, today=datetime(2026, 3, 9, 23, 59))
        assert display_status(req, today=datetime(2026, 3, 10, 9, 0)) == RequestStatus.OVERDUE
        assert compute_stats([req], today=datetime(2026, 3, 10, 9, 0)).overdue_count == 1


class TestDaysUntilDue:
    def test_future(self):
        assert days_until_due(date(2026, 3, 12), today=MONDAY) == 10

    def test_past(self):
        assert days_until_due(date(2026, 2, 27), today=MONDAY) == -3

    def test_ignores_time_of_day(self):
        assert days_until_due(datetime(2026, 3, 3, 23, 59), today=datetime(2026, 3, 2, 0, 1)) == 1

    def test_business_days_until_due(self):
        assert business_days_until_due(date(2026, 3, 9), today=MONDAY) == 5


class TestDueDateMonotonic:
    def test_later_submission_never_earlier_due(self):
        # business days, calendar days, and the no-fixed-period fallback
        for state in ("NY", "TX", "CA", "MD", "FL"):
            previous = None
            for offset in range(21):
                due = compute_due_date(state, MONDAY + timedelta(days=offset))
                if previous is not None:
                    assert due >= previous, (state, offset)
                previous = due
