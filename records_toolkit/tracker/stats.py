"""
Summary statistics over a collection of tracked requests.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Iterable, Optional

from records_toolkit.money import round_cents, round_whole
from records_toolkit.tracker.deadlines import is_overdue
from records_toolkit.tracker.models import RequestRecord, RequestStatus

_COMPLETED = (RequestStatus.FULFILLED, RequestStatus.PARTIAL)


@dataclass
class RequestStats:
    total: int = 0
    by_status: dict[str, int] = field(default_factory=dict)
    by_state: dict[str, int] = field(default_factory=dict)
    by_record_type: dict[str, int] = field(default_factory=dict)
    avg_response_time: int = 0  # days
    avg_cost: float = 0.0
    fulfillment_rate: int = 0  # percent
    denial_rate: int = 0  # percent
    overdue_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "by_status": dict(self.by_status),
            "by_state": dict(self.by_state),
            "by_record_type": dict(self.by_record_type),
            "avg_response_time": self.avg_response_time,
            "avg_cost": self.avg_cost,
            "fulfillment_rate": self.fulfillment_rate,
            "denial_rate": self.denial_rate,
            "overdue_count": self.overdue_count,
        }


def _percent(part: int, whole: int) -> int:
    if whole == 0:
        return 0
    return round_whole(100 * part / whole)


def compute_stats(records: Iterable[RequestRecord], today: Optional[date] = None) -> RequestStats:
    """
    Aggregate request counts, average response time and cost, and rates.

    Response time covers records with both a submitted and a fulfilled
    date; average cost covers records with an actual cost. Both are 0
    when nothing qualifies.
    """
    records = list(records)
    stats = RequestStats(total=len(records))
    if not records:
        return stats

    by_status: Counter[str] = Counter()
    by_state: Counter[str] = Counter()
    by_record_type: Counter[str] = Counter()
    response_days: list[int] = []
    costs: list[float] = []

    for req in records:
        by_status[req.status.value] += 1
        if req.state:
            by_state[req.state] += 1
        by_record_type[req.record_type.value] += 1

        if req.submitted_date and req.fulfilled_date:
            response_days.append((req.fulfilled_date - req.submitted_date).days)
        if req.actual_cost is not None:
            costs.append(req.actual_cost)
        if is_overdue(req, today):
            stats.overdue_count += 1

    stats.by_status = dict(by_status)
    stats.by_state = dict(by_state)
    stats.by_record_type = dict(by_record_type)

    if response_days:
        stats.avg_response_time = round_whole(sum(response_days) / len(response_days))
    if costs:
        stats.avg_cost = round_cents(sum(costs) / len(costs))

    completed = sum(by_status[s.value] for s in _COMPLETED)
    stats.fulfillment_rate = _percent(completed, stats.total)
    stats.denial_rate = _percent(by_status[RequestStatus.DENIED.value], stats.total)
    return stats
