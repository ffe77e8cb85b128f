"""
Request tracker: deadline calculation, fee estimation, persistent storage,
and summary statistics.
"""

from records_toolkit.tracker.models import (
    DocumentType,
    NoteChannel,
    RequestDocument,
    RequestNote,
    RequestRecord,
    RequestStatus,
)
from records_toolkit.tracker.deadlines import compute_due_date, days_until_due, is_overdue
from records_toolkit.tracker.fees import FeeEstimate, estimate_fees
from records_toolkit.tracker.store import MemoryBlobStore, RequestStore, SQLBlobStore
from records_toolkit.tracker.stats import RequestStats, compute_stats

__all__ = [
    "DocumentType",
    "NoteChannel",
    "RequestDocument",
    "RequestNote",
    "RequestRecord",
    "RequestStatus",
    "compute_due_date",
    "days_until_due",
    "is_overdue",
    "FeeEstimate",
    "estimate_fees",
    "MemoryBlobStore",
    "RequestStore",
    "SQLBlobStore",
    "RequestStats",
    "compute_stats",
]
