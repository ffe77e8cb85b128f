"""
Tracked request records and their JSON representation.

A RequestRecord follows a public records request from draft through final
disposition, including its deadlines, cost estimates, correspondence
notes, and documents received.
"""

from __future__ import annotations

import enum
import secrets
import string
import time
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Optional

from records_toolkit.data.templates import RecordCategory


_ID_ALPHABET = string.ascii_lowercase + string.digits


def generate_id() -> str:
    """Millisecond timestamp plus a random suffix, e.g. ``1760800000000-k3x9q0a1z``."""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"{int(time.time() * 1000)}-{suffix}"


class RequestStatus(enum.Enum):
    """Lifecycle states for a public records request."""

    DRAFT = "draft"
    SUBMITTED = "submitted"
    ACKNOWLEDGED = "acknowledged"
    IN_PROGRESS = "in-progress"
    FULFILLED = "fulfilled"
    PARTIAL = "partial"
    DENIED = "denied"
    APPEALED = "appealed"
    # Display-only; derived from the due date at read time.
    OVERDUE = "overdue"


# Requests in these states are never shown as overdue.
CLOSED_STATUSES = frozenset({RequestStatus.FULFILLED, RequestStatus.DENIED})


class NoteChannel(enum.Enum):
    EMAIL = "email"
    PHONE = "phone"
    LETTER = "letter"
    IN_PERSON = "in-person"
    OTHER = "other"


class DocumentType(enum.Enum):
    REQUEST = "request"
    ACKNOWLEDGMENT = "acknowledgment"
    RESPONSE = "response"
    APPEAL = "appeal"
    OTHER = "other"


def _iso(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _parse_date(value: Optional[str]) -> Optional[date]:
    """Parse "YYYY-MM-DD", also accepting a full ISO timestamp."""
    if not value:
        return None
    if len(value) > 10:
        return _parse_datetime(value).date()
    return date.fromisoformat(value)


def _parse_datetime(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


@dataclass
class RequestNote:
    """A record of correspondence with the agency."""

    id: str
    date: date
    type: NoteChannel
    summary: str
    full_text: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "type": self.type.value,
            "summary": self.summary,
            "full_text": self.full_text,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RequestNote:
        return cls(
            id=data["id"],
            date=_parse_date(data["date"]),
            type=NoteChannel(data.get("type", "other")),
            summary=data.get("summary", ""),
            full_text=data.get("full_text"),
        )


@dataclass
class RequestDocument:
    """A document sent or received in the course of a request."""

    id: str
    date: date
    name: str
    type: DocumentType
    file_url: Optional[str] = None
    notes: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "name": self.name,
            "type": self.type.value,
            "file_url": self.file_url,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RequestDocument:
        return cls(
            id=data["id"],
            date=_parse_date(data["date"]),
            name=data.get("name", ""),
            type=DocumentType(data.get("type", "other")),
            file_url=data.get("file_url"),
            notes=data.get("notes"),
        )


@dataclass
class RequestRecord:
    """A single public records request and its lifecycle data."""

    id: str
    created_at: datetime
    updated_at: datetime
    title: str
    record_type: RecordCategory = RecordCategory.GENERAL
    agency: str = ""
    # Two-letter jurisdiction code; empty means federal/other.
    state: str = ""
    description: str = ""
    generated_text: str = ""
    status: RequestStatus = RequestStatus.DRAFT
    # --- dates ---
    submitted_date: Optional[date] = None
    acknowledged_date: Optional[date] = None
    due_date: Optional[date] = None
    fulfilled_date: Optional[date] = None
    # --- costs ---
    estimated_cost: Optional[float] = None
    actual_cost: Optional[float] = None
    estimated_pages: Optional[int] = None
    actual_pages: Optional[int] = None
    # --- communications ---
    notes: list[RequestNote] = field(default_factory=list)
    documents: list[RequestDocument] = field(default_factory=list)
    # --- appeal ---
    denial_reason: Optional[str] = None
    appeal_date: Optional[date] = None
    appeal_outcome: Optional[str] = None

    def __repr__(self) -> str:
        return (
            f"<RequestRecord(id='{self.id}', agency='{self.agency}', "
            f"status={self.status.value}, state='{self.state}')>"
        )

    @classmethod
    def create(cls, title: str, **kwargs: Any) -> RequestRecord:
        """Start a new draft with a fresh id and timestamps."""
        now = datetime.now()
        return cls(id=generate_id(), created_at=now, updated_at=now, title=title, **kwargs)

    def touch(self, now: Optional[datetime] = None) -> None:
        """Refresh ``updated_at``; call after every mutation."""
        self.updated_at = now or datetime.now()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "status": self.status.value,
            "title": self.title,
            "record_type": self.record_type.value,
            "agency": self.agency,
            "state": self.state,
            "description": self.description,
            "generated_text": self.generated_text,
            "submitted_date": _iso(self.submitted_date),
            "acknowledged_date": _iso(self.acknowledged_date),
            "due_date": _iso(self.due_date),
            "fulfilled_date": _iso(self.fulfilled_date),
            "estimated_cost": self.estimated_cost,
            "actual_cost": self.actual_cost,
            "estimated_pages": self.estimated_pages,
            "actual_pages": self.actual_pages,
            "notes": [n.to_dict() for n in self.notes],
            "documents": [d.to_dict() for d in self.documents],
            "denial_reason": self.denial_reason,
            "appeal_date": _iso(self.appeal_date),
            "appeal_outcome": self.appeal_outcome,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RequestRecord:
        """Rebuild a record from ``to_dict`` output, restoring all date fields."""
        return cls(
            id=data["id"],
            created_at=_parse_datetime(data["created_at"]),
            updated_at=_parse_datetime(data["updated_at"]),
            status=RequestStatus(data.get("status", "draft")),
            title=data.get("title", ""),
            record_type=RecordCategory(data.get("record_type", "general")),
            agency=data.get("agency", ""),
            state=data.get("state") or "",
            description=data.get("description", ""),
            generated_text=data.get("generated_text", ""),
            submitted_date=_parse_date(data.get("submitted_date")),
            acknowledged_date=_parse_date(data.get("acknowledged_date")),
            due_date=_parse_date(data.get("due_date")),
            fulfilled_date=_parse_date(data.get("fulfilled_date")),
            estimated_cost=data.get("estimated_cost"),
            actual_cost=data.get("actual_cost"),
            estimated_pages=data.get("estimated_pages"),
            actual_pages=data.get("actual_pages"),
            notes=[RequestNote.from_dict(n) for n in data.get("notes", [])],
            documents=[RequestDocument.from_dict(d) for d in data.get("documents", [])],
            denial_reason=data.get("denial_reason"),
            appeal_date=_parse_date(data.get("appeal_date")),
            appeal_outcome=data.get("appeal_outcome"),
        )
