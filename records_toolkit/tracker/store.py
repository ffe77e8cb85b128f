"""
Persistent storage for tracked requests.

The whole request collection is serialized as one JSON text blob under a
single key. Any backend offering ``get(key)`` and ``set(key, text)`` will
do; an in-memory dict and a SQLAlchemy table are provided.

Persistence failures are logged and swallowed: ``load`` returns an empty
list and ``save`` returns False. Callers keep their in-memory state.

Only one writer is assumed. Two processes saving the same key can
overwrite each other's changes.
"""

from __future__ import annotations

import json
import logging
from dataclasses import fields
from datetime import date, datetime
from typing import Any, Iterable, Optional, Protocol

from sqlalchemy import DateTime, String, Text, create_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, sessionmaker

from records_toolkit.tracker.models import (
    DocumentType,
    NoteChannel,
    RequestDocument,
    RequestNote,
    RequestRecord,
    RequestStatus,
    generate_id,
)

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "public-records-requests"


# ---------------------------------------------------------------------------
# Blob backends
# ---------------------------------------------------------------------------

class BlobStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, text: str) -> None: ...


class MemoryBlobStore:
    """Dict-backed blob store; contents last for the life of the object."""

    def __init__(self, initial: Optional[dict[str, str]] = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, text: str) -> None:
        self._data[key] = text


class Base(DeclarativeBase):
    pass


class Blob(Base):
    __tablename__ = "blobs"

    key: Mapped[str] = mapped_column(String(128), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)


class SQLBlobStore:
    """
    Blob store on any SQLAlchemy database URL.

    Usage:
        blobs = SQLBlobStore("sqlite:///records_toolkit.db")
        store = RequestStore(blobs)
    """

    def __init__(self, db_url: str = "sqlite:///records_toolkit.db") -> None:
        self.engine = create_engine(db_url, echo=False)
        Base.metadata.create_all(self.engine)
        self.SessionFactory = sessionmaker(bind=self.engine)

    def _session(self) -> Session:
        return self.SessionFactory()

    def get(self, key: str) -> Optional[str]:
        with self._session() as session:
            blob = session.get(Blob, key)
            return blob.value if blob is not None else None

    def set(self, key: str, text: str) -> None:
        with self._session() as session:
            blob = session.get(Blob, key)
            if blob is None:
                session.add(Blob(key=key, value=text, updated_at=datetime.utcnow()))
            else:
                blob.value = text
                blob.updated_at = datetime.utcnow()
            session.commit()


# ---------------------------------------------------------------------------
# Request store
# ---------------------------------------------------------------------------

_RECORD_FIELDS = frozenset(f.name for f in fields(RequestRecord))
_IMMUTABLE_FIELDS = frozenset({"id", "created_at"})


class RequestStore:
    """
    Load/save interface for the request collection.

    Usage:
        store = RequestStore(SQLBlobStore("sqlite:///requests.db"))
        store.upsert(record)
        store.update(record.id, status=RequestStatus.SUBMITTED, submitted_date=date.today())
        records = store.load()
    """

    def __init__(self, blobs: BlobStore, key: str = DEFAULT_STORAGE_KEY) -> None:
        self.blobs = blobs
        self.key = key

    # ---- Whole-collection operations ----

    def load(self) -> list[RequestRecord]:
        try:
            stored = self.blobs.get(self.key)
            if not stored:
                return []
            return [RequestRecord.from_dict(item) for item in json.loads(stored)]
        except Exception:
            logger.exception("Failed to load requests from key '%s'", self.key)
            return []

    def save(self, records: Iterable[RequestRecord]) -> bool:
        try:
            text = json.dumps([r.to_dict() for r in records])
            self.blobs.set(self.key, text)
        except Exception:
            logger.exception("Failed to save requests to key '%s'", self.key)
            return False
        return True

    def delete_by_id(self, request_id: str) -> bool:
        """Remove a request. Returns False if no request had that id."""
        records = self.load()
        remaining = [r for r in records if r.id != request_id]
        if len(remaining) == len(records):
            return False
        self.save(remaining)
        logger.info("Deleted request %s", request_id)
        return True

    # ---- Single-record operations ----

    def get(self, request_id: str) -> Optional[RequestRecord]:
        for record in self.load():
            if record.id == request_id:
                return record
        return None

    def filter_by_status(self, status: RequestStatus) -> list[RequestRecord]:
        return [r for r in self.load() if r.status == status]

    def upsert(self, record: RequestRecord) -> RequestRecord:
        """Insert, or replace the stored record with the same id keeping its ``created_at``."""
        _check_stored_status(record.status)
        records = self.load()
        record.touch()
        for i, existing in enumerate(records):
            if existing.id == record.id:
                record.created_at = existing.created_at
                records[i] = record
                break
        else:
            records.append(record)
        self.save(records)
        return record

    def update(self, request_id: str, **changes: Any) -> Optional[RequestRecord]:
        """Apply field changes to a stored record. Returns None if not found."""
        unknown = set(changes) - _RECORD_FIELDS
        if unknown:
            raise ValueError(f"Unknown request field(s): {', '.join(sorted(unknown))}")
        frozen = set(changes) & _IMMUTABLE_FIELDS
        if frozen:
            raise ValueError(f"Field(s) cannot be changed: {', '.join(sorted(frozen))}")
        if "status" in changes:
            _check_stored_status(changes["status"])
        return self._modify(request_id, lambda record: _apply(record, changes))

    def add_note(
        self,
        request_id: str,
        summary: str,
        channel: NoteChannel = NoteChannel.OTHER,
        full_text: Optional[str] = None,
        on: Optional[date] = None,
    ) -> Optional[RequestRecord]:
        note = RequestNote(
            id=generate_id(),
            date=on or date.today(),
            type=channel,
            summary=summary,
            full_text=full_text,
        )
        return self._modify(request_id, lambda record: record.notes.append(note))

    def add_document(
        self,
        request_id: str,
        name: str,
        doc_type: DocumentType = DocumentType.OTHER,
        file_url: Optional[str] = None,
        notes: Optional[str] = None,
        on: Optional[date] = None,
    ) -> Optional[RequestRecord]:
        document = RequestDocument(
            id=generate_id(),
            date=on or date.today(),
            name=name,
            type=doc_type,
            file_url=file_url,
            notes=notes,
        )
        return self._modify(request_id, lambda record: record.documents.append(document))

    # ---- internals ----

    def _modify(self, request_id: str, mutate) -> Optional[RequestRecord]:
        records = self.load()
        for record in records:
            if record.id == request_id:
                mutate(record)
                record.touch()
                self.save(records)
                return record
        return None


def _check_stored_status(status: RequestStatus) -> None:
    if status is RequestStatus.OVERDUE:
        raise ValueError("Status 'overdue' is derived from the due date and cannot be stored")


def _apply(record: RequestRecord, changes: dict[str, Any]) -> None:
    for key, val in changes.items():
        setattr(record, key, val)
