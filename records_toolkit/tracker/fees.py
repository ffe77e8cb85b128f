"""
Fee estimation for public records requests.

Rates come from the jurisdiction's fee schedule where one is registered,
otherwise from the default schedule. Audio/video media is charged at a
flat per-minute rate regardless of jurisdiction, and some record
categories carry fixed surcharges. All figures are approximations meant
to help a requester budget, not a statement of what an agency will bill.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from records_toolkit.data.jurisdictions import get_fee_schedule
from records_toolkit.data.templates import RecordCategory
from records_toolkit.money import format_money, round_cents

MEDIA_RATE_PER_MINUTE = 0.50
VIDEO_PRODUCTION_FEE = 25.0
ELECTRONIC_SEARCH_SURCHARGE = 50.0
# Emails above this page count carry the electronic search surcharge.
EMAIL_SURCHARGE_PAGE_THRESHOLD = 100
FEE_WAIVER_THRESHOLD = 100.0
FEE_WAIVER_NOTE = "Request a fee waiver if this serves public interest"

_VIDEO_CATEGORIES = (RecordCategory.BODY_CAMERA, RecordCategory.SURVEILLANCE_VIDEO)


@dataclass
class Surcharge:
    description: str
    amount: float


@dataclass
class FeeEstimate:
    """Itemized cost projection."""

    search_hours: float
    search_rate: float
    search_cost: float
    pages: float
    copy_fee: float
    copy_cost: float
    audio_minutes: float
    media_fee: float
    certification_fee: float
    other_fees: list[Surcharge] = field(default_factory=list)
    total: float = 0.0
    notes: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "search_hours": self.search_hours,
            "search_rate": self.search_rate,
            "search_cost": self.search_cost,
            "pages": self.pages,
            "copy_fee": self.copy_fee,
            "copy_cost": self.copy_cost,
            "audio_minutes": self.audio_minutes,
            "media_fee": self.media_fee,
            "certification_fee": self.certification_fee,
            "other_fees": [{"description": s.description, "amount": s.amount} for s in self.other_fees],
            "total": self.total,
            "notes": self.notes,
        }

    def breakdown_lines(self) -> list[str]:
        lines = [
            f"Search time:  {self.search_hours:g} hr x {format_money(self.search_rate)} = "
            f"{format_money(self.search_cost)}",
            f"Copies:       {self.pages:g} pages x {format_money(self.copy_fee)} = "
            f"{format_money(self.copy_cost)}",
        ]
        if self.media_fee:
            lines.append(f"Media:        {self.audio_minutes:g} min = {format_money(self.media_fee)}")
        for surcharge in self.other_fees:
            lines.append(f"{surcharge.description}: {format_money(surcharge.amount)}")
        lines.append(f"Total:        {format_money(self.total)}")
        lines.append(f"(Certification, if requested: {format_money(self.certification_fee)})")
        if self.notes:
            lines.append(f"Note: {self.notes}")
        return lines


def _surcharges(record_type: RecordCategory, pages: float) -> list[Surcharge]:
    fees: list[Surcharge] = []
    if record_type in _VIDEO_CATEGORIES:
        fees.append(Surcharge("Video production fee", VIDEO_PRODUCTION_FEE))
    if record_type is RecordCategory.EMAILS and pages > EMAIL_SURCHARGE_PAGE_THRESHOLD:
        fees.append(Surcharge("Electronic search surcharge", ELECTRONIC_SEARCH_SURCHARGE))
    return fees


def estimate_fees(
    jurisdiction: Optional[str],
    record_type: RecordCategory | str,
    pages: float = 0,
    audio_minutes: float = 0,
    search_hours: float = 0,
) -> FeeEstimate:
    """
    Estimate the cost of a request.

    Inputs are not validated: a negative volume yields a negative component
    rather than an error.
    """
    record_type = RecordCategory(record_type)
    schedule = get_fee_schedule(jurisdiction)

    search_cost = search_hours * schedule.search_rate
    copy_cost = pages * schedule.copy_fee
    media_fee = audio_minutes * MEDIA_RATE_PER_MINUTE if audio_minutes > 0 else 0.0
    other_fees = _surcharges(record_type, pages)

    total = search_cost + copy_cost + media_fee + sum(s.amount for s in other_fees)

    return FeeEstimate(
        search_hours=search_hours,
        search_rate=schedule.search_rate,
        search_cost=search_cost,
        pages=pages,
        copy_fee=schedule.copy_fee,
        copy_cost=copy_cost,
        audio_minutes=audio_minutes,
        media_fee=media_fee,
        certification_fee=schedule.certification_fee,
        other_fees=other_fees,
        total=round_cents(total),
        notes=FEE_WAIVER_NOTE if total > FEE_WAIVER_THRESHOLD else None,
    )
