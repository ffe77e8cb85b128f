"""
Administrative appeal letters for denied or inadequately answered requests.

Grounds are chosen from a fixed set of appeal reasons; each maps to a
standard statement of the basis for appeal, followed by the requester's
own explanation and any legal authorities they cite.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from records_toolkit.money import format_date
from records_toolkit.tracker.models import RequestRecord


class AppealReason(enum.Enum):
    IMPROPER_DENIAL = "improper-denial"
    EXCESSIVE_FEES = "excessive-fees"
    EXCESSIVE_DELAY = "excessive-delay"
    INADEQUATE_SEARCH = "inadequate-search"
    IMPROPER_REDACTIONS = "improper-redactions"
    OTHER = "other"


REASON_TEXT: dict[AppealReason, str] = {
    AppealReason.IMPROPER_DENIAL: (
        "The denial of my request was improper and not justified under the "
        "applicable exemptions"
    ),
    AppealReason.EXCESSIVE_FEES: "The fees assessed are excessive and not authorized by law",
    AppealReason.EXCESSIVE_DELAY: (
        "The agency has failed to respond within the statutory timeframe"
    ),
    AppealReason.INADEQUATE_SEARCH: (
        "The agency's search for responsive records was inadequate"
    ),
    AppealReason.IMPROPER_REDACTIONS: (
        "The redactions applied to responsive records are overbroad and not justified"
    ),
    AppealReason.OTHER: (
        "The agency's response to my request was inadequate for the following reasons"
    ),
}


@dataclass
class AppealData:
    """Everything needed to write an appeal."""

    original_request_date: Optional[date]
    denial_date: Optional[date]
    denial_reason: str
    appeal_reason: AppealReason
    explanation: str = ""
    legal_basis: list[str] = field(default_factory=list)

    @classmethod
    def from_record(
        cls,
        record: RequestRecord,
        appeal_reason: AppealReason,
        explanation: str = "",
        legal_basis: Optional[list[str]] = None,
        denial_date: Optional[date] = None,
    ) -> AppealData:
        return cls(
            original_request_date=record.submitted_date,
            denial_date=denial_date,
            denial_reason=record.denial_reason or "",
            appeal_reason=appeal_reason,
            explanation=explanation,
            legal_basis=list(legal_basis or []),
        )


APPEAL_TEMPLATE = """\
[Your Name]
[Your Address]
[City, State, ZIP Code]
[Email Address]
[Phone Number]

{today}

[Agency Name]
[Agency Address]
[City, State, ZIP Code]

Re: ADMINISTRATIVE APPEAL — Public Records Request
Original Request Date: {request_date}
Denial Date: {denial_date}

Dear Records Officer / Appeals Officer:

I am writing to appeal the {determination} to my public records request \
dated {request_date}.

BACKGROUND:
On {request_date}, I submitted a public records request seeking [brief \
description]. On {denial_date}, the agency {agency_action}.

BASIS FOR APPEAL:
{reason_text}. {explanation}
{legal_citations}

REQUESTED RELIEF:
I respectfully request that you:
1. Reverse the denial and produce all responsive records;
2. Conduct a thorough search for all responsive records;
3. Release all non-exempt portions of records with a detailed exemption log;
4. {final_relief}.

PUBLIC INTEREST:
This request serves a significant public interest in [explain public \
interest - transparency, accountability, public safety, etc.].{fee_waiver}

SEGREGABILITY:
If any portions of responsive records are exempt, I request that all \
segregable, non-exempt portions be released immediately.

I request a written determination on this appeal within the time required \
by law. Please contact me if you require any additional information.

Sincerely,
[Your Name]

cc: [Agency Head, General Counsel, or State FOI Officer if applicable]"""


def generate_appeal(data: AppealData, today: Optional[date] = None) -> str:
    """Generate an administrative appeal letter."""
    fees = data.appeal_reason is AppealReason.EXCESSIVE_FEES

    if data.legal_basis:
        bullets = "\n".join(f"• {basis}" for basis in data.legal_basis)
        legal_citations = f"\nLEGAL BASIS:\n{bullets}"
    else:
        legal_citations = ""

    if data.denial_reason:
        agency_action = f'denied my request, stating: "{data.denial_reason}"'
    else:
        agency_action = "failed to adequately respond to my request"

    return APPEAL_TEMPLATE.format(
        today=format_date(today or date.today()),
        request_date=format_date(data.original_request_date),
        denial_date=format_date(data.denial_date),
        determination="denial" if data.denial_date else "inadequate response",
        agency_action=agency_action,
        reason_text=REASON_TEXT[data.appeal_reason],
        explanation=data.explanation,
        legal_citations=legal_citations,
        final_relief=(
            "Waive or substantially reduce the fees"
            if fees
            else "Respond within the timeframe required by law"
        ),
        fee_waiver=(
            " Accordingly, I request that fees be waived pursuant to the public "
            "interest fee waiver provision of the applicable statute."
            if fees
            else ""
        ),
    )
