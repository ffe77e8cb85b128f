"""
Follow-up letter for a tracked request whose deadline has passed.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from records_toolkit.data.jurisdictions import get_profile
from records_toolkit.money import format_date
from records_toolkit.tracker.models import RequestRecord

FOLLOW_UP_TEMPLATE = """\
[Your Name]
[Your Address]
[City, State, ZIP Code]
[Email Address]
[Phone Number]

{today}

{agency}
[Agency Address]
[City, State, ZIP Code]

Re: FOLLOW-UP — Overdue Public Records Request
Original Request Date: {submitted}
Request ID/Reference: [If provided by agency]

Dear Records Officer:

I am writing to follow up on my public records request submitted \
{days_since} days ago on {submitted}.

ORIGINAL REQUEST:
{description}

STATUS:
To date, I have not received {response_kind} my request. Under applicable \
law, the agency is required to respond within {statutory_deadline}. This \
deadline has now passed.

PRESERVATION NOTICE:
This letter serves as a preservation notice. All responsive records must be \
preserved and must not be destroyed, altered, or transferred. This includes \
emails, electronic documents, and any backup systems.

REQUESTED ACTION:
I request that you:
1. Immediately acknowledge this request if you have not already done so;
2. Provide a date by which responsive records will be produced;
3. If responsive records have already been compiled, produce them immediately;
4. Provide a detailed explanation for any delay;
5. Confirm that all responsive records are being preserved.

Please respond within 5 business days. Continued delay may require me to \
seek legal remedies, including mandamus action or filing a complaint with \
[relevant oversight body].

I appreciate your prompt attention to this matter.

Sincerely,
[Your Name]

{cc_line}"""


def generate_follow_up(record: RequestRecord, today: Optional[date] = None) -> str:
    today = today or date.today()
    days_since = (today - record.submitted_date).days if record.submitted_date else 0
    profile = get_profile(record.state)

    return FOLLOW_UP_TEMPLATE.format(
        today=format_date(today),
        agency=record.agency or "[Agency Name]",
        submitted=format_date(record.submitted_date),
        days_since=days_since,
        description=record.description or "[Description of records requested]",
        response_kind=(
            "a substantive response to" if record.acknowledged_date else "any response to"
        ),
        statutory_deadline=profile.display_time if profile else "the statutory timeframe",
        cc_line="cc: [State FOI Officer or relevant oversight body]" if record.state else "",
    ).rstrip()
