"""
Full request letter: the record category's body wrapped with the sender
and recipient blocks, the statutory citation, and the standard closing
paragraphs (format, fee waiver, deadline, preservation, contact).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Mapping, Optional

from records_toolkit.data.jurisdictions import get_profile
from records_toolkit.data.templates import RecordCategory, get_record_template
from records_toolkit.money import format_date
from records_toolkit.rendering import render

# Fee ceiling quoted in the letter when there is no estimate.
DEFAULT_FEE_CEILING = 50.0

REQUEST_LETTER_TEMPLATE = """\
[Your Name]
[Your Address]
[City, State, ZIP Code]
[Email Address]
[Phone Number]

{{ today }}

{{ agency or "[Agency Name]" }}
{{ state_name or "[State]" }} Public Records Officer
[Agency Address]
[City, State, ZIP Code]

Re: Public Records Request — {{ template_name }}
{% if statute %}
Statute: {{ statute }}
{% endif %}

Dear Records Officer:

Pursuant to {{ statute or "the applicable public records law" }}, I request \
access to and copies of the following records:

{{ body }}

FORMAT: Electronic format preferred (searchable PDFs for documents, native \
format for audio/video), with all attachments and metadata intact.

FEE WAIVER REQUEST: I request a fee waiver as this request serves the public \
interest in government transparency and accountability. If fees will exceed \
${{ "%.2f"|format(fee_ceiling) }}, please contact me before proceeding.

DEADLINE: Under {{ statute or "applicable law" }}, a response is due within \
{{ display_time or "a reasonable time" }}. Please acknowledge receipt within 5 \
business days and provide an estimated date of completion.

PRESERVATION: Please preserve all responsive records and do not delete, \
destroy, or alter any potentially responsive documents.

CONTACT: Please contact me if you need clarification or have questions about \
this request.

Sincerely,
[Your Name]
"""


@dataclass
class GeneratedLetter:
    """Output of a letter generation."""

    text: str
    record_type: RecordCategory
    agency: str
    state: str
    statute: str

    def suggested_filename(self) -> str:
        parts = [self.record_type.value, "request"]
        if self.state:
            parts.insert(0, self.state.lower())
        return "-".join(parts) + ".txt"


class RequestLetterBuilder:
    """
    Assemble a complete request letter.

    Usage:
        builder = RequestLetterBuilder()
        letter = builder.build("emails", {"keywords": "budget"}, agency="City Clerk", state="CA")
        print(letter.text)

    Pass ``template`` to replace the boilerplate (e.g. a translated version);
    it receives the same variables as REQUEST_LETTER_TEMPLATE.
    """

    def __init__(self, template: str = REQUEST_LETTER_TEMPLATE) -> None:
        self.template = template

    def build(
        self,
        record_type: RecordCategory | str,
        fields: Optional[Mapping[str, str]] = None,
        agency: str = "",
        state: str = "",
        fee_total: float = 0.0,
        today: Optional[date] = None,
    ) -> GeneratedLetter:
        record_template = get_record_template(record_type)
        profile = get_profile(state)

        text = render(
            self.template,
            today=format_date(today or date.today()),
            agency=agency,
            state_name=profile.name if profile else "",
            template_name=record_template.name,
            statute=profile.statute if profile else "",
            display_time=profile.display_time if profile else "",
            body=record_template.render(fields or {}),
            fee_ceiling=fee_total if fee_total > 0 else DEFAULT_FEE_CEILING,
        )

        return GeneratedLetter(
            text=text.strip(),
            record_type=record_template.category,
            agency=agency,
            state=profile.code if profile else "",
            statute=profile.statute if profile else "",
        )
