"""
Tests for request, follow-up, and appeal letter generation.
"""

from datetime import date

from records_toolkit.data.templates import RecordCategory
from records_toolkit.letters.appeals import AppealData, AppealReason, generate_appeal
from records_toolkit.letters.followup import generate_follow_up
from records_toolkit.letters.request_letter import RequestLetterBuilder
from records_toolkit.tracker.models import RequestRecord, RequestStatus

TODAY = date(2026, 3, 20)


# ---------------------------------------------------------------------------
# Request letter
# ---------------------------------------------------------------------------

class TestRequestLetterBuilder:
    def setup_method(self):
        self.builder = RequestLetterBuilder()

    def test_state_letter(self):
        letter = self.builder.build(
            "emails",
            {"keywords": "budget"},
            agency="City Clerk",
            state="CA",
            fee_total=65.0,
            today=date(2026, 3, 2),
        )
        assert letter.record_type == RecordCategory.EMAILS
        assert letter.state == "CA"
        assert "Mar 2, 2026" in letter.text
        assert "City Clerk" in letter.text
        assert "California Public Records Officer" in letter.text
        assert "Re: Public Records Request — Email Communications" in letter.text
        assert "Statute: Cal. Gov't Code § 7920.000 et seq." in letter.text
        assert "Keywords: budget" in letter.text
        assert "$65.00" in letter.text
        assert "10 calendar days" in letter.text

    def test_unfilled_fields_render_placeholders(self):
        letter = self.builder.build("emails", today=date(2026, 3, 2))
        assert "[Specific search terms, phrases, or names]" in letter.text

    def test_no_state(self):
        letter = self.builder.build("general", agency="", today=date(2026, 3, 2))
        assert letter.state == ""
        assert "[Agency Name]" in letter.text
        assert "[State] Public Records Officer" in letter.text
        assert "the applicable public records law" in letter.text
        assert "a reasonable time" in letter.text
        assert "Statute:" not in letter.text
        # default fee ceiling
        assert "$50.00" in letter.text

    def test_suggested_filename(self):
        assert self.builder.build("emails", state="CA").suggested_filename() == "ca-emails-request.txt"
        assert self.builder.build("general").suggested_filename() == "general-request.txt"

    def test_custom_template(self):
        builder = RequestLetterBuilder(template="{{ agency }} / {{ template_name }}")
        letter = builder.build("contracts", agency="Port Authority")
        assert letter.text == "Port Authority / Contracts & Agreements"


# ---------------------------------------------------------------------------
# Follow-up
# ---------------------------------------------------------------------------

class TestFollowUp:
    def _record(self, **kwargs) -> RequestRecord:
        defaults = dict(
            agency="City Clerk",
            state="CA",
            description="All emails about the 2026 budget",
            status=RequestStatus.SUBMITTED,
            submitted_date=date(2026, 3, 2),
            due_date=date(2026, 3, 12),
        )
        defaults.update(kwargs)
        return RequestRecord.create(title="Budget emails", **defaults)

    def test_contents(self):
        text = generate_follow_up(self._record(), today=TODAY)
        assert "Mar 20, 2026" in text
        assert "18 days ago on Mar 2, 2026" in text
        assert "City Clerk" in text
        assert "All emails about the 2026 budget" in text
        assert "within 10 calendar days" in text
        assert "any response to my request" in text
        assert text.endswith("cc: [State FOI Officer or relevant oversight body]")

    def test_acknowledged_request(self):
        text = generate_follow_up(self._record(acknowledged_date=date(2026, 3, 4)), today=TODAY)
        assert "a substantive response to my request" in text

    def test_no_state(self):
        text = generate_follow_up(self._record(state=""), today=TODAY)
        assert "the statutory timeframe" in text
        assert "cc:" not in text
        assert text.endswith("[Your Name]")


# ---------------------------------------------------------------------------
# Appeal
# ---------------------------------------------------------------------------

class TestAppeal:
    def test_excessive_fees(self):
        data = AppealData(
            original_request_date=date(2026, 3, 2),
            denial_date=date(2026, 3, 15),
            denial_reason="",
            appeal_reason=AppealReason.EXCESSIVE_FEES,
            explanation="The quoted search fee exceeds the statutory rate.",
            legal_basis=["Cal. Gov't Code § 7922.530"],
        )
        text = generate_appeal(data, today=TODAY)
        assert "The fees assessed are excessive and not authorized by law." in text
        assert "LEGAL BASIS:\n• Cal. Gov't Code § 7922.530" in text
        assert "4. Waive or substantially reduce the fees." in text
        assert "fees be waived" in text
        assert "Denial Date: Mar 15, 2026" in text

    def test_from_record_with_denial(self):
        record = RequestRecord.create(
            title="Personnel file",
            status=RequestStatus.DENIED,
            submitted_date=date(2026, 3, 2),
            denial_reason="Exempt personnel record",
        )
        data = AppealData.from_record(
            record, AppealReason.IMPROPER_DENIAL, denial_date=date(2026, 3, 10)
        )
        text = generate_appeal(data, today=TODAY)
        assert 'stating: "Exempt personnel record"' in text
        assert "appeal the denial to my public records request dated Mar 2, 2026" in text
        assert "LEGAL BASIS" not in text
        assert "Respond within the timeframe required by law" in text
        assert "fees be waived" not in text

    def test_no_denial_date(self):
        record = RequestRecord.create(title="Slow request", submitted_date=date(2026, 1, 5))
        data = AppealData.from_record(record, AppealReason.EXCESSIVE_DELAY)
        text = generate_appeal(data, today=TODAY)
        assert "appeal the inadequate response" in text
        assert "Denial Date: —" in text
        assert "failed to adequately respond" in text
