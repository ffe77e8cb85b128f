"""
Tests for jurisdiction profiles and record templates.
"""

import pytest

from records_toolkit.data.jurisdictions import (
    DEFAULT_FEE_SCHEDULE,
    PUBLIC_RECORDS,
    WindowKind,
    get_fee_schedule,
    get_profile,
    list_jurisdictions,
    normalize_code,
)
from records_toolkit.data.templates import (
    RECORD_TEMPLATES,
    RecordCategory,
    all_record_templates,
    get_record_template,
)


class TestJurisdictions:
    def test_covers_states_and_dc(self):
        assert len(PUBLIC_RECORDS) == 51
        assert "DC" in PUBLIC_RECORDS
        assert list_jurisdictions() == sorted(PUBLIC_RECORDS)

    def test_codes_match_keys(self):
        for code, profile in PUBLIC_RECORDS.items():
            assert profile.code == code
            assert profile.statute
            assert profile.display_time

    def test_response_windows(self):
        assert get_profile("CA").response_window.kind == WindowKind.CALENDAR_DAYS
        assert get_profile("CA").response_window.days == 10
        assert get_profile("NY").response_window.kind == WindowKind.BUSINESS_DAYS
        assert get_profile("FL").response_window.kind == WindowKind.NONE

    def test_lookup_misses(self):
        assert get_profile("") is None
        assert get_profile(None) is None
        assert get_profile("ZZ") is None

    def test_normalize_code(self):
        assert normalize_code(" ca ") == "CA"
        assert normalize_code("New York") == "NY"
        assert normalize_code("") == ""
        assert normalize_code("zz") == "ZZ"

    def test_fee_schedules(self):
        assert get_fee_schedule("CA").search_rate == 0.0
        assert get_fee_schedule("NY").search_rate == 25.0
        assert get_fee_schedule("TX").certification_fee == 5.0
        assert get_fee_schedule("OH") == DEFAULT_FEE_SCHEDULE
        assert get_fee_schedule("") == DEFAULT_FEE_SCHEDULE

    def test_profiles_are_immutable(self):
        with pytest.raises(AttributeError):
            get_profile("CA").name = "Elsewhere"


class TestRecordTemplates:
    def test_every_category_has_template(self):
        assert set(RECORD_TEMPLATES) == set(RecordCategory)
        assert len(all_record_templates()) == 14

    def test_templates_have_content(self):
        for template in all_record_templates():
            assert template.name
            assert template.key_fields
            assert template.body
            assert template.tips

    def test_lookup_by_value(self):
        assert get_record_template("emails").name == "Email Communications"
        assert get_record_template(RecordCategory.CALLS_911).category == RecordCategory.CALLS_911

    def test_unknown_category(self):
        with pytest.raises(ValueError):
            get_record_template("tax-returns")

    def test_render_fills_fields(self):
        body = get_record_template("emails").render({"keywords": "budget", "senders": "Mayor"})
        assert "Keywords: budget" in body
        assert "Sender(s): Mayor" in body
        assert "Recipient(s): [Names, titles, or departments]" in body

    def test_every_template_renders_without_fields(self):
        for template in all_record_templates():
            assert "[" in template.render({})
