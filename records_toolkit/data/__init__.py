"""
Read-only reference data: state public records laws and letter templates.
"""

from records_toolkit.data.jurisdictions import (
    DEFAULT_FEE_SCHEDULE,
    PUBLIC_RECORDS,
    FeeSchedule,
    JurisdictionProfile,
    ResponseWindow,
    WindowKind,
    get_fee_schedule,
    get_profile,
)
from records_toolkit.data.templates import (
    RECORD_TEMPLATES,
    RecordCategory,
    RecordTemplate,
    get_record_template,
)

__all__ = [
    "DEFAULT_FEE_SCHEDULE",
    "PUBLIC_RECORDS",
    "FeeSchedule",
    "JurisdictionProfile",
    "ResponseWindow",
    "WindowKind",
    "get_fee_schedule",
    "get_profile",
    "RECORD_TEMPLATES",
    "RecordCategory",
    "RecordTemplate",
    "get_record_template",
]
