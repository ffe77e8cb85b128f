"""
Reference data for U.S. state public records laws.

Each jurisdiction carries its statute citation, a human-readable
description of the response period, the response window used for
deadline calculation, and optionally a fee schedule. Figures are
illustrative approximations of each statute, not legal advice.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional


class WindowKind(enum.Enum):
    NONE = "none"
    BUSINESS_DAYS = "business_days"
    CALENDAR_DAYS = "calendar_days"


@dataclass(frozen=True)
class ResponseWindow:
    """Statutory response period: no fixed limit, N business days, or N calendar days."""

    kind: WindowKind
    days: int = 0

    @classmethod
    def none(cls) -> ResponseWindow:
        return cls(WindowKind.NONE)

    @classmethod
    def business(cls, days: int) -> ResponseWindow:
        return cls(WindowKind.BUSINESS_DAYS, days)

    @classmethod
    def calendar(cls, days: int) -> ResponseWindow:
        return cls(WindowKind.CALENDAR_DAYS, days)


@dataclass(frozen=True)
class FeeSchedule:
    """Per-jurisdiction rates used by the fee estimator."""

    search_rate: float  # per hour
    copy_fee: float  # per page
    certification_fee: float


DEFAULT_FEE_SCHEDULE = FeeSchedule(search_rate=20.0, copy_fee=0.15, certification_fee=10.0)


@dataclass(frozen=True)
class JurisdictionProfile:
    """Legal and procedural details for a single state's public records law."""

    code: str
    name: str
    statute: str
    display_time: str
    response_window: ResponseWindow
    fee_schedule: Optional[FeeSchedule] = None


def _profile(
    code: str,
    name: str,
    statute: str,
    display_time: str,
    window: ResponseWindow,
    fees: Optional[FeeSchedule] = None,
) -> JurisdictionProfile:
    return JurisdictionProfile(code, name, statute, display_time, window, fees)


_NONE = ResponseWindow.none()
_biz = ResponseWindow.business
_cal = ResponseWindow.calendar


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

PUBLIC_RECORDS: dict[str, JurisdictionProfile] = {
    p.code: p
    for p in (
        _profile("AL", "Alabama", "Ala. Code § 36-12-40",
                 "a reasonable time (no fixed deadline)", _NONE),
        _profile("AK", "Alaska", "Alaska Stat. § 40.25.110 et seq.",
                 "10 business days", _biz(10)),
        _profile("AZ", "Arizona", "Ariz. Rev. Stat. § 39-121 et seq.",
                 "promptly (no fixed deadline)", _NONE),
        _profile("AR", "Arkansas", "Ark. Code Ann. § 25-19-101 et seq.",
                 "3 business days", _biz(3)),
        _profile("CA", "California", "Cal. Gov't Code § 7920.000 et seq.",
                 "10 calendar days", _cal(10),
                 FeeSchedule(search_rate=0.0, copy_fee=0.10, certification_fee=15.0)),
        _profile("CO", "Colorado", "Colo. Rev. Stat. § 24-72-201 et seq.",
                 "3 business days", _biz(3)),
        _profile("CT", "Connecticut", "Conn. Gen. Stat. § 1-200 et seq.",
                 "4 business days", _biz(4)),
        _profile("DE", "Delaware", "Del. Code Ann. tit. 29, § 10001 et seq.",
                 "15 business days", _biz(15)),
        _profile("DC", "District of Columbia", "D.C. Code § 2-531 et seq.",
                 "15 business days", _biz(15)),
        _profile("FL", "Florida", "Fla. Stat. ch. 119",
                 "a reasonable time (no fixed deadline)", _NONE,
                 FeeSchedule(search_rate=0.0, copy_fee=0.15, certification_fee=1.0)),
        _profile("GA", "Georgia", "O.C.G.A. § 50-18-70 et seq.",
                 "3 business days", _biz(3)),
        _profile("HI", "Hawaii", "Haw. Rev. Stat. ch. 92F",
                 "10 business days", _biz(10)),
        _profile("ID", "Idaho", "Idaho Code § 74-101 et seq.",
                 "3 business days", _biz(3)),
        _profile("IL", "Illinois", "5 ILCS 140/1 et seq.",
                 "5 business days", _biz(5),
                 FeeSchedule(search_rate=0.0, copy_fee=0.10, certification_fee=10.0)),
        _profile("IN", "Indiana", "Ind. Code § 5-14-3-1 et seq.",
                 "7 calendar days", _cal(7)),
        _profile("IA", "Iowa", "Iowa Code ch. 22",
                 "20 calendar days", _cal(20)),
        _profile("KS", "Kansas", "Kan. Stat. Ann. § 45-215 et seq.",
                 "3 business days", _biz(3)),
        _profile("KY", "Kentucky", "Ky. Rev. Stat. § 61.870 et seq.",
                 "5 business days", _biz(5)),
        _profile("LA", "Louisiana", "La. Rev. Stat. § 44:1 et seq.",
                 "3 business days", _biz(3)),
        _profile("ME", "Maine", "Me. Rev. Stat. tit. 1, § 400 et seq.",
                 "5 business days (acknowledgment)", _biz(5)),
        _profile("MD", "Maryland", "Md. Code, Gen. Provisions § 4-101 et seq.",
                 "30 calendar days", _cal(30)),
        _profile("MA", "Massachusetts", "Mass. Gen. Laws ch. 66, § 10",
                 "10 business days", _biz(10)),
        _profile("MI", "Michigan", "Mich. Comp. Laws § 15.231 et seq.",
                 "5 business days", _biz(5)),
        _profile("MN", "Minnesota", "Minn. Stat. ch. 13",
                 "a reasonable time (no fixed deadline)", _NONE),
        _profile("MS", "Mississippi", "Miss. Code Ann. § 25-61-1 et seq.",
                 "7 business days", _biz(7)),
        _profile("MO", "Missouri", "Mo. Rev. Stat. § 610.010 et seq.",
                 "3 business days", _biz(3)),
        _profile("MT", "Montana", "Mont. Code Ann. § 2-6-1001 et seq.",
                 "a timely manner (no fixed deadline)", _NONE),
        _profile("NE", "Nebraska", "Neb. Rev. Stat. § 84-712 et seq.",
                 "4 business days", _biz(4)),
        _profile("NV", "Nevada", "Nev. Rev. Stat. ch. 239",
                 "5 business days", _biz(5)),
        _profile("NH", "New Hampshire", "N.H. Rev. Stat. Ann. ch. 91-A",
                 "5 business days", _biz(5)),
        _profile("NJ", "New Jersey", "N.J. Stat. Ann. § 47:1A-1 et seq.",
                 "7 business days", _biz(7)),
        _profile("NM", "New Mexico", "N.M. Stat. Ann. § 14-2-1 et seq.",
                 "15 calendar days", _cal(15)),
        _profile("NY", "New York", "N.Y. Pub. Off. Law §§ 84-90",
                 "5 business days", _biz(5),
                 FeeSchedule(search_rate=25.0, copy_fee=0.25, certification_fee=15.0)),
        _profile("NC", "North Carolina", "N.C. Gen. Stat. ch. 132",
                 "as promptly as possible (no fixed deadline)", _NONE),
        _profile("ND", "North Dakota", "N.D. Cent. Code § 44-04-18",
                 "a reasonable time (no fixed deadline)", _NONE),
        _profile("OH", "Ohio", "Ohio Rev. Code § 149.43",
                 "a reasonable period of time (no fixed deadline)", _NONE),
        _profile("OK", "Oklahoma", "Okla. Stat. tit. 51, § 24A.1 et seq.",
                 "prompt, reasonable access (no fixed deadline)", _NONE),
        _profile("OR", "Oregon", "Or. Rev. Stat. § 192.311 et seq.",
                 "5 business days (acknowledgment)", _biz(5)),
        _profile("PA", "Pennsylvania", "65 P.S. § 67.101 et seq.",
                 "5 business days", _biz(5)),
        _profile("RI", "Rhode Island", "R.I. Gen. Laws § 38-2-1 et seq.",
                 "10 business days", _biz(10)),
        _profile("SC", "South Carolina", "S.C. Code Ann. § 30-4-10 et seq.",
                 "10 business days", _biz(10)),
        _profile("SD", "South Dakota", "S.D. Codified Laws ch. 1-27",
                 "promptly (no fixed deadline)", _NONE),
        _profile("TN", "Tennessee", "Tenn. Code Ann. § 10-7-503",
                 "7 business days", _biz(7)),
        _profile("TX", "Texas", "Tex. Gov't Code ch. 552",
                 "10 business days", _biz(10),
                 FeeSchedule(search_rate=0.0, copy_fee=0.10, certification_fee=5.0)),
        _profile("UT", "Utah", "Utah Code Ann. § 63G-2-101 et seq.",
                 "10 business days", _biz(10)),
        _profile("VT", "Vermont", "Vt. Stat. Ann. tit. 1, § 315 et seq.",
                 "3 business days", _biz(3)),
        _profile("VA", "Virginia", "Va. Code Ann. § 2.2-3700 et seq.",
                 "5 business days", _biz(5)),
        _profile("WA", "Washington", "Wash. Rev. Code ch. 42.56",
                 "5 business days", _biz(5)),
        _profile("WV", "West Virginia", "W. Va. Code § 29B-1-1 et seq.",
                 "5 business days", _biz(5)),
        _profile("WI", "Wisconsin", "Wis. Stat. § 19.31 et seq.",
                 "as soon as practicable (no fixed deadline)", _NONE),
        _profile("WY", "Wyoming", "Wyo. Stat. Ann. § 16-4-201 et seq.",
                 "30 calendar days", _cal(30)),
    )
}


def normalize_code(raw: Optional[str]) -> str:
    """Normalize user input to a two-letter code; accepts full state names."""
    if not raw:
        return ""
    upper = raw.upper().strip()
    if upper in PUBLIC_RECORDS:
        return upper
    for code, profile in PUBLIC_RECORDS.items():
        if profile.name.upper() == upper:
            return code
    return upper


def get_profile(code: Optional[str]) -> Optional[JurisdictionProfile]:
    """Return the profile for a jurisdiction code, or None when empty or unknown."""
    if not code:
        return None
    return PUBLIC_RECORDS.get(code)


def get_fee_schedule(code: Optional[str]) -> FeeSchedule:
    """Return the registered fee schedule, or the default schedule."""
    profile = get_profile(code)
    if profile is None or profile.fee_schedule is None:
        return DEFAULT_FEE_SCHEDULE
    return profile.fee_schedule


def list_jurisdictions() -> list[str]:
    return sorted(PUBLIC_RECORDS.keys())
