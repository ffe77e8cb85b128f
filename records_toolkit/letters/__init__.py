"""
Letter generators: initial requests, follow-ups for overdue requests, and
administrative appeals.
"""

from records_toolkit.letters.request_letter import GeneratedLetter, RequestLetterBuilder
from records_toolkit.letters.followup import generate_follow_up
from records_toolkit.letters.appeals import AppealData, AppealReason, generate_appeal

__all__ = [
    "GeneratedLetter",
    "RequestLetterBuilder",
    "generate_follow_up",
    "AppealData",
    "AppealReason",
    "generate_appeal",
]
