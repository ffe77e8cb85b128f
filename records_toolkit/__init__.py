"""
Public Records Request Toolkit.

Draft, estimate costs for, and track public records requests across
U.S. state jurisdictions.
"""

__version__ = "1.0.0"
