"""
Utility helpers for validation and formatting
"""

from .validators import validate_company_profile_data, validate_match_options
from .formatting import format_currency, format_number, format_eok

__all__ = [
    "validate_company_profile_data",
    "validate_match_options",
    "format_currency",
    "format_number",
    "format_eok",
]
