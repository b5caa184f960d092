"""
Utility functions for validating request data
"""
from typing import List

from ..models.company import KNOWN_INSTITUTIONS


def validate_company_profile_data(profile_data: dict) -> List[str]:
    """
    Validate company profile data and return list of validation errors

    Args:
        profile_data: Dictionary containing profile data

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    # Required fields
    required_fields = ['industry', 'business_age', 'annual_revenue', 'employee_count']
    for field in required_fields:
        if field not in profile_data or profile_data[field] is None:
            errors.append(f"Missing required field: {field}")

    # Non-negative numbers
    numeric_fields = [
        'business_age',
        'annual_revenue',
        'employee_count',
        'debt_ratio',
        'required_funding_amount',
        'existing_loan_balance',
        'recent_year_subsidy_amount',
    ]
    for field in numeric_fields:
        value = profile_data.get(field)
        if value is None:
            continue
        try:
            if float(value) < 0:
                errors.append(f"{field} cannot be negative")
        except (ValueError, TypeError):
            errors.append(f"{field} must be a valid number")

    # Credit rating
    rating = profile_data.get('credit_rating')
    if rating is not None:
        try:
            if not 1 <= int(rating) <= 10:
                errors.append("credit_rating must be between 1 and 10")
        except (ValueError, TypeError):
            errors.append("credit_rating must be a valid number")

    # Institution keys
    usage = profile_data.get('prior_usage_counts') or {}
    for institution in usage:
        if institution not in KNOWN_INSTITUTIONS:
            errors.append(f"Unknown institution in prior_usage_counts: {institution}")
    for institution in profile_data.get('recently_used_institutions') or []:
        if institution not in KNOWN_INSTITUTIONS:
            errors.append(f"Unknown institution in recently_used_institutions: {institution}")

    # Restart reason only makes sense for restarted companies
    if profile_data.get('restart_reason') and not profile_data.get('is_restart'):
        errors.append("restart_reason given but is_restart is false")

    return errors


def validate_match_options(top_n: int, min_score: float) -> List[str]:
    """
    Validate run options

    Args:
        top_n: Cap on matched entries
        min_score: Score floor

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []
    if top_n < 1:
        errors.append("top_n must be at least 1")
    if min_score < 0 or min_score > 100:
        errors.append("min_score must be between 0 and 100")
    return errors
