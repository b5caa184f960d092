"""
Formatting helpers for Korean amounts and numbers
"""
from ..rules.thresholds import EOK

MAN = 10_000


def format_number(value: float) -> str:
    """Drop a trailing .0 from whole numbers"""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def format_currency(amount: float) -> str:
    """
    Format a KRW amount in 억/만원 units

    Args:
        amount: Amount in KRW

    Returns:
        Formatted string such as "15억원", "1억 5,000만원" or "7,000만원"
    """
    if amount is None:
        return "-"

    amount = int(round(amount))
    eok, rest = divmod(amount, EOK)
    man = rest // MAN

    if eok and man:
        return f"{eok:,}억 {man:,}만원"
    if eok:
        return f"{eok:,}억원"
    if man:
        return f"{man:,}만원"
    return f"{amount:,}원"


def format_eok(amount_in_eok: float) -> str:
    """Format an amount already expressed in 억원"""
    return f"{format_number(amount_in_eok)}억원"
