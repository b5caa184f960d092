"""
Seed fund records, grouped by issuing institution
"""

from .kosmes import KOSMES_FUNDS
from .semas import SEMAS_FUNDS
from .kodit import KODIT_FUNDS
from .kibo import KIBO_FUNDS

SEED_FUND_RECORDS = KOSMES_FUNDS + SEMAS_FUNDS + KODIT_FUNDS + KIBO_FUNDS

__all__ = [
    "KOSMES_FUNDS",
    "SEMAS_FUNDS",
    "KODIT_FUNDS",
    "KIBO_FUNDS",
    "SEED_FUND_RECORDS",
]
