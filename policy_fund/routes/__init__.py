"""
API routes for the Policy Fund Matching Engine
"""

from .matching import router as matching_router
from .funds import router as funds_router

__all__ = [
    "matching_router",
    "funds_router"
]
