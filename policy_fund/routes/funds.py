"""
API routes for browsing the fund catalog
"""
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query

from ..catalog import default_catalog
from ..models.fund import FundTrack, Institution, InstitutionId, PolicyFundKnowledge

router = APIRouter(prefix="/funds", tags=["funds"])


@router.get("/", response_model=List[PolicyFundKnowledge])
async def get_funds(
    institution_id: Optional[InstitutionId] = Query(None, description="Filter by institution"),
    track: Optional[FundTrack] = Query(None, description="Filter by track")
):
    """
    Get all funds with optional filtering
    """
    try:
        return default_catalog.list_funds(institution_id=institution_id, track=track)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to retrieve funds: {str(e)}")


@router.get("/institutions", response_model=List[Institution])
async def get_institutions():
    """
    Get all fund-issuing institutions
    """
    return default_catalog.institutions


@router.get("/{fund_id}", response_model=PolicyFundKnowledge)
async def get_fund(fund_id: str):
    """
    Get a specific fund by ID
    """
    try:
        fund = default_catalog.get_fund(fund_id)

        if not fund:
            raise HTTPException(status_code=404, detail=f"Fund not found: {fund_id}")

        return fund

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to retrieve fund: {str(e)}")
