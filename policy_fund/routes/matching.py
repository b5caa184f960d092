"""
API routes for company-to-fund matching
"""
import logging

from fastapi import APIRouter, HTTPException

from ..config import settings
from ..models.company import CompanyProfile, MatchRequest
from ..models.result import ClassifiedMatchResult, EligibilityResult, TrackDecision
from ..services.matching_service import matching_service
from ..services.normalizer import ProfileNormalizationError
from ..utils.validators import validate_company_profile_data, validate_match_options

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/matching", tags=["matching"])


def _validate_profile(profile: CompanyProfile) -> None:
    validation_errors = validate_company_profile_data(profile.model_dump())
    if validation_errors:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid company profile data: {'; '.join(validation_errors)}"
        )


@router.post("/classify", response_model=ClassifiedMatchResult)
async def classify_funds(request: MatchRequest):
    """
    Classify every catalog fund as matched, conditional or excluded for a company
    """
    try:
        _validate_profile(request.profile)

        top_n = request.options.top_n or settings.default_top_n
        min_score = request.options.min_score
        if min_score is None:
            min_score = settings.default_min_score

        option_errors = validate_match_options(top_n, min_score)
        if option_errors:
            raise HTTPException(status_code=400, detail=f"Invalid options: {'; '.join(option_errors)}")

        return matching_service.classify(request.profile, top_n=top_n, min_score=min_score)

    except HTTPException:
        raise
    except ProfileNormalizationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error classifying funds: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to classify funds: {str(e)}")


@router.post("/track-decision", response_model=TrackDecision)
async def decide_tracks(profile: CompanyProfile):
    """
    Get the allowed and blocked fund tracks for a company
    """
    try:
        _validate_profile(profile)
        return matching_service.track_decision(profile)

    except HTTPException:
        raise
    except ProfileNormalizationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error deciding tracks: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to decide tracks: {str(e)}")


@router.post("/eligibility/{fund_id}", response_model=EligibilityResult)
async def check_fund_eligibility(fund_id: str, profile: CompanyProfile):
    """
    Get the itemized eligibility checks of one fund for a company
    """
    try:
        _validate_profile(profile)
        result = matching_service.check_fund(profile, fund_id)

        if not result:
            raise HTTPException(status_code=404, detail=f"Fund not found: {fund_id}")

        return result

    except HTTPException:
        raise
    except ProfileNormalizationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error checking eligibility for {fund_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to check eligibility: {str(e)}")
