"""
Matching service: entry point that runs a full classification for one company
"""
import logging
from typing import Optional

from ..catalog import Catalog, default_catalog
from ..config import settings
from ..models.company import CompanyProfile
from ..models.result import ClassifiedMatchResult, EligibilityResult, TrackDecision
from .classifier import Classifier, classifier
from .eligibility_service import eligibility_service
from .normalizer import normalize_profile
from .track_service import track_service

logger = logging.getLogger(__name__)


class MatchingService:
    """Runs normalization, track decision and classification against a catalog"""

    def __init__(self, catalog: Catalog = default_catalog, fund_classifier: Classifier = classifier):
        self.catalog = catalog
        self.classifier = fund_classifier

    def classify(
        self,
        profile: CompanyProfile,
        top_n: Optional[int] = None,
        min_score: Optional[float] = None,
        catalog: Optional[Catalog] = None
    ) -> ClassifiedMatchResult:
        """
        Classify every fund in the catalog for a company

        Args:
            profile: Company profile
            top_n: Cap on matched entries (defaults to settings.default_top_n)
            min_score: Score floor for matched entries (defaults to settings.default_min_score)
            catalog: Catalog snapshot to use instead of the service default

        Returns:
            ClassifiedMatchResult partitioning the whole catalog

        Raises:
            ProfileNormalizationError: if the profile lacks required numeric fields
        """
        catalog = catalog if catalog is not None else self.catalog
        top_n = top_n if top_n is not None else settings.default_top_n
        min_score = min_score if min_score is not None else settings.default_min_score

        normalized = normalize_profile(profile)
        decision = track_service.decide(normalized)

        result = self.classifier.classify(
            normalized,
            decision,
            catalog,
            top_n=top_n,
            min_score=min_score,
            max_per_institution=settings.max_per_institution,
        )

        logger.info(
            f"Classified {result.total_funds_checked} funds for "
            f"{profile.company_name or 'company'}: "
            f"{len(result.matched)} matched, {len(result.conditional)} conditional, "
            f"{len(result.excluded)} excluded"
        )
        return result

    def track_decision(self, profile: CompanyProfile) -> TrackDecision:
        return track_service.decide(normalize_profile(profile))

    def check_fund(self, profile: CompanyProfile, fund_id: str) -> Optional[EligibilityResult]:
        """
        Itemized eligibility of one fund, or None when the fund id is unknown
        """
        fund = self.catalog.get_fund(fund_id)
        if not fund:
            return None
        return eligibility_service.check(normalize_profile(profile), fund)


# Global matching service instance
matching_service = MatchingService()
