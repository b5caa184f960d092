"""
Scoring pipeline: composes independent evaluators in declared priority order
"""
import logging
from typing import Iterable, List, Optional

from ...models.company import NormalizedProfile
from ...models.fund import PolicyFundKnowledge
from ...models.result import EligibilityResult, ScoredFund
from .base import Evaluation, Evaluator, ScoringState, apply_evaluation
from .usage import (
    GraduationEvaluator,
    RecentUsageEvaluator,
    GuaranteeOrgEvaluator,
    LoanBalanceEvaluator,
    SubsidyRatioEvaluator,
)
from .funding import FundingPurposeEvaluator, FundingAmountEvaluator
from .special import (
    VentureInvestmentEvaluator,
    RestartEvaluator,
    SmartFactoryEvaluator,
    EsgGreenEnergyEvaluator,
    EmergencyEvaluator,
    JobCreationEvaluator,
    SocialValueEvaluator,
    PastDefaultResolvedEvaluator,
    CreditRecoveryEvaluator,
    TaxInstallmentEvaluator,
    StrategicIndustryEvaluator,
)
from .conflicts import (
    EmergencyInvestmentConflict,
    RestartVentureConflict,
    MicroVentureConflict,
    LargeFundingMicroConflict,
)

logger = logging.getLogger(__name__)


def default_evaluators() -> List[Evaluator]:
    return [
        GraduationEvaluator(),
        GuaranteeOrgEvaluator(),
        LoanBalanceEvaluator(),
        RecentUsageEvaluator(),
        SubsidyRatioEvaluator(),
        FundingPurposeEvaluator(),
        FundingAmountEvaluator(),
        VentureInvestmentEvaluator(),
        RestartEvaluator(),
        SmartFactoryEvaluator(),
        EsgGreenEnergyEvaluator(),
        EmergencyEvaluator(),
        JobCreationEvaluator(),
        SocialValueEvaluator(),
        PastDefaultResolvedEvaluator(),
        CreditRecoveryEvaluator(),
        TaxInstallmentEvaluator(),
        StrategicIndustryEvaluator(),
        EmergencyInvestmentConflict(),
        RestartVentureConflict(),
        MicroVentureConflict(),
        LargeFundingMicroConflict(),
    ]


class ScoringPipeline:
    """Runs evaluators over an eligibility score; the evaluator list is sorted by priority"""

    def __init__(self, evaluators: Optional[Iterable[Evaluator]] = None):
        evaluators = list(evaluators) if evaluators is not None else default_evaluators()
        # sorted() is stable, so equal priorities keep their listed order
        self.evaluators: List[Evaluator] = sorted(evaluators, key=lambda e: e.priority)

    def score(
        self,
        eligibility: EligibilityResult,
        normalized: NormalizedProfile,
        fund: PolicyFundKnowledge
    ) -> ScoredFund:
        """
        Apply every evaluator to one fund

        Args:
            eligibility: Eligibility result supplying the base score
            normalized: Normalized company profile
            fund: Fund definition

        Returns:
            ScoredFund with the final score and every adjustment
        """
        state = ScoringState(fund.id, eligibility.eligibility_score)

        for evaluator in self.evaluators:
            evaluation = evaluator.evaluate(state, normalized, fund)
            if evaluation is None:
                continue
            apply_evaluation(state, evaluator, evaluation)
            if state.excluded_by:
                logger.debug(f"{fund.id} excluded by evaluator {evaluator.id}")
                break

        return ScoredFund(
            fund_id=fund.id,
            base_score=state.base_score,
            score=state.score,
            excluded_by=state.excluded_by,
            is_perfect_match=state.is_perfect_match,
            adjustments=state.adjustments,
        )


# Global scoring pipeline instance
scoring_pipeline = ScoringPipeline()

__all__ = [
    "Evaluation",
    "Evaluator",
    "ScoringState",
    "ScoringPipeline",
    "apply_evaluation",
    "default_evaluators",
    "scoring_pipeline",
]
