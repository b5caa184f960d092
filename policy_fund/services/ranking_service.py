"""
Ranking service: size-fit scoring, four-tier sort, per-institution diversity
cap and the labels attached to matched funds
"""
import logging
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict

from ..models.company import NormalizedProfile
from ..models.fund import PolicyFundKnowledge
from ..models.result import EligibilityResult, ScoredFund
from ..rules import categories, labels, thresholds

logger = logging.getLogger(__name__)


class RankCandidate(BaseModel):
    """Internal record carrying sort keys; never returned to callers"""
    fund: PolicyFundKnowledge
    eligibility: EligibilityResult
    scored: ScoredFund
    size_score: int
    position: int

    model_config = ConfigDict(frozen=True)

    def sort_key(self) -> Tuple[int, int, int, int, int]:
        return (
            0 if self.fund.track == "exclusive" else 1,
            -self.size_score,
            1 if self.fund.is_guarantee_product else 0,
            -self.scored.score,
            self.position,
        )


class RankingService:
    """Orders candidates and derives per-rank labels"""

    @staticmethod
    def size_match_score(fund: PolicyFundKnowledge, normalized: NormalizedProfile) -> int:
        """100 when the fund targets the company's scale, 80 for a compatible scale, else 50"""
        targets = fund.target_scale or thresholds.DEFAULT_TARGET_SCALE
        scale = normalized.scale
        if scale in targets:
            return thresholds.SIZE_MATCH_EXACT
        compatible = thresholds.SIZE_COMPATIBILITY.get(scale, [scale])
        if any(s in targets for s in compatible):
            return thresholds.SIZE_MATCH_COMPATIBLE
        return thresholds.SIZE_MATCH_NONE

    @staticmethod
    def sort(candidates: List[RankCandidate]) -> List[RankCandidate]:
        """
        Four-tier sort: exclusive first, size fit, loans before guarantees,
        score descending. Ties keep catalog order.
        """
        return sorted(candidates, key=lambda c: c.sort_key())

    @staticmethod
    def apply_diversity(
        ordered: List[RankCandidate],
        top_n: int,
        max_per_institution: int
    ) -> Tuple[List[RankCandidate], List[RankCandidate]]:
        """
        Walk the sorted list keeping at most max_per_institution funds per
        institution (special-purpose funds exempt) and at most top_n overall.

        Returns:
            (kept, cut) where cut holds every candidate not kept
        """
        kept: List[RankCandidate] = []
        cut: List[RankCandidate] = []
        per_institution = {}

        for candidate in ordered:
            if len(kept) >= top_n:
                cut.append(candidate)
                continue

            if categories.is_special_purpose(candidate.fund.id):
                kept.append(candidate)
                continue

            institution = candidate.fund.institution_id
            count = per_institution.get(institution, 0)
            if count < max_per_institution:
                kept.append(candidate)
                per_institution[institution] = count + 1
            else:
                cut.append(candidate)

        return kept, cut

    @staticmethod
    def rank_penalty(rank: int) -> int:
        table = thresholds.RANK_PENALTIES
        return table[min(rank, len(table)) - 1]

    @staticmethod
    def confidence_label(rank: int, track: str, score: int) -> str:
        bands = thresholds.LABEL_BANDS
        if track == "exclusive":
            return "전용·우선"
        if rank <= bands["strong_max_rank"] and track == "policy_linked":
            return "유력"
        if (
            rank == bands["alternative_rank"]
            or (track == "general" and score >= bands["general_alternative_score"])
            or (track == "policy_linked" and score >= bands["policy_linked_alternative_score"])
        ):
            return "대안"
        return "플랜B"

    @staticmethod
    def confidence(track: str, score: int) -> str:
        bands = thresholds.CONFIDENCE_BANDS
        if track == "exclusive" and score >= bands["exclusive_high"]:
            return "HIGH"
        if track == "policy_linked" and score >= bands["policy_linked_high"]:
            return "HIGH"
        return "MEDIUM"

    @staticmethod
    def rank_reason(rank: int, track: str, fund_name: str) -> str:
        if track == "exclusive":
            return labels.EXCLUSIVE_WHY.format(name=fund_name)
        template = labels.RANK_REASONS[min(rank, max(labels.RANK_REASONS))]
        return template.format(name=fund_name)

    @staticmethod
    def rank_role(rank: int, track: str) -> str:
        if rank <= 2 and track == "exclusive":
            return labels.RANK_ROLES["top"]
        if rank >= 5:
            return labels.RANK_ROLES[5]
        return labels.RANK_ROLES.get(rank, "")

    def score_explanation(self, score: int, track: str, rank: int) -> str:
        role = self.rank_role(rank, track)
        track_name = labels.TRACK_DISPLAY_NAMES[track]
        for floor, template in labels.SCORE_EXPLANATIONS[track]:
            if score >= floor:
                return template.format(role=role, track=track_name)
        return ""

    @staticmethod
    def score_level(score: int) -> str:
        if score >= thresholds.SCORE_LEVELS["high"]:
            return "high"
        if score >= thresholds.SCORE_LEVELS["medium"]:
            return "medium"
        return "low"


# Global ranking service instance
ranking_service = RankingService()
