"""
Classifier: assigns every catalog fund to exactly one of matched, conditional
or excluded, with a justification for each placement
"""
import logging
from typing import List, Optional

from ..catalog import Catalog
from ..models.company import NormalizedProfile
from ..models.fund import PolicyFundKnowledge
from ..models.result import (
    CheckResult,
    ClassifiedMatchResult,
    ConditionalFund,
    EligibilityResult,
    ExcludedFund,
    MatchedFund,
    ScoredFund,
    TrackDecision,
)
from ..rules import labels
from ..utils.formatting import format_number
from .eligibility_service import EligibilityService, eligibility_service, resolve_credit_state
from .ranking_service import RankCandidate, RankingService, ranking_service
from .scoring import ScoringPipeline, scoring_pipeline

logger = logging.getLogger(__name__)

FAILED_CATEGORY_REASONS = {
    "scale": "scale-not-met",
    "evidence": "insufficient-evidence",
    "restart": "policy-purpose-mismatch",
}

CREDIT_STATE_REASONS = {
    "tax_active": "delinquency",
    "credit_current": "credit-issue",
}


class Classifier:
    """Runs eligibility, scoring and ranking over a catalog and builds the three buckets"""

    def __init__(
        self,
        eligibility: EligibilityService = eligibility_service,
        pipeline: ScoringPipeline = scoring_pipeline,
        ranking: RankingService = ranking_service
    ):
        self.eligibility = eligibility
        self.pipeline = pipeline
        self.ranking = ranking

    def classify(
        self,
        normalized: NormalizedProfile,
        track_decision: TrackDecision,
        catalog: Catalog,
        top_n: int,
        min_score: float,
        max_per_institution: int
    ) -> ClassifiedMatchResult:
        """
        Classify every fund in the catalog

        Args:
            normalized: Normalized company profile
            track_decision: Track decision for the profile
            catalog: Fund catalog snapshot
            top_n: Cap on matched entries
            min_score: Score floor for matched entries
            max_per_institution: Per-institution cap for matched entries

        Returns:
            ClassifiedMatchResult
        """
        conditional: List[ConditionalFund] = []
        excluded: List[ExcludedFund] = []
        candidates: List[RankCandidate] = []

        for position, fund in enumerate(catalog):
            agency = catalog.institution_name(fund.institution_id)

            if fund.track in track_decision.blocked_tracks:
                qualified = track_decision.has_exclusive_qualification
                excluded.append(self._excluded(
                    fund, agency, "track-blocked",
                    labels.TRACK_BLOCK_RULES[qualified],
                    labels.TRACK_BLOCK_NOTES[qualified],
                ))
                continue

            eligibility = self.eligibility.check(normalized, fund)
            level, state_key = resolve_credit_state(normalized, fund)

            if level == "excluded":
                _, rule, note = labels.CREDIT_STATE_TEXT[state_key]
                excluded.append(self._excluded(fund, agency, CREDIT_STATE_REASONS[state_key], rule, note))
                continue

            if eligibility.hard_exclusion:
                hard = eligibility.hard_exclusion
                excluded.append(self._excluded(fund, agency, "hard-exclusion", hard.rule, hard.description))
                continue

            scored = self.pipeline.score(eligibility, normalized, fund)

            if scored.excluded_by:
                excluded.append(self._graduation_excluded(fund, agency, normalized, scored))
                continue

            if not eligibility.is_eligible:
                excluded.append(self._requirement_excluded(fund, agency, eligibility.failed[0]))
                continue

            if level == "conditional":
                what, _, note = labels.CREDIT_STATE_TEXT[state_key]
                conditional.append(self._conditional(fund, agency, scored, [what], [note]))
                continue

            missing = self._undetermined_variables(eligibility)
            if missing:
                what = [labels.DECISION_VARIABLE_TEXT[v][0] for v in missing]
                how = [labels.DECISION_VARIABLE_TEXT[v][1] for v in missing]
                conditional.append(self._conditional(fund, agency, scored, what, how))
                continue

            if scored.score < min_score:
                excluded.append(self._excluded(
                    fund, agency, "below-threshold",
                    f"점수 {scored.score} < 기준 {format_number(min_score)}",
                    "최소 점수 기준 미달",
                ))
                continue

            candidates.append(RankCandidate(
                fund=fund,
                eligibility=eligibility,
                scored=scored,
                size_score=self.ranking.size_match_score(fund, normalized),
                position=position,
            ))

        ordered = self.ranking.sort(candidates)
        kept, cut = self.ranking.apply_diversity(ordered, top_n, max_per_institution)

        matched = [
            self._matched(candidate, rank, catalog.institution_name(candidate.fund.institution_id))
            for rank, candidate in enumerate(kept, start=1)
        ]
        for candidate in cut:
            excluded.append(self._excluded(
                candidate.fund,
                catalog.institution_name(candidate.fund.institution_id),
                "rank-cutoff",
                f"기관별 최대 {max_per_institution}개 / 상위 {top_n}개 제한",
                "적격이나 우선순위에서 밀려 추천 목록에 포함되지 않았습니다",
            ))

        logger.debug(f"Classified {len(catalog)} funds into {len(matched)}/{len(conditional)}/{len(excluded)}")
        return ClassifiedMatchResult(
            track_decision=track_decision,
            matched=matched,
            conditional=conditional,
            excluded=excluded,
            total_funds_checked=len(catalog),
        )

    @staticmethod
    def _undetermined_variables(eligibility: EligibilityResult) -> List[str]:
        variables = []
        for check in eligibility.unknown:
            if check.rule in labels.DECISION_VARIABLE_TEXT and check.rule not in variables:
                variables.append(check.rule)
        return variables

    @staticmethod
    def _excluded(
        fund: PolicyFundKnowledge,
        agency: str,
        reason_code: str,
        rule: Optional[str],
        note: str
    ) -> ExcludedFund:
        return ExcludedFund(
            fund_id=fund.id,
            program_name=fund.name,
            agency=agency,
            track=fund.track,
            track_label=labels.TRACK_LABELS[fund.track],
            reason_code=reason_code,
            excluded_reason=labels.EXCLUDED_REASON_LABELS[reason_code],
            rule_triggered=rule or "",
            note=note,
        )

    def _requirement_excluded(self, fund: PolicyFundKnowledge, agency: str, check: CheckResult) -> ExcludedFund:
        reason_code = FAILED_CATEGORY_REASONS.get(check.category, "requirement-not-met")
        rule = check.rule or check.condition.replace(" ", "")
        return self._excluded(fund, agency, reason_code, rule, check.description)

    def _graduation_excluded(
        self,
        fund: PolicyFundKnowledge,
        agency: str,
        normalized: NormalizedProfile,
        scored: ScoredFund
    ) -> ExcludedFund:
        message = next(
            (a.message for a in scored.adjustments if a.kind == "exclusion"), agency
        )
        count = normalized.usage_count(fund.institution_id)
        return self._excluded(
            fund, agency, "graduation-cap", f"{agency} 이용 {count}회", message
        )

    @staticmethod
    def _conditional(
        fund: PolicyFundKnowledge,
        agency: str,
        scored: ScoredFund,
        what: List[str],
        how: List[str]
    ) -> ConditionalFund:
        return ConditionalFund(
            fund_id=fund.id,
            program_name=fund.name,
            agency=agency,
            track=fund.track,
            track_label=labels.TRACK_LABELS[fund.track],
            score=scored.score,
            what_is_missing=", ".join(what) or labels.DEFAULT_MISSING,
            how_to_confirm=" / ".join(how) or labels.DEFAULT_HOW_TO_CONFIRM,
            warnings=scored.warnings,
        )

    def _matched(self, candidate: RankCandidate, rank: int, agency: str) -> MatchedFund:
        fund = candidate.fund
        score = candidate.scored.score
        return MatchedFund(
            fund_id=fund.id,
            program_name=fund.name,
            agency=agency,
            track=fund.track,
            track_label=labels.TRACK_LABELS[fund.track],
            rank=rank,
            label=self.ranking.confidence_label(rank, fund.track, score),
            confidence=self.ranking.confidence(fund.track, score),
            score=score,
            display_score=max(0, score - self.ranking.rank_penalty(rank)),
            score_level=self.ranking.score_level(score),
            score_explanation=self.ranking.score_explanation(score, fund.track, rank),
            size_match_score=candidate.size_score,
            why=self.ranking.rank_reason(rank, fund.track, fund.name),
            hard_rules_passed=[c.description for c in candidate.eligibility.passed],
            reasons=candidate.scored.reasons,
            warnings=candidate.scored.warnings,
        )


# Global classifier instance
classifier = Classifier()
