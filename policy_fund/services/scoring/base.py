"""
Scoring evaluator contract and score application rules
"""
from typing import List, Optional
from pydantic import BaseModel, Field

from ...models.company import NormalizedProfile
from ...models.fund import PolicyFundKnowledge
from ...models.result import ScoreAdjustment
from ...rules import thresholds


class Evaluation(BaseModel):
    """Outcome of one evaluator for one fund; every field is optional"""
    excluded: bool = False
    bonus: int = Field(0, ge=0)
    penalty: int = Field(0, ge=0)
    warning: Optional[str] = None
    reason: Optional[str] = None
    exclusion_message: Optional[str] = None
    is_perfect_match: bool = False


class ScoringState:
    """Running score for one fund while the pipeline executes"""

    def __init__(self, fund_id: str, base_score: int):
        self.fund_id = fund_id
        self.base_score = base_score
        self.score = base_score
        self.is_perfect_match = False
        self.excluded_by: Optional[str] = None
        self.adjustments: List[ScoreAdjustment] = []

    @property
    def score_cap(self) -> int:
        return thresholds.PERFECT_MATCH_CAP if self.is_perfect_match else thresholds.SCORE_CAP


class Evaluator:
    """
    Base class for scoring evaluators.

    Subclasses set id, name and priority and implement evaluate(). Lower
    priority runs first. Returning None means the evaluator does not apply.
    """
    id: str = ""
    name: str = ""
    priority: int = 100

    def evaluate(
        self,
        state: ScoringState,
        normalized: NormalizedProfile,
        fund: PolicyFundKnowledge
    ) -> Optional[Evaluation]:
        raise NotImplementedError

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.id} priority={self.priority}>"


def apply_evaluation(state: ScoringState, evaluator: Evaluator, evaluation: Evaluation) -> None:
    """
    Merge one evaluation into the running state.

    Bonuses are capped at 95, or 100 once a perfect match is flagged, and
    never lower the score. Penalties floor at 0. Every effect is recorded
    as a ScoreAdjustment.
    """
    def record(kind: str, points: int = 0, message: str = ""):
        state.adjustments.append(ScoreAdjustment(
            evaluator_id=evaluator.id,
            evaluator_name=evaluator.name,
            kind=kind,
            points=points,
            message=message,
        ))

    if evaluation.excluded:
        state.excluded_by = evaluator.id
        record("exclusion", message=evaluation.exclusion_message or evaluator.name)
        return

    if evaluation.is_perfect_match:
        state.is_perfect_match = True

    if evaluation.bonus > 0:
        before = state.score
        state.score = max(before, min(state.score_cap, before + evaluation.bonus))
        record("bonus", state.score - before, evaluation.reason or "")
    elif evaluation.reason:
        record("reason", message=evaluation.reason)

    if evaluation.penalty > 0:
        before = state.score
        state.score = max(0, before - evaluation.penalty)
        record("penalty", state.score - before, evaluation.warning or "")
    elif evaluation.warning:
        record("warning", message=evaluation.warning)
