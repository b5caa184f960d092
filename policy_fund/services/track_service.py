"""
Track decision: which fund tracks a company may apply to
"""
import logging
from typing import List

from ..models.company import NormalizedProfile
from ..models.fund import TRACK_ORDER
from ..models.result import TrackDecision
from ..rules import labels, thresholds

logger = logging.getLogger(__name__)


class TrackService:
    """Derives the track decision once per profile, independent of any fund"""

    @staticmethod
    def qualifying_statuses(normalized: NormalizedProfile) -> List[str]:
        """Korean labels of the statuses that unlock the exclusive track, in fixed order"""
        profile = normalized.profile
        return [
            label
            for attr, label in thresholds.EXCLUSIVE_QUALIFYING_STATUSES
            if getattr(profile, attr)
        ]

    def decide(self, normalized: NormalizedProfile) -> TrackDecision:
        """
        Decide allowed and blocked tracks

        Args:
            normalized: Normalized company profile

        Returns:
            TrackDecision naming the statuses that drove it
        """
        qualifications = self.qualifying_statuses(normalized)

        if qualifications:
            blocked = ["general"]
            why = labels.TRACK_WHY_QUALIFIED.format(qualifications=", ".join(qualifications))
        else:
            blocked = ["exclusive"]
            why = labels.TRACK_WHY_NOT_QUALIFIED

        allowed = [track for track in TRACK_ORDER if track not in blocked]

        logger.debug(f"Track decision: allowed={allowed} blocked={blocked}")
        return TrackDecision(
            allowed_tracks=allowed,
            blocked_tracks=blocked,
            allowed_track_labels=[labels.TRACK_LABELS[t] for t in allowed],
            blocked_track_labels=[labels.TRACK_LABELS[t] for t in blocked],
            qualifying_statuses=qualifications,
            why=why,
        )


# Global track service instance
track_service = TrackService()
