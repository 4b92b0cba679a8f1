"""Score thresholds shared by the validator and its collaborators."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Final

from .env import optional_env_int
from .errors import InvalidConfigurationError

AUTO_PROCEED_ENV: Final[str] = "EXPOSURELINK_AUTO_PROCEED"
MANUAL_REVIEW_ENV: Final[str] = "EXPOSURELINK_MANUAL_REVIEW"
REJECT_ENV: Final[str] = "EXPOSURELINK_REJECT_THRESHOLD"
MIN_FACTORS_ENV: Final[str] = "EXPOSURELINK_MIN_FACTORS"


class Triage(StrEnum):
    """What a collaborator should do with a directly observed match."""

    AUTO_PROCEED = "auto_proceed"
    MANUAL_REVIEW = "manual_review"
    REJECT = "reject"


@dataclass(frozen=True, slots=True)
class ScoringConfig:
    """Action thresholds and the factor-count gate.

    ``reject`` doubles as the gate ceiling: a result backed by fewer than
    ``min_factors`` match factors is clamped to ``reject - 1``.
    """

    auto_proceed: int = 80
    manual_review: int = 50
    reject: int = 35
    min_factors: int = 2

    def __post_init__(self) -> None:
        if not 0 < self.reject <= self.manual_review <= self.auto_proceed <= 100:
            raise InvalidConfigurationError(
                "Thresholds must satisfy 0 < reject <= manual_review <= auto_proceed <= 100, "
                f"got reject={self.reject}, manual_review={self.manual_review}, "
                f"auto_proceed={self.auto_proceed}"
            )
        if not 1 <= self.min_factors <= 4:
            raise InvalidConfigurationError(
                f"min_factors must be between 1 and 4, got {self.min_factors}"
            )

    @property
    def gate_ceiling(self) -> int:
        return self.reject - 1

    def creates_exposure(self, score: int) -> bool:
        return score >= self.reject

    def needs_close_review(self, score: int) -> bool:
        """Whether a reviewable score sits below the manual-review line."""

        return self.reject <= score < self.manual_review

    def triage(self, score: int) -> Triage:
        if score >= self.auto_proceed:
            return Triage.AUTO_PROCEED
        if score >= self.reject:
            return Triage.MANUAL_REVIEW
        return Triage.REJECT


def get_scoring_config() -> ScoringConfig:
    """Build a ``ScoringConfig`` honouring optional environment overrides."""

    defaults = ScoringConfig()
    return ScoringConfig(
        auto_proceed=optional_env_int(AUTO_PROCEED_ENV, defaults.auto_proceed),
        manual_review=optional_env_int(MANUAL_REVIEW_ENV, defaults.manual_review),
        reject=optional_env_int(REJECT_ENV, defaults.reject),
        min_factors=optional_env_int(MIN_FACTORS_ENV, defaults.min_factors),
    )
