"""Base class for risk rules."""

from abc import ABC, abstractmethod
from typing import Any

from ..models import RuleResult

MAX_SCORE = 100
MIN_SCORE = 0


def clamp_score(score: float) -> float:
    return max(MIN_SCORE, min(score, MAX_SCORE))


class RiskRule(ABC):
    """A single additive condition contributing fixed points to a score.

    Rules are pure: they see only the fields of one submission and the
    threshold structure for its event kind.
    """

    rule_id: str

    @abstractmethod
    def evaluate(self, *args: Any, **kwargs: Any) -> RuleResult:
        ...

    def _not_triggered(self) -> RuleResult:
        return RuleResult(rule_name=self.rule_id, triggered=False)

    def _triggered(
        self,
        points: int,
        details: str,
        evidence: dict | None = None,
    ) -> RuleResult:
        return RuleResult(
            rule_name=self.rule_id,
            triggered=True,
            points=points,
            details=details,
            evidence=evidence or {},
        )


def total_points(results: list[RuleResult]) -> int:
    return sum(r.points for r in results if r.triggered)
