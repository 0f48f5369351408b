"""Transaction amount and type rules."""

from ..config import TransactionThresholds, default_config
from ..models import RuleResult, TransactionType
from .base import RiskRule, clamp_score, total_points


class VeryHighAmountRule(RiskRule):
    rule_id = "very_high_amount"

    def evaluate(
        self, amount: float, transaction_type: TransactionType, config: TransactionThresholds
    ) -> RuleResult:
        if amount <= config.very_high_amount:
            return self._not_triggered()
        return self._triggered(
            points=config.very_high_amount_points,
            details=f"Amount ${amount:,.2f} exceeds ${config.very_high_amount:,.2f}",
            evidence={"amount": amount, "threshold": config.very_high_amount},
        )


class HighAmountRule(RiskRule):
    """Fires alongside VeryHighAmountRule for the largest amounts."""

    rule_id = "high_amount"

    def evaluate(
        self, amount: float, transaction_type: TransactionType, config: TransactionThresholds
    ) -> RuleResult:
        if amount <= config.high_amount:
            return self._not_triggered()
        return self._triggered(
            points=config.high_amount_points,
            details=f"Amount ${amount:,.2f} exceeds ${config.high_amount:,.2f}",
            evidence={"amount": amount, "threshold": config.high_amount},
        )


class LargeRefundRule(RiskRule):
    rule_id = "large_refund"

    def evaluate(
        self, amount: float, transaction_type: TransactionType, config: TransactionThresholds
    ) -> RuleResult:
        if transaction_type != TransactionType.REFUND or amount <= config.large_refund_amount:
            return self._not_triggered()
        return self._triggered(
            points=config.large_refund_points,
            details=f"Refund of ${amount:,.2f} exceeds ${config.large_refund_amount:,.2f}",
            evidence={"amount": amount, "threshold": config.large_refund_amount},
        )


class AdjustmentRule(RiskRule):
    rule_id = "manual_adjustment"

    def evaluate(
        self, amount: float, transaction_type: TransactionType, config: TransactionThresholds
    ) -> RuleResult:
        if transaction_type != TransactionType.ADJUSTMENT:
            return self._not_triggered()
        return self._triggered(
            points=config.adjustment_points,
            details="Manual balance adjustment",
        )


TRANSACTION_RULES: list[RiskRule] = [
    VeryHighAmountRule(),
    HighAmountRule(),
    LargeRefundRule(),
    AdjustmentRule(),
]


def evaluate_transaction(
    amount: float,
    transaction_type: TransactionType | str,
    noise: float,
    config: TransactionThresholds | None = None,
) -> tuple[float, list[RuleResult]]:
    """Score a transaction.

    ``noise`` is the perturbation added on top of the rule points and must
    lie in ``[0, noise_max)``. The result is a pure function of the inputs:
    the same amount, type and noise always produce the same score.

    Returns the clamped, unrounded score and every rule result.
    """
    cfg = config or default_config.transaction
    if not 0 <= noise < cfg.noise_max:
        raise ValueError(f"noise must be in [0, {cfg.noise_max}), got {noise}")

    txn_type = TransactionType(transaction_type)
    results = [rule.evaluate(amount, txn_type, cfg) for rule in TRANSACTION_RULES]
    score = float(clamp_score(total_points(results) + noise))
    return score, results
