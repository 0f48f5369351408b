"""Shipment quantity rules."""

from ..config import ShipmentThresholds, default_config
from ..models import RuleResult
from .base import RiskRule, clamp_score, total_points


class QuantityDeviationRule(RiskRule):
    """Triggers when the received quantity strays from the expected quantity."""

    rule_id = "quantity_deviation"

    def evaluate(self, expected: int, received: int, config: ShipmentThresholds) -> RuleResult:
        deviation = abs(expected - received) / expected
        if deviation <= config.deviation_ratio:
            return self._not_triggered()
        return self._triggered(
            points=config.deviation_points,
            details=f"Received {received} of {expected} expected ({deviation:.0%} deviation)",
            evidence={"deviation": round(deviation, 4)},
        )


class OverReceiptRule(RiskRule):
    """Triggers when far more units arrived than were ordered."""

    rule_id = "over_receipt"

    def evaluate(self, expected: int, received: int, config: ShipmentThresholds) -> RuleResult:
        ceiling = expected * config.over_receipt_multiplier
        if received <= ceiling:
            return self._not_triggered()
        return self._triggered(
            points=config.over_receipt_points,
            details=f"Received {received} exceeds {config.over_receipt_multiplier}x expected",
            evidence={"received": received, "ceiling": ceiling},
        )


SHIPMENT_RULES: list[RiskRule] = [
    QuantityDeviationRule(),
    OverReceiptRule(),
]


def evaluate_shipment(
    expected_quantity: int | None,
    received_quantity: int | None,
    config: ShipmentThresholds | None = None,
) -> tuple[int, bool, list[RuleResult]]:
    """Score a shipment.

    Returns ``(score, evaluated, results)``. Rules only run when both
    quantities are strictly positive; otherwise the shipment has
    insufficient data and scores 0 with ``evaluated=False``.
    """
    cfg = config or default_config.shipment
    expected = expected_quantity or 0
    received = received_quantity or 0

    if expected <= 0 or received <= 0:
        return 0, False, []

    results = [rule.evaluate(expected, received, cfg) for rule in SHIPMENT_RULES]
    score = int(clamp_score(total_points(results)))
    return score, True, results
