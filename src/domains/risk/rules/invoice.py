"""Invoice amount rules."""

from ..config import InvoiceThresholds, default_config
from ..models import RuleResult
from .base import RiskRule, clamp_score, total_points


def _has_expectation(expected_amount: float | None) -> bool:
    # A zero expectation cannot anchor a ratio
    return bool(expected_amount)


class InvoiceDeviationRule(RiskRule):
    """Triggers when the billed amount strays from the expected amount."""

    rule_id = "invoice_deviation"

    def evaluate(
        self, amount: float, expected_amount: float | None, config: InvoiceThresholds
    ) -> RuleResult:
        if not _has_expectation(expected_amount):
            return self._not_triggered()

        deviation = abs(amount - expected_amount) / expected_amount
        if deviation <= config.deviation_ratio:
            return self._not_triggered()

        return self._triggered(
            points=config.deviation_points,
            details=f"Amount deviates {deviation:.0%} from expected "
            f"(limit {config.deviation_ratio:.0%})",
            evidence={"deviation": round(deviation, 4), "expected_amount": expected_amount},
        )


class HighInvoiceAmountRule(RiskRule):
    """Triggers for invoices above the high-amount threshold."""

    rule_id = "high_invoice_amount"

    def evaluate(
        self, amount: float, expected_amount: float | None, config: InvoiceThresholds
    ) -> RuleResult:
        if amount <= config.high_amount:
            return self._not_triggered()
        return self._triggered(
            points=config.high_amount_points,
            details=f"Invoice amount ${amount:,.2f} exceeds ${config.high_amount:,.2f}",
            evidence={"amount": amount, "threshold": config.high_amount},
        )


class InvoiceOverbillingRule(RiskRule):
    """Triggers when the billed amount is far above the expected amount."""

    rule_id = "invoice_overbilling"

    def evaluate(
        self, amount: float, expected_amount: float | None, config: InvoiceThresholds
    ) -> RuleResult:
        if not _has_expectation(expected_amount):
            return self._not_triggered()

        ceiling = expected_amount * config.overbilling_multiplier
        if amount <= ceiling:
            return self._not_triggered()
        return self._triggered(
            points=config.overbilling_points,
            details=f"Amount ${amount:,.2f} exceeds {config.overbilling_multiplier}x expected",
            evidence={"amount": amount, "ceiling": ceiling},
        )


INVOICE_RULES: list[RiskRule] = [
    InvoiceDeviationRule(),
    HighInvoiceAmountRule(),
    InvoiceOverbillingRule(),
]


def evaluate_invoice(
    amount: float,
    expected_amount: float | None = None,
    config: InvoiceThresholds | None = None,
) -> tuple[int, list[RuleResult]]:
    """Score an invoice. Returns the clamped score and every rule result."""
    cfg = config or default_config.invoice
    results = [rule.evaluate(amount, expected_amount, cfg) for rule in INVOICE_RULES]
    score = int(clamp_score(total_points(results)))
    return score, results
