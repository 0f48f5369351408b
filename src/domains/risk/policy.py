"""Alert policy: decide whether a scored submission becomes a review item."""

from .config import RiskConfig, default_config
from .models import (
    AlertDecision,
    AlertSeverity,
    EntityType,
    InvoiceAssessment,
    ShipmentAssessment,
    TransactionAssessment,
    TransactionType,
)

INVOICE_ALERT_TYPE = "Invoice Mismatch"
SHIPMENT_ALERT_TYPE = "Quantity Manipulation"


def transaction_alert_type(transaction_type: TransactionType | str) -> str:
    return f"Suspicious {TransactionType(transaction_type).value}"


def format_amount(amount: float) -> str:
    """Grouped amount with up to three decimals and no trailing zeros: 60000 -> 60,000."""
    return f"{amount:,.3f}".rstrip("0").rstrip(".")


def invoice_alert(
    assessment: InvoiceAssessment,
    invoice_number: str,
    config: RiskConfig | None = None,
) -> AlertDecision | None:
    cfg = config or default_config
    if assessment.score <= cfg.invoice.flag_score:
        return None

    severity = (
        AlertSeverity.HIGH
        if assessment.score > cfg.invoice.high_severity_score
        else AlertSeverity.MEDIUM
    )
    return AlertDecision(
        entity_type=EntityType.INVOICE,
        alert_type=INVOICE_ALERT_TYPE,
        severity=severity,
        description=(
            f"Invoice {invoice_number} flagged with fraud score {assessment.score}%. "
            "Amount deviation detected."
        ),
    )


def shipment_alert(
    assessment: ShipmentAssessment,
    tracking_number: str | None,
    expected_quantity: int | None,
    received_quantity: int | None,
    config: RiskConfig | None = None,
) -> AlertDecision | None:
    cfg = config or default_config
    if assessment.score <= cfg.shipment.flag_score:
        return None

    severity = (
        AlertSeverity.HIGH
        if assessment.score > cfg.shipment.high_severity_score
        else AlertSeverity.MEDIUM
    )
    return AlertDecision(
        entity_type=EntityType.SHIPMENT,
        alert_type=SHIPMENT_ALERT_TYPE,
        severity=severity,
        description=(
            f"Shipment {tracking_number or 'untracked'} flagged. "
            f"Expected: {expected_quantity or 0}, Received: {received_quantity or 0}."
        ),
    )


def transaction_alert(
    assessment: TransactionAssessment,
    amount: float,
    transaction_type: TransactionType | str,
    config: RiskConfig | None = None,
) -> AlertDecision | None:
    cfg = config or default_config
    if not assessment.is_suspicious:
        return None

    severity = (
        AlertSeverity.CRITICAL
        if assessment.raw_score > cfg.transaction.fraudulent_score
        else AlertSeverity.MEDIUM
    )
    return AlertDecision(
        entity_type=EntityType.TRANSACTION,
        alert_type=transaction_alert_type(transaction_type),
        severity=severity,
        description=(
            f"Transaction of ${format_amount(amount)} classified as {assessment.label.value} "
            f"(score: {assessment.score}%)."
        ),
    )
