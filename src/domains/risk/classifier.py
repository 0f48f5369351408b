"""Score to status/label classification per event kind."""

from .config import InvoiceThresholds, ShipmentThresholds, TransactionThresholds, default_config
from .models import InvoiceStatus, ShipmentStatus, TransactionLabel


def classify_invoice(score: float, config: InvoiceThresholds | None = None) -> InvoiceStatus:
    cfg = config or default_config.invoice
    return InvoiceStatus.FLAGGED if score > cfg.flag_score else InvoiceStatus.PENDING


def classify_shipment(
    score: float,
    evaluated: bool,
    config: ShipmentThresholds | None = None,
) -> ShipmentStatus:
    """Shipments without both quantities stay in transit regardless of score."""
    cfg = config or default_config.shipment
    if not evaluated:
        return ShipmentStatus.IN_TRANSIT
    return ShipmentStatus.FLAGGED if score > cfg.flag_score else ShipmentStatus.DELIVERED


def classify_transaction(
    score: float, config: TransactionThresholds | None = None
) -> tuple[TransactionLabel, bool]:
    """Return ``(label, is_suspicious)`` for an unrounded transaction score."""
    cfg = config or default_config.transaction
    if score > cfg.fraudulent_score:
        label = TransactionLabel.FRAUDULENT
    elif score > cfg.suspicious_score:
        label = TransactionLabel.SUSPICIOUS
    else:
        label = TransactionLabel.NORMAL
    return label, score > cfg.suspicious_score
