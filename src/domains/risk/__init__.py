"""Supply-chain risk scoring and alert lifecycle domain."""

from .alerts import list_alerts, partition_alerts, raise_alert, resolve_alert
from .assessment import assess_invoice, assess_shipment, assess_transaction
from .config import RiskConfig, default_config
from .errors import AlertNotFoundError, PersistenceError, RiskEngineError, SupplierNotFoundError
from .models import (
    AlertDecision,
    AlertSeverity,
    EntityType,
    InvoiceSubmission,
    ShipmentSubmission,
    SupplierSubmission,
    TransactionSubmission,
)
from .noise import FixedNoise, SeededNoise
from .reports import build_report_summary, detection_rate, resolution_rate
from .scorer import RiskScorer, SubmissionResult

__all__ = [
    "AlertDecision",
    "AlertNotFoundError",
    "AlertSeverity",
    "EntityType",
    "FixedNoise",
    "InvoiceSubmission",
    "PersistenceError",
    "RiskConfig",
    "RiskEngineError",
    "RiskScorer",
    "SeededNoise",
    "ShipmentSubmission",
    "SubmissionResult",
    "SupplierNotFoundError",
    "SupplierSubmission",
    "TransactionSubmission",
    "assess_invoice",
    "assess_shipment",
    "assess_transaction",
    "build_report_summary",
    "default_config",
    "detection_rate",
    "list_alerts",
    "partition_alerts",
    "raise_alert",
    "resolve_alert",
    "resolution_rate",
]
