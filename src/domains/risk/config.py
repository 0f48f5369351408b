"""Risk scoring thresholds, one named structure per event kind."""

import os
from dataclasses import dataclass, field, fields


@dataclass
class InvoiceThresholds:
    deviation_ratio: float = 0.20
    deviation_points: int = 40
    high_amount: float = 50_000.0
    high_amount_points: int = 20
    overbilling_multiplier: float = 1.5
    overbilling_points: int = 30
    flag_score: int = 50
    high_severity_score: int = 70


@dataclass
class ShipmentThresholds:
    deviation_ratio: float = 0.15
    deviation_points: int = 40
    over_receipt_multiplier: float = 1.3
    over_receipt_points: int = 30
    flag_score: int = 50
    high_severity_score: int = 70


@dataclass
class TransactionThresholds:
    very_high_amount: float = 100_000.0
    very_high_amount_points: int = 35
    high_amount: float = 50_000.0
    high_amount_points: int = 15
    large_refund_amount: float = 10_000.0
    large_refund_points: int = 25
    adjustment_points: int = 10
    noise_max: float = 10.0
    suspicious_score: int = 35
    fraudulent_score: int = 60


@dataclass
class AlertSettings:
    # Off: every qualifying submission raises a new alert
    deduplicate_open_alerts: bool = False
    recent_alerts_limit: int = 5


@dataclass
class RiskConfig:
    invoice: InvoiceThresholds = field(default_factory=InvoiceThresholds)
    shipment: ShipmentThresholds = field(default_factory=ShipmentThresholds)
    transaction: TransactionThresholds = field(default_factory=TransactionThresholds)
    alerts: AlertSettings = field(default_factory=AlertSettings)

    @classmethod
    def from_env(cls) -> "RiskConfig":
        """Load config with env var overrides. Env vars use RISK_ prefix.

        Every threshold can be overridden as RISK_<KIND>_<FIELD>, e.g.
        RISK_INVOICE_OVERBILLING_MULTIPLIER or RISK_TRANSACTION_FRAUDULENT_SCORE.
        Alert settings drop the kind: RISK_DEDUPLICATE_OPEN_ALERTS.
        """
        config = cls()
        for section, prefix in _ENV_SECTIONS:
            _apply_env(getattr(config, section), prefix)
        return config


_ENV_SECTIONS = (
    ("invoice", "RISK_INVOICE_"),
    ("shipment", "RISK_SHIPMENT_"),
    ("transaction", "RISK_TRANSACTION_"),
    ("alerts", "RISK_"),
)


def _apply_env(target, prefix: str) -> None:
    for f in fields(target):
        v = os.getenv(prefix + f.name.upper())
        if not v:
            continue
        if f.type is bool:
            setattr(target, f.name, v.lower() in ("1", "true", "yes"))
        else:
            setattr(target, f.name, f.type(v))


# Module-level default instance
default_config = RiskConfig()
