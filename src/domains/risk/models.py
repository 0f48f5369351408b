"""Pydantic models and enums for the risk domain."""

import re
from datetime import date, datetime
from enum import StrEnum

from pydantic import BaseModel, Field, field_validator


class EntityType(StrEnum):
    INVOICE = "invoice"
    SHIPMENT = "shipment"
    TRANSACTION = "transaction"


class SupplierStatus(StrEnum):
    ACTIVE = "active"
    SUSPENDED = "suspended"
    BLACKLISTED = "blacklisted"


class InvoiceStatus(StrEnum):
    PENDING = "pending"
    FLAGGED = "flagged"
    # Set only by manual review outside the engine
    APPROVED = "approved"
    REJECTED = "rejected"


class ShipmentStatus(StrEnum):
    IN_TRANSIT = "in_transit"
    DELIVERED = "delivered"
    FLAGGED = "flagged"
    # Set only by manual action outside the engine
    DELAYED = "delayed"


class TransactionType(StrEnum):
    PAYMENT = "payment"
    REFUND = "refund"
    ADJUSTMENT = "adjustment"


class TransactionLabel(StrEnum):
    NORMAL = "normal"
    SUSPICIOUS = "suspicious"
    FRAUDULENT = "fraudulent"


class AlertSeverity(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


# ---------------------------------------------------------------------------
# Submissions (validated by the caller before the engine runs)
# ---------------------------------------------------------------------------


class SupplierSubmission(BaseModel):
    name: str
    contact_email: str | None = None
    phone: str | None = None
    address: str | None = None

    @field_validator("name")
    @classmethod
    def _name_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name is required")
        return value

    @field_validator("contact_email", "phone", "address", mode="before")
    @classmethod
    def _optional_text(cls, value):
        value = _blank_to_none(value)
        return value.strip() if isinstance(value, str) else value


class InvoiceSubmission(BaseModel):
    invoice_number: str
    amount: float = Field(ge=0)
    expected_amount: float | None = Field(default=None, ge=0)
    supplier_id: str | None = None
    issue_date: date | None = None
    due_date: date | None = None

    @field_validator("invoice_number")
    @classmethod
    def _invoice_number_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("invoice_number is required")
        return value

    @field_validator(
        "expected_amount", "supplier_id", "issue_date", "due_date", mode="before"
    )
    @classmethod
    def _optional_fields(cls, value):
        return _blank_to_none(value)


class ShipmentSubmission(BaseModel):
    tracking_number: str | None = None
    expected_quantity: int | None = Field(default=None, ge=0)
    received_quantity: int | None = Field(default=None, ge=0)
    supplier_id: str | None = None
    shipped_date: date | None = None
    delivery_date: date | None = None

    @field_validator("expected_quantity", "received_quantity", mode="before")
    @classmethod
    def _parse_quantity(cls, value):
        """Read the leading integer ("1.5" -> 1, "12 units" -> 12).

        Input without a leading integer is treated as absent, not as an error.
        """
        value = _blank_to_none(value)
        if value is None or isinstance(value, bool):
            return None
        match = _LEADING_INT.match(str(value))
        return int(match.group(1)) if match else None

    @field_validator(
        "tracking_number", "supplier_id", "shipped_date", "delivery_date", mode="before"
    )
    @classmethod
    def _optional_fields(cls, value):
        value = _blank_to_none(value)
        return value.strip() if isinstance(value, str) else value


class TransactionSubmission(BaseModel):
    amount: float = Field(ge=0)
    transaction_type: TransactionType = TransactionType.PAYMENT
    supplier_id: str | None = None

    @field_validator("supplier_id", mode="before")
    @classmethod
    def _optional_supplier(cls, value):
        return _blank_to_none(value)


# ---------------------------------------------------------------------------
# Engine output
# ---------------------------------------------------------------------------


class RuleResult(BaseModel):
    rule_name: str
    triggered: bool
    points: int = 0
    details: str = ""
    evidence: dict = Field(default_factory=dict)


class InvoiceAssessment(BaseModel):
    score: int = Field(ge=0, le=100)
    status: InvoiceStatus
    rule_results: list[RuleResult] = []


class ShipmentAssessment(BaseModel):
    score: int = Field(ge=0, le=100)
    status: ShipmentStatus
    evaluated: bool
    rule_results: list[RuleResult] = []


class TransactionAssessment(BaseModel):
    raw_score: float = Field(ge=0, le=100)
    score: int = Field(ge=0, le=100)
    label: TransactionLabel
    is_suspicious: bool
    noise: float
    rule_results: list[RuleResult] = []


class AlertDecision(BaseModel):
    entity_type: EntityType
    alert_type: str
    severity: AlertSeverity
    description: str


class AlertView(BaseModel):
    model_config = {"from_attributes": True}

    id: str
    entity_type: EntityType
    entity_id: str
    alert_type: str
    severity: AlertSeverity
    description: str
    is_resolved: bool
    resolved_at: datetime | None = None
    created_at: datetime


class ReportSummary(BaseModel):
    total_transactions: int
    label_counts: dict[str, int]
    total_invoices: int
    flagged_invoices: int
    total_alerts: int
    active_alerts: int
    resolved_alerts: int
    detection_rate: int
    # None when there are no alerts to resolve
    resolution_rate: int | None


class DashboardStats(BaseModel):
    supplier_count: int
    invoice_count: int
    shipment_count: int
    active_alert_count: int
    recent_alerts: list[AlertView] = []
