"""Report aggregates over already-scored records and raised alerts.

All functions here are read-only projections: they never rescore a record.
Records may be ORM rows or plain dicts with the same field names.
"""

from collections import Counter
from collections.abc import Iterable
from enum import StrEnum
from typing import Any

import structlog
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.db.models import FraudAlert as FraudAlertDB
from src.db.models import Invoice as InvoiceDB
from src.db.models import Shipment as ShipmentDB
from src.db.models import Supplier as SupplierDB
from src.db.models import Transaction as TransactionDB

from .assessment import round_half_up
from .config import RiskConfig, default_config
from .models import (
    AlertSeverity,
    AlertView,
    DashboardStats,
    InvoiceStatus,
    ReportSummary,
    SupplierStatus,
    TransactionLabel,
)

logger = structlog.get_logger()

NOT_APPLICABLE = None

# Upper bounds (exclusive) on supplier risk score per tier; the rest is tier_4
SUPPLIER_TIER_BANDS: tuple[tuple[float, str], ...] = (
    (25.0, "tier_1"),
    (50.0, "tier_2"),
    (75.0, "tier_3"),
)
TOP_SUPPLIER_TIER = "tier_4"


def _field(record: Any, name: str) -> Any:
    if isinstance(record, dict):
        return record.get(name)
    return getattr(record, name, None)


def _count(records: Iterable[Any], name: str, members: type[StrEnum]) -> dict[str, int]:
    counts = {m.value: 0 for m in members}
    counts.update(Counter(str(_field(r, name)) for r in records))
    return counts


# ---------------------------------------------------------------------------
# Rates
# ---------------------------------------------------------------------------


def detection_rate(transactions: Iterable[Any]) -> int:
    """Percent of transactions labelled suspicious or fraudulent. 0 when empty."""
    labels = [_field(t, "ml_label") for t in transactions]
    if not labels:
        return 0
    detected = sum(
        1
        for label in labels
        if label in (TransactionLabel.SUSPICIOUS, TransactionLabel.FRAUDULENT)
    )
    return round_half_up(100 * detected / len(labels))


def resolution_rate(alerts: Iterable[Any]) -> int | None:
    """Percent of alerts resolved, or NOT_APPLICABLE when there are no alerts."""
    states = [bool(_field(a, "is_resolved")) for a in alerts]
    if not states:
        return NOT_APPLICABLE
    return round_half_up(100 * sum(states) / len(states))


def format_rate(rate: int | None) -> str:
    return "N/A" if rate is NOT_APPLICABLE else f"{rate}%"


# ---------------------------------------------------------------------------
# Counts
# ---------------------------------------------------------------------------


def count_by_label(transactions: Iterable[Any]) -> dict[str, int]:
    return _count(transactions, "ml_label", TransactionLabel)


def count_by_severity(alerts: Iterable[Any]) -> dict[str, int]:
    return _count(alerts, "severity", AlertSeverity)


def count_by_invoice_status(invoices: Iterable[Any]) -> dict[str, int]:
    return _count(invoices, "status", InvoiceStatus)


def count_by_supplier_status(suppliers: Iterable[Any]) -> dict[str, int]:
    return _count(suppliers, "status", SupplierStatus)


def supplier_tier(risk_score: float | None) -> str:
    score = risk_score or 0.0
    for upper, tier in SUPPLIER_TIER_BANDS:
        if score < upper:
            return tier
    return TOP_SUPPLIER_TIER


def count_by_supplier_tier(suppliers: Iterable[Any]) -> dict[str, int]:
    counts = {tier: 0 for _, tier in SUPPLIER_TIER_BANDS}
    counts[TOP_SUPPLIER_TIER] = 0
    for supplier in suppliers:
        counts[supplier_tier(_field(supplier, "risk_score"))] += 1
    return counts


# ---------------------------------------------------------------------------
# Summaries
# ---------------------------------------------------------------------------


def build_report_summary(
    transactions: Iterable[Any],
    invoices: Iterable[Any],
    alerts: Iterable[Any],
) -> ReportSummary:
    transactions = list(transactions)
    invoices = list(invoices)
    alerts = list(alerts)

    resolved = sum(1 for a in alerts if _field(a, "is_resolved"))
    invoice_counts = count_by_invoice_status(invoices)

    return ReportSummary(
        total_transactions=len(transactions),
        label_counts=count_by_label(transactions),
        total_invoices=len(invoices),
        flagged_invoices=invoice_counts[InvoiceStatus.FLAGGED.value],
        total_alerts=len(alerts),
        active_alerts=len(alerts) - resolved,
        resolved_alerts=resolved,
        detection_rate=detection_rate(transactions),
        resolution_rate=resolution_rate(alerts),
    )


async def load_report_summary(session: AsyncSession, account_id: str) -> ReportSummary:
    """Read the account's current records and summarize them."""
    transactions = await session.execute(
        select(TransactionDB).where(TransactionDB.account_id == account_id)
    )
    invoices = await session.execute(
        select(InvoiceDB).where(InvoiceDB.account_id == account_id)
    )
    alerts = await session.execute(
        select(FraudAlertDB).where(FraudAlertDB.account_id == account_id)
    )

    summary = build_report_summary(
        transactions.scalars().all(),
        invoices.scalars().all(),
        alerts.scalars().all(),
    )
    logger.info(
        "report_summary_loaded",
        account_id=account_id,
        total_transactions=summary.total_transactions,
        total_alerts=summary.total_alerts,
    )
    return summary


async def _count_rows(session: AsyncSession, model, *criteria) -> int:
    stmt = select(func.count()).select_from(model).where(*criteria)
    result = await session.execute(stmt)
    return result.scalar_one()


async def load_dashboard_stats(
    session: AsyncSession,
    account_id: str,
    recent_limit: int | None = None,
    config: RiskConfig | None = None,
) -> DashboardStats:
    cfg = config or default_config
    limit = recent_limit if recent_limit is not None else cfg.alerts.recent_alerts_limit

    supplier_count = await _count_rows(session, SupplierDB, SupplierDB.account_id == account_id)
    invoice_count = await _count_rows(session, InvoiceDB, InvoiceDB.account_id == account_id)
    shipment_count = await _count_rows(session, ShipmentDB, ShipmentDB.account_id == account_id)
    active_alert_count = await _count_rows(
        session,
        FraudAlertDB,
        FraudAlertDB.account_id == account_id,
        FraudAlertDB.is_resolved.is_(False),
    )

    recent = await session.execute(
        select(FraudAlertDB)
        .where(FraudAlertDB.account_id == account_id)
        .order_by(FraudAlertDB.created_at.desc())
        .limit(limit)
    )

    return DashboardStats(
        supplier_count=supplier_count,
        invoice_count=invoice_count,
        shipment_count=shipment_count,
        active_alert_count=active_alert_count,
        recent_alerts=[AlertView.model_validate(a) for a in recent.scalars().all()],
    )
