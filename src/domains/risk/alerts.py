"""Fraud alert lifecycle: raising, listing, and resolving review items."""

from collections.abc import Iterable

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.db.models import FraudAlert as FraudAlertDB
from src.db.models import new_id, utcnow

from .config import RiskConfig, default_config
from .errors import AlertNotFoundError
from .models import AlertDecision, AlertSeverity, EntityType
from .persistence import unit_of_work

logger = structlog.get_logger()


async def find_open_alert(
    session: AsyncSession,
    account_id: str,
    entity_type: EntityType | str,
    entity_id: str,
    alert_type: str,
) -> FraudAlertDB | None:
    """Return an unresolved alert with the same entity and alert type, if any."""
    stmt = (
        select(FraudAlertDB)
        .where(
            FraudAlertDB.account_id == account_id,
            FraudAlertDB.entity_type == str(entity_type),
            FraudAlertDB.entity_id == entity_id,
            FraudAlertDB.alert_type == alert_type,
            FraudAlertDB.is_resolved.is_(False),
        )
        .limit(1)
    )
    result = await session.execute(stmt)
    return result.scalar_one_or_none()


async def raise_alert(
    session: AsyncSession,
    account_id: str,
    entity_type: EntityType | str,
    entity_id: str,
    alert_type: str,
    severity: AlertSeverity | str,
    description: str,
    config: RiskConfig | None = None,
) -> FraudAlertDB:
    """Add a new unresolved alert to the session.

    Every call creates a new alert unless open-alert deduplication is
    enabled, in which case an existing unresolved alert for the same
    ``(entity_type, entity_id, alert_type)`` is returned instead. The caller
    owns the commit.
    """
    cfg = config or default_config

    if cfg.alerts.deduplicate_open_alerts:
        existing = await find_open_alert(session, account_id, entity_type, entity_id, alert_type)
        if existing is not None:
            logger.info(
                "alert_deduplicated",
                alert_id=existing.id,
                entity_type=str(entity_type),
                entity_id=entity_id,
                alert_type=alert_type,
            )
            return existing

    alert = FraudAlertDB(
        id=new_id(),
        account_id=account_id,
        entity_type=EntityType(entity_type).value,
        entity_id=entity_id,
        alert_type=alert_type,
        severity=AlertSeverity(severity).value,
        description=description,
        is_resolved=False,
        resolved_at=None,
        created_at=utcnow(),
    )
    session.add(alert)

    logger.warning(
        "fraud_alert_raised",
        alert_id=alert.id,
        account_id=account_id,
        entity_type=alert.entity_type,
        entity_id=entity_id,
        alert_type=alert_type,
        severity=alert.severity,
    )
    return alert


async def raise_from_decision(
    session: AsyncSession,
    account_id: str,
    entity_id: str,
    decision: AlertDecision,
    config: RiskConfig | None = None,
) -> FraudAlertDB:
    return await raise_alert(
        session,
        account_id=account_id,
        entity_type=decision.entity_type,
        entity_id=entity_id,
        alert_type=decision.alert_type,
        severity=decision.severity,
        description=decision.description,
        config=config,
    )


async def list_alerts(session: AsyncSession, account_id: str) -> list[FraudAlertDB]:
    """All alerts for an account, newest first. No status filtering or caps."""
    stmt = (
        select(FraudAlertDB)
        .where(FraudAlertDB.account_id == account_id)
        .order_by(FraudAlertDB.created_at.desc())
    )
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def resolve_alert(session: AsyncSession, account_id: str, alert_id: str) -> FraudAlertDB:
    """Mark an alert resolved and commit.

    Resolving an already-resolved alert keeps ``is_resolved`` true and
    restamps ``resolved_at``.
    """
    stmt = select(FraudAlertDB).where(
        FraudAlertDB.id == alert_id,
        FraudAlertDB.account_id == account_id,
    )
    result = await session.execute(stmt)
    alert = result.scalar_one_or_none()
    if alert is None:
        raise AlertNotFoundError(f"alert {alert_id} not found")

    was_resolved = alert.is_resolved
    async with unit_of_work(session, "resolve_alert", alert_id=alert_id):
        alert.is_resolved = True
        alert.resolved_at = utcnow()

    logger.info(
        "alert_resolved",
        alert_id=alert_id,
        account_id=account_id,
        already_resolved=was_resolved,
    )
    return alert


def partition_alerts(
    alerts: Iterable[FraudAlertDB],
) -> tuple[list[FraudAlertDB], list[FraudAlertDB]]:
    """Split alerts into ``(active, resolved)`` preserving order."""
    active: list[FraudAlertDB] = []
    resolved: list[FraudAlertDB] = []
    for alert in alerts:
        (resolved if alert.is_resolved else active).append(alert)
    return active, resolved
