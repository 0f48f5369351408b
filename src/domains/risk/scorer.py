"""Submission pipeline: rules -> classification -> entity + alert -> one commit."""

from dataclasses import dataclass

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from src.config import settings
from src.db.models import FraudAlert as FraudAlertDB
from src.db.models import Invoice as InvoiceDB
from src.db.models import Shipment as ShipmentDB
from src.db.models import Transaction as TransactionDB
from src.db.models import new_id, utcnow

from .alerts import raise_from_decision
from .assessment import assess_invoice, assess_shipment, assess_transaction
from .config import RiskConfig, default_config
from .models import (
    AlertDecision,
    InvoiceAssessment,
    InvoiceSubmission,
    ShipmentAssessment,
    ShipmentSubmission,
    TransactionAssessment,
    TransactionSubmission,
)
from .noise import NoiseSource, SeededNoise
from .persistence import unit_of_work
from .policy import invoice_alert, shipment_alert, transaction_alert

logger = structlog.get_logger()


@dataclass
class SubmissionResult:
    entity: InvoiceDB | ShipmentDB | TransactionDB
    assessment: InvoiceAssessment | ShipmentAssessment | TransactionAssessment
    alert: FraudAlertDB | None = None

    @property
    def flagged(self) -> bool:
        return self.alert is not None


class RiskScorer:
    """Scores submissions and persists each one together with its alert.

    The entity row and its alert are staged inside one unit of work and
    committed once. A failure anywhere in staging or committing rolls the
    session back, so neither row is left behind.
    """

    def __init__(
        self,
        config: RiskConfig | None = None,
        noise: NoiseSource | None = None,
    ) -> None:
        self._config = config or default_config
        self._noise = noise or SeededNoise(settings.noise_seed)

    async def submit_invoice(
        self,
        submission: InvoiceSubmission,
        account_id: str,
        session: AsyncSession,
    ) -> SubmissionResult:
        assessment = assess_invoice(
            submission.amount, submission.expected_amount, self._config
        )

        invoice = InvoiceDB(
            id=new_id(),
            account_id=account_id,
            created_at=utcnow(),
            supplier_id=submission.supplier_id,
            invoice_number=submission.invoice_number,
            amount=submission.amount,
            expected_amount=submission.expected_amount,
            issue_date=submission.issue_date or utcnow().date(),
            due_date=submission.due_date,
            fraud_score=assessment.score,
            status=assessment.status.value,
        )

        decision = invoice_alert(assessment, submission.invoice_number, self._config)
        async with unit_of_work(session, "submit_invoice", invoice_id=invoice.id):
            session.add(invoice)
            alert = await self._stage_alert(session, account_id, invoice.id, decision)

        logger.info(
            "invoice_scored",
            invoice_id=invoice.id,
            account_id=account_id,
            fraud_score=assessment.score,
            status=assessment.status.value,
            alert_raised=alert is not None,
        )
        return SubmissionResult(entity=invoice, assessment=assessment, alert=alert)

    async def submit_shipment(
        self,
        submission: ShipmentSubmission,
        account_id: str,
        session: AsyncSession,
    ) -> SubmissionResult:
        assessment = assess_shipment(
            submission.expected_quantity, submission.received_quantity, self._config
        )

        shipment = ShipmentDB(
            id=new_id(),
            account_id=account_id,
            created_at=utcnow(),
            supplier_id=submission.supplier_id,
            tracking_number=submission.tracking_number,
            # Zero quantities carry no information and are stored as absent
            expected_quantity=submission.expected_quantity or None,
            received_quantity=submission.received_quantity or None,
            shipped_date=submission.shipped_date,
            delivery_date=submission.delivery_date,
            fraud_score=assessment.score,
            status=assessment.status.value,
        )

        decision = shipment_alert(
            assessment,
            submission.tracking_number,
            submission.expected_quantity,
            submission.received_quantity,
            self._config,
        )
        async with unit_of_work(session, "submit_shipment", shipment_id=shipment.id):
            session.add(shipment)
            alert = await self._stage_alert(session, account_id, shipment.id, decision)

        logger.info(
            "shipment_scored",
            shipment_id=shipment.id,
            account_id=account_id,
            fraud_score=assessment.score,
            status=assessment.status.value,
            evaluated=assessment.evaluated,
            alert_raised=alert is not None,
        )
        return SubmissionResult(entity=shipment, assessment=assessment, alert=alert)

    async def submit_transaction(
        self,
        submission: TransactionSubmission,
        account_id: str,
        session: AsyncSession,
    ) -> SubmissionResult:
        assessment = assess_transaction(
            submission.amount, submission.transaction_type, self._noise, self._config
        )

        transaction = TransactionDB(
            id=new_id(),
            account_id=account_id,
            created_at=utcnow(),
            supplier_id=submission.supplier_id,
            amount=submission.amount,
            transaction_type=submission.transaction_type.value,
            fraud_score=assessment.score,
            ml_label=assessment.label.value,
            is_suspicious=assessment.is_suspicious,
        )

        decision = transaction_alert(
            assessment, submission.amount, submission.transaction_type, self._config
        )
        async with unit_of_work(session, "submit_transaction", transaction_id=transaction.id):
            session.add(transaction)
            alert = await self._stage_alert(session, account_id, transaction.id, decision)

        logger.info(
            "transaction_scored",
            transaction_id=transaction.id,
            account_id=account_id,
            fraud_score=assessment.score,
            ml_label=assessment.label.value,
            is_suspicious=assessment.is_suspicious,
            alert_raised=alert is not None,
        )
        return SubmissionResult(entity=transaction, assessment=assessment, alert=alert)

    async def _stage_alert(
        self,
        session: AsyncSession,
        account_id: str,
        entity_id: str,
        decision: AlertDecision | None,
    ) -> FraudAlertDB | None:
        if decision is None:
            return None
        return await raise_from_decision(
            session, account_id, entity_id, decision, config=self._config
        )
