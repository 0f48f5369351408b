"""Evaluate and classify a single submission without touching the store."""

import math

import structlog

from .classifier import classify_invoice, classify_shipment, classify_transaction
from .config import RiskConfig, default_config
from .models import (
    InvoiceAssessment,
    ShipmentAssessment,
    TransactionAssessment,
    TransactionType,
)
from .noise import NoiseSource
from .rules import evaluate_invoice, evaluate_shipment, evaluate_transaction

logger = structlog.get_logger()


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def assess_invoice(
    amount: float,
    expected_amount: float | None = None,
    config: RiskConfig | None = None,
) -> InvoiceAssessment:
    cfg = config or default_config
    score, results = evaluate_invoice(amount, expected_amount, cfg.invoice)
    status = classify_invoice(score, cfg.invoice)

    logger.debug(
        "invoice_assessed",
        score=score,
        status=status.value,
        triggered=[r.rule_name for r in results if r.triggered],
    )
    return InvoiceAssessment(score=score, status=status, rule_results=results)


def assess_shipment(
    expected_quantity: int | None,
    received_quantity: int | None,
    config: RiskConfig | None = None,
) -> ShipmentAssessment:
    cfg = config or default_config
    score, evaluated, results = evaluate_shipment(
        expected_quantity, received_quantity, cfg.shipment
    )
    status = classify_shipment(score, evaluated, cfg.shipment)

    logger.debug(
        "shipment_assessed",
        score=score,
        status=status.value,
        evaluated=evaluated,
        triggered=[r.rule_name for r in results if r.triggered],
    )
    return ShipmentAssessment(
        score=score, status=status, evaluated=evaluated, rule_results=results
    )


def assess_transaction(
    amount: float,
    transaction_type: TransactionType | str,
    noise: float | NoiseSource,
    config: RiskConfig | None = None,
) -> TransactionAssessment:
    """Score and label a transaction.

    ``noise`` is either the perturbation value itself or a source to draw it
    from. The label is derived from the unrounded score; the reported
    ``score`` is rounded half-up.
    """
    cfg = config or default_config
    noise_value = noise(cfg.transaction.noise_max) if callable(noise) else float(noise)

    raw_score, results = evaluate_transaction(
        amount, transaction_type, noise_value, cfg.transaction
    )
    label, is_suspicious = classify_transaction(raw_score, cfg.transaction)

    logger.debug(
        "transaction_assessed",
        raw_score=round(raw_score, 4),
        label=label.value,
        noise=round(noise_value, 4),
        triggered=[r.rule_name for r in results if r.triggered],
    )
    return TransactionAssessment(
        raw_score=raw_score,
        score=round_half_up(raw_score),
        label=label,
        is_suspicious=is_suspicious,
        noise=noise_value,
        rule_results=results,
    )
