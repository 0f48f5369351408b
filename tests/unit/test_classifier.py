"""Unit tests for score classification and combined assessments."""

import pytest

from src.domains.risk.assessment import (
    assess_invoice,
    assess_shipment,
    assess_transaction,
    round_half_up,
)
from src.domains.risk.classifier import (
    classify_invoice,
    classify_shipment,
    classify_transaction,
)
from src.domains.risk.models import (
    InvoiceStatus,
    ShipmentStatus,
    TransactionLabel,
)
from src.domains.risk.noise import FixedNoise


class TestClassifyInvoice:
    @pytest.mark.parametrize(
        "score,status",
        [(0, InvoiceStatus.PENDING), (50, InvoiceStatus.PENDING), (51, InvoiceStatus.FLAGGED)],
    )
    def test_cut_point(self, score, status):
        assert classify_invoice(score) == status

    def test_never_approved_or_rejected(self):
        statuses = {classify_invoice(s) for s in range(0, 101)}
        assert statuses == {InvoiceStatus.PENDING, InvoiceStatus.FLAGGED}


class TestClassifyShipment:
    def test_not_evaluated_is_in_transit(self):
        assert classify_shipment(0, evaluated=False) == ShipmentStatus.IN_TRANSIT

    def test_evaluated_low_score_delivered(self):
        assert classify_shipment(40, evaluated=True) == ShipmentStatus.DELIVERED

    def test_evaluated_high_score_flagged(self):
        assert classify_shipment(70, evaluated=True) == ShipmentStatus.FLAGGED

    def test_never_delayed(self):
        statuses = {classify_shipment(s, e) for s in range(0, 101) for e in (True, False)}
        assert ShipmentStatus.DELAYED not in statuses


class TestClassifyTransaction:
    @pytest.mark.parametrize(
        "score,label,suspicious",
        [
            (0.0, TransactionLabel.NORMAL, False),
            (35.0, TransactionLabel.NORMAL, False),
            (35.01, TransactionLabel.SUSPICIOUS, True),
            (60.0, TransactionLabel.SUSPICIOUS, True),
            (60.4, TransactionLabel.FRAUDULENT, True),
            (100.0, TransactionLabel.FRAUDULENT, True),
        ],
    )
    def test_cut_points(self, score, label, suspicious):
        assert classify_transaction(score) == (label, suspicious)


class TestAssessments:
    def test_invoice_matching_amount(self):
        assessment = assess_invoice(100.0, 100.0)
        assert assessment.score == 0
        assert assessment.status == InvoiceStatus.PENDING

    def test_invoice_flagged(self):
        assessment = assess_invoice(60_000.0, 40_000.0)
        assert assessment.score == 60
        assert assessment.status == InvoiceStatus.FLAGGED
        assert len(assessment.rule_results) == 3

    def test_shipment_insufficient_data(self):
        assessment = assess_shipment(0, 0)
        assert assessment.score == 0
        assert assessment.status == ShipmentStatus.IN_TRANSIT
        assert not assessment.evaluated

    def test_shipment_flagged(self):
        assessment = assess_shipment(100, 140)
        assert assessment.score == 70
        assert assessment.status == ShipmentStatus.FLAGGED

    def test_transaction_with_literal_noise(self):
        assessment = assess_transaction(60_000, "adjustment", 2.5)
        # 15 + 10 + 2.5
        assert assessment.raw_score == pytest.approx(27.5)
        assert assessment.score == 28
        assert assessment.label == TransactionLabel.NORMAL
        assert not assessment.is_suspicious
        assert assessment.noise == 2.5

    def test_transaction_with_noise_source(self):
        assessment = assess_transaction(150_000, "refund", FixedNoise(1.0))
        assert assessment.raw_score == pytest.approx(76.0)
        assert assessment.label == TransactionLabel.FRAUDULENT
        assert assessment.is_suspicious

    def test_label_uses_unrounded_score(self):
        # 35 + 15 + 10 + 0.4 = 60.4 -> fraudulent even though it rounds to 60
        assessment = assess_transaction(100_001, "adjustment", 0.4)
        assert assessment.score == 60
        assert assessment.label == TransactionLabel.FRAUDULENT


class TestRoundHalfUp:
    @pytest.mark.parametrize("value,expected", [(0.5, 1), (1.5, 2), (2.5, 3), (2.49, 2), (0.0, 0)])
    def test_rounding(self, value, expected):
        assert round_half_up(value) == expected
