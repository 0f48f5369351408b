"""Unit tests for shipment quantity rules."""

import pytest

from src.domains.risk.config import ShipmentThresholds
from src.domains.risk.rules.shipment import (
    OverReceiptRule,
    QuantityDeviationRule,
    evaluate_shipment,
)

CONFIG = ShipmentThresholds()


class TestQuantityDeviationRule:
    rule = QuantityDeviationRule()

    def test_exact_match(self):
        assert not self.rule.evaluate(100, 100, CONFIG).triggered

    def test_at_fifteen_percent(self):
        assert not self.rule.evaluate(100, 85, CONFIG).triggered

    def test_short_shipment(self):
        result = self.rule.evaluate(100, 80, CONFIG)
        assert result.triggered
        assert result.points == 40


class TestOverReceiptRule:
    rule = OverReceiptRule()

    def test_below_ceiling(self):
        assert not self.rule.evaluate(100, 125, CONFIG).triggered

    def test_above_ceiling(self):
        result = self.rule.evaluate(100, 140, CONFIG)
        assert result.triggered
        assert result.points == 30


class TestEvaluateShipment:
    def test_insufficient_data_both_zero(self):
        score, evaluated, results = evaluate_shipment(0, 0)
        assert score == 0
        assert not evaluated
        assert results == []

    @pytest.mark.parametrize("expected,received", [(None, 10), (10, None), (None, None), (0, 10)])
    def test_insufficient_data_missing_side(self, expected, received):
        score, evaluated, _ = evaluate_shipment(expected, received)
        assert score == 0
        assert not evaluated

    def test_over_receipt_scores_seventy(self):
        score, evaluated, _ = evaluate_shipment(100, 140)
        assert evaluated
        assert score == 70

    def test_short_shipment_scores_forty(self):
        score, evaluated, _ = evaluate_shipment(100, 50)
        assert evaluated
        assert score == 40

    def test_within_tolerance(self):
        score, evaluated, _ = evaluate_shipment(100, 110)
        assert evaluated
        assert score == 0

    @pytest.mark.parametrize(
        "expected,received",
        [(1, 1), (1, 1_000_000), (1_000_000, 1), (7, 9), (100, 131)],
    )
    def test_score_within_bounds(self, expected, received):
        score, _, _ = evaluate_shipment(expected, received)
        assert 0 <= score <= 100
