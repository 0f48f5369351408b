"""Unit tests for transaction rules and the noise-injected evaluator."""

import pytest

from src.domains.risk.config import TransactionThresholds
from src.domains.risk.models import TransactionType
from src.domains.risk.noise import FixedNoise, SeededNoise
from src.domains.risk.rules.transaction import (
    AdjustmentRule,
    HighAmountRule,
    LargeRefundRule,
    VeryHighAmountRule,
    evaluate_transaction,
)

CONFIG = TransactionThresholds()


class TestAmountRules:
    def test_very_high_amount(self):
        assert VeryHighAmountRule().evaluate(100_001, TransactionType.PAYMENT, CONFIG).triggered
        assert not VeryHighAmountRule().evaluate(100_000, TransactionType.PAYMENT, CONFIG).triggered

    def test_high_amount(self):
        result = HighAmountRule().evaluate(50_001, TransactionType.PAYMENT, CONFIG)
        assert result.triggered
        assert result.points == 15


class TestLargeRefundRule:
    rule = LargeRefundRule()

    def test_large_refund(self):
        result = self.rule.evaluate(10_001, TransactionType.REFUND, CONFIG)
        assert result.triggered
        assert result.points == 25

    def test_small_refund(self):
        assert not self.rule.evaluate(10_000, TransactionType.REFUND, CONFIG).triggered

    def test_large_payment_is_not_refund(self):
        assert not self.rule.evaluate(20_000, TransactionType.PAYMENT, CONFIG).triggered


class TestAdjustmentRule:
    def test_any_adjustment(self):
        result = AdjustmentRule().evaluate(1, TransactionType.ADJUSTMENT, CONFIG)
        assert result.triggered
        assert result.points == 10


class TestEvaluateTransaction:
    def test_plain_payment(self):
        score, _ = evaluate_transaction(500, "payment", noise=0.0)
        assert score == 0.0

    def test_noise_is_added(self):
        score, _ = evaluate_transaction(500, "payment", noise=4.5)
        assert score == pytest.approx(4.5)

    def test_both_amount_tiers_stack(self):
        score, results = evaluate_transaction(150_000, "payment", noise=0.0)
        assert score == 50.0
        triggered = {r.rule_name for r in results if r.triggered}
        assert triggered == {"very_high_amount", "high_amount"}

    def test_every_rule(self):
        score, _ = evaluate_transaction(150_000, "refund", noise=9.99)
        assert score == pytest.approx(84.99)

    def test_deterministic_for_same_noise(self):
        first = evaluate_transaction(60_000, "adjustment", noise=3.2)
        second = evaluate_transaction(60_000, "adjustment", noise=3.2)
        assert first == second

    @pytest.mark.parametrize("noise", [-0.1, 10.0, 25.0])
    def test_noise_out_of_range(self, noise):
        with pytest.raises(ValueError):
            evaluate_transaction(100, "payment", noise=noise)

    def test_unknown_type_rejected(self):
        with pytest.raises(ValueError):
            evaluate_transaction(100, "chargeback", noise=0.0)

    def test_clamped_to_max(self):
        cfg = TransactionThresholds(very_high_amount_points=90)
        score, _ = evaluate_transaction(150_000, "refund", noise=5.0, config=cfg)
        assert score == 100.0

    @pytest.mark.parametrize("amount", [0, 1, 10_000.5, 50_000, 99_999, 1e12])
    @pytest.mark.parametrize("txn_type", list(TransactionType))
    def test_score_within_bounds(self, amount, txn_type):
        score, _ = evaluate_transaction(amount, txn_type, noise=9.999)
        assert 0 <= score <= 100


class TestNoiseSources:
    def test_seeded_noise_is_reproducible(self):
        a = SeededNoise(seed=42)
        b = SeededNoise(seed=42)
        assert [a(10.0) for _ in range(5)] == [b(10.0) for _ in range(5)]

    def test_seeded_noise_in_range(self):
        noise = SeededNoise(seed=7)
        assert all(0 <= noise(10.0) < 10.0 for _ in range(200))

    def test_fixed_noise(self):
        assert FixedNoise(3.0)(10.0) == 3.0

    def test_fixed_noise_outside_range(self):
        with pytest.raises(ValueError):
            FixedNoise(10.0)(10.0)

    def test_fixed_noise_negative(self):
        with pytest.raises(ValueError):
            FixedNoise(-1.0)
