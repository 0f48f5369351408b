"""Tests for application settings and risk thresholds."""

from src.config import Settings
from src.domains.risk.config import RiskConfig


class TestSettings:
    def test_default_settings(self):
        settings = Settings()
        assert settings.app_name == "supplyguard"
        assert settings.app_version == "0.1.0"
        assert settings.noise_seed is None

    def test_settings_from_env(self, monkeypatch):
        monkeypatch.setenv("APP_NAME", "test-app")
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.setenv("NOISE_SEED", "1234")
        settings = Settings()
        assert settings.app_name == "test-app"
        assert settings.debug is True
        assert settings.noise_seed == 1234

    def test_database_url_default(self):
        assert "postgresql+asyncpg" in Settings().database_url


class TestRiskConfig:
    def test_defaults(self):
        config = RiskConfig()
        assert config.invoice.deviation_ratio == 0.20
        assert config.invoice.high_amount == 50_000.0
        assert config.invoice.overbilling_multiplier == 1.5
        assert config.shipment.deviation_ratio == 0.15
        assert config.shipment.over_receipt_multiplier == 1.3
        assert config.transaction.very_high_amount == 100_000.0
        assert config.transaction.large_refund_amount == 10_000.0
        assert config.transaction.suspicious_score == 35
        assert config.transaction.fraudulent_score == 60
        assert config.invoice.flag_score == 50
        assert config.invoice.high_severity_score == 70
        assert config.alerts.deduplicate_open_alerts is False

    def test_instances_do_not_share_state(self):
        a = RiskConfig()
        b = RiskConfig()
        a.invoice.flag_score = 10
        assert b.invoice.flag_score == 50

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("RISK_INVOICE_HIGH_AMOUNT", "75000")
        monkeypatch.setenv("RISK_SHIPMENT_FLAG_SCORE", "60")
        monkeypatch.setenv("RISK_TRANSACTION_NOISE_MAX", "5")
        monkeypatch.setenv("RISK_DEDUPLICATE_OPEN_ALERTS", "true")
        config = RiskConfig.from_env()
        assert config.invoice.high_amount == 75_000.0
        assert config.shipment.flag_score == 60
        assert config.transaction.noise_max == 5.0
        assert config.alerts.deduplicate_open_alerts is True

    def test_every_threshold_has_an_override(self, monkeypatch):
        monkeypatch.setenv("RISK_INVOICE_OVERBILLING_MULTIPLIER", "2.0")
        monkeypatch.setenv("RISK_INVOICE_HIGH_SEVERITY_SCORE", "80")
        monkeypatch.setenv("RISK_SHIPMENT_OVER_RECEIPT_MULTIPLIER", "1.4")
        monkeypatch.setenv("RISK_SHIPMENT_HIGH_SEVERITY_SCORE", "75")
        monkeypatch.setenv("RISK_TRANSACTION_LARGE_REFUND_AMOUNT", "20000")
        monkeypatch.setenv("RISK_TRANSACTION_SUSPICIOUS_SCORE", "30")
        monkeypatch.setenv("RISK_TRANSACTION_FRAUDULENT_SCORE", "65")
        monkeypatch.setenv("RISK_RECENT_ALERTS_LIMIT", "10")
        config = RiskConfig.from_env()
        assert config.invoice.overbilling_multiplier == 2.0
        assert config.invoice.high_severity_score == 80
        assert config.shipment.over_receipt_multiplier == 1.4
        assert config.shipment.high_severity_score == 75
        assert config.transaction.large_refund_amount == 20_000.0
        assert config.transaction.suspicious_score == 30
        assert config.transaction.fraudulent_score == 65
        assert config.alerts.recent_alerts_limit == 10

    def test_unset_vars_keep_defaults(self, monkeypatch):
        monkeypatch.delenv("RISK_INVOICE_FLAG_SCORE", raising=False)
        monkeypatch.setenv("RISK_DEDUPLICATE_OPEN_ALERTS", "no")
        config = RiskConfig.from_env()
        assert config.invoice.flag_score == 50
        assert config.alerts.deduplicate_open_alerts is False
