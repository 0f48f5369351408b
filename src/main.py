"""Engine bootstrap for the presentation layer that embeds SupplyGuard."""

import structlog

from src.config import settings
from src.domains.risk.config import RiskConfig
from src.domains.risk.noise import SeededNoise
from src.domains.risk.scorer import RiskScorer
from src.shared.logging import setup_logging

logger = structlog.get_logger()


def build_scorer(config: RiskConfig | None = None) -> RiskScorer:
    """Build a scorer from environment thresholds and the configured seed."""
    return RiskScorer(
        config=config or RiskConfig.from_env(),
        noise=SeededNoise(settings.noise_seed),
    )


async def startup() -> RiskScorer:
    """Configure logging, create tables, and return a ready scorer."""
    setup_logging(settings.log_level, json_logs=settings.log_json)

    logger.info(
        "supplyguard_starting",
        app_name=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
    )

    from src.db.database import init_db

    await init_db()
    return build_scorer()
