"""Configuration management for prop analytics.

Settings are loaded from PROP_-prefixed environment variables (or a .env file)
using pydantic-settings.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from nba_prop_analytics.analytics.models import OddsAssumptions, Period


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Optional settings (all have defaults):
    - PROP_BREAK_EVEN_PCT: Hit rate treated as zero edge (default: 50.0)
    - PROP_PAYOUT: Profit per unit staked on a win (default: 0.91, a -110 line)
    - PROP_DEFAULT_PERIOD: Games analysed when no period is given (default: 20)
    - PROP_LOG_MODE: "development" or "production" (default: development)
    - PROP_LOG_LEVEL: stdlib level name (default: WARNING)
    """

    break_even_pct: float = Field(
        default=50.0,
        ge=0.0,
        le=100.0,
        description="Assumed break-even hit rate in percent",
    )
    payout: float = Field(
        default=0.91,
        gt=0.0,
        description="Units won per unit staked on a winning bet",
    )
    default_period: Period = Field(default=Period.LAST_20)
    log_mode: str = Field(default="development")
    log_level: str = Field(default="WARNING")

    model_config = SettingsConfigDict(
        env_prefix="PROP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def odds_assumptions(self) -> OddsAssumptions:
        """Odds model built from the configured break-even rate and payout."""
        return OddsAssumptions(break_even_pct=self.break_even_pct, payout=self.payout)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Raises:
        ValidationError: If an environment value is invalid
    """
    return Settings()
