"""Configuration management using Pydantic Settings"""

from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "revolving-sim"
    log_level: str = "INFO"

    # Server (PORT matches the static host's historical env var)
    host: str = "0.0.0.0"
    port: int = 8080
    static_dir: Path = Path("dist")

    # Display
    currency_symbol: str = "¥"

    # Scenario shown when the page first loads
    default_initial_balance: int = 300_000
    default_monthly_new_charge: int = 0
    default_monthly_repayment: int = 5_000
    default_annual_interest_rate: float = 18.0


settings = Settings()
