"""Register configuration, read from ``POS_*`` environment variables or ``.env``."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class Settings(BaseSettings):
    """register settings with environment variables support"""

    model_config = SettingsConfigDict(
        env_prefix="POS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # storage
    data_dir: Path = Field(default=_DEFAULT_DATA_DIR, description="directory holding the json stores")

    # register identity
    branch_id: str = Field(default="1", description="branch recorded on every transaction")
    register_id: str = Field(default="1", description="register whose cart the cli operates on")

    # pricing
    tax_rate: Decimal = Field(
        default=Decimal("0.10"), ge=0, le=1, description="flat tax rate as a fraction (0.10 = 10%)"
    )
    points_per_currency_unit: Decimal = Field(
        default=Decimal("10"), gt=0, description="post-tax spend that earns one loyalty point"
    )

    # logging
    log_level: str = Field(default="INFO", description="logging level")
    log_format: str = Field(default="console", description="log format: json or console")


def load_settings() -> Settings:
    return Settings()
