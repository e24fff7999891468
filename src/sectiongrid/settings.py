"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for section grid validation.

    Values are read from ``SECTIONGRID_``-prefixed environment variables and
    from a ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="SECTIONGRID_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"

    # Ceiling on rows * columns of the occupancy matrix; spans are untrusted.
    max_grid_cells: int = Field(10_000, gt=0)

    # Emit "row not fully covered" even when the coverage warning already
    # lists the same gaps.
    report_redundant_row_warnings: bool = True


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper())
