"""Library configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    borderkit_env: str = "development"
    borderkit_log_level: str = "info"

    # Segments per quarter arc when flattening rounded corners
    curve_segments: int = 16

    # Decimal places in SVG path output
    svg_precision: int = 2

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
