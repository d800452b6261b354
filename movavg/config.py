from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import InvalidConfiguration


class PredictorConfig(BaseModel):
    method: str = Field(
        "moving_average",
        description="Selected algorithm key (extensible via movavg.core.methods)",
    )
    max_samples_used: int = Field(
        3, description="Largest window length tried by the window search (>= 3)"
    )

    @field_validator("max_samples_used")
    @classmethod
    def _check_max_samples_used(cls, v: int) -> int:
        if v < 3:
            raise ValueError("max_samples_used must be >= 3")
        return v


class EnvSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True


class AppConfig(BaseModel):
    env: EnvSettings
    predictor: PredictorConfig

    @staticmethod
    def load(config_path: Optional[Path] = None) -> "AppConfig":
        env = EnvSettings()  # loads from environment and .env

        predictor = PredictorConfig()
        if config_path is None:
            default_path = Path("config.yaml")
            config_path = default_path if default_path.exists() else None

        if config_path and Path(config_path).exists():
            with open(config_path, "r", encoding="utf-8") as fh:
                raw = yaml.safe_load(fh) or {}
            if not isinstance(raw, dict):
                raise InvalidConfiguration(f"Invalid {config_path}: expected a mapping")
            try:
                predictor = PredictorConfig(**raw)
            except ValidationError as ve:
                raise InvalidConfiguration(f"Invalid {config_path}: {ve}") from ve

        return AppConfig(env=env, predictor=predictor)


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load merged configuration from environment and optional YAML."""

    return AppConfig.load(config_path)
