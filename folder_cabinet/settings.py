"""Pydantic settings for the folder cabinet demo and logging."""

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CabinetSettings(BaseSettings):
    """Settings read from FOLDER_CABINET_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="FOLDER_CABINET_")

    log_level: str = Field(
        "INFO",
        description="Root logger level name (DEBUG, INFO, WARNING, ...).",
    )

    log_dir: Path = Field(
        Path("./logs"),
        description="Directory for the rotating log file.",
    )

    log_to_file: bool = Field(
        False,
        description="Also write logs to a rotating file in log_dir.",
    )

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level
