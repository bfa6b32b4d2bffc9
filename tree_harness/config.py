"""Settings for a command line run."""

import logging
from typing import Literal

from pydantic import Field, field_validator

from tree_harness.models.base import Model

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class RunSettings(Model):
    """Validated options of the ``tree-harness`` command."""

    suite: str = Field(default="selftest", min_length=1, description="Suite key")
    output_format: Literal["text", "json"] = Field(
        default="text", description="Summary format printed on stdout"
    )
    log_level: str = Field(default="INFO", description="Harness log level")

    @field_validator("suite")
    @classmethod
    def _strip_suite(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("suite key must not be blank")
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def log_level_value(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level]
