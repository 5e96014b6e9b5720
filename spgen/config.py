"""
Configuration for the Secure Password Generator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import pydantic
from pydantic import Field
from pydantic_settings import BaseSettings

from .exceptions import ConfigError

# Fixed length policy. The generator validates against these directly;
# they are not configurable.
MIN_LENGTH = 8
MAX_LENGTH = 16


class EnvSettings(BaseSettings):
    """Shell settings read from SPGEN_* environment variables"""

    log_level: str = "WARNING"
    log_format: Literal["text", "json"] = "text"
    sample_count: int = Field(default=5, ge=0)

    model_config = {"env_prefix": "SPGEN_", "case_sensitive": False, "extra": "ignore"}


@dataclass
class PasswordGenConfig:
    # Allowed password lengths, inclusive. Mirrors MIN_LENGTH / MAX_LENGTH
    # for display in the shell.
    min_length: int = MIN_LENGTH
    max_length: int = MAX_LENGTH

    # Sample passwords printed after the main result.
    sample_count: int = 5
    sample_length: int = 12

    # Logging: "json" for log collectors, "text" for terminals
    log_level: str = "WARNING"
    log_format: str = "text"

    @property
    def valid_range(self) -> tuple[int, int]:
        return self.min_length, self.max_length

    @classmethod
    def from_env(cls) -> "PasswordGenConfig":
        """
        Build a config from SPGEN_LOG_LEVEL, SPGEN_LOG_FORMAT and
        SPGEN_SAMPLE_COUNT. Malformed values raise ConfigError.
        """
        try:
            env = EnvSettings()
        except pydantic.ValidationError as exc:
            fields = sorted({
                "SPGEN_" + str(err["loc"][0]).upper() for err in exc.errors() if err["loc"]
            })
            raise ConfigError(fields, str(exc)) from exc

        return cls(
            log_level=env.log_level,
            log_format=env.log_format,
            sample_count=env.sample_count,
        )


# Default configuration instance you can import elsewhere
DEFAULT_CONFIG = PasswordGenConfig()
