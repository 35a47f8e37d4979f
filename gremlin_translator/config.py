"""Runtime settings read from the environment.

A ``.env`` file in the working directory is loaded first when present;
variables already set in the environment take precedence over it.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

from .translator.dialects import Target

logger = logging.getLogger(__name__)

ENV_PREFIX = "GREMLIN_TRANSLATOR_"

_TRUTHY = {"1", "true", "yes", "on"}


class TranslatorSettings(BaseModel):
    """Defaults applied by the CLI and other callers of ``translate``.

    Attributes:
        source_name: Name of the root traversal source
        default_target: Target used when none is given
        strict_strategies: Check strategy names against the registry while translating
        log_level: Root logging level name
    """

    source_name: str = "g"
    default_target: Target = Target.LANGUAGE
    strict_strategies: bool = False
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


def _env(name: str) -> str | None:
    return os.getenv(f"{ENV_PREFIX}{name}")


def load_settings(env_file: Path | str | None = None) -> TranslatorSettings:
    """Build settings from ``.env`` and the process environment.

    Args:
        env_file: Explicit dotenv file; defaults to ``.env`` in the working directory
    """
    env_path = Path(env_file) if env_file is not None else Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(env_path)
        logger.debug(f"Loaded environment from {env_path}")

    values: dict[str, object] = {}
    if (source_name := _env("SOURCE_NAME")) is not None:
        values["source_name"] = source_name
    if (default_target := _env("DEFAULT_TARGET")) is not None:
        values["default_target"] = default_target.lower()
    if (strict := _env("STRICT_STRATEGIES")) is not None:
        values["strict_strategies"] = strict.strip().lower() in _TRUTHY
    if (log_level := _env("LOG_LEVEL")) is not None:
        values["log_level"] = log_level

    return TranslatorSettings(**values)
