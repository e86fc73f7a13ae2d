"""Runtime settings for consfold.

Settings are read from ``CONSFOLD_*`` environment variables at import time.
``LOG_LEVEL`` is also honoured when ``CONSFOLD_LOG_LEVEL`` is not set.
Operations look up ``consfold.config.settings`` on every call, so replacing
that attribute takes effect immediately.
"""

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

__all__ = ["Settings", "settings"]

ENV_PREFIX = "CONSFOLD_"
# Settings also read from the unprefixed variable when the prefixed one is unset
SHARED_VARIABLES = ("LOG_LEVEL",)


class Settings(BaseModel):
    LOG_LEVEL: str = Field(
        "INFO", description="Log level name for the consfold logger."
    )
    STRICT_APPEND: bool = Field(
        True,
        description=(
            "Require both append arguments to be Sequences. When False, append "
            "only rejects calls where neither argument is a Sequence."
        ),
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'")
        return level

    @classmethod
    def load(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        environ = os.environ if environ is None else environ

        values = {}
        for name in cls.model_fields:
            key = ENV_PREFIX + name
            if key in environ:
                values[name] = environ[key]
            elif name in SHARED_VARIABLES and name in environ:
                values[name] = environ[name]

        return cls(**values)


settings = Settings.load()
