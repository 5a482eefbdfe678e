from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator


class Settings(BaseModel):
    # Logging
    log_level: str = Field(default="INFO", description="Root log level for configure_logging")
    log_linear_components: bool = Field(default=True)

    # Reproducibility
    global_seed: int = Field(default=1337)

    # Limits
    max_variables: int = Field(default=24, ge=1, le=40)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {v}")
        return v


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    # Load .env if present
    load_dotenv()

    def _bool(name: str, default: bool) -> bool:
        v = os.getenv(name)
        if v is None:
            return default
        return v.strip().lower() in {"1", "true", "yes", "y", "on"}

    return Settings(
        log_level=os.getenv("BFLAB_LOG_LEVEL", "INFO"),
        log_linear_components=_bool("BFLAB_LOG_LINEAR_COMPONENTS", True),
        global_seed=int(os.getenv("BFLAB_GLOBAL_SEED", "1337")),
        max_variables=int(os.getenv("BFLAB_MAX_VARIABLES", "24")),
    )


def configure_logging(settings: Optional[Settings] = None) -> None:
    settings = settings or load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
