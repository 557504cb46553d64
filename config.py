"""
Constants and configuration for the changepoint model resolver.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os

from pydantic import field_validator
from pydantic_settings import BaseSettings


CPMODEL_ANNOUNCE_MODEL: bool = os.getenv("CPMODEL_ANNOUNCE_MODEL", "true").lower() in ("1", "true", "yes")
CPMODEL_CHANGING_TOKEN: str = os.getenv("CPMODEL_CHANGING_TOKEN", "?")
CPMODEL_DEFAULT_ALGORITHM: str = os.getenv("CPMODEL_DEFAULT_ALGORITHM", "single_penalty").lower()
CPMODEL_LOG_LEVEL: str = os.getenv("CPMODEL_LOG_LEVEL", "INFO").upper()
CPMODEL_HOST: str = os.getenv("CPMODEL_HOST", "0.0.0.0")
CPMODEL_PORT: int = int(os.getenv("CPMODEL_PORT", "4323"))

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

ALGORITHM_SINGLE_PENALTY = "single_penalty"
ALGORITHM_RANGE = "range_search"
ALGORITHM_BINARY_SEGMENTATION = "binary_segmentation"


class Settings(BaseSettings):
    # emit "Changepoint distribution is ..." on every successful resolution
    announce_model: bool = CPMODEL_ANNOUNCE_MODEL
    changing_token: str = CPMODEL_CHANGING_TOKEN
    default_algorithm: str = CPMODEL_DEFAULT_ALGORITHM

    log_level: str = CPMODEL_LOG_LEVEL
    host: str = CPMODEL_HOST
    port: int = CPMODEL_PORT

    @field_validator("changing_token", mode="before")
    @classmethod
    def validate_changing_token(cls, v: str) -> str:
        value = str(v or "").strip()
        if not value or any(ch in value for ch in "(),= \t"):
            raise ValueError(f"Unusable changing token: {v!r}")
        return value

    @field_validator("default_algorithm", mode="before")
    @classmethod
    def validate_default_algorithm(cls, v: str) -> str:
        value = str(v or "").strip().lower()
        if value not in {ALGORITHM_SINGLE_PENALTY, ALGORITHM_RANGE, ALGORITHM_BINARY_SEGMENTATION}:
            raise ValueError(f"Unsupported default algorithm: {value!r}")
        return value

    model_config = {
        "env_prefix": "CPMODEL_",
        "extra": "ignore",
    }


settings = Settings()
