"""
Entry point for the changepoint model resolver API server.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import sys

import uvicorn
from fastapi import FastAPI

from api.routes import router
from config import LOG_FORMAT, settings

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format=LOG_FORMAT,
    stream=sys.stdout,
)
log = logging.getLogger(__name__)


app = FastAPI(
    title="Changepoint Model Resolver",
    description="Resolves changepoint model expressions into segment cost descriptors and search invocations.",
    version="1.0.0",
)

app.include_router(router, prefix="/api/v1")


if __name__ == "__main__":
    log.info("Starting changepoint model resolver on %s:%d", settings.host, settings.port)
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        access_log=True,
    )
