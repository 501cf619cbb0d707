# backend/diagexplain/main.py
from __future__ import annotations

"""
FastAPI application setup.

This module depends on:
- diagexplain.config.get_settings for configuration
- diagexplain.services.rules.get_rule_table to validate rules at startup
- diagexplain.api.api_router for route registration
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from diagexplain.api import api_router
from diagexplain.config import get_settings
from diagexplain.services.rules import get_rule_table
from diagexplain.services.statsig_client import shutdown_statsig

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
)


# ---- CORS ----

app.add_middleware(
    CORSMiddleware,
    allow_origins=[str(o) for o in settings.allowed_origins],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---- Routes ----

app.include_router(api_router, prefix="/api")


# ---- Lifecycle ----


@app.on_event("startup")
def on_startup() -> None:
    """
    Build and validate the rule table before serving requests.

    A malformed built-in or extra rule is a configuration defect, so it
    stops startup here instead of failing individual requests later.
    """
    table = get_rule_table()
    logger.info("%s started with %d rule(s)", settings.app_name, len(table))


@app.on_event("shutdown")
def on_shutdown() -> None:
    shutdown_statsig()


# ---- Healthcheck ----


@app.get("/health", tags=["health"])
def health() -> dict:
    return {"status": "ok"}
