"""Lightweight Statsig integration for explanation events."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from statsig import StatsigEvent, StatsigOptions, StatsigUser
from statsig.statsig_server import StatsigServer

from diagexplain.config import get_settings

if TYPE_CHECKING:
    from diagexplain.services.explanations.engine import ExplanationResult

logger = logging.getLogger(__name__)


class _StatsigAdapter:
    def __init__(self, secret_key: str | None, environment: str):
        self._client: StatsigServer | None = None
        if not secret_key:
            return

        try:
            client = StatsigServer()
            client.initialize(secret_key, StatsigOptions(environment={"tier": environment}))
            self._client = client
        except Exception as exc:  # noqa: BLE001
            logger.warning("Statsig initialization failed: %s", exc)
            self._client = None

    @property
    def enabled(self) -> bool:
        return self._client is not None

    def log_event(
        self,
        *,
        user_id: str,
        event_name: str,
        value: float | int | str | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> None:
        if not self._client:
            return

        try:
            self._client.log_event(
                StatsigEvent(StatsigUser(user_id), event_name, value=value, metadata=metadata)
            )
        except Exception as exc:  # noqa: BLE001
            logger.debug("Statsig event failed: %s", exc)

    def shutdown(self) -> None:
        if not self._client:
            return

        try:
            self._client.shutdown()
        except Exception as exc:  # noqa: BLE001
            logger.debug("Statsig shutdown failed: %s", exc)


_statsig_client: _StatsigAdapter | None = None


def get_statsig_client() -> _StatsigAdapter:
    global _statsig_client
    if _statsig_client is None:
        settings = get_settings()
        _statsig_client = _StatsigAdapter(
            settings.statsig_server_secret, settings.environment
        )
    return _statsig_client


def log_explanation_event(
    event_name: str,
    *,
    user_id: str = "diagexplain",
    value: float | int | str | None = None,
    metadata: dict[str, Any] | None = None,
) -> None:
    client = get_statsig_client()
    client.log_event(user_id=user_id, event_name=event_name, value=value, metadata=metadata)


def log_explanation(result: "ExplanationResult") -> None:
    """Record one explain call; a no-op unless a Statsig secret is configured."""
    diagnostic = result.diagnostic
    log_explanation_event(
        "diagnostic_explained" if result.explained else "diagnostic_unexplained",
        value=diagnostic.error_type.value,
        metadata={
            "language": diagnostic.language,
            "error_code": diagnostic.error_code,
            "reason": result.reason,
            "rule_title": result.rule.template.title if result.rule else None,
        },
    )


def shutdown_statsig() -> None:
    client = get_statsig_client()
    client.shutdown()
