# backend/diagexplain/api/explain.py
from __future__ import annotations

from fastapi import APIRouter

from diagexplain import schemas
from diagexplain.config import get_settings
from diagexplain.models import ExplanationConfig
from diagexplain.services.diagnostics.capture import normalize_diagnostic
from diagexplain.services.explanations import (
    ExplanationEngine,
    format_fallback_markdown,
    format_markdown,
    format_text,
)
from diagexplain.services.rules import get_rule_table
from diagexplain.services.statsig_client import log_explanation
from diagexplain.services.tracing import logging_trace

router = APIRouter(tags=["explain"])


def _engine() -> ExplanationEngine:
    settings = get_settings()
    return ExplanationEngine(
        get_rule_table(),
        trace=logging_trace if settings.trace_resolution else None,
    )


@router.post("/explain", response_model=schemas.ExplainResponse)
def explain_diagnostic(payload: schemas.ExplainRequest) -> schemas.ExplainResponse:
    """
    Classify a diagnostic, pick the best rule and shape its explanation.

    When nothing explains the diagnostic, `explained` is false, `text` is
    null and `markdown` carries a fallback that shows the original message.
    """
    config = ExplanationConfig.from_settings(get_settings())
    if payload.config is not None:
        config = payload.config.merge(config)

    diagnostic = normalize_diagnostic(payload.diagnostic)
    result = _engine().explain(diagnostic, config)
    log_explanation(result)

    classified = result.diagnostic
    text = None
    if result.explanation is not None:
        markdown = format_markdown(result.explanation, original_message=classified.raw_message)
        text = format_text(result.explanation)
    else:
        markdown = format_fallback_markdown(classified)

    return schemas.ExplainResponse(
        language=classified.language,
        error_type=classified.error_type,
        explained=result.explained,
        reason=result.reason,
        explanation=(
            schemas.ExplanationRead.from_template(result.explanation)
            if result.explanation is not None
            else None
        ),
        rule=schemas.RuleRead.from_rule(result.rule) if result.rule is not None else None,
        markdown=markdown,
        text=text,
        original_message=classified.raw_message,
    )


@router.post("/classify", response_model=schemas.ClassifyResponse)
def classify_diagnostic(payload: schemas.DiagnosticIn) -> schemas.ClassifyResponse:
    classified = _engine().classify(normalize_diagnostic(payload))
    return schemas.ClassifyResponse(
        language=classified.language,
        error_type=classified.error_type,
        error_code=classified.error_code,
        symbol=classified.symbol,
    )
