from __future__ import annotations

"""backend/diagexplain/services/explanations/engine.py

Classify -> resolve -> shape, as one call.

The engine is what an external renderer talks to. It holds a rule table
handle and an optional trace hook but no configuration: the shaping options
arrive with every call. When no explanation is produced the caller is
expected to show the original diagnostic message unchanged.
"""

import logging
from dataclasses import dataclass

from diagexplain.models import (
    ExplanationConfig,
    ExplanationTemplate,
    Language,
    NormalizedDiagnostic,
    Rule,
)
from diagexplain.services.diagnostics.classifier import classify
from diagexplain.services.explanations.resolver import resolve_rule
from diagexplain.services.explanations.shaper import shape
from diagexplain.services.rules.table import RuleTable
from diagexplain.services.tracing import TraceHook, emit

logger = logging.getLogger(__name__)

REASON_EXPLAINED = "explained"
REASON_NO_TEMPLATE = "no-template"
REASON_LANGUAGE_DISABLED = "language-disabled"
REASON_UNSUPPORTED_LANGUAGE = "unsupported-language"


@dataclass(frozen=True)
class ExplanationResult:
    """Outcome of one explain call."""

    diagnostic: NormalizedDiagnostic
    reason: str
    rule: Rule | None = None
    explanation: ExplanationTemplate | None = None

    @property
    def explained(self) -> bool:
        return self.explanation is not None


class ExplanationEngine:
    def __init__(self, table: RuleTable | None = None, *, trace: TraceHook | None = None) -> None:
        if table is None:
            # Imported here so that callers passing an explicit table never
            # touch settings or the process-wide registry.
            from diagexplain.services.rules import get_rule_table

            table = get_rule_table()
        self.table = table
        self.trace = trace

    def classify(self, diagnostic: NormalizedDiagnostic) -> NormalizedDiagnostic:
        """Return a copy of ``diagnostic`` carrying its classified error type."""
        return diagnostic.with_error_type(classify(diagnostic, trace=self.trace))

    def explain(
        self,
        diagnostic: NormalizedDiagnostic,
        config: ExplanationConfig,
    ) -> ExplanationResult:
        classified = self.classify(diagnostic)

        if Language.parse(classified.language) is None:
            return ExplanationResult(diagnostic=classified, reason=REASON_UNSUPPORTED_LANGUAGE)

        if not config.is_enabled(classified.language):
            emit(self.trace, "explain.language_disabled", language=classified.language)
            return ExplanationResult(diagnostic=classified, reason=REASON_LANGUAGE_DISABLED)

        if config.experimental:
            logger.debug("Experimental rule sources are not available; using the rule table only")

        rule = resolve_rule(classified, self.table, trace=self.trace)
        if rule is None:
            return ExplanationResult(diagnostic=classified, reason=REASON_NO_TEMPLATE)

        return ExplanationResult(
            diagnostic=classified,
            reason=REASON_EXPLAINED,
            rule=rule,
            explanation=shape(rule.template, config),
        )
