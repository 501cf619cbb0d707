from __future__ import annotations

"""backend/diagexplain/services/explanations/resolver.py

Template selection for classified diagnostics.

Given a diagnostic whose `error_type` has been assigned, the resolver:
1. keeps rules for the diagnostic's language that handle its kind
2. drops rules whose error-code pattern does not match the diagnostic's code
   (only when both a pattern and a code are present; the code is trimmed and
   its language prefix upper-cased first, as the classifier does)
3. drops rules whose message pattern does not match the raw message
4. returns the highest-priority survivor, ties going to the earlier rule

No survivors means no explanation; that is a normal outcome, not an error.
"""

from typing import List

from diagexplain.models import ExplanationTemplate, NormalizedDiagnostic, Rule
from diagexplain.services.diagnostics.classifier import canonical_error_code
from diagexplain.services.rules.table import RuleTable
from diagexplain.services.tracing import TraceHook, emit


def _code_matches(rule: Rule, diagnostic: NormalizedDiagnostic) -> bool:
    if rule.error_code_pattern is None:
        return True
    code = canonical_error_code(diagnostic.language, diagnostic.error_code)
    if code is None:
        return True
    return rule.error_code_pattern.search(code) is not None


def _message_matches(rule: Rule, diagnostic: NormalizedDiagnostic) -> bool:
    if rule.message_pattern is None:
        return True
    return rule.message_pattern.search(diagnostic.raw_message or "") is not None


def matching_rules(
    diagnostic: NormalizedDiagnostic,
    table: RuleTable,
    *,
    trace: TraceHook | None = None,
) -> List[Rule]:
    """All rules compatible with the diagnostic, in table order."""
    survivors: List[Rule] = []
    for rule in table:
        if not rule.handles(diagnostic.language, diagnostic.error_type):
            continue
        code_ok = _code_matches(rule, diagnostic)
        message_ok = code_ok and _message_matches(rule, diagnostic)
        emit(
            trace,
            "resolve.candidate",
            title=rule.template.title,
            priority=rule.priority,
            code_matches=code_ok,
            message_matches=message_ok,
        )
        if message_ok:
            survivors.append(rule)
    return survivors


def resolve_rule(
    diagnostic: NormalizedDiagnostic,
    table: RuleTable,
    *,
    trace: TraceHook | None = None,
) -> Rule | None:
    candidates = matching_rules(diagnostic, table, trace=trace)
    if not candidates:
        emit(
            trace,
            "resolve.no_match",
            language=diagnostic.language,
            kind=diagnostic.error_type.value,
        )
        return None

    # sorted() is stable, so equal priorities keep table order.
    selected = sorted(candidates, key=lambda rule: rule.priority, reverse=True)[0]
    emit(
        trace,
        "resolve.selected",
        title=selected.template.title,
        priority=selected.priority,
        candidates=len(candidates),
    )
    return selected


def resolve(
    diagnostic: NormalizedDiagnostic,
    table: RuleTable,
    *,
    trace: TraceHook | None = None,
) -> ExplanationTemplate | None:
    rule = resolve_rule(diagnostic, table, trace=trace)
    return rule.template if rule is not None else None
