from __future__ import annotations

"""backend/diagexplain/services/rules/loader.py

Turn declarative rule definitions into validated Rule objects.

Definitions come from three places:
- the built-in catalog (diagexplain.services.rules.catalog)
- an optional JSON rule file named by `Settings.extra_rules_path`
- registration requests made at runtime

Every path goes through `build_rules`, so a malformed definition (unknown
language or kind, invalid regular expression, confidence outside [0, 1])
fails at load time with RuleDefinitionError instead of surfacing per request.
"""

import json
import logging
import re
from pathlib import Path
from typing import Any, Iterable, List, Mapping

from pydantic import ValidationError

from diagexplain.models import ExplanationTemplate, Rule
from diagexplain.schemas import RuleDefinition

logger = logging.getLogger(__name__)


class RuleDefinitionError(ValueError):
    """A rule definition could not be turned into a Rule."""


def build_rule(definition: RuleDefinition) -> Rule:
    """Compile a validated definition into an immutable Rule."""
    template = definition.template
    return Rule(
        language=definition.language,
        error_types=tuple(dict.fromkeys(definition.error_type)),
        template=ExplanationTemplate(
            title=template.title,
            calm_message=template.calm_message,
            explanation=template.explanation,
            likely_causes=tuple(template.likely_causes),
            next_steps=tuple(template.next_steps),
            confidence_boost=template.confidence_boost,
            confidence=template.confidence,
        ),
        error_code_pattern=(
            re.compile(definition.error_code_pattern)
            if definition.error_code_pattern
            else None
        ),
        message_pattern=(
            re.compile(definition.message_pattern, re.IGNORECASE)
            if definition.message_pattern
            else None
        ),
        priority=definition.priority,
    )


def build_rules(
    definitions: Iterable[RuleDefinition | Mapping[str, Any]],
    *,
    source: str = "definitions",
) -> List[Rule]:
    """Validate and compile definitions, preserving their order.

    Raises:
        RuleDefinitionError: naming the source and index of the first bad entry.
    """
    rules: List[Rule] = []
    for index, raw in enumerate(definitions):
        try:
            definition = (
                raw if isinstance(raw, RuleDefinition) else RuleDefinition.model_validate(raw)
            )
        except ValidationError as exc:
            raise RuleDefinitionError(f"{source}[{index}]: {exc}") from exc
        rules.append(build_rule(definition))
    return rules


def load_rule_file(path: str | Path) -> List[Rule]:
    """Load rule definitions from a JSON file holding a list of objects."""
    rule_path = Path(path)
    try:
        payload = json.loads(rule_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise RuleDefinitionError(f"cannot read rule file '{rule_path}': {exc}") from exc
    except json.JSONDecodeError as exc:
        raise RuleDefinitionError(f"rule file '{rule_path}' is not valid JSON: {exc}") from exc

    if isinstance(payload, Mapping):
        # Accept {"rules": [...]} as well as a bare list.
        payload = payload.get("rules", [])
    if not isinstance(payload, list):
        raise RuleDefinitionError(f"rule file '{rule_path}' must contain a list of rules")

    rules = build_rules(payload, source=rule_path.name)
    logger.info("Loaded %d rule(s) from %s", len(rules), rule_path)
    return rules
