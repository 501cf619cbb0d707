from __future__ import annotations

"""backend/diagexplain/services/explanations/shaper.py

Apply user-facing configuration to a selected explanation.

`shape` is pure: it always builds a new template and
never touches the one stored in the rule table.
"""

from dataclasses import replace

from diagexplain.models import ExplanationConfig, ExplanationTemplate, Verbosity

SHORT_MAX_CAUSES = 2
SHORT_MAX_STEPS = 3


def first_sentence(text: str) -> str:
    """Text up to the first period, with the period re-appended."""
    return text.split(".", 1)[0] + "."


def shape(template: ExplanationTemplate, config: ExplanationConfig) -> ExplanationTemplate:
    shaped = replace(template)

    if not config.enable_reassurance:
        shaped = replace(shaped, calm_message=None, confidence_boost=None)

    if config.verbosity == Verbosity.SHORT:
        shaped = replace(
            shaped,
            likely_causes=shaped.likely_causes[:SHORT_MAX_CAUSES],
            next_steps=shaped.next_steps[:SHORT_MAX_STEPS],
            explanation=first_sentence(shaped.explanation),
        )

    return shaped
