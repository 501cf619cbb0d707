from __future__ import annotations

"""
Markdown and plain-text rendering of explanations.

Every function here is pure: it takes an ExplanationTemplate (already
shaped) or a diagnostic and returns a string.
Hover panels, notifications and output channels are the caller's business.
"""

from typing import List

from diagexplain.models import ExplanationTemplate, NormalizedDiagnostic


def format_markdown(
    explanation: ExplanationTemplate,
    *,
    original_message: str | None = None,
) -> str:
    """
    Build the Markdown form of an explanation.

    When `original_message` is given it is appended after a rule so the
    reader can always see what the compiler actually said.
    """
    lines: List[str] = []

    lines.append(f"### {explanation.title}")
    lines.append("")

    if explanation.calm_message:
        lines.append(f"*{explanation.calm_message}*")
        lines.append("")
        lines.append("---")
        lines.append("")

    lines.append(explanation.explanation)
    lines.append("")

    if explanation.likely_causes:
        lines.append("**Why this happens:**")
        lines.extend(f"- {cause}" for cause in explanation.likely_causes)
        lines.append("")

    if explanation.next_steps:
        lines.append("**Try this:**")
        lines.extend(f"- {step}" for step in explanation.next_steps)
        lines.append("")

    if explanation.confidence_boost:
        lines.append("---")
        lines.append("")
        lines.append(f"*💡 {explanation.confidence_boost}*")
        lines.append("")

    if original_message is not None:
        lines.append("---")
        lines.append("")
        lines.append(f"**Original error:** {original_message}")
        lines.append("")

    return "\n".join(lines).rstrip("\n") + "\n"


def format_text(explanation: ExplanationTemplate) -> str:
    lines: List[str] = [explanation.title, ""]

    if explanation.calm_message:
        lines.extend([explanation.calm_message, ""])

    lines.extend([explanation.explanation, ""])

    if explanation.likely_causes:
        lines.append("Why this happens:")
        lines.extend(f"• {cause}" for cause in explanation.likely_causes)
        lines.append("")

    if explanation.next_steps:
        lines.append("Try this:")
        lines.extend(f"• {step}" for step in explanation.next_steps)
        lines.append("")

    return "\n".join(lines).rstrip("\n") + "\n"


def format_fallback_markdown(diagnostic: NormalizedDiagnostic) -> str:
    """Rendering used when no rule explains the diagnostic."""
    lines = [
        "### No explanation available yet",
        "",
        "No explanation is available yet for this error type.",
        "",
        f"**Error type:** {diagnostic.error_type.value}",
        "",
        f"**Original error:** {diagnostic.raw_message}",
    ]
    return "\n".join(lines) + "\n"
