"""Tests for Markdown and text rendering."""

from diagexplain.models import ErrorKind, ExplanationConfig
from diagexplain.services.explanations import (
    format_fallback_markdown,
    format_markdown,
    format_text,
    shape,
)
from tests._factories import diagnostic, make_rule


def test_markdown_sections_in_order():
    markdown = format_markdown(make_rule().template, original_message="TS2322: boom")

    order = [
        "### Test explanation",
        "*Stay calm.*",
        "First sentence here.",
        "**Why this happens:**",
        "- cause one",
        "**Try this:**",
        "- step five",
        "*💡 You've got this.*",
        "**Original error:** TS2322: boom",
    ]
    positions = [markdown.index(part) for part in order]
    assert positions == sorted(positions)
    assert markdown.endswith("\n")


def test_markdown_omits_missing_parts():
    template = shape(make_rule().template, ExplanationConfig(enable_reassurance=False))
    markdown = format_markdown(template)

    assert "Stay calm." not in markdown
    assert "💡" not in markdown
    assert "**Original error:**" not in markdown


def test_text_uses_bullets_without_markup():
    text = format_text(make_rule().template)
    assert text.startswith("Test explanation\n")
    assert "• cause one" in text
    assert "Try this:" in text
    assert "**" not in text


def test_fallback_shows_kind_and_original_message():
    d = diagnostic("something odd", language="java", kind=ErrorKind.UNKNOWN)
    markdown = format_fallback_markdown(d)

    assert markdown.startswith("### No explanation available yet")
    assert "**Error type:** Unknown" in markdown
    assert "**Original error:** something odd" in markdown
