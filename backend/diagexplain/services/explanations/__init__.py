from __future__ import annotations

"""
Explanation service package.

This package provides:
- Template resolution against the rule table (resolver.py)
- Configuration-driven shaping of a selected template (shaper.py)
- The classify -> resolve -> shape pipeline (engine.py)
- Markdown / plain-text rendering (render.py)
"""

from .engine import ExplanationEngine, ExplanationResult  # noqa: F401
from .render import format_fallback_markdown, format_markdown, format_text  # noqa: F401
from .resolver import matching_rules, resolve, resolve_rule  # noqa: F401
from .shaper import shape  # noqa: F401
