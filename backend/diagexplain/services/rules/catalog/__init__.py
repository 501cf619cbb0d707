# backend/diagexplain/services/rules/catalog/__init__.py
from __future__ import annotations

"""
Built-in rule catalog.

Rules are plain declarative dictionaries (the same shape a JSON rule file
uses) and are validated by diagexplain.services.rules.loader. Order matters:
the resolver breaks priority ties by position in this list.
"""

from .java import JAVA_RULES
from .javascript import JAVASCRIPT_RULES
from .typescript import TYPESCRIPT_RULES

BUILTIN_RULE_DEFINITIONS: list[dict] = [
    *TYPESCRIPT_RULES,
    *JAVA_RULES,
    *JAVASCRIPT_RULES,
]
