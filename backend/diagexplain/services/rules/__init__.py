from __future__ import annotations

"""backend/diagexplain/services/rules/__init__.py

Process-wide rule table registry.

The table is built on first use from the built-in catalog plus the optional
JSON rule file named by `Settings.extra_rules_path`, and is never edited in
place. `register_rules` validates new definitions, builds a new table with
them appended, and swaps the handle in under a lock; readers simply take
whatever handle is current.
"""

import logging
import threading
from typing import Any, Iterable, List, Mapping

from diagexplain.config import get_settings
from diagexplain.models import Rule
from diagexplain.schemas import RuleDefinition

from .catalog import BUILTIN_RULE_DEFINITIONS
from .loader import RuleDefinitionError, build_rules, load_rule_file  # noqa: F401
from .table import RuleTable  # noqa: F401

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_rule_table: RuleTable | None = None


def build_default_rule_table(extra_rules_path: str | None = None) -> RuleTable:
    """Build the built-in table, optionally extended from a JSON rule file."""
    rules: List[Rule] = build_rules(BUILTIN_RULE_DEFINITIONS, source="builtin")
    if extra_rules_path:
        rules.extend(load_rule_file(extra_rules_path))
    return RuleTable(rules)


def get_rule_table() -> RuleTable:
    global _rule_table
    table = _rule_table
    if table is not None:
        return table
    with _lock:
        if _rule_table is None:
            settings = get_settings()
            _rule_table = build_default_rule_table(settings.extra_rules_path)
            logger.info(
                "Rule table ready: %d rule(s) for %s",
                len(_rule_table),
                ", ".join(lang.value for lang in _rule_table.languages()),
            )
        return _rule_table


def register_rules(
    definitions: Iterable[RuleDefinition | Mapping[str, Any]],
) -> RuleTable:
    """Append rules to the current table and return the new handle.

    Raises:
        RuleDefinitionError: if any definition is invalid; the current
            table is left unchanged.
    """
    global _rule_table
    new_rules = build_rules(definitions, source="registration")
    current = get_rule_table()
    with _lock:
        current = _rule_table or current
        _rule_table = current.with_rules(*new_rules)
        logger.info("Registered %d rule(s); table now holds %d", len(new_rules), len(_rule_table))
        return _rule_table


def reset_rule_table() -> None:
    """Drop the cached table so the next access rebuilds it from settings."""
    global _rule_table
    with _lock:
        _rule_table = None
