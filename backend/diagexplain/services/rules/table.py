from __future__ import annotations

"""backend/diagexplain/services/rules/table.py

Ordered, immutable collection of explanation rules.

The table performs no matching; the resolver does. What the table owns is
declaration order: the resolver breaks priority ties by table position, so
rules are kept exactly in the order they were supplied and new rules are
only ever appended. Registering rules produces a new table handle, leaving
existing handles (and anyone currently reading them) untouched.
"""

from typing import Iterable, Iterator, List, Sequence, Tuple

from diagexplain.models import Language, Rule


class RuleTable:
    """Validated, append-only rule table."""

    def __init__(self, rules: Iterable[Rule] = ()) -> None:
        self._rules: Tuple[Rule, ...] = tuple(rules)
        for rule in self._rules:
            _validate(rule)

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def all_rules(self) -> Sequence[Rule]:
        return self._rules

    def rules_for_language(self, language: Language | str) -> List[Rule]:
        lang = language if isinstance(language, Language) else Language.parse(language)
        return [rule for rule in self._rules if rule.language is lang]

    def languages(self) -> List[Language]:
        """Languages with at least one rule, in first-declaration order."""
        return list(dict.fromkeys(rule.language for rule in self._rules))

    def with_rules(self, *rules: Rule) -> "RuleTable":
        """Return a new table with ``rules`` appended after the existing ones."""
        return RuleTable(self._rules + tuple(rules))


def _validate(rule: Rule) -> None:
    if not isinstance(rule.language, Language):
        raise ValueError(f"rule language {rule.language!r} is not a supported language")
    if not rule.error_types:
        raise ValueError(f"rule '{rule.template.title}' handles no error kinds")
    if not 0.0 <= rule.template.confidence <= 1.0:
        raise ValueError(
            f"rule '{rule.template.title}' has confidence {rule.template.confidence} outside [0, 1]"
        )
