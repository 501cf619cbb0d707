"""Tests for template resolution against the rule table."""

import pytest

from diagexplain.models import ErrorKind
from diagexplain.services.explanations.resolver import matching_rules, resolve, resolve_rule
from diagexplain.services.rules.table import RuleTable
from tests._factories import diagnostic, make_rule


class TestBuiltinScenarios:
    def test_typescript_possibly_null(self, builtin_table):
        d = diagnostic(
            "Object is possibly 'null'.",
            code="2531",
            kind=ErrorKind.NULL_OR_UNDEFINED_REFERENCE,
        )
        template = resolve(d, builtin_table)
        assert template is not None
        assert template.title == "You're trying to use something that might not exist yet"

    def test_prefixed_code_matches_same_rule(self, builtin_table):
        d = diagnostic("x", code="TS2531", kind=ErrorKind.NULL_OR_UNDEFINED_REFERENCE)
        assert resolve(d, builtin_table).title == (
            "You're trying to use something that might not exist yet"
        )

    def test_java_cannot_find_symbol_without_code(self, builtin_table):
        d = diagnostic(
            "Main.java:5: error: cannot find symbol",
            language="java",
            kind=ErrorKind.UNDECLARED_IDENTIFIER,
        )
        rule = resolve_rule(d, builtin_table)
        assert rule is not None
        assert rule.priority == 10
        assert rule.template.title == "Java can't find this symbol"

    def test_unknown_kind_falls_to_catch_all(self, builtin_table):
        d = diagnostic("some novel message", code="9999", kind=ErrorKind.UNKNOWN)
        rule = resolve_rule(d, builtin_table)
        assert rule is not None
        assert rule.is_catch_all
        assert rule.template.confidence == 0.5
        assert rule.template.title == "Something needs attention here"

    def test_unrecognised_language_has_no_template(self, builtin_table):
        d = diagnostic("null", language="cobol", kind=ErrorKind.UNKNOWN)
        assert resolve(d, builtin_table) is None

    def test_java_unknown_kind_has_no_template(self, builtin_table):
        d = diagnostic("something odd", language="java", kind=ErrorKind.UNKNOWN)
        assert resolve(d, builtin_table) is None

    def test_message_pattern_is_case_insensitive(self, builtin_table):
        d = diagnostic("java.lang.nullpointerexception", language="java", kind=ErrorKind.NULL_REFERENCE)
        assert resolve(d, builtin_table).title == "You're accessing something that's null"


class TestPatternFiltering:
    def test_code_pattern_rejects_other_codes(self, builtin_table):
        d = diagnostic("Object is possibly 'null'.", code="2322", kind=ErrorKind.NULL_OR_UNDEFINED_REFERENCE)
        assert resolve(d, builtin_table) is None

    @pytest.mark.parametrize("code", ["ts2531", " TS2531 ", "Ts2531", "2531\t"])
    def test_code_is_canonicalised_before_matching(self, builtin_table, code):
        d = diagnostic("Object is possibly 'null'.", code=code, kind=ErrorKind.NULL_OR_UNDEFINED_REFERENCE)
        assert resolve(d, builtin_table).title == (
            "You're trying to use something that might not exist yet"
        )

    def test_blank_code_counts_as_missing(self, builtin_table):
        d = diagnostic("x", code="   ", kind=ErrorKind.TYPE_MISMATCH)
        assert resolve(d, builtin_table).title == "The types don't match up here"

    def test_missing_code_skips_code_filter(self, builtin_table):
        d = diagnostic("Object is possibly 'null'.", code=None, kind=ErrorKind.NULL_OR_UNDEFINED_REFERENCE)
        assert resolve(d, builtin_table).title == (
            "You're trying to use something that might not exist yet"
        )

    def test_code_pattern_uses_search_not_fullmatch(self):
        table = RuleTable([make_rule(error_code_pattern="23", title="partial")])
        d = diagnostic("x", code="TS2322", kind=ErrorKind.TYPE_MISMATCH)
        assert resolve(d, table).title == "partial"

    def test_message_pattern_rejects_non_matching_message(self):
        table = RuleTable([make_rule(message_pattern="is not assignable")])
        d = diagnostic("something else entirely", kind=ErrorKind.TYPE_MISMATCH)
        assert resolve(d, table) is None

    def test_kind_must_be_listed(self):
        table = RuleTable([make_rule(error_type=["TypeMismatch", "SyntaxError"], title="multi")])
        assert resolve(diagnostic("x", kind=ErrorKind.SYNTAX_ERROR), table).title == "multi"
        assert resolve(diagnostic("x", kind=ErrorKind.MISSING_IMPORT), table) is None


class TestPriority:
    def test_higher_priority_wins_regardless_of_order(self):
        low = make_rule(priority=1, title="low")
        high = make_rule(priority=10, title="high")
        d = diagnostic("x", kind=ErrorKind.TYPE_MISMATCH)

        assert resolve(d, RuleTable([low, high])).title == "high"
        assert resolve(d, RuleTable([high, low])).title == "high"

    def test_ties_go_to_the_earlier_rule(self):
        first = make_rule(priority=5, title="first")
        second = make_rule(priority=5, title="second")
        d = diagnostic("x", kind=ErrorKind.TYPE_MISMATCH)

        assert resolve(d, RuleTable([first, second])).title == "first"
        assert resolve(d, RuleTable([second, first])).title == "second"

    def test_specific_rule_beats_catch_all(self):
        catch_all = make_rule(priority=1, title="catch-all")
        specific = make_rule(priority=10, message_pattern="assignable", title="specific")
        table = RuleTable([catch_all, specific])

        assert resolve(diagnostic("not assignable", kind=ErrorKind.TYPE_MISMATCH), table).title == "specific"
        assert resolve(diagnostic("other", kind=ErrorKind.TYPE_MISMATCH), table).title == "catch-all"


def test_matching_rules_keeps_table_order():
    rules = [make_rule(priority=p, title=f"r{p}") for p in (3, 9, 1)]
    d = diagnostic("x", kind=ErrorKind.TYPE_MISMATCH)
    assert [r.template.title for r in matching_rules(d, RuleTable(rules))] == ["r3", "r9", "r1"]


def test_resolve_returns_stored_template_unmodified(builtin_table):
    d = diagnostic("x", code="2322", kind=ErrorKind.TYPE_MISMATCH)
    rule = resolve_rule(d, builtin_table)
    assert resolve(d, builtin_table) is rule.template
    assert len(rule.template.likely_causes) == 4


def test_trace_records_selection(builtin_table):
    events = []
    d = diagnostic("x", code="2322", kind=ErrorKind.TYPE_MISMATCH)
    resolve(d, builtin_table, trace=lambda event, **fields: events.append((event, fields)))

    assert events[-1][0] == "resolve.selected"
    assert events[-1][1]["title"] == "The types don't match up here"
