from __future__ import annotations

"""backend/diagexplain/services/diagnostics/classifier.py

Centralized error classification for compiler/runtime diagnostics.

This module looks at a NormalizedDiagnostic (language, message, error code)
and assigns one ErrorKind from a closed vocabulary.

The classification is:
- deterministic (no randomness)
- text-based (pattern matching against known error signatures and codes)
- language-aware (TypeScript, JavaScript, Java), with a generic fallback

Language matchers are ordered lists of candidate checks. The first kind whose
check succeeds wins, so the order of each list is part of its behaviour:
several messages satisfy more than one kind's substrings.

`classify` never raises; at minimum it returns ErrorKind.UNKNOWN.
"""

from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional, Tuple

from diagexplain.models import ErrorKind, Language, NormalizedDiagnostic
from diagexplain.services.tracing import TraceHook, emit


def _text(value: Optional[str]) -> str:
    return (value or "").strip()


def _lower(value: Optional[str]) -> str:
    return _text(value).lower()


def _contains_any(haystack: str, needles: Tuple[str, ...]) -> bool:
    return any(n in haystack for n in needles)


@dataclass(frozen=True)
class KindCheck:
    """One candidate kind: known codes, code prefixes, or message substrings.

    Any single hit is enough. Codes are compared after the language matcher
    has normalized them; message substrings are case-sensitive.
    """

    kind: ErrorKind
    codes: FrozenSet[str] = frozenset()
    code_prefixes: Tuple[str, ...] = ()
    needles: Tuple[str, ...] = ()

    def matches(self, code: str, message: str) -> bool:
        if code:
            if code in self.codes:
                return True
            if self.code_prefixes and code.startswith(self.code_prefixes):
                return True
        return _contains_any(message, self.needles)


@dataclass(frozen=True)
class LanguageMatcher:
    language: Language
    checks: Tuple[KindCheck, ...]
    code_prefix: str | None = None

    def canonical_code(self, error_code: Optional[str]) -> str:
        """Trim the code and spell its language prefix the way rules expect ("ts2531" -> "TS2531")."""
        code = _text(error_code)
        if self.code_prefix and code.upper().startswith(self.code_prefix):
            code = self.code_prefix + code[len(self.code_prefix):]
        return code

    def normalize_code(self, error_code: Optional[str]) -> str:
        """Strip the language's code prefix so "TS2531" and "2531" compare equal."""
        code = self.canonical_code(error_code)
        if self.code_prefix and code.startswith(self.code_prefix):
            code = code[len(self.code_prefix):]
        return code

    def match(self, diagnostic: NormalizedDiagnostic) -> ErrorKind:
        code = self.normalize_code(diagnostic.error_code)
        message = diagnostic.raw_message or ""
        for check in self.checks:
            if check.matches(code, message):
                return check.kind
        return ErrorKind.UNKNOWN


TYPESCRIPT_MATCHER = LanguageMatcher(
    language=Language.TYPESCRIPT,
    code_prefix="TS",
    checks=(
        KindCheck(
            ErrorKind.NULL_OR_UNDEFINED_REFERENCE,
            codes=frozenset({"2531", "2532", "18047"}),
            needles=("possibly null", "possibly undefined"),
        ),
        KindCheck(
            ErrorKind.TYPE_MISMATCH,
            codes=frozenset({"2322", "2345", "2339"}),
            needles=("not assignable to type", "does not exist on type"),
        ),
        KindCheck(
            ErrorKind.UNDECLARED_IDENTIFIER,
            codes=frozenset({"2304", "2305"}),
            needles=("Cannot find name",),
        ),
        KindCheck(
            ErrorKind.MISSING_IMPORT,
            codes=frozenset({"2307", "2306"}),
            needles=("Cannot find module",),
        ),
        KindCheck(
            ErrorKind.ASYNC_AWAIT_ISSUE,
            codes=frozenset({"2794"}),
            needles=("Promise",),
        ),
        # TS1xxx codes are all parser diagnostics.
        KindCheck(
            ErrorKind.SYNTAX_ERROR,
            code_prefixes=("1",),
            needles=("expected",),
        ),
    ),
)

JAVASCRIPT_MATCHER = LanguageMatcher(
    language=Language.JAVASCRIPT,
    checks=(
        KindCheck(
            ErrorKind.NULL_OR_UNDEFINED_REFERENCE,
            needles=("Cannot read propert", "undefined", "null"),
        ),
        KindCheck(
            ErrorKind.UNDECLARED_IDENTIFIER,
            needles=("is not defined", "ReferenceError"),
        ),
        KindCheck(
            ErrorKind.TYPE_MISMATCH,
            needles=("is not a function", "TypeError"),
        ),
        KindCheck(
            ErrorKind.SYNTAX_ERROR,
            needles=("SyntaxError", "Unexpected"),
        ),
    ),
)

JAVA_MATCHER = LanguageMatcher(
    language=Language.JAVA,
    checks=(
        KindCheck(ErrorKind.NULL_REFERENCE, needles=("NullPointerException",)),
        KindCheck(ErrorKind.UNDECLARED_IDENTIFIER, needles=("cannot find symbol",)),
        KindCheck(
            ErrorKind.TYPE_MISMATCH,
            needles=("incompatible types", "cannot be converted to"),
        ),
        KindCheck(ErrorKind.MISSING_IMPORT, needles=("cannot be resolved to a type",)),
        KindCheck(ErrorKind.OUT_OF_BOUNDS, needles=("ArrayIndexOutOfBoundsException",)),
        KindCheck(
            ErrorKind.SYNTAX_ERROR,
            needles=("expected", "illegal start", "not a statement"),
        ),
    ),
)

LANGUAGE_MATCHERS: Dict[Language, LanguageMatcher] = {
    matcher.language: matcher
    for matcher in (TYPESCRIPT_MATCHER, JAVASCRIPT_MATCHER, JAVA_MATCHER)
}


def canonical_error_code(language: str, error_code: Optional[str]) -> str | None:
    """The form of `error_code` that rule code patterns are matched against.

    Whitespace is trimmed and a language prefix is upper-cased, so " ts2531 "
    reaches the same rules as "TS2531". Empty codes become None.
    """
    parsed = Language.parse(language)
    matcher = LANGUAGE_MATCHERS.get(parsed) if parsed is not None else None
    code = matcher.canonical_code(error_code) if matcher is not None else _text(error_code)
    return code or None


# Coarse cues over the lower-cased message. Order matters: a message
# mentioning both "type" and "not found" is a TypeMismatch.
GENERIC_CHECKS: Tuple[KindCheck, ...] = (
    KindCheck(ErrorKind.NULL_OR_UNDEFINED_REFERENCE, needles=("null", "undefined")),
    KindCheck(ErrorKind.TYPE_MISMATCH, needles=("type", "mismatch")),
    KindCheck(ErrorKind.UNDECLARED_IDENTIFIER, needles=("not found", "cannot find")),
    KindCheck(ErrorKind.MISSING_IMPORT, needles=("import", "module")),
    KindCheck(ErrorKind.SYNTAX_ERROR, needles=("syntax", "expected")),
)


def classify_generic(message: Optional[str]) -> ErrorKind:
    """Fallback classification from coarse lexical cues."""
    msg = _lower(message)
    for check in GENERIC_CHECKS:
        if _contains_any(msg, check.needles):
            return check.kind
    return ErrorKind.UNKNOWN


def classify(
    diagnostic: NormalizedDiagnostic,
    *,
    trace: TraceHook | None = None,
) -> ErrorKind:
    """Classify a diagnostic into an ErrorKind.

    Language-specific matchers take precedence; the generic matcher only runs
    when the language has no matcher or its matcher found nothing. A language
    tag outside the supported vocabulary is always Unknown.
    """
    language = Language.parse(diagnostic.language)
    if language is None:
        emit(trace, "classify.unsupported_language", language=diagnostic.language)
        return ErrorKind.UNKNOWN

    matcher = LANGUAGE_MATCHERS.get(language)
    if matcher is not None:
        kind = matcher.match(diagnostic)
        emit(
            trace,
            "classify.language_match",
            language=language.value,
            error_code=diagnostic.error_code,
            normalized_code=matcher.normalize_code(diagnostic.error_code),
            kind=kind.value,
        )
        if kind is not ErrorKind.UNKNOWN:
            return kind

    kind = classify_generic(diagnostic.raw_message)
    emit(trace, "classify.generic_match", language=language.value, kind=kind.value)
    return kind
