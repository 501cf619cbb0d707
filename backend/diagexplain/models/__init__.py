# backend/diagexplain/models/__init__.py
from __future__ import annotations

"""
Core domain models for the explanation backend.

It is used by:
- diagexplain.schemas (for enum references and conversions)
- the rule table, classifier, resolver and shaper services
- API routes

Models:
- Language / ErrorKind / Severity / Verbosity: closed vocabularies
- NormalizedDiagnostic: one compiler/linter diagnostic, language-neutral
- ExplanationTemplate: the human-friendly payload handed to renderers
- Rule: language + error kinds + optional patterns + priority + template
- ExplanationConfig: per-request shaping options
"""

import enum
import re
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, FrozenSet, Optional, Tuple

if TYPE_CHECKING:
    from diagexplain.config import Settings


class Language(str, enum.Enum):
    TYPESCRIPT = "typescript"
    JAVASCRIPT = "javascript"
    JAVA = "java"
    PYTHON = "python"
    GO = "go"
    RUST = "rust"
    CPP = "cpp"
    C = "c"
    CSHARP = "csharp"

    @classmethod
    def parse(cls, tag: str | None) -> Optional["Language"]:
        """Return the member for ``tag`` or None when it is not in the vocabulary."""
        if not tag:
            return None
        try:
            return cls(tag.strip().lower())
        except ValueError:
            return None


class ErrorKind(str, enum.Enum):
    NULL_OR_UNDEFINED_REFERENCE = "NullOrUndefinedReference"
    NULL_REFERENCE = "NullReference"
    TYPE_MISMATCH = "TypeMismatch"
    UNDECLARED_IDENTIFIER = "UndeclaredIdentifier"
    MISSING_IMPORT = "MissingImport"
    ASYNC_AWAIT_ISSUE = "AsyncAwaitIssue"
    OUT_OF_BOUNDS = "OutOfBounds"
    SYNTAX_ERROR = "SyntaxError"
    UNKNOWN = "Unknown"


class Severity(str, enum.Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class Verbosity(str, enum.Enum):
    SHORT = "short"
    DETAILED = "detailed"


DEFAULT_ENABLED_LANGUAGES: FrozenSet[Language] = frozenset(
    {Language.TYPESCRIPT, Language.JAVASCRIPT, Language.JAVA}
)


@dataclass(frozen=True)
class NormalizedDiagnostic:
    """A single diagnostic as reported by some upstream compiler or linter.

    ``error_type`` starts as Unknown and is assigned once by classification,
    which produces a new instance via :meth:`with_error_type`.
    """

    language: str
    raw_message: str
    file: str = ""
    line: int = 1
    column: int | None = None
    error_code: str | None = None
    severity: Severity = Severity.ERROR
    symbol: str | None = None
    error_type: ErrorKind = ErrorKind.UNKNOWN

    def with_error_type(self, kind: ErrorKind) -> "NormalizedDiagnostic":
        return replace(self, error_type=kind)


@dataclass(frozen=True)
class ExplanationTemplate:
    """Human-friendly explanation payload."""

    title: str
    explanation: str
    likely_causes: Tuple[str, ...] = ()
    next_steps: Tuple[str, ...] = ()
    calm_message: str | None = None
    confidence_boost: str | None = None
    confidence: float = 0.5


@dataclass(frozen=True)
class Rule:
    """One entry of the rule table.

    Patterns are compiled when the rule is built from its definition, so a
    malformed expression is rejected at load time rather than per request.
    """

    language: Language
    error_types: Tuple[ErrorKind, ...]
    template: ExplanationTemplate
    error_code_pattern: re.Pattern[str] | None = None
    message_pattern: re.Pattern[str] | None = None
    priority: int = 0

    @property
    def is_catch_all(self) -> bool:
        return self.error_code_pattern is None and self.message_pattern is None

    def handles(self, language: str, kind: ErrorKind) -> bool:
        return Language.parse(language) is self.language and kind in self.error_types


@dataclass(frozen=True)
class ExplanationConfig:
    """User-facing shaping options, supplied fresh for every resolution."""

    enable_reassurance: bool = True
    verbosity: Verbosity = Verbosity.DETAILED
    enabled_languages: FrozenSet[Language] = field(
        default_factory=lambda: DEFAULT_ENABLED_LANGUAGES
    )
    experimental: bool = False

    @classmethod
    def from_settings(cls, settings: "Settings") -> "ExplanationConfig":
        languages = {Language.parse(tag) for tag in settings.enabled_languages}
        return cls(
            enable_reassurance=settings.enable_reassurance,
            verbosity=Verbosity(settings.verbosity),
            enabled_languages=frozenset(lang for lang in languages if lang is not None),
            experimental=settings.experimental,
        )

    def is_enabled(self, language: str) -> bool:
        parsed = Language.parse(language)
        return parsed is not None and parsed in self.enabled_languages
