# backend/diagexplain/schemas/__init__.py
from __future__ import annotations

"""
Pydantic schemas for request/response models and rule definitions.

This module is the API contract layer and depends on:
- diagexplain.models for the closed vocabularies and domain dataclasses

It is used by:
- API routes
- the rule loader, which validates declarative rule definitions through
  RuleDefinition before compiling them into Rule objects
"""

import re
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from diagexplain.models import (
    ErrorKind,
    ExplanationConfig,
    ExplanationTemplate,
    Language,
    Rule,
    Verbosity,
)


# ---------- Rule Definition Schemas ----------


class TemplateDefinition(BaseModel):
    title: str = Field(min_length=1)
    calm_message: Optional[str] = None
    explanation: str
    likely_causes: List[str] = Field(default_factory=list)
    next_steps: List[str] = Field(default_factory=list)
    confidence_boost: Optional[str] = None
    confidence: float = Field(default=0.5, ge=0.0, le=1.0)


class RuleDefinition(BaseModel):
    """
    Declarative form of a rule, as written in the built-in catalog, in a
    JSON rule file, or in a registration request.

    `error_type` accepts a single kind or a list of kinds. Patterns are
    regular expressions; they are compiled here so that an invalid
    expression is rejected when the definition is loaded.
    """

    language: Language
    error_type: List[ErrorKind] = Field(min_length=1)
    error_code_pattern: Optional[str] = None
    message_pattern: Optional[str] = None
    priority: int = 0
    template: TemplateDefinition

    @field_validator("error_type", mode="before")
    @classmethod
    def _coerce_error_type(cls, value: Any) -> Any:
        if isinstance(value, (str, ErrorKind)):
            return [value]
        return value

    @field_validator("error_code_pattern", "message_pattern")
    @classmethod
    def _check_pattern(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        if not value:
            raise ValueError("pattern must not be empty; omit it instead")
        try:
            re.compile(value)
        except re.error as exc:
            raise ValueError(f"invalid regular expression {value!r}: {exc}") from exc
        return value


# ---------- Diagnostic Schemas ----------


class DiagnosticIn(BaseModel):
    """
    Diagnostic payload as delivered by an editor integration.

    `language` may be omitted, in which case it is detected from the
    file extension. `code` accepts the shapes editors use: a string,
    a number, or an object carrying a `value`.
    """

    message: str
    language: Optional[str] = None
    code: Union[str, int, Dict[str, Any], None] = None
    file: str = ""
    line: int = Field(default=1, ge=1)
    column: Optional[int] = Field(default=None, ge=1)
    severity: Union[str, int, None] = "error"
    symbol: Optional[str] = None


class ExplanationConfigIn(BaseModel):
    """Per-request overrides; unset fields fall back to the settings defaults."""

    enable_reassurance: Optional[bool] = None
    verbosity: Optional[Verbosity] = None
    enabled_languages: Optional[List[str]] = None
    experimental: Optional[bool] = None

    def merge(self, base: ExplanationConfig) -> ExplanationConfig:
        languages = base.enabled_languages
        if self.enabled_languages is not None:
            parsed = (Language.parse(tag) for tag in self.enabled_languages)
            languages = frozenset(lang for lang in parsed if lang is not None)
        return ExplanationConfig(
            enable_reassurance=(
                base.enable_reassurance
                if self.enable_reassurance is None
                else self.enable_reassurance
            ),
            verbosity=self.verbosity or base.verbosity,
            enabled_languages=languages,
            experimental=base.experimental if self.experimental is None else self.experimental,
        )


class ExplainRequest(BaseModel):
    diagnostic: DiagnosticIn
    config: Optional[ExplanationConfigIn] = None


# ---------- Response Schemas ----------


class ExplanationRead(BaseModel):
    title: str
    calm_message: Optional[str]
    explanation: str
    likely_causes: List[str]
    next_steps: List[str]
    confidence_boost: Optional[str]
    confidence: float

    @classmethod
    def from_template(cls, template: ExplanationTemplate) -> "ExplanationRead":
        return cls(
            title=template.title,
            calm_message=template.calm_message,
            explanation=template.explanation,
            likely_causes=list(template.likely_causes),
            next_steps=list(template.next_steps),
            confidence_boost=template.confidence_boost,
            confidence=template.confidence,
        )


class RuleRead(BaseModel):
    language: Language
    error_types: List[ErrorKind]
    error_code_pattern: Optional[str]
    message_pattern: Optional[str]
    priority: int
    template: ExplanationRead

    @classmethod
    def from_rule(cls, rule: Rule) -> "RuleRead":
        return cls(
            language=rule.language,
            error_types=list(rule.error_types),
            error_code_pattern=rule.error_code_pattern.pattern if rule.error_code_pattern else None,
            message_pattern=rule.message_pattern.pattern if rule.message_pattern else None,
            priority=rule.priority,
            template=ExplanationRead.from_template(rule.template),
        )


class ClassifyResponse(BaseModel):
    language: str
    error_type: ErrorKind
    error_code: Optional[str]
    symbol: Optional[str]


class ExplainResponse(BaseModel):
    language: str
    error_type: ErrorKind
    explained: bool
    reason: str
    explanation: Optional[ExplanationRead] = None
    rule: Optional[RuleRead] = None
    markdown: str
    text: Optional[str] = None
    original_message: str
