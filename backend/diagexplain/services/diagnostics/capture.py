from __future__ import annotations

"""backend/diagexplain/services/diagnostics/capture.py

Normalize editor-style diagnostic payloads.

Editors hand over diagnostics in loosely typed shapes: the code may be a
string, a number or an object with a `value`, severity may be a name or a
numeric level, and the language is often only implied by the file name.
`normalize_diagnostic` folds all of that into a NormalizedDiagnostic whose
`error_type` is still Unknown; classification happens afterwards.
"""

import re
from pathlib import PurePath
from typing import Any, Dict

from diagexplain.models import NormalizedDiagnostic, Severity
from diagexplain.schemas import DiagnosticIn

_EXTENSION_LANGUAGES: Dict[str, str] = {
    "ts": "typescript",
    "tsx": "typescript",
    "js": "javascript",
    "jsx": "javascript",
    "java": "java",
    "py": "python",
    "go": "go",
    "rs": "rust",
    "cpp": "cpp",
    "c": "c",
    "cs": "csharp",
}

# Editor numeric levels: 0 = error, 1 = warning, 2 = information, 3 = hint.
_NUMERIC_SEVERITIES: Dict[int, Severity] = {
    0: Severity.ERROR,
    1: Severity.WARNING,
}

_NAMED_SEVERITIES: Dict[str, Severity] = {
    "error": Severity.ERROR,
    "warning": Severity.WARNING,
    "warn": Severity.WARNING,
}

_QUOTED_SYMBOL = re.compile(r"['\"`]([^'\"`]+)['\"`]")
_IDENTIFIER = re.compile(r"\b([a-zA-Z_$][a-zA-Z0-9_$]*)\b")


def detect_language(file_path: str) -> str:
    """Map a file extension to a language tag.

    Unknown extensions are returned as-is (lower-cased) so that callers can
    still see what was submitted; classification treats them as unsupported.
    """
    suffix = PurePath(file_path or "").suffix.lstrip(".").lower()
    return _EXTENSION_LANGUAGES.get(suffix, suffix)


def extract_error_code(code: Any) -> str | None:
    if isinstance(code, bool):
        return None
    if isinstance(code, str):
        return code.strip() or None
    if isinstance(code, int):
        return str(code)
    if isinstance(code, dict) and code.get("value") is not None:
        return str(code["value"])
    return None


def map_severity(severity: Any) -> Severity:
    if isinstance(severity, Severity):
        return severity
    if isinstance(severity, int) and not isinstance(severity, bool):
        return _NUMERIC_SEVERITIES.get(severity, Severity.INFO)
    if isinstance(severity, str):
        return _NAMED_SEVERITIES.get(severity.strip().lower(), Severity.INFO)
    return Severity.INFO


def extract_symbol(message: str) -> str | None:
    """Best-effort identifier extraction: a quoted token, else the first word-like token."""
    quoted = _QUOTED_SYMBOL.search(message or "")
    if quoted:
        return quoted.group(1)
    token = _IDENTIFIER.search(message or "")
    if token:
        return token.group(1)
    return None


def normalize_diagnostic(payload: DiagnosticIn) -> NormalizedDiagnostic:
    language = (payload.language or "").strip().lower() or detect_language(payload.file)
    return NormalizedDiagnostic(
        language=language,
        raw_message=payload.message,
        file=payload.file,
        line=payload.line,
        column=payload.column,
        error_code=extract_error_code(payload.code),
        severity=map_severity(payload.severity),
        symbol=payload.symbol or extract_symbol(payload.message),
    )
