from __future__ import annotations

"""
Diagnostics normalization and classification utilities.

This package provides:
- capture: turn an editor-style diagnostic payload into a
  NormalizedDiagnostic (language detection, error code extraction,
  severity mapping, symbol extraction).
- classifier: classify a NormalizedDiagnostic into a stable ErrorKind that
  the explanation resolver can search on.

The goal is to keep diagnostic handling logic centralized and deterministic.
"""
