# backend/diagexplain/__init__.py
from __future__ import annotations

"""
Marks `diagexplain` as a Python package.

Routers live in diagexplain/api, the explanation pipeline in
diagexplain/services, etc.
"""
