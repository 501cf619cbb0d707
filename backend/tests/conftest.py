from __future__ import annotations

import pytest

from diagexplain.config import get_settings
from diagexplain.services.rules import build_default_rule_table, reset_rule_table


@pytest.fixture(autouse=True)
def _fresh_registry():
    """Every test starts from freshly read settings and an unbuilt rule table."""
    get_settings.cache_clear()
    reset_rule_table()
    yield
    reset_rule_table()
    get_settings.cache_clear()


@pytest.fixture
def builtin_table():
    return build_default_rule_table()
