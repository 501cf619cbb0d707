"""HTTP tests for the explain, classify and rules endpoints."""

import logging

import pytest
from fastapi.testclient import TestClient

from diagexplain.config import get_settings
from diagexplain.main import app


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


class TestExplain:
    def test_explains_typescript_diagnostic(self, client):
        response = client.post(
            "/api/explain",
            json={
                "diagnostic": {
                    "message": "Object is possibly 'null'.",
                    "code": {"value": 2531},
                    "file": "src/user.ts",
                    "line": 12,
                    "severity": 0,
                }
            },
        )
        assert response.status_code == 200
        body = response.json()
        assert body["explained"] is True
        assert body["reason"] == "explained"
        assert body["language"] == "typescript"
        assert body["error_type"] == "NullOrUndefinedReference"
        assert body["explanation"]["title"] == (
            "You're trying to use something that might not exist yet"
        )
        assert body["rule"]["error_code_pattern"] == r"^(TS)?(2531|2532|18047)$"
        assert body["markdown"].startswith("### You're trying to use")
        assert "**Original error:** Object is possibly 'null'." in body["markdown"]
        assert body["text"].startswith("You're trying to use something that might not exist yet\n")
        assert "**" not in body["text"]

    def test_unexplained_returns_fallback(self, client):
        response = client.post(
            "/api/explain",
            json={"diagnostic": {"message": "something odd", "file": "Main.java"}},
        )
        body = response.json()
        assert response.status_code == 200
        assert body["explained"] is False
        assert body["reason"] == "no-template"
        assert body["explanation"] is None
        assert body["original_message"] == "something odd"
        assert "No explanation available yet" in body["markdown"]
        assert body["text"] is None

    def test_request_config_overrides_defaults(self, client):
        response = client.post(
            "/api/explain",
            json={
                "diagnostic": {"message": "cannot find symbol", "language": "java"},
                "config": {"verbosity": "short", "enable_reassurance": False},
            },
        )
        explanation = response.json()["explanation"]
        assert len(explanation["likely_causes"]) == 2
        assert len(explanation["next_steps"]) == 3
        assert explanation["calm_message"] is None

    def test_disabled_language(self, client):
        response = client.post(
            "/api/explain",
            json={
                "diagnostic": {"message": "foo is not defined", "file": "a.js"},
                "config": {"enabled_languages": ["typescript"]},
            },
        )
        body = response.json()
        assert body["reason"] == "language-disabled"
        assert body["error_type"] == "UndeclaredIdentifier"

    def test_settings_supply_default_verbosity(self, client, monkeypatch):
        monkeypatch.setenv("DIAGEXPLAIN_VERBOSITY", "short")
        get_settings.cache_clear()
        response = client.post(
            "/api/explain",
            json={"diagnostic": {"message": "x", "code": "TS2322", "file": "a.ts"}},
        )
        assert len(response.json()["explanation"]["likely_causes"]) == 2

    def test_unsupported_language(self, client):
        response = client.post(
            "/api/explain",
            json={"diagnostic": {"message": "null", "language": "cobol"}},
        )
        body = response.json()
        assert body["reason"] == "unsupported-language"
        assert body["error_type"] == "Unknown"

    def test_resolution_trace_is_logged(self, client, monkeypatch, caplog):
        monkeypatch.setenv("DIAGEXPLAIN_TRACE_RESOLUTION", "true")
        get_settings.cache_clear()
        caplog.set_level(logging.DEBUG, logger="diagexplain.trace")

        client.post(
            "/api/explain",
            json={"diagnostic": {"message": "x", "code": "TS2322", "file": "a.ts"}},
        )

        messages = [r.getMessage() for r in caplog.records if r.name == "diagexplain.trace"]
        assert any(m.startswith("classify.language_match") for m in messages)
        assert any(m.startswith("resolve.selected") for m in messages)
        assert all(r.levelno == logging.DEBUG for r in caplog.records if r.name == "diagexplain.trace")

    def test_trace_is_silent_by_default(self, client, caplog):
        caplog.set_level(logging.DEBUG, logger="diagexplain.trace")
        client.post(
            "/api/explain",
            json={"diagnostic": {"message": "x", "code": "TS2322", "file": "a.ts"}},
        )
        assert not [r for r in caplog.records if r.name == "diagexplain.trace"]

    def test_invalid_payload(self, client):
        response = client.post("/api/explain", json={"diagnostic": {"line": 0}})
        assert response.status_code == 422


def test_classify(client):
    response = client.post(
        "/api/classify",
        json={"message": "Cannot find name 'userName'.", "code": "TS2304", "file": "a.tsx"},
    )
    assert response.status_code == 200
    assert response.json() == {
        "language": "typescript",
        "error_type": "UndeclaredIdentifier",
        "error_code": "TS2304",
        "symbol": "userName",
    }


class TestRules:
    def test_list_all(self, client):
        rules = client.get("/api/rules").json()
        assert len(rules) == 17
        assert rules[0]["language"] == "typescript"

    def test_list_by_language(self, client):
        rules = client.get("/api/rules", params={"language": "java"}).json()
        assert len(rules) == 6
        assert {rule["language"] for rule in rules} == {"java"}

    def test_languages(self, client):
        assert client.get("/api/rules/languages").json() == ["typescript", "java", "javascript"]

    def test_register_then_explain(self, client):
        definition = {
            "language": "python",
            "error_type": "MissingImport",
            "message_pattern": "No module named",
            "priority": 10,
            "template": {
                "title": "Python can't find this module",
                "explanation": "The import refers to a package that isn't installed.",
                "next_steps": ["Install it with pip"],
                "confidence": 0.9,
            },
        }
        created = client.post("/api/rules", json=definition)
        assert created.status_code == 201
        assert created.json()["error_types"] == ["MissingImport"]
        assert "python" in client.get("/api/rules/languages").json()

        response = client.post(
            "/api/explain",
            json={
                "diagnostic": {"message": "ModuleNotFoundError: No module named 'requests'", "file": "app.py"},
                "config": {"enabled_languages": ["python"]},
            },
        )
        body = response.json()
        assert body["explained"] is True
        assert body["explanation"]["title"] == "Python can't find this module"

    def test_register_rejects_bad_pattern(self, client):
        response = client.post(
            "/api/rules",
            json={
                "language": "python",
                "error_type": "SyntaxError",
                "message_pattern": "(unclosed",
                "template": {"title": "t", "explanation": "e"},
            },
        )
        assert response.status_code == 422
        assert len(client.get("/api/rules").json()) == 17
