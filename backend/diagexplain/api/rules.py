# backend/diagexplain/api/rules.py
from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query

from diagexplain import schemas
from diagexplain.models import Language
from diagexplain.services.rules import RuleDefinitionError, get_rule_table, register_rules

router = APIRouter(prefix="/rules", tags=["rules"])


@router.get("", response_model=list[schemas.RuleRead])
def list_rules(
    language: str | None = Query(default=None),
) -> list[schemas.RuleRead]:
    """Rules in table order, optionally restricted to one language."""
    table = get_rule_table()
    rules = table.rules_for_language(language) if language else table.all_rules()
    return [schemas.RuleRead.from_rule(rule) for rule in rules]


@router.get("/languages", response_model=list[Language])
def list_languages() -> list[Language]:
    return get_rule_table().languages()


@router.post("", response_model=schemas.RuleRead, status_code=201)
def create_rule(payload: schemas.RuleDefinition) -> schemas.RuleRead:
    """
    Register an additional rule at runtime.

    The rule is appended after every existing rule, so it only wins a
    priority tie against rules registered after it.
    """
    try:
        table = register_rules([payload])
    except RuleDefinitionError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return schemas.RuleRead.from_rule(table.all_rules()[-1])
