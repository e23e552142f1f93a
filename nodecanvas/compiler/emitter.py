"""
Statement emitter — renders IR statements as the text published by the
compile action.
"""

from __future__ import annotations

import json
from typing import Any, Iterable

from .ir import Bind, Output, Statement


def format_literal(value: Any) -> str:
    """Strings are quoted; everything else is written as a literal."""
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    try:
        return json.dumps(value)
    except (TypeError, ValueError):
        return str(value)


def emit_statement(stmt: Statement) -> str:
    if isinstance(stmt, Bind):
        return f"const {stmt.name} = {format_literal(stmt.value)};"
    if isinstance(stmt, Output):
        return f"console.log({stmt.name});"
    raise TypeError(f"Unknown statement type '{type(stmt).__name__}'")


def emit(statements: Iterable[Statement]) -> str:
    return "\n".join(emit_statement(s) for s in statements)
