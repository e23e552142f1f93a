"""
Sandboxed statement interpreter
===============================
Executes the text produced by the compile action without handing it to a
general-purpose evaluator. Only the two statement forms the emitter writes
are understood:

    const <name> = <literal>;
    console.log(<name>);

Literals are parsed as JSON. Anything else is rejected with EvaluationError
before a single statement runs.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Callable, Dict, List, Optional

from .ir import Bind, Output, Statement

logger = logging.getLogger(__name__)

_IDENT = r"[A-Za-z_$][\w$]*"
_BIND_RE = re.compile(rf"^const\s+({_IDENT})\s*=\s*(.+?)\s*;$")
_OUTPUT_RE = re.compile(rf"^console\.log\(\s*({_IDENT})?\s*\);$")


class EvaluationError(Exception):
    """Raised when compiled text cannot be parsed or executed."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


def parse(text: str) -> List[Statement]:
    statements: List[Statement] = []
    # Statements are joined with "\n" only; other line separators may sit
    # inside string literals.
    for line_number, raw in enumerate(text.split("\n"), start=1):
        line = raw.strip()
        if not line:
            continue

        match = _BIND_RE.match(line)
        if match:
            name, literal = match.groups()
            try:
                value = json.loads(literal)
            except ValueError as exc:
                raise EvaluationError(f"invalid literal {literal!r}: {exc}", line_number)
            statements.append(Bind(name, value))
            continue

        match = _OUTPUT_RE.match(line)
        if match:
            statements.append(Output(match.group(1) or ""))
            continue

        raise EvaluationError(f"unsupported statement {line!r}", line_number)
    return statements


class StatementInterpreter:
    """
    Evaluator for compiled editor output.

    Each call to `evaluate` runs against a fresh binding table. Every value
    passed to an output statement is handed to `on_output` and collected in
    the returned list.
    """

    def __init__(self, on_output: Optional[Callable[[Any], None]] = None):
        self.on_output = on_output

    def evaluate(self, text: str) -> List[Any]:
        return self.execute(parse(text))

    def execute(self, statements: List[Statement]) -> List[Any]:
        bindings: Dict[str, Any] = {}
        outputs: List[Any] = []

        for stmt in statements:
            if isinstance(stmt, Bind):
                if stmt.name in bindings:
                    raise EvaluationError(f"'{stmt.name}' has already been declared")
                bindings[stmt.name] = stmt.value
            elif isinstance(stmt, Output):
                if not stmt.name:
                    value = None
                elif stmt.name in bindings:
                    value = bindings[stmt.name]
                else:
                    raise EvaluationError(f"'{stmt.name}' is not defined")
                outputs.append(value)
                self._write(value)
            else:
                raise EvaluationError(f"unknown statement {stmt!r}")

        return outputs

    def _write(self, value: Any):
        if self.on_output is not None:
            self.on_output(value)
        else:
            logger.info(f"[console] {value}")
