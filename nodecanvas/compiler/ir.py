"""
Statement IR
============
Nodes do not write statement text directly. They emit a small list of
statements into an IRBuilder; the emitter renders them to text and the
interpreter executes the same two forms after parsing them back.

    Bind(name, value)   ->  const <name> = <literal>;
    Output(name)        ->  console.log(<name>);
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Union


@dataclass(frozen=True)
class Bind:
    name: str
    value: Any


@dataclass(frozen=True)
class Output:
    name: str


Statement = Union[Bind, Output]


class IRBuilder:
    """Accumulates the statements a single node contributes."""

    def __init__(self):
        self.statements: List[Statement] = []

    def bind(self, name: str, value: Any) -> "IRBuilder":
        self.statements.append(Bind(name, value))
        return self

    def output(self, name: str) -> "IRBuilder":
        self.statements.append(Output(name))
        return self

    def __len__(self) -> int:
        return len(self.statements)
