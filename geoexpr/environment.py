from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .values import GeometryValue

Binding = Tuple[str, GeometryValue]


class UnboundVariableError(LookupError):
    """Raised when a variable is looked up in an environment that does not bind it."""

    def __init__(self, name: str, span=None) -> None:
        self.name = name
        self.span = span
        if span is not None:
            message = f"[line {span.line}, col {span.col}] unbound variable {name!r}"
        else:
            message = f"unbound variable {name!r}"
        super().__init__(message)

    def __str__(self) -> str:
        return self.args[0]


@dataclass(frozen=True)
class Environment:
    """Immutable association list; the newest binding of a name shadows older ones."""

    bindings: Tuple[Binding, ...] = ()

    def bind(self, name: str, value: GeometryValue) -> "Environment":
        return Environment(((name, value),) + self.bindings)

    def lookup(self, name: str, *, span=None) -> GeometryValue:
        for bound_name, value in self.bindings:
            if bound_name == name:
                return value
        raise UnboundVariableError(name, span)


EMPTY_ENVIRONMENT = Environment()

