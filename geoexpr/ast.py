"""Expression tree of the geometry language.

Nodes are immutable. ``preprocess`` returns the tree with every literal
segment in canonical form and ``evaluate`` computes the node's value in an
environment. Source spans are carried for error messages only and never take
part in equality.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar, Optional

from .intersection import intersect
from .logging_utils import apply_debug_logging
from .values import GeometryValue

if TYPE_CHECKING:  # pragma: no cover
    from .environment import Environment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Span:
    line: int
    col: int


@dataclass(frozen=True)
class Expression:
    kind: ClassVar[str] = ""

    def preprocess(self) -> "Expression":
        raise NotImplementedError

    def evaluate(self, env: "Environment") -> GeometryValue:
        raise NotImplementedError


@dataclass(frozen=True)
class Literal(Expression):
    kind: ClassVar[str] = "literal"

    value: GeometryValue
    span: Optional[Span] = field(default=None, compare=False, repr=False)

    def preprocess(self) -> Expression:
        value = self.value.preprocess()
        if value is self.value:
            return self
        return Literal(value, span=self.span)

    def evaluate(self, env: "Environment") -> GeometryValue:
        return self.value


@dataclass(frozen=True)
class Intersect(Expression):
    kind: ClassVar[str] = "intersect"

    e1: Expression
    e2: Expression
    span: Optional[Span] = field(default=None, compare=False, repr=False)

    def preprocess(self) -> Expression:
        return Intersect(self.e1.preprocess(), self.e2.preprocess(), span=self.span)

    def evaluate(self, env: "Environment") -> GeometryValue:
        return intersect(self.e1.evaluate(env), self.e2.evaluate(env))


@dataclass(frozen=True)
class Let(Expression):
    """``let name = e1 in e2``: evaluate ``e2`` with ``name`` bound to ``e1``."""

    kind: ClassVar[str] = "let"

    name: str
    e1: Expression
    e2: Expression
    span: Optional[Span] = field(default=None, compare=False, repr=False)

    def preprocess(self) -> Expression:
        return Let(self.name, self.e1.preprocess(), self.e2.preprocess(), span=self.span)

    def evaluate(self, env: "Environment") -> GeometryValue:
        return self.e2.evaluate(env.bind(self.name, self.e1.evaluate(env)))


@dataclass(frozen=True)
class Var(Expression):
    kind: ClassVar[str] = "var"

    name: str
    span: Optional[Span] = field(default=None, compare=False, repr=False)

    def preprocess(self) -> Expression:
        return self

    def evaluate(self, env: "Environment") -> GeometryValue:
        return env.lookup(self.name, span=self.span)


@dataclass(frozen=True)
class Shift(Expression):
    kind: ClassVar[str] = "shift"

    dx: float
    dy: float
    e: Expression
    span: Optional[Span] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "dx", float(self.dx))
        object.__setattr__(self, "dy", float(self.dy))

    def preprocess(self) -> Expression:
        return Shift(self.dx, self.dy, self.e.preprocess(), span=self.span)

    def evaluate(self, env: "Environment") -> GeometryValue:
        return self.e.evaluate(env).shift(self.dx, self.dy)


apply_debug_logging(globals(), logger=logger)
