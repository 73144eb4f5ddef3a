from typing import List

from .ast import Expression
from .numbers import format_number
from .values import GeometryValue


def format_value(value: GeometryValue) -> str:
    fields = value.fields
    if not fields:
        return value.kind
    return f"{value.kind}({', '.join(format_number(f) for f in fields)})"


def print_expr(expr: Expression) -> str:
    """Render ``expr`` as one line of source text accepted by ``parse_program``."""

    if expr.kind == "literal":
        return format_value(expr.value)
    if expr.kind == "var":
        return expr.name
    if expr.kind == "intersect":
        return f"intersect({print_expr(expr.e1)}, {print_expr(expr.e2)})"
    if expr.kind == "shift":
        return f"shift({format_number(expr.dx)}, {format_number(expr.dy)}, {print_expr(expr.e)})"
    if expr.kind == "let":
        return f"let {expr.name} = {print_expr(expr.e1)} in {print_expr(expr.e2)}"
    raise ValueError(f"unknown expression kind {expr.kind!r}")


def print_program(expr: Expression, *, indent: str = "  ") -> str:
    """Multi-line rendering that puts each ``let`` body on its own line."""

    lines: List[str] = []
    depth = 0
    while expr.kind == "let":
        lines.append(f"{indent * depth}let {expr.name} = {print_expr(expr.e1)} in")
        expr = expr.e2
        depth += 1
    lines.append(f"{indent * depth}{print_expr(expr)}")
    return "\n".join(lines) + "\n"
