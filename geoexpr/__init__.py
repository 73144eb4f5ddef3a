from .values import (
    EMPTY,
    Empty,
    GeometryValue,
    Line,
    Point,
    Segment,
    VerticalLine,
    values_close,
)
from .numbers import EPSILON, close_to, point_close, in_between, format_number
from .ast import Expression, Literal, Intersect, Let, Var, Shift, Span
from .environment import Environment, EMPTY_ENVIRONMENT, UnboundVariableError
from .intersection import intersect, clip_to_segment, line_through
from .normalize import normalize
from .evaluator import evaluate, eval_expr
from .parser import parse_program
from .printer import print_expr, print_program, format_value
from .validate import validate, free_variables, ValidationError
from .reference import BNF, get_reference
from .config import RenderConfig, get_render_config, set_render_config
from .tikz_codegen import generate_tikz_code, generate_tikz_document, collect_literals

__all__ = [
    'EMPTY',
    'Empty',
    'GeometryValue',
    'Line',
    'Point',
    'Segment',
    'VerticalLine',
    'values_close',
    'EPSILON',
    'close_to',
    'point_close',
    'in_between',
    'format_number',
    'Expression',
    'Literal',
    'Intersect',
    'Let',
    'Var',
    'Shift',
    'Span',
    'Environment',
    'EMPTY_ENVIRONMENT',
    'UnboundVariableError',
    'intersect',
    'clip_to_segment',
    'line_through',
    'normalize',
    'evaluate',
    'eval_expr',
    'parse_program',
    'print_expr',
    'print_program',
    'format_value',
    'validate',
    'free_variables',
    'ValidationError',
    'BNF',
    'get_reference',
    'RenderConfig',
    'get_render_config',
    'set_render_config',
    'generate_tikz_code',
    'generate_tikz_document',
    'collect_literals',
]
