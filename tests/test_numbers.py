import math

import pytest

from geoexpr.numbers import EPSILON, close_to, format_number, in_between, point_close


def test_close_to_is_strict_absolute_tolerance():
    assert EPSILON == 0.00001
    assert close_to(1.0, 1.000009)
    assert close_to(-3.0, -3.000001)
    assert not close_to(0.0, 0.00002)
    assert not close_to(1.0, 1.1)


def test_close_to_is_not_transitive():
    a, b, c = 0.0, 0.000006, 0.000012
    assert close_to(a, b)
    assert close_to(b, c)
    assert not close_to(a, c)


def test_point_close_needs_both_coordinates():
    assert point_close(1, 1, 1.0000001, 1.0000001)
    assert not point_close(1, 1, 1.0000001, 1.5)


@pytest.mark.parametrize(
    'value, end1, end2, expected',
    [
        (1.0, 0.0, 2.0, True),
        (1.0, 2.0, 0.0, True),
        (2.000001, 0.0, 2.0, True),
        (-0.000001, 2.0, 0.0, True),
        (2.1, 0.0, 2.0, False),
        (-0.1, 2.0, 0.0, False),
    ],
)
def test_in_between_accepts_either_order(value, end1, end2, expected):
    assert in_between(value, end1, end2) is expected


@pytest.mark.parametrize(
    'value, text',
    [(2.0, '2'), (2, '2'), (-1.5, '-1.5'), (0.0, '0'), (-0.0, '0'), (0.1, '0.1'), (1e-07, '1e-07')],
)
def test_format_number(value, text):
    assert format_number(value) == text


@pytest.mark.parametrize('value', [math.nan, math.inf, -math.inf])
def test_format_number_rejects_non_finite(value):
    with pytest.raises(ValueError):
        format_number(value)
