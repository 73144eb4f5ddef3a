import logging

import numpy as np
import pytest

from geoexpr import EMPTY, Point
from geoexpr.logging_utils import _safe_repr, apply_debug_logging, debug_log_call


def test_safe_repr_summarizes_arrays():
    small = _safe_repr(np.array([1.0, 2.0]))
    assert small.startswith("ndarray(shape=(2,)")
    assert "values=[1.0, 2.0]" in small

    large = _safe_repr(np.arange(10.0))
    assert "min=0, max=9" in large


def test_safe_repr_renders_geometry_like_source():
    assert _safe_repr(Point(1, 2.5)) == "point(1, 2.5)"
    assert _safe_repr(EMPTY) == "empty"
    assert _safe_repr([Point(0, 0)] * 7) == "[point(0, 0), point(0, 0), point(0, 0), point(0, 0), point(0, 0), ...]"


def test_debug_log_call_traces_entry_exit_and_errors(caplog):
    logger = logging.getLogger("geoexpr.tests.trace")

    @debug_log_call(logger)
    def halve(value):
        if value < 0:
            raise ValueError("negative")
        return value / 2

    caplog.set_level(logging.DEBUG, logger=logger.name)
    assert halve(4) == 2
    with pytest.raises(ValueError):
        halve(-1)

    messages = [record.getMessage() for record in caplog.records]
    assert any(m.startswith("Entering ") and m.endswith("halve (4)") for m in messages)
    assert any(m.endswith("halve -> 2.0") for m in messages)
    assert any(m.startswith("Exception in ") for m in messages)


def test_apply_debug_logging_wraps_module_functions(caplog):
    logger = logging.getLogger("geoexpr.tests.namespace")

    def double(x):
        return 2 * x

    namespace = {"__name__": double.__module__, "double": double}
    apply_debug_logging(namespace, logger=logger)

    caplog.set_level(logging.DEBUG, logger=logger.name)
    assert namespace["double"](3) == 6
    assert "Entering double (3)" in caplog.text
    assert "Exiting double -> 6" in caplog.text
