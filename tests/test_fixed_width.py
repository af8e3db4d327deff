import logging
import math

import pytest

from itemp.fixed_width import float_to_uint16, to_float32, to_int16, to_uint16


def test_to_uint16_in_range():
    assert to_uint16(0) == 0
    assert to_uint16(65535) == 65535


def test_to_uint16_wraps():
    assert to_uint16(65536) == 0
    assert to_uint16(65540) == 4
    assert to_uint16(-1) == 65535
    assert to_uint16(-119920) == 11152


def test_to_int16_in_range():
    assert to_int16(-32768) == -32768
    assert to_int16(32767) == 32767


def test_to_int16_wraps():
    assert to_int16(32768) == -32768
    assert to_int16(40000) == -25536
    assert to_int16(-32769) == 32767


def test_to_float32_rounds():
    assert to_float32(0.5) == 0.5
    assert to_float32(0.1) != 0.1
    assert to_float32(0.1) == pytest.approx(0.1, abs=1e-8)
    assert to_float32(115.55) > 115.55


def test_to_float32_saturates():
    assert to_float32(1e39) == math.inf
    assert to_float32(-1e39) == -math.inf
    assert math.isnan(to_float32(math.nan))


def test_float_to_uint16_truncates_toward_zero():
    assert float_to_uint16(7760.9) == 7760
    assert float_to_uint16(-0.9) == 0
    assert float_to_uint16(-1.5) == 65535


def test_float_to_uint16_non_finite():
    assert float_to_uint16(math.nan) == 0
    assert float_to_uint16(math.inf) == 0
    assert float_to_uint16(-math.inf) == 0


def test_wrap_is_logged(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.DEBUG, logger="itemp.fixed_width"):
        to_uint16(65540)

    assert "Wrapped 65540 to uint16 value 4" in caplog.text


def test_in_range_is_not_logged(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.DEBUG, logger="itemp.fixed_width"):
        to_uint16(42)
        to_int16(-42)

    assert caplog.text == ""
