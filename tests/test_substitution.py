"""变量代入与数值格式化测试"""
import logging

import numpy as np
import pytest

from core.errors import InvalidNumberLiteral
from engine.substitution import substitute_variables
from utils.formatting import format_decimal


@pytest.mark.parametrize("value,expected", [
    (3, "3.0"),
    (3.0, "3.0"),
    (2.5, "2.5"),
    (-0.5, "-0.5"),
    (1e-5, "0.00001"),
    (1e20, "100000000000000000000.0"),
    (np.float64(10), "10.0"),
    (np.int64(7), "7.0"),
])
def test_format_decimal(value, expected):
    assert format_decimal(value) == expected


@pytest.mark.parametrize("value", [float("nan"), float("inf"), -np.inf, 10 ** 400, -(10 ** 400)])
def test_format_decimal_non_finite(value):
    with pytest.raises(InvalidNumberLiteral):
        format_decimal(value)


@pytest.mark.parametrize("value", ["3", None, True, [1]])
def test_format_decimal_rejects_non_numbers(value):
    with pytest.raises(TypeError):
        format_decimal(value)


def test_substitute_replaces_every_occurrence():
    assert substitute_variables("x+x*x", {"x": 3}) == "3.0+3.0*3.0"


def test_substitute_in_mapping_order():
    assert substitute_variables("a+b", {"a": 1, "b": 2}) == "1.0+2.0"
    assert substitute_variables("ab", {"ab": 5, "a": 1}) == "5.0"
    assert substitute_variables("ab", {"a": 1, "ab": 5}) == "1.0b"


def test_substitute_without_variables():
    assert substitute_variables("1+2") == "1+2"
    assert substitute_variables("1+2", {}) == "1+2"


def test_substitute_leaves_unknown_names():
    assert substitute_variables("x+z", {"x": 1}) == "1.0+z"


def test_substitute_skips_empty_name(caplog):
    with caplog.at_level(logging.WARNING):
        assert substitute_variables("1+x", {"": 9, "x": 2}) == "1+2.0"
    assert "empty name" in caplog.text


def test_huge_integer_variable_is_typed_error():
    with pytest.raises(InvalidNumberLiteral):
        substitute_variables("x+1", {"x": 10 ** 400})
