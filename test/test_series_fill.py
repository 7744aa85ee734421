import math

import pytest

from rowframe import MISSING, Series

NAN = float("nan")


def test_fill():
    series = Series([1, MISSING, 3, MISSING, 5, None], "values")
    result = series.fill("MISSING", MISSING)
    assert result.to_array() == [1, "MISSING", 3, "MISSING", 5, None]
    assert result.name == "values"


def test_fill_multiple_values():
    series = Series(["a", "", "b", "n/a", None])
    assert series.fill("?", "", "n/a").to_array() == ["a", "?", "b", "?", None]


def test_fill_nothing_to_find():
    assert Series([1, None]).fill(0).to_array() == [1, None]


def test_fill_does_not_modify_source():
    series = Series([None, 1])
    series.fill(0, None)
    assert series.to_array() == [None, 1]


@pytest.mark.parametrize(
    "find,expected",
    [
        (0, ["X", False, "X", 1, True]),
        (False, [0, "X", 0.0, 1, True]),
        (1, [0, False, 0.0, "X", True]),
        (True, [0, False, 0.0, 1, "X"]),
    ],
)
def test_fill_keeps_booleans_and_numbers_apart(find, expected):
    assert Series([0, False, 0.0, 1, True]).fill("X", find).to_array() == expected


def test_fill_nan():
    assert Series([1, NAN, 2]).fill(0, NAN).to_array() == [1, 0, 2]


def test_fill_nullish():
    series = Series([1, MISSING, False, None, NAN, 10, ""], "mix")
    assert series.fill_nullish(0).to_array() == [1, 0, False, 0, 0, 10, ""]


@pytest.mark.parametrize("value", [0, "", False])
def test_fill_nullish_leaves_falsey_values(value):
    assert Series([value]).fill_nullish("filled").to_array() == [value]


def test_fill_falsey():
    series = Series([1, MISSING, False, None, NAN, 10, ""], "mix")
    assert series.fill_falsey(0).to_array() == [1, 0, 0, 0, 0, 10, 0]


def test_fill_falsey_keeps_truthy_values():
    values = [1, -1, "a", True, [], 0.5]
    assert Series(values).fill_falsey("x").to_array() == values


def test_forward_fill():
    series = Series([None, 1, None, None, 2, 0, ""], "s")
    result = series.forward_fill()
    assert result.to_array() == [None, 1, 1, 1, 2, 2, 2]
    assert result.name == "s"


def test_forward_fill_leading_invalid_values_stay():
    result = Series([None, "", NAN, "a"]).forward_fill()
    assert result.items[:2] == [None, ""]
    assert math.isnan(result.items[2])
    assert result.items[3] == "a"


def test_forward_fill_custom_validity():
    series = Series([1, -1, -5, 3, -2])
    assert series.forward_fill(lambda v: v > 0).to_array() == [1, 1, 1, 3, 3]


def test_backward_fill():
    series = Series([None, 1, None, None, 2, 0, ""])
    assert series.backward_fill().to_array() == [1, 1, 2, 2, 2, 0, ""]


def test_backward_fill_custom_validity():
    series = Series([-1, -5, 3, -2, 4])
    assert series.backward_fill(lambda v: v > 0).to_array() == [3, 3, 3, 4, 4]


def test_fills_on_empty_series():
    empty = Series([], "empty")
    assert empty.fill(0, None).to_array() == []
    assert empty.forward_fill().to_array() == []
    assert empty.backward_fill().to_array() == []
