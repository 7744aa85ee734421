"""Aggregations over columns of mixed values.

Frequently when analysing data is necessary
to compute statistics like the min, max, average, etc...
of the data stored in datasets.

Columns are not typed, so a single column can contain
numbers, text, booleans and missing values all mixed together.
Aggregations only look at the numbers and ignore
everything else, for example given the values::

    ["", 1, 2, None, "3"]

the sum is ``3`` and the mean is ``1.5``, as
the only numbers in the column are ``1`` and ``2``.

>>> values = ["", 1, 2, None, "3"]
>>> SumAggregation().compute(values)
3
>>> MeanAggregation().compute(values)
1.5

Each aggregation decides what to do with special numbers like
NaN and infinities, see the documentation of each one.
The aggregations that rank values (median and quantiles)
only consider the *valid numbers*, numbers that are finite and not NaN.
"""

import abc
import math
from fractions import Fraction
from typing import Any, Optional, Sequence

from ..cells import CellKind, classify, is_nan, is_valid_number

__all__ = (
    "Aggregation",
    "SumAggregation",
    "MinAggregation",
    "MaxAggregation",
    "MeanAggregation",
    "MedianAggregation",
    "QuantileAggregation",
    "valid_numbers",
)

Number = int | float


def valid_numbers(values: Sequence[Any]) -> list[Number]:
    """Only the values that are finite numbers, in ascending order."""
    return sorted(v for v in values if is_valid_number(v))


def _add(total: Number, value: Number) -> Number:
    """Add two numbers, even when an int too large for a float meets a float.

    >>> _add(10**400, 2.0) == 10**400 + 2
    True
    """
    try:
        return total + value
    except OverflowError:
        for v in (total, value):
            if isinstance(v, float) and not math.isfinite(v):
                return v
        return _as_number(Fraction(total) + Fraction(value))


def _as_number(value: Fraction) -> Number:
    """Convert an exact result to a float, or to the nearest int if a float can't hold it."""
    try:
        return float(value)
    except OverflowError:
        return round(value)


class Aggregation(abc.ABC):
    """Base class for aggregations.

    Every aggregation is expected to implement
    a method that reduces a sequence of values to a single value.
    """

    def __str__(self) -> str:
        return f"{self.__class__.__name__}()"

    __repr__ = __str__

    @abc.abstractmethod
    def compute(self, values: Sequence[Any]) -> Optional[Number]: ...


class SumAggregation(Aggregation):
    """Compute the sum of the numbers.

    Values that are not numbers contribute ``0``,
    so the sum of an empty column or of a column
    without numbers is ``0``.
    NaN and infinities are summed as any other number.
    """

    def compute(self, values: Sequence[Any]) -> Number:
        total = 0
        for value in values:
            if classify(value) is CellKind.NUMBER:
                total = _add(total, value)
        return total


class SimpleAggregation(Aggregation):
    """Provide a base implementation for extremes like min and max.

    Values that aren't numbers are replaced by a sentinel that can never
    win the comparison (``-inf`` for max and ``+inf`` for min),
    then the extreme is only returned if it is a finite number.

    That means that ``None`` is returned when there are no values,
    when there are no numbers, when the winner is an infinity
    or when a NaN is involved.
    """

    sentinel: float

    @abc.abstractmethod
    def _aggregate(self, data: list[Number]) -> Number: ...

    def compute(self, values: Sequence[Any]) -> Optional[Number]:
        if not values:
            return None
        data = [
            v if classify(v) is CellKind.NUMBER else self.sentinel for v in values
        ]
        if any(is_nan(v) for v in data):
            return None
        result = self._aggregate(data)
        if isinstance(result, int) or math.isfinite(result):
            return result
        return None


class MaxAggregation(SimpleAggregation):
    """Compute the max of the numbers."""

    sentinel = -math.inf

    def _aggregate(self, data: list[Number]) -> Number:
        return max(data)


class MinAggregation(SimpleAggregation):
    """Compute the min of the numbers."""

    sentinel = math.inf

    def _aggregate(self, data: list[Number]) -> Number:
        return min(data)


class MeanAggregation(Aggregation):
    """Compute the mean of the valid numbers.

    The mean is the sum of the valid numbers divided by
    how many valid numbers there are, not by how many values
    there are.

    An empty column has no mean (``None``), while a column
    whose valid numbers sum to zero, or that has no valid number
    at all, has a mean of ``0``.

    >>> MeanAggregation().compute([]) is None
    True
    >>> MeanAggregation().compute(["a", None])
    0
    """

    def compute(self, values: Sequence[Any]) -> Optional[Number]:
        if not values:
            return None
        valid = [v for v in values if is_valid_number(v)]
        total = 0
        for value in valid:
            total = _add(total, value)
        if not total:
            return 0
        try:
            return total / len(valid)
        except OverflowError:
            return _as_number(Fraction(total) / len(valid))


class QuantileAggregation(Aggregation):
    """Compute a quantile of the valid numbers.

    The valid numbers are sorted and the value at rank ``p * (n - 1)``
    is taken. When the rank falls between two numbers,
    the result is linearly interpolated between them.

    ``p=0`` gives the smallest valid number, ``p=1`` the largest
    and ``p=0.5`` the median:

    >>> QuantileAggregation(0.25).compute([1, 2, 3, 4, 5])
    2
    >>> QuantileAggregation(0.5).compute([4, 1, 3, 2])
    2.5
    >>> QuantileAggregation(0.1).compute([10, 20])
    11.0
    """

    def __init__(self, p: float) -> None:
        """
        :param p: The quantile to compute, between 0 and 1 included.
        """
        if not (classify(p) is CellKind.NUMBER and 0 <= p <= 1):
            raise ValueError(f"Quantile must be a number between 0 and 1, got {p!r}")
        self.p = p

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({self.p})"

    def compute(self, values: Sequence[Any]) -> Optional[Number]:
        ranked = valid_numbers(values)
        if not ranked:
            return None

        rank = self.p * (len(ranked) - 1)
        lower = math.floor(rank)
        fraction = rank - lower
        if fraction == 0:
            return ranked[lower]
        low, high = ranked[lower], ranked[lower + 1]
        try:
            # p=0.5 gives exactly (a + b) / 2
            return low * (1 - fraction) + high * fraction
        except OverflowError:
            return _as_number(
                Fraction(low) + (Fraction(high) - Fraction(low)) * Fraction(fraction)
            )


class MedianAggregation(QuantileAggregation):
    """Compute the median of the valid numbers.

    For an odd count of numbers it's the middle one,
    for an even count the average of the two middle ones.

    >>> MedianAggregation().compute([1, 2, 3, 4, 5])
    3
    >>> MedianAggregation().compute(["", 1, 2, 3, 4])
    2.5
    """

    def __init__(self) -> None:
        super().__init__(0.5)

    def __str__(self) -> str:
        return f"{self.__class__.__name__}()"
