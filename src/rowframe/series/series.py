"""The Series object itself."""

from typing import Any, Callable, Iterable, Optional, Self

import pyarrow as pa

from .. import config, utils
from ..cells import FALSEY_VALUES, MISSING, NULLISH_VALUES, is_truthy, same_value
from ..compute import (
    MaxAggregation,
    MeanAggregation,
    MedianAggregation,
    MinAggregation,
    QuantileAggregation,
    SumAggregation,
    values_to_arrow,
)
from ..compute.aggregate import Number

__all__ = ("Series",)

_NOTHING = object()


class Series:
    """A named sequence of values, like a column of a table.

    The values don't need to be of the same type,
    a Series can mix numbers, text, booleans and missing values.
    Statistics only consider the numbers and ignore anything else.

    Series are never modified, all operations return a new Series:

    >>> s = Series([1, 2, 3, 4, 5], "numbers")
    >>> s.lambda_(lambda v: v * 2).to_array()
    [2, 4, 6, 8, 10]
    >>> s.to_array()
    [1, 2, 3, 4, 5]
    """

    def __init__(self, items: Iterable[Any] = (), name: Any = None) -> None:
        """
        :param items: The values of the series, they get copied.
        :param name: The name of the series, usually the column it comes from.
        """
        self.items = list(items)
        self.name = name

    @property
    def size(self) -> int:
        """How many values the series has."""
        return len(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        return utils.tabulate.tabulate(
            [{self.name: v} for v in self.items],
            [self.name],
            max_rows=config.options.display_max_rows,
            max_width=config.options.display_max_width,
        )

    def __repr__(self) -> str:
        return f"Series(name={self.name!r}, size={self.size})\n{self}"

    def _derive(self, items: Iterable[Any], name: Any = None) -> Self:
        return self.__class__(items, self.name if name is None else name)

    def lambda_(self, fn: Callable[..., Any], new_name: Any = None) -> Self:
        """Apply a function to each value and return a new Series.

        The function is invoked as ``fn(value, index)``, or as ``fn(value)``
        when it only accepts one argument.

        >>> Series([1, 2], "n").lambda_(str, "s").name
        's'

        :param fn: The function computing the new values.
        :param new_name: The name of the new series, keeps the current one if omitted.
        """
        fn = utils.inspect.with_index(fn)
        return self._derive((fn(v, i) for i, v in enumerate(self.items)), new_name)

    def concat(self, new_items: Iterable[Any], new_name: Any = None) -> Self:
        """Append values to the series and return a new Series.

        >>> Series([1, 2]).concat(["3", None]).to_array()
        [1, 2, '3', None]

        :param new_items: The values to append, can be another Series.
        :param new_name: The name of the new series, keeps the current one if omitted.
        """
        if isinstance(new_items, Series):
            new_items = new_items.items
        return self._derive([*self.items, *new_items], new_name)

    def to_array(self) -> list[Any]:
        """Get a copy of the values as a list."""
        return list(self.items)

    def to_arrow(self) -> pa.Array:
        """Convert the values to a :class:`pyarrow.Array`."""
        return values_to_arrow(self.items)

    def head(self, n: int = 1) -> Optional[list[Any]]:
        """The first ``n`` values, ``None`` if the series is empty."""
        if not self.items:
            return None
        return self.items[:n]

    def tail(self, n: int = 1) -> Optional[list[Any]]:
        """The last ``n`` values, ``None`` if the series is empty.

        All values are returned when ``n`` reaches the size of the series:

        >>> Series([1, 2, 3]).tail(2)
        [2, 3]
        >>> Series([1, 2, 3]).tail(5)
        [1, 2, 3]
        """
        if not self.items:
            return None
        if n >= len(self.items):
            return list(self.items)
        return self.items[len(self.items) - n :]

    # Statistics

    def sum(self) -> Number:
        """Sum of the numbers, ``0`` when there are none.

        >>> Series(["", 1, 2]).sum()
        3
        """
        return SumAggregation().compute(self.items)

    def max(self) -> Optional[Number]:
        """Largest number, ``None`` when there are no finite numbers."""
        return MaxAggregation().compute(self.items)

    def min(self) -> Optional[Number]:
        """Smallest number, ``None`` when there are no finite numbers."""
        return MinAggregation().compute(self.items)

    def mean(self) -> Optional[Number]:
        """Mean of the valid numbers, ``None`` when the series is empty.

        >>> Series(["", 1, 2]).mean()
        1.5
        """
        return MeanAggregation().compute(self.items)

    def median(self) -> Optional[Number]:
        """Median of the valid numbers, ``None`` when there are none."""
        return MedianAggregation().compute(self.items)

    def quantile(self, p: float) -> Optional[Number]:
        """Quantile ``p`` (between 0 and 1) of the valid numbers.

        >>> s = Series([5, 1, "x", 4, 2, 3])
        >>> s.quantile(0), s.quantile(0.5), s.quantile(1)
        (1, 3, 5)
        """
        return QuantileAggregation(p).compute(self.items)

    # Missing values

    def fill(self, fill_value: Any, *find_values: Any) -> Self:
        """Replace the values equal to any of ``find_values`` with ``fill_value``.

        Booleans never match numbers, and NaN matches NaN,
        see :func:`rowframe.cells.same_value`.

        >>> Series([1, None, 0, False]).fill(-1, None, 0).to_array()
        [1, -1, -1, False]
        """
        return self._derive(
            fill_value if any(same_value(v, f) for f in find_values) else v
            for v in self.items
        )

    def fill_nullish(self, fill_value: Any) -> Self:
        """Replace ``None``, :data:`MISSING` and NaN values."""
        return self.fill(fill_value, *NULLISH_VALUES)

    def fill_falsey(self, fill_value: Any) -> Self:
        """Replace ``None``, :data:`MISSING`, NaN, ``0``, ``""`` and ``False`` values.

        >>> Series([1, MISSING, False, None, float("nan"), 10, ""]).fill_falsey(0).to_array()
        [1, 0, 0, 0, 0, 10, 0]
        """
        return self.fill(fill_value, *FALSEY_VALUES)

    def forward_fill(self, is_valid: Callable[[Any], bool] = is_truthy) -> Self:
        """Replace invalid values with the last valid value that precedes them.

        Invalid values at the beginning of the series have
        no previous value, so they are left as they are:

        >>> Series([None, 1, None, 0, 3]).forward_fill().to_array()
        [None, 1, 1, 1, 3]

        :param is_valid: Tells if a value is valid, by default
                         :func:`rowframe.cells.is_truthy`.
        """
        return self._derive(_propagate(self.items, is_valid))

    def backward_fill(self, is_valid: Callable[[Any], bool] = is_truthy) -> Self:
        """Replace invalid values with the first valid value that follows them.

        Invalid values at the end of the series have
        no next value, so they are left as they are:

        >>> Series([None, 1, None, 3, ""]).backward_fill().to_array()
        [1, 1, 3, 3, '']

        :param is_valid: Tells if a value is valid, by default
                         :func:`rowframe.cells.is_truthy`.
        """
        return self._derive(reversed(_propagate(reversed(self.items), is_valid)))

    # Text

    def to_upper(self) -> Self:
        """Uppercase text values, leaving any other value unchanged."""
        return self._derive(v.upper() if isinstance(v, str) else v for v in self.items)

    def to_lower(self) -> Self:
        """Lowercase text values, leaving any other value unchanged."""
        return self._derive(v.lower() if isinstance(v, str) else v for v in self.items)


def _propagate(values: Iterable[Any], is_valid: Callable[[Any], bool]) -> list[Any]:
    """Replace invalid values with the last valid one met while iterating."""
    result = []
    last = _NOTHING
    for value in values:
        if is_valid(value):
            last = value
        elif last is not _NOTHING:
            value = last
        result.append(value)
    return result

