"""Base classes and interfaces for the Compute layer

This module defines the types shared by the compute
helpers and the :class:`rowframe.DataFrame` that uses them.

The engine stores data as rows, each row is a plain
``dict`` mapping column names to values::

    {"name": "Alice", "age": 30}
"""

import abc
from typing import Any, Callable

from .. import utils

Row = dict[str, Any]
"""A single record, maps column names to values."""


class ColumnFill(abc.ABC):
    """How to compute the values of a new column.

    When a column is added to a frame, each row
    needs a value for it. The value can be the same
    for all rows (a :class:`Constant`) or computed
    from the row itself (a :class:`Generator`).

    The distinction is explicit, so that storing a function
    as the value of a column is possible and isn't confused
    with a function that computes the values::

        Constant(len)                          # every row gets the len function
        Generator(lambda row: len(row["name"]))  # every row gets its name length
    """

    @abc.abstractmethod
    def apply(self, row: Row, index: int) -> Any:
        """Compute the value of the column for the given row.

        :param row: The row that is receiving the new column.
        :param index: The position of the row in the frame.
        """
        ...

    @abc.abstractmethod
    def __str__(self) -> str:
        """Human readable representation of the fill."""
        ...

    def __repr__(self) -> str:
        return str(self)


class Constant(ColumnFill):
    """Give the same value to every row.

    >>> Constant(5).apply({"a": 1}, 0)
    5
    """

    def __init__(self, value: Any) -> None:
        """
        :param value: The value every row will receive, stored as is.
        """
        self.value = value

    def apply(self, row: Row, index: int) -> Any:
        return self.value

    def __str__(self) -> str:
        return f"Constant({self.value!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Constant) and other.value == self.value

    __hash__ = None


class Generator(ColumnFill):
    """Compute the value from the row and its position.

    The function can accept ``(row, index)`` or just ``(row)``.

    >>> Generator(lambda row: row["a"] * 2).apply({"a": 3}, 0)
    6
    >>> Generator(lambda row, i: i).apply({"a": 3}, 7)
    7
    """

    def __init__(self, func: Callable[..., Any]) -> None:
        """
        :param func: The function computing the value, invoked for each row.
        """
        if not callable(func):
            raise ValueError(f"Generator requires a callable, got {type(func)}")
        self.func = func
        self._bound = utils.inspect.with_index(func)

    def apply(self, row: Row, index: int) -> Any:
        return self._bound(row, index)

    def __str__(self) -> str:
        return f"Generator({utils.inspect.get_qualname(self.func)})"


def as_column_fill(value: Any) -> ColumnFill:
    """Convert a bare value to a :class:`ColumnFill`.

    Values that are already a :class:`ColumnFill` are returned unchanged,
    callables become a :class:`Generator` and anything else a :class:`Constant`.
    Wrap callables in :class:`Constant` to store them as values.

    >>> as_column_fill(3)
    Constant(3)
    >>> as_column_fill(Constant(str))
    Constant(<class 'str'>)
    >>> isinstance(as_column_fill(lambda row: 1), Generator)
    True
    """
    if isinstance(value, ColumnFill):
        return value
    if callable(value):
        return Generator(value)
    return Constant(value)
