"""Helpers that implement projection of columns.

A common request when working with data is to select specific columns
or to discard the ones that are not needed.
An example is the ``SELECT`` clause in SQL queries.

The two helpers work on a single row and build a new one,
the source row is never modified.

>>> row = {"id": 1, "name": "Alice", "age": 30}
>>> pick(row, ["age", "id"])
{'age': 30, 'id': 1}
>>> omit(row, ["id", "name", "age"], {"name"})
{'id': 1, 'age': 30}
"""

from typing import Any, Collection, Iterable

from ..cells import MISSING
from .base import Row

__all__ = ("pick", "omit")


def pick(row: Row, keys: Iterable[Any]) -> Row:
    """Build a new row with exactly the given keys.

    The keys are provided in the order they were requested,
    keys that the row doesn't have get the :data:`rowframe.cells.MISSING` value.

    :param row: The row to take the values from.
    :param keys: The columns of the new row.
    """
    return {key: row.get(key, MISSING) for key in keys}


def omit(row: Row, all_keys: Iterable[Any], exclude: Collection[Any]) -> Row:
    """Build a new row with all keys except the excluded ones.

    ``all_keys`` is what drives the new row, not the keys of the row itself.
    DataFrames provide their own ``columns``, so a row having additional
    keys will lose them and a row lacking some keys will get
    them as :data:`rowframe.cells.MISSING`.

    >>> omit({"a": 1, "extra": 2}, ["a", "b"], set())
    {'a': 1, 'b': undefined}

    :param row: The row to take the values from.
    :param all_keys: The columns that the row is expected to have.
    :param exclude: The columns to leave out.
    """
    return {key: row.get(key, MISSING) for key in all_keys if key not in exclude}
