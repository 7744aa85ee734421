"""The DataFrame object itself."""

from collections.abc import Iterable, Mapping
from typing import Any, Callable, Optional, Self

import pyarrow as pa

from .. import config, utils
from ..cells import MISSING
from ..compute import (
    Constant,
    HashJoin,
    Row,
    RowFrameError,
    Slice,
    arrow_to_rows,
    as_column_fill,
    omit,
    pick,
    resolve_indices,
    rows_to_arrow,
)
from ..compute.pagination import Selector
from ..series import Series

__all__ = ("DataFrame", "SchemaError")


class DataFrame:
    """Data structure that handles data in rows and columns.

    The DataFrame object allows to represent in-memory data
    as a list of rows, each row being a ``dict`` that maps
    column names to values, and perform transformations over it.

    The first row is the one that dictates the columns of the frame,
    the rows are not checked against each other, unless
    :meth:`check_schema` is explicitly invoked.

    All transformations return a new DataFrame, the only
    exception is :meth:`push_row` which appends a row in place.
    Rows themselves are not copied by the transformations that
    don't need to change them (like :meth:`iloc` or :meth:`filter_rows`)
    so the same row object can be part of multiple frames.
    Modifying such a row affects all the frames it belongs to,
    use :meth:`copy` to get a frame with rows of its own.

    >>> df = DataFrame([
    ...     {"name": "Alice", "age": 30, "active": True},
    ...     {"name": "Bob", "age": 25, "active": False},
    ... ])
    >>> df.shape
    (2, 3)
    >>> df.col("age").mean()
    27.5
    >>> df.filter_rows(lambda row: row["active"]).to_array()
    [{'name': 'Alice', 'age': 30, 'active': True}]
    """

    def __init__(
        self, rows: Optional[Iterable[Row] | pa.Table | pa.RecordBatch] = None
    ) -> None:
        """
        :param rows: The rows of the frame, the list gets copied but not the rows.
                     A :class:`pyarrow.Table` or :class:`pyarrow.RecordBatch`
                     is converted to rows.
        """
        if rows is None:
            rows = []
        elif isinstance(rows, (pa.Table, pa.RecordBatch)):
            rows = arrow_to_rows(rows)

        if not isinstance(rows, Iterable) or isinstance(rows, (str, bytes, Mapping)):
            raise ValueError("Invalid input, expected a list of rows or a PyArrow Table")

        self.rows: list[Row] = list(rows)
        for row in self.rows:
            if not isinstance(row, Mapping):
                raise ValueError(
                    f"Invalid row, expected a mapping of column names to values, got {type(row)}"
                )

    def _derive(self, rows: Iterable[Row]) -> Self:
        return self.__class__(rows)

    # Introspection

    def __len__(self) -> int:
        return len(self.rows)

    def __str__(self) -> str:
        return utils.tabulate.tabulate(
            self.rows,
            self.columns,
            max_rows=config.options.display_max_rows,
            max_width=config.options.display_max_width,
        )

    def __repr__(self) -> str:
        return f"DataFrame(shape={self.shape})\n{self}"

    @property
    def columns(self) -> list[Any]:
        """The keys of the first row, empty if the frame has no rows."""
        if not self.rows:
            return []
        return list(self.rows[0].keys())

    @property
    def shape(self) -> tuple[int, int]:
        """``(rows, columns)``, columns are counted on the first row."""
        return (len(self.rows), len(self.columns))

    @property
    def is_empty(self) -> bool:
        """``True`` when the frame has no rows."""
        return not self.rows

    def check_schema(self) -> None:
        """Verify that every row has the same columns, in the same order, of the first row.

        >>> DataFrame([{"a": 1, "b": 2}, {"b": 3}]).check_schema()
        Traceback (most recent call last):
            ...
        rowframe.dataframe.dataframe.SchemaError: Row 1 has columns ['b'], expected ['a', 'b']
        """
        expected = self.columns
        for index, row in enumerate(self.rows):
            found = list(row.keys())
            if found != expected:
                config.get_logger().debug(
                    "Schema check failed on row %d of %d", index, len(self.rows)
                )
                raise SchemaError(
                    f"Row {index} has columns {found!r}, expected {expected!r}"
                )

    # Columns

    def col(self, key: Any) -> Series:
        """Get the values of a column as a :class:`rowframe.Series` named ``key``.

        Rows that lack the column provide :data:`rowframe.cells.MISSING`.
        """
        return Series([row.get(key, MISSING) for row in self.rows], key)

    def select(self, *keys: Any) -> Self:
        """Keep only the given columns, in the given order."""
        return self._derive(pick(row, keys) for row in self.rows)

    def drop(self, *keys: Any) -> Self:
        """Remove the given columns.

        The remaining columns are the :attr:`columns` of the frame,
        so rows with additional columns compared to the first one
        will lose them too.
        """
        columns = self.columns
        excluded = set(keys)
        return self._derive(omit(row, columns, excluded) for row in self.rows)

    def assign(
        self,
        mapping: Optional[Mapping[Any, Callable[[Row], Any]]] = None,
        **columns: Callable[[Row], Any],
    ) -> Self:
        """Add or replace columns computed from each row.

        All functions receive the original row, so a column
        being assigned can't depend on another one assigned
        by the same call.

        >>> df = DataFrame([{"name": "Alice", "age": 30}])
        >>> df.assign(birth_year=lambda r: 2025 - r["age"]).to_array()
        [{'name': 'Alice', 'age': 30, 'birth_year': 1995}]

        :param mapping: ``{column_name: function(row)}``.
        :param columns: Same as ``mapping``, as keyword arguments.
        """
        functions = {**(mapping or {}), **columns}
        return self._derive(
            {**row, **{name: fn(row) for name, fn in functions.items()}}
            for row in self.rows
        )

    def add_column(self, key: Any, fill: Any = None) -> Self:
        """Add a column to all rows.

        ``fill`` can be a :class:`rowframe.Constant`, giving all rows the same value,
        or a :class:`rowframe.Generator`, computing the value from ``(row, index)``.
        Plain values are treated as constants, plain callables as generators.

        >>> df = DataFrame([{"name": "Alice"}, {"name": "Bob"}])
        >>> df.add_column("initial", lambda row: row["name"][0]).col("initial").to_array()
        ['A', 'B']
        >>> df.add_column("n", Constant(len)).col("n").to_array()
        [<built-in function len>, <built-in function len>]
        """
        fill = as_column_fill(fill)
        return self._derive(
            {**row, key: fill.apply(row, index)} for index, row in enumerate(self.rows)
        )

    def map_columns(self, fn_map: Mapping[Any, Callable[[Series], Any]]) -> Self:
        """Compute new columns from the Series of existing ones.

        Each function receives the Series of the column with the same name
        and must return a Series (or sequence of values) of the same length.
        The new frame only contains the columns in ``fn_map``.

        >>> df = DataFrame([{"name": "alice", "age": 30}, {"name": "bob", "age": 25}])
        >>> df.map_columns({"name": lambda s: s.to_upper()}).to_array()
        [{'name': 'ALICE'}, {'name': 'BOB'}]
        """
        keys = list(fn_map.keys())
        results = []
        for key, fn in fn_map.items():
            result = fn(self.col(key))
            results.append(result.items if isinstance(result, Series) else list(result))

        config.get_logger().debug("map_columns computed columns %r", keys)
        return self._derive(
            dict(zip(keys, values)) for values in zip(*results, strict=True)
        )

    # Rows

    def iloc(self, selector: Selector) -> Self:
        """Select rows by their position.

        ``selector`` can be a position, a list of positions
        or a :class:`rowframe.Slice`.
        See :mod:`rowframe.compute.pagination` for details and errors.

        >>> df = DataFrame([{"n": 0}, {"n": 1}, {"n": 2}])
        >>> df.iloc([2, 0]).to_array()
        [{'n': 2}, {'n': 0}]
        >>> df.iloc(Slice(start=1)).to_array()
        [{'n': 1}, {'n': 2}]
        """
        indices = resolve_indices(selector, len(self.rows))
        return self._derive(self.rows[i] for i in indices)

    def map_rows(self, fn: Callable[..., Row]) -> Self:
        """Build a new frame from the rows returned by ``fn(row, index)``."""
        fn = utils.inspect.with_index(fn)
        return self._derive(fn(row, i) for i, row in enumerate(self.rows))

    def filter_rows(self, predicate: Callable[..., bool]) -> Self:
        """Keep only the rows for which ``predicate(row, index)`` is true."""
        predicate = utils.inspect.with_index(predicate)
        return self._derive(
            row for i, row in enumerate(self.rows) if predicate(row, i)
        )

    def push_row(self, row: Row) -> None:
        """Append a row to this frame, modifying it."""
        self.rows.append(row)

    # Joins

    def left_join(self, other: "DataFrame", this_key: Any, other_key: Any = None) -> Self:
        """Join with ``other`` preserving all rows of this frame.

        Rows of this frame without a match in ``other`` get ``None``
        for the columns of ``other``. When more rows of ``other``
        have the same key, only the first one is used.
        See :class:`rowframe.compute.HashJoin`.

        :param other: The frame to join with.
        :param this_key: The column of this frame to join on.
        :param other_key: The column of ``other`` to join on, same as ``this_key`` if omitted.
        """
        other_key = this_key if other_key is None else other_key
        join = HashJoin(self.rows, this_key, other.rows, other_key, other.columns)
        return self._derive(join.rows())

    def right_join(self, other: "DataFrame", this_key: Any, other_key: Any = None) -> Self:
        """Join with ``other`` preserving all rows of ``other``.

        The mirror of :meth:`left_join`, the rows of this frame are
        the ones that get indexed and looked up.

        Each resulting row starts with the columns of the ``other`` row,
        followed by the columns of this frame except ``this_key``:

        >>> users = DataFrame([{"id": 1, "name": "Alice"}])
        >>> ages = DataFrame([{"userId": 1, "age": 25}, {"userId": 3, "age": 30}])
        >>> users.right_join(ages, "id", "userId").to_array()
        [{'userId': 1, 'age': 25, 'name': 'Alice'}, {'userId': 3, 'age': 30, 'name': None}]

        :param other: The frame to join with.
        :param this_key: The column of this frame to join on.
        :param other_key: The column of ``other`` to join on, same as ``this_key`` if omitted.
        """
        other_key = this_key if other_key is None else other_key
        join = HashJoin(other.rows, other_key, self.rows, this_key, self.columns)
        return self._derive(join.rows())

    # Export

    def to_array(self) -> list[Row]:
        """Get a copy of the list of rows, the rows are not copied."""
        return list(self.rows)

    def head(self, n: int = 5) -> list[Row]:
        """The first ``n`` rows."""
        return self.rows[:n]

    def tail(self, n: int = 5) -> list[Row]:
        """The last ``n`` rows."""
        if n <= 0:
            return []
        return self.rows[-n:]

    def copy(self) -> Self:
        """Get a new frame where each row is a copy of the rows of this one."""
        return self._derive(dict(row) for row in self.rows)

    def to_arrow(self) -> pa.Table:
        """Convert the frame to a :class:`pyarrow.Table` with the :attr:`columns` of the frame."""
        return rows_to_arrow(self.rows, self.columns)


class SchemaError(RowFrameError, ValueError):
    """The rows of a frame don't share the same columns."""
