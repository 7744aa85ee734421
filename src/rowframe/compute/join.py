"""Join operations between two sets of rows.

The joins are implemented with a hash join algorithm
that builds a hash table from one of the tables and then probes it
with the rows of the other table to find matching rows.
Building and probing the table takes ``O(n + m)``
while comparing every row with every other row would take ``O(n * m)``.

Left and Right Joins
====================

Both are provided by :class:`HashJoin`, the difference is only
in which side of the join is the *anchor*: the side whose rows
are all preserved in the result. The other side is the *lookup* side,
it gets indexed and only provides values to the anchor rows.

>>> from rowframe.compute.join import HashJoin
>>> users = [{"id": 1, "name": "Alice"}, {"id": 2, "name": "Bob"}]
>>> ages = [{"userId": 1, "age": 25}, {"userId": 3, "age": 30}]
>>> HashJoin(users, "id", ages, "userId", lookup_columns=["userId", "age"]).rows()
[{'id': 1, 'name': 'Alice', 'age': 25}, {'id': 2, 'name': 'Bob', 'age': None}]

A left join uses the left table as the anchor,
a right join uses the right table as the anchor.

Only one row per key
====================

The hash table maps each key to a single row, when more rows
of the lookup side share the same key only the first one is retained
and the others can't be matched. Each anchor row gets at most one match,
so the result always has exactly as many rows as the anchor side.
"""

from typing import Any, Iterable, Sequence

from .. import config
from ..cells import MISSING, hash_key
from .base import Row

__all__ = ("HashJoin",)


class HashJoin:
    """Join two lists of rows preserving all rows of the anchor side.

    Supposing we have two tables::

        anchor:
        +----+--------+
        | id | name   |
        +----+--------+
        | 1  | Alice  |
        | 2  | Bob    |
        | 3  | Charlie|
        +----+--------+

        lookup:
        +--------+-----+
        | userId | age |
        +--------+-----+
        | 3      | 25  |
        | 1      | 30  |
        | 3      | 99  |
        +--------+-----+

    We would perform the following steps:

    1. Build the hash table of the lookup side, mapping the values of
       the lookup key to the rows. The second row for key ``3``
       is discarded as a row for that key was already found::

        {3: {userId: 3, age: 25}, 1: {userId: 1, age: 30}}

    2. For each row of the anchor side, look for the row with the same key
       in the hash table. When found merge all its columns, except the key,
       into a new row. Columns of the lookup side override columns
       with the same name of the anchor side::

        {id: 1, name: Alice, age: 30}
        {id: 3, name: Charlie, age: 25}

    3. When the anchor row has no match, merge a ``None`` value for
       each column of the lookup side instead, except the key::

        {id: 2, name: Bob, age: None}

    The result preserves the order of the anchor rows::

        +----+--------+------+
        | id | name   | age  |
        +----+--------+------+
        | 1  | Alice  | 30   |
        | 2  | Bob    | None |
        | 3  | Charlie| 25   |
        +----+--------+------+
    """

    def __init__(
        self,
        anchor: Sequence[Row],
        anchor_key: Any,
        lookup: Sequence[Row],
        lookup_key: Any,
        lookup_columns: Iterable[Any],
    ) -> None:
        """
        :param anchor: The rows that will all be part of the result.
        :param anchor_key: The column of the anchor rows to join on.
        :param lookup: The rows that will be indexed and matched.
        :param lookup_key: The column of the lookup rows to join on.
        :param lookup_columns: The columns provided by the lookup side,
                               used to fill rows that have no match.
        """
        self.anchor = anchor
        self.anchor_key = anchor_key
        self.lookup = lookup
        self.lookup_key = lookup_key
        self.lookup_columns = list(lookup_columns)

    def __str__(self) -> str:
        return (
            f"HashJoin(anchor_key={self.anchor_key}, lookup_key={self.lookup_key}, "
            f"anchor_rows={len(self.anchor)}, lookup_rows={len(self.lookup)})"
        )

    __repr__ = __str__

    def build_index(self) -> dict[Any, Row]:
        """Build the hash table of the lookup side.

        The first row seen for each key is the only one retained.
        """
        log = config.get_logger()
        index: dict[Any, Row] = {}
        duplicates = 0
        for row in self.lookup:
            key = hash_key(row.get(self.lookup_key, MISSING))
            if key in index:
                duplicates += 1
                continue
            index[key] = row

        if duplicates:
            log.debug(
                "%s: %d rows ignored as their key was already indexed", self, duplicates
            )
        return index

    def rows(self) -> list[Row]:
        """Perform the join and return the resulting rows.

        Each resulting row is a new ``dict``, the rows
        of the two sides are never modified.
        """
        log = config.get_logger()
        index = self.build_index()
        missing_values = {
            column: None for column in self.lookup_columns if column != self.lookup_key
        }

        result: list[Row] = []
        unmatched = 0
        for row in self.anchor:
            match = index.get(hash_key(row.get(self.anchor_key, MISSING)))
            if match is None:
                unmatched += 1
                result.append({**row, **missing_values})
                continue
            result.append(
                {**row, **{k: v for k, v in match.items() if k != self.lookup_key}}
            )

        log.debug(
            "%s: indexed %d keys, %d anchor rows had no match",
            self,
            len(index),
            unmatched,
        )
        return result
