"""Format tabular data into a text table for print.

the `tabulate` function takes a list of rows and the columns to show
and formats them into a text table.
It will truncate long strings, format floats to 2 decimal places, and limit the number of rows to display.
The function is used to display DataFrames and Series when they are printed.

Example:

    >>> rows = [
    ...     {"Product": "Videogame", "Quantity": 8, "Price": 66.5},
    ...     {"Product": "Laptop", "Quantity": 8, "Price": 38.72},
    ...     {"Product": "Laptop", "Quantity": 7, "Price": 77.46},
    ... ]
    >>> print(tabulate(rows, ["Product", "Quantity", "Price"]))
    Product   | Quantity | Price
    --------- | -------- | -----
    Videogame | 8        | 66.50
    Laptop    | 8        | 38.72
    Laptop    | 7        | 77.46
"""

from typing import Any, Sequence

from ..cells import MISSING


def tabulate(
    rows: Sequence[dict],
    columns: Sequence[str],
    max_rows: int = 20,
    max_width: int = 30,
) -> str:
    """Format a list of rows into a text table.

    Will produce a string like::

        Product   | Quantity | Price | Total
        --------- | -------- | ----- | ------
        Videogame | 8        | 66.50 | 532.00
        Laptop    | 8        | 38.72 | 309.76
        Laptop    | 7        | 77.46 | 542.22

    Values are looked up by column name, so rows
    that lack one of the columns show it as ``undefined``.
    """
    cols = [str(c) for c in columns]
    textrows = [
        [format_value(row.get(c, MISSING), max_width) for c in columns]
        for row in rows[:max_rows]
    ]

    colsizes = compute_max_colsize(cols, textrows)
    header = [maketablerow(cols, colsizes=colsizes)]
    separator = [maketablerow(["-"] * len(cols), colsizes=colsizes, fillvalue="-")]
    body = [maketablerow(row, colsizes=colsizes) for row in textrows]

    table = "\n".join(header + separator + body)
    if len(rows) > max_rows:
        table += f"\n... and {len(rows) - max_rows} more rows"
    return table


def compute_max_colsize(cols: list[str], rows: list[list[str]]) -> list[int]:
    """Compute the maximum size of each column in a table."""
    return [
        max([len(row[colidx]) for row in rows] + [len(cols[colidx])])
        for colidx, _ in enumerate(cols)
    ]


def maketablerow(cols: list[str], colsizes: list[int], fillvalue: str = " ") -> str:
    """Make a table row with the given column sizes."""
    return " | ".join(
        [col.ljust(colsizes[idx], fillvalue) for idx, col in enumerate(cols)]
    )


def format_value(v: Any, max_width: int = 30) -> str:
    """Format a value to be printed in the table.

    This function will format floats to 2 decimal places,
    and truncate long strings. ``None`` is printed as ``null``.
    """
    if isinstance(v, float):
        return f"{v:.2f}"
    elif isinstance(v, bool):
        return "true" if v else "false"
    elif v is None:
        return "null"

    v = str(v)
    if len(v) > max_width:
        v = v[: max_width - 3] + "..."
    return v
