"""Support picking rows by their position.

Implements the resolution of the selectors accepted by
:meth:`rowframe.DataFrame.iloc` into the list of row positions
that have to be taken. Discarding the rows that
are not part of the selection.

A selector can be:

* a single position, ``1``
* a list of positions, ``[0, 2]``, taken in the provided order
* a :class:`Slice`, ``Slice(start=0, end=4, step=2)``.
  Builtin ``slice(0, 4, 2)`` objects and mappings like
  ``{"start": 0, "end": 4, "step": 2}`` are accepted too.

>>> resolve_indices(1, length=3)
[1]
>>> resolve_indices([2, 0], length=3)
[2, 0]
>>> resolve_indices(Slice(start=0, step=2), length=5)
[0, 2, 4]

Differently from Python sequences, negative positions are
not counted from the end, they are out of bounds:

>>> resolve_indices(-1, length=3)
Traceback (most recent call last):
    ...
rowframe.compute.pagination.OutOfBoundsError: Index -1 out of bounds
"""

from collections.abc import Mapping
from typing import Iterable, NamedTuple, Optional, Union

__all__ = (
    "Slice",
    "resolve_indices",
    "RowFrameError",
    "IlocError",
    "OutOfBoundsError",
    "InvalidSliceError",
    "EmptyFrameError",
)


class Slice(NamedTuple):
    """A range of rows with an optional step.

    Missing values default to the start of the frame,
    the end of the frame and a step of ``1``.
    ``end`` is not included in the selection.
    """

    start: Optional[int] = None
    end: Optional[int] = None
    step: Optional[int] = None


Selector = Union[int, Iterable[int], Slice, slice, Mapping]


def resolve_indices(selector: Selector, length: int) -> list[int]:
    """Convert a selector into the row positions it refers to.

    :param selector: The position(s) to pick, see module documentation.
    :param length: How many rows the frame has.
    """
    if length == 0:
        raise EmptyFrameError("Cannot select rows from an empty DataFrame")

    if isinstance(selector, int) and not isinstance(selector, bool):
        return [_check_bounds(selector, length)]

    if isinstance(selector, (Slice, slice, Mapping)):
        return _resolve_slice(_as_slice(selector), length)

    if isinstance(selector, Iterable) and not isinstance(selector, (str, bytes)):
        return [_check_bounds(i, length) for i in selector]

    raise TypeError(f"Unsupported row selector: {selector!r}")


def _as_slice(selector: Union[Slice, slice, Mapping]) -> Slice:
    if isinstance(selector, Slice):
        return selector
    if isinstance(selector, slice):
        return Slice(selector.start, selector.stop, selector.step)
    unknown = set(selector) - set(Slice._fields)
    if unknown:
        raise TypeError(f"Unsupported slice keys: {', '.join(sorted(map(str, unknown)))}")
    return Slice(**selector)


def _resolve_slice(selection: Slice, length: int) -> list[int]:
    start = 0 if selection.start is None else selection.start
    end = length if selection.end is None else selection.end
    step = 1 if selection.step is None else selection.step

    if start < 0 or end > length or step <= 0:
        raise InvalidSliceError(
            f"Invalid slice parameters start={start}, end={end}, step={step}"
        )
    return list(range(start, end, step))


def _check_bounds(index: int, length: int) -> int:
    if index < 0 or index >= length:
        raise OutOfBoundsError(f"Index {index} out of bounds")
    return index


class RowFrameError(Exception):
    """Base class for the errors raised by rowframe."""


class IlocError(RowFrameError, IndexError):
    """A selection of rows by position could not be performed."""


class OutOfBoundsError(IlocError):
    """A row position is negative or past the end of the frame."""


class InvalidSliceError(IlocError):
    """A slice has a negative start, an end past the frame or a non positive step."""


class EmptyFrameError(IlocError):
    """Rows were requested from a frame that has none."""
