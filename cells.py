from __future__ import annotations
from typing import FrozenSet, Iterable, Iterator, Tuple

Coordinate = Tuple[int, int]
LiveCells = FrozenSet[Coordinate]   # unbounded plane, only live cells are stored

MOORE_OFFSETS: Tuple[Coordinate, ...] = tuple(
    (dx, dy)
    for dx in (-1, 0, 1)
    for dy in (-1, 0, 1)
    if (dx, dy) != (0, 0)
)


def contains(cells: LiveCells, coord: Coordinate) -> bool:
    return coord in cells


def equals(a: Iterable[Coordinate], b: Iterable[Coordinate]) -> bool:
    """
    Set equality of two coordinate collections. Order and repeated entries in
    either source are ignored.
    """
    return frozenset(a) == frozenset(b)


def neighbors(coord: Coordinate) -> Iterator[Coordinate]:
    x, y = coord
    return ((x + dx, y + dy) for dx, dy in MOORE_OFFSETS)


def live_neighbor_count(cells: LiveCells, coord: Coordinate) -> int:
    """Number of live cells among the eight Moore neighbours of `coord`."""
    return sum(1 for n in neighbors(coord) if n in cells)


def _coerce(raw) -> Coordinate:
    if isinstance(raw, (str, bytes)) or len(raw) != 2:
        raise ValueError(f"coordinate must be an (x, y) pair, got {raw!r}")
    x, y = raw
    for v in (x, y):
        # bool is an int subclass but never a valid coordinate
        if isinstance(v, bool) or not isinstance(v, int):
            raise ValueError(f"coordinate components must be integers, got {raw!r}")
    return (x, y)


def to_cells(raw_cells: Iterable) -> LiveCells:
    '''
    Normalise caller input (tuples, or lists as read from JSON) into a
    LiveCells set. Duplicates collapse; malformed entries raise ValueError.
    '''
    try:
        return frozenset(_coerce(c) for c in raw_cells)
    except TypeError as exc:
        raise ValueError(f"live cells must be an iterable of (x, y) pairs: {exc}") from exc


def bounding_box(cells: LiveCells, pad: int = 0) -> Tuple[int, int, int, int]:
    """Return (min_x, max_x, min_y, max_y), widened by `pad` on every side."""
    if not cells:
        raise ValueError("bounding box of an empty board is undefined")
    xs = [x for x, _ in cells]
    ys = [y for _, y in cells]
    return (min(xs) - pad, max(xs) + pad, min(ys) - pad, max(ys) + pad)


def translate(cells: Iterable[Coordinate], dx: int, dy: int) -> LiveCells:
    return frozenset((x + dx, y + dy) for x, y in cells)
