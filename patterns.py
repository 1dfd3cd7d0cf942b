from __future__ import annotations
from typing import Dict, List, Sequence

from cells import Coordinate, LiveCells, bounding_box


def cells_from_strings(lines: Sequence[str], origin: Coordinate = (0, 0), live_char: str = "#") -> LiveCells:
    """Parse a text picture (rows top to bottom, y grows downwards) into live cells."""
    ox, oy = origin
    return frozenset(
        (ox + x, oy + y)
        for y, row in enumerate(lines)
        for x, ch in enumerate(row)
        if ch == live_char
    )


def cells_to_strings(cells: LiveCells, pad: int = 0, live: str = "#", dead: str = ".") -> List[str]:
    '''
    Render the bounding box of `cells` (plus `pad`) as text rows.
    An empty board renders as no rows.
    '''
    if not cells:
        return []
    minx, maxx, miny, maxy = bounding_box(cells, pad=pad)
    return [
        "".join(live if (x, y) in cells else dead for x in range(minx, maxx + 1))
        for y in range(miny, maxy + 1)
    ]


PATTERNS: Dict[str, LiveCells] = {
    "block": cells_from_strings(["##", "##"]),
    "beehive": cells_from_strings([".##.", "#..#", ".##."]),
    "blinker": cells_from_strings(["###"]),
    "toad": cells_from_strings([".###", "###."]),
    "glider": cells_from_strings([".#.", "..#", "###"]),
}
