from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Dict, Optional

from cells import LiveCells, to_cells


@dataclass
class Board:
    '''
    A Game of Life board. `width` and `height` are informational only; the
    live cells may extend anywhere on the integer plane.
    '''
    width: int
    height: int
    live_cells: LiveCells = field(default_factory=frozenset)
    id: Optional[str] = None

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
        self.live_cells = to_cells(self.live_cells)

    def copy(self) -> "Board":
        return replace(self)

    def to_record(self) -> Dict:
        """Serialize as a JSON-friendly dict; cells are sorted for stable output."""
        return {
            "id": self.id,
            "width": self.width,
            "height": self.height,
            "live_cells": [[x, y] for x, y in sorted(self.live_cells)],
        }

    @classmethod
    def from_record(cls, record: Dict) -> "Board":
        """Rebuild a Board from a JSON dict (as written by `to_record`)."""
        missing = [k for k in ("width", "height", "live_cells") if k not in record]
        if missing:
            raise ValueError(f"board record missing keys: {missing}")
        return cls(
            width=record["width"],
            height=record["height"],
            live_cells=record["live_cells"],
            id=record.get("id"),
        )
