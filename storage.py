from __future__ import annotations

import json
import pathlib
import uuid
from typing import Dict, List, Optional, Protocol

from board import Board


def new_id() -> str:
    """Fresh 128-bit random board identifier."""
    return uuid.uuid4().hex


class BoardStore(Protocol):
    def save(self, board: Board) -> None:
        ...

    def load(self, board_id: str) -> Optional[Board]:
        ...


class InMemoryBoardStore:
    """Dict-backed store. Boards are copied in and out."""

    def __init__(self) -> None:
        self._boards: Dict[str, Board] = {}

    def save(self, board: Board) -> None:
        if board.id is None:
            raise ValueError("cannot save a board without an id")
        self._boards[board.id] = board.copy()

    def load(self, board_id: str) -> Optional[Board]:
        board = self._boards.get(board_id)
        return board.copy() if board is not None else None

    def __len__(self) -> int:
        return len(self._boards)


class JsonlBoardStore:
    '''
    File-backed store: one board record per line. `save` rewrites the file
    with the matching record replaced, or appends a new one.
    '''

    def __init__(self, path: pathlib.Path):
        self.path = pathlib.Path(path)

    def _read(self) -> List[Dict]:
        if not self.path.exists():
            return []
        lines = self.path.read_text(encoding="utf-8").splitlines()
        return [json.loads(line) for line in lines if line.strip()]

    def save(self, board: Board) -> None:
        if board.id is None:
            raise ValueError("cannot save a board without an id")
        records = self._read()
        new_record = board.to_record()
        for idx, record in enumerate(records):
            if record.get("id") == board.id:
                records[idx] = new_record
                break
        else:
            records.append(new_record)

        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            with tmp_path.open("w", encoding="utf-8") as f:
                for record in records:
                    f.write(json.dumps(record, separators=(",", ":")) + "\n")
        except BaseException:
            tmp_path.unlink()
            raise
        # the old file stays intact until the rewrite is complete
        tmp_path.replace(self.path)

    def load(self, board_id: str) -> Optional[Board]:
        for record in self._read():
            if record.get("id") == board_id:
                return Board.from_record(record)
        return None
