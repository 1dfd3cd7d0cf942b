from __future__ import annotations

import pathlib
from typing import Callable, Optional

from board import Board
from event_logger import LOG_PATH, log_event
from rules import CONWAY, LifeRule
from simulate import DEFAULT_MAX_ITERATIONS, NotStableError, stabilize, step, step_n
from storage import BoardStore, new_id


class GameOfLifeService:
    """
    Board operations over a storage collaborator. Every operation that
    advances a board replaces its live cells and saves it; an unknown id
    yields None.
    """

    def __init__(
        self,
        store: BoardStore,
        *,
        id_factory: Callable[[], str] = new_id,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
        rule: LifeRule = CONWAY,
        log_file: pathlib.Path = LOG_PATH,
    ):
        if store is None:
            raise ValueError("store is required")
        self.store = store
        self.id_factory = id_factory
        self.max_iterations = max_iterations
        self.rule = rule
        self.log_file = log_file

    def _log(self, action: str, board_id: Optional[str], **fields) -> None:
        log_event(action, board_id, log_file=self.log_file, **fields)

    def upload(self, board: Board) -> str:
        board.id = self.id_factory()
        self.store.save(board)
        self._log("upload", board.id, live=len(board.live_cells))
        return board.id

    def get(self, board_id: str) -> Optional[Board]:
        return self.store.load(board_id)

    def next_state(self, board_id: str) -> Optional[Board]:
        board = self.store.load(board_id)
        if board is None:
            return None
        board.live_cells = step(board.live_cells, self.rule)
        self.store.save(board)
        self._log("next", board_id, live=len(board.live_cells))
        return board

    def states_away(self, board_id: str, n: int) -> Optional[Board]:
        if n < 0:
            raise ValueError(f"number of generations must be non-negative, got {n}")
        board = self.store.load(board_id)
        if board is None:
            return None
        board.live_cells = step_n(board.live_cells, n, self.rule)
        self.store.save(board)
        self._log("advance", board_id, steps=n, live=len(board.live_cells))
        return board

    def final_state(self, board_id: str) -> Optional[Board]:
        '''
        Advance the board to its fixed point and save it. Raises
        NotStableError (leaving the stored board untouched) if none is
        reached within `max_iterations`.
        '''
        board = self.store.load(board_id)
        if board is None:
            return None
        try:
            board.live_cells = stabilize(board.live_cells, self.max_iterations, self.rule)
        except NotStableError as exc:
            self._log("final", board_id, error=str(exc), max_iterations=exc.max_iterations)
            raise
        self.store.save(board)
        self._log("final", board_id, live=len(board.live_cells))
        return board
