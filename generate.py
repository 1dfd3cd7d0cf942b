import numpy as np
from typing import List

from board import Board
from rules import CONWAY, LifeRule
from simulate import step


class BoardGenerator:
    """
    Random soup generator. Cells are seeded inside the width x height window
    only; the simulation itself is not bounded by it.
    """
    def __init__(self, width: int, height: int, *, seed: int = 42, density: float = 0.5, rule: LifeRule = CONWAY):
        if not (0.0 <= density <= 1.0):
            raise ValueError(f"density must be in [0, 1], got {density}")
        self.w = width
        self.h = height
        self.density = density
        self.rule = rule
        self.rng = np.random.default_rng(seed)

    def _make_cells(self):
        """
        Sample an HxW mask with the given density and keep the live (x, y) positions.
        """
        mask = self.rng.random((self.h, self.w)) < self.density
        ys, xs = np.nonzero(mask)
        return frozenset(zip(xs.tolist(), ys.tolist()))

    def generate(self) -> Board:
        return Board(width=self.w, height=self.h, live_cells=self._make_cells())

    def is_trivial(self, board: Board) -> bool:
        """
        Return True if the board is trivial: no live cells, or one step leaves
        it unchanged.
        """
        if not board.live_cells:
            return True
        return step(board.live_cells, self.rule) == board.live_cells

    def generate_batch(
        self,
        num_boards: int,
        trim_trivial: bool = True,
        max_attempts_factor: int = 10,
    ) -> List[Board]:
        """
        Generate a batch of random boards.
        If trim_trivial is True, filters out trivial boards.
        """
        boards: List[Board] = []
        attempts = 0
        max_attempts = max_attempts_factor * num_boards

        while attempts < max_attempts and len(boards) < num_boards:
            board = self.generate()
            if not trim_trivial or not self.is_trivial(board):
                boards.append(board)
            attempts += 1

        if len(boards) < num_boards:
            raise RuntimeError(
                f"Could only create {len(boards)}/{num_boards} nontrivial boards "
                f"in {max_attempts} attempts."
            )

        return boards
