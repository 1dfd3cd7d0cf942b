from __future__ import annotations
from typing import Iterable, Iterator

from cells import Coordinate, LiveCells, equals, live_neighbor_count, neighbors
from rules import CONWAY, LifeRule

DEFAULT_MAX_ITERATIONS = 1000


class NotStableError(RuntimeError):
    """Raised by `stabilize` when no fixed point is reached within budget."""

    def __init__(self, max_iterations: int, last_state: LiveCells):
        super().__init__(
            f"Board did not reach a stable state within {max_iterations} iterations."
        )
        self.max_iterations = max_iterations
        self.last_state = last_state


def _candidates(alive: LiveCells) -> set:
    """
    Live cells plus their neighbours. Every coordinate outside this set has
    zero live neighbours and stays dead.
    """
    candidates = set(alive)
    for cell in alive:
        candidates.update(neighbors(cell))
    return candidates


def step(live_cells: Iterable[Coordinate], rule: LifeRule = CONWAY) -> LiveCells:
    '''
    One synchronous generation on the unbounded plane. The input is not
    modified; a new frozenset is returned.
    '''
    alive = frozenset(live_cells)
    return frozenset(
        c for c in _candidates(alive)
        if rule(c in alive, live_neighbor_count(alive, c))
    )


def step_n(live_cells: Iterable[Coordinate], n: int, rule: LifeRule = CONWAY) -> LiveCells:
    """Apply `step` exactly n times, without stopping at fixed points."""
    if n < 0:
        raise ValueError(f"step count must be non-negative, got {n}")
    curr = frozenset(live_cells)
    for _ in range(n):
        curr = step(curr, rule)
    return curr


def stabilize(
    live_cells: Iterable[Coordinate],
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    rule: LifeRule = CONWAY,
) -> LiveCells:
    """
    Step until a generation equals its successor and return it (a still life
    or an empty board). Raises NotStableError once `max_iterations` steps
    have been spent without finding one.
    """
    if max_iterations < 1:
        raise ValueError(f"max_iterations must be positive, got {max_iterations}")
    curr = frozenset(live_cells)
    for _ in range(max_iterations):
        nxt = step(curr, rule)
        if equals(curr, nxt):
            return curr
        curr = nxt
    raise NotStableError(max_iterations, curr)


def generations(live_cells: Iterable[Coordinate], rule: LifeRule = CONWAY) -> Iterator[LiveCells]:
    """Infinite generator of successive generations, starting with generation 0."""
    alive = frozenset(live_cells)
    while True:
        yield alive
        alive = step(alive, rule)
