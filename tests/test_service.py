import itertools
import json

import pytest
from board import Board
from patterns import PATTERNS
from service import GameOfLifeService
from simulate import NotStableError
from storage import InMemoryBoardStore


class RecordingStore(InMemoryBoardStore):
    def __init__(self):
        super().__init__()
        self.saves = 0

    def save(self, board):
        self.saves += 1
        super().save(board)


@pytest.fixture
def store():
    return RecordingStore()


@pytest.fixture
def log_file(tmp_path):
    return tmp_path / "logs" / "events.log"


@pytest.fixture
def service(store, log_file):
    counter = itertools.count(1)
    return GameOfLifeService(store, id_factory=lambda: f"board-{next(counter)}", log_file=log_file)


def _upload(service, cells, width=5, height=5):
    return service.upload(Board(width=width, height=height, live_cells=cells))


def test_service_requires_store():
    with pytest.raises(ValueError):
        GameOfLifeService(None)


def test_upload_assigns_fresh_id_and_saves(service, store):
    board = Board(width=5, height=5, live_cells={(1, 1), (2, 2), (3, 3)}, id="caller-chosen")
    board_id = service.upload(board)
    assert board_id == "board-1"
    assert board.id == "board-1"
    assert store.saves == 1
    assert service.get(board_id).live_cells == frozenset({(1, 1), (2, 2), (3, 3)})


def test_get_does_not_step(service, store):
    board_id = _upload(service, PATTERNS["blinker"])
    assert service.get(board_id).live_cells == PATTERNS["blinker"]
    assert service.get(board_id).live_cells == PATTERNS["blinker"]
    assert store.saves == 1


def test_next_state_steps_and_persists(service, store):
    board_id = _upload(service, {(1, 0), (1, 1), (1, 2)})
    board = service.next_state(board_id)
    assert board.id == board_id
    assert board.live_cells == frozenset({(0, 1), (1, 1), (2, 1)})
    assert store.saves == 2
    assert service.get(board_id).live_cells == board.live_cells
    assert service.next_state(board_id).live_cells == frozenset({(1, 0), (1, 1), (1, 2)})


def test_unknown_id_yields_none(service, store):
    assert service.get("nope") is None
    assert service.next_state("nope") is None
    assert service.states_away("nope", 3) is None
    assert service.final_state("nope") is None
    assert store.saves == 0


def test_states_away(service):
    board_id = _upload(service, PATTERNS["glider"], width=3, height=3)
    board = service.states_away(board_id, 8)
    assert board.live_cells == frozenset((x + 2, y + 2) for x, y in PATTERNS["glider"])
    assert (board.width, board.height) == (3, 3)


def test_states_away_zero_still_saves(service, store):
    board_id = _upload(service, PATTERNS["blinker"])
    board = service.states_away(board_id, 0)
    assert board.live_cells == PATTERNS["blinker"]
    assert store.saves == 2


def test_states_away_negative_rejected(service, store):
    board_id = _upload(service, PATTERNS["blinker"])
    with pytest.raises(ValueError):
        service.states_away(board_id, -1)
    assert store.saves == 1


def test_final_state_of_dying_diagonal(service):
    board_id = _upload(service, {(1, 1), (2, 2), (3, 3)})
    board = service.final_state(board_id)
    assert board.id == board_id
    assert board.live_cells == frozenset()
    assert service.get(board_id).live_cells == frozenset()


def test_final_state_still_life_unchanged(service):
    board_id = _upload(service, PATTERNS["block"])
    assert service.final_state(board_id).live_cells == PATTERNS["block"]


def test_final_state_not_stable_leaves_board_untouched(store, log_file):
    service = GameOfLifeService(store, id_factory=lambda: "osc", max_iterations=25, log_file=log_file)
    _upload(service, PATTERNS["blinker"])
    with pytest.raises(NotStableError):
        service.final_state("osc")
    assert store.saves == 1
    assert service.get("osc").live_cells == PATTERNS["blinker"]


def test_operations_are_logged(service, log_file):
    board_id = _upload(service, PATTERNS["blinker"])
    service.next_state(board_id)
    service.states_away(board_id, 3)
    with pytest.raises(NotStableError):
        service.final_state(board_id)

    entries = [json.loads(line) for line in log_file.read_text().splitlines()]
    assert [e["action"] for e in entries] == ["upload", "next", "advance", "final"]
    assert all(e["board_id"] == board_id for e in entries)
    assert entries[0]["live"] == 3
    assert entries[2]["steps"] == 3
    assert "error" in entries[3]
