"""
board_cli.py

Upload Game of Life boards and advance them from the command line.
Boards are kept in the JSONL store named in the YAML config (life.yaml).

Example
-------
python board_cli.py --action upload --width 5 --height 5 --pattern glider
python board_cli.py --action advance --id 3f2a... --n 8
python board_cli.py --action final --id 3f2a...
python board_cli.py --action show --id 3f2a... --generations 4
"""

from __future__ import annotations
import argparse, json, pathlib, sys
from typing import List

from board import Board
from config import DEFAULT_CONFIG, Settings, load_config
from generate import BoardGenerator
from patterns import PATTERNS, cells_to_strings
from service import GameOfLifeService
from simulate import NotStableError, generations
from storage import JsonlBoardStore

ACTIONS = ("upload", "get", "next", "advance", "final", "show")


def non_negative_int(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {n}")
    return n


def probability(value: str) -> float:
    p = float(value)
    if not (0.0 <= p <= 1.0):
        raise argparse.ArgumentTypeError(f"must be in [0, 1], got {p}")
    return p


def make_service(settings: Settings) -> GameOfLifeService:
    return GameOfLifeService(
        JsonlBoardStore(settings.store),
        max_iterations=settings.max_iterations,
        rule=settings.life_rule(),
        log_file=settings.log_file,
    )


def build_upload_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Upload a new board and print its id.")
    p.add_argument("--width", type=non_negative_int, required=True, help="Informational board width.")
    p.add_argument("--height", type=non_negative_int, required=True, help="Informational board height.")
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--cells", type=str, help='Live cells as JSON, e.g. "[[1,0],[1,1],[1,2]]".')
    src.add_argument("--pattern", choices=sorted(PATTERNS), help="Named pattern from the catalogue.")
    src.add_argument("--random", action="store_true", help="Random soup inside width x height.")
    p.add_argument("--density", type=probability, default=0.5, help="Probability a cell starts alive (--random).")
    p.add_argument("--seed", type=int, default=42, help="RNG seed (--random).")
    p.add_argument("--allow-trivial", action="store_true",
                   help="Keep an empty or already-stable random soup instead of redrawing it (--random).")
    return p


def build_board_parser(action: str) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description=f"Run '{action}' on a stored board.")
    p.add_argument("--id", required=True, help="Board identifier returned by upload.")
    if action == "advance":
        p.add_argument("--n", type=non_negative_int, required=True, help="Generations to advance.")
    if action == "show":
        p.add_argument("--generations", type=non_negative_int, default=0,
                       help="Also render this many following generations (not saved).")
    return p


def upload(service: GameOfLifeService, argv: List[str]) -> None:
    args = build_upload_parser().parse_args(argv)
    if args.random:
        gen = BoardGenerator(args.width, args.height, seed=args.seed, density=args.density, rule=service.rule)
        try:
            board = gen.generate_batch(1, trim_trivial=not args.allow_trivial)[0]
        except RuntimeError as e:
            sys.exit(f"No random board uploaded: {e}")
    else:
        if args.pattern:
            live_cells = PATTERNS[args.pattern]
        else:
            try:
                live_cells = json.loads(args.cells)
            except json.JSONDecodeError as e:
                sys.exit(f"--cells is not valid JSON: {e}")
        try:
            board = Board(width=args.width, height=args.height, live_cells=live_cells)
        except ValueError as e:
            sys.exit(f"Invalid board: {e}")
    print(service.upload(board))


def _print_board(board: Board) -> None:
    print(json.dumps(board.to_record(), separators=(",", ":")))


def run_board_action(service: GameOfLifeService, action: str, argv: List[str]) -> None:
    args = build_board_parser(action).parse_args(argv)

    if action == "get" or action == "show":
        board = service.get(args.id)
    elif action == "next":
        board = service.next_state(args.id)
    elif action == "advance":
        board = service.states_away(args.id, args.n)
    else:
        try:
            board = service.final_state(args.id)
        except NotStableError as e:
            print(str(e), file=sys.stderr)
            sys.exit(1)

    if board is None:
        print(f"No board with id {args.id}", file=sys.stderr)
        return

    if action != "show":
        _print_board(board)
        return

    gen = generations(board.live_cells, service.rule)
    for i in range(args.generations + 1):
        rows = cells_to_strings(next(gen), pad=1)
        print(f"Generation {i}:")
        print("\n".join(rows) if rows else "(empty)")
        print()


def dispatch_main(argv: List[str] | None = None) -> None:
    """
    Dispatcher that reads --action and --config, then hands the remaining
    arguments to the action's own parser.
    """
    top = argparse.ArgumentParser(add_help=False)
    top.add_argument("--action", choices=ACTIONS, required=True, help="Operation to run.")
    top.add_argument("--config", type=pathlib.Path, default=DEFAULT_CONFIG, help="Path to life.yaml")
    args, remaining = top.parse_known_args(argv)

    try:
        settings = load_config(args.config)
    except ValueError as e:
        sys.exit(f"Bad config: {e}")
    service = make_service(settings)

    if args.action == "upload":
        upload(service, remaining)
    else:
        run_board_action(service, args.action, remaining)


if __name__ == "__main__":
    dispatch_main()
