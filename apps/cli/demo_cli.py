"""Command-line front end for the engine: generate, solve, hint, chained moves and difficulty rating, each printing a JSON payload."""

# demo_cli.py
# End-to-end demo without the app:
# - generate a puzzle, or read one from --puzzle (81 chars, 9 lines, or a file)
# - solve it, ask for the next hint, or list chained moves
#
# Usage:
#   python -m apps.cli.demo_cli generate --difficulty medium --seed 123
#   python -m apps.cli.demo_cli hint --puzzle puzzles/l2.txt
#   python -m apps.cli.demo_cli moves --puzzle "53..7....6..195..." --max_moves 10

import argparse
import json
import logging
import random
import sys
from pathlib import Path

from sudoku_tutor.config import load_config
from sudoku_tutor.errors import SudokuError
from sudoku_tutor.generator import generate, solve_existing
from sudoku_tutor.solver_core import format_grid, grid_to_string, parse_grid
from sudoku_tutor.sudoku_tools import compute_candidates_tool, hint_tool, next_moves, rate_difficulty

logger = logging.getLogger("sudoku_tutor.cli")


def read_puzzle(arg: str):
    """--puzzle accepts the grid text itself or a path to a file holding it."""
    path = Path(arg)
    if len(arg) < 256 and path.is_file():
        return parse_grid(path.read_text(encoding="utf-8"))
    return parse_grid(arg)


def cmd_generate(args, cfg):
    rng = random.Random(args.seed)
    puzzle = generate(args.difficulty, rng=rng, unique=args.unique, config=cfg)
    logger.info("puzzle:\n%s", format_grid(puzzle.puzzle))
    return {
        "difficulty": puzzle.difficulty.value,
        "clues": puzzle.clues,
        "puzzle": grid_to_string(puzzle.puzzle),
        "solution": grid_to_string(puzzle.solution),
    }


def cmd_solve(args, cfg):
    grid = read_puzzle(args.puzzle)
    solution = solve_existing(grid, rng=random.Random(args.seed), config=cfg)
    if solution is not None:
        logger.info("solution:\n%s", format_grid(solution))
    return {"solved": solution is not None, "solution": grid_to_string(solution) if solution else None}


def cmd_hint(args, cfg):
    grid = read_puzzle(args.puzzle)
    cands = compute_candidates_tool(grid)["candidates"]
    return {
        "hint": hint_tool(grid, max_level=args.max_level or cfg.max_hint_level),
        "candidates_count": sum(len(v) for v in cands.values()),
    }


def cmd_moves(args, cfg):
    grid = read_puzzle(args.puzzle)
    result = next_moves(
        grid, max_level=args.max_level or cfg.max_hint_level, max_moves=args.max_moves, chain=True
    )
    return {
        "moves": result["moves"],
        "solved": result["solved"],
        "current": grid_to_string(result["snapshot"]["current"]),
    }


def cmd_rate(args, cfg):
    grid = read_puzzle(args.puzzle)
    level = rate_difficulty(grid)
    return {"level": level.name.lower() if level else None}


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="sudoku-tutor")
    ap.add_argument("--config", type=str, default=None, help="YAML engine config")
    ap.add_argument("--verbose", "-v", action="store_true")
    sub = ap.add_subparsers(dest="command", required=True)

    g = sub.add_parser("generate")
    g.add_argument("--difficulty", type=str, default="easy", choices=["easy", "medium", "hard"])
    g.add_argument("--seed", type=int, default=None)
    g.add_argument("--unique", action="store_true", default=None)
    g.set_defaults(func=cmd_generate)

    s = sub.add_parser("solve")
    s.add_argument("--puzzle", required=True)
    s.add_argument("--seed", type=int, default=None)
    s.set_defaults(func=cmd_solve)

    h = sub.add_parser("hint")
    h.add_argument("--puzzle", required=True)
    h.add_argument("--max_level", type=str, default=None, choices=["beginner", "intermediate", "advanced", "pro"])
    h.set_defaults(func=cmd_hint)

    m = sub.add_parser("moves")
    m.add_argument("--puzzle", required=True)
    m.add_argument("--max_level", type=str, default=None, choices=["beginner", "intermediate", "advanced", "pro"])
    m.add_argument("--max_moves", type=int, default=5)
    m.set_defaults(func=cmd_moves)

    r = sub.add_parser("rate")
    r.add_argument("--puzzle", required=True)
    r.set_defaults(func=cmd_rate)
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        cfg = load_config(args.config)
        payload = args.func(args, cfg)
    except SudokuError as e:
        print(json.dumps({"error": type(e).__name__, "detail": str(e)}, indent=2))
        return 2
    print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
