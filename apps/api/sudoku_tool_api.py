# sudoku_tool_api.py
# Optional FastAPI wrapper for the tool functions.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload

import random

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from sudoku_tutor.candidates import all_candidates, candidates_to_keys, merge_candidates
from sudoku_tutor.completion import is_solved, units_completed_by
from sudoku_tutor.config import EngineConfig
from sudoku_tutor.constraints import find_conflict, sanity_check
from sudoku_tutor.errors import GenerationError, SudokuError
from sudoku_tutor.generator import generate, solve_existing
from sudoku_tutor.hints import find_hint
from sudoku_tutor.solver_core import normalize_grid
from sudoku_tutor.sudoku_tools import apply_hint, compute_candidates_tool, hint_tool
from sudoku_tutor.sudoku_tools import next_moves as _next_moves

app = FastAPI(title="Sudoku Tutor Tool API")
engine_config = EngineConfig()

CellGrid = list[list[int | None]]


@app.exception_handler(SudokuError)
async def sudoku_error_handler(request: Request, exc: SudokuError):
    status = 500 if isinstance(exc, GenerationError) else 422
    return JSONResponse(status_code=status, content={"error": type(exc).__name__, "detail": str(exc)})


class GridModel(BaseModel):
    grid: CellGrid


class SanityRequest(BaseModel):
    original: CellGrid
    current: CellGrid


class ConflictRequest(BaseModel):
    grid: CellGrid
    row: int
    col: int
    value: int


class CellRequest(BaseModel):
    grid: CellGrid
    row: int
    col: int


class HintRequest(BaseModel):
    current: CellGrid
    candidates: dict[str, list[int]] | None = None
    max_level: str | None = None


class NextMovesRequest(HintRequest):
    max_moves: int = Field(default=5, ge=1, le=200)
    chain: bool = True


class ApplyMoveRequest(HintRequest):
    pass


class GenerateRequest(BaseModel):
    difficulty: str = "easy"
    seed: int | None = None
    unique: bool | None = None


class SolveRequest(BaseModel):
    grid: CellGrid
    seed: int | None = None


@app.post("/sanity_check")
def api_sanity(payload: SanityRequest):
    return sanity_check(payload.original, payload.current)


@app.post("/compute_candidates")
def api_cands(payload: GridModel):
    return compute_candidates_tool(payload.grid)


@app.post("/conflict")
def api_conflict(req: ConflictRequest):
    conflict = find_conflict(req.grid, req.row, req.col, req.value)
    return {"valid": conflict is None, "conflict": conflict.to_dict() if conflict else None}


@app.post("/hint")
def api_hint(req: HintRequest):
    return hint_tool(req.current, req.candidates, req.max_level)


@app.post("/next_moves")
def api_moves(req: NextMovesRequest):
    return _next_moves(req.current, req.candidates, req.max_level, req.max_moves, req.chain)


@app.post("/apply_move")
def api_apply(req: ApplyMoveRequest):
    """Find the next hint and return the state after applying it.

    Returned candidates are the caller's notes (or computed ones) with the move applied.
    """
    grid = normalize_grid(req.current)
    shown = merge_candidates(grid, req.candidates)
    hint = find_hint(grid, all_candidates(grid), req.max_level, shown)
    new_grid, new_cands = apply_hint(grid, shown, hint)
    return {"move": hint.to_dict(), "current": new_grid, "candidates": candidates_to_keys(new_cands)}


@app.post("/completion")
def api_completion(req: CellRequest):
    units = units_completed_by(req.grid, req.row, req.col)
    return {"completed": [u.to_dict() for u in units], "solved": is_solved(req.grid)}


@app.post("/solve")
def api_solve(req: SolveRequest):
    rng = random.Random(req.seed) if req.seed is not None else None
    solution = solve_existing(req.grid, rng=rng, config=engine_config)
    return {"solved": solution is not None, "solution": solution}


@app.post("/generate")
def api_generate(req: GenerateRequest):
    rng = random.Random(req.seed) if req.seed is not None else None
    puzzle = generate(req.difficulty, rng=rng, unique=req.unique, config=engine_config)
    return {
        "difficulty": puzzle.difficulty.value,
        "puzzle": puzzle.puzzle,
        "solution": puzzle.solution,
        "clues": puzzle.clues,
    }

