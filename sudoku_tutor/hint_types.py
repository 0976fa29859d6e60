"""Hint result types (one frozen dataclass per technique) and the technique catalog with difficulty levels."""

# hint_types.py
# Hints carry structured data only. `key` and `params()` are opaque to the
# engine: the presentation layer maps them to localized messages. Numbers in
# params() are 1-based (row 1..9, col 1..9, box 1..9); Cell fields are 0-based.
# Hint variants are keyword-only: the Hint base supplies class-level defaults.
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, ClassVar

from .errors import InvalidValueError
from .solver_core import rc_to_key
from .types_sudoku import Cell, UnitType


class TechniqueId(str, Enum):
    NAKED_SINGLE = "naked_single"
    HIDDEN_SINGLE = "hidden_single"
    LOCKED_CANDIDATES_POINTING = "locked_candidates_pointing"
    LOCKED_CANDIDATES_CLAIMING = "locked_candidates_claiming"
    NAKED_PAIR = "naked_pair"
    HIDDEN_PAIR = "hidden_pair"
    NAKED_TRIPLE = "naked_triple"
    HIDDEN_TRIPLE = "hidden_triple"
    X_WING = "x_wing"
    Y_WING = "y_wing"
    SWORDFISH = "swordfish"


class TechniqueLevel(IntEnum):
    BEGINNER = 1
    INTERMEDIATE = 2
    ADVANCED = 3
    PRO = 4

    @classmethod
    def parse(cls, level: "TechniqueLevel | str | int | None") -> "TechniqueLevel | None":
        if level is None or isinstance(level, cls):
            return level
        if isinstance(level, str):
            try:
                return cls[level.strip().upper()]
            except KeyError:
                pass
        elif isinstance(level, int) and not isinstance(level, bool):
            try:
                return cls(level)
            except ValueError:
                pass
        names = ", ".join(m.name.lower() for m in cls)
        raise InvalidValueError(f"unknown technique level {level!r}; expected one of {names}")


class HintKind(str, Enum):
    PLACEMENT = "placement"
    ELIMINATION = "elimination"
    NONE = "none"


@dataclass(frozen=True)
class TechniqueInfo:
    id: TechniqueId
    level: TechniqueLevel
    kind: HintKind


# cascade order: the hint engine tries these top to bottom
TECHNIQUES: tuple[TechniqueInfo, ...] = (
    TechniqueInfo(TechniqueId.NAKED_SINGLE, TechniqueLevel.BEGINNER, HintKind.PLACEMENT),
    TechniqueInfo(TechniqueId.HIDDEN_SINGLE, TechniqueLevel.BEGINNER, HintKind.PLACEMENT),
    TechniqueInfo(TechniqueId.LOCKED_CANDIDATES_POINTING, TechniqueLevel.INTERMEDIATE, HintKind.ELIMINATION),
    TechniqueInfo(TechniqueId.LOCKED_CANDIDATES_CLAIMING, TechniqueLevel.INTERMEDIATE, HintKind.ELIMINATION),
    TechniqueInfo(TechniqueId.NAKED_PAIR, TechniqueLevel.INTERMEDIATE, HintKind.ELIMINATION),
    TechniqueInfo(TechniqueId.HIDDEN_PAIR, TechniqueLevel.INTERMEDIATE, HintKind.ELIMINATION),
    TechniqueInfo(TechniqueId.NAKED_TRIPLE, TechniqueLevel.INTERMEDIATE, HintKind.ELIMINATION),
    TechniqueInfo(TechniqueId.HIDDEN_TRIPLE, TechniqueLevel.ADVANCED, HintKind.ELIMINATION),
    TechniqueInfo(TechniqueId.X_WING, TechniqueLevel.ADVANCED, HintKind.ELIMINATION),
    TechniqueInfo(TechniqueId.Y_WING, TechniqueLevel.ADVANCED, HintKind.ELIMINATION),
    TechniqueInfo(TechniqueId.SWORDFISH, TechniqueLevel.PRO, HintKind.ELIMINATION),
)

TECHNIQUE_LEVELS: dict[TechniqueId, TechniqueLevel] = {t.id: t.level for t in TECHNIQUES}

Elimination = tuple[Cell, int]


def _unit_suffix(unit: UnitType) -> str:
    return {UnitType.ROW: "Row", UnitType.COL: "Col", UnitType.BOX: "Box"}[unit]


def _digits_param(values: tuple[int, ...]) -> str:
    return ",".join(str(v) for v in values)


class Hint:
    """Common interface of every hint variant."""

    technique: ClassVar[TechniqueId | None] = None
    kind: ClassVar[HintKind] = HintKind.ELIMINATION
    key_base: ClassVar[str] = ""

    cell: Cell | None = None
    value: int | None = None
    eliminations: tuple[Elimination, ...] = ()
    related: tuple[Cell, ...] = ()

    @property
    def key(self) -> str:
        return self.key_base

    @property
    def level(self) -> TechniqueLevel | None:
        return TECHNIQUE_LEVELS.get(self.technique) if self.technique else None

    @property
    def found(self) -> bool:
        return self.kind is not HintKind.NONE

    def params(self) -> dict[str, Any]:
        return {}

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "technique": self.technique.value if self.technique else None,
            "type": self.kind.value,
            "key": self.key,
            "params": self.params(),
        }
        if self.level is not None:
            out["level"] = self.level.name.lower()
        if self.cell is not None:
            out["cell"] = {"row": self.cell[0], "col": self.cell[1]}
            out["cellKey"] = rc_to_key(*self.cell)
        if self.kind is HintKind.PLACEMENT:
            out["digit"] = self.value
        if self.eliminations:
            out["eliminate"] = [{"cell": rc_to_key(*cell), "digit": d} for cell, d in self.eliminations]
        if self.related:
            out["related"] = [rc_to_key(*cell) for cell in self.related]
        return out


@dataclass(frozen=True, kw_only=True)
class NoHint(Hint):
    kind: ClassVar[HintKind] = HintKind.NONE
    key_base: ClassVar[str] = "hint_noMove"


@dataclass(frozen=True, kw_only=True)
class NakedSingle(Hint):
    technique: ClassVar[TechniqueId] = TechniqueId.NAKED_SINGLE
    kind: ClassVar[HintKind] = HintKind.PLACEMENT
    key_base: ClassVar[str] = "hint_nakedSingle"

    cell: Cell
    value: int

    def params(self) -> dict[str, Any]:
        return {"row": self.cell[0] + 1, "col": self.cell[1] + 1, "val": self.value}


@dataclass(frozen=True, kw_only=True)
class HiddenSingle(Hint):
    technique: ClassVar[TechniqueId] = TechniqueId.HIDDEN_SINGLE
    kind: ClassVar[HintKind] = HintKind.PLACEMENT
    key_base: ClassVar[str] = "hint_hiddenSingle"

    cell: Cell
    value: int
    unit: UnitType
    index: int

    @property
    def key(self) -> str:
        return self.key_base + _unit_suffix(self.unit)

    def params(self) -> dict[str, Any]:
        p = {"row": self.cell[0] + 1, "col": self.cell[1] + 1, "val": self.value}
        if self.unit is UnitType.BOX:
            p["box"] = self.index + 1
        return p


@dataclass(frozen=True, kw_only=True)
class LockedCandidatesPointing(Hint):
    """Digit confined to one line inside a box; eliminated from that line outside the box."""

    technique: ClassVar[TechniqueId] = TechniqueId.LOCKED_CANDIDATES_POINTING
    key_base: ClassVar[str] = "hint_lockedCandidatePointing"

    cell: Cell
    value: int
    box: int
    unit: UnitType
    index: int
    related: tuple[Cell, ...] = ()
    eliminations: tuple[Elimination, ...] = ()

    @property
    def key(self) -> str:
        return self.key_base + _unit_suffix(self.unit)

    def params(self) -> dict[str, Any]:
        return {"box": self.box + 1, "val": self.value, self.unit.value: self.index + 1}


@dataclass(frozen=True, kw_only=True)
class LockedCandidatesClaiming(Hint):
    """Digit confined to one box inside a line; eliminated from the rest of that box."""

    technique: ClassVar[TechniqueId] = TechniqueId.LOCKED_CANDIDATES_CLAIMING
    key_base: ClassVar[str] = "hint_lockedCandidateClaiming"

    cell: Cell
    value: int
    box: int
    unit: UnitType
    index: int
    related: tuple[Cell, ...] = ()
    eliminations: tuple[Elimination, ...] = ()

    @property
    def key(self) -> str:
        return self.key_base + _unit_suffix(self.unit)

    def params(self) -> dict[str, Any]:
        return {"box": self.box + 1, "val": self.value, self.unit.value: self.index + 1}


@dataclass(frozen=True, kw_only=True)
class _Subset(Hint):
    cell: Cell
    values: tuple[int, ...]
    unit: UnitType
    index: int
    related: tuple[Cell, ...] = ()
    eliminations: tuple[Elimination, ...] = ()

    @property
    def key(self) -> str:
        return self.key_base + _unit_suffix(self.unit)

    def params(self) -> dict[str, Any]:
        p: dict[str, Any] = {
            self.unit.value: self.index + 1,
            "candidates": _digits_param(self.values),
            "cells": ",".join(rc_to_key(*c) for c in self.related),
        }
        for i, v in enumerate(self.values, 1):
            p[f"val{i}"] = v
        # positions along the line, e.g. col1/col2 for a row-based pair
        if self.unit is UnitType.ROW:
            for i, (_, c) in enumerate(self.related, 1):
                p[f"col{i}"] = c + 1
        elif self.unit is UnitType.COL:
            for i, (r, _) in enumerate(self.related, 1):
                p[f"row{i}"] = r + 1
        return p


@dataclass(frozen=True, kw_only=True)
class NakedPair(_Subset):
    technique: ClassVar[TechniqueId] = TechniqueId.NAKED_PAIR
    key_base: ClassVar[str] = "hint_nakedPair"


@dataclass(frozen=True, kw_only=True)
class HiddenPair(_Subset):
    technique: ClassVar[TechniqueId] = TechniqueId.HIDDEN_PAIR
    key_base: ClassVar[str] = "hint_hiddenPair"


@dataclass(frozen=True, kw_only=True)
class NakedTriple(_Subset):
    technique: ClassVar[TechniqueId] = TechniqueId.NAKED_TRIPLE
    key_base: ClassVar[str] = "hint_nakedTriple"


@dataclass(frozen=True, kw_only=True)
class HiddenTriple(_Subset):
    technique: ClassVar[TechniqueId] = TechniqueId.HIDDEN_TRIPLE
    key_base: ClassVar[str] = "hint_hiddenTriple"


@dataclass(frozen=True, kw_only=True)
class _Fish(Hint):
    """`unit` names the base lines: ROW means the digit is confined to `covers` columns in `lines` rows."""

    cell: Cell
    value: int
    unit: UnitType
    lines: tuple[int, ...]
    covers: tuple[int, ...]
    related: tuple[Cell, ...] = ()
    eliminations: tuple[Elimination, ...] = ()

    @property
    def key(self) -> str:
        return self.key_base + _unit_suffix(self.unit)

    def params(self) -> dict[str, Any]:
        if self.unit is UnitType.ROW:
            rows, cols = self.lines, self.covers
        else:
            rows, cols = self.covers, self.lines
        return {
            "val": self.value,
            "rows": _digits_param(tuple(r + 1 for r in rows)),
            "cols": _digits_param(tuple(c + 1 for c in cols)),
        }


@dataclass(frozen=True, kw_only=True)
class XWing(_Fish):
    technique: ClassVar[TechniqueId] = TechniqueId.X_WING
    key_base: ClassVar[str] = "hint_xWing"


@dataclass(frozen=True, kw_only=True)
class Swordfish(_Fish):
    technique: ClassVar[TechniqueId] = TechniqueId.SWORDFISH
    key_base: ClassVar[str] = "hint_swordfish"


@dataclass(frozen=True, kw_only=True)
class YWing(Hint):
    """Pivot {x,y} sees pincers {x,z} and {y,z}; z leaves every cell seeing both pincers."""

    technique: ClassVar[TechniqueId] = TechniqueId.Y_WING
    key_base: ClassVar[str] = "hint_yWing"

    cell: Cell
    value: int
    pincers: tuple[Cell, Cell]
    pivot_values: tuple[int, int]
    eliminations: tuple[Elimination, ...] = ()

    @property
    def related(self) -> tuple[Cell, ...]:
        return (self.cell,) + self.pincers

    def params(self) -> dict[str, Any]:
        return {
            "pivot": rc_to_key(*self.cell),
            "pincer1": rc_to_key(*self.pincers[0]),
            "pincer2": rc_to_key(*self.pincers[1]),
            "x": self.pivot_values[0],
            "y": self.pivot_values[1],
            "val": self.value,
        }
