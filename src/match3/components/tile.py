from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Tuple

Position = Tuple[int, int]


class TileKind(Enum):
    """Tile colours. ``EMPTY`` marks a cleared or invalid cell and never matches."""
    EMPTY = 0
    RED = 1
    BLUE = 2
    GREEN = 3
    YELLOW = 4
    PURPLE = 5
    ORANGE = 6

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> TileKind:
        for kind, sym in _SYMBOLS.items():
            if sym == symbol.upper():
                return kind
        raise ValueError(f"unknown tile symbol {symbol!r}")

    @classmethod
    def playable(cls) -> List[TileKind]:
        return [kind for kind in cls if kind is not cls.EMPTY]


_SYMBOLS = {
    TileKind.EMPTY: '.',
    TileKind.RED: 'R',
    TileKind.BLUE: 'B',
    TileKind.GREEN: 'G',
    TileKind.YELLOW: 'Y',
    TileKind.PURPLE: 'P',
    TileKind.ORANGE: 'O',
}


@dataclass(frozen=True, slots=True)
class Tile:
    """A single board cell value.

    Tiles never change; moving one produces a copy stamped with the new
    ``position`` (row, col).
    """
    kind: TileKind
    position: Position

    @property
    def is_empty(self) -> bool:
        return self.kind is TileKind.EMPTY

    @property
    def is_valid(self) -> bool:
        return self.kind is not TileKind.EMPTY

    def with_position(self, position: Position) -> Tile:
        return replace(self, position=tuple(position))

    def with_kind(self, kind: TileKind) -> Tile:
        return replace(self, kind=kind)
