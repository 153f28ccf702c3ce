from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Tuple

from match3.components.tile import Position, TileKind
from match3.constants import MIN_MATCH_LENGTH
from match3.errors import InvalidArgumentError


class Orientation(Enum):
    HORIZONTAL = auto()
    VERTICAL = auto()


@dataclass(frozen=True, slots=True)
class Match:
    """A run of same-kind tiles reported by detection.

    ``positions`` keeps discovery order (left-to-right for horizontal runs,
    top-to-bottom for vertical ones). Matches are produced fresh by every scan
    and are not stored on the grid.
    """
    positions: Tuple[Position, ...]
    kind: TileKind
    orientation: Orientation

    def __post_init__(self) -> None:
        positions = tuple(tuple(pos) for pos in self.positions)
        if len(positions) < MIN_MATCH_LENGTH:
            raise InvalidArgumentError(
                f"match needs at least {MIN_MATCH_LENGTH} positions, got {len(positions)}"
            )
        object.__setattr__(self, "positions", positions)

    @property
    def length(self) -> int:
        return len(self.positions)

    @property
    def is_horizontal(self) -> bool:
        return self.orientation is Orientation.HORIZONTAL

    def __len__(self) -> int:
        return len(self.positions)
