from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from match3.components.tile import Position


@dataclass(frozen=True, slots=True, eq=False)
class Swap:
    """Unordered pair of board positions proposed for exchange.

    ``Swap(a, b) == Swap(b, a)`` and both hash alike, so swaps can be used
    directly for set membership. A swap whose two positions coincide is
    representable (so it can be rejected with a notification) but is never
    legal; see ``is_degenerate``.
    """
    first: Position
    second: Position

    def __post_init__(self) -> None:
        object.__setattr__(self, "first", tuple(self.first))
        object.__setattr__(self, "second", tuple(self.second))

    @property
    def positions(self) -> Tuple[Position, Position]:
        return self.first, self.second

    @property
    def is_degenerate(self) -> bool:
        return self.first == self.second

    @property
    def is_adjacent(self) -> bool:
        (ar, ac), (br, bc) = self.first, self.second
        return abs(ar - br) + abs(ac - bc) == 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Swap):
            return NotImplemented
        return frozenset((self.first, self.second)) == frozenset((other.first, other.second))

    def __hash__(self) -> int:
        return hash(frozenset((self.first, self.second)))
