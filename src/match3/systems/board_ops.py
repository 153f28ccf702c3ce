from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple

from match3.components.grid import Grid
from match3.components.match import Match
from match3.components.tile import Position


def is_adjacent(a: Position, b: Position) -> bool:
    ar, ac = a
    br, bc = b
    return (abs(ar - br) == 1 and ac == bc) or (abs(ac - bc) == 1 and ar == br)


def swap_tiles(grid: Grid, a: Position, b: Position) -> Grid:
    """Return a copy of grid with the tiles at a and b exchanged.

    Both tiles are re-stamped with their new positions. The input grid is left
    untouched; OutOfRangeError propagates for bad coordinates.
    """
    tile_a = grid.get(a)
    tile_b = grid.get(b)
    return grid.set(a, tile_b.with_position(a)).set(b, tile_a.with_position(b))


def adjacent_pairs(grid: Grid) -> Iterator[Tuple[Position, Position]]:
    """Yield every orthogonal neighbour pair exactly once.

    Row-major; each cell is paired with its right neighbour, then its lower one.
    """
    for row in range(grid.height):
        for col in range(grid.width):
            pos = (row, col)
            if col + 1 < grid.width:
                yield pos, (row, col + 1)
            if row + 1 < grid.height:
                yield pos, (row + 1, col)


def matched_positions(matches: Iterable[Match]) -> List[Position]:
    """Flatten matches into a sorted list of distinct positions (refill payload)."""
    return sorted({pos for match in matches for pos in match.positions})
