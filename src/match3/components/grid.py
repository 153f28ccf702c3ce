from __future__ import annotations

from typing import Iterator, Optional, Sequence, Tuple

from match3.components.tile import Position, Tile, TileKind
from match3.constants import DEFAULT_BOARD_HEIGHT, DEFAULT_BOARD_WIDTH
from match3.errors import InvalidArgumentError, OutOfRangeError

Row = Tuple[Tile, ...]


def _stamped(tile: Tile, position: Position) -> Tile:
    """Return tile carrying position, the cell it is stored in."""
    if not isinstance(tile, Tile):
        raise InvalidArgumentError(f"expected Tile, got {type(tile).__name__}")
    return tile if tile.position == position else tile.with_position(position)


class Grid:
    """Immutable ``width x height`` board of tiles.

    Positions are ``(row, col)`` with ``row`` in ``[0, height)`` and ``col`` in
    ``[0, width)``. Every in-bounds position holds exactly one Tile (possibly
    ``TileKind.EMPTY``). Stored tiles are restamped so that
    ``tile.position`` always names the cell holding them.

    ``set`` never touches the receiver: it returns a new Grid that rebuilds only
    the affected row and shares every other row tuple with the original.
    """

    __slots__ = ("_width", "_height", "_rows")

    def __init__(
        self,
        width: int = DEFAULT_BOARD_WIDTH,
        height: int = DEFAULT_BOARD_HEIGHT,
        tiles: Optional[Sequence[Sequence[Tile]]] = None,
    ):
        if isinstance(width, bool) or not isinstance(width, int) or width < 1:
            raise InvalidArgumentError(f"grid width must be a positive int, got {width!r}")
        if isinstance(height, bool) or not isinstance(height, int) or height < 1:
            raise InvalidArgumentError(f"grid height must be a positive int, got {height!r}")
        self._width = width
        self._height = height
        if tiles is None:
            self._rows: Tuple[Row, ...] = tuple(
                tuple(Tile(TileKind.EMPTY, (r, c)) for c in range(width))
                for r in range(height)
            )
            return
        rows = [tuple(row) for row in tiles]
        if len(rows) != height or any(len(row) != width for row in rows):
            raise InvalidArgumentError(f"tile data does not describe a {width}x{height} grid")
        self._rows = tuple(
            tuple(_stamped(tile, (r, c)) for c, tile in enumerate(row))
            for r, row in enumerate(rows)
        )

    @classmethod
    def from_kinds(cls, kinds: Sequence[Sequence[TileKind]]) -> Grid:
        """Build a grid from rows of kinds, stamping each tile with its position."""
        rows = [list(row) for row in kinds]
        if not rows or not rows[0]:
            raise InvalidArgumentError("cannot build a grid from empty kind data")
        height = len(rows)
        width = len(rows[0])
        tiles = [
            [Tile(kind, (r, c)) for c, kind in enumerate(row)]
            for r, row in enumerate(rows)
        ]
        return cls(width, height, tiles)

    @classmethod
    def _from_rows(cls, width: int, height: int, rows: Tuple[Row, ...]) -> Grid:
        grid = cls.__new__(cls)
        grid._width = width
        grid._height = height
        grid._rows = rows
        return grid

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def in_bounds(self, position: Position) -> bool:
        try:
            row, col = position
        except (TypeError, ValueError):
            return False
        if isinstance(row, bool) or isinstance(col, bool):
            return False
        if not isinstance(row, int) or not isinstance(col, int):
            return False
        return 0 <= row < self._height and 0 <= col < self._width

    def _check(self, position: Position) -> Tuple[int, int]:
        if not self.in_bounds(position):
            raise OutOfRangeError(position, self._width, self._height)
        return position[0], position[1]

    def get(self, position: Position) -> Tile:
        row, col = self._check(position)
        return self._rows[row][col]

    def kind_at(self, position: Position) -> TileKind:
        return self.get(position).kind

    def set(self, position: Position, tile: Tile) -> Grid:
        row, col = self._check(position)
        old_row = self._rows[row]
        new_row = old_row[:col] + (_stamped(tile, (row, col)),) + old_row[col + 1:]
        rows = self._rows[:row] + (new_row,) + self._rows[row + 1:]
        return Grid._from_rows(self._width, self._height, rows)

    def row(self, index: int) -> Row:
        if not 0 <= index < self._height:
            raise OutOfRangeError((index, 0), self._width, self._height)
        return self._rows[index]

    def column(self, index: int) -> Row:
        if not 0 <= index < self._width:
            raise OutOfRangeError((0, index), self._width, self._height)
        return tuple(row[index] for row in self._rows)

    def positions(self) -> Iterator[Position]:
        for r in range(self._height):
            for c in range(self._width):
                yield (r, c)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._rows == other._rows
        )

    def __hash__(self) -> int:
        return hash((self._width, self._height, self._rows))

    def __str__(self) -> str:
        return "\n".join("".join(tile.kind.symbol for tile in row) for row in self._rows)

    def __repr__(self) -> str:
        return f"Grid({self._width}x{self._height})"
