"""Run detection over immutable grids.

Every function here is pure: it reads a Grid and returns fresh Match values.

Overlapping runs are resolved first-come-first-served. Candidates are visited
in discovery order (all horizontal runs row by row, then all vertical runs
column by column) and each keeps only the positions no earlier match has
claimed; a candidate left with fewer than MIN_MATCH_LENGTH positions is
dropped. No position is ever reported twice, at the cost of shortening or
discarding a vertical run that crosses a horizontal one.
"""
from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Set

from match3.components.grid import Grid
from match3.components.match import Match, Orientation
from match3.components.tile import Position, TileKind
from match3.constants import MIN_MATCH_LENGTH
from match3.errors import OutOfRangeError
from match3.systems.board_ops import swap_tiles


def _close_run(run: List[Position], kind: Optional[TileKind], orientation: Orientation, out: List[Match]) -> None:
    if kind is not None and len(run) >= MIN_MATCH_LENGTH:
        out.append(Match(tuple(run), kind, orientation))


def _scan_line(grid: Grid, line: Sequence[Position], orientation: Orientation) -> List[Match]:
    matches: List[Match] = []
    run: List[Position] = []
    run_kind: Optional[TileKind] = None
    for pos in line:
        kind = grid.get(pos).kind
        if kind is not TileKind.EMPTY and kind is run_kind:
            run.append(pos)
            continue
        _close_run(run, run_kind, orientation, matches)
        if kind is TileKind.EMPTY:
            run = []
            run_kind = None
        else:
            run = [pos]
            run_kind = kind
    _close_run(run, run_kind, orientation, matches)
    return matches


def scan_row(grid: Grid, row: int) -> List[Match]:
    """Horizontal runs in one row, left to right. No de-duplication."""
    if not 0 <= row < grid.height:
        raise OutOfRangeError((row, 0), grid.width, grid.height)
    return _scan_line(grid, [(row, c) for c in range(grid.width)], Orientation.HORIZONTAL)


def scan_column(grid: Grid, col: int) -> List[Match]:
    """Vertical runs in one column, top to bottom. No de-duplication."""
    if not 0 <= col < grid.width:
        raise OutOfRangeError((0, col), grid.width, grid.height)
    return _scan_line(grid, [(r, col) for r in range(grid.height)], Orientation.VERTICAL)


def merge_overlapping_matches(candidates: Iterable[Match]) -> List[Match]:
    """Apply the claimed-position rule to candidates in the given order."""
    merged: List[Match] = []
    claimed: Set[Position] = set()
    for match in candidates:
        fresh = [pos for pos in match.positions if pos not in claimed]
        claimed.update(fresh)
        if len(fresh) >= MIN_MATCH_LENGTH:
            if len(fresh) == match.length:
                merged.append(match)
            else:
                merged.append(Match(tuple(fresh), match.kind, match.orientation))
    return merged


def _scan(grid: Grid, rows: Iterable[int], cols: Iterable[int]) -> List[Match]:
    candidates: List[Match] = []
    for row in rows:
        candidates.extend(scan_row(grid, row))
    for col in cols:
        candidates.extend(scan_column(grid, col))
    return merge_overlapping_matches(candidates)


def find_all_matches(grid: Grid) -> List[Match]:
    """Detect every horizontal or vertical run of MIN_MATCH_LENGTH or more."""
    return _scan(grid, range(grid.height), range(grid.width))


def find_matches_touching(grid: Grid, positions: Iterable[Position]) -> List[Match]:
    """Like find_all_matches, but only over the rows and columns of positions.

    Rows are scanned in ascending order, then columns, so the result equals
    find_all_matches run on just those lines.
    """
    rows: Set[int] = set()
    cols: Set[int] = set()
    for pos in positions:
        if not grid.in_bounds(pos):
            raise OutOfRangeError(pos, grid.width, grid.height)
        rows.add(pos[0])
        cols.add(pos[1])
    if not rows:
        return []
    return _scan(grid, sorted(rows), sorted(cols))


def would_swap_create_match(grid: Grid, a: Position, b: Position) -> bool:
    """Simulate swapping a and b and report whether a run appears on their lines."""
    swapped = swap_tiles(grid, a, b)
    return bool(find_matches_touching(swapped, (a, b)))
