from __future__ import annotations

import random
from typing import List, Optional

from esper import World

from match3.components.board import Board
from match3.components.engine_state import EngineMode, EngineState
from match3.components.grid import Grid
from match3.components.match import Match
from match3.components.possible_swaps import PossibleSwaps
from match3.components.swap import Swap
from match3.constants import MAX_RECOMMENDED_BOARD_SIZE
from match3.errors import BoardNotInitializedError, InvalidArgumentError
from match3.events.bus import (
    EventBus,
    EVENT_BOARD_CHANGED,
    EVENT_MATCH_FOUND,
    EVENT_MATCHES_FOUND,
    EVENT_POSSIBLE_SWAPS_UPDATED,
    EVENT_TILE_SWAP_INVALID,
    EVENT_TILE_SWAP_REQUEST,
    EVENT_TILE_SWAP_VALID,
    SWAP_REJECT_BUSY,
    SWAP_REJECT_DEGENERATE,
    SWAP_REJECT_NOT_ADJACENT,
    SWAP_REJECT_NOT_LEGAL,
)
from match3.systems.board_ops import adjacent_pairs, swap_tiles
from match3.systems.match_finder import find_all_matches, would_swap_create_match
from match3.utils.logging_config import get_logger

logger = get_logger(__name__)


class MoveEngine:
    """Owns the active grid, its legal-swap cache, and the busy guard.

    State lives on a board entity this engine creates (Board, PossibleSwaps,
    EngineState); nothing else writes to it. Swap legality is decided by cache
    membership, so every path that replaces the active grid recomputes the
    cache before returning.

    Notifications are emitted while the engine is still busy: a handler that
    calls back into the engine during a swap or a match pass is rejected.
    """

    def __init__(self, world: World, event_bus: EventBus, *, rng: Optional[random.Random] = None):
        self.world = world
        self.event_bus = event_bus
        candidate_rng = rng or getattr(world, "random", None)
        self.random = candidate_rng if isinstance(candidate_rng, random.Random) else random.Random()
        self.board_entity = self.world.create_entity(Board(), PossibleSwaps(), EngineState())
        self.event_bus.subscribe(EVENT_TILE_SWAP_REQUEST, self.on_swap_request)
        self.event_bus.subscribe(EVENT_BOARD_CHANGED, self.on_board_changed)

    # ------------------------------------------------------------------
    # component access

    def _board(self) -> Board:
        return self.world.component_for_entity(self.board_entity, Board)

    def _set_grid(self, grid: Grid) -> None:
        self.world.add_component(self.board_entity, Board(grid))

    def _cache(self) -> PossibleSwaps:
        return self.world.component_for_entity(self.board_entity, PossibleSwaps)

    def _state(self) -> EngineState:
        return self.world.component_for_entity(self.board_entity, EngineState)

    @property
    def current_grid(self) -> Optional[Grid]:
        return self._board().grid

    @property
    def mode(self) -> EngineMode:
        return self._state().mode

    @property
    def is_busy(self) -> bool:
        return self._state().busy

    @property
    def is_processing_matches(self) -> bool:
        return self._state().mode is EngineMode.PROCESSING_MATCHES

    # ------------------------------------------------------------------
    # bus handlers

    def on_swap_request(self, sender, **kwargs):
        src = kwargs.get('src')
        dst = kwargs.get('dst')
        if src is None or dst is None:
            return
        self.validate_and_execute_swap(Swap(src, dst))

    def on_board_changed(self, sender, **kwargs):
        grid = kwargs.get('grid')
        if grid is None:
            # Board changes without a replacement grid belong to other listeners.
            return
        self.update_board(grid)

    # ------------------------------------------------------------------
    # board installation

    def initialize_board(self, grid: Grid) -> None:
        """Install grid as the active board and rebuild the legal-swap cache."""
        self._install(grid)
        logger.info("Board initialized: %dx%d, %d possible swaps", grid.width, grid.height, len(self._cache()))

    def update_board(self, grid: Grid) -> None:
        """Re-synchronise after an external change (e.g. refill)."""
        self._install(grid)
        logger.info("Board updated, possible swaps: %d", len(self._cache()))

    def _install(self, grid: Grid) -> None:
        if grid is None:
            raise InvalidArgumentError("grid must not be None")
        if not isinstance(grid, Grid):
            raise InvalidArgumentError(f"expected Grid, got {type(grid).__name__}")
        if grid.width > MAX_RECOMMENDED_BOARD_SIZE or grid.height > MAX_RECOMMENDED_BOARD_SIZE:
            logger.warning(
                "Board %dx%d exceeds %d per side; swap detection may be slow",
                grid.width, grid.height, MAX_RECOMMENDED_BOARD_SIZE,
            )
        self._set_grid(grid)
        self._state().mode = EngineMode.IDLE
        self.detect_possible_swaps()

    def detect_possible_swaps(self) -> List[Swap]:
        """Recompute the cache: every adjacent pair whose simulated swap yields a match."""
        grid = self._board().grid
        cache = self._cache()
        if grid is None:
            cache.clear()
            return []
        swaps = [
            Swap(a, b)
            for a, b in adjacent_pairs(grid)
            if would_swap_create_match(grid, a, b)
        ]
        cache.reset(swaps)
        logger.debug("Detected %d possible swaps", len(swaps))
        self.event_bus.emit(EVENT_POSSIBLE_SWAPS_UPDATED, swaps=list(swaps))
        return list(swaps)

    # ------------------------------------------------------------------
    # queries

    def get_possible_swaps(self) -> List[Swap]:
        return list(self._cache().swaps)

    def has_possible_moves(self) -> bool:
        return len(self._cache()) > 0

    def get_random_hint(self) -> Optional[Swap]:
        """A uniformly chosen legal swap, or None when the board is deadlocked."""
        swaps = self._cache().swaps
        if not swaps:
            return None
        return self.random.choice(swaps)

    # ------------------------------------------------------------------
    # gameplay

    def validate_and_execute_swap(self, swap: Swap) -> bool:
        if swap is None:
            raise InvalidArgumentError("swap must not be None")
        state = self._state()
        if state.busy:
            logger.warning("Cannot execute swap %s <-> %s while %s", swap.first, swap.second, state.mode.name)
            return self._reject(swap, SWAP_REJECT_BUSY)
        if swap.is_degenerate:
            return self._reject(swap, SWAP_REJECT_DEGENERATE)
        if not swap.is_adjacent:
            return self._reject(swap, SWAP_REJECT_NOT_ADJACENT)
        grid = self._board().grid
        if grid is None or not (grid.in_bounds(swap.first) and grid.in_bounds(swap.second)):
            return self._reject(swap, SWAP_REJECT_NOT_LEGAL)
        if swap not in self._cache():
            return self._reject(swap, SWAP_REJECT_NOT_LEGAL)

        state.mode = EngineMode.SWAPPING
        try:
            self._set_grid(swap_tiles(grid, swap.first, swap.second))
            self.detect_possible_swaps()
            logger.debug("Valid swap executed: %s <-> %s", swap.first, swap.second)
            self.event_bus.emit(EVENT_TILE_SWAP_VALID, swap=swap, src=swap.first, dst=swap.second)
        finally:
            state.mode = EngineMode.IDLE
        return True

    def _reject(self, swap: Swap, reason: str) -> bool:
        logger.debug("Invalid swap attempted: %s <-> %s (%s)", swap.first, swap.second, reason)
        self.event_bus.emit(EVENT_TILE_SWAP_INVALID, swap=swap, src=swap.first, dst=swap.second, reason=reason)
        return False

    def process_matches(self) -> List[Match]:
        """Report every match on the active grid without clearing anything."""
        state = self._state()
        if state.busy:
            logger.warning("Already busy (%s); match processing rejected", state.mode.name)
            return []
        grid = self._board().grid
        if grid is None:
            raise BoardNotInitializedError("process_matches called before initialize_board")

        state.mode = EngineMode.PROCESSING_MATCHES
        try:
            matches = find_all_matches(grid)
            if matches:
                logger.debug("Found %d matches", len(matches))
                self.event_bus.emit(EVENT_MATCHES_FOUND, matches=list(matches))
                for match in matches:
                    self.event_bus.emit(
                        EVENT_MATCH_FOUND,
                        positions=list(match.positions),
                        kind=match.kind,
                        size=match.length,
                    )
            else:
                logger.debug("No matches found")
            return matches
        finally:
            state.mode = EngineMode.IDLE
