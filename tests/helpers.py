from __future__ import annotations

import random
from typing import Dict, List, Sequence, Tuple

from match3.components.grid import Grid
from match3.components.tile import TileKind
from match3.events.bus import EventBus
from match3.systems.move_engine import MoveEngine
from match3.world import create_world


def grid_from_rows(rows: Sequence[str]) -> Grid:
    """Build a grid from symbol rows, e.g. ``["RRB", "BGR"]`` ('.' is empty)."""
    return Grid.from_kinds([[TileKind.from_symbol(ch) for ch in row] for row in rows])


def random_grid(rng: random.Random, width: int, height: int, kinds: int = 4) -> Grid:
    palette = TileKind.playable()[:kinds]
    return Grid.from_kinds([[rng.choice(palette) for _ in range(width)] for _ in range(height)])


def stalemate_grid(size: int = 5) -> Grid:
    """Diagonal stripes of three kinds: no matches and no legal swaps."""
    pattern = TileKind.playable()[:3]
    return Grid.from_kinds([[pattern[(r + c) % 3] for c in range(size)] for r in range(size)])


class EventRecorder:
    """Subscribes to the given events and records their payloads in order."""

    def __init__(self, bus: EventBus, *names: str):
        self.events: List[Tuple[str, Dict]] = []
        for name in names:
            bus.subscribe(name, lambda sender, _name=name, **payload: self.events.append((_name, payload)))

    def names(self) -> List[str]:
        return [name for name, _ in self.events]

    def payloads(self, name: str) -> List[Dict]:
        return [payload for evt, payload in self.events if evt == name]

    def clear(self) -> None:
        self.events.clear()


def make_engine(rows: Sequence[str] | None = None, *, seed: int = 1234):
    bus = EventBus()
    world = create_world(bus, rng=random.Random(seed))
    engine = MoveEngine(world, bus)
    if rows is not None:
        engine.initialize_board(grid_from_rows(rows))
    return bus, world, engine
