from dataclasses import dataclass
from typing import Optional

from match3.components.grid import Grid


@dataclass(frozen=True, slots=True)
class Board:
    """Holds the engine's active grid. ``None`` until a board is installed.

    The engine replaces the component through ``World.add_component`` each
    time the active grid changes, and refreshes the legal-swap cache with it.
    """
    grid: Optional[Grid] = None

    @property
    def dimensions(self):
        if self.grid is None:
            return None
        return self.grid.width, self.grid.height
