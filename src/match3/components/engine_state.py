"""Busy state of a move engine."""
from dataclasses import dataclass
from enum import Enum, auto


class EngineMode(Enum):
    """What the engine is doing right now. Anything but IDLE rejects new work."""
    IDLE = auto()
    SWAPPING = auto()
    PROCESSING_MATCHES = auto()


@dataclass(slots=True)
class EngineState:
    """Reentrancy guard stored next to the engine's Board component."""
    mode: EngineMode = EngineMode.IDLE

    @property
    def busy(self) -> bool:
        return self.mode is not EngineMode.IDLE
