from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List

from match3.components.swap import Swap


@dataclass(slots=True)
class PossibleSwaps:
    """Cached legal swaps for the active grid.

    ``swaps`` keeps enumeration order for hints and notifications; ``lookup``
    mirrors it for membership checks. Always replace both through ``reset``.
    """
    swaps: List[Swap] = field(default_factory=list)
    lookup: FrozenSet[Swap] = field(default_factory=frozenset)

    def reset(self, swaps: Iterable[Swap]) -> None:
        self.swaps = list(swaps)
        self.lookup = frozenset(self.swaps)

    def clear(self) -> None:
        self.reset(())

    def __contains__(self, swap: Swap) -> bool:
        return swap in self.lookup

    def __len__(self) -> int:
        return len(self.swaps)
