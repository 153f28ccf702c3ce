from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so handlers on engines nobody else holds still fire.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT (published by input / AI collaborators)
# ============================================================================
EVENT_TILE_SWAP_REQUEST = "tile_swap_request"    # payload: src=(r,c), dst=(r,c)
EVENT_BOARD_CHANGED = "board_changed"            # payload: grid=Grid, reason=str


# ============================================================================
# ENGINE NOTIFICATIONS
# ============================================================================
EVENT_POSSIBLE_SWAPS_UPDATED = "possible_swaps_updated"  # payload: swaps=list[Swap]
EVENT_TILE_SWAP_VALID = "tile_swap_valid"                # payload: swap=Swap, src=(r,c), dst=(r,c)
EVENT_TILE_SWAP_INVALID = "tile_swap_invalid"            # payload: swap=Swap, src=(r,c), dst=(r,c), reason=str
EVENT_MATCHES_FOUND = "matches_found"                    # payload: matches=list[Match]
EVENT_MATCH_FOUND = "match_found"                        # payload: positions=[(r,c),...], kind=TileKind, size=int


# ============================================================================
# REFILL (published by the caller after clearing matched tiles)
# ============================================================================
EVENT_BOARD_REFILL_REQUEST = "board_refill_request"      # payload: positions=[(r,c),...]


# Reasons attached to EVENT_TILE_SWAP_INVALID
SWAP_REJECT_BUSY = "busy"
SWAP_REJECT_DEGENERATE = "degenerate"
SWAP_REJECT_NOT_ADJACENT = "not_adjacent"
SWAP_REJECT_NOT_LEGAL = "not_legal"
