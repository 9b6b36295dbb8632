from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems alive even when nothing else holds the system.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float (seconds)


# ============================================================================
# COMMANDS
# ============================================================================
EVENT_COMMAND_ISSUED = "command_issued"            # payload: command=str, column=int
EVENT_DROP_REJECTED = "drop_rejected"              # payload: column=int, block=Block, expected=str|None


# ============================================================================
# BOARD & LEVELS
# ============================================================================
EVENT_BOARD_SET = "board_set"                      # payload: columns=int
EVENT_BOARD_SNAPPED = "board_snapped"              # payload: color=str, removed=int
EVENT_LEVEL_LOADED = "level_loaded"                # payload: level=str|int, columns=int


# ============================================================================
# ANIMATION
# ============================================================================
EVENT_ANIMATION_START = "animation_start"          # payload: kind=str
EVENT_ANIMATION_COMPLETE = "animation_complete"    # payload: kind=str, index=int
EVENT_ANIMATIONS_IDLE = "animations_idle"          # payload: completed=int
