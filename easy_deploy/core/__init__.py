"""Core functionality for easy-deploy"""

from .path_resolver import get_hidden_target, get_state_path
from .wall_clock import WallClock, SystemClock, FakeClock
from .state_store import load_state, dump_state

__all__ = [
    "get_hidden_target",
    "get_state_path",
    "WallClock",
    "SystemClock",
    "FakeClock",
    "load_state",
    "dump_state",
]
