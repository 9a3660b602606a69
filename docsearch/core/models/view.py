"""Session view models."""
from dataclasses import dataclass
from enum import Enum


class SessionState(Enum):
    """Dispatcher state."""
    IDLE = "idle"
    DEBOUNCING = "debouncing"  # timer armed
    EXECUTED = "executed"  # update routine just ran


@dataclass(frozen=True)
class RenderedView:
    """HTML fragment for the results container."""
    html: str
    centered: bool = False
