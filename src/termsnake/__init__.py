"""Terminal snake: a fixed-tick snake simulation with pluggable input and rendering."""

from .geometry import Direction, Position
from .game import Frame, Intent, Outcome, Session, Status

__all__ = ["Direction", "Position", "Frame", "Intent", "Outcome", "Session", "Status"]
