from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

# ----- Grid & timing -----
GRID_W, GRID_H = 30, 20
TICK_MS = 120

# ----- Terminal glyphs -----
HEAD_CHAR = "O"
BODY_CHAR = "o"
FOOD_CHAR = "*"
EMPTY_CHAR = " "
CORNER_CHAR = "+"
HWALL_CHAR = "-"
VWALL_CHAR = "|"

# ----- Pygame window -----
CELL_SIZE = 20
BG    = (20, 20, 24)
GREEN = (80, 200, 80)
HEAD  = (120, 240, 120)
RED   = (200, 70, 70)
TEXT  = (220, 220, 230)

UI_CHOICES = ("terminal", "pygame")


# ----- Startup configuration (fixed for the life of the process) -----
@dataclass
class Config:
    width: int = GRID_W
    height: int = GRID_H
    tick_ms: int = TICK_MS
    seed: Optional[int] = None  # None -> OS entropy
    ui: str = "terminal"
    log_file: Optional[str] = None
    log_level: str = "INFO"

    @property
    def tick_seconds(self) -> float:
        return self.tick_ms / 1000.0

    def validate(self) -> "Config":
        # the starting snake is two cells wide and sits at the centre
        if self.width < 2 or self.height < 2:
            raise ValueError(f"Grid must be at least 2x2, got {self.width}x{self.height}")
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        if self.ui not in UI_CHOICES:
            raise ValueError(f"Unknown ui: {self.ui}")
        return self
