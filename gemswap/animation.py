"""Frame stepping for sprite-sheet animations."""

from __future__ import annotations

from gemswap.vectors import Vec2


class Animation:
    """Walks through the cells of a sprite sheet, column by column, row by row."""

    def __init__(self) -> None:
        super().__init__()
        self.max_cols = 0
        self.max_rows = 0
        self.current_col = 0
        self.current_row = 0
        self.frame_delay = 0.0
        self.elapsed = 0.0
        self.frame_size = Vec2()

    def configure(
        self, max_cols: int, max_rows: int, frame_delay: float, frame_size: Vec2
    ) -> None:
        """Set the sheet layout and restart from the first cell."""
        self.max_cols = max_cols
        self.max_rows = max_rows
        self.current_col = 0
        self.current_row = 0
        self.frame_delay = frame_delay
        self.elapsed = 0.0
        self.frame_size = frame_size

    def update(self, dt: float) -> None:
        """Advance one cell per update once ``frame_delay`` has passed."""
        self.elapsed += dt
        if self.elapsed > self.frame_delay:
            self.current_col += 1
            if self.current_col > self.max_cols:
                self.current_row += 1
                if self.current_row > self.max_rows:
                    self.current_row = 0
                self.current_col = 0