"""
Cell module for the minefield engine.

Represents one board position: its coordinates, whether it holds a mine,
its adjacent-mine count and its visual state (hidden/revealed/flagged).
"""
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Optional


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the minefield grid.

    Attributes:
        x: Column index, fixed at creation.
        y: Row index, fixed at creation.
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        state: Current visual state (hidden, revealed, or flagged).
        explosion_delay: Milliseconds to wait before animating this mine
            after a loss. Presentation only.
        explosion_order: Position of this mine in the loss animation.
            Presentation only.
        false_flag: Set at loss on flagged cells that hold no mine.
    """

    x: int = 0
    y: int = 0
    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN
    explosion_delay: Optional[int] = None
    explosion_order: Optional[int] = None
    false_flag: bool = False

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was successfully revealed, False if already
            revealed or flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    def copy(self) -> "Cell":
        """Return an independent copy of this cell."""
        return replace(self)

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED
