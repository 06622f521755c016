"""
Reveal and flag engine.

Pure board transitions: each function copies the board it is given,
applies one action and returns the new snapshot.
"""
import math
from typing import List, Optional, Tuple

from .cell import CellState
from .grid import Board


def reveal(board: Board, x: int, y: int) -> Board:
    """
    Reveal a cell, cascading through the zero-count region around it.

    Out-of-bounds, revealed and flagged targets leave the board unchanged.
    The cascade walks an explicit stack and stops at numbered cells; it
    never reveals a mine. Revealing a mine directly is allowed, deciding
    the consequences is up to the caller.

    Args:
        board: Current board; not modified.
        x: Column to reveal.
        y: Row to reveal.

    Returns:
        New board snapshot.
    """
    result = board.copy()
    cell = result.get_cell(x, y)
    if cell is None or not cell.reveal():
        return result

    if cell.is_mine or cell.adjacent_mines > 0:
        return result

    stack: List[Tuple[int, int]] = [(x, y)]
    while stack:
        current_x, current_y = stack.pop()
        for neighbor_x, neighbor_y in result.neighbors(current_x, current_y):
            neighbor = result.cells[neighbor_y][neighbor_x]
            if neighbor.is_mine or not neighbor.reveal():
                continue
            if neighbor.adjacent_mines == 0:
                stack.append((neighbor_x, neighbor_y))
    return result


def toggle_flag(board: Board, x: int, y: int) -> Board:
    """Flip the flag on a hidden cell; revealed or out-of-bounds is a no-op."""
    result = board.copy()
    cell = result.get_cell(x, y)
    if cell is not None:
        cell.toggle_flag()
    return result


def check_win(board: Board) -> bool:
    """True iff every non-mine cell is revealed; flags are irrelevant."""
    return all(cell.is_revealed for cell in board if not cell.is_mine)


def reveal_all_mines(
    board: Board,
    origin: Optional[Tuple[int, int]] = None,
    delay_step: int = 150,
) -> Board:
    """
    Reveal every mine after a loss.

    Flags on safe cells are marked as false flags. When ``origin`` (the
    clicked mine) is given, mines also get an explosion order and delay
    growing with their distance from it, for the view layer to animate.

    Args:
        board: Board at the moment of the loss; not modified.
        origin: (x, y) of the mine that was clicked.
        delay_step: Milliseconds between consecutive explosions.

    Returns:
        New board snapshot.
    """
    result = board.copy()
    mines = []
    for cell in result:
        if cell.is_mine:
            cell.state = CellState.REVEALED
            mines.append(cell)
        elif cell.is_flagged:
            cell.false_flag = True

    if origin is not None:
        origin_x, origin_y = origin
        mines.sort(
            key=lambda c: (math.hypot(c.x - origin_x, c.y - origin_y), c.y, c.x)
        )
        for order, cell in enumerate(mines):
            cell.explosion_order = order
            cell.explosion_delay = order * delay_step
    return result
