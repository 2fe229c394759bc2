"""
Line-of-sight geometry.

The three cells revealed by a command are the cells directly ahead of the
actor plus their two side neighbours, listed from the viewer's left hand to
the viewer's right hand:

- NORTH: left-to-right across the row above
- SOUTH: right-to-left across the row below
- EAST:  top-to-bottom down the column to the right
- WEST:  bottom-to-top up the column to the left
"""

from __future__ import annotations
from typing import List

from ..core.types import Facing, GridPos


def scan_cells(pos: GridPos, facing: Facing) -> List[GridPos]:
    """
    Positions of the newly visible cells, in revealed-sequence order.

    Args:
        pos: Position the actor looks from
        facing: Direction the actor looks in

    Returns:
        Three (row, col) positions
    """
    row, col = pos
    drow, dcol = facing.delta
    ahead_row, ahead_col = row + drow, col + dcol

    left_drow, left_dcol = facing.left.delta
    right_drow, right_dcol = facing.right.delta

    return [
        (ahead_row + left_drow, ahead_col + left_dcol),
        (ahead_row, ahead_col),
        (ahead_row + right_drow, ahead_col + right_dcol),
    ]
