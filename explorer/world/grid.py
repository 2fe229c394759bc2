"""
Grid - Character map storage for the explorer.

The Grid handles:
- Cell storage and bounds-checked access
- Growth at any of the four edges (copy and replace)
- Snapshot / restore for one-level rollback
- Rendering to the bordered text form

Coordinate System:
- ROW increases DOWNWARD
- COL increases to the RIGHT
- Origin (0, 0) is at TOP-LEFT

The grid knows nothing about the actor; the actor glyph is only projected
onto the rendered text and never stored.
"""

from __future__ import annotations
from typing import Any, Dict, List, Sequence

from ..core.types import CELL_CHARS, INITIAL_MAP_SIZE, UNSEEN, Facing, GridPos


class Grid:
    """
    A rectangular, growable 2D character map.

    Every row always has the same length and the grid only ever grows.

    Attributes:
        width: Number of columns
        height: Number of rows
    """

    def __init__(self, rows: Sequence[Sequence[str]]):
        """
        Initialize a grid from existing rows (copied).

        Args:
            rows: Row-major cells; every row must have the same length

        Raises:
            ValueError: If the grid is empty, ragged, or holds illegal cells
        """
        if not rows or not rows[0]:
            raise ValueError("Grid must have at least one row and one column")

        width = len(rows[0])
        copied: List[List[str]] = []
        for row in rows:
            if len(row) != width:
                raise ValueError(f"Ragged grid row: expected {width} cells, got {len(row)}")
            for ch in row:
                if ch not in CELL_CHARS:
                    raise ValueError(f"Illegal cell character: {ch!r}")
            copied.append(list(row))

        self._rows = copied

    @classmethod
    def create_initial(cls) -> Grid:
        """Create the 3x3 unseen starting map."""
        return cls.blank(INITIAL_MAP_SIZE, INITIAL_MAP_SIZE)

    @classmethod
    def blank(cls, width: int, height: int) -> Grid:
        """
        Create a grid filled with unseen cells.

        Raises:
            ValueError: If dimensions are invalid
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive: {width}x{height}")
        return cls([[UNSEEN] * width for _ in range(height)])

    @property
    def width(self) -> int:
        return len(self._rows[0])

    @property
    def height(self) -> int:
        return len(self._rows)

    # ========================================================================
    # CELL ACCESS
    # ========================================================================

    def in_bounds(self, row: int, col: int) -> bool:
        """
        Check if a position is within grid boundaries.

        Args:
            row: Row index
            col: Column index

        Returns:
            True if position is valid, False otherwise
        """
        return 0 <= row < self.height and 0 <= col < self.width

    def cell(self, row: int, col: int) -> str:
        """
        Read one cell.

        Raises:
            IndexError: If the position is outside the grid
        """
        self._check_bounds(row, col)
        return self._rows[row][col]

    def set_cell(self, row: int, col: int, ch: str) -> None:
        """
        Write one cell.

        Raises:
            IndexError: If the position is outside the grid
            ValueError: If ch is not a storable cell character
        """
        self._check_bounds(row, col)
        if ch not in CELL_CHARS:
            raise ValueError(f"Illegal cell character: {ch!r}")
        self._rows[row][col] = ch

    def _check_bounds(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise IndexError(
                f"Cell ({row}, {col}) outside {self.width}x{self.height} grid"
            )

    # ========================================================================
    # GROWTH
    # ========================================================================

    def expand(
        self,
        add_rows: int,
        add_cols: int,
        shift_rows: bool = False,
        shift_cols: bool = False,
    ) -> Grid:
        """
        Return a grown copy of this grid.

        The height grows by add_rows and the width by add_cols. With
        shift_rows the old content moves down one row (blank top row); with
        shift_cols it moves right one column (blank left column). New cells
        are unseen.

        Args:
            add_rows: Extra rows to add (>= 0)
            add_cols: Extra columns to add (>= 0)
            shift_rows: Shift existing content down by one row
            shift_cols: Shift existing content right by one column

        Returns:
            New Grid; this grid is left untouched

        Raises:
            ValueError: If a growth amount is negative or a shift has no room
        """
        if add_rows < 0 or add_cols < 0:
            raise ValueError(f"Grid can only grow: rows={add_rows}, cols={add_cols}")
        if (shift_rows and add_rows < 1) or (shift_cols and add_cols < 1):
            raise ValueError("Shifting requires growth in the same dimension")

        row_offset = 1 if shift_rows else 0
        col_offset = 1 if shift_cols else 0

        grown = Grid.blank(self.width + add_cols, self.height + add_rows)
        for r, row in enumerate(self._rows):
            target = grown._rows[r + row_offset]
            target[col_offset:col_offset + len(row)] = row
        return grown

    def expand_toward(self, facing: Facing) -> Grid:
        """
        Grow by one cell past the edge the given facing points at.

        Growth toward NORTH or WEST shifts the content so the new blank line
        lands at index 0; growth toward SOUTH or EAST appends.
        """
        drow, dcol = facing.delta
        return self.expand(
            add_rows=abs(drow),
            add_cols=abs(dcol),
            shift_rows=drow < 0,
            shift_cols=dcol < 0,
        )

    def at_edge(self, pos: GridPos, facing: Facing) -> bool:
        """True if pos lies on the boundary the given facing points at."""
        row, col = pos
        return {
            Facing.NORTH: row == 0,
            Facing.SOUTH: row == self.height - 1,
            Facing.WEST: col == 0,
            Facing.EAST: col == self.width - 1,
        }[facing]

    # ========================================================================
    # SNAPSHOT / RESTORE
    # ========================================================================

    def snapshot(self) -> Grid:
        """Return an independent deep copy of this grid."""
        return Grid(self._rows)

    @staticmethod
    def restore(snapshot: Grid) -> Grid:
        """
        Return the grid to use as the live map after a rollback.

        The snapshot is copied again so it can never alias the live grid.
        """
        return snapshot.snapshot()

    # ========================================================================
    # RENDERING
    # ========================================================================

    def render(self, actor_row: int, actor_col: int, facing: Facing) -> str:
        """
        Render the bordered map with the actor glyph projected on top.

        Args:
            actor_row: Row of the actor
            actor_col: Column of the actor
            facing: Actor facing (selects ^, V, > or <)

        Returns:
            Multi-line text, each line terminated by a newline
        """
        self._check_bounds(actor_row, actor_col)

        border = "+" + "-" * self.width + "+"
        lines = [border]
        for r, row in enumerate(self._rows):
            cells = list(row)
            if r == actor_row:
                cells[actor_col] = facing.glyph
            lines.append("|" + "".join(cells) + "|")
        lines.append(border)
        return "\n".join(lines) + "\n"

    def lines(self) -> List[str]:
        """Return the stored rows as strings (no border, no actor)."""
        return ["".join(row) for row in self._rows]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize grid to a JSON-friendly dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "rows": self.lines(),
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._rows == other._rows

    def __str__(self) -> str:
        """String representation."""
        return f"Grid({self.width}x{self.height})"

    def __repr__(self) -> str:
        """Detailed representation."""
        return f"Grid(width={self.width}, height={self.height})"
