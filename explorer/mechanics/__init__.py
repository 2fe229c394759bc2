"""
Mechanics module - command resolution.

- NavigationEngine: Applies forward/turn commands atomically to the map
- scan_cells: Line-of-sight geometry for revealed sequences
"""

from .scan import scan_cells
from .navigation import NavigationEngine, NavigationResult

__all__ = [
    "scan_cells",
    "NavigationEngine",
    "NavigationResult",
]
