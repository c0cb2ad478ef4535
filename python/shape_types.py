"""
Shared type definitions for box shapes: the direction catalog and shape entries.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from rich.cells import cell_len

BLANK = " "

NUM_SHAPES = 16
SHAPES_PER_SIDE = 5
CORNERS_PER_SIDE = 2
NUM_SIDES = 4
NUM_CORNERS = 4


class Direction(IntEnum):
    """Position of a shape on the box border, clockwise from the top-left corner."""

    NW = 0
    NNW = 1
    N = 2
    NNE = 3
    NE = 4
    ENE = 5
    E = 6
    ESE = 7
    SE = 8
    SSE = 9
    S = 10
    SSW = 11
    SW = 12
    WSW = 13
    W = 14
    WNW = 15

    @classmethod
    def from_name(cls, name: str) -> Direction:
        """Look up a direction by its shape name, ignoring case."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            valid = ", ".join(SHAPE_NAMES[d] for d in cls)
            raise ValueError(f"Unknown shape name: '{name}'\n  Valid names: {valid}") from None

    @property
    def is_corner(self) -> bool:
        return self in CORNERS


class Side(IntEnum):
    """Box side, numbered clockwise from the top."""

    N = 0  # Top
    E = 1  # Right
    S = 2  # Bottom
    W = 3  # Left


SHAPE_NAMES: dict[Direction, str] = {d: d.name.lower() for d in Direction}


# =============================================================================
# Direction Catalog
# =============================================================================

# Groups of shapes per side, clockwise
NORTH_SIDE = (Direction.NW, Direction.NNW, Direction.N, Direction.NNE, Direction.NE)
EAST_SIDE = (Direction.NE, Direction.ENE, Direction.E, Direction.ESE, Direction.SE)
SOUTH_SIDE = (Direction.SE, Direction.SSE, Direction.S, Direction.SSW, Direction.SW)
SOUTH_SIDE_REV = (Direction.SW, Direction.SSW, Direction.S, Direction.SSE, Direction.SE)
WEST_SIDE = (Direction.SW, Direction.WSW, Direction.W, Direction.WNW, Direction.NW)

CORNERS = (Direction.NW, Direction.NE, Direction.SE, Direction.SW)

SIDES: tuple[tuple[Direction, ...], ...] = (NORTH_SIDE, EAST_SIDE, SOUTH_SIDE, WEST_SIDE)


# =============================================================================
# Shape Entries
# =============================================================================


@dataclass
class ShapeRow:
    """One line of a shape, with its adjacency flags."""

    text: str
    blank_leftward: bool = False
    blank_rightward: bool = False

    @property
    def display_width(self) -> int:
        """Terminal columns taken by the row, which may differ from len(text)."""
        return cell_len(self.text)

    def is_blank(self) -> bool:
        return all(ch == BLANK for ch in self.text)


@dataclass(eq=False)
class ShapeEntry:
    """
    The visual design of a single direction.

    An entry without rows is absent. Each entry belongs to exactly one slot
    of one design, so entries are compared by identity.
    """

    direction: Direction
    rows: list[ShapeRow] = field(default_factory=list)
    width: int = 0
    elastic: bool = False  # May repeat to match the height of the boxed text

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def is_absent(self) -> bool:
        return not self.rows

    @property
    def chars(self) -> tuple[str, ...]:
        return tuple(row.text for row in self.rows)

    @property
    def blank_leftward(self) -> tuple[bool, ...]:
        return tuple(row.blank_leftward for row in self.rows)

    @property
    def blank_rightward(self) -> tuple[bool, ...]:
        return tuple(row.blank_rightward for row in self.rows)

    def populate(self, rows: list[ShapeRow], elastic: bool = False) -> None:
        """
        Take ownership of rows, replacing any previous content.

        Raises:
            ValueError: If the rows do not all have the same display width.
                The entry is left unchanged.
        """
        widths = [row.display_width for row in rows]
        if widths and any(w != widths[0] for w in widths):
            error_msg = (
                f"Inconsistent row widths in shape '{SHAPE_NAMES[self.direction]}'\n"
                f"  Expected: {widths[0]} columns (from row 0)\n"
                f"  Mismatched rows:\n"
            )
            for row_idx, w in enumerate(widths):
                if w != widths[0]:
                    error_msg += f'    Row {row_idx}: {w} columns - "{rows[row_idx].text}"\n'
            raise ValueError(error_msg)

        self.rows = list(rows)
        self.width = widths[0] if widths else 0
        self.elastic = elastic if rows else False

    def release(self) -> None:
        """Return the entry to the absent state. Safe to call repeatedly."""
        self.rows = []
        self.width = 0
        self.elastic = False
