"""
Shape geometry engine for box designs.
Allocation, direction lookup, emptiness tests and size metrics over shape entries.
"""

from __future__ import annotations

import logging
import unicodedata
from typing import Iterable, Sequence

from rich.cells import cell_len

from shape_types import (
    BLANK,
    CORNERS,
    EAST_SIDE,
    NORTH_SIDE,
    NUM_SIDES,
    SHAPE_NAMES,
    SIDES,
    SOUTH_SIDE_REV,
    WEST_SIDE,
    Direction,
    ShapeEntry,
    ShapeRow,
    Side,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Generator
# =============================================================================


def genshape(width: int, height: int) -> list[ShapeRow] | None:
    """
    Allocate a blank glyph grid of the given size.

    Returns:
        height rows of width spaces, or None if either dimension is not
        positive or memory runs out.
    """
    if width <= 0 or height <= 0:
        logger.warning("genshape: refusing to allocate %dx%d shape", width, height)
        return None
    try:
        return [ShapeRow(BLANK * width) for _ in range(height)]
    except MemoryError:
        logger.warning("genshape: out of memory allocating %dx%d shape", width, height)
        return None


def freeshape(entry: ShapeEntry) -> None:
    """Release everything an entry owns. No-op on an absent entry."""
    entry.release()


# =============================================================================
# Classifier
# =============================================================================


def findshape(entries: Sequence[ShapeEntry], direction: Direction) -> int | None:
    """Return the index of the entry for direction, or None if there is none."""
    for i, entry in enumerate(entries):
        if entry.direction == direction:
            return i
    return None


def first_nonempty(entries: Sequence[ShapeEntry]) -> int | None:
    """Return the index of the first entry that is not empty, or None."""
    for i, entry in enumerate(entries):
        if not isempty(entry):
            return i
    return None


def on_side(direction: Direction, side: int) -> bool:
    """True if direction is one of the five shapes of side (0=N, 1=E, 2=S, 3=W)."""
    if not 0 <= side < NUM_SIDES:
        return False
    return direction in SIDES[side]


def sides_of(direction: Direction) -> tuple[Side, ...]:
    """All sides a direction lies on: two for corners, one otherwise."""
    return tuple(side for side in Side if direction in SIDES[side])


def side_of(direction: Direction, occurrence: int = 0) -> Side | None:
    """
    Side number that direction is on.

    Args:
        direction: Shape to look for
        occurrence: Which match to return (0 = first, 1 = second, for corners)

    Returns:
        The side, or None if there is no such occurrence
    """
    sides = sides_of(direction)
    if 0 <= occurrence < len(sides):
        return sides[occurrence]
    return None


# =============================================================================
# Emptiness Analyzer
# =============================================================================


def _is_invisible(ch: str) -> bool:
    # Control characters (TAB, ESC, BEL, ...) always count as content
    if unicodedata.category(ch) == "Cc":
        return False
    return ch.isspace() or cell_len(ch) == 0


def isempty(entry: ShapeEntry | None) -> bool:
    """True if the shape is absent, has no extent, or consists only of spaces."""
    if entry is None or entry.height == 0 or entry.width == 0:
        return True
    return all(row.is_blank() for row in entry.rows)


def isdeepempty(entry: ShapeEntry | None) -> bool:
    """
    True if the shape produces no visible output at all.

    Stronger than isempty(): besides plain spaces, any other whitespace and
    zero-width characters are treated as invisible. Control characters
    such as TAB or ESC are not.
    """
    if entry is None or isempty(entry):
        return True
    return all(_is_invisible(ch) for row in entry.rows for ch in row.text)


def empty_side(entries: Sequence[ShapeEntry], side: int) -> bool:
    """
    True if every shape on the given side is invisible.

    Entries are resolved by direction, so any order works; a direction with
    no entry counts as empty. The collection is not modified.
    """
    if not 0 <= side < NUM_SIDES:
        return True
    for direction in SIDES[side]:
        idx = findshape(entries, direction)
        if idx is not None and not isdeepempty(entries[idx]):
            return False
    return True


# =============================================================================
# Metrics
# =============================================================================


def _selected(entries: Sequence[ShapeEntry], indices: Iterable[int]) -> Iterable[ShapeEntry]:
    for i in indices:
        if 0 <= i < len(entries) and not isempty(entries[i]):
            yield entries[i]


def highest(entries: Sequence[ShapeEntry], indices: Iterable[int]) -> int:
    """Greatest height among the selected entries; empty entries count as 0."""
    return max((entry.height for entry in _selected(entries, indices)), default=0)


def widest(entries: Sequence[ShapeEntry], indices: Iterable[int]) -> int:
    """Greatest width among the selected entries; empty entries count as 0."""
    return max((entry.width for entry in _selected(entries, indices)), default=0)


# =============================================================================
# Box Designs
# =============================================================================


class BoxDesign:
    """
    A border style: one shape entry per direction.

    Entries are stored in direction order, so a Direction is also the index
    of its own entry in shapes.
    """

    def __init__(self, name: str, shapes: Iterable[ShapeEntry] | None = None) -> None:
        self.name = name
        self.shapes: list[ShapeEntry] = [ShapeEntry(d) for d in Direction]
        placed: set[Direction] = set()
        for entry in shapes or ():
            if entry.direction in placed:
                raise ValueError(
                    f"Duplicate shape in design '{name}':\n"
                    f"  More than one entry for '{SHAPE_NAMES[entry.direction]}'\n"
                    f"  Each direction owns exactly one slot"
                )
            placed.add(entry.direction)
            self.shapes[entry.direction] = entry

    def __getitem__(self, direction: Direction) -> ShapeEntry:
        return self.shapes[direction]

    def __repr__(self) -> str:
        present = [SHAPE_NAMES[e.direction] for e in self.shapes if not e.is_absent]
        return f"BoxDesign({self.name!r}, shapes=[{', '.join(present)}])"

    def side_height(self, side: int) -> int:
        if not 0 <= side < NUM_SIDES:
            return 0
        return highest(self.shapes, SIDES[side])

    def side_width(self, side: int) -> int:
        if not 0 <= side < NUM_SIDES:
            return 0
        return widest(self.shapes, SIDES[side])

    def thickness(self) -> tuple[int, int, int, int]:
        """Border size as (top rows, right columns, bottom rows, left columns)."""
        return (
            self.side_height(Side.N),
            self.side_width(Side.E),
            self.side_height(Side.S),
            self.side_width(Side.W),
        )

    def empty_sides(self) -> tuple[Side, ...]:
        return tuple(side for side in Side if empty_side(self.shapes, side))

    def elastic_shape(self, side: int) -> Direction | None:
        """The shape allowed to stretch along side, if the side has one."""
        if not 0 <= side < NUM_SIDES:
            return None
        for direction in SIDES[side]:
            entry = self.shapes[direction]
            if entry.elastic and not entry.is_absent:
                return direction
        return None

    def release(self) -> None:
        for entry in self.shapes:
            freeshape(entry)


# =============================================================================
# Adjacency Flags
# =============================================================================


def _blank_at(entry: ShapeEntry, row: int) -> bool:
    return row >= entry.height or entry.rows[row].is_blank()


def _flag_line(design: BoxDesign, line: tuple[Direction, ...]) -> None:
    """Set flags for shapes that share output rows, given west to east."""
    entries = [design[d] for d in line]
    for i, entry in enumerate(entries):
        for r, row in enumerate(entry.rows):
            row.blank_leftward = all(_blank_at(other, r) for other in entries[:i])
            row.blank_rightward = all(_blank_at(other, r) for other in entries[i + 1 :])


def compute_blank_flags(design: BoxDesign) -> None:
    """
    Fill in blank_leftward / blank_rightward for every shape of a design.

    Shapes of the top and bottom sides share output rows with each other and
    are top-aligned. Non-corner shapes of the west side have nothing to their
    left; those of the east side have nothing to their right.
    """
    _flag_line(design, NORTH_SIDE)
    _flag_line(design, SOUTH_SIDE_REV)

    for direction in WEST_SIDE:
        if direction in CORNERS:
            continue
        for row in design[direction].rows:
            row.blank_leftward = True
            row.blank_rightward = False

    for direction in EAST_SIDE:
        if direction in CORNERS:
            continue
        for row in design[direction].rows:
            row.blank_leftward = False
            row.blank_rightward = True

    logger.info(
        "compute_blank_flags: design=%s thickness=%s empty_sides=%s",
        design.name,
        design.thickness(),
        [side.name for side in design.empty_sides()],
    )
