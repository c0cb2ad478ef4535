"""
Plain-text previews of shapes and box designs, for debugging designs.

Sides are drawn on their own; stitching a full box around text is left to the
output renderer.
"""

from __future__ import annotations

import logging
from typing import Callable

import simple_chalk as chalk  # type: ignore[import-untyped]

from boxshape import BoxDesign, isdeepempty
from shape_types import (
    BLANK,
    EAST_SIDE,
    NORTH_SIDE,
    SHAPE_NAMES,
    SOUTH_SIDE_REV,
    WEST_SIDE,
    Direction,
    ShapeEntry,
    Side,
)

logger = logging.getLogger(__name__)

# West to east for horizontal sides, north to south for vertical ones
_DRAW_ORDER: dict[Side, tuple[Direction, ...]] = {
    Side.N: NORTH_SIDE,
    Side.E: EAST_SIDE,
    Side.S: SOUTH_SIDE_REV,
    Side.W: tuple(reversed(WEST_SIDE)),
}

PALETTE: list[Callable[[str], str]] = [
    chalk.red,
    chalk.green,
    chalk.yellow,
    chalk.blue,
    chalk.magenta,
    chalk.cyan,
    chalk.redBright,
    chalk.greenBright,
    chalk.yellowBright,
    chalk.blueBright,
]


def _plain(s: str) -> str:
    return s


def color_for(direction: Direction) -> Callable[[str], str]:
    return PALETTE[direction % len(PALETTE)]


def render_shape(entry: ShapeEntry, show_flags: bool = False) -> str:
    """
    Render a single shape, one line per row.

    With show_flags, each row is framed by '<' / '>' where the row is blank
    leftward / rightward, and '.' otherwise.
    """
    if entry.is_absent:
        return ""
    lines = []
    for row in entry.rows:
        if show_flags:
            left = "<" if row.blank_leftward else "."
            right = ">" if row.blank_rightward else "."
            lines.append(f"{left}{row.text}{right}")
        else:
            lines.append(row.text)
    return "\n".join(lines)


def render_side(design: BoxDesign, side: int, color: bool = False) -> str:
    """
    Render the five shapes of one side next to each other.

    Horizontal sides are laid out west to east with shapes top-aligned;
    vertical sides are stacked north to south and left-aligned.
    """
    order = _DRAW_ORDER[Side(side)]
    entries = [design[d] for d in order if not design[d].is_absent]
    paint = color_for if color else (lambda _d: _plain)
    logger.debug("render_side: design=%s side=%s shapes=%d", design.name, Side(side).name, len(entries))

    if side in (Side.N, Side.S):
        height = design.side_height(side)
        lines = []
        for r in range(height):
            parts = []
            for entry in entries:
                text = entry.rows[r].text if r < entry.height else BLANK * entry.width
                parts.append(paint(entry.direction)(text))
            lines.append("".join(parts))
        return "\n".join(lines)

    width = design.side_width(side)
    lines = []
    for entry in entries:
        for row in entry.rows:
            padding = BLANK * (width - entry.width)
            lines.append(paint(entry.direction)(row.text) + padding)
    return "\n".join(lines)


def render_design_summary(design: BoxDesign) -> str:
    """One line per side: thickness, elastic shape and whether the side is suppressed."""
    top, right, bottom, left = design.thickness()
    sizes = {Side.N: top, Side.E: right, Side.S: bottom, Side.W: left}
    empty = set(design.empty_sides())

    lines = [f"Design: {design.name}"]
    for side in Side:
        elastic = design.elastic_shape(side)
        elastic_name = SHAPE_NAMES[elastic] if elastic is not None else "-"
        status = "empty" if side in empty else "visible"
        lines.append(f"  {side.name}: size={sizes[side]} elastic={elastic_name} {status}")

    invisible = [SHAPE_NAMES[e.direction] for e in design.shapes if not e.is_absent and isdeepempty(e)]
    if invisible:
        lines.append(f"  invisible shapes: {', '.join(invisible)}")
    return "\n".join(lines)
