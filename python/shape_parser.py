"""
Shape literal parsing for box designs.

Builds shape entries and whole designs from rows of text, the way a design
loader fills in shapes after allocating them.
"""

from __future__ import annotations

import logging

from rich.cells import cell_len

from boxshape import BoxDesign, compute_blank_flags, genshape
from shape_types import BLANK, CORNERS, SHAPE_NAMES, SIDES, Direction, ShapeEntry, Side

__all__ = ["parse_shape", "parse_design"]

logger = logging.getLogger(__name__)

ELASTIC_MARKER = "*"

ShapeDefinition = str | list[str] | tuple[str, ...]


def _split_name(name: str) -> tuple[Direction, bool]:
    """Split 'n*' style names into the direction and the elastic marker."""
    name = name.strip()
    elastic = name.endswith(ELASTIC_MARKER)
    if elastic:
        name = name[: -len(ELASTIC_MARKER)]
    return Direction.from_name(name), elastic


def parse_shape(name: str, rows: ShapeDefinition, elastic: bool = False) -> ShapeEntry:
    """
    Parse one shape from its rows of text.

    Format:
    - name is a shape name (nw, nnw, n, ...), case-insensitive
    - A trailing '*' on the name marks the shape elastic
    - rows is either a single string (one row) or a list of strings
    - Rows shorter than the widest row are padded with spaces on the right;
      widths are measured in terminal columns, not characters

    Example:
        parse_shape("n*", "-")           -> elastic 1x1 shape for N
        parse_shape("nw", ["+-", "| "])  -> 2x2 shape for NW

    Raises:
        ValueError: On an unknown name, or a definition with no visible extent
    """
    direction, marked = _split_name(name)
    lines = [rows] if isinstance(rows, str) else list(rows)
    shape_name = SHAPE_NAMES[direction]

    for row_idx, line in enumerate(lines):
        if "\n" in line:
            raise ValueError(
                f"Invalid row in shape '{shape_name}'\n"
                f'  Row {row_idx}: "{line}"\n'
                f"  Rows must not contain line breaks; pass a list of rows instead"
            )

    width = max((cell_len(line) for line in lines), default=0)
    generated = genshape(width, len(lines))
    if generated is None:
        raise ValueError(
            f"Empty shape definition for '{shape_name}'\n"
            f"  Rows: {len(lines)}, columns: {width}\n"
            f"  A shape needs at least one row and one column"
        )

    for row, line in zip(generated, lines):
        row.text = line + BLANK * (width - cell_len(line))

    entry = ShapeEntry(direction)
    entry.populate(generated, elastic=elastic or marked)
    return entry


def _check_elastic(name: str, shapes: list[ShapeEntry], seen: dict[Direction, str]) -> None:
    """Allow at most one elastic shape per side, and none in the corners."""
    elastic = [entry.direction for entry in shapes if entry.elastic]

    for direction in elastic:
        if direction in CORNERS:
            raise ValueError(
                f"Elastic corner in design '{name}':\n"
                f"  Shape '{seen[direction]}' is a corner\n"
                f"  Only non-corner shapes may be marked elastic"
            )

    for side in Side:
        on_this_side = [d for d in elastic if d in SIDES[side]]
        if len(on_this_side) > 1:
            raise ValueError(
                f"Too many elastic shapes on side {side.name} of design '{name}':\n"
                f"  Elastic: {', '.join(seen[d] for d in on_this_side)}\n"
                f"  Each side may have at most one elastic shape"
            )


def parse_design(name: str, definitions: dict[str, ShapeDefinition]) -> BoxDesign:
    """
    Parse a box design from shape definitions.

    Example:
        parse_design("ascii", {
            "nw": "+", "n*": "-", "ne": "+",
            "w*": "|", "e*": "|",
            "sw": "+", "s*": "-", "se": "+",
        })

    Shapes not mentioned stay absent. Adjacency flags are computed once all
    shapes are in place.

    Args:
        name: Design name
        definitions: Dict mapping shape name to its rows

    Returns:
        BoxDesign holding the parsed shapes

    Raises:
        ValueError: On unknown or duplicate shape names, empty shapes, an
            elastic corner, or more than one elastic shape on a side
    """
    seen: dict[Direction, str] = {}
    shapes: list[ShapeEntry] = []

    for shape_name, rows in definitions.items():
        entry = parse_shape(shape_name, rows)
        if entry.direction in seen:
            raise ValueError(
                f"Duplicate shape in design '{name}':\n"
                f"  '{seen[entry.direction]}' and '{shape_name}' both define "
                f"'{SHAPE_NAMES[entry.direction]}'"
            )
        seen[entry.direction] = shape_name
        shapes.append(entry)

    _check_elastic(name, shapes, seen)

    design = BoxDesign(name, shapes)
    compute_blank_flags(design)
    logger.debug("parse_design: %r", design)
    return design
