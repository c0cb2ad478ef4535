"""
Rotation framework for side-independent testing.

Write a design once for the north side and check the same property on all 4
sides by turning the design a quarter turn clockwise at a time.
"""

from typing import Callable

import pytest

from boxshape import BoxDesign, empty_side
from shape_parser import ShapeDefinition, parse_design
from shape_types import NUM_SIDES, SHAPE_NAMES, SHAPES_PER_SIDE, SIDES, Direction, Side

# Shapes per quarter turn: N side -> E side -> S side -> W side
QUARTER = SHAPES_PER_SIDE - 1


# =============================================================================
# Rotation Utilities
# =============================================================================


def rotate_direction(direction: Direction, turns: int) -> Direction:
    """Turn a direction clockwise by the given number of quarter turns."""
    return Direction((direction + QUARTER * turns) % len(Direction))


def rotate_definitions(definitions: dict[str, ShapeDefinition], turns: int) -> dict[str, ShapeDefinition]:
    """
    Move every shape definition a number of quarter turns clockwise.

    Glyphs are kept as they are; only the shape positions move.
    """
    rotated: dict[str, ShapeDefinition] = {}
    for name, rows in definitions.items():
        elastic = name.endswith("*")
        direction = Direction.from_name(name.rstrip("*"))
        new_name = SHAPE_NAMES[rotate_direction(direction, turns)]
        rotated[new_name + ("*" if elastic else "")] = rows
    return rotated


def for_each_side(
    name: str,
    definitions: dict[str, ShapeDefinition],
    check: Callable[[BoxDesign, Side], None],
) -> None:
    """Run check on the design turned so that its north side faces each side in turn."""
    for turns in range(NUM_SIDES):
        design = parse_design(f"{name}@{turns}", rotate_definitions(definitions, turns))
        check(design, Side(turns))


# =============================================================================
# Tests
# =============================================================================


class TestRotationUtilities:
    """Tests for the rotation helpers themselves."""

    def test_quarter_turn_maps_sides(self) -> None:
        for side in range(NUM_SIDES):
            following = SIDES[(side + 1) % NUM_SIDES]
            assert tuple(rotate_direction(d, 1) for d in SIDES[side]) == following

    def test_full_turn_is_identity(self) -> None:
        for direction in Direction:
            assert rotate_direction(direction, NUM_SIDES) is direction

    def test_rotate_definitions_keeps_elastic_marker(self) -> None:
        assert rotate_definitions({"n*": "-", "nw": "+"}, 1) == {"e*": "-", "ne": "+"}


TOP_ONLY = {"nw": " ", "nnw": "~", "n*": "-", "nne": "~", "ne": " "}
BLANK_TOP = {"nw": " ", "nnw": " ", "n*": "  ", "nne": " ", "ne": " "}


class TestSidesUnderRotation:
    """Side properties that must hold the same way for all four sides."""

    def test_only_drawn_side_is_visible(self) -> None:
        def check(design: BoxDesign, drawn: Side) -> None:
            for side in Side:
                assert empty_side(design.shapes, side) == (side != drawn)

        for_each_side("top only", TOP_ONLY, check)

    def test_blank_side_is_empty(self) -> None:
        def check(design: BoxDesign, drawn: Side) -> None:
            assert empty_side(design.shapes, drawn)
            assert design.empty_sides() == tuple(Side)

        for_each_side("blank top", BLANK_TOP, check)

    def test_elastic_shape_follows_rotation(self) -> None:
        def check(design: BoxDesign, drawn: Side) -> None:
            assert design.elastic_shape(drawn) == SIDES[drawn][2]

        for_each_side("top only", TOP_ONLY, check)

    @pytest.mark.parametrize("turns", range(NUM_SIDES))
    def test_thickness_moves_with_side(self, turns: int) -> None:
        """The thickness of a drawn side follows it as the design is turned."""
        definitions = {"nnw": ["~", "~"], "n": ["-", " "], "nne": ["~", "~"]}
        design = parse_design("thick", rotate_definitions(definitions, turns))
        expected = [0, 0, 0, 0]
        # Rows of a rotated shape are unchanged, so vertical sides see width 1
        expected[turns] = 2 if turns in (Side.N, Side.S) else 1
        assert list(design.thickness()) == expected
