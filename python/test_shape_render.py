"""Tests for shape_render module."""

from shape_parser import parse_design, parse_shape
from shape_render import color_for, render_design_summary, render_shape, render_side
from shape_types import Direction, ShapeEntry, Side

ASCII_BOX = {"nw": "+", "n*": "-", "ne": "+", "e*": "|", "se": "+", "s*": "-", "sw": "+", "w*": "|"}


class TestRenderShape:
    """Tests for single shape previews."""

    def test_rows(self) -> None:
        assert render_shape(parse_shape("nw", ["+-", "| "])) == "+-\n| "

    def test_absent(self) -> None:
        assert render_shape(ShapeEntry(Direction.N)) == ""

    def test_flags(self) -> None:
        design = parse_design("top", {"nw": "+", "n": "-", "ne": "+"})
        assert render_shape(design[Direction.NW], show_flags=True) == "<+."
        assert render_shape(design[Direction.N], show_flags=True) == ".-."
        assert render_shape(design[Direction.NE], show_flags=True) == ".+>"


class TestRenderSide:
    """Tests for side previews."""

    def test_horizontal_sides(self) -> None:
        design = parse_design("ascii", ASCII_BOX)
        assert render_side(design, Side.N) == "+-+"
        assert render_side(design, Side.S) == "+-+"

    def test_vertical_sides(self) -> None:
        design = parse_design("ascii", ASCII_BOX)
        assert render_side(design, Side.W) == "+\n|\n+"
        assert render_side(design, Side.E) == "+\n|\n+"

    def test_south_side_drawn_west_to_east(self) -> None:
        design = parse_design("south", {"sw": "L", "s": "_", "se": "J"})
        assert render_side(design, Side.S) == "L_J"

    def test_uneven_heights_are_padded(self) -> None:
        design = parse_design("tall", {"nw": ["/", "|"], "n": "-", "ne": "\\"})
        assert render_side(design, Side.N) == "/-\\\n|  "

    def test_uneven_widths_are_padded(self) -> None:
        design = parse_design("wide", {"nw": "+--", "w": "|", "sw": "+--"})
        assert render_side(design, Side.W) == "+--\n|  \n+--"

    def test_color(self) -> None:
        design = parse_design("ascii", ASCII_BOX)
        colored = render_side(design, Side.N, color=True)
        assert color_for(Direction.N)("-") in colored


class TestRenderDesignSummary:
    """Tests for design summaries."""

    def test_summary(self) -> None:
        design = parse_design("ascii", ASCII_BOX)
        summary = render_design_summary(design)
        assert summary.splitlines() == [
            "Design: ascii",
            "  N: size=1 elastic=n visible",
            "  E: size=1 elastic=e visible",
            "  S: size=1 elastic=s visible",
            "  W: size=1 elastic=w visible",
        ]

    def test_empty_sides_and_invisible_shapes(self) -> None:
        design = parse_design("shell", {"nw": " ", "w": "# ", "sw": " "})
        lines = render_design_summary(design).splitlines()
        assert "  N: size=0 elastic=- empty" in lines
        assert "  W: size=2 elastic=- visible" in lines
        assert lines[-1] == "  invisible shapes: nw, sw"
