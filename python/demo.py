"""
Demonstration scripts for the box shape engine.
"""

import logging

from boxshape import (
    BoxDesign,
    empty_side,
    findshape,
    genshape,
    highest,
    isdeepempty,
    isempty,
    on_side,
    side_of,
    widest,
)
from shape_parser import parse_design
from shape_render import render_design_summary, render_shape, render_side
from shape_types import CORNERS, NORTH_SIDE, Direction, ShapeEntry, Side

SAMPLE_DESIGNS = dict(
    ascii=dict(
        nw="+", n="-", ne="+",
        e="|",
        se="+", s="-", sw="+",
        w="|",
    ),
    shell=dict(
        nw=" ", n=" ", ne=" ",
        e=" ",
        se=" ", s=" ", sw=" ",
        w="# ",
    ),
    unicode=dict(
        nw="┌", n="─", ne="┐",
        e="│",
        se="┘", s="─", sw="└",
        w="│",
    ),
    scroll=dict(
        nw=[" ___", "/ \\ ", "\\_/|"],
        n=["_", " ", " "],
        ne=["___ ", "   \\", "   |"],
        e="|",
        se=["   |", "___/"],
        s=["  ", "__"],
        sw=["|   ", "\\___"],
        w="|",
        wnw="|",
    ),
    wide=dict(
        nw="＋", n="＝", ne="＋",
        e="｜",
        se="＋", s="＝", sw="＋",
        w="｜",
    ),
)


def load_samples() -> dict[str, BoxDesign]:
    """Parse every sample design, marking the middle shape of each side elastic."""
    designs = {}
    for name, shapes in SAMPLE_DESIGNS.items():
        definitions = {(key + "*" if key in ("n", "e", "s", "w") else key): rows for key, rows in shapes.items()}
        designs[name] = parse_design(name, definitions)
    return designs


def catalog_demo() -> None:
    """Show how directions group into sides."""
    print("Direction catalog:")
    for direction in Direction:
        sides = [Side(s).name for s in range(4) if on_side(direction, s)]
        kind = "corner" if direction in CORNERS else "side"
        print(f"  {direction.name:>3} ({kind}): on {', '.join(sides)}; first side {side_of(direction).name}")


def generator_demo() -> None:
    """Allocate, fill and release a shape."""
    print("genshape(0, 5) ->", genshape(0, 5))
    rows = genshape(5, 3)
    assert rows is not None
    entry = ShapeEntry(Direction.N)
    entry.populate(rows)
    print(f"5x3 blank shape: height={entry.height} width={entry.width} isempty={isempty(entry)}")

    entry.rows[1].text = "  *  "
    print(f"after drawing a star: isempty={isempty(entry)}")
    print(render_shape(entry))

    entry.release()
    print(f"after release: height={entry.height} width={entry.width} absent={entry.is_absent}")


def metrics_demo(designs: dict[str, BoxDesign]) -> None:
    """Compute side sizes and suppressed sides for each sample."""
    for design in designs.values():
        print(render_design_summary(design))
        print(render_side(design, Side.N, color=True))
        print()

    scroll = designs["scroll"]
    print("scroll north side height:", highest(scroll.shapes, NORTH_SIDE))
    corners_and_w = [Direction.SW, Direction.W, Direction.NW]
    print(
        f"scroll width over {[d.name for d in corners_and_w]}:",
        widest(scroll.shapes, corners_and_w),
    )

    shell = designs["shell"]
    for side in Side:
        print(f"shell {side.name} side empty: {empty_side(shell.shapes, side)}")
    idx = findshape(shell.shapes, Direction.W)
    print("shell west shape deep-empty:", idx is not None and isdeepempty(shell.shapes[idx]))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    catalog_demo()
    print()
    generator_demo()
    print()
    metrics_demo(load_samples())
