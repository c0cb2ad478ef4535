"""
Interactive browser for the sample box designs.
Flip through designs and inspect each side with keyboard commands.
"""

import logging
import sys

import readchar
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from boxshape import BoxDesign
from demo import load_samples
from shape_render import render_design_summary, render_shape, render_side
from shape_types import SIDES, Side


class InteractiveDemo:
    """Keyboard-driven viewer for box designs."""

    def __init__(self, designs: dict[str, BoxDesign]) -> None:
        self.designs = designs
        self.names = list(designs)
        self.index = 0
        self.side = Side.N
        self.show_flags = False
        self.console = Console()
        self.status_message = "Ready"

    @property
    def design(self) -> BoxDesign:
        return self.designs[self.names[self.index]]

    def generate_display(self) -> Panel:
        """Generate the current display with the selected design and side."""
        design = self.design

        status = Text()
        status.append(render_design_summary(design) + "\n\n")

        status.append(f"Side {self.side.name}:\n", style="bold")
        status.append(Text.from_ansi(render_side(design, self.side, color=True)))
        status.append("\n\n")

        for direction in SIDES[self.side]:
            entry = design[direction]
            status.append(f"{direction.name}", style="bold")
            if entry.is_absent:
                status.append(" (absent)\n", style="dim")
                continue
            status.append(f" {entry.width}x{entry.height}{' elastic' if entry.elastic else ''}\n")
            status.append(render_shape(entry, show_flags=self.show_flags) + "\n")

        status.append("\n")
        status.append("Keys:\n", style="bold cyan")
        status.append("  N/P - Next/previous design\n")
        status.append("  W/A/S/D - Show north/west/south/east side\n")
        status.append("  F - Toggle blank flags\n")
        status.append("  Q - Quit\n\n")

        status.append("─" * 40 + "\n", style="dim")
        status.append("Status: ", style="bold")
        status.append(self.status_message)

        return Panel(status, title=f"Box Design: {design.name}", border_style="green", width=80)

    def step(self, offset: int) -> None:
        self.index = (self.index + offset) % len(self.names)
        self.status_message = f"Showing {self.design.name}"

    def run(self) -> None:
        """Run the browser until the user quits."""
        side_keys = {"w": Side.N, "a": Side.W, "s": Side.S, "d": Side.E}

        with Live(self.generate_display(), console=self.console, refresh_per_second=4) as live:
            try:
                while True:
                    live.update(self.generate_display())
                    key = readchar.readkey().lower()

                    if key == "q":
                        self.status_message = "Quitting..."
                        live.update(self.generate_display())
                        break
                    elif key == "n":
                        self.step(1)
                    elif key == "p":
                        self.step(-1)
                    elif key == "f":
                        self.show_flags = not self.show_flags
                        self.status_message = f"Blank flags {'on' if self.show_flags else 'off'}"
                    elif key in side_keys:
                        self.side = side_keys[key]
                        self.status_message = f"Side {self.side.name}"
                    else:
                        self.status_message = f"Unknown key: {repr(key)}"

            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "summary":
        # Non-interactive: print every design and exit
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
        for design in load_samples().values():
            print(render_design_summary(design))
            print()
    else:
        InteractiveDemo(load_samples()).run()
