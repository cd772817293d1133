"""
Screen rendering for the interactive formatter.
The layout is fixed so a clicked terminal row maps straight to a format row.
"""

from typing import Optional

from rich.console import Console
from rich.text import Text

from ..models import ControllerState

# Terminal row (1-based) of the first format row
FIRST_ROW = 6

HELP_TEXT = "↑/↓ select · Ctrl+C copy · click a row to copy · Esc quit"


def row_for_click(row: int, count: int) -> Optional[int]:
    """Format index under a clicked terminal row, or None."""
    index = row - FIRST_ROW
    if 0 <= index < count:
        return index
    return None


def render_screen(console: Console, state: ControllerState, title: str):
    """Redraw the whole screen from a controller snapshot."""
    console.clear()

    def line(text):
        console.print(text, no_wrap=True, overflow="crop", highlight=False)

    # Rows 1-5: title, prompt, list heading
    line(Text(title, style="bold blue"))
    line("")
    prompt = Text("Enter Phone Number: ", style="bold")
    prompt.append(state.raw_input)
    prompt.append("▏", style="blink")
    line(prompt)
    line("")

    if state.formats.is_empty and state.raw_input:
        line(Text("Nothing to show", style="dim"))
    else:
        line(Text("Formatted Numbers:", style="bold"))

    # Rows FIRST_ROW..: one per format
    width = max((len(value) for value in state.formats.values()), default=0)
    for index, entry in enumerate(state.formats):
        selected = index == state.cursor
        row = Text("❯ " if selected else "  ")
        row.append(entry.value.ljust(width), style="bold white on blue" if selected else "")
        row.append(f"  {entry.variant.value}", style="dim")
        line(row)

    line("")
    if state.feedback_message:
        line(Text(f" {state.feedback_message} ", style="bold white on green"))
    else:
        line(Text(HELP_TEXT, style="dim"))
