import os
import sys

from asciitile.renderer import ColourCallback, Sink

RESET = "\033[0m"


def get_terminal_size() -> tuple[int, int]:
    """Return (columns, rows) of the terminal, or (80, 24) if not a tty."""
    if not sys.stdout.isatty():
        return (80, 24)
    size = os.get_terminal_size()
    return (size.columns, size.lines)


def ansi_foreground(sink: Sink) -> ColourCallback:
    """Callback that sets the truecolor foreground on sink."""

    def set_fg(r: int, g: int, b: int) -> None:
        sink.write(f"\033[38;2;{r};{g};{b}m")

    return set_fg


def ansi_background(sink: Sink) -> ColourCallback:
    """Callback that sets the truecolor background on sink."""

    def set_bg(r: int, g: int, b: int) -> None:
        sink.write(f"\033[48;2;{r};{g};{b}m")

    return set_bg
