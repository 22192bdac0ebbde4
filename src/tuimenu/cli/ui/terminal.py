"""Real terminal backend: alternate screen via rich, keys via readchar."""

from contextlib import contextmanager
from typing import Callable, Iterator, Optional

import readchar
from rich.console import Console, RenderableType, ScreenContext

from tuimenu.core.events import KeyEvent
from tuimenu.utils.exceptions import TerminalIOError

try:
    import termios

    TERMINAL_ERRORS: tuple = (OSError, termios.error)
except ImportError:  # Windows has no termios
    TERMINAL_ERRORS = (OSError,)


class RichTerminal:
    """Flushes frames to a rich screen and reads keys with readchar."""

    def __init__(self, console: Console, screen: ScreenContext):
        self.console = console
        self.screen = screen

    def draw(self, build: Callable[[int, int], RenderableType]) -> None:
        """Build a frame for the current viewport and flush it."""
        width, height = self.console.size
        frame = build(width, height)
        try:
            self.screen.update(frame)
        except TERMINAL_ERRORS as e:
            raise TerminalIOError(f"Failed to draw frame: {e}", "draw") from e

    def read_event(self) -> KeyEvent:
        """Block until a key is pressed.

        readchar only reports presses, so every event is a PRESS.
        """
        try:
            code = readchar.readkey()
        except TERMINAL_ERRORS as e:
            raise TerminalIOError(f"Failed to read key: {e}", "read") from e
        if not code:
            # readchar returns "" once stdin hits EOF
            raise TerminalIOError("Failed to read key: end of input", "read")
        return KeyEvent(code)


@contextmanager
def open_terminal(console: Optional[Console] = None) -> Iterator[RichTerminal]:
    """Enter the alternate screen for the duration of the block.

    The screen is restored on every exit path, including errors.
    """
    console = console or Console()
    with console.screen(hide_cursor=True) as screen:
        yield RichTerminal(console, screen)
