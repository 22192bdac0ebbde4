"""The menu application loop."""

from typing import Callable, Optional, Protocol, Sequence

from rich.console import RenderableType

from tuimenu.core.events import KeyEvent
from tuimenu.core.render import build_menu_panel
from tuimenu.core.state import MenuState
from tuimenu.utils.constants import DEFAULT_HIGHLIGHT_STYLE, DEFAULT_TITLE, Keys
from tuimenu.utils.debug import debug_key, debug_loop


class Terminal(Protocol):
    """What the loop needs from the screen.

    Allows swapping the real terminal for a scripted one in tests.
    """

    def draw(self, build: Callable[[int, int], RenderableType]) -> None:
        """Build a frame for the current viewport size and flush it."""
        ...

    def read_event(self) -> KeyEvent:
        """Block until the next input event arrives."""
        ...


class MenuApp:
    """Draws the menu, waits for a key, updates the selection, repeats."""

    def __init__(
        self,
        items: Sequence[str],
        title: str = DEFAULT_TITLE,
        highlight_style: str = DEFAULT_HIGHLIGHT_STYLE,
        state: Optional[MenuState] = None,
    ):
        self.state = state or MenuState(items)
        self.title = title
        self.highlight_style = highlight_style

    def run(self, terminal: Terminal) -> None:
        """Run until the user quits.

        Errors from the terminal (TerminalIOError) are not caught here;
        the caller owns terminal cleanup.
        """
        debug_loop("started", items=self.state.item_count)
        while not self.state.should_exit:
            terminal.draw(self.render)
            self.handle_event(terminal.read_event())
        debug_loop("exited", selected=self.state.selected_index)

    def render(self, width: int, height: int) -> RenderableType:
        return build_menu_panel(
            self.state,
            title=self.title,
            height=height,
            highlight_style=self.highlight_style,
        )

    def handle_event(self, event: KeyEvent) -> None:
        # Release and repeat events are ignored
        if event.is_press:
            self.handle_key(event.code)

    def handle_key(self, code: str) -> None:
        if code in Keys.QUIT:
            self.state.request_exit()
        elif code in Keys.UP:
            self.state.move_up()
        elif code in Keys.DOWN:
            self.state.move_down()
        else:
            return
        debug_key(
            "dispatched",
            key=repr(code),
            selected=self.state.selected_index,
            exit=self.state.should_exit,
        )
