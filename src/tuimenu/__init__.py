"""tuimenu - Minimal terminal menu."""

from importlib.metadata import version

__version__ = version("tuimenu")

from tuimenu.core.app import MenuApp
from tuimenu.core.events import KeyEvent, KeyEventKind
from tuimenu.core.state import MenuState

__all__ = [
    "MenuApp",
    "MenuState",
    "KeyEvent",
    "KeyEventKind",
]
