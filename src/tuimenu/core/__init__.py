"""Core menu logic."""

from tuimenu.core.app import MenuApp, Terminal
from tuimenu.core.events import KeyEvent, KeyEventKind
from tuimenu.core.state import MenuState

__all__ = ["MenuApp", "Terminal", "KeyEvent", "KeyEventKind", "MenuState"]
