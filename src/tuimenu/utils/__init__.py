"""Utilities for tuimenu."""

from tuimenu.utils.config import Config, get_tuimenu_dir
from tuimenu.utils.exceptions import TerminalIOError, TuimenuError

__all__ = ["Config", "get_tuimenu_dir", "TerminalIOError", "TuimenuError"]
