"""UI components for the terminal menu."""

from tuimenu.cli.ui.panels import console

__all__ = ["console"]
