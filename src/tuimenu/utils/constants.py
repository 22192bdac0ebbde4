"""Constants used throughout tuimenu."""

from readchar import key

# Menu shown when no config overrides it
DEFAULT_ITEMS = ["One", "Two", "Three"]
DEFAULT_TITLE = "Main Menu"

# Styles
TITLE_STYLE = "bold"
DEFAULT_HIGHLIGHT_STYLE = "bold red"
KEY_HINT_STYLE = "bold blue"


# Key bindings
class Keys:
    """Key codes dispatched by the menu loop."""

    QUIT = ("q",)
    UP = (key.UP, "j")
    DOWN = (key.DOWN, "k")
