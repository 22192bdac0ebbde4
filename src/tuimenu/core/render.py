"""Pure rendering of menu state into rich renderables."""

from typing import Optional

from rich import box
from rich.panel import Panel
from rich.text import Text

from tuimenu.core.state import MenuState
from tuimenu.utils.constants import (
    DEFAULT_HIGHLIGHT_STYLE,
    DEFAULT_TITLE,
    KEY_HINT_STYLE,
    TITLE_STYLE,
)

# Border rows taken from the panel height
BORDER_ROWS = 2

# Fewer body rows than this and the scroll indicators are dropped
MIN_ROWS_FOR_INDICATORS = 3


def visible_window(cursor: int, total_items: int, max_visible: int) -> tuple[int, int]:
    """Return (start, end) of the slice to show so ``cursor`` is inside it.

    The window stays at the top until the cursor passes its last row, then
    follows the cursor with it on the bottom row.
    """
    if total_items <= max_visible:
        return 0, total_items
    start = min(max(0, cursor - max_visible + 1), total_items - max_visible)
    return start, start + max_visible


def format_scroll_indicator(hidden_above: int, hidden_below: int) -> tuple[str, str]:
    """Format scroll indicators.

    Returns:
        Tuple of (top_indicator, bottom_indicator)
    """
    top = f"↑ {hidden_above} more" if hidden_above > 0 else ""
    bottom = f"↓ {hidden_below} more" if hidden_below > 0 else ""
    return top, bottom


def build_instructions() -> Text:
    """Footer line shown in the bottom border."""
    return Text.assemble("Quit ", ("<Q>", KEY_HINT_STYLE))


def build_menu_text(
    state: MenuState,
    max_visible: Optional[int] = None,
    highlight_style: str = DEFAULT_HIGHLIGHT_STYLE,
) -> Text:
    """Stack item labels, centered, emphasising the selected one.

    When ``max_visible`` is smaller than the item count only a window
    around the selection is shown. Scroll indicators frame the window if
    there is room for them next to at least one item.
    """
    total = state.item_count
    scrolling = max_visible is not None and total > max_visible
    indicators = scrolling and max_visible >= MIN_ROWS_FOR_INDICATORS

    if not scrolling:
        start, end = 0, total
    elif indicators:
        start, end = visible_window(state.selected_index, total, max_visible - 2)
    else:
        start, end = visible_window(state.selected_index, total, max_visible)

    lines = []
    if indicators:
        top, bottom = format_scroll_indicator(start, total - end)
        lines.append(Text(top, style="dim"))
    for i in range(start, end):
        style = highlight_style if i == state.selected_index else ""
        lines.append(Text(state.items[i], style=style))
    if indicators:
        lines.append(Text(bottom, style="dim"))

    return Text("\n", justify="center").join(lines)


def build_menu_panel(
    state: MenuState,
    title: str = DEFAULT_TITLE,
    height: Optional[int] = None,
    highlight_style: str = DEFAULT_HIGHLIGHT_STYLE,
) -> Panel:
    """Build the full-screen menu frame for ``state``.

    Args:
        state: Menu to draw (never modified)
        title: Text centered in the top border
        height: Total frame height; None lets the panel size to its content
        highlight_style: Style for the selected entry
    """
    max_visible = None
    if height is not None:
        max_visible = max(1, height - BORDER_ROWS)

    return Panel(
        build_menu_text(state, max_visible, highlight_style),
        title=Text(title, style=TITLE_STYLE),
        title_align="center",
        subtitle=build_instructions(),
        subtitle_align="center",
        box=box.HEAVY,
        expand=True,
        height=height,
    )
