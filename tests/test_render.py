"""Tests for menu rendering."""

import io

import pytest
from rich.console import Console
from rich.text import Text

from tuimenu.core.render import (
    build_instructions,
    build_menu_panel,
    build_menu_text,
    format_scroll_indicator,
    visible_window,
)
from tuimenu.core.state import MenuState

ITEMS = ["One", "Two", "Three"]


def render_lines(renderable, width=50):
    """Render to plain text lines."""
    console = Console(file=io.StringIO(), width=width, color_system=None)
    console.print(renderable)
    return console.file.getvalue().splitlines()


def styled_labels(text: Text) -> dict[str, str]:
    """Map each styled span's text to its style."""
    return {text.plain[span.start : span.end]: str(span.style) for span in text.spans}


def test_selected_item_emphasised():
    """Only the selected entry carries the highlight style."""
    text = build_menu_text(MenuState(ITEMS))

    assert text.plain == "One\nTwo\nThree"
    assert styled_labels(text) == {"One": "bold red"}


def test_highlight_follows_selection():
    state = MenuState(ITEMS)
    state.move_down()

    text = build_menu_text(state, highlight_style="bold green")

    assert styled_labels(text) == {"Two": "bold green"}


def test_text_is_centered():
    """Labels are horizontally centered."""
    assert build_menu_text(MenuState(ITEMS)).justify == "center"


def test_instructions_hint_quit_key():
    """Footer reads 'Quit <Q>' with the key hint styled."""
    footer = build_instructions()

    assert footer.plain == "Quit <Q>"
    assert styled_labels(footer) == {"<Q>": "bold blue"}


def test_panel_frame_layout():
    """Frame has heavy border, centered title, items, and footer hint."""
    lines = render_lines(build_menu_panel(MenuState(ITEMS), height=6))

    assert len(lines) == 6
    top, bottom = lines[0], lines[-1]
    assert top.startswith("┏") and top.endswith("┓")
    assert bottom.startswith("┗") and bottom.endswith("┛")
    assert " Main Menu " in top
    assert " Quit <Q> " in bottom

    # Title sits in the middle of the top border
    left = top.index("Main Menu")
    right = len(top) - (left + len("Main Menu"))
    assert abs(left - right) <= 1

    body = [line.strip("┃ ") for line in lines[1:-1]]
    assert body[:3] == ["One", "Two", "Three"]
    one_line = lines[1]
    assert one_line.index("One") > 20


def test_panel_title_configurable():
    lines = render_lines(build_menu_panel(MenuState(ITEMS), title="Tools", height=5))
    assert " Tools " in lines[0]


def test_panel_fills_height():
    """Frame takes the full height it is given."""
    lines = render_lines(build_menu_panel(MenuState(ITEMS), height=12))
    assert len(lines) == 12


def test_long_menu_scrolls_to_selection():
    """Items beyond the viewport are windowed around the selection."""
    items = [f"Item {i}" for i in range(20)]
    state = MenuState(items, selected_index=15)

    text = build_menu_text(state, max_visible=6)
    rows = text.plain.split("\n")

    assert len(rows) == 6
    assert rows[0] == "↑ 12 more"
    assert rows[1:5] == ["Item 12", "Item 13", "Item 14", "Item 15"]
    assert rows[5] == "↓ 4 more"
    assert styled_labels(text)["Item 15"] == "bold red"


def test_long_menu_at_top_has_no_top_indicator():
    items = [f"Item {i}" for i in range(10)]
    text = build_menu_text(MenuState(items), max_visible=5)
    rows = text.plain.split("\n")

    assert rows[0] == ""
    assert rows[1:4] == ["Item 0", "Item 1", "Item 2"]
    assert rows[4] == "↓ 7 more"


def test_short_menu_shows_everything():
    """No indicators when every item fits."""
    text = build_menu_text(MenuState(ITEMS), max_visible=3)
    assert text.plain == "One\nTwo\nThree"


@pytest.mark.parametrize("height", [3, 4])
@pytest.mark.parametrize("selected", [0, 1, 2, 3])
def test_short_viewport_keeps_selection_visible(height, selected):
    """With no room for indicators the selected item is still drawn."""
    items = ["One", "Two", "Three", "Four"]
    state = MenuState(items, selected_index=selected)

    lines = render_lines(build_menu_panel(state, height=height))
    body = [line.strip("┃ ") for line in lines[1:-1]]

    assert len(lines) == height
    assert items[selected] in body
    assert not any("more" in row for row in body)


def test_one_row_body_shows_only_selection():
    state = MenuState(["One", "Two", "Three", "Four"], selected_index=2)

    text = build_menu_text(state, max_visible=1)

    assert text.plain == "Three"
    assert styled_labels(text) == {"Three": "bold red"}


def test_two_row_body_windows_without_indicators():
    state = MenuState(["One", "Two", "Three", "Four"], selected_index=2)

    text = build_menu_text(state, max_visible=2)

    assert text.plain == "Two\nThree"


def test_three_row_body_uses_indicators():
    """At three rows the indicators fit around a single item."""
    state = MenuState(["One", "Two", "Three", "Four"], selected_index=2)

    rows = build_menu_text(state, max_visible=3).plain.split("\n")

    assert rows == ["↑ 2 more", "Three", "↓ 1 more"]


class TestVisibleWindow:
    """Tests for the scroll window."""

    def test_everything_fits(self):
        assert visible_window(2, 5, 10) == (0, 5)

    def test_stays_at_top_while_cursor_fits(self):
        assert visible_window(4, 20, 5) == (0, 5)

    def test_follows_cursor_past_the_bottom(self):
        assert visible_window(7, 20, 5) == (3, 8)

    def test_clamps_at_the_end(self):
        assert visible_window(19, 20, 5) == (15, 20)

    @pytest.mark.parametrize("cursor", range(12))
    def test_cursor_always_inside(self, cursor):
        start, end = visible_window(cursor, 12, 4)
        assert start <= cursor < end
        assert end - start == 4


def test_scroll_indicators():
    assert format_scroll_indicator(0, 0) == ("", "")
    assert format_scroll_indicator(3, 0) == ("↑ 3 more", "")
    assert format_scroll_indicator(0, 4) == ("", "↓ 4 more")
