"""Menu selection state."""

from typing import Sequence

from tuimenu.utils.exceptions import EmptyMenuError, InvalidSelectionError


class MenuState:
    """Selected entry and exit latch for a fixed list of menu items.

    The item list is frozen at construction. Selection wraps circularly in
    both directions, and once ``should_exit`` is set it stays set.
    """

    def __init__(self, items: Sequence[str], selected_index: int = 0):
        if not items:
            raise EmptyMenuError("A menu needs at least one item")
        self._items = tuple(items)
        if not 0 <= selected_index < len(self._items):
            raise InvalidSelectionError(
                f"selected_index {selected_index} out of range "
                f"for {len(self._items)} items"
            )
        self.selected_index = selected_index
        self.should_exit = False

    def __repr__(self) -> str:
        return (
            f"MenuState(items={list(self._items)!r}, "
            f"selected_index={self.selected_index}, "
            f"should_exit={self.should_exit})"
        )

    @property
    def items(self) -> tuple[str, ...]:
        return self._items

    @property
    def item_count(self) -> int:
        return len(self._items)

    @property
    def selected_item(self) -> str:
        return self._items[self.selected_index]

    def move_up(self) -> None:
        """Select the previous item, wrapping to the last one."""
        if self.selected_index == 0:
            self.selected_index = self.item_count - 1
        else:
            self.selected_index -= 1

    def move_down(self) -> None:
        """Select the next item, wrapping to the first one."""
        if self.selected_index == self.item_count - 1:
            self.selected_index = 0
        else:
            self.selected_index += 1

    def request_exit(self) -> None:
        self.should_exit = True
