"""Input events delivered to the menu loop."""

from dataclasses import dataclass
from enum import Enum


class KeyEventKind(str, Enum):
    """Whether a key went down, came up, or auto-repeated."""

    PRESS = "press"
    RELEASE = "release"
    REPEAT = "repeat"


@dataclass(frozen=True)
class KeyEvent:
    """A single key event.

    ``code`` is the key as readchar reports it: a printable character or
    an escape sequence such as ``readchar.key.UP``.
    """

    code: str
    kind: KeyEventKind = KeyEventKind.PRESS

    @property
    def is_press(self) -> bool:
        return self.kind == KeyEventKind.PRESS
