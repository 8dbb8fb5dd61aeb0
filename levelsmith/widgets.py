"""Editor widget state: buttons, text inputs, popups and the mouse cursor.

The widgets keep only their logic.  Whoever draws them feeds in the mouse
and keyboard state each frame and reads the state back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from levelsmith.tileset import INPUT_BLINK_TIME, INPUT_MAX_LENGTH


def _do_nothing() -> None:
    """Default click and confirm action."""


class MouseCursor(Enum):
    """Mouse cursor shapes the editor uses."""

    DEFAULT = "default"
    POINTING_HAND = "pointing_hand"
    IBEAM = "ibeam"


class CursorManager:
    """Collects cursor requests during a frame and applies the last one."""

    def __init__(self) -> None:
        self.current = MouseCursor.DEFAULT

    def request(self, cursor: MouseCursor) -> None:
        """Ask for a cursor shape for the current frame."""
        self.current = cursor

    def tick(self) -> MouseCursor:
        """Return the cursor to show this frame and reset to the default."""
        cursor = self.current
        self.current = MouseCursor.DEFAULT
        return cursor


@dataclass
class Rect:
    """An axis-aligned rectangle in window pixels."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def contains(self, x: int, y: int) -> bool:
        """Return whether a pixel lies inside, edges included."""
        left, top = int(self.x), int(self.y)
        return (
            left <= x <= left + int(self.width)
            and top <= y <= top + int(self.height)
        )


@dataclass
class Button:
    """A clickable button, optionally a toggle that stays pressed."""

    rect: Rect = field(default_factory=Rect)
    label: str = ""
    toggle_mode: bool = False
    on_click: Callable[[], None] = _do_nothing
    _being_clicked: bool = field(default=False, init=False, repr=False)
    _pressed: bool = field(default=False, init=False, repr=False)

    @property
    def being_clicked(self) -> bool:
        """Whether the mouse is held down on the button."""
        return self._being_clicked

    def is_pressed(self) -> bool:
        """Return whether a toggle button is currently on."""
        return self.toggle_mode and self._pressed

    def set_toggle(self, value: bool) -> None:
        """Switch a toggle button on or off; plain buttons ignore this."""
        if self.toggle_mode:
            self._pressed = value

    def update(self, hovered: bool, mouse_down: bool, disabled: bool) -> bool:
        """Advance one frame of mouse input; return True if it was clicked.

        A click fires when the left button is released after being held
        down over the button.
        """
        if disabled:
            self._being_clicked = False
            return False
        if hovered and mouse_down:
            self._being_clicked = True
        elif self._being_clicked and not mouse_down:
            self._being_clicked = False
            if self.toggle_mode:
                self._pressed = not self._pressed
            self.on_click()
            return True
        else:
            self._being_clicked = False
        return False


@dataclass
class TextInput:
    """A single-line text field with a cursor.

    Number inputs accept only digits and never a leading zero.
    """

    rect: Rect = field(default_factory=Rect)
    label: str = ""
    number_input: bool = False
    focused: bool = False
    _chars: list[str] = field(default_factory=list, init=False, repr=False)
    _cursor: int = field(default=0, init=False, repr=False)
    _blink_time: float = field(default=0.0, init=False, repr=False)

    @property
    def cursor(self) -> int:
        """Position of the cursor, counted in characters."""
        return self._cursor

    def text(self) -> str:
        """Return the text typed so far."""
        return "".join(self._chars)

    def set_text(self, text: str) -> None:
        """Replace the text; the cursor is kept within the new text."""
        self._chars = list(text)
        self._cursor = min(self._cursor, len(self._chars))

    def type_char(self, char: str) -> bool:
        """Insert a character at the cursor; return whether it was taken."""
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        if self.number_input and not "0" <= char <= "9":
            return False
        if self.number_input and char == "0" and self._cursor == 0:
            return False
        if len(self._chars) >= INPUT_MAX_LENGTH:
            return False
        self._chars.insert(self._cursor, char)
        self._cursor += 1
        return True

    def erase_back(self) -> None:
        """Delete the character before the cursor."""
        if self._cursor > 0:
            del self._chars[self._cursor - 1]
            self._cursor -= 1
            self._blink_time = INPUT_BLINK_TIME

    def move_left(self) -> None:
        """Move the cursor one character left."""
        if self._cursor > 0:
            self._cursor -= 1
            self._blink_time = INPUT_BLINK_TIME

    def move_right(self) -> None:
        """Move the cursor one character right."""
        if self._cursor < len(self._chars):
            self._cursor += 1
            self._blink_time = INPUT_BLINK_TIME

    def move_home(self) -> None:
        """Move the cursor to the start of the text."""
        self._cursor = 0

    def move_end(self) -> None:
        """Move the cursor to the end of the text."""
        self._cursor = len(self._chars)


@dataclass
class Popup:
    """A modal message of two lines, with an ok or a yes/no choice."""

    line_1: str = ""
    line_2: str = ""
    confirm_button: bool = False
    on_confirm: Callable[[], None] = _do_nothing

    @property
    def button_labels(self) -> tuple[str, ...]:
        """Labels of the buttons the popup shows."""
        return ("yes", "no") if self.confirm_button else ("ok",)


class PopupManager:
    """Keeps the popup on screen; changes take effect on the next tick."""

    def __init__(self) -> None:
        self._opened: Optional[Popup] = None
        self._next: Optional[Popup] = None

    @property
    def current(self) -> Optional[Popup]:
        """The popup shown this frame, if any."""
        return self._opened

    def open(self, popup: Popup) -> None:
        """Show a popup from the next tick on."""
        self._next = popup

    def close(self) -> None:
        """Hide the popup from the next tick on."""
        self._next = None

    def is_open(self) -> bool:
        """Return whether a popup is shown this frame."""
        return self._opened is not None

    def tick(self) -> Optional[Popup]:
        """Apply pending open or close requests and return the shown popup."""
        self._opened = self._next
        return self._opened

    def confirm(self) -> bool:
        """Press the yes button of the shown popup; return whether it ran."""
        popup = self._opened
        if popup is None or not popup.confirm_button:
            return False
        popup.on_confirm()
        return True