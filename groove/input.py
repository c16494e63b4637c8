"""Keyboard and mouse state gathered from window events."""

from __future__ import annotations

from typing import Tuple


class Input:
    """Tracks pressed keys and buttons and the cursor position of one window.

    Cursor coordinates are kept with the origin at the top-left corner, so a
    cursor moving up gives a positive vertical delta.
    """

    def __init__(self, window=None) -> None:
        self._window = window
        self._keys: set = set()
        self._buttons: set = set()
        self._x = 0.0
        self._y = 0.0
        self._last_x = 0.0
        self._last_y = 0.0
        self._first_mouse = True
        if window is not None and hasattr(window, "push_handlers"):
            window.push_handlers(self)

    def _to_top_left(self, y: float) -> float:
        height = getattr(self._window, "height", None)
        return float(height) - y if height is not None else float(y)

    def _move_to(self, x: float, y: float) -> None:
        self._x = float(x)
        self._y = self._to_top_left(y)

    def is_key_pressed(self, key: int) -> bool:
        return key in self._keys

    def is_mouse_button_pressed(self, button: int) -> bool:
        return button in self._buttons

    def mouse_position(self) -> Tuple[float, float]:
        """Cursor position in pixels from the top-left corner."""
        return self._x, self._y

    def mouse_delta(self) -> Tuple[float, float]:
        """Cursor movement since the previous call; the first call gives zero."""
        if self._first_mouse:
            self._last_x, self._last_y = self._x, self._y
            self._first_mouse = False
        dx = self._x - self._last_x
        dy = self._last_y - self._y
        self._last_x, self._last_y = self._x, self._y
        return dx, dy

    def on_key_press(self, symbol, modifiers) -> None:
        self._keys.add(symbol)

    def on_key_release(self, symbol, modifiers) -> None:
        self._keys.discard(symbol)

    def on_mouse_press(self, x, y, button, modifiers) -> None:
        self._move_to(x, y)
        self._buttons.add(button)

    def on_mouse_release(self, x, y, button, modifiers) -> None:
        self._move_to(x, y)
        self._buttons.discard(button)

    def on_mouse_motion(self, x, y, dx, dy) -> None:
        self._move_to(x, y)

    def on_mouse_drag(self, x, y, dx, dy, buttons, modifiers) -> None:
        self._move_to(x, y)