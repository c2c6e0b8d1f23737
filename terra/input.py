"""Polling of keyboard and mouse state from a window."""

from __future__ import annotations

from typing import Protocol

from .window import Action


class _InputSource(Protocol):
    def key_state(self, key: int) -> Action: ...

    def mouse_button_state(self, button: int) -> Action: ...

    def mouse_position(self) -> tuple[float, float]: ...


class Input:
    """Answers questions about the current input state of a window."""

    def __init__(self, window: _InputSource) -> None:
        self.window = window

    def is_key_pressed(self, key: int) -> bool:
        return self.window.key_state(key) in (Action.PRESS, Action.REPEAT)

    def is_mouse_button_pressed(self, button: int) -> bool:
        return self.window.mouse_button_state(button) is Action.PRESS

    def mouse_pos(self) -> tuple[float, float]:
        x, y = self.window.mouse_position()
        return float(x), float(y)

    def mouse_x(self) -> float:
        return self.mouse_pos()[0]

    def mouse_y(self) -> float:
        return self.mouse_pos()[1]