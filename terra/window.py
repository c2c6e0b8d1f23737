"""Desktop window interface and a headless implementation of it."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Optional

from .events import (
    Event,
    KeyPressedEvent,
    KeyReleasedEvent,
    KeyTypedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    WindowCloseEvent,
    WindowResizeEvent,
)
from .logger import get_core_logger

EventCallback = Callable[[Event], None]


class Action(IntEnum):
    """State reported for a key or mouse button (values match GLFW)."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


@dataclass
class WindowProps:
    """Initial title and size of a window."""

    title: str = "Terra Engine"
    width: int = 900
    height: int = 900


class Window(ABC):
    """A desktop window that reports its events through a callback."""

    def __init__(self) -> None:
        self._vsync = False

    @property
    @abstractmethod
    def width(self) -> int:
        """Window width in screen units."""

    @property
    @abstractmethod
    def height(self) -> int:
        """Window height in screen units."""

    @abstractmethod
    def on_update(self) -> None:
        """Process pending platform events."""

    @abstractmethod
    def framebuffer_size(self) -> tuple[int, int]:
        """Size of the drawable area in pixels."""

    @abstractmethod
    def mouse_position(self) -> tuple[float, float]:
        """Cursor position relative to the window."""

    @abstractmethod
    def set_event_callback(self, callback: EventCallback) -> None:
        """Install the function that receives every window event."""

    def set_vsync(self, enabled: bool) -> None:
        self._vsync = bool(enabled)

    def is_vsync(self) -> bool:
        return self._vsync


class HeadlessWindow(Window):
    """A window without a display; platform input is fed through ``handle_*``."""

    def __init__(self, props: Optional[WindowProps] = None, *, content_scale: float = 1.0) -> None:
        super().__init__()
        if content_scale <= 0:
            raise ValueError("content_scale must be positive")
        props = props if props is not None else WindowProps()
        self.title = props.title
        self._width = props.width
        self._height = props.height
        self._scale = content_scale
        self._callback: Optional[EventCallback] = None
        self._keys: dict[int, Action] = {}
        self._buttons: dict[int, Action] = {}
        self._cursor = (0.0, 0.0)
        self._open = True
        self.poll_count = 0
        get_core_logger().info(
            "Creating window %s (%d, %d)", props.title, props.width, props.height
        )
        self.set_vsync(True)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def is_open(self) -> bool:
        return self._open

    def on_update(self) -> None:
        if not self._open:
            raise RuntimeError("window has been shut down")
        self.poll_count += 1

    def framebuffer_size(self) -> tuple[int, int]:
        return round(self._width * self._scale), round(self._height * self._scale)

    def mouse_position(self) -> tuple[float, float]:
        return self._cursor

    def set_event_callback(self, callback: EventCallback) -> None:
        self._callback = callback

    def key_state(self, key: int) -> Action:
        return self._keys.get(int(key), Action.RELEASE)

    def mouse_button_state(self, button: int) -> Action:
        return self._buttons.get(int(button), Action.RELEASE)

    def _emit(self, event: Event) -> None:
        if self._callback is None:
            raise RuntimeError("no event callback set on the window")
        self._callback(event)

    def handle_resize(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self._emit(WindowResizeEvent(width, height))

    def handle_close(self) -> None:
        self._emit(WindowCloseEvent())

    def handle_key(self, key: int, action: int) -> None:
        action = Action(action)
        self._keys[int(key)] = action
        if action is Action.PRESS:
            self._emit(KeyPressedEvent(key, 0))
        elif action is Action.RELEASE:
            self._emit(KeyReleasedEvent(key))
        else:
            self._emit(KeyPressedEvent(key, 1))

    def handle_char(self, codepoint: int) -> None:
        self._emit(KeyTypedEvent(codepoint))

    def handle_mouse_button(self, button: int, action: int) -> None:
        action = Action(action)
        if action is Action.PRESS:
            self._buttons[int(button)] = action
            self._emit(MouseButtonPressedEvent(button))
        elif action is Action.RELEASE:
            self._buttons[int(button)] = action
            self._emit(MouseButtonReleasedEvent(button))

    def handle_scroll(self, x_offset: float, y_offset: float) -> None:
        self._emit(MouseScrolledEvent(float(x_offset), float(y_offset)))

    def handle_cursor_pos(self, x: float, y: float) -> None:
        self._cursor = (float(x), float(y))
        self._emit(MouseMovedEvent(float(x), float(y)))

    def shutdown(self) -> None:
        """Close the window; further updates raise."""
        self._open = False

    def __enter__(self) -> "HeadlessWindow":
        return self

    def __exit__(self, *exc_info) -> None:
        self.shutdown()


def create_window(props: Optional[WindowProps] = None) -> Window:
    """Create the window implementation available on this platform."""
    return HeadlessWindow(props)