"""Event types, categories, concrete events and the dispatcher."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntFlag
from typing import Callable, ClassVar


class EventType(Enum):
    """Kind of an event."""

    NONE = 0
    WINDOW_CLOSE = 1
    WINDOW_RESIZE = 2
    WINDOW_FOCUS = 3
    WINDOW_LOST_FOCUS = 4
    WINDOW_MOVED = 5
    APP_TICK = 6
    APP_UPDATE = 7
    APP_RENDER = 8
    KEY_PRESSED = 9
    KEY_RELEASED = 10
    KEY_TYPED = 11
    MOUSE_BUTTON_PRESSED = 12
    MOUSE_BUTTON_RELEASED = 13
    MOUSE_MOVED = 14
    MOUSE_SCROLLED = 15

    @property
    def title(self) -> str:
        """CamelCase name, e.g. ``WindowResize``."""
        return "".join(part.capitalize() for part in self.name.split("_"))


class EventCategory(IntFlag):
    """Bit flags grouping events."""

    NONE = 0
    APPLICATION = 1 << 0
    INPUT = 1 << 1
    KEYBOARD = 1 << 2
    MOUSE = 1 << 3
    MOUSE_BUTTON = 1 << 4


class Event:
    """Base class of all events."""

    event_type: ClassVar[EventType] = EventType.NONE
    category: ClassVar[EventCategory] = EventCategory.NONE
    handled: bool = False

    def __init_subclass__(
        cls,
        *,
        event_type: EventType | None = None,
        category: EventCategory | None = None,
        **kwargs,
    ) -> None:
        super().__init_subclass__(**kwargs)
        if event_type is not None:
            cls.event_type = event_type
        if category is not None:
            cls.category = category

    @property
    def name(self) -> str:
        return self.event_type.title

    def is_in_category(self, category: EventCategory) -> bool:
        return bool(self.category & category)

    def __str__(self) -> str:
        return self.name


class EventDispatcher:
    """Routes an event to a handler when its type matches."""

    def __init__(self, event: Event) -> None:
        self.event = event

    def dispatch(self, event_class: type[Event], func: Callable[[Event], bool]) -> bool:
        """Call ``func`` if the event is of ``event_class``'s type.

        The handler's result is OR-ed into ``event.handled``. Returns whether
        the handler was called.
        """
        if event_class.event_type is EventType.NONE:
            return False
        if self.event.event_type is event_class.event_type:
            self.event.handled = self.event.handled or bool(func(self.event))
            return True
        return False


@dataclass
class WindowResizeEvent(
    Event, event_type=EventType.WINDOW_RESIZE, category=EventCategory.APPLICATION
):
    width: int
    height: int

    def __str__(self) -> str:
        return f"WindowResizeEvent: {self.width}, {self.height}"


class WindowCloseEvent(
    Event, event_type=EventType.WINDOW_CLOSE, category=EventCategory.APPLICATION
):
    pass


class AppTickEvent(Event, event_type=EventType.APP_TICK, category=EventCategory.APPLICATION):
    pass


class AppUpdateEvent(
    Event, event_type=EventType.APP_UPDATE, category=EventCategory.APPLICATION
):
    pass


class AppRenderEvent(
    Event, event_type=EventType.APP_RENDER, category=EventCategory.APPLICATION
):
    pass


@dataclass
class KeyEvent(Event, category=EventCategory.KEYBOARD | EventCategory.INPUT):
    key_code: int


@dataclass
class KeyPressedEvent(KeyEvent, event_type=EventType.KEY_PRESSED):
    repeat_count: int

    def __str__(self) -> str:
        return f"KeyPressedEvent: {int(self.key_code)} ({self.repeat_count} repeats)"


@dataclass
class KeyReleasedEvent(KeyEvent, event_type=EventType.KEY_RELEASED):
    def __str__(self) -> str:
        return f"KeyReleasedEvent: {int(self.key_code)}"


@dataclass
class KeyTypedEvent(KeyEvent, event_type=EventType.KEY_TYPED):
    def __str__(self) -> str:
        return f"KeyTypedEvent: {int(self.key_code)}"


@dataclass
class MouseMovedEvent(
    Event,
    event_type=EventType.MOUSE_MOVED,
    category=EventCategory.MOUSE | EventCategory.INPUT,
):
    x: float
    y: float

    def __str__(self) -> str:
        return f"MouseMovedEvent: {self.x:g}, {self.y:g}"


@dataclass
class MouseScrolledEvent(
    Event,
    event_type=EventType.MOUSE_SCROLLED,
    category=EventCategory.MOUSE | EventCategory.INPUT,
):
    x_offset: float
    y_offset: float

    def __str__(self) -> str:
        return f"MouseScrolledEvent: {self.x_offset:g}, {self.y_offset:g}"


@dataclass
class MouseButtonEvent(
    Event,
    category=EventCategory.MOUSE | EventCategory.INPUT | EventCategory.MOUSE_BUTTON,
):
    button: int


@dataclass
class MouseButtonPressedEvent(MouseButtonEvent, event_type=EventType.MOUSE_BUTTON_PRESSED):
    def __str__(self) -> str:
        return f"MouseButtonPressedEvent: {int(self.button)}"


@dataclass
class MouseButtonReleasedEvent(
    MouseButtonEvent, event_type=EventType.MOUSE_BUTTON_RELEASED
):
    def __str__(self) -> str:
        return f"MouseButtonReleasedEvent: {int(self.button)}"