import pytest

from terra.events import (
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
from terra.keycodes import Key, MouseButton
from terra.window import (
    Action,
    HeadlessWindow,
    Window,
    WindowProps,
    create_window,
)


@pytest.fixture
def window_and_events():
    window = HeadlessWindow(WindowProps("Test", 640, 480))
    events = []
    window.set_event_callback(events.append)
    return window, events


def test_default_props():
    props = WindowProps()
    assert (props.title, props.width, props.height) == ("Terra Engine", 900, 900)


def test_create_window_uses_props():
    window = create_window(WindowProps("Game", 320, 200))
    assert (window.title, window.width, window.height) == ("Game", 320, 200)


def test_window_is_abstract():
    with pytest.raises(TypeError):
        Window()


def test_vsync_enabled_by_default_and_toggles():
    window = HeadlessWindow()
    assert window.is_vsync() is True
    window.set_vsync(False)
    assert window.is_vsync() is False


def test_framebuffer_scales_with_content_scale():
    window = HeadlessWindow(WindowProps("x", 100, 50), content_scale=2.0)
    assert window.framebuffer_size() == (2 * window.width, 2 * window.height)


def test_invalid_content_scale():
    with pytest.raises(ValueError):
        HeadlessWindow(content_scale=0)


def test_resize_updates_size_and_emits(window_and_events):
    window, events = window_and_events
    window.handle_resize(1024, 768)
    assert (window.width, window.height) == (1024, 768)
    assert events == [WindowResizeEvent(1024, 768)]


def test_close_emits(window_and_events):
    window, events = window_and_events
    window.handle_close()
    assert len(events) == 1
    assert isinstance(events[0], WindowCloseEvent)


def test_key_actions(window_and_events):
    window, events = window_and_events
    window.handle_key(Key.A, Action.PRESS)
    window.handle_key(Key.A, Action.REPEAT)
    window.handle_key(Key.A, Action.RELEASE)
    assert events == [
        KeyPressedEvent(Key.A, 0),
        KeyPressedEvent(Key.A, 1),
        KeyReleasedEvent(Key.A),
    ]
    assert window.key_state(Key.A) is Action.RELEASE


def test_key_state_tracks_last_action(window_and_events):
    window, _ = window_and_events
    assert window.key_state(Key.W) is Action.RELEASE
    window.handle_key(Key.W, Action.PRESS)
    assert window.key_state(Key.W) is Action.PRESS


def test_char_emits_typed(window_and_events):
    window, events = window_and_events
    window.handle_char(ord("q"))
    assert events == [KeyTypedEvent(ord("q"))]


def test_mouse_buttons(window_and_events):
    window, events = window_and_events
    window.handle_mouse_button(MouseButton.LEFT, Action.PRESS)
    assert window.mouse_button_state(MouseButton.LEFT) is Action.PRESS
    window.handle_mouse_button(MouseButton.LEFT, Action.RELEASE)
    assert events == [
        MouseButtonPressedEvent(MouseButton.LEFT),
        MouseButtonReleasedEvent(MouseButton.LEFT),
    ]


def test_mouse_repeat_is_ignored(window_and_events):
    window, events = window_and_events
    window.handle_mouse_button(MouseButton.RIGHT, Action.REPEAT)
    assert events == []
    assert window.mouse_button_state(MouseButton.RIGHT) is Action.RELEASE


def test_scroll_and_cursor(window_and_events):
    window, events = window_and_events
    window.handle_scroll(0.5, -1.0)
    window.handle_cursor_pos(10, 20)
    assert events == [MouseScrolledEvent(0.5, -1.0), MouseMovedEvent(10.0, 20.0)]
    assert window.mouse_position() == (10.0, 20.0)


def test_event_without_callback_raises():
    window = HeadlessWindow()
    with pytest.raises(RuntimeError):
        window.handle_close()


def test_update_after_shutdown_raises():
    with HeadlessWindow() as window:
        window.on_update()
        assert window.poll_count == 1
    assert window.is_open is False
    with pytest.raises(RuntimeError):
        window.on_update()