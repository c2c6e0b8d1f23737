import pytest

from terra.input import Input
from terra.keycodes import Key, MouseButton
from terra.window import Action, HeadlessWindow


@pytest.fixture
def window():
    w = HeadlessWindow()
    w.set_event_callback(lambda event: None)
    return w


def test_key_not_pressed_initially(window):
    assert Input(window).is_key_pressed(Key.SPACE) is False


def test_key_pressed_and_repeat(window):
    inp = Input(window)
    window.handle_key(Key.SPACE, Action.PRESS)
    assert inp.is_key_pressed(Key.SPACE) is True
    window.handle_key(Key.SPACE, Action.REPEAT)
    assert inp.is_key_pressed(Key.SPACE) is True
    window.handle_key(Key.SPACE, Action.RELEASE)
    assert inp.is_key_pressed(Key.SPACE) is False


def test_mouse_button(window):
    inp = Input(window)
    window.handle_mouse_button(MouseButton.MIDDLE, Action.PRESS)
    assert inp.is_mouse_button_pressed(MouseButton.MIDDLE) is True
    assert inp.is_mouse_button_pressed(MouseButton.LEFT) is False
    window.handle_mouse_button(MouseButton.MIDDLE, Action.RELEASE)
    assert inp.is_mouse_button_pressed(MouseButton.MIDDLE) is False


def test_mouse_position(window):
    inp = Input(window)
    window.handle_cursor_pos(12.5, 40.0)
    assert inp.mouse_pos() == (12.5, 40.0)
    assert inp.mouse_x() == 12.5
    assert inp.mouse_y() == 40.0