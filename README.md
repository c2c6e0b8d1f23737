# terra

The core of a small layered game engine. It is made of these modules:

- `terra.events`: window, application, keyboard and mouse events, `EventCategory` flags and an `EventDispatcher`.
- `terra.keycodes`: the `Key` and `MouseButton` codes. Their values match GLFW.
- `terra.layers`: `Layer` and `LayerStack`. Layers sit below overlays in the stack.
- `terra.timing`: `Timer` and `Timestep`. A `Timestep` is a float measured in seconds.
- `terra.logger`: the `TERRA`, `APP` and `TERRA_F` loggers, `init_logging` and `core_assert`.
- `terra.window`: the abstract `Window`, a `HeadlessWindow` and `create_window`.
- `terra.input`: `Input`, which polls key, button and cursor state from a window.
- `terra.descriptors`: dataclasses and enums that describe buffers, pipelines, render passes and material parameters. `parameter_size` gives the byte size of a parameter type.
- `terra.camera`: `Camera`, which holds identity projection and view matrices, and `RendererStats`.
- `terra.application`: `Application`, which runs the frame loop, and the `main` command.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

To add behaviour, subclass `Layer`. Push the layer onto an `Application`, then run the loop:

```python
from terra.application import Application
from terra.layers import Layer
from terra.events import EventDispatcher, KeyPressedEvent
from terra.keycodes import Key


class Game(Layer):
    def on_update(self, ts):
        print(f"frame took {ts.milliseconds():.2f} ms")

    def on_event(self, event):
        EventDispatcher(event).dispatch(KeyPressedEvent, self._on_key)

    def _on_key(self, event):
        return event.key_code == Key.ESCAPE


with Application("Demo") as app:
    app.push_layer(Game("game"))
    app.run(max_frames=10)
```

Each frame the loop does the following, in order:

1. It calls `on_physics_update` at a fixed step of 1/60 s, as many times as the elapsed time allows.
2. It calls `on_update` with the frame's `Timestep`. This step is skipped while the window is minimised.
3. It calls `on_ui_render`.
4. It polls the window.

Events travel from the top of the stack down, so overlays see them before layers. An event stops travelling once a handler marks it as handled. A `WindowCloseEvent` ends the loop. A `WindowResizeEvent` with a zero width or height marks the application as minimised.

The default window is a `HeadlessWindow`. You feed it platform input through its `handle_*` methods, for example `handle_key(Key.A, Action.PRESS)` or `handle_cursor_pos(x, y)`. The window turns that input into events. `Input(window)` answers state queries such as `is_key_pressed` and `mouse_pos`.

`Application` also accepts two optional objects:

- A `renderer`. It receives `begin_frame`, `end_frame`, `begin_ui_pass`, `end_ui_pass`, `on_resize(width, height)` and `shutdown` calls.
- A `context`. It is initialised with the window. On resize it is asked to `configure_surface(preferred_format)` and to report `framebuffer_size()`.

## Command line

```
terra [--name NAME] [--frames N] [--log-file PATH]
```

This command sets up logging, which writes to `terra.log` by default and truncates the file. It then starts an application on a headless window, runs `--frames` frames (default 1) and shuts the application down.

## What it does not do

The package does not open an operating-system window. It does not talk to a GPU, create devices or command queues, or draw anything.

The descriptors in `terra.descriptors` only describe work to be done. The renderer and context slots of `Application` must be filled by your own objects.