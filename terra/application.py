"""The application: owns the window, runs the frame loop and routes events."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Iterator, Optional

from .events import Event, EventDispatcher, WindowCloseEvent, WindowResizeEvent
from .layers import Layer, LayerStack
from .logger import core_assert, get_core_logger, init_logging
from .timing import Timer, Timestep
from .window import WindowProps, create_window

FIXED_TIMESTEP = 1.0 / 60.0


@dataclass(frozen=True)
class CommandLineArgs:
    """Arguments the program was started with."""

    args: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))

    @property
    def count(self) -> int:
        return len(self.args)

    def __getitem__(self, index: int) -> str:
        core_assert(index < self.count, "Index out of bounds for CommandLineArgs")
        return self.args[index]

    def __len__(self) -> int:
        return len(self.args)

    def __iter__(self) -> Iterator[str]:
        return iter(self.args)


class Application:
    """The single running application.

    ``renderer``, if given, receives ``begin_frame``, ``end_frame``,
    ``begin_ui_pass``, ``end_ui_pass``, ``on_resize(width, height)`` and
    ``shutdown`` calls at the matching points of the loop.
    """

    _instance: ClassVar[Optional["Application"]] = None

    def __init__(
        self,
        name: str = "Terra Application",
        args: Optional[CommandLineArgs] = None,
        *,
        window: Any = None,
        context: Any = None,
        renderer: Any = None,
        clock: Callable[[], float] = time.perf_counter,
        ui_enabled: bool = True,
    ) -> None:
        core_assert(Application._instance is None, "Application already exists!")
        Application._instance = self

        self.name = name
        self._args = args if args is not None else CommandLineArgs()
        self._layer_stack = LayerStack()
        self._running = True
        self._minimized = False
        self._last_frame_time = 0.0
        self._clock = clock
        self._ui_enabled = ui_enabled
        self._renderer = renderer
        self._shut_down = False

        get_core_logger().info("Creating window")
        self._window = window if window is not None else create_window(WindowProps(name))
        self._window.set_event_callback(self.on_event)

        self._context = context
        if context is not None:
            context.init(self._window)

    @classmethod
    def get(cls) -> "Application":
        core_assert(Application._instance is not None, "No application exists!")
        return Application._instance

    @property
    def window(self) -> Any:
        return self._window

    @property
    def context(self) -> Any:
        return self._context

    @property
    def command_line_args(self) -> CommandLineArgs:
        return self._args

    @property
    def running(self) -> bool:
        return self._running

    @property
    def minimized(self) -> bool:
        return self._minimized

    @property
    def layers(self) -> list[Layer]:
        return list(self._layer_stack)

    def push_layer(self, layer: Layer) -> None:
        self._layer_stack.push_layer(layer)
        layer.on_attach()

    def push_overlay(self, layer: Layer) -> None:
        self._layer_stack.push_overlay(layer)
        layer.on_attach()

    def on_event(self, event: Event) -> None:
        """Handle window events, then offer the event to layers top-down."""
        dispatcher = EventDispatcher(event)
        dispatcher.dispatch(WindowCloseEvent, self._on_window_close)
        dispatcher.dispatch(WindowResizeEvent, self._on_window_resize)

        for layer in reversed(self._layer_stack):
            if event.handled:
                break
            layer.on_event(event)

    def close(self) -> None:
        self._running = False

    def run(self, max_frames: Optional[int] = None) -> None:
        """Run the frame loop until closed, or for at most ``max_frames`` frames."""
        core_assert(not self._shut_down, "Application has been shut down!")
        timer = Timer(self._clock)
        fixed_dt = Timestep(FIXED_TIMESTEP)
        accumulator = 0.0
        frames = 0

        while self._running and (max_frames is None or frames < max_frames):
            now = timer.elapsed()
            timestep = Timestep(now - self._last_frame_time)
            self._last_frame_time = now

            accumulator += timestep
            while accumulator >= fixed_dt:
                for layer in self._layer_stack:
                    layer.on_physics_update(fixed_dt)
                accumulator -= fixed_dt

            if self._renderer is not None:
                self._renderer.begin_frame()

            if not self._minimized:
                for layer in self._layer_stack:
                    layer.on_update(timestep)

            if self._ui_enabled:
                if self._renderer is not None:
                    self._renderer.begin_ui_pass()
                for layer in self._layer_stack:
                    layer.on_ui_render()
                if self._renderer is not None:
                    self._renderer.end_ui_pass()

            if self._renderer is not None:
                self._renderer.end_frame()

            self._window.on_update()
            frames += 1

    def shutdown(self) -> None:
        """Release the renderer, layers and window; safe to call twice."""
        if self._shut_down:
            return
        self._shut_down = True
        get_core_logger().info("Shutting down Terra Engine...")
        if self._renderer is not None:
            self._renderer.shutdown()
        self._layer_stack.clear()
        window_shutdown = getattr(self._window, "shutdown", None)
        if window_shutdown is not None:
            window_shutdown()
        if Application._instance is self:
            Application._instance = None

    def __enter__(self) -> "Application":
        return self

    def __exit__(self, *exc_info) -> None:
        self.shutdown()

    def _on_window_close(self, event: WindowCloseEvent) -> bool:
        self._running = False
        return True

    def _on_window_resize(self, event: WindowResizeEvent) -> bool:
        if event.width == 0 or event.height == 0:
            self._minimized = True
            return False
        self._minimized = False

        if self._context is not None:
            self._context.configure_surface(self._context.preferred_format)
            size = self._context.framebuffer_size()
        else:
            size = self._window.framebuffer_size()

        if self._renderer is not None:
            self._renderer.on_resize(*size)
        return False


def main(argv: Optional[list[str]] = None) -> int:
    """Start an application, run its frame loop and shut it down."""
    argv = list(sys.argv[1:] if argv is None else argv)
    parser = argparse.ArgumentParser(prog="terra")
    parser.add_argument("--name", default="Terra Application")
    parser.add_argument("--frames", type=int, default=1, help="frames to run")
    parser.add_argument("--log-file", default="terra.log")
    options = parser.parse_args(argv)
    if options.frames < 0:
        parser.error("--frames must not be negative")

    init_logging(options.log_file)
    app = Application(options.name, CommandLineArgs(argv))
    try:
        app.run(max_frames=options.frames)
    finally:
        app.shutdown()
    return 0