"""Layers and the ordered stack holding them."""

from __future__ import annotations

from typing import Iterator

from .events import Event
from .timing import Timestep


class Layer:
    """A slice of application behaviour; override the hooks needed.

    The default hooks keep simple bookkeeping: whether the layer is
    attached and how many updates, physics steps, UI renders and events
    it has seen.
    """

    def __init__(self, name: str = "Layer") -> None:
        self.name = name
        self.attached = False
        self.update_count = 0
        self.physics_step_count = 0
        self.ui_render_count = 0
        self.event_count = 0
        self.last_timestep: Timestep | None = None

    def on_attach(self) -> None:
        self.attached = True

    def on_detach(self) -> None:
        self.attached = False

    def on_update(self, ts: Timestep) -> None:
        self.update_count += 1
        self.last_timestep = ts

    def on_physics_update(self, fixed_ts: Timestep) -> None:
        self.physics_step_count += 1

    def on_ui_render(self) -> None:
        self.ui_render_count += 1

    def on_event(self, event: Event) -> None:
        self.event_count += 1

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class LayerStack:
    """Layers come first in push order, overlays always after them."""

    def __init__(self) -> None:
        self._layers: list[Layer] = []
        self._insert_index = 0

    def push_layer(self, layer: Layer) -> None:
        self._layers.insert(self._insert_index, layer)
        self._insert_index += 1

    def push_overlay(self, overlay: Layer) -> None:
        self._layers.append(overlay)

    def _find(self, layer: Layer) -> int | None:
        return next((i for i, item in enumerate(self._layers) if item is layer), None)

    def pop_layer(self, layer: Layer) -> None:
        index = self._find(layer)
        if index is not None:
            del self._layers[index]
            self._insert_index -= 1
            layer.on_detach()

    def pop_overlay(self, overlay: Layer) -> None:
        index = self._find(overlay)
        if index is not None:
            del self._layers[index]
            overlay.on_detach()

    def clear(self) -> None:
        """Detach and drop every layer, front to back."""
        layers, self._layers = self._layers, []
        self._insert_index = 0
        for layer in layers:
            layer.on_detach()

    def __enter__(self) -> "LayerStack":
        return self

    def __exit__(self, *exc_info) -> None:
        self.clear()

    def __iter__(self) -> Iterator[Layer]:
        return iter(list(self._layers))

    def __reversed__(self) -> Iterator[Layer]:
        return reversed(list(self._layers))

    def __len__(self) -> int:
        return len(self._layers)

    def __contains__(self, layer: object) -> bool:
        return any(item is layer for item in self._layers)