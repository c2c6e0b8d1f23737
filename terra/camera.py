"""Camera matrices and per-frame renderer statistics."""

from __future__ import annotations

from dataclasses import dataclass

Matrix4 = tuple[tuple[float, float, float, float], ...]


def identity_matrix() -> Matrix4:
    """The 4x4 identity matrix as row tuples."""
    return tuple(
        tuple(1.0 if row == col else 0.0 for col in range(4)) for row in range(4)
    )


class Camera:
    """Holds a projection and a view matrix; both start as identity."""

    def __init__(self) -> None:
        self._projection_matrix: Matrix4 = identity_matrix()
        self._view_matrix: Matrix4 = identity_matrix()

    @property
    def projection_matrix(self) -> Matrix4:
        return self._projection_matrix

    @property
    def view_matrix(self) -> Matrix4:
        return self._view_matrix


@dataclass
class RendererStats:
    draw_calls: int = 0
    mesh_count: int = 0
    vertex_count: int = 0
    index_count: int = 0
    frame_time_ms: float = 0.0
    fps: float = 0.0

    def reset(self) -> None:
        """Zero the per-frame counters; timing figures are kept."""
        self.draw_calls = 0
        self.mesh_count = 0
        self.vertex_count = 0
        self.index_count = 0