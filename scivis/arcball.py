"""Arcball rotation control that maps window positions onto a sphere."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Quaternion:
    """A quaternion with vector part (x, y, z) and scalar part w."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0


def _cross(a, b):
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


class ArcBall:
    """Turns mouse drags in a window into rotation quaternions."""

    def __init__(self, win_dim: Sequence[int]) -> None:
        self.start_drag: tuple[float, float, float] = (0.0, 0.0, 0.0)
        self.win_dim: tuple[int, int] = (int(win_dim[0]), int(win_dim[1]))
        self.radius: float = 1.0

    def set_window_size(self, win_dim: Sequence[int]) -> None:
        self.win_dim = (int(win_dim[0]), int(win_dim[1]))

    def set_radius(self, radius: float) -> None:
        self.radius = float(radius)

    def click(self, position: Sequence[int]) -> None:
        """Start a drag at a window position."""
        self.start_drag = self.map_to_sphere(position)

    def drag(self, position: Sequence[int]) -> Quaternion:
        """Rotation from the drag start to ``position``; zero if too small."""
        current = self.map_to_sphere(position)
        axis = _cross(self.start_drag, current)
        dot = sum(s * c for s, c in zip(self.start_drag, current))
        if math.hypot(*axis) > 1.0e-5:
            return Quaternion(*axis, dot)
        return Quaternion()

    def map_to_sphere(self, position: Sequence[int]) -> tuple[float, float, float]:
        """Map a window position to a point on or inside the arcball sphere."""
        px, py = position[0], position[1]
        x = -((2.0 * px / float(self.win_dim[0] - 1)) - 1.0)
        y = (2.0 * py / float(self.win_dim[1] - 1)) - 1.0
        length = math.hypot(x, y)
        if length > self.radius:
            norm = self.radius / length
            return x * norm, y * norm, 0.0
        return x, y, length - self.radius