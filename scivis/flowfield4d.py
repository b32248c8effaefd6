"""Time-dependent 3D vector fields: a cyclic sequence of grid time steps."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from scivis.flowfield import DemoType, Vec3, _demo_vectors, _linear, _trilinear


class Flowfield4D:
    """Vector grids for several time steps; time indices wrap around."""

    def __init__(self, size_x: int, size_y: int, size_z: int, timesteps: int) -> None:
        if timesteps < 1:
            raise ValueError(f"Invalid timesteps {timesteps}")
        self.size_x = int(size_x)
        self.size_y = int(size_y)
        self.size_z = int(size_z)
        count = self.size_x * self.size_y * self.size_z
        self.data = np.zeros((int(timesteps), count, 3), dtype=np.float64)

    @property
    def sizes(self) -> tuple[int, int, int]:
        return self.size_x, self.size_y, self.size_z

    @property
    def timesteps(self) -> int:
        return len(self.data)

    def _interpolate_step(self, pos: Sequence[float], step: int) -> np.ndarray:
        return _trilinear(self.data[step % len(self.data)], self.sizes, pos)

    def interpolate(self, pos: Sequence[float], time: float) -> Vec3:
        """Vector at ``pos`` and ``time``, linear between neighbouring steps."""
        time = float(time)
        floor_time = math.floor(time)
        ceil_time = math.ceil(time)
        if floor_time < 0:
            raise IndexError(f"time {time} must not be negative")
        low = self._interpolate_step(pos, floor_time)
        high = self._interpolate_step(pos, ceil_time)
        x, y, z = _linear(low, high, time - floor_time)
        return float(x), float(y), float(z)

    @classmethod
    def gen_demo(cls, size: int, demo_types: Sequence[DemoType]) -> "Flowfield4D":
        """A two-step size^3 field built from the first two demo types."""
        if len(demo_types) < 2:
            raise ValueError("two demo types are needed, one per time step")
        field = cls(size, size, size, 2)
        for step in range(2):
            field.data[step] = _demo_vectors(size, demo_types[step])
        return field