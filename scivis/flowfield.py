"""Steady 3D vector fields on a regular grid with trilinear interpolation."""

from __future__ import annotations

import math
import re
from collections.abc import Iterator, Sequence
from enum import Enum
from pathlib import Path

import numpy as np

Vec3 = tuple[float, float, float]

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


class DemoType(Enum):
    """Analytic demo fields."""

    DRAIN = 0
    SADDLE = 1
    CRITICAL = 2
    SATTLE = 1


def _demo_vectors(size: int, demo_type: DemoType) -> np.ndarray:
    """Vectors of a demo field on a size^3 grid, x varying fastest."""
    local = np.arange(size, dtype=np.float64) / size if size else np.zeros(0)
    lz, ly, lx = (a.ravel() for a in np.meshgrid(local, local, local, indexing="ij"))
    if demo_type is DemoType.DRAIN:
        components = (
            (-ly + 0.5) + (0.5 - lx) / 10.0,
            (lx - 0.5) + (0.5 - ly) / 10.0,
            -lz / 10.0,
        )
    elif demo_type is DemoType.SADDLE:
        components = (0.5 - lx, ly - 0.5, 0.5 - lz)
    elif demo_type is DemoType.CRITICAL:
        components = (
            (lx - 0.1) * (ly - 0.3) * (lx - 0.8),
            (ly - 0.7) * (lz - 0.2) * (lx - 0.3),
            (lz - 0.9) * (lz - 0.6) * (lx - 0.5),
        )
    else:
        raise ValueError(f"unknown demo type {demo_type!r}")
    return np.stack(components, axis=-1).reshape(-1, 3)


def _linear(a: np.ndarray, b: np.ndarray, alpha: float) -> np.ndarray:
    return a * (1.0 - alpha) + b * alpha


def _trilinear(data: np.ndarray, sizes: Sequence[int], pos: Sequence[float]) -> np.ndarray:
    """Trilinear lookup of ``pos`` (unit cube coordinates) in a flat vector grid."""
    sx, sy, _ = sizes
    scaled = [float(p) * (s - 1) for p, s in zip(pos, sizes)]
    fx, fy, fz = (math.floor(c) for c in scaled)
    cx, cy, cz = (math.ceil(c) for c in scaled)

    def at(x: int, y: int, z: int) -> np.ndarray:
        index = x + y * sy + z * sx * sy
        if min(x, y, z) < 0 or not 0 <= index < len(data):
            raise IndexError(f"position {tuple(pos)} lies outside the field")
        return data[index]

    alpha = scaled[0] - fx
    beta = scaled[1] - fy
    gamma = scaled[2] - fz
    near = _linear(
        _linear(at(fx, fy, fz), at(cx, fy, fz), alpha),
        _linear(at(fx, cy, fz), at(cx, cy, fz), alpha),
        beta,
    )
    far = _linear(
        _linear(at(fx, fy, cz), at(cx, fy, cz), alpha),
        _linear(at(fx, cy, cz), at(cx, cy, cz), alpha),
        beta,
    )
    return _linear(near, far, gamma)


def _parse_int(token: str) -> int:
    match = _INT_PREFIX.match(token)
    if match is None:
        raise ValueError(f"invalid integer {token!r}")
    return int(match.group(1))


def _parse_float(token: str) -> float:
    match = _FLOAT_PREFIX.match(token)
    if match is None:
        raise ValueError(f"invalid number {token!r}")
    return float(match.group(1))


class Flowfield:
    """A size_x x size_y x size_z grid of 3D vectors."""

    def __init__(self, size_x: int, size_y: int, size_z: int, data=None) -> None:
        self.size_x = int(size_x)
        self.size_y = int(size_y)
        self.size_z = int(size_z)
        count = self.size_x * self.size_y * self.size_z
        if data is None:
            self.data = np.zeros((count, 3), dtype=np.float64)
        else:
            self.data = np.asarray(data, dtype=np.float64).reshape(-1, 3)
            if len(self.data) != count:
                raise ValueError(f"expected {count} vectors, got {len(self.data)}")

    @property
    def sizes(self) -> tuple[int, int, int]:
        return self.size_x, self.size_y, self.size_z

    def interpolate(self, pos: Sequence[float]) -> Vec3:
        """Trilinearly interpolated vector at ``pos`` in unit cube coordinates."""
        x, y, z = _trilinear(self.data, self.sizes, pos)
        return float(x), float(y), float(z)

    @classmethod
    def gen_demo(cls, size: int, demo_type: DemoType) -> "Flowfield":
        """A size^3 analytic demo field."""
        return cls(size, size, size, _demo_vectors(size, demo_type))

    @classmethod
    def from_file(cls, filename: str | Path) -> "Flowfield":
        """Read a comma separated field file.

        The file holds the dimension count, the sizes, the number of time
        steps and then the vector components.
        """
        try:
            with open(filename, encoding="latin-1") as handle:
                text = handle.read()
        except OSError as exc:
            raise OSError(f"Can't open file {filename}") from exc

        tokens: Iterator[str] = iter(text.split(","))

        def next_token() -> str:
            return next(tokens, "")

        dims = _parse_int(next_token())
        if dims < 1 or dims > 3:
            raise ValueError(f"Invalid dimension {dims}")

        size_x = _parse_int(next_token())
        size_y = _parse_int(next_token()) if dims == 2 else 1
        size_z = _parse_int(next_token()) if dims == 3 else 1
        if min(size_x, size_y, size_z) < 0:
            raise ValueError(f"Invalid size {size_x}x{size_y}x{size_z}")

        timesteps = _parse_int(next_token())
        if timesteps < 1:
            raise ValueError(f"Invalid timesteps {timesteps}")

        vectors = []
        for _ in range(size_x * size_y * size_z):
            x = _parse_float(next_token())
            y = _parse_float(next_token()) if dims == 2 else 0.0
            z = _parse_float(next_token()) if dims == 3 else 0.0
            vectors.append((x, y, z))
        data = np.array(vectors, dtype=np.float64).reshape(-1, 3)
        return cls(size_x, size_y, size_z, data)