"""Regular 3D scalar volumes of 8-bit samples."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


def _zero_scale() -> np.ndarray:
    return np.zeros(3, dtype=np.float64)


def _empty_data() -> np.ndarray:
    return np.zeros(0, dtype=np.uint8)


def _empty_normals() -> np.ndarray:
    return np.zeros((0, 3), dtype=np.float64)


@dataclass(eq=False)
class Volume:
    """A width x height x depth grid of uint8 samples, stored x-fastest."""

    width: int = 0
    height: int = 0
    depth: int = 0
    scale: np.ndarray = field(default_factory=_zero_scale)
    data: np.ndarray = field(default_factory=_empty_data)
    normals: np.ndarray = field(default_factory=_empty_normals)
    max_size: int = 0

    def __post_init__(self) -> None:
        self.scale = np.asarray(self.scale, dtype=np.float64).reshape(3)
        self.data = np.asarray(self.data, dtype=np.uint8).reshape(-1)
        self.normals = np.asarray(self.normals, dtype=np.float64).reshape(-1, 3)

    @property
    def dimensions(self) -> tuple[int, int, int]:
        return self.width, self.height, self.depth

    def normalize_scale(self) -> None:
        """Rescale ``scale`` so the largest normalised extent becomes 1."""
        self.max_size = max(self.width, self.height, self.depth)
        dims = np.array(self.dimensions, dtype=np.float64)
        with np.errstate(divide="ignore", invalid="ignore"):
            extend = self.scale * dims / np.float64(self.max_size)
            self.scale = self.scale / extend.max()

    def _grid(self) -> np.ndarray:
        return self.data.reshape(self.depth, self.height, self.width)

    def _sample(self, u: np.ndarray, v: np.ndarray, w: np.ndarray) -> np.ndarray:
        grid = self._grid().astype(np.float64)
        coords = (u * self.width - 1, v * self.height - 1, w * self.depth - 1)
        sizes = self.dimensions
        floors = [np.floor(c) for c in coords]
        ax, ay, az = (c - f for c, f in zip(coords, floors))

        def index(f: np.ndarray, offset: int, size: int) -> np.ndarray:
            return np.clip(f.astype(np.int64) + offset, 0, size - 1)

        x0, x1 = (index(floors[0], o, sizes[0]) for o in (0, 1))
        y0, y1 = (index(floors[1], o, sizes[1]) for o in (0, 1))
        z0, z1 = (index(floors[2], o, sizes[2]) for o in (0, 1))

        def plane(z: np.ndarray) -> np.ndarray:
            near = grid[z, y0, x0] * (1 - ax) + grid[z, y0, x1] * ax
            far = grid[z, y1, x0] * (1 - ax) + grid[z, y1, x1] * ax
            return near * (1 - ay) + far * ay

        value = plane(z0) * (1 - az) + plane(z1) * az
        return value.astype(np.uint8)

    def resample(self, target_width: int, target_height: int, target_depth: int) -> "Volume":
        """Return a trilinearly resampled copy with the given dimensions."""
        result = Volume(target_width, target_height, target_depth, self.scale.copy())
        result.normalize_scale()
        w, v, u = np.meshgrid(
            np.arange(target_depth, dtype=np.float64) / max(target_depth, 1),
            np.arange(target_height, dtype=np.float64) / max(target_height, 1),
            np.arange(target_width, dtype=np.float64) / max(target_width, 1),
            indexing="ij",
        )
        result.data = self._sample(u.ravel(), v.ravel(), w.ravel())
        return result

    def compute_normals(self) -> None:
        """Compute normalised central-difference gradients for interior voxels."""
        grid = self._grid().astype(np.float64)
        normals = np.zeros((self.data.size, 3), dtype=np.float64)
        if min(self.dimensions) >= 3:
            inner = (slice(1, -1),) * 3
            gradient = np.stack(
                [
                    grid[1:-1, 1:-1, :-2] - grid[1:-1, 1:-1, 2:],
                    grid[1:-1, :-2, 1:-1] - grid[1:-1, 2:, 1:-1],
                    grid[:-2, 1:-1, 1:-1] - grid[2:, 1:-1, 1:-1],
                ],
                axis=-1,
            )
            length = np.linalg.norm(gradient, axis=-1, keepdims=True)
            unit = np.divide(gradient, length, out=np.zeros_like(gradient), where=length > 0)
            normals.reshape(self.depth, self.height, self.width, 3)[inner] = unit
        self.normals = normals

    def __str__(self) -> str:
        sx, sy, sz = (float(c) for c in self.scale)
        parts = [
            f"width: {self.width}\n",
            f"height: {self.height}\n",
            f"depth: {self.depth}\n",
            f"dataseize: {self.data.size}\n",
            f"scale: {sx:g}, {sy:g}, {sz:g}\n",
        ]
        slice_size = self.width * self.height
        for i, value in enumerate(self.data):
            if i > 0 and self.width and i % self.width == 0:
                parts.append("\n")
            if i > 0 and slice_size and i % slice_size == 0:
                parts.append("\n")
            parts.append(f"{int(value)} ")
        return "".join(parts)