# scivis

Small building blocks for scientific visualization work, written in plain
Python with numpy. The package handles data and geometry; it draws nothing.

## Modules

- `scivis.volume` — `Volume`, a width x height x depth grid of 8-bit samples
  stored x-fastest, with a `scale` vector, `data` and `normals`.
  `normalize_scale()` rescales `scale` so the largest normalised extent is 1,
  `resample(w, h, d)` returns a trilinearly resampled copy,
  `compute_normals()` fills `normals` with normalised central-difference
  gradients for interior voxels, and `str(volume)` gives a text dump.
- `scivis.qvis` — reads QVis `.dat` descriptor files and their raw data.
  `load_qvis(filename)` returns a `Volume`; `QVis(filename)` holds it in
  `.volume` and can `load` another file. `parse_dat_line(line)` splits a
  `key: value` line into a trimmed, lower-cased `DatLine`. Formats other than
  `char`, `uchar` and `byte` are read as little-endian 16-bit samples and
  rescaled to 8 bits. Missing files, bad `resolution` or `slicethickness`
  tags, big-endian data, a missing object file name or a raw file of the
  wrong size raise `QVisFileError`.
- `scivis.clipper` — clips triangle lists against the plane
  `dot(normal, p) + d = 0`, keeping the side where the value is not positive.
  `tri_plane(triangles, normal, d)` returns the clipped triangles and the
  vertices created on the plane; `mesh_plane` also closes the cut with a
  triangle fan; `mesh_plane_flat` does the same on a flat
  `x, y, z, x, y, z, ...` list.
- `scivis.arcball` — `ArcBall(win_dim)` maps window positions onto a virtual
  sphere (`map_to_sphere`). Call `click(position)` to start a drag and
  `drag(position)` to get the rotation as a `Quaternion` (zero when the
  movement is too small). `set_window_size` and `set_radius` adjust it.
- `scivis.flowfield` — `Flowfield`, a 3D grid of vectors with trilinear
  `interpolate(pos)` over unit-cube coordinates. `Flowfield.gen_demo(size,
  demo_type)` builds an analytic field for `DemoType.DRAIN`,
  `DemoType.SADDLE` (also reachable as `DemoType.SATTLE`) or
  `DemoType.CRITICAL`; `Flowfield.from_file(filename)` reads a comma
  separated field file (dimension count, sizes, time steps, components).
- `scivis.flowfield4d` — `Flowfield4D`, a sequence of vector grids over time
  whose time index wraps around. `interpolate(pos, time)` blends linearly
  between neighbouring steps; `Flowfield4D.gen_demo(size, demo_types)` builds
  a two-step field from the first two demo types.
- `scivis.fontmap` — `load_positions(filename)` reads a glyph position file
  into `CharPosition` records (a file that cannot be opened gives an empty
  list); `find_element(positions, c)` returns the entry for `c`, falling back
  to the first entry.
- `scivis.marching_squares` and `scivis.marching_cubes` — the case tables of
  both algorithms with `cell_case(values, isovalue)`, `edges_for_case(case)`,
  `edge_endpoints(edge)` and, for cubes, `triangles_for_case(case)`.

## Install

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
pytest
```

## Example

```python
from scivis.clipper import mesh_plane
from scivis.flowfield import DemoType, Flowfield
from scivis.marching_cubes import cell_case, triangles_for_case
from scivis.qvis import load_qvis

field = Flowfield.gen_demo(64, DemoType.SADDLE)
velocity = field.interpolate((0.25, 0.5, 0.75))

volume = load_qvis("bonsai.dat")
print(volume.width, volume.height, volume.depth)

triangles = [(0, 0, 0), (1, 0, 0), (0, 1, 0)]
clipped = mesh_plane(triangles, (1, 0, 0), -0.5)

case = cell_case([0, 200, 200, 200, 200, 200, 200, 200], 128)
print(triangles_for_case(case))
```

## What it does not do

- There is no rendering, windowing or input handling: no ray casting, no
  image display and no text drawing. `ArcBall` and `fontmap` only compute
  rotations and glyph rectangles for a renderer to use.
- The marching squares and marching cubes modules provide the lookup tables
  and case classification only; they do not extract full isolines or
  isosurfaces from an image or a `Volume`.
- Flow fields can be sampled, but the package does not trace particles,
  streamlines, pathlines or streaklines, and does not compute line integral
  convolution images.
- There is no command-line program.