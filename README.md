# candela

CPU-side helpers for a real-time renderer, written in Python on top of
numpy. Matrices are 4x4 numpy arrays that act on column vectors
(`m @ v`).

## Modules

- `candela.bvh_split` provides the `Bounds` axis-aligned box, which has
  `center()`, `extent()` and `area()` (half the surface area). It also
  provides the split-plane searches used when a bounding volume hierarchy
  is built:
  - `median_split`
  - `search_sah_linear`, which tries 128 planes per axis
  - `search_sah_binary`, a 12-step coarse scan followed by 3 refining steps
  - `search_sah_binned`, which uses 64 bins

  `sah_cost` computes the surface area heuristic cost of a single plane.
  `find_split` picks a plane using one of the `SplitMethod` values.
- `candela.camera` contains `FPSCamera`. It looks around with the mouse
  (pitch is clamped to ±89°), has position, front, roll and perspective
  settings, and moves with velocity, acceleration and a drag of 0.9 per
  `on_update()`. It exposes `view_matrix`, `projection_matrix` and
  `view_projection`. The module also has the plain `look_at`, `perspective`
  and `rotate` matrix functions.
- `candela.maths` covers transforms and sampling:
  - extracting rotation, forward, right and up vectors and the position of
    a transform
  - `set_position`, which returns a copy of the transform
  - `fibonacci_lattice`
  - `sample_hemisphere` and `cosine_hemisphere`
- `candela.include` expands `#include "file"` lines and `#inject` lines in
  shader text. It offers `include_string`, `include_strings` and
  `include_file`, plus `find_includes` to list the directives. Optional
  `#line` directives can be written in C or GLSL style (`LineDirectives`).
  A file that cannot be read raises `IncludeError`.
- `candela.shader_source` has two classes:
  - `ShaderSource` loads one stage with its includes expanded.
  - `ProgramSource` loads the vertex, fragment and optional geometry stages.

  Each records the byte size and CRC-32 of the loaded text. `reload()`
  returns True only when one of those values changed.
- `candela.compute_source` has `ComputeSource`, which does the same for a
  compute shader. It counts rebuilds and clears its `textures_bound` flag on
  every rebuild. `force_reload()` rebuilds unconditionally.
- `candela.mesh` has `Mesh`, a dataclass that holds vertex positions,
  triangle indices and material fields. It derives `vertex_count`,
  `indices_count`, `indexed` and `triangle_count` from that data.
- `candela.entity` has `Entity`, a placed instance of an object with a 4x4
  model matrix and material overrides. `extract_scale()` returns the length
  of each basis column.
- `candela.logger` has `log()`, which prints a prefixed message, and
  `log_to_file()`, which appends to `log.txt` or a given path and returns
  whether the write succeeded.

## Installation

```
pip install .
```

## Example

```python
from candela.bvh_split import Bounds, SplitMethod, find_split
from candela.camera import FPSCamera
from candela.include import include_string

boxes = [Bounds([0, 0, 0], [1, 1, 1]), Bounds([4, 0, 0], [5, 1, 1])]
centroids = [box.center() for box in boxes]
node = Bounds([0, 0, 0], [5, 1, 1])
axis, border = find_split(node, [0, 1], boxes, centroids, SplitMethod.SAH_BINNED)
print(axis, border)

camera = FPSCamera(90.0, 16 / 9, 0.1, 1000.0, 0.25)
camera.update_on_mouse_movement(10.0, 5.0)
print(camera.yaw, camera.pitch)
print(camera.view_projection)

print(include_string("#inject\nvoid main() {}\n", inject="#define SAMPLES 4"))
```

## What it does not do

The package has no graphics API binding. It does not open windows, compile
or link shaders, or upload buffers and textures; the shader classes only
produce and track source text.

It chooses split planes for a bounding volume hierarchy, but it does not
build the complete tree. It also does not flatten a tree into GPU node
arrays, and it does not trace rays.

## Running the tests

```
pip install .[test]
pytest
```