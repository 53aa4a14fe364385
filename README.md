# noisekit

Building blocks for procedural noise. You can combine, modify, select between and displace small noise functions. You can sample the results into 2D rasters and colour values with gradients. The package has no dependencies beyond the standard library.

Every noise function subclasses `noisekit.generators.NoiseFn`. Each has a `get(point)` method that takes a sequence of floats and returns a float.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `noisekit.generators`

- `NoiseFn`: the abstract base class.
- `Seedable`: a marker for functions that have a `seed`.
- `Checkerboard(size=0)`: blocks of -1.0 and 1.0 that are `2**size` units wide.
- `Constant(value)`: the same value at every point.
- `Cylinders(frequency=1.0)`: concentric rings around the z axis.

### `noisekit.combiners`

Each of `Add`, `Max`, `Min`, `Multiply` and `Power` takes `(source1, source2)`.

- `Max` and `Min` ignore a NaN output.
- `Power` returns infinities or NaN where a power has no finite value. It does not raise.

### `noisekit.modifiers`

- `Abs(source)`
- `Negate(source)`
- `Clamp(source, bounds=(-1.0, 1.0))`: raises `ValueError` for invalid bounds.
- `Exponent(source, exponent=1.0)`
- `ScaleBias(source, scale=1.0, bias=0.0)`
- `Curve(source)`: a cubic spline through control points.
  - Add points with `add_control_point(input, output)`, which returns the curve.
  - A point with a duplicate input is ignored.
  - `get` raises `ValueError` when there are fewer than four points.
- `Terrace(source, invert_terraces=False)`: a terrace curve.
  - Add points with `add_control_point(value)`.
  - `get` needs at least two points.

### `noisekit.selectors`

- `Blend(source1, source2, control)`: linear interpolation between the two sources, weighted by the control output.
- `Select(source1, source2, control, bounds=(0.0, 1.0), falloff=0.0)`: outputs `source2` where the control lies within `bounds`, and `source1` elsewhere. A positive `falloff` smooths the switch.

### `noisekit.transformers`

These take 2-, 3- or 4-dimensional points.

- `ScalePoint` and `TranslatePoint`: per-axis scale or offset. The fields are `x_`, `y_`, `z_` and `u_`.
- `Displace(source, x_displace, y_displace, z_displace=None, u_displace=None)`: moves each coordinate by the output of its own source. A missing displacer for the point's dimension raises `ValueError`.
- `RotatePoint(source, x_angle, y_angle, z_angle, u_angle)`: rotates by angles given in degrees.
  - 2D points use only `z_angle`.
  - 4D points raise `ValueError`.

### `noisekit.cache`

`Cache(source)` returns the stored value when `get` is called again with the same point.

### `noisekit.permutation`

- `PermutationTable(seed)`: a deterministic shuffle of 0..255 from an unsigned 32-bit seed.
- `hash(coords)` folds integer coordinates through the table.
- `NoiseHasher` is its abstract base.

### `noisekit.fractals` and `noisekit.multifractals`

The fractal functions are `Fbm`, `Billow`, `BasicMulti`, `HybridMulti` and `RidgedMulti`.

- Each one is built as `Cls(source_type, seed=0)`.
- `source_type` is any callable that builds a `NoiseFn` from a seed.
- `build_sources` makes one source per octave, seeded `seed`, `seed + 1` and so on.
- `octaves` is clamped to 1..32 when it is set. Setting `octaves` or `seed` rebuilds the sources.
- The other fields are `frequency`, `lacunarity` and `persistence`.
- `RidgedMulti` also has `attenuation`.
- Points must have 2, 3 or 4 coordinates.

### `noisekit.turbulence`

`Turbulence(source, source_type, seed=0, frequency=1.0, power=1.0, roughness=3)` displaces each coordinate by an `Fbm` distortion before it samples `source`.

### `noisekit.noise_map`

- `NoiseMap(width, height, border_value=0.0)` holds floats.
- `NoiseImage(width, height, border_color=(0, 0, 0, 0))` holds RGBA tuples.

Both rasters work the same way:

- Index them as `raster[x, y]`.
- Reads outside the bounds return the border value.
- Assigning out of bounds with `[]` raises `IndexError`. `set_value` ignores out-of-bounds points.
- Iterating yields the cells in row-major order.
- `resize(width, height)` changes the size. A zero dimension empties the raster.

### `noisekit.color_gradient`

- `ColorGradient()` starts as a grayscale gradient.
- `add_gradient_point(pos, color)`, `clear_gradient()` and the `build_grayscale_gradient()`, `build_terrain_gradient()` and `build_rainbow_gradient()` presets all return the gradient.
- `get_color(pos)` returns an RGBA tuple.
- `interpolate_color(c0, c1, alpha)` blends two colours.

## Example

```python
import math

from noisekit.color_gradient import ColorGradient
from noisekit.fractals import Fbm
from noisekit.generators import Cylinders, NoiseFn
from noisekit.modifiers import ScaleBias
from noisekit.noise_map import NoiseMap
from noisekit.permutation import PermutationTable
from noisekit.selectors import Blend


class HashNoise(NoiseFn):
    """Blocky noise: one hashed value per integer cell."""

    def __init__(self, seed: int) -> None:
        self.table = PermutationTable(seed)

    def get(self, point):
        return self.table.hash([math.floor(c) for c in point]) / 127.5 - 1.0


fbm = Fbm(HashNoise, seed=3)
fbm.octaves = 4

rings = Cylinders(frequency=2.0)
mixed = Blend(rings, fbm, ScaleBias(rings, scale=0.5))

noise_map = NoiseMap(64, 64)
for y in range(64):
    for x in range(64):
        noise_map[x, y] = mixed.get([x / 32 - 1, y / 32 - 1])

gradient = ColorGradient().build_terrain_gradient()
colors = [gradient.get_color(value) for value in noise_map]
```

## What it does not do

- There are no ready-made gradient noise generators such as Perlin, simplex, value or cellular noise. Fractals and turbulence need a seeded source that you supply.
- There are no builders that sample a noise function over a plane, cylinder or sphere. You fill `NoiseMap` yourself.
- Nothing renders a map to an image with lighting.
- Nothing writes maps or images to files.