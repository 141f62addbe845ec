# s3de

Building blocks for a small 3D engine: reading scene description files,
moving along timed paths, keeping track of windows and steering a
free-look camera.

## Install

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `s3de.parser`

Helpers for the bracketed, comma separated values used in scene files.

- `extract_match(text, start="(", end=")")` returns the index of `end` and
  the text between `start` and `end`.
- `find_triple(text, sep=",")` reads three floats.
- `find_couple(text, sep=",")` reads two integers.

Numbers may be surrounded by spaces; characters after a number are
ignored. Malformed input raises `ParseError` (a `ValueError`).

```python
from s3de.parser import extract_match, find_triple, find_couple

extract_match("position(1,2,3)")  # (14, "1,2,3")
find_triple("1, 100, 33.3")       # (1.0, 100.0, 33.3)
find_couple("100, 50")            # (100, 50)
```

### `s3de.loader`

`Loader.load(filename, kind)` reads a file of the given `LoaderType`
(`CONFIG`, `MESH`, `LIGHT` or `DYNAMICS`). The results are then returned by
`Loader.config()`, `Loader.meshes()` and `Loader.lights()` as copies of
`ConfigData`, `MeshData` and `LightData` records. Asking for data that has
not been loaded successfully raises `LoaderError`; a malformed file raises
`LoaderError` or `ParseError`. A file that cannot be opened leaves the
data of that kind unloaded.

A configuration file has three lines:

```
camera position(0,0,5) target(0,0,0) up(0,0,1)
resolution(800,600)
fullscreen(0)
```

A mesh file has one mesh per line; `#` starts a comment. Rotation angles
are given in degrees and stored in `MeshData.pitch` in radians:

```
models/cube.obj cube position(0,0,0) rotate(0,90,0) scale(1.5)
```

A light file describes each light on a `color` line. A following
`controlpoint linear` line marks the light as moving linearly, and each
`position` line after it adds a `ControlPoint` to the light:

```
color(1,1,1) ambiant(0.2) diffuse(0.8) linear(0.1) constant(1) exp(0.01)
controlpoint linear
position(0,0,0) timemill(1000)
position(5,0,0) timemill(1000)
```

```python
from s3de.loader import Loader, LoaderType

loader = Loader()
loader.load("scene.cfg", LoaderType.CONFIG)
config = loader.config()
print(config.position, config.width, config.height, config.fullscreen)
```

### `s3de.interpolate`

`LinearInterpolate(looped=False)` is a piecewise linear path. Each
`add_point(position, time)` adds a key position whose `time` is the length
of the segment that starts there; `interpolated(total_time)` returns the
position at that time. With `looped` set, time wraps around a period of
the number of points times the first point's duration. Evaluating an
empty path raises `InterpolationError`. `CurveInterpolate` is the abstract
base class.

```python
from s3de.interpolate import LinearInterpolate

path = LinearInterpolate()
path.add_point((0, 0, 0), 10)
path.add_point((10, 0, 0), 10)
path.interpolated(5)  # (5.0, 0.0, 0.0)
```

### `s3de.windowing`

`WindowManager(window_factory)` builds windows by calling the factory with
the arguments given to `new_window(...)` and returns a new `WindowHandle`
for each one, named `"0"`, `"1"`, and so on. The manager supports `len()`,
lookup by handle and iteration over `(handle, window)` pairs in handle
order.

### `s3de.camera`

`Camera(keys, position=None, target=None, up=None)` is a free-look camera
bound to the keys of a `CameraKey(forward, backward, left, right)`.

- `keyboard_event(event)` records which movement keys are pressed.
- `move(event, elapsed)` moves the camera by the pressed keys over
  `elapsed` milliseconds (a number or a `timedelta`), then turns it by any
  mouse motion.
- `orient(x_rel, y_rel)` turns the camera by a relative mouse motion;
  pitch is held within ±89 degrees.
- `set_target(target)` points the camera at a location.
- `look_at()` returns the 4x4 view matrix as a NumPy array.
- `sensitive` and `speed` are properties that always store absolute
  values; `position` can be read and set, `target` can be read.

The event passed to `keyboard_event` and `move` needs the methods
`is_pressed(key)`, `mouse_motion()`, `x_rel()` and `y_rel()`, as
described by the `InputEvent` protocol.

```python
from s3de.camera import Camera, CameraKey

camera = Camera(CameraKey(forward="w", backward="s", left="a", right="d"))
camera.orient(10, -5)
view = camera.look_at()  # 4x4 view matrix
```

## What it does not do

The package draws nothing and opens no windows itself: `WindowManager`
only keeps what its factory returns, and the camera only computes a view
matrix. Files of kind `LoaderType.DYNAMICS` are read but yield no data.
There is no command-line program.