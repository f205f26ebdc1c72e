# aphelion

The simulation core of a 2D space game. It holds the parts of the game that
do not depend on a window or an audio device:

- `aphelion.geometry`: the immutable `Vector2` type (`dot`, `cross`, `norm`,
  `norm2`, `rotate`, arithmetic operators) and plane geometry helpers
  (`angle`, `perpendicular`, `intersection`, `closest_point`, `clamp_vector`,
  `deg_to_rad`, `rad_to_deg`), plus `ConvexPolygon`, `box_contains`,
  `ear_clipping` and `hertel_mehlhorn` to split a simple clockwise polygon
  into convex parts.
- `aphelion.body`: the rigid-body components `Body`, `CircleBody` and
  `PolygonBody`. `circle_body` and `polygon_body` build a shape and set the
  body's mass, centre of mass and moment of inertia from it. Both shapes can
  compute a shadow terminator for a light source.
- `aphelion.scene`: `Scene`, a small entity–component store with one store
  per registered component type. Removed entity ids are reused, smallest
  first.
- `aphelion.states`: `AbstractState` and `StateStack`. Pushes, pops and
  clears are queued and applied at the next `update`; updates, events and
  continuous inputs run from the top state down until a state returns `True`.
  An optional GUI object with `add` and `remove` receives the widgets the
  states build.
- `aphelion.animation`: `AnimationFrame` and `Animation`, which pick the
  current frame's texture rectangle from the elapsed time and keep a `Sound`
  position looping between two offsets while running.
- `aphelion.paths`: `Paths`, the file layout under a root directory (saves,
  settings and resources). Its listing methods return files with a given
  extension, most recently written first. `generate_stem` makes a save name
  from the current local date and time.
- `aphelion.settings`: `VideoMode`, `SoundSettings`, `Settings`,
  `load_settings` (defaults when the file is missing), `save_settings`,
  `video_mode_name` and `best_video_modes`, which keeps the mode with the
  most bits per pixel for each resolution.
- `aphelion.blackbody`: `BlackBodyTable`, a colour table for consecutive
  temperatures. Build one with `BlackBodyTable.from_data` from a mapping of
  lists `T`, `M`, `R`, `G`, `B`, or with `BlackBodyTable.from_file` from a
  JSON file holding the same.

## Installing

```
pip install .
```

Python 3.10 or newer is needed. The package has no other dependencies.

## Examples

```python
from aphelion.geometry import ConvexPolygon, Vector2

triangle = ConvexPolygon([Vector2(0, 0), Vector2(1, 0), Vector2(0, 1)])
area, center = triangle.area_and_center_of_mass()   # 0.5, Vector2(1/3, 1/3)
triangle.contains(Vector2(0.1, 0.1))                # True
triangle.support_function(Vector2(1, 0))            # Vector2(1, 0)
```

```python
from aphelion.body import Body, circle_body
from aphelion.scene import Scene

scene = Scene()
scene.register_component(Body)
entity = scene.create_entity()
body = scene.assign_component(entity, Body(density=2.0))
circle_body(body, 1.0)
body.mass                                           # 2 * pi
```

## What the package does not do

It has no window, rendering, GUI widgets, input handling or audio output:
`Sound` only tracks a playback position. There is no command that starts a
game, and no reading or writing of whole scenes to save files; `Paths` only
locates save files and resources.

## Running the tests

```
pip install .[test]
pytest
```