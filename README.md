# starfighter

Building blocks for a top-down arcade space shooter. The package has no
window or game loop of its own. It provides vector math, input definitions,
resource loading, a sprite batch that hands its work to a renderer you supply,
and collision rules between kinds of objects.

## Modules

- `starfighter.vector2.Vector2` is a mutable 2D vector. It supports `+`, `-`,
  `*` and `/` with scalars, in-place variants and negation. It also has
  `length`, `length_squared`, `normalize`, `dot`, `cross`, `left`, `right`,
  `to_point` and `copy`, and the static helpers `distance`,
  `distance_squared`, `lerp` (value clamped to [0, 1]) and `random`. The
  constants `Vector2.ZERO`, `ONE`, `UNIT_X` and `UNIT_Y` give a fresh vector
  on every access.
- `starfighter.region.Region` is a rectangle given by its upper-left corner
  and size. It has the properties `top`, `bottom`, `left`, `right`, the four
  corners and `center`, and the methods `set` and `translate`.
- `starfighter.input` defines `Key`, `MouseButton`, `Button` and
  `ButtonState`. It also has the game pad dataclasses `GamePadButtons`,
  `GamePadDPad`, `GamePadTriggers`, `GamePadThumbSticks` and `GamePadState`.
  `GamePadState` provides `is_button_down`, `is_button_up` and `reset`.
- `starfighter.resources` contains `ResourceManager`. It loads `Resource`
  subclasses relative to a content path (`set_content_path`) and caches them
  by path. Each resource gets an id, and cloneable resources are copied for
  each request. `unload_all` releases everything. `Texture` reads an image
  with Pillow and exposes `width`, `height`, `size` and `center`. A file that
  cannot be read raises the error Pillow raises (an `OSError`).
- `starfighter.spritebatch.SpriteBatch` queues sprites and text between
  `begin()` and `end()`. It can draw in `DEFERRED`, `BACK_TO_FRONT`,
  `FRONT_TO_BACK`, `TEXTURE` or `IMMEDIATE` mode (`SpriteSortMode`), with
  `ALPHA` or `ADDITIVE` blending (`BlendState`). The methods `draw`,
  `draw_region` and `draw_string` raise `RuntimeError` if no batch has been
  begun. A renderer needs the methods `set_blender`, `use_transform`,
  `hold_drawing`, `draw_bitmap` and `draw_text`. `RecordingRenderer` is used
  by default and records every call in its `calls` list.
- `starfighter.flags` defines the bit flags `CollisionType` (`PLAYER`,
  `ENEMY`, `SHIP`, `PROJECTILE`) and `TriggerType` (`PRIMARY`, `SECONDARY`,
  `SPECIAL`, `ALL`). Both have `contains()`, which is true when two values
  share a bit.
- `starfighter.collision.CollisionManager` holds rules between pairs of
  collision types. `check_collision(first, second)` runs the pair's callback
  when the two objects' circles overlap. The callback receives the object
  with the lower type first. A pair with no rule is remembered as
  non-colliding. Objects need a `collision_type()` method, a `position`
  vector and a `collision_radius`.

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from starfighter.collision import CollisionManager
from starfighter.flags import CollisionType
from starfighter.vector2 import Vector2

v = Vector2(3, 4)
print(v.length())                                # 5.0
print(Vector2.lerp(Vector2(0, 0), v, 0.5))       # { 1.5, 2 }

enemy = CollisionType.ENEMY | CollisionType.SHIP
print(enemy.contains(CollisionType.SHIP))        # True


class Body:
    def __init__(self, kind, x, y, radius):
        self.kind = kind
        self.position = Vector2(x, y)
        self.collision_radius = radius

    def collision_type(self):
        return self.kind


hits = []
manager = CollisionManager()
bullet = CollisionType.PLAYER | CollisionType.PROJECTILE
manager.add_collision_type(bullet, enemy, lambda a, b: hits.append((a, b)))
manager.check_collision(Body(enemy, 0, 0, 20), Body(bullet, 10, 0, 9))
print(len(hits))                                 # 1
```

## What it does not do

The package has no screens or screen stack, no game objects, ships,
projectiles, weapons or levels, and no command to start a game. It also does
not open a window or draw pixels. A `SpriteBatch` only passes its work to the
renderer it is given. To build a playable game, you provide the frame loop,
the game entities and a renderer.