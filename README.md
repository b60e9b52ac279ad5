# tileforge

A small component-based 2D game engine built on pygame, with a demo game
that runs on it.

What it provides:

- game objects made of components: `GameObject` (`tileforge.game_object`)
  with `Transform` (`tileforge.components`), `Sprite` (`tileforge.sprite`),
  `Animator` (`tileforge.animator`), `KeyboardMovement`
  (`tileforge.movement`) and `BoxCollider` (`tileforge.colliders`)
- frame-based sprite-sheet animation that mirrors its frames when the facing
  direction changes (`Animation`, `FacingDirection` in `tileforge.animation`)
- named input bindings with pressed / down / up queries (`Input` in
  `tileforge.input`)
- drawing by layer (`DrawLayer`) and, within a layer, by `sort_order`
  (`DrawableSystem` in `tileforge.drawable_system`)
- collision detection and push-out resolution between box colliders, filtered
  by collision layer and backed by a `Quadtree` (`CollisionSystem` in
  `tileforge.collision_system`, `tileforge.quadtree`)
- a loader that turns Tiled `.tmx` maps into game objects (`TileMapParser` in
  `tileforge.tilemap`)
- scenes and a scene state machine (`Scene`, `SceneStateMachine` in
  `tileforge.scenes`, `SplashScreen`, `GameScene`)
- textures loaded once per file path and handed out by integer id
  (`ResourceAllocator` in `tileforge.resources`)

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the demo game

```
tileforge
```

This opens a 1920×1080 window, shows `TanksCover.PNG` at half size for one
second and then switches to the game scene: a player character drawn from
`viking_sheet.png`, placed on the map `Test Map 1 - Copy.tmx`, moved with the
arrow keys or W/A/S/D and pushed out of the tiles in the map's `Collisions`
layer. Tiles that collide with the player are outlined in red for that frame.
The game runs until its window is closed.

These files are looked up in the current directory (`WorkingDirectory`
defaults to `./`); tile sheet images are loaded from the `source` path
written in the map. The package ships no images or maps of its own. A missing
texture is reported as a warning and the scene goes on without it; a missing
map file stops the game with an error.

## Using the engine

```python
from tileforge.colliders import BoxCollider, CollisionLayer
from tileforge.game_object import GameObject
from tileforge.geometry import Rect
from tileforge.object_collection import ObjectCollection

player = GameObject()
player.add_component(BoxCollider, Rect(0, 0, 80, 96), CollisionLayer.PLAYER)
player.transform.set_position(50, 650)

objects = ObjectCollection()
objects.add(player)          # one object or an iterable of them

# once per frame
objects.process_removals()
objects.process_new_objects()
objects.update(delta_time)
objects.late_update(delta_time)
objects.draw(window)
```

New objects are held back until `process_new_objects()` runs; it calls
`awake()` and then `start()` on each of them and registers them with the
drawing and collision systems. Objects marked with `queue_for_removal()` are
dropped by `process_removals()`. `add_component` returns the existing
component if the object already has one of that type.

By default the `PLAYER` layer collides with `DEFAULT` and `TILE`, `DEFAULT`
collides with itself, and `TILE` collides with nothing; colliders whose
`Transform.is_static` is set are never moved.

Animations are built frame by frame and handed to an `Animator`:

```python
from tileforge.animation import Animation, FacingDirection
from tileforge.animator import AnimationState, Animator

walk = Animation(FacingDirection.RIGHT)
walk.add_frame(texture_id, 600, 290, 165, 145, 0.15)
player.add_component(Animator).add_animation(AnimationState.WALK, walk)
```

Input bindings take a callable that reports whether a key code is held; by
default pygame's keyboard state is used:

```python
from tileforge.input import Input

held = set()
keys = Input(key_state=lambda code: code in held)
keys.add_mapping("Jump", 32)
held.add(32)
keys.update()
assert keys.is_key_down("Jump")
```

## What it does not do

There is no sound, no menu or pause screen, no saving of progress, and no
key that quits the game: the `Esc` binding is registered but nothing acts on
it. Only the two scenes described above exist, and only the `IDLE` and
`WALK` animation states.