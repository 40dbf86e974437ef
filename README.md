# xjtuer

The rules of a small "I Wanna"-style platformer set on a university campus:
a start page, three festival stages full of traps and collectible leaves,
five museum quiz rooms, and an end page. Everything lives in a lightweight
entity world in plain Python with no dependencies, so the game can be
driven frame by frame from code and checked in tests.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## The command

```
xjtuer [--frames N]
```

`xjtuer.app.main` builds every room, goes through one press and release of
the reload key (which places the reloadable pieces and starts the music of
the saved area), runs `N` idle frames (default 1; negative values are
rejected) and prints the number of entities and the current state, for
example `I Wanna Be XJTUer: ... entities, state in_game`.

## Using it from Python

```python
from xjtuer.app import Game
from xjtuer.world import CollisionStarted, Kid

game = Game()
game.startup()                          # fixed pieces of every room
game.step(reload_pressed=True)          # holding the reload key
game.step(reload_released=True)         # released: rooms rebuilt, state in_game

kid = game.world.spawn(Kid())
# feed collision events between the kid and other entities
game.step([CollisionStarted(kid, game.levels[0].trig1)])
```

`Game.step(events=(), reload_pressed=False, reload_released=False)` runs one
frame. While the state is in-game it lets each festival level and quiz room
react to the events; then it handles the reload key, switches background
music on touched music switches, counts touched leaves, and applies any
pending state change. It returns `(left, entered)` when the state changed,
and calls `Game.leave_reload()` whenever the reload state is left.

### Modules

- `xjtuer.world` — the `World` entity store (`spawn`, `despawn`, `insert`,
  `get`, `has`, `query`, `single`, `kid_touches`), the `Entity` handle, the
  `CollisionStarted` event, shared components such as `Kid`, `Move`,
  `Transform`, `Sprite`, `Collider` and `Warp`, the `InGameSet` stages and
  `system_order()`, which lists them in the order they run each frame.
- `xjtuer.state` — `GameState`, `Music`, `KidSaver` (the respawn point;
  `KidSaver.at_start()` gives the opening save), `StateMachine` with
  `handle_reload_key`, `enter_for_building`, `apply_transition`, `play_bgm`
  and `reload_bgm`, and `music_for` / `warp_music_for`, which pick the
  background music for an area id.
- `xjtuer.leaf` — `Leaf`, `LeafCounter` (`reset`, `collect`) and
  `spawn_single_leaf` / `spawn_fake_leaf`. A touched leaf adds its score;
  it is taken away, with a coin sound, only while the count stays positive.
- `xjtuer.menu` — `spawn_start_page` and `spawn_end_page`.
- `xjtuer.level1`, `xjtuer.level2`, `xjtuer.level3` — `FestivalLevel1`,
  `FestivalLevel2` and `FestivalLevel3`, each with `spawn_once`,
  `spawn_reload` and `update(world, events, leaves)`. The layout of the
  third stage is in `xjtuer.level3_layout`.
- `xjtuer.quiz` — `QuizRoom` (`spawn_once`, `spawn_reload`, `update`) and
  `quiz_room_4`; the other rooms come from `quiz_room_1`
  (`xjtuer.museum1`), `quiz_room_2` (`xjtuer.museum2`), and `quiz_room_3`
  and `quiz_room_5` (`xjtuer.museum_late`, which also defines the
  `ClearBuilding` marker put on the museum's exit warp).

## What it does not do

This package holds the rules and the room contents only. It opens no
window, draws nothing, plays no sound (music and sound effects are entities
carrying an `AudioPlayer` component), reads no keyboard, and has no physics:
the kid does not move by itself, `Move` components are not advanced, warps
do not teleport anything, and save points do not update the `KidSaver`.
Collisions must be supplied as `CollisionStarted` events. The campus
buildings that the museum's exit leads to are not included.