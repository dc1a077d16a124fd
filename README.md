# skyraid

A small vertical-scrolling arcade shooter. Your plane fires on its own. Steer
it around the screen and shoot down the enemy planes that drop in from the top.
Do not let ten of them slip past the bottom edge.

## Installing

```
pip install .
```

## Playing

```
skyraid
```

The window is 512 × 768 pixels and the game steps every 10 ms.

Options:

- `--assets DIR`: the directory that holds the `res/` folder of pictures and
  sounds. The default is the current directory. Any picture that is missing is
  drawn as a plain coloured block. A missing sound, or no usable audio device,
  just means silence.
- `--seed N`: a seed for where enemies appear, so that a game can be replayed
  the same way.

### Controls

| Input                     | Effect                                                   |
|---------------------------|----------------------------------------------------------|
| Arrow keys                | Move the plane smoothly while held                       |
| Mouse drag (button held)  | Centre the plane on the pointer                          |
| `1`                       | Killshot: clears every enemy on screen (3 s cooldown)    |
| `R` / `Enter` (game over) | Retry                                                    |
| `Esc` / `Q` (game over)   | Close the game                                           |

### Rules

- Each enemy you shoot down scores one point and leaves an explosion behind.
  Enemies cleared by the killshot score nothing.
- Each enemy that flies off the bottom of the screen counts as a miss.
- After 10 misses the game ends. A "Game Over" screen shows the score and the
  high score. The high score is kept for as long as the window stays open.
- The heads-up display shows the score, the high score, the miss count and the
  killshot cooldown bar.

## Using the game logic

The simulation runs without a display, so you can drive it directly:

```python
from skyraid.scene import Direction, GameScene

scene = GameScene()
scene.press(Direction.LEFT)
for _ in range(100):
    scene.tick()
scene.release(Direction.LEFT)

print(scene.score, scene.high_score, scene.enemies_passed, scene.game_over)
```

`GameScene` also provides the following:

- `spawn_enemy()`, `update_positions()` and `detect_collisions()`: the three
  steps that `tick()` runs.
- `move_to_pointer(x, y)`: centres the plane on a point.
- `killshot(now_ms)` and `killshot_cooldown_left(now_ms)`: fire the killshot
  and report how long until it is ready again.
- `restart()`: resets the game.

It takes an optional `random.Random` for enemy placement. It also takes the
callbacks `on_explosion` and `on_game_over`.

`skyraid.sprites` provides the individual pieces: `Rect`, `Bullet`,
`EnemyWarplane`, `Explosion`, `ScrollingMap` and `HeroWarplane`.
`skyraid.config` holds the tuning values, such as speeds, pool sizes and
intervals. `skyraid.app` has the helpers for the heads-up display, `hud_lines`
and `cooldown_bar_width`, along with `main`, which the `skyraid` command runs.

## Running the tests

```
pip install ".[test]"
pytest
```