import random

import pytest

from skyraid.config import (
    BULLET_INTERVAL,
    ENEMY_INTERVAL,
    ENEMY_NUM,
    ENEMY_SPEED,
    GAME_HEIGHT,
    GAME_WIDTH,
    HERO_SPEED,
    KILLSHOT_COOLDOWN,
    MAP_SCROLL_SPEED,
)
from skyraid.scene import ENEMY_PASS_LIMIT, Direction, GameScene

HERO_W, HERO_H = 100, 80
ENEMY_SIZE = 60


@pytest.fixture
def scene():
    return GameScene(
        hero_size=(HERO_W, HERO_H),
        bullet_size=(10, 20),
        enemy_size=ENEMY_SIZE,
        rng=random.Random(7),
    )


def test_spawn_waits_for_interval(scene):
    results = [scene.spawn_enemy() for _ in range(ENEMY_INTERVAL - 1)]
    assert all(r is None for r in results)
    enemy = scene.spawn_enemy()
    assert enemy is scene.enemies[0]
    assert enemy.free is False
    assert enemy.rect.y == -ENEMY_SIZE
    assert 0 <= enemy.rect.x < GAME_WIDTH - ENEMY_SIZE


def test_spawn_is_deterministic_with_seeded_rng():
    a = GameScene(enemy_size=ENEMY_SIZE, rng=random.Random(3))
    b = GameScene(enemy_size=ENEMY_SIZE, rng=random.Random(3))
    xs_a = []
    xs_b = []
    for _ in range(ENEMY_INTERVAL * 3):
        ea, eb = a.spawn_enemy(), b.spawn_enemy()
        if ea is not None:
            xs_a.append(ea.rect.x)
        if eb is not None:
            xs_b.append(eb.rect.x)
    assert len(xs_a) == 3
    assert xs_a == xs_b


def test_press_moves_hero_and_release_stops(scene):
    start_x = scene.hero.rect.x
    scene.press(Direction.LEFT)
    scene.update_positions()
    assert scene.hero.rect.x == start_x - HERO_SPEED
    scene.release(Direction.LEFT)
    scene.update_positions()
    assert scene.hero.rect.x == start_x - HERO_SPEED


def test_held_direction_is_clamped_to_screen(scene):
    scene.press(Direction.RIGHT)
    scene.press(Direction.DOWN)
    for _ in range(200):
        scene.update_positions()
    assert scene.hero.rect.x == GAME_WIDTH - HERO_W
    assert scene.hero.rect.y == GAME_HEIGHT - HERO_H


def test_move_to_pointer_centres_and_clamps(scene):
    scene.move_to_pointer(200, 300)
    assert scene.hero.rect.x == 200 - HERO_W // 2
    assert scene.hero.rect.y == 300 - HERO_H // 2
    scene.move_to_pointer(-50, -50)
    assert (scene.hero.rect.x, scene.hero.rect.y) == (0, 0)
    scene.move_to_pointer(GAME_WIDTH * 2, GAME_HEIGHT * 2)
    assert scene.hero.rect.x == GAME_WIDTH - HERO_W
    assert scene.hero.rect.y == GAME_HEIGHT - HERO_H


def test_update_positions_scrolls_map(scene):
    scene.update_positions()
    assert scene.map.y == -GAME_HEIGHT + MAP_SCROLL_SPEED


def test_tick_fires_bullet_after_interval(scene):
    for _ in range(BULLET_INTERVAL - 1):
        scene.tick()
    assert all(b.free for b in scene.hero.bullets)
    scene.tick()
    assert sum(not b.free for b in scene.hero.bullets) == 1


def test_collision_scores_and_starts_explosion():
    sounds = []
    scene = GameScene(
        hero_size=(HERO_W, HERO_H),
        bullet_size=(10, 20),
        enemy_size=ENEMY_SIZE,
        on_explosion=lambda: sounds.append(1),
    )
    enemy = scene.enemies[0]
    enemy.free = False
    enemy.rect.move_to(100, 200)
    bullet = scene.hero.bullets[0]
    bullet.free = False
    bullet.rect.move_to(110, 210)
    assert scene.detect_collisions() == 1
    assert scene.score == 1
    assert enemy.free and bullet.free
    bomb = scene.bombs[0]
    assert bomb.free is False
    assert (bomb.x, bomb.y) == (100, 200)
    assert len(sounds) == 1


def test_no_collision_when_apart(scene):
    enemy = scene.enemies[0]
    enemy.free = False
    enemy.rect.move_to(0, 0)
    bullet = scene.hero.bullets[0]
    bullet.free = False
    bullet.rect.move_to(GAME_WIDTH - 20, GAME_HEIGHT - 40)
    assert scene.detect_collisions() == 0
    assert scene.score == 0
    assert enemy.free is False


def test_passing_enemies_end_game():
    ended = []
    scene = GameScene(enemy_size=ENEMY_SIZE, on_game_over=lambda: ended.append(True))
    scene.score = 5
    for enemy in scene.enemies[:ENEMY_PASS_LIMIT]:
        enemy.free = False
        enemy.rect.move_to(0, GAME_HEIGHT)
    scene.update_positions()
    assert scene.enemies_passed == ENEMY_PASS_LIMIT
    assert scene.game_over is True
    assert scene.high_score == 5
    assert ended == [True]


def test_enemy_inside_screen_is_not_counted(scene):
    enemy = scene.enemies[0]
    enemy.free = False
    enemy.rect.move_to(0, 0)
    scene.update_positions()
    assert enemy.rect.y == ENEMY_SPEED
    assert scene.enemies_passed == 0
    assert scene.game_over is False


def test_killshot_clears_enemies_and_cools_down(scene):
    for enemy in scene.enemies:
        enemy.free = False
    assert scene.killshot(0) is False
    assert scene.killshot(KILLSHOT_COOLDOWN) is True
    assert all(e.free for e in scene.enemies)
    assert len(scene.enemies) == ENEMY_NUM
    assert scene.killshot(KILLSHOT_COOLDOWN + 1) is False
    assert scene.killshot_cooldown_left(KILLSHOT_COOLDOWN) == KILLSHOT_COOLDOWN
    assert scene.killshot_cooldown_left(KILLSHOT_COOLDOWN * 2) == 0


def test_killshot_ignored_after_game_over(scene):
    scene.game_over = True
    scene.enemies[0].free = False
    assert scene.killshot(KILLSHOT_COOLDOWN * 10) is False
    assert scene.enemies[0].free is False


def test_restart_resets_state(scene):
    scene.score = 4
    scene.high_score = 9
    scene.enemies_passed = ENEMY_PASS_LIMIT
    scene.game_over = True
    scene.enemies[2].free = False
    scene.bombs[1].free = False
    scene.move_to_pointer(0, 0)
    scene.restart()
    assert scene.score == 0
    assert scene.high_score == 9
    assert scene.enemies_passed == 0
    assert scene.game_over is False
    assert all(e.free for e in scene.enemies)
    assert all(b.free for b in scene.bombs)
    assert scene.hero.rect.x == GAME_WIDTH // 2 - HERO_W // 2
    assert scene.hero.rect.y == GAME_HEIGHT - HERO_H - 30