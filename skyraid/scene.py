"""The main game scene: spawning, movement, collisions, scoring and the killshot."""

from __future__ import annotations

import random
from enum import Enum
from typing import Callable

from skyraid.config import (
    BOMB_NUM,
    ENEMY_INTERVAL,
    ENEMY_NUM,
    GAME_HEIGHT,
    GAME_WIDTH,
    HERO_SPEED,
    KILLSHOT_COOLDOWN,
)
from skyraid.sprites import EnemyWarplane, Explosion, HeroWarplane, ScrollingMap

ENEMY_PASS_LIMIT = 10


class Direction(Enum):
    """A direction the hero can be steered in with the arrow keys."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


class GameScene:
    """All game state and the per-frame rules that drive it."""

    pass_limit = ENEMY_PASS_LIMIT

    def __init__(
        self,
        hero_size: tuple[int, int] = (100, 100),
        bullet_size: tuple[int, int] = (10, 20),
        enemy_size: int = 60,
        rng: random.Random | None = None,
        on_explosion: Callable[[], None] | None = None,
        on_game_over: Callable[[], None] | None = None,
    ) -> None:
        self.hero = HeroWarplane(*hero_size, *bullet_size)
        # Enemy hit boxes are square, sized by the picture's width.
        self.enemies = [EnemyWarplane(enemy_size, enemy_size) for _ in range(ENEMY_NUM)]
        self.bombs = [Explosion() for _ in range(BOMB_NUM)]
        self.map = ScrollingMap()
        self.rng = rng if rng is not None else random.Random()
        self.on_explosion = on_explosion
        self.on_game_over = on_game_over
        self.spawn_counter = 0
        self.held: set[Direction] = set()
        self.score = 0
        self.high_score = 0
        self.enemies_passed = 0
        self.game_over = False
        self.last_killshot_ms = 0

    def tick(self) -> None:
        """Run one frame: spawn, move everything, then check collisions."""
        self.spawn_enemy()
        self.update_positions()
        self.detect_collisions()

    def spawn_enemy(self) -> EnemyWarplane | None:
        """Every ENEMY_INTERVAL frames launch the first free enemy above the screen."""
        self.spawn_counter += 1
        if self.spawn_counter < ENEMY_INTERVAL:
            return None
        self.spawn_counter = 0
        enemy = next((e for e in self.enemies if e.free), None)
        if enemy is not None:
            enemy.free = False
            enemy.rect.move_to(
                self.rng.randrange(GAME_WIDTH - enemy.rect.width),
                -enemy.rect.height,
            )
        return enemy

    def update_positions(self) -> None:
        """Move the hero, map, bullets, enemies and explosions by one frame."""
        rect = self.hero.rect
        x, y = rect.x, rect.y
        if Direction.LEFT in self.held:
            x -= HERO_SPEED
        if Direction.RIGHT in self.held:
            x += HERO_SPEED
        if Direction.UP in self.held:
            y -= HERO_SPEED
        if Direction.DOWN in self.held:
            y += HERO_SPEED
        self.hero.set_position(
            _clamp(x, 0, GAME_WIDTH - rect.width),
            _clamp(y, 0, GAME_HEIGHT - rect.height),
        )

        self.map.advance()
        self.hero.shoot()

        for bullet in self.hero.bullets:
            if not bullet.free:
                bullet.update_position()

        for enemy in self.enemies:
            if enemy.free:
                continue
            enemy.update_position()
            if enemy.rect.y > GAME_HEIGHT:
                enemy.free = True
                self.enemies_passed += 1
                if self.enemies_passed >= self.pass_limit and not self.game_over:
                    self._end_game()

        for bomb in self.bombs:
            if not bomb.free:
                bomb.update()

    def _end_game(self) -> None:
        self.game_over = True
        self.high_score = max(self.high_score, self.score)
        if self.on_game_over is not None:
            self.on_game_over()

    def detect_collisions(self) -> int:
        """Destroy enemies hit by bullets, start explosions; return the number of hits."""
        hits = 0
        for enemy in self.enemies:
            if enemy.free:
                continue
            for bullet in self.hero.bullets:
                if bullet.free or not enemy.rect.intersects(bullet.rect):
                    continue
                enemy.free = True
                bullet.free = True
                self.score += 1
                hits += 1
                if self.on_explosion is not None:
                    self.on_explosion()
                bomb = next((b for b in self.bombs if b.free), None)
                if bomb is not None:
                    bomb.free = False
                    bomb.x = enemy.rect.x
                    bomb.y = enemy.rect.y
        return hits

    def move_to_pointer(self, x: int, y: int) -> None:
        """Centre the hero on a pointer position, kept inside the screen."""
        rect = self.hero.rect
        new_x = int(x - rect.width * 0.5)
        new_y = int(y - rect.height * 0.5)
        self.hero.set_position(
            _clamp(new_x, 0, GAME_WIDTH - rect.width),
            _clamp(new_y, 0, GAME_HEIGHT - rect.height),
        )

    def press(self, direction: Direction) -> None:
        """Start steering in a direction."""
        self.held.add(direction)

    def release(self, direction: Direction) -> None:
        """Stop steering in a direction."""
        self.held.discard(direction)

    def killshot(self, now_ms: int) -> bool:
        """Clear every enemy if the killshot is ready; return whether it fired."""
        if self.game_over:
            return False
        if now_ms - self.last_killshot_ms < KILLSHOT_COOLDOWN:
            return False
        self.last_killshot_ms = now_ms
        for enemy in self.enemies:
            enemy.free = True
        return True

    def killshot_cooldown_left(self, now_ms: int) -> int:
        """Milliseconds until the killshot is ready again, zero when ready."""
        return max(0, KILLSHOT_COOLDOWN - (now_ms - self.last_killshot_ms))

    def restart(self) -> None:
        """Reset score, misses, enemies, explosions and the hero's position."""
        self.score = 0
        self.enemies_passed = 0
        self.game_over = False
        for enemy in self.enemies:
            enemy.free = True
        for bomb in self.bombs:
            bomb.free = True
        rect = self.hero.rect
        self.hero.set_position(
            GAME_WIDTH // 2 - rect.width // 2,
            GAME_HEIGHT - rect.height - 30,
        )