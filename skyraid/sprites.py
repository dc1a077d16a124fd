"""Moving game objects: bullets, enemies, explosions, the map and the hero."""

from __future__ import annotations

from dataclasses import dataclass

from skyraid.config import (
    BOMB_FRAME_PATHS,
    BOMB_INTERVAL,
    BOMB_MAX,
    BULLET_INTERVAL,
    BULLET_NUM,
    BULLET_SPEED,
    ENEMY_SPEED,
    GAME_HEIGHT,
    GAME_WIDTH,
    MAP_SCROLL_SPEED,
)


@dataclass
class Rect:
    """An integer rectangle whose top-left corner is (x, y)."""

    x: int
    y: int
    width: int
    height: int

    def move_to(self, x: int, y: int) -> None:
        """Move the top-left corner, keeping the size."""
        self.x = int(x)
        self.y = int(y)

    def intersects(self, other: Rect) -> bool:
        """True if the two rectangles share a non-empty area."""
        if self.width <= 0 or self.height <= 0:
            return False
        if other.width <= 0 or other.height <= 0:
            return False
        return (
            self.x < other.x + other.width
            and other.x < self.x + self.width
            and self.y < other.y + other.height
            and other.y < self.y + self.height
        )


class Bullet:
    """A bullet that flies upward once fired and is freed off the top edge."""

    def __init__(self, width: int, height: int, speed: int = BULLET_SPEED) -> None:
        self.rect = Rect(int(GAME_WIDTH * 0.5 - width * 0.5), GAME_HEIGHT, width, height)
        self.speed = speed
        self.free = True

    def update_position(self) -> None:
        """Move one step up; free the bullet once it leaves the screen."""
        if self.free:
            return
        self.rect.move_to(self.rect.x, self.rect.y - self.speed)
        if self.rect.y <= -self.rect.height:
            self.free = True


class EnemyWarplane:
    """An enemy that descends once launched and is freed below the bottom edge."""

    def __init__(self, width: int, height: int, speed: int = ENEMY_SPEED) -> None:
        self.rect = Rect(0, 0, width, height)
        self.free = True
        self.speed = speed

    def update_position(self) -> None:
        """Move one step down; free the enemy once it is fully past the bottom."""
        if self.free:
            return
        self.rect.move_to(self.rect.x, self.rect.y + self.speed)
        if self.rect.y >= GAME_HEIGHT + self.rect.height:
            self.free = True


class Explosion:
    """An explosion animation stepping through its frames, then freeing itself."""

    def __init__(self) -> None:
        self.frames = BOMB_FRAME_PATHS
        self.x = 0
        self.y = 0
        self.free = True
        self.counter = 0
        self.index = 0

    def update(self) -> None:
        """Advance the frame every BOMB_INTERVAL calls; free after the last frame."""
        if self.free:
            return
        self.counter += 1
        if self.counter < BOMB_INTERVAL:
            return
        self.counter = 0
        self.index += 1
        if self.index > BOMB_MAX - 1:
            self.index = 0
            self.free = True

    @property
    def frame(self) -> str:
        """Path of the frame currently shown."""
        return self.frames[self.index]


class ScrollingMap:
    """A background drawn twice, one copy above the other, scrolling downward."""

    def __init__(self, scroll_speed: int = MAP_SCROLL_SPEED) -> None:
        self.y = -GAME_HEIGHT
        self.scroll_speed = scroll_speed

    def advance(self) -> None:
        """Scroll one step, wrapping back once the first copy reaches the top."""
        self.y += self.scroll_speed
        if self.y >= 0:
            self.y = -GAME_HEIGHT

    @property
    def second_y(self) -> int:
        """Y coordinate of the second copy of the background."""
        return self.y + GAME_HEIGHT


class HeroWarplane:
    """The player's plane with its magazine of bullets."""

    def __init__(
        self,
        width: int,
        height: int,
        bullet_width: int,
        bullet_height: int,
    ) -> None:
        self.rect = Rect(
            int(GAME_WIDTH * 0.5 - width * 0.5),
            GAME_HEIGHT - height - 50,
            width,
            height,
        )
        self.bullets = [Bullet(bullet_width, bullet_height) for _ in range(BULLET_NUM)]
        self.counter = 0

    def set_position(self, x: int, y: int) -> None:
        """Move the plane's top-left corner."""
        self.rect.move_to(x, y)

    def shoot(self) -> Bullet | None:
        """Count one frame; every BULLET_INTERVAL frames fire the first free bullet."""
        self.counter += 1
        if self.counter < BULLET_INTERVAL:
            return None
        self.counter = 0
        bullet = next((b for b in self.bullets if b.free), None)
        if bullet is not None:
            bullet.free = False
            bullet.rect.move_to(
                int(self.rect.x + self.rect.width * 0.5 - 10),
                self.rect.y - 25,
            )
        return bullet