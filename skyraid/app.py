"""Window, input, drawing and sound around a GameScene."""

from __future__ import annotations

import argparse
import random
import time
from pathlib import Path

from skyraid.config import (
    BOMB_FRAME_PATHS,
    BULLET_PATH,
    ENEMY_PATH,
    GAME_HEIGHT,
    GAME_ICON,
    GAME_RATE,
    GAME_TITLE,
    GAME_WIDTH,
    HERO_PATH,
    KILLSHOT_COOLDOWN,
    MAP_PATH,
    SOUND_BACKGROUND,
    SOUND_BOMB,
)
from skyraid.scene import Direction, GameScene

_BLINK_DURATION_MS = 300
_BLINK_KEYFRAMES = ((0.0, 1.0), (0.2, 0.2), (0.5, 1.0), (0.7, 0.2), (1.0, 1.0))


def hud_lines(scene: GameScene, now_ms: int) -> list[str]:
    """Text shown over the game: score, high score, misses and killshot state."""
    lines = [
        f"Score: {scene.score}",
        f"High Score: {scene.high_score}",
        f"Missed: {scene.enemies_passed}/{scene.pass_limit}",
    ]
    left = scene.killshot_cooldown_left(now_ms)
    if left > 0:
        lines.append(f"Killshot 冷却: {(left + 999) // 1000}秒")
    else:
        lines.append("Killshot 已就绪，按 1 使用")
    return lines


def cooldown_bar_width(scene: GameScene, now_ms: int, bar_width: int) -> int:
    """Filled width of the killshot cooldown bar; the full width once ready."""
    if bar_width < 0:
        raise ValueError("bar width must not be negative")
    left = scene.killshot_cooldown_left(now_ms)
    if left <= 0:
        return bar_width
    return bar_width * (KILLSHOT_COOLDOWN - left) // KILLSHOT_COOLDOWN


def _blink_opacity(elapsed_ms: float) -> float:
    """Window opacity during the killshot flash, interpolated between keyframes."""
    if elapsed_ms < 0 or elapsed_ms >= _BLINK_DURATION_MS:
        return 1.0
    t = elapsed_ms / _BLINK_DURATION_MS
    for (t0, v0), (t1, v1) in zip(_BLINK_KEYFRAMES, _BLINK_KEYFRAMES[1:]):
        if t0 <= t <= t1:
            return v0 + (v1 - v0) * (t - t0) / (t1 - t0)
    return 1.0


def _now_ms() -> int:
    return int(time.time() * 1000)


class _Assets:
    """Images and sounds, with plain coloured stand-ins for missing pictures."""

    def __init__(self, pygame, root: Path) -> None:
        self._pygame = pygame
        self._root = root
        self.map = self._image(MAP_PATH, (GAME_WIDTH, GAME_HEIGHT), (20, 30, 60))
        self.hero = self._image(HERO_PATH, (100, 100), (60, 200, 90))
        self.bullet = self._image(BULLET_PATH, (10, 20), (255, 230, 80))
        self.enemy = self._image(ENEMY_PATH, (60, 60), (210, 60, 60))
        self.bomb_frames = {
            path: self._image(path, (60, 60), (255, 140 - 15 * n, 0))
            for n, path in enumerate(BOMB_FRAME_PATHS)
        }
        icon_path = root / GAME_ICON
        self.icon = self._try_load(icon_path)
        self.background_sound = None
        self.explosion_sound = None
        try:
            pygame.mixer.init()
        except pygame.error:
            return
        self.background_sound = self._sound(SOUND_BACKGROUND)
        self.explosion_sound = self._sound(SOUND_BOMB)

    def _try_load(self, path: Path):
        if not path.is_file():
            return None
        try:
            return self._pygame.image.load(str(path))
        except self._pygame.error:
            return None

    def _image(self, relative: str, size: tuple[int, int], colour):
        loaded = self._try_load(self._root / relative)
        if loaded is not None:
            return loaded
        surface = self._pygame.Surface(size)
        surface.fill(colour)
        return surface

    def _sound(self, relative: str):
        path = self._root / relative
        if not path.is_file():
            return None
        try:
            sound = self._pygame.mixer.Sound(str(path))
        except self._pygame.error:
            return None
        sound.set_volume(0.5)
        return sound


class _Game:
    """The running window: event handling, frame stepping and drawing."""

    _KEYS = {}

    def __init__(self, pygame, assets: _Assets, seed: int | None) -> None:
        self.pg = pygame
        self.assets = assets
        self.keys = {
            pygame.K_LEFT: Direction.LEFT,
            pygame.K_RIGHT: Direction.RIGHT,
            pygame.K_UP: Direction.UP,
            pygame.K_DOWN: Direction.DOWN,
        }
        self.scene = GameScene(
            hero_size=assets.hero.get_size(),
            bullet_size=assets.bullet.get_size(),
            enemy_size=assets.enemy.get_width(),
            rng=random.Random(seed),
            on_explosion=self._play_explosion,
        )
        self.font_large = pygame.font.SysFont("Arial", 18, bold=True)
        self.font_small = pygame.font.SysFont("Arial", 12)
        self.font_small_bold = pygame.font.SysFont("Arial", 12, bold=True)
        self.blink_started: int | None = None
        self.running = True

    def _play_explosion(self) -> None:
        if self.assets.explosion_sound is not None:
            self.assets.explosion_sound.play()

    def handle(self, event) -> None:
        pg = self.pg
        if event.type == pg.QUIT:
            self.running = False
        elif event.type == pg.KEYDOWN:
            if self.scene.game_over:
                if event.key in (pg.K_r, pg.K_RETURN, pg.K_KP_ENTER):
                    self.scene.restart()
                elif event.key in (pg.K_ESCAPE, pg.K_q):
                    self.running = False
                return
            if event.key in self.keys:
                self.scene.press(self.keys[event.key])
            elif event.key == pg.K_1:
                now = _now_ms()
                if self.scene.killshot(now):
                    self.blink_started = now
        elif event.type == pg.KEYUP:
            if event.key in self.keys:
                self.scene.release(self.keys[event.key])
        elif event.type == pg.MOUSEMOTION:
            if any(event.buttons) and not self.scene.game_over:
                self.scene.move_to_pointer(*event.pos)

    def step(self) -> None:
        if not self.scene.game_over:
            self.scene.tick()

    def _text(self, font, text: str, colour, x: int, baseline: int) -> None:
        surface = font.render(text, True, colour)
        self.screen.blit(surface, (x, baseline - font.get_ascent()))

    def draw(self, screen) -> None:
        self.screen = screen
        scene = self.scene
        assets = self.assets
        screen.blit(assets.map, (0, scene.map.y))
        screen.blit(assets.map, (0, scene.map.second_y))
        screen.blit(assets.hero, (scene.hero.rect.x, scene.hero.rect.y))
        for bullet in scene.hero.bullets:
            if not bullet.free:
                screen.blit(assets.bullet, (bullet.rect.x, bullet.rect.y))
        for enemy in scene.enemies:
            if not enemy.free:
                screen.blit(assets.enemy, (enemy.rect.x, enemy.rect.y))
        for bomb in scene.bombs:
            if not bomb.free:
                screen.blit(assets.bomb_frames[bomb.frame], (bomb.x, bomb.y))

        now = _now_ms()
        score, high, missed, killshot = hud_lines(scene, now)
        yellow = (255, 255, 0)
        self._text(self.font_large, score, yellow, 20, 40)
        self._text(self.font_large, high, yellow, 20, 70)
        self._text(self.font_large, missed, yellow, 20, 100)

        if scene.killshot_cooldown_left(now) > 0:
            bar_width = GAME_WIDTH - 40
            bar_height = 18
            filled = cooldown_bar_width(scene, now, bar_width)
            self.pg.draw.rect(screen, (180, 180, 180), (20, 10, bar_width, bar_height))
            self.pg.draw.rect(screen, (0, 180, 255), (20, 10, filled, bar_height))
            self._text(self.font_small, killshot, (0, 0, 0), 20 + bar_width // 2 - 60, 24)
        else:
            self._text(self.font_small_bold, killshot, (0, 255, 0), 20, 24)

        if scene.game_over:
            self._draw_game_over(screen)

        if self.blink_started is not None:
            opacity = _blink_opacity(now - self.blink_started)
            if opacity >= 1.0 and now - self.blink_started >= _BLINK_DURATION_MS:
                self.blink_started = None
            else:
                shade = self.pg.Surface((GAME_WIDTH, GAME_HEIGHT))
                shade.set_alpha(int((1.0 - opacity) * 255))
                shade.fill((0, 0, 0))
                screen.blit(shade, (0, 0))

    def _draw_game_over(self, screen) -> None:
        shade = self.pg.Surface((GAME_WIDTH, GAME_HEIGHT))
        shade.set_alpha(160)
        shade.fill((0, 0, 0))
        screen.blit(shade, (0, 0))
        lines = (
            "Game Over",
            "游戏失败！",
            f"当前分数: {self.scene.score}",
            f"最高分: {self.scene.high_score}",
            "R / Enter: Retry    Esc: Close",
        )
        top = GAME_HEIGHT // 2 - 80
        for n, line in enumerate(lines):
            surface = self.font_large.render(line, True, (255, 255, 255))
            x = (GAME_WIDTH - surface.get_width()) // 2
            screen.blit(surface, (x, top + n * 32))


def _run(assets_root: Path, seed: int | None) -> int:
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((GAME_WIDTH, GAME_HEIGHT))
        pygame.display.set_caption(GAME_TITLE)
        assets = _Assets(pygame, assets_root)
        if assets.icon is not None:
            pygame.display.set_icon(assets.icon)
        game = _Game(pygame, assets, seed)
        if assets.background_sound is not None:
            assets.background_sound.play(loops=-1)
        clock = pygame.time.Clock()
        while game.running:
            for event in pygame.event.get():
                game.handle(event)
            if not game.running:
                break
            game.step()
            game.draw(screen)
            pygame.display.flip()
            clock.tick(1000 // GAME_RATE)
    finally:
        pygame.quit()
    return 0


def main(argv: list[str] | None = None) -> int:
    """Open the game window and play until it is closed."""
    parser = argparse.ArgumentParser(prog="skyraid", description=GAME_TITLE)
    parser.add_argument(
        "--assets",
        type=Path,
        default=Path.cwd(),
        help="directory holding the res/ folder of pictures and sounds",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for enemy placement")
    args = parser.parse_args(argv)
    return _run(args.assets, args.seed)


if __name__ == "__main__":
    raise SystemExit(main())