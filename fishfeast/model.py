"""
model.py — Model layer.

Owns ALL game state and rules. Zero rendering, zero input handling.
Exposes a clean API for the Controller to read/write.

Classes:
    Current     — ambient water drift vector, a pure function of time
    Fish        — one circular actor (player, enemy or food)
    World       — the player plus the enemy and food pools
    GameModel   — top-level model; session bookkeeping and the per-frame step
"""

import logging
import math
import random

from .config import (
    ARENA_W, ARENA_H, MAX_DT,
    PLAYER_HSL, START_LIVES,
    PLAYER_START_R, PLAYER_MIN_R, PLAYER_MAX_R, PLAYER_EAT_MAX_R,
    PLAYER_ACCEL, PLAYER_DRAG, BOUNCE_DAMP, KNOCKBACK_SPEED, BITE_DECAY,
    ENEMY_FLOOR, FOOD_FLOOR, INITIAL_ENEMIES, INITIAL_FOOD,
    ENEMY_SPAWN_MARGIN, ENEMY_CULL_MARGIN, FOOD_SPAWN_MARGIN,
    ENEMY_RADIUS, ENEMY_WAVE_GROWTH, FOOD_RADIUS,
    CURRENT_PLAYER, CURRENT_ENEMY, CURRENT_FOOD,
    ENEMY_HIT_SCALE, ENEMY_EAT_RATIO, FOOD_HIT_SCALE,
    WAVE_MS, WAVE_BURST,
    STATE_IDLE, STATE_PLAYING, STATE_PAUSED, STATE_OVER,
)

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round .5 away from the floor, not to the nearest even integer."""
    return int(math.floor(value + 0.5))


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def _dist2(ax: float, ay: float, bx: float, by: float) -> float:
    dx = ax - bx
    dy = ay - by
    return dx * dx + dy * dy


# ──────────────────────────── Current ────────────────────────────
class Current:
    """Smooth, bounded drift shared by every fish in a frame."""

    def __init__(self):
        self.x: float = 0.0
        self.y: float = 0.0

    def update(self, elapsed_ms: float) -> None:
        t = elapsed_ms * 0.001
        self.x = math.sin(t * 0.6) * 20 + math.sin(t * 1.7) * 10
        self.y = math.cos(t * 0.9) * 16 + math.sin(t * 1.1) * 8

    @property
    def angle(self) -> float:
        return math.atan2(self.y, self.x)

    def __repr__(self):
        return f"Current({self.x:.2f}, {self.y:.2f})"


# ───────────────────────────── Fish ──────────────────────────────
class Fish:
    """
    Pure data for one circular actor.
    Spawn operations override the default velocity and colours.
    """

    def __init__(self, x: float, y: float, radius: float, is_player: bool = False):
        self.x = x
        self.y = y
        self.radius = radius
        self.vx = random.uniform(-30, 30)
        self.vy = random.uniform(-30, 30)
        self.is_player = is_player
        if is_player:
            self.hue, self.sat, self.light = PLAYER_HSL
        else:
            self.hue = random.uniform(180, 230)
            self.sat = random.uniform(50, 70)
            self.light = random.uniform(45, 65)
        self.mouth_open: float = 0.0

    @property
    def size(self) -> float:
        return math.pi * self.radius * self.radius

    def drift(self, current: Current, share: float, dt: float) -> None:
        self.vx += current.x * share * dt
        self.vy += current.y * share * dt

    def integrate(self, dt: float) -> None:
        self.x += self.vx * dt
        self.y += self.vy * dt

    def keep_in_bounds(self, width: float, height: float) -> None:
        """Pin to the arena edge and bounce back inward, losing speed."""
        margin = self.radius + 2
        if self.x < margin:
            self.x = margin
            self.vx = abs(self.vx) * BOUNCE_DAMP
        if self.x > width - margin:
            self.x = width - margin
            self.vx = -abs(self.vx) * BOUNCE_DAMP
        if self.y < margin:
            self.y = margin
            self.vy = abs(self.vy) * BOUNCE_DAMP
        if self.y > height - margin:
            self.y = height - margin
            self.vy = -abs(self.vy) * BOUNCE_DAMP

    def bite(self) -> None:
        self.mouth_open = 1.0

    def relax_mouth(self) -> None:
        self.mouth_open = max(0.0, self.mouth_open - BITE_DECAY)

    def __repr__(self):
        kind = "player" if self.is_player else "fish"
        return f"Fish({kind}, x={self.x:.1f}, y={self.y:.1f}, r={self.radius:.1f})"


# ───────────────────────────── World ─────────────────────────────
class World:
    """The player, the enemy and food pools, and the water current."""

    def __init__(self, width: float = ARENA_W, height: float = ARENA_H, populate: bool = True):
        self.width = width
        self.height = height
        self.player = Fish(width * 0.5, height * 0.5, PLAYER_START_R, is_player=True)
        self.enemies: list[Fish] = []
        self.food: list[Fish] = []
        self.current = Current()
        if populate:
            self.spawn_initial()

    def spawn_initial(self) -> None:
        self.enemies.clear()
        self.food.clear()
        for _ in range(INITIAL_ENEMIES):
            self.spawn_enemy()
        for _ in range(INITIAL_FOOD):
            self.spawn_food()

    def spawn_enemy(self, wave: int = 0) -> Fish:
        """Enter from the left or right edge, heading across the middle band."""
        x = -ENEMY_SPAWN_MARGIN if random.random() < 0.5 else self.width + ENEMY_SPAWN_MARGIN
        y = random.uniform(0, self.height)
        r = random.uniform(*ENEMY_RADIUS) + wave * ENEMY_WAVE_GROWTH
        fish = Fish(x, y, r)

        target_x = random.uniform(self.width * 0.2, self.width * 0.8)
        speed = random.uniform(20, 60) + r * 0.6
        dir_x = target_x - x
        dir_y = random.uniform(-100, 100)
        length = math.hypot(dir_x, dir_y) or 1
        fish.vx = (dir_x / length) * speed
        fish.vy = (dir_y / length) * speed * 0.5

        self.enemies.append(fish)
        return fish

    def spawn_food(self) -> Fish:
        x = random.uniform(FOOD_SPAWN_MARGIN, self.width - FOOD_SPAWN_MARGIN)
        y = random.uniform(FOOD_SPAWN_MARGIN, self.height - FOOD_SPAWN_MARGIN)
        fish = Fish(x, y, random.uniform(*FOOD_RADIUS))
        fish.hue = random.uniform(15, 55)
        fish.sat = 90
        fish.light = 60
        fish.vx = random.uniform(-15, 15)
        fish.vy = random.uniform(-15, 15)
        self.food.append(fish)
        return fish

    def out_of_play(self, fish: Fish) -> bool:
        m = ENEMY_CULL_MARGIN
        return (fish.x < -m or fish.x > self.width + m
                or fish.y < -m or fish.y > self.height + m)

    def all_fish(self):
        """Every fish in draw order: food, enemies, then the player."""
        yield from self.food
        yield from self.enemies
        yield self.player


# ─────────────────────────── GameModel ───────────────────────────
class GameModel:
    """
    Top-level model.  Owns the world and the session state.
    The frame driver calls update() once per frame while running.
    """

    def __init__(self, store=None, width: float = ARENA_W, height: float = ARENA_H):
        self.store = store
        self.width = width
        self.height = height
        self.state: str = STATE_IDLE
        self.best: int = store.load() if store is not None else 0
        self.score: int = 0
        self.lives: int = START_LIVES
        self.elapsed: float = 0.0
        self.wave: int = 0
        self.world: World = None
        self._reset_session()

    # ── Session flags ────────────────────────────────────────────
    @property
    def running(self) -> bool:
        return self.state in (STATE_PLAYING, STATE_PAUSED)

    @property
    def paused(self) -> bool:
        return self.state == STATE_PAUSED

    @property
    def over(self) -> bool:
        return self.state == STATE_OVER

    @property
    def player(self) -> Fish:
        return self.world.player

    # ── Public API ───────────────────────────────────────────────
    def start(self) -> None:
        if self.running and self.store is not None:
            # Abandoning a live run still counts as ending it
            self.store.save(self.best)
        self._reset_session()
        self.state = STATE_PLAYING
        logger.info("Run started (best %d)", self.best)

    def restart(self) -> None:
        self.start()

    def pause(self) -> None:
        if self.state == STATE_PLAYING:
            self.state = STATE_PAUSED

    def resume(self) -> None:
        if self.state == STATE_PAUSED:
            self.state = STATE_PLAYING

    def toggle_pause(self) -> None:
        if self.state == STATE_PLAYING:
            self.pause()
        elif self.state == STATE_PAUSED:
            self.resume()

    def update(self, dt: float, intent=None) -> None:
        """Advance the simulation by dt seconds (clamped to one frame)."""
        if self.state != STATE_PLAYING:
            return
        dt = min(max(dt, 0.0), MAX_DT)
        world = self.world

        for fish in world.all_fish():
            fish.relax_mouth()

        self.elapsed += dt * 1000
        world.current.update(self.elapsed)

        self._move_player(intent, dt)
        if not self._update_enemies(dt):
            return
        self._update_food(dt)

        # Pools refill one fish per frame
        if len(world.enemies) < ENEMY_FLOOR:
            world.spawn_enemy(self.wave)
        if len(world.food) < FOOD_FLOOR:
            world.spawn_food()

        wave = int(self.elapsed // WAVE_MS)
        if wave != self.wave:
            self.wave = wave
            logger.debug("Wave %d at %.0f ms", wave, self.elapsed)
            for _ in range(WAVE_BURST):
                world.spawn_enemy(self.wave)

        if self.score > self.best:
            self.best = self.score

    # ── Private helpers ──────────────────────────────────────────
    def _reset_session(self) -> None:
        self.score = 0
        self.lives = START_LIVES
        self.elapsed = 0.0
        self.wave = 0
        self.world = World(self.width, self.height)

    def _move_player(self, intent, dt: float) -> None:
        player = self.world.player
        if intent is not None:
            if intent.up:
                player.vy -= PLAYER_ACCEL * dt
            if intent.down:
                player.vy += PLAYER_ACCEL * dt
            if intent.left:
                player.vx -= PLAYER_ACCEL * dt
            if intent.right:
                player.vx += PLAYER_ACCEL * dt
        player.vx *= PLAYER_DRAG
        player.vy *= PLAYER_DRAG
        player.drift(self.world.current, CURRENT_PLAYER, dt)
        player.integrate(dt)
        player.keep_in_bounds(self.world.width, self.world.height)

    def _update_enemies(self, dt: float) -> bool:
        """Move, cull and collide enemies. Returns False once the run ends."""
        world = self.world
        player = world.player
        enemies = world.enemies

        for i in range(len(enemies) - 1, -1, -1):
            enemy = enemies[i]
            enemy.drift(world.current, CURRENT_ENEMY, dt)
            enemy.integrate(dt)
            if world.out_of_play(enemy):
                del enemies[i]
                continue

            reach = enemy.radius + player.radius * ENEMY_HIT_SCALE
            if _dist2(enemy.x, enemy.y, player.x, player.y) >= reach * reach:
                continue

            del enemies[i]
            if enemy.radius < player.radius * ENEMY_EAT_RATIO:
                gained = min(enemy.radius * 0.6, 8)
                player.radius = min(player.radius + gained * 0.25, PLAYER_EAT_MAX_R)
                self.score += round_half_up(10 + enemy.radius)
                player.bite()
            else:
                self.lives -= 1
                player.radius = max(PLAYER_MIN_R, player.radius * 0.8)
                player.vx = -_sign(enemy.vx) * KNOCKBACK_SPEED
                player.vy = -_sign(enemy.vy) * KNOCKBACK_SPEED
                if self.lives <= 0:
                    self._end_game()
                    return False
        return True

    def _update_food(self, dt: float) -> None:
        world = self.world
        player = world.player
        food = world.food

        for i in range(len(food) - 1, -1, -1):
            item = food[i]
            item.drift(world.current, CURRENT_FOOD, dt)
            item.integrate(dt)
            item.keep_in_bounds(world.width, world.height)

            reach = item.radius + player.radius * FOOD_HIT_SCALE
            if _dist2(item.x, item.y, player.x, player.y) < reach * reach:
                player.radius = min(player.radius + item.radius * 0.15, PLAYER_MAX_R)
                self.score += max(1, round_half_up(item.radius))
                del food[i]
                player.bite()

    def _end_game(self) -> None:
        self.lives = max(0, self.lives)
        self.best = max(self.best, self.score)
        self.state = STATE_OVER
        logger.info("Game over: score %d, best %d", self.score, self.best)
        if self.store is not None:
            self.store.save(self.best)
