"""
view.py — View layer.

Draws one frame from a GameModel snapshot:
  - Pre-rendered water gradient (built once, blitted every frame)
  - Slow caustic bands driven by the model's elapsed time
  - Current-direction arrow in the top-right corner
  - Fish in painter's order: food, enemies, player on top
  - Decorative bubbles rising on their own clock
  - HUD panel with score, best and lives
  - Idle / paused / game-over overlays

Public API:
    GameView(screen)    — bind to a pygame surface
    view.render(model, frame_dt)  — draw the current frame
"""

import math
import random

import pygame

from .config import (
    WIDTH, HEIGHT, PANEL_H, ARENA_W, ARENA_H, OFFSET_X, OFFSET_Y, FPS,
    WATER_TOP, WATER_DEEP, CAUSTIC_COL, CURRENT_COL,
    EYE_WHITE, EYE_PUPIL, MOUTH_COL, BUBBLE_COL,
    UI_COL, SCORE_COL, LIVES_COL, PLAYER_UI, PANEL_BG, BORDER_COL,
    BUBBLE_COUNT,
    STATE_IDLE, STATE_OVER, STATE_PAUSED,
)
from .model import GameModel, Fish

_BODY_POINTS = 24


# ─────────────────────── colour helpers ──────────────────────────
def _lerp_color(c1: tuple, c2: tuple, t: float) -> tuple:
    t = max(0.0, min(1.0, t))
    return tuple(int(c1[i] + (c2[i] - c1[i]) * t) for i in range(3))


def _with_alpha(color: tuple, alpha: int) -> tuple:
    return (*color[:3], max(0, min(255, alpha)))


def _brighten(color: tuple, factor: float) -> tuple:
    return tuple(min(255, int(c * factor)) for c in color[:3])


def _hsl(h: float, s: float, l: float) -> pygame.Color:
    color = pygame.Color(0, 0, 0)
    color.hsla = (h % 360, max(0, min(100, s)), max(0, min(100, l)), 100)
    return color


# ─────────────────────────── Bubble ──────────────────────────────
class Bubble:
    """Decorative bubble; loops bottom to top forever."""

    def __init__(self):
        self.x = random.uniform(0, WIDTH)
        self.size = random.uniform(3, 8)
        self.period = random.uniform(6, 16)      # seconds per rise
        self.delay = random.uniform(0, 8)
        self.age: float = 0.0

    def update(self, dt: float) -> None:
        self.age += dt

    @property
    def visible(self) -> bool:
        return self.age >= self.delay

    @property
    def progress(self) -> float:
        return ((self.age - self.delay) % self.period) / self.period


# ─────────────────────────── GameView ────────────────────────────
class GameView:
    """Renders the complete game frame from a GameModel snapshot."""

    # ── Construction ─────────────────────────────────────────────
    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self._init_fonts()
        self._build_static_surfaces()
        self.bubbles = [Bubble() for _ in range(BUBBLE_COUNT)]

        # Score rack-up animation state
        self._disp_score: float = 0.0

        # For overlay title pulse animation
        self._anim_tick: int = 0

    # ── Main entry ───────────────────────────────────────────────
    def render(self, model: GameModel, frame_dt: float = 1.0 / FPS) -> None:
        """Draw one frame; `frame_dt` is the real seconds since the last one."""
        self._anim_tick += 1
        for b in self.bubbles:
            b.update(frame_dt)

        self._disp_score += (model.score - self._disp_score) * 0.25
        if abs(model.score - self._disp_score) < 0.5:
            self._disp_score = float(model.score)

        # ── Base layers
        self.screen.fill(PANEL_BG)
        self.screen.blit(self._water_surf, (OFFSET_X, OFFSET_Y))
        self._draw_caustics(model.elapsed)
        self._draw_current_arrow(model)

        # ── Game content, painter's order
        if model.state != STATE_IDLE:
            for fish in model.world.all_fish():
                self._draw_fish(fish)

        self._draw_bubbles()

        # ── Chrome
        self._draw_border()
        self._draw_panel(model)

        # ── State overlays
        if model.state == STATE_IDLE:
            self._draw_idle_overlay(model)
        elif model.state == STATE_PAUSED:
            self._draw_paused_overlay()
        elif model.state == STATE_OVER:
            self._draw_game_over_overlay(model)

        pygame.display.flip()

    # ── Static surface pre-builds ─────────────────────────────────
    def _build_static_surfaces(self) -> None:
        # Vertical water gradient
        self._water_surf = pygame.Surface((ARENA_W, ARENA_H))
        for y in range(ARENA_H):
            color = _lerp_color(WATER_TOP, WATER_DEEP, y / max(1, ARENA_H - 1))
            pygame.draw.line(self._water_surf, color, (0, y), (ARENA_W, y))

        # Edge vignette — darkens borders of the arena
        edge = pygame.Surface((ARENA_W, ARENA_H), pygame.SRCALPHA)
        for i in range(28):
            a = int(55 * (1 - i / 28) ** 1.8)
            pygame.draw.rect(edge, (0, 0, 0, a),
                             (i, i, ARENA_W - 2 * i, ARENA_H - 2 * i), 1)
        self._edge_surf = edge

    # ── Water effects ────────────────────────────────────────────
    def _draw_caustics(self, elapsed: float) -> None:
        t = elapsed * 0.001
        layer = pygame.Surface((ARENA_W, ARENA_H), pygame.SRCALPHA)
        for i in range(3):
            cy = (math.sin(t * (0.6 + i * 0.1)) * 0.5 + 0.5) * ARENA_H
            half_w = ARENA_W * 0.6
            half_h = 60 + i * 20
            pygame.draw.ellipse(
                layer, _with_alpha(CAUSTIC_COL, 20),
                (ARENA_W * 0.5 - half_w, cy - half_h, half_w * 2, half_h * 2),
            )
        self.screen.blit(layer, (OFFSET_X, OFFSET_Y))

    def _draw_current_arrow(self, model: GameModel) -> None:
        angle = model.world.current.angle
        ox = OFFSET_X + ARENA_W - 80
        oy = OFFSET_Y + 40
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        pts = [
            (ox + px * cos_a - py * sin_a, oy + px * sin_a + py * cos_a)
            for px, py in ((0, -8), (40, 0), (0, 8))
        ]
        layer = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
        pygame.draw.polygon(layer, _with_alpha(CURRENT_COL, 46), pts)
        self.screen.blit(layer, (0, 0))

    def _draw_bubbles(self) -> None:
        for b in self.bubbles:
            if not b.visible:
                continue
            y = HEIGHT + b.size - b.progress * (HEIGHT + 2 * b.size)
            x = b.x + math.sin(b.age * 1.3 + b.size) * 6
            r = max(1, int(b.size / 2))
            alpha = int(140 * (1 - b.progress * 0.6))
            s = pygame.Surface((r * 2 + 2, r * 2 + 2), pygame.SRCALPHA)
            pygame.draw.circle(s, _with_alpha(BUBBLE_COL, alpha), (r + 1, r + 1), r, 1)
            self.screen.blit(s, (int(x) - r - 1, int(y) - r - 1))

    # ── Fish ─────────────────────────────────────────────────────
    def _draw_fish(self, fish: Fish) -> None:
        heading = math.atan2(fish.vy, fish.vx)
        cos_a, sin_a = math.cos(heading), math.sin(heading)
        ox, oy = OFFSET_X + fish.x, OFFSET_Y + fish.y
        r = fish.radius
        body_len = r * 2.2

        def to_screen(px: float, py: float) -> tuple:
            return (ox + px * cos_a - py * sin_a, oy + px * sin_a + py * cos_a)

        body = [
            to_screen(body_len * math.cos(a), r * 1.2 * math.sin(a))
            for a in (math.tau * k / _BODY_POINTS for k in range(_BODY_POINTS))
        ]
        tail = [
            to_screen(-body_len, 0),
            to_screen(-body_len - r * 0.8, -r * 0.6),
            to_screen(-body_len - r * 1.2, 0),
            to_screen(-body_len - r * 0.8, r * 0.6),
        ]
        # Lighter upper flank stands in for the body gradient
        flank = [
            to_screen(body_len * 0.8 * math.cos(a), -r * 0.5 + r * 0.55 * math.sin(a))
            for a in (math.tau * k / _BODY_POINTS for k in range(_BODY_POINTS))
        ]

        pygame.draw.polygon(self.screen, _hsl(fish.hue, fish.sat, fish.light + 5), tail)
        pygame.draw.polygon(self.screen, _hsl(fish.hue, fish.sat, fish.light - 4), body)
        pygame.draw.polygon(self.screen, _hsl(fish.hue, fish.sat, fish.light + 8), flank)
        pygame.draw.polygon(self.screen, (0, 0, 0), body, 1)

        # Eye
        pygame.draw.circle(self.screen, EYE_WHITE, to_screen(r * 0.6, -r * 0.3),
                           max(3, r * 0.18))
        pygame.draw.circle(self.screen, EYE_PUPIL, to_screen(r * 0.8, -r * 0.3),
                           max(2, r * 0.1))

        # Mouth
        opened = fish.mouth_open * r * 0.4
        pygame.draw.line(self.screen, MOUTH_COL,
                         to_screen(r * 1.2, 0), to_screen(r * 1.2 + opened, 0),
                         max(1, int(r * 0.12)))

    # ── Border ───────────────────────────────────────────────────
    def _draw_border(self) -> None:
        self.screen.blit(self._edge_surf, (OFFSET_X, OFFSET_Y))
        pygame.draw.rect(self.screen, BORDER_COL,
                         (OFFSET_X, OFFSET_Y, ARENA_W, ARENA_H), 1)

    # ── HUD Panel ─────────────────────────────────────────────────
    def _draw_panel(self, model: GameModel) -> None:
        pygame.draw.rect(self.screen, PANEL_BG, (0, 0, WIDTH, PANEL_H))
        pygame.draw.line(self.screen, BORDER_COL,
                         (0, PANEL_H - 1), (WIDTH, PANEL_H - 1), 1)

        fields = [
            ("SCORE", str(int(self._disp_score)), SCORE_COL),
            ("BEST",  str(model.best),            PLAYER_UI),
            ("LIVES", str(model.lives),           LIVES_COL),
        ]
        for i, (label, value, color) in enumerate(fields):
            x = 18 + i * 130
            self.screen.blit(self.font_small.render(label, True, UI_COL), (x, 6))
            self.screen.blit(self.font_big.render(value, True, color), (x, 22))

        wave = self.font_small.render(f"WAVE {model.wave + 1}", True, UI_COL)
        self.screen.blit(wave, wave.get_rect(topright=(WIDTH - 18, 8)))

        if model.state == STATE_PAUSED:
            badge = self.font_tiny.render("[ PAUSED ]", True, SCORE_COL)
            self.screen.blit(badge, badge.get_rect(topright=(WIDTH - 18, 32)))

    # ── Overlay infrastructure ────────────────────────────────────
    def _draw_overlay_base(self) -> None:
        surf = pygame.Surface((ARENA_W, ARENA_H), pygame.SRCALPHA)
        surf.fill((2, 12, 22, 200))
        self.screen.blit(surf, (OFFSET_X, OFFSET_Y))
        pygame.draw.rect(self.screen, _lerp_color(PANEL_BG, UI_COL, 0.12),
                         (OFFSET_X + 8, OFFSET_Y + 8, ARENA_W - 16, ARENA_H - 16), 1)

    def _draw_animated_title(self, title: str, color: tuple,
                             cy: int, font: pygame.font.Font) -> int:
        pulse = 0.82 + 0.18 * math.sin(self._anim_tick * 0.05)
        bright = _brighten(color, pulse)
        surf = font.render(title, True, bright)
        gw, gh = surf.get_width() + 50, surf.get_height() + 16
        glow = pygame.Surface((gw, gh), pygame.SRCALPHA)
        glow.fill(_with_alpha(color, int(35 * pulse)))
        self.screen.blit(glow, (WIDTH // 2 - gw // 2, cy - 8))
        self.screen.blit(surf, surf.get_rect(center=(WIDTH // 2, cy + surf.get_height() // 2)))
        return cy + surf.get_height() + 14

    def _draw_text_line(self, text: str, color: tuple,
                        cy: int, font: pygame.font.Font) -> int:
        if not text:
            return cy + 10
        surf = font.render(text, True, color)
        self.screen.blit(surf, surf.get_rect(center=(WIDTH // 2, cy)))
        return cy + surf.get_height() + 8

    def _draw_button(self, label: str, color: tuple, cy: int) -> int:
        btn_w = max(260, self.font_small.size(label)[0] + 40)
        btn_h = 38
        bx = WIDTH // 2 - btn_w // 2
        bg = pygame.Surface((btn_w, btn_h), pygame.SRCALPHA)
        bg.fill(_with_alpha(color, 22))
        self.screen.blit(bg, (bx, cy))
        pygame.draw.rect(self.screen, color, (bx, cy, btn_w, btn_h), 2, border_radius=4)
        txt = self.font_small.render(label, True, color)
        self.screen.blit(txt, txt.get_rect(center=(WIDTH // 2, cy + btn_h // 2)))
        return cy + btn_h + 10

    def _draw_controls_hint(self, cy: int) -> None:
        hints = [("WASD/ARROWS", "SWIM"), ("DRAG", "SWIM"), ("P", "PAUSE"), ("R", "RESTART")]
        total_w = len(hints) * 120
        sx = WIDTH // 2 - total_w // 2
        for i, (key, action) in enumerate(hints):
            x = sx + i * 120 + 60
            k_surf = self.font_tiny.render(key,    True, (200, 230, 255))
            a_surf = self.font_tiny.render(action, True, UI_COL)
            kw = k_surf.get_width() + 12
            kh = k_surf.get_height() + 4
            pygame.draw.rect(self.screen, (12, 40, 60),
                             (x - kw // 2, cy, kw, kh), border_radius=3)
            pygame.draw.rect(self.screen, (40, 90, 120),
                             (x - kw // 2, cy, kw, kh), 1, border_radius=3)
            self.screen.blit(k_surf, k_surf.get_rect(center=(x, cy + kh // 2)))
            self.screen.blit(a_surf, a_surf.get_rect(center=(x, cy + kh + 10)))

    # ── State overlays ────────────────────────────────────────────
    def _draw_idle_overlay(self, model: GameModel) -> None:
        self._draw_overlay_base()
        cy = OFFSET_Y + ARENA_H // 2 - 130
        cy = self._draw_animated_title("FISH FEAST", PLAYER_UI, cy, self.font_title)
        cy += 4
        cy = self._draw_text_line("EAT SMALLER FISH  ·  AVOID BIGGER ONES", UI_COL, cy, self.font_med)
        if model.best > 0:
            cy = self._draw_text_line(f"BEST: {model.best}", SCORE_COL, cy, self.font_small)
        cy += 18
        cy = self._draw_button("ENTER / CLICK — START", PLAYER_UI, cy)
        cy += 6
        self._draw_controls_hint(cy)

    def _draw_paused_overlay(self) -> None:
        self._draw_overlay_base()
        cy = OFFSET_Y + ARENA_H // 2 - 36
        cy = self._draw_animated_title("PAUSED", SCORE_COL, cy, self.font_title)
        cy += 6
        self._draw_text_line("PRESS  P  TO RESUME", UI_COL, cy, self.font_med)

    def _draw_game_over_overlay(self, model: GameModel) -> None:
        self._draw_overlay_base()
        cy = OFFSET_Y + ARENA_H // 2 - 110
        cy = self._draw_animated_title("GAME OVER", LIVES_COL, cy, self.font_title)
        cy += 6
        for line in self.final_score_text(model).splitlines():
            cy = self._draw_text_line(line, SCORE_COL, cy, self.font_med)
        if model.score > 0 and model.score >= model.best:
            cy = self._draw_text_line("★  NEW HIGH SCORE  ★", SCORE_COL, cy, self.font_small)
        cy += 14
        self._draw_button("R / ENTER — PLAY AGAIN", LIVES_COL, cy)

    @staticmethod
    def final_score_text(model: GameModel) -> str:
        return f"Score: {model.score}\nBest: {model.best}"

    # ── Font init ─────────────────────────────────────────────────
    def _init_fonts(self) -> None:
        specs = [
            ("font_title", "courier", 46, True),
            ("font_big",   "courier", 24, True),
            ("font_med",   "courier", 17, False),
            ("font_small", "courier", 13, True),
            ("font_tiny",  "courier", 11, False),
        ]
        for attr, name, size, bold in specs:
            try:
                setattr(self, attr, pygame.font.SysFont(name, size, bold=bold))
            except Exception:
                setattr(self, attr, pygame.font.SysFont(None, size))
