"""
渲染 - 根据引擎快照绘制地图、玩家、背包、倒计时与对话
有素材时贴图，没有时用程序绘制
"""

from typing import Dict, Optional, Tuple

import pygame

from .api import AxeColor, CutState, DIR_DELTA, GameState, Snapshot, TileKind, TileView
from .assets import load_first_image, load_font

COLORS = {
    "background": (30, 30, 35),
    "grass": (76, 153, 0),
    "grass_dark": (66, 133, 0),
    "stump": (120, 85, 50),
    "finish": (240, 240, 240),
    "coin": (255, 210, 60),
    "player": (255, 200, 50),
    "player_outline": (255, 255, 255),
    "ui_bg": (50, 50, 55),
    "ui_text": (220, 220, 220),
    "dialog_bg": (20, 20, 25),
}

AXE_RGB: Dict[str, Tuple[int, int, int]] = {
    AxeColor.Red: (200, 50, 50),
    AxeColor.Blue: (50, 90, 210),
    AxeColor.Green: (30, 110, 40),
    AxeColor.Yellow: (230, 200, 40),
}

HUD_HEIGHT = 48


class Renderer:
    """把 Snapshot 画到 pygame Surface 上"""

    def __init__(self, tile_size: int = 64):
        self.tile_size = tile_size
        self.font = load_font(24)
        self.font_large = load_font(48)

    def screen_size(self, snap: Snapshot) -> Tuple[int, int]:
        return snap.width * self.tile_size, snap.height * self.tile_size + HUD_HEIGHT

    def render(self, screen: pygame.Surface, snap: Snapshot, has_next: bool = False) -> None:
        screen.fill(COLORS["background"])
        for row in snap.tiles:
            for tile in row:
                self._render_tile(screen, tile, snap.game_state)
        if not snap.finished:
            self._render_player(screen, snap)
        self._render_hud(screen, snap)
        if snap.player.message:
            self._render_message(screen, snap.player.message)
        if snap.game_state == GameState.Paused:
            self._render_overlay(screen, "Paused", "Esc to resume")
        elif snap.finished:
            self._render_overlay(screen, "Finished!", "Enter for the next level" if has_next else "Enter to quit")

    def _tile_rect(self, x: int, y: int) -> pygame.Rect:
        ts = self.tile_size
        return pygame.Rect(x * ts, y * ts + HUD_HEIGHT, ts, ts)

    def _render_tile(self, screen: pygame.Surface, tile: TileView, game_state: str) -> None:
        ts = self.tile_size
        rect = self._tile_rect(tile.x, tile.y)
        grass = load_first_image(("grass.png",), "img", ts)
        if grass is not None:
            screen.blit(grass, rect.topleft)
        else:
            color = COLORS["grass"] if (tile.x + tile.y) % 2 == 0 else COLORS["grass_dark"]
            pygame.draw.rect(screen, color, rect)

        center = rect.center
        if tile.kind == TileKind.Tree:
            self._render_tree(screen, tile, rect)
        elif tile.kind == TileKind.Axe:
            rgb = AXE_RGB.get(tile.color, COLORS["ui_text"])
            pygame.draw.line(screen, COLORS["stump"], (rect.x + ts // 4, rect.bottom - ts // 4),
                             (rect.right - ts // 4, rect.y + ts // 4), max(2, ts // 12))
            pygame.draw.circle(screen, rgb, (rect.right - ts // 3, rect.y + ts // 3), ts // 7)
        elif tile.kind == TileKind.Finish:
            pole_x = rect.x + ts // 3
            pygame.draw.line(screen, COLORS["finish"], (pole_x, rect.y + ts // 6), (pole_x, rect.bottom - ts // 6), 3)
            pygame.draw.polygon(screen, (220, 40, 40), [
                (pole_x, rect.y + ts // 6), (pole_x + ts // 3, rect.y + ts // 4), (pole_x, rect.y + ts // 3),
            ])
        elif tile.kind == TileKind.Empty and tile.has_coin and game_state == GameState.Bonus:
            pygame.draw.circle(screen, COLORS["coin"], center, ts // 6)

    def _render_tree(self, screen: pygame.Surface, tile: TileView, rect: pygame.Rect) -> None:
        ts = self.tile_size
        if tile.cut_state == CutState.Cut:
            pygame.draw.circle(screen, COLORS["stump"], rect.center, ts // 6)
            return
        sprite = load_first_image((f"tree_{tile.color}.png",), "img", ts)
        if sprite is not None:
            screen.blit(sprite, rect.topleft)
        else:
            rgb = AXE_RGB.get(tile.color, COLORS["grass"])
            pygame.draw.rect(screen, COLORS["stump"], (rect.centerx - ts // 12, rect.centery, ts // 6, ts // 3))
            pygame.draw.circle(screen, rgb, (rect.centerx, rect.centery - ts // 10), ts // 3)
        if tile.cut_state == CutState.BeingCut:
            # 砍伐中：树冠上叠加闪烁边框
            blink = (pygame.time.get_ticks() // 100) % 2
            if blink:
                pygame.draw.circle(screen, COLORS["player_outline"], (rect.centerx, rect.centery - ts // 10), ts // 3, 2)

    def _render_player(self, screen: pygame.Surface, snap: Snapshot) -> None:
        """按移动进度在起点与终点之间插值绘制玩家"""
        p = snap.player
        ts = self.tile_size
        fx = p.from_x + (p.x - p.from_x) * p.progress
        fy = p.from_y + (p.y - p.from_y) * p.progress
        cx = int(fx * ts + ts // 2)
        cy = int(fy * ts + ts // 2 + HUD_HEIGHT)
        r = ts // 2 - 6
        pygame.draw.circle(screen, COLORS["player_outline"], (cx, cy), r + 2)
        pygame.draw.circle(screen, COLORS["player"], (cx, cy), r)
        # 朝向指示
        dx, dy = DIR_DELTA[p.facing]
        tip = (cx + int(dx * r * 0.8), cy + int(dy * r * 0.8))
        pygame.draw.circle(screen, COLORS["background"], tip, max(2, r // 5))

    def _render_hud(self, screen: pygame.Surface, snap: Snapshot) -> None:
        """顶部信息栏：倒计时、金币、背包"""
        w = screen.get_width()
        pygame.draw.rect(screen, COLORS["ui_bg"], (0, 0, w, HUD_HEIGHT))
        x = 10
        if snap.remaining_seconds is not None:
            surf = self.font.render(f"Time {snap.remaining_seconds}", True, COLORS["ui_text"])
            screen.blit(surf, (x, (HUD_HEIGHT - surf.get_height()) // 2))
            x += surf.get_width() + 24
        if snap.game_state == GameState.Bonus or snap.coins:
            pygame.draw.circle(screen, COLORS["coin"], (x + 10, HUD_HEIGHT // 2), 9)
            surf = self.font.render(f"x {snap.coins}", True, COLORS["ui_text"])
            screen.blit(surf, (x + 24, (HUD_HEIGHT - surf.get_height()) // 2))

        # 右上角背包
        slot = pygame.Rect(w - HUD_HEIGHT + 4, 4, HUD_HEIGHT - 8, HUD_HEIGHT - 8)
        pygame.draw.rect(screen, COLORS["stump"], slot, border_radius=6)
        if snap.player.held_axe:
            rgb = AXE_RGB.get(snap.player.held_axe, COLORS["ui_text"])
            pygame.draw.line(screen, COLORS["ui_text"], slot.bottomleft, slot.topright, 3)
            pygame.draw.circle(screen, rgb, (slot.right - 10, slot.top + 10), 7)

    def _render_message(self, screen: pygame.Surface, message: str) -> None:
        w, h = screen.get_size()
        surf = self.font.render(message, True, COLORS["ui_text"])
        box = pygame.Rect(10, h - surf.get_height() - 30, w - 20, surf.get_height() + 20)
        pygame.draw.rect(screen, COLORS["dialog_bg"], box, border_radius=8)
        pygame.draw.rect(screen, COLORS["ui_text"], box, 2, border_radius=8)
        screen.blit(surf, (box.x + 12, box.y + 10))

    def _render_overlay(self, screen: pygame.Surface, title: str, hint: Optional[str] = None) -> None:
        w, h = screen.get_size()
        overlay = pygame.Surface((w, h))
        overlay.set_alpha(160)
        overlay.fill((15, 18, 22))
        screen.blit(overlay, (0, 0))
        t = self.font_large.render(title, True, (255, 230, 140))
        screen.blit(t, (w // 2 - t.get_width() // 2, h // 2 - t.get_height()))
        if hint:
            s = self.font.render(hint, True, COLORS["ui_text"])
            screen.blit(s, (w // 2 - s.get_width() // 2, h // 2 + 10))
