"""
游戏主循环 - pygame 窗口、事件分发、逐帧推进会话、播放音效与渲染
"""

import logging
from typing import Any, Dict, Optional

import pygame

from .api import LevelMode
from .assets import SoundEffects
from .config import load_config, save_config
from .controls import InputAdapter
from .renderer import Renderer
from .session import GameSession


class GameApp:
    """单屏游戏窗口"""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config if config is not None else load_config()
        pygame.init()
        try:
            pygame.mixer.init()
        except pygame.error as e:
            logging.warning(f"Audio disabled: {e}")
        pygame.display.set_caption("Cut The Tree")
        self.fullscreen = bool(self.config.get("fullscreen", False))
        self.fps = int(self.config.get("fps", 60))
        self.clock = pygame.time.Clock()
        self.renderer = Renderer(tile_size=int(self.config.get("tile_size", 64)))
        self.sounds = SoundEffects(enabled=bool(self.config.get("sound", True)))
        self.session = GameSession()
        self.input = InputAdapter(self.session)
        self.screen: Optional[pygame.Surface] = None

    def _apply_display_mode(self) -> None:
        """按当前关卡大小设置窗口。全屏=独占全屏，窗口=固定大小"""
        snap = self.session.snapshot()
        size = self.renderer.screen_size(snap)
        if self.fullscreen:
            self.screen = pygame.display.set_mode(size, pygame.FULLSCREEN | pygame.SCALED)
        else:
            self.screen = pygame.display.set_mode(size)

    def start(self, mode: str = LevelMode.Normal, level_number: int = 1) -> None:
        self.session.new_game(mode, level_number)
        self._apply_display_mode()

    def _toggle_fullscreen(self) -> None:
        self.fullscreen = not self.fullscreen
        self._apply_display_mode()
        config = load_config()
        config["fullscreen"] = self.fullscreen
        save_config(config)

    def _on_next(self) -> bool:
        """结束画面按回车：有下一关则进入，否则退出。返回是否继续运行"""
        if not self.session.engine or not self.session.engine.finished:
            return True
        if self.session.next_level():
            self._apply_display_mode()
            return True
        return False

    def run(self) -> None:
        """主游戏循环，直到关闭窗口或最后一关结束后按回车"""
        if self.session.engine is None:
            self.start()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
                    self._toggle_fullscreen()
                else:
                    command = self.input.handle_event(event)
                    if command == "next" and not self._on_next():
                        running = False

            # 先处理输入，再推进时间
            self.session.tick()
            self.sounds.play_all(self.session.drain_effects())

            snap = self.session.snapshot()
            if self.renderer.screen_size(snap) != self.screen.get_size() and not self.fullscreen:
                # 进入金币关时地图可能变化
                self._apply_display_mode()
            self.renderer.render(self.screen, snap, has_next=self.session.has_next_level())
            pygame.display.flip()
            self.clock.tick(self.fps)
