"""
键盘输入适配 - 把 pygame 按键事件翻译为会话命令

方向键按下时设置行走意图，松开同一方向时清除，所以按住方向键
会在每一帧重复调用 walk。
"""

from typing import Dict, Optional

import pygame

from .api import Direction
from .session import GameSession


KEY_DIRECTIONS: Dict[int, str] = {
    pygame.K_UP: Direction.Up,
    pygame.K_DOWN: Direction.Down,
    pygame.K_LEFT: Direction.Left,
    pygame.K_RIGHT: Direction.Right,
    pygame.K_w: Direction.Up,
    pygame.K_s: Direction.Down,
    pygame.K_a: Direction.Left,
    pygame.K_d: Direction.Right,
}

KEY_CUT = pygame.K_SPACE
KEY_PAUSE = pygame.K_ESCAPE
KEY_NEXT = pygame.K_RETURN


class InputAdapter:
    """处理一个 pygame 事件，返回执行的命令名（未处理返回 None）"""

    def __init__(self, session: GameSession):
        self.session = session

    def handle_event(self, event: pygame.event.Event) -> Optional[str]:
        if event.type == pygame.KEYDOWN:
            return self._key_down(event.key)
        if event.type == pygame.KEYUP:
            return self._key_up(event.key)
        return None

    def _key_down(self, key: int) -> Optional[str]:
        self.session.key_pressed()
        if key in KEY_DIRECTIONS:
            self.session.submit_direction(KEY_DIRECTIONS[key])
            return "walk"
        if key == KEY_CUT:
            self.session.submit_cut()
            return "cut"
        if key == KEY_PAUSE:
            self.session.toggle_pause()
            return "pause"
        if key == KEY_NEXT:
            return "next"
        return None

    def _key_up(self, key: int) -> Optional[str]:
        direction = KEY_DIRECTIONS.get(key)
        if direction is not None and self.session.walking == direction:
            self.session.submit_direction(None)
            return "stop"
        return None
