"""
玩家 - 位置、朝向、移动冷却、手中的斧头与对话
"""

from typing import Optional

from .api import Direction


# 单步移动动画时长 (毫秒)，期间不接受新的移动
MOVE_DURATION_MS = 150


class Player:
    """伐木工"""

    def __init__(self, x: int, y: int, facing: str = Direction.Down):
        self.x = x
        self.y = y
        self.facing = facing
        self.held_axe: Optional[str] = None
        self.message = ""

        # 移动动画开始时间，None 表示静止
        self._move_started_ms: Optional[int] = None
        self._move_from = (x, y)

    @property
    def movement_in_progress(self) -> bool:
        return self._move_started_ms is not None

    def change_direction(self, direction: str) -> None:
        self.facing = direction

    def start_move(self, dx: int, dy: int, now_ms: int) -> bool:
        """开始一步移动，动画未结束时拒绝"""
        if self.movement_in_progress:
            return False
        self._move_from = (self.x, self.y)
        self.x += dx
        self.y += dy
        self._move_started_ms = now_ms
        return True

    def update(self, now_ms: int) -> None:
        """动画时长到达后结束本次移动"""
        if self._move_started_ms is not None and now_ms - self._move_started_ms >= MOVE_DURATION_MS:
            self._move_started_ms = None

    def shift_move(self, delta_ms: int) -> None:
        """把进行中的移动动画整体后移 (用于暂停恢复)"""
        if self._move_started_ms is not None:
            self._move_started_ms += delta_ms

    def move_progress(self, now_ms: int) -> float:
        """移动动画进度 0~1，静止时为 1"""
        if self._move_started_ms is None:
            return 1.0
        return min(1.0, max(0.0, (now_ms - self._move_started_ms) / MOVE_DURATION_MS))

    @property
    def move_from(self):
        return self._move_from

    def grab_axe(self, color: str) -> None:
        """拾取斧头，替换手中原有的斧头"""
        self.held_axe = color

    def say(self, text: str) -> None:
        self.message = text
