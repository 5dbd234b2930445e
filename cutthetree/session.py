"""
游戏会话 - 对外的命令接口：开新局、暂停/继续、逐帧推进、提交方向与砍树
"""

import logging
from typing import Callable, List, Optional

from .api import GameState, LevelMode, Snapshot
from .engine import Clock, InteractionEngine, LevelGenerator
from .levels import generate_level, level_count, level_hint


class GameSession:
    """
    持有当前关卡的引擎与按住的方向键。
    暂停或结束时不再转发 walk / cut。
    """

    def __init__(
        self,
        clock: Optional[Clock] = None,
        level_generator: LevelGenerator = generate_level,
        hint_provider: Callable[[str, int], Optional[str]] = level_hint,
    ):
        self.clock = clock
        self.level_generator = level_generator
        self.hint_provider = hint_provider
        self.engine: Optional[InteractionEngine] = None
        self.walking: Optional[str] = None

    def new_game(self, mode: str, level_number: int = 1) -> InteractionEngine:
        """开始指定模式的第 level_number 关"""
        grid = self.level_generator(mode, level_number)
        self.engine = InteractionEngine(
            grid, mode, level_number, clock=self.clock, level_generator=self.level_generator,
        )
        self.walking = None
        if mode == LevelMode.Tutorial:
            hint = self.hint_provider(mode, level_number)
            if hint:
                self.engine.player.say(hint)
        logging.info(f"started {mode} level {level_number}")
        return self.engine

    def has_next_level(self) -> bool:
        e = self.engine
        return e is not None and e.level_number < level_count(e.level_mode)

    def next_level(self) -> bool:
        """当前关卡结束后进入同模式的下一关"""
        e = self.engine
        if e is None or not e.finished or not self.has_next_level():
            return False
        self.new_game(e.level_mode, e.level_number + 1)
        return True

    @property
    def state(self) -> Optional[str]:
        return self.engine.state if self.engine else None

    def _accepts_actions(self) -> bool:
        return self.engine is not None and self.engine.state in (GameState.Running, GameState.Bonus)

    # 输入

    def key_pressed(self) -> None:
        """任意按键都会清除对话"""
        if self.engine:
            self.engine.player.say("")

    def submit_direction(self, direction: Optional[str]) -> None:
        """按下方向键设置行走意图，None 表示松开"""
        self.walking = direction

    def submit_cut(self) -> str:
        if not self._accepts_actions():
            return "ignored"
        return self.engine.cut()

    def pause(self) -> bool:
        return self.engine.pause() if self.engine else False

    def resume(self) -> bool:
        return self.engine.resume() if self.engine else False

    def toggle_pause(self) -> bool:
        if self.state == GameState.Paused:
            return self.resume()
        return self.pause()

    # 逐帧

    def tick(self) -> Optional[str]:
        """先处理按住的方向，再推进时间。返回当前状态"""
        if self.engine is None:
            return None
        if self.walking is not None and self._accepts_actions():
            self.engine.walk(self.walking)
        return self.engine.tick()

    def snapshot(self) -> Optional[Snapshot]:
        return self.engine.snapshot() if self.engine else None

    def drain_effects(self) -> List[str]:
        return self.engine.drain_effects() if self.engine else []
