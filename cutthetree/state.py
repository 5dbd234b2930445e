"""
游戏状态机与奖励倒计时

状态转换:
    running -> paused -> running
    bonus   -> paused -> bonus     (暂停会记住被打断的状态)
    running -> bonus -> finished
    running -> finished
finished 为终止状态。
"""

import logging
from typing import Optional

from .api import GameState


# 奖励关时长 (秒)
BONUS_SECONDS = 60


class StateMachine:
    """游戏阶段，由引擎持有，外部通过快照读取"""

    def __init__(self, state: str = GameState.Running):
        self.state = state
        self._before_pause: Optional[str] = None

    @property
    def is_frozen(self) -> bool:
        """暂停或结束时倒计时冻结"""
        return self.state in (GameState.Paused, GameState.Finished)

    @property
    def is_finished(self) -> bool:
        return self.state == GameState.Finished

    def _refuse(self, action: str) -> bool:
        logging.debug(f"state {self.state}: {action} refused")
        return False

    def pause(self) -> bool:
        if self.state not in (GameState.Running, GameState.Bonus):
            return self._refuse("pause")
        self._before_pause = self.state
        self.state = GameState.Paused
        return True

    def resume(self) -> bool:
        if self.state != GameState.Paused:
            return self._refuse("resume")
        self.state = self._before_pause or GameState.Running
        self._before_pause = None
        return True

    def enter_bonus(self) -> bool:
        if self.state != GameState.Running:
            return self._refuse("enter bonus")
        self.state = GameState.Bonus
        return True

    def finish(self) -> bool:
        if self.state == GameState.Finished:
            return self._refuse("finish")
        self.state = GameState.Finished
        self._before_pause = None
        return True


class BonusTimer:
    """
    奖励倒计时，基于墙钟截止时间计算剩余秒数。
    冻结期间每帧把截止时间顺延为 now + remaining，暂停的时长不计入。
    """

    def __init__(self, now_ms: int, seconds: int = BONUS_SECONDS):
        self.seconds = seconds
        self.remaining = seconds
        self.deadline_ms = now_ms + seconds * 1000

    def reset(self, now_ms: int) -> None:
        self.remaining = self.seconds
        self.deadline_ms = now_ms + self.seconds * 1000

    def tick(self, now_ms: int, frozen: bool) -> int:
        """每帧更新，返回剩余秒数"""
        if frozen:
            self.deadline_ms = now_ms + self.remaining * 1000
        else:
            self.remaining = max(0, (self.deadline_ms - now_ms) // 1000)
        return self.remaining

    @property
    def expired(self) -> bool:
        return self.remaining <= 0
