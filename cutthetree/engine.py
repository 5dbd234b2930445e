"""
交互引擎 - 行走、砍树、过关与奖励关逻辑，持有一局关卡的全部状态

每帧由游戏循环调用一次：先处理输入 (walk / cut)，再调用 tick() 处理
移动动画、砍树进度与奖励倒计时。引擎内部不抛出游戏内错误，所有异常
情况都以空操作或状态字段体现。
"""

import logging
import time
from typing import Callable, List, Optional

from .api import (
    DIR_DELTA, Effects, GameState, LevelMode, PlayerView, Snapshot, TileKind,
)
from .grid import Grid
from .levels import BONUS_ARENA_LEVEL, SPAWN, generate_level
from .player import Player
from .state import BonusTimer, StateMachine
from .tiles import EmptyTile, PlayerMarker, is_plain_empty


# 砍一棵树所需时间 (毫秒)
CUT_DURATION_MS = 500

Clock = Callable[[], int]
LevelGenerator = Callable[[str, int], Grid]


def epoch_ms() -> int:
    """墙钟时间 (毫秒)"""
    return int(time.time() * 1000)


class InteractionEngine:
    """一局关卡的交互引擎"""

    def __init__(
        self,
        grid: Grid,
        level_mode: str = LevelMode.Normal,
        level_number: int = 1,
        clock: Optional[Clock] = None,
        level_generator: LevelGenerator = generate_level,
    ):
        self.clock = clock or epoch_ms
        self.level_mode = level_mode
        self.level_number = level_number
        self.level_generator = level_generator
        self.grid = grid
        self.machine = StateMachine()
        self.finished = False
        self.coins = 0
        self._effects: List[str] = []
        self._paused_at_ms = 0
        self.player = self._spawn_player()
        # 奖励模式的关卡 (包括进入金币关之前) 都显示倒计时
        self.timer = BonusTimer(self.clock()) if level_mode == LevelMode.Bonus else None

    @property
    def state(self) -> str:
        return self.machine.state

    def _spawn_player(self) -> Player:
        x, y = SPAWN
        tile = self.grid.get(x, y)
        if tile is None or tile.is_solid():
            raise ValueError(f"spawn {SPAWN} is not walkable")
        self.grid.set(x, y, PlayerMarker())
        return Player(x, y)

    def _emit(self, effect: str) -> None:
        self._effects.append(effect)

    def _accepts_actions(self) -> bool:
        """暂停或结束时不接受 walk / cut"""
        return not self.finished and not self.machine.is_frozen

    def drain_effects(self) -> List[str]:
        """取出并清空待处理的效果事件"""
        effects, self._effects = self._effects, []
        return effects

    # ------------------------------------------------------------------
    # 行走
    # ------------------------------------------------------------------

    def walk(self, direction: str) -> str:
        """
        向指定方向走一步。
        返回 'ignored' | 'busy' | 'blocked' | 'refused' | 'pickup' | 'finish' | 'moved'
        """
        if not self._accepts_actions() or direction not in DIR_DELTA:
            return "ignored"
        p = self.player
        if p.movement_in_progress:
            return "busy"

        # 即使走不动也会转身
        p.change_direction(direction)

        x, y = p.x, p.y
        dx, dy = DIR_DELTA[direction]
        target = self.grid.get(x + dx, y + dy)
        if target is None or target.is_solid():
            return "blocked"

        if not p.start_move(dx, dy, self.clock()):
            return "refused"

        outcome = "moved"
        if target.kind == TileKind.Axe:
            p.grab_axe(target.color)
            self._emit(Effects.Pickup)
            outcome = "pickup"

        if target.kind == TileKind.Finish:
            self._emit(Effects.Win)
            self._complete_level(x, y)
            return "finish"

        if self.machine.state == GameState.Bonus and target.kind == TileKind.Empty and target.has_coin:
            target.has_coin = False
            self.coins += 1

        self.grid.set(x, y, EmptyTile())
        self.grid.set(x + dx, y + dy, PlayerMarker())
        return outcome

    def _complete_level(self, x: int, y: int) -> None:
        """到达终点：奖励关卡进入金币关，否则结束"""
        if (
            self.level_mode == LevelMode.Bonus
            and self.machine.state != GameState.Bonus
            and self.machine.enter_bonus()
        ):
            self._start_bonus_stage()
        else:
            self._end(x, y)

    def _start_bonus_stage(self) -> None:
        self.grid = self.level_generator(LevelMode.Bonus, BONUS_ARENA_LEVEL)
        self.player = self._spawn_player()
        for _, _, tile in self.grid.cells_iter():
            if is_plain_empty(tile):
                tile.has_coin = True
        self.coins = 0
        self.timer.reset(self.clock())
        logging.info(f"bonus stage started, {self.timer.remaining}s on the clock")

    def _end(self, x: int, y: int) -> None:
        self.machine.finish()
        self.finished = True
        self.grid.set(x, y, EmptyTile())
        logging.info(f"{self.level_mode} level {self.level_number} finished with {self.coins} coins")

    # ------------------------------------------------------------------
    # 砍树
    # ------------------------------------------------------------------

    def cut(self) -> str:
        """
        砍面前的树。
        返回 'ignored' | 'nothing' | 'chopping' | 'mismatch'
        """
        if not self._accepts_actions():
            return "ignored"
        p = self.player
        dx, dy = DIR_DELTA[p.facing]
        tree = self.grid.get(p.x + dx, p.y + dy)
        if tree is None or tree.kind != TileKind.Tree:
            return "nothing"
        if not tree.is_solid() or tree.is_being_cut():
            return "nothing"

        if tree.start_cut(p.held_axe, self.clock()):
            self._emit(Effects.Chopping)
            return "chopping"
        p.say(f"I need a {tree.color} axe to cut this tree")
        return "mismatch"

    # ------------------------------------------------------------------
    # 暂停与时间
    # ------------------------------------------------------------------

    def pause(self) -> bool:
        now = self.clock()
        # 先结算暂停前的剩余时间
        if self.timer is not None:
            self.timer.tick(now, self.machine.is_frozen)
        if not self.machine.pause():
            return False
        self._paused_at_ms = now
        return True

    def resume(self) -> bool:
        now = self.clock()
        if self.timer is not None:
            self.timer.tick(now, self.machine.is_frozen)
        if not self.machine.resume():
            return False
        # 暂停期间移动动画与砍树进度都不推进
        paused_for = now - self._paused_at_ms
        self.player.shift_move(paused_for)
        for tree in self.grid.trees():
            if tree.is_being_cut():
                tree.cut_started_ms += paused_for
        return True

    def tick(self, now: Optional[int] = None) -> str:
        """每帧调用：结束移动动画、完成砍树、更新倒计时。返回当前状态"""
        if now is None:
            now = self.clock()
        if self.machine.state != GameState.Paused:
            self.player.update(now)
            for tree in self.grid.trees():
                if tree.is_being_cut() and now - tree.cut_started_ms >= CUT_DURATION_MS:
                    tree.finish_cut()

        if self.timer is not None:
            self.timer.tick(now, self.machine.is_frozen)
            if self.timer.expired and not self.machine.is_finished:
                self._time_up()
        return self.machine.state

    def _time_up(self) -> None:
        logging.info("bonus timer expired")
        self._emit(Effects.Timeout)
        self._end(self.player.x, self.player.y)

    # ------------------------------------------------------------------
    # 渲染快照
    # ------------------------------------------------------------------

    def snapshot(self) -> Snapshot:
        p = self.player
        now = self.clock()
        fx, fy = p.move_from
        return Snapshot(
            width=self.grid.width,
            height=self.grid.height,
            tiles=self.grid.to_views(),
            player=PlayerView(
                x=p.x, y=p.y, facing=p.facing, held_axe=p.held_axe, message=p.message,
                moving=p.movement_in_progress, from_x=fx, from_y=fy,
                progress=p.move_progress(now),
            ),
            game_state=self.machine.state,
            level_mode=self.level_mode,
            level_number=self.level_number,
            remaining_seconds=self.timer.remaining if self.timer is not None else None,
            coins=self.coins,
            finished=self.finished,
        )
