"""
游戏常量与只读视图 - 方向、颜色、模式、状态，以及渲染层使用的快照记录
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple


class Direction:
    """移动/朝向方向，坐标系：左上角(0,0)，x向右，y向下"""
    Up = "up"
    Down = "down"
    Left = "left"
    Right = "right"


DIRECTIONS: Tuple[str, ...] = (Direction.Up, Direction.Down, Direction.Left, Direction.Right)

# 各方向的 (dx, dy)
DIR_DELTA: Dict[str, Tuple[int, int]] = {
    Direction.Up: (0, -1),
    Direction.Down: (0, 1),
    Direction.Left: (-1, 0),
    Direction.Right: (1, 0),
}


class AxeColor:
    """斧头与树的颜色，封闭集合"""
    Red = "red"
    Blue = "blue"
    Green = "green"
    Yellow = "yellow"


AXE_COLORS: Tuple[str, ...] = (AxeColor.Red, AxeColor.Blue, AxeColor.Green, AxeColor.Yellow)


class LevelMode:
    """关卡模式，关卡生命周期内固定"""
    Normal = "normal"
    Tutorial = "tutorial"
    Bonus = "bonus"


LEVEL_MODES: Tuple[str, ...] = (LevelMode.Normal, LevelMode.Tutorial, LevelMode.Bonus)


class GameState:
    """游戏阶段"""
    Running = "running"
    Paused = "paused"
    Finished = "finished"
    Bonus = "bonus"


class CutState:
    """树的砍伐进度"""
    Idle = "idle"
    BeingCut = "being_cut"
    Cut = "cut"


class TileKind:
    """格子类型标签，按标签分发而不是按类型判断"""
    Empty = "empty"
    Tree = "tree"
    Axe = "axe"
    Finish = "finish"
    Player = "player"


class Effects:
    """引擎发出的效果事件，由声音/动画协作者消费"""
    Pickup = "pickup"
    Chopping = "chopping"
    Win = "win"
    Timeout = "timeout"


@dataclass(frozen=True)
class TileView:
    """地图格子信息（只读）"""
    x: int
    y: int
    kind: str  # TileKind
    color: Optional[str] = None  # Tree / Axe 的颜色
    cut_state: Optional[str] = None  # 仅 Tree
    has_coin: bool = False  # 仅 Empty，奖励模式下有效


@dataclass(frozen=True)
class PlayerView:
    """玩家信息（只读）"""
    x: int
    y: int
    facing: str
    held_axe: Optional[str]
    message: str
    moving: bool
    from_x: int
    from_y: int
    progress: float = 1.0  # 移动动画进度 0~1


@dataclass(frozen=True)
class Snapshot:
    """某一帧的完整只读状态，渲染层只读取它"""
    width: int
    height: int
    tiles: Tuple[Tuple[TileView, ...], ...]  # tiles[y][x]
    player: PlayerView
    game_state: str
    level_mode: str
    level_number: int
    remaining_seconds: Optional[int]  # 非奖励模式为 None
    coins: int
    finished: bool

    def tile(self, x: int, y: int) -> Optional[TileView]:
        if 0 <= x < self.width and 0 <= y < self.height:
            return self.tiles[y][x]
        return None
