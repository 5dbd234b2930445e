"""
格子模型 - 空地、树、斧头、终点，以及玩家占位标记
每种格子带 kind 标签，引擎按标签分发
"""

from dataclasses import dataclass
from typing import Optional, Union

from .api import CutState, TileKind


@dataclass
class EmptyTile:
    """空地，可行走；奖励模式下可带金币"""
    has_coin: bool = False
    kind: str = TileKind.Empty

    def is_solid(self) -> bool:
        return False


@dataclass
class TreeTile:
    """树，未砍倒前不可通行"""
    color: str
    cut_state: str = CutState.Idle
    cut_started_ms: Optional[int] = None
    kind: str = TileKind.Tree

    def is_solid(self) -> bool:
        return self.cut_state != CutState.Cut

    def is_being_cut(self) -> bool:
        return self.cut_state == CutState.BeingCut

    def start_cut(self, axe_color: Optional[str], now_ms: int) -> bool:
        """用指定颜色的斧头开始砍树，颜色不符返回 False"""
        if axe_color is None or axe_color != self.color:
            return False
        self.cut_state = CutState.BeingCut
        self.cut_started_ms = now_ms
        return True

    def finish_cut(self) -> None:
        self.cut_state = CutState.Cut
        self.cut_started_ms = None


@dataclass
class AxeTile:
    """地上的斧头，走上去即拾取"""
    color: str
    kind: str = TileKind.Axe

    def is_solid(self) -> bool:
        return False


@dataclass
class FinishTile:
    """终点，进入时触发过关"""
    kind: str = TileKind.Finish

    def is_solid(self) -> bool:
        return False


@dataclass
class PlayerMarker:
    """玩家所在格子的占位标记，位置由 Player 自己记录"""
    kind: str = TileKind.Player

    def is_solid(self) -> bool:
        return False


Tile = Union[EmptyTile, TreeTile, AxeTile, FinishTile, PlayerMarker]


def is_plain_empty(tile: Optional[Tile]) -> bool:
    """是否为普通空地（金币只撒在这种格子上）"""
    return tile is not None and tile.kind == TileKind.Empty
