"""
地图网格 - 二维格子容器，负责边界与单元格内容
"""

from typing import Iterator, List, Optional, Sequence, Tuple

from .api import TileView, TileKind
from .tiles import Tile, TreeTile, EmptyTile


class Grid:
    """矩形地图。坐标系：左上角(0,0)，x向右增加，y向下增加"""

    def __init__(self, width: int, height: int, fill=EmptyTile):
        if width <= 0 or height <= 0:
            raise ValueError(f"grid must be non-empty, got {width}x{height}")
        self.width = width
        self.height = height
        # cells[y][x]
        self.cells: List[List[Tile]] = [[fill() for _ in range(width)] for _ in range(height)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Tile]]) -> "Grid":
        """由按行排列的格子创建地图，行长度必须一致"""
        if not rows or not rows[0]:
            raise ValueError("grid must be non-empty")
        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"row {y} has {len(row)} cells, expected {width}")
        g = cls.__new__(cls)
        g.width = width
        g.height = len(rows)
        g.cells = [list(row) for row in rows]
        return g

    def dimensions(self) -> Tuple[int, int]:
        return self.width, self.height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Optional[Tile]:
        """获取指定格子，越界返回 None"""
        if self.in_bounds(x, y):
            return self.cells[y][x]
        return None

    def set(self, x: int, y: int, tile: Tile) -> bool:
        """写入指定格子，越界时不写入并返回 False"""
        if not self.in_bounds(x, y):
            return False
        self.cells[y][x] = tile
        return True

    def cells_iter(self) -> Iterator[Tuple[int, int, Tile]]:
        """按行遍历 (x, y, tile)"""
        for y, row in enumerate(self.cells):
            for x, tile in enumerate(row):
                yield x, y, tile

    def find(self, kind: str) -> List[Tuple[int, int]]:
        """查找某种格子的所有坐标"""
        return [(x, y) for x, y, t in self.cells_iter() if t.kind == kind]

    def to_views(self) -> Tuple[Tuple[TileView, ...], ...]:
        """转换为只读视图，供渲染使用"""
        rows = []
        for y, row in enumerate(self.cells):
            views = []
            for x, t in enumerate(row):
                if t.kind == TileKind.Tree:
                    views.append(TileView(x, y, t.kind, color=t.color, cut_state=t.cut_state))
                elif t.kind == TileKind.Axe:
                    views.append(TileView(x, y, t.kind, color=t.color))
                elif t.kind == TileKind.Empty:
                    views.append(TileView(x, y, t.kind, has_coin=t.has_coin))
                else:
                    views.append(TileView(x, y, t.kind))
            rows.append(tuple(views))
        return tuple(rows)

    def trees(self) -> Iterator[TreeTile]:
        for _, _, t in self.cells_iter():
            if t.kind == TileKind.Tree:
                yield t
