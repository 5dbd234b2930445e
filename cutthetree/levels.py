"""
关卡模板与解析 - 把文本地图转换为 Grid

地图字符:
    '.'          空地
    'R' 'B' 'G' 'Y'  红/蓝/绿/黄色的树
    'r' 'b' 'g' 'y'  对应颜色的斧头
    'F'          终点
玩家固定出生在 (1, 1)，该格必须可行走。
"""

from typing import Dict, List, Optional

from .api import AxeColor, LevelMode, TileKind
from .grid import Grid
from .tiles import AxeTile, EmptyTile, FinishTile, Tile, TreeTile


SPAWN = (1, 1)
# 完成奖励关卡后进入的金币关模板
BONUS_ARENA_LEVEL = 1

_COLOR_BY_CHAR = {
    "r": AxeColor.Red,
    "b": AxeColor.Blue,
    "g": AxeColor.Green,
    "y": AxeColor.Yellow,
}


NORMAL_LEVELS: List[Dict] = [
    {
        "name": "First Cut",
        "rows": [
            "GGGGGGGGG",
            "G...r...G",
            "G.......G",
            "G..GGG..G",
            "G..GFR..G",
            "G..GGG..G",
            "GGGGGGGGG",
        ],
    },
    {
        "name": "Two Rooms",
        "rows": [
            "GGGGGGGGGG",
            "G.b.G..r.G",
            "G...B....G",
            "G...G....G",
            "GGGGGGRGGG",
            "G.....F..G",
            "GGGGGGGGGG",
        ],
    },
    {
        "name": "Swap Back",
        "rows": [
            "YYYYYYYYYYY",
            "Y.g...Y...Y",
            "Y.....G.b.Y",
            "Y.....Y...Y",
            "YYYYYYYYBYY",
            "Y.F.G....gY",
            "YYYYYYYYYYY",
        ],
    },
]

TUTORIAL_LEVELS: List[Dict] = [
    {
        "name": "Walking",
        "hint": "Use the arrow keys to walk to the flag",
        "rows": [
            "GGGGGGG",
            "G....FG",
            "GGGGGGG",
        ],
    },
    {
        "name": "Chopping",
        "hint": "Pick up the red axe, face the red tree and press space",
        "rows": [
            "GGGGGGG",
            "G.r.RFG",
            "GGGGGGG",
        ],
    },
]

BONUS_LEVELS: List[Dict] = [
    {
        "name": "Coin Field",
        "rows": [
            "BBBBBBBBB",
            "B.......B",
            "B.......B",
            "B.......B",
            "B......FB",
            "BBBBBBBBB",
        ],
    },
    {
        "name": "Golden Gate",
        "rows": [
            "RRRRRRRR",
            "R.y..YFR",
            "RRRRRRRR",
        ],
    },
]

LEVELS: Dict[str, List[Dict]] = {
    LevelMode.Normal: NORMAL_LEVELS,
    LevelMode.Tutorial: TUTORIAL_LEVELS,
    LevelMode.Bonus: BONUS_LEVELS,
}


def _tile_from_char(ch: str) -> Tile:
    if ch == ".":
        return EmptyTile()
    if ch == "F":
        return FinishTile()
    if ch.lower() in _COLOR_BY_CHAR:
        color = _COLOR_BY_CHAR[ch.lower()]
        return TreeTile(color) if ch.isupper() else AxeTile(color)
    raise ValueError(f"unknown map symbol {ch!r}")


def grid_from_rows(rows: List[str]) -> Grid:
    """把文本行转换为 Grid，不做关卡校验"""
    return Grid.from_rows([[_tile_from_char(ch) for ch in row] for row in rows])


def parse_level(level_data: Dict) -> Grid:
    """解析文本地图，校验终点与出生点"""
    rows = level_data["rows"]
    name = level_data.get("name", "Unnamed Level")
    try:
        grid = grid_from_rows(rows)
    except ValueError as e:
        raise ValueError(f"level {name!r}: {e}") from e
    finishes = grid.find(TileKind.Finish)
    if len(finishes) != 1:
        raise ValueError(f"level {name!r}: expected exactly one finish, found {len(finishes)}")
    spawn = grid.get(*SPAWN)
    if spawn is None or spawn.is_solid():
        raise ValueError(f"level {name!r}: spawn {SPAWN} must be walkable")
    return grid


def _template(mode: str, level_number: int) -> Dict:
    if mode not in LEVELS:
        raise ValueError(f"unknown level mode {mode!r}")
    templates = LEVELS[mode]
    if not 1 <= level_number <= len(templates):
        raise ValueError(f"{mode} level {level_number} does not exist (1..{len(templates)})")
    return templates[level_number - 1]


def generate_level(mode: str, level_number: int) -> Grid:
    """生成指定模式的第 level_number 关 (从 1 开始)"""
    return parse_level(_template(mode, level_number))


def level_count(mode: str) -> int:
    return len(LEVELS.get(mode, []))


def level_name(mode: str, level_number: int) -> str:
    return _template(mode, level_number).get("name", "")


def level_hint(mode: str, level_number: int) -> Optional[str]:
    """教程关的开场提示，没有则返回 None"""
    return _template(mode, level_number).get("hint")
