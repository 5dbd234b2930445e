"""
游戏配置 - config.json 读写，缺失或损坏时使用默认值
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

CONFIG_FILE = Path(__file__).resolve().parent.parent / "config.json"

DEFAULT_CONFIG: Dict[str, Any] = {
    "fullscreen": False,
    "tile_size": 64,
    "sound": True,
    "fps": 60,
}


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """加载游戏配置"""
    path = path or CONFIG_FILE
    default = dict(DEFAULT_CONFIG)
    if not path.exists():
        return default
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        logging.warning(f"Ignoring unreadable config {path}: {e}")
        return default
    if not isinstance(data, dict):
        logging.warning(f"Ignoring config {path}: expected an object")
        return default
    for key, value in DEFAULT_CONFIG.items():
        data.setdefault(key, value)
    return data


def save_config(config: Dict[str, Any], path: Optional[Path] = None) -> bool:
    """保存游戏配置"""
    path = path or CONFIG_FILE
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(config, f, ensure_ascii=False, indent=2)
        return True
    except IOError as e:
        logging.warning(f"Failed to save config {path}: {e}")
        return False
