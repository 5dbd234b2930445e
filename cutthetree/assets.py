"""
游戏素材加载 - 从 assets/ 目录加载图片、音效与字体
缺失或加载失败时记录警告并返回 None，由调用方用程序绘制或保持静音
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple

import pygame

from .api import Effects

# 项目根目录下的 assets
_ASSETS_DIR = Path(__file__).resolve().parent.parent / "assets"
_CACHE: Dict[str, Optional[pygame.Surface]] = {}
_SOUND_CACHE: Dict[str, Optional["pygame.mixer.Sound"]] = {}

# 效果事件对应的音效文件
EFFECT_SOUNDS = {
    Effects.Pickup: "grab.wav",
    Effects.Chopping: "chopping.wav",
    Effects.Win: "winning.wav",
    Effects.Timeout: "winning.wav",
}


def _path(*parts: str) -> Path:
    return _ASSETS_DIR.joinpath(*parts)


def load_image(*path_parts: str, scale: Optional[Tuple[int, int]] = None) -> Optional[pygame.Surface]:
    """加载图片，可选缩放。失败返回 None，结果（包括失败）会被缓存"""
    key = "/".join(path_parts) + (f"@{scale}" if scale else "")
    if key in _CACHE:
        return _CACHE[key]
    p = _path(*path_parts)
    surf = None
    if not p.exists():
        logging.warning(f"Image not found: {p}")
    else:
        try:
            surf = pygame.image.load(str(p))
            if surf.get_alpha() is None:
                surf = surf.convert()
            else:
                surf = surf.convert_alpha()
            if scale:
                surf = pygame.transform.smoothscale(surf, scale)
        except (pygame.error, OSError) as e:
            logging.warning(f"Failed to load image {p}: {e}")
            surf = None
    _CACHE[key] = surf
    return surf


def load_first_image(names: Iterable[str], folder: str, size: int) -> Optional[pygame.Surface]:
    """按顺序尝试多个文件名，返回第一个加载成功的"""
    for name in names:
        s = load_image(folder, name, scale=(size, size))
        if s is not None:
            return s
    return None


def load_sound(name: str) -> Optional["pygame.mixer.Sound"]:
    """加载音效，混音器不可用或文件缺失时返回 None"""
    if name in _SOUND_CACHE:
        return _SOUND_CACHE[name]
    sound = None
    p = _path("sound", name)
    if not pygame.mixer.get_init():
        logging.warning(f"Mixer unavailable, skipping sound {name}")
    elif not p.exists():
        logging.warning(f"Sound not found: {p}")
    else:
        try:
            sound = pygame.mixer.Sound(str(p))
        except (pygame.error, OSError) as e:
            logging.warning(f"Failed to load sound {p}: {e}")
    _SOUND_CACHE[name] = sound
    return sound


def load_font(size: int) -> pygame.font.Font:
    """优先使用 assets/font 下的像素字体，失败回退到默认字体"""
    p = _path("font", "pokemon.ttf")
    if p.exists():
        try:
            return pygame.font.Font(str(p), size)
        except (pygame.error, OSError) as e:
            logging.warning(f"Failed to load font {p}: {e}")
    return pygame.font.Font(None, size)


class SoundEffects:
    """效果事件的声音输出"""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled

    def play(self, effect: str) -> None:
        if not self.enabled:
            return
        name = EFFECT_SOUNDS.get(effect)
        if name is None:
            return
        sound = load_sound(name)
        if sound is not None:
            sound.play()

    def play_all(self, effects: Iterable[str]) -> None:
        for effect in effects:
            self.play(effect)
