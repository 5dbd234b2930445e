#!/usr/bin/env python3
"""
Cut The Tree - 主入口

方向键行走，空格砍树，Esc 暂停，F11 切换全屏。
"""

import argparse
import logging

import pygame

from cutthetree.api import LEVEL_MODES, LevelMode
from cutthetree.app import GameApp
from cutthetree.config import load_config
from cutthetree.levels import level_count


def configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def parse_args(argv=None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Cut The Tree")
    ap.add_argument("--mode", choices=LEVEL_MODES, default=LevelMode.Normal, help="level mode")
    ap.add_argument("--level", type=int, default=1, help="level number, starting at 1")
    ap.add_argument("--windowed", action="store_true", help="ignore the fullscreen setting")
    args = ap.parse_args(argv)
    count = level_count(args.mode)
    if not 1 <= args.level <= count:
        ap.error(f"--level must be between 1 and {count} for {args.mode} mode")
    return args


def main(argv=None):
    configure_logging()
    args = parse_args(argv)
    config = load_config()
    if args.windowed:
        config["fullscreen"] = False
    app = GameApp(config)
    app.start(args.mode, args.level)
    app.run()
    pygame.quit()


if __name__ == "__main__":
    main()
