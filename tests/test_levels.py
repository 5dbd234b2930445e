"""Tests for cutthetree.levels – built-in templates and map parsing."""

from __future__ import annotations

import pytest

from cutthetree.api import LEVEL_MODES, AxeColor, LevelMode, TileKind
from cutthetree.levels import (
    BONUS_ARENA_LEVEL,
    LEVELS,
    SPAWN,
    generate_level,
    level_count,
    level_hint,
    level_name,
    parse_level,
)


ALL_TEMPLATES = [
    (mode, number)
    for mode in LEVEL_MODES
    for number in range(1, len(LEVELS[mode]) + 1)
]


# ---------------------------------------------------------------------------
# Built-in templates
# ---------------------------------------------------------------------------

class TestTemplates:
    @pytest.mark.parametrize("mode,number", ALL_TEMPLATES)
    def test_every_template_parses(self, mode, number):
        grid = generate_level(mode, number)
        assert len(grid.find(TileKind.Finish)) == 1
        assert not grid.get(*SPAWN).is_solid()

    def test_every_mode_has_levels(self):
        for mode in LEVEL_MODES:
            assert level_count(mode) >= 1

    def test_bonus_arena_exists(self):
        assert 1 <= BONUS_ARENA_LEVEL <= level_count(LevelMode.Bonus)

    def test_generate_returns_fresh_grids(self):
        a = generate_level(LevelMode.Normal, 1)
        b = generate_level(LevelMode.Normal, 1)
        a.get(1, 1).has_coin = True
        assert b.get(1, 1).has_coin is False

    def test_level_count_of_unknown_mode(self):
        assert level_count("endless") == 0

    @pytest.mark.parametrize("number", [0, -1, 99])
    def test_missing_level_number(self, number):
        with pytest.raises(ValueError):
            generate_level(LevelMode.Normal, number)

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            generate_level("endless", 1)

    def test_names_and_hints(self):
        assert level_name(LevelMode.Normal, 1) == "First Cut"
        assert level_hint(LevelMode.Tutorial, 1) == "Use the arrow keys to walk to the flag"
        assert level_hint(LevelMode.Normal, 1) is None


# ---------------------------------------------------------------------------
# parse_level
# ---------------------------------------------------------------------------

class TestParseLevel:
    def test_symbols(self):
        grid = parse_level({"rows": ["Yyy", "G.F"]})
        assert grid.get(0, 0).kind == TileKind.Tree
        assert grid.get(0, 0).color == AxeColor.Yellow
        assert grid.get(1, 0).kind == TileKind.Axe
        assert grid.get(2, 1).kind == TileKind.Finish
        assert grid.get(1, 1).kind == TileKind.Empty

    def test_unknown_symbol_names_level(self):
        with pytest.raises(ValueError, match="Broken"):
            parse_level({"name": "Broken", "rows": ["...", ".#F"]})

    def test_ragged_rows(self):
        with pytest.raises(ValueError):
            parse_level({"rows": ["...", ".F"]})

    def test_missing_finish(self):
        with pytest.raises(ValueError, match="finish"):
            parse_level({"rows": ["...", "..."]})

    def test_two_finishes(self):
        with pytest.raises(ValueError, match="finish"):
            parse_level({"rows": ["F..", "..F"]})

    def test_solid_spawn(self):
        with pytest.raises(ValueError, match="spawn"):
            parse_level({"rows": ["...", ".RF"]})

    def test_spawn_outside_map(self):
        with pytest.raises(ValueError, match="spawn"):
            parse_level({"rows": ["F.."]})
