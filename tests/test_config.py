"""Tests for foundation/config.py parsing, clamping, and updates."""
import math
import pytest
from foundation.config import (
    FoundationConfig, ConfigError,
    default_config, parse_number, clamp_param, update_config, apply_updates,
)
from foundation.constants import PARAM_LIMITS, DEFAULTS


class TestParseNumber:
    @pytest.mark.parametrize("raw, expected", [
        ("1200", 1200.0),
        ("  37.5", 37.5),
        ("12abc", 12.0),
        ("-5", -5.0),
        (".5", 0.5),
        ("1e3", 1000.0),
        ("1e", 1.0),
        (250, 250.0),
        (2.5, 2.5),
    ])
    def test_leading_number(self, raw, expected):
        assert parse_number(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "", "   ", "-", ".", None, float("nan")])
    def test_unparseable_is_zero(self, raw):
        assert parse_number(raw) == 0.0

    def test_infinity(self):
        assert parse_number("Infinity") == math.inf
        assert parse_number("-Infinity") == -math.inf


class TestClampParam:
    def test_within_range_unchanged(self):
        assert clamp_param("depth", 1200.0) == 1200.0

    def test_bounds_inclusive(self):
        assert clamp_param("rebar_spacing", 100.0) == 100.0
        assert clamp_param("rebar_spacing", 500.0) == 500.0

    def test_infinite_clamped(self):
        assert clamp_param("length", math.inf) == 50000.0
        assert clamp_param("length", -math.inf) == 1000.0

    def test_unknown_key_raises(self):
        with pytest.raises(ConfigError):
            clamp_param("height", 1.0)


class TestUpdateConfig:
    def test_depth_clamped_to_max(self):
        cfg = update_config(default_config(), "depth", "999999")
        assert cfg.depth == 5000.0

    def test_diameter_clamped_to_min(self):
        cfg = update_config(default_config(), "rebar_diameter", "-5")
        assert cfg.rebar_diameter == 6.0

    def test_unparseable_length_clamped(self):
        cfg = update_config(default_config(), "length", "abc")
        assert cfg.length == 1000.0

    def test_returns_new_snapshot(self):
        before = default_config()
        after = update_config(before, "width", "7000")
        assert after.width == 7000.0
        assert before.width == DEFAULTS["width"]
        assert after._replace(width=before.width) == before

    def test_unknown_key_raises(self):
        with pytest.raises(ConfigError):
            update_config(default_config(), "wallThickness", "300")

    def test_every_param_clamped(self):
        cfg = default_config()
        for key, (lo, hi) in PARAM_LIMITS.items():
            assert getattr(update_config(cfg, key, "1e9"), key) == hi
            assert getattr(update_config(cfg, key, "-1e9"), key) == lo


class TestDefaultsAndUpdates:
    def test_defaults_in_range(self):
        cfg = default_config()
        assert isinstance(cfg, FoundationConfig)
        for key, (lo, hi) in PARAM_LIMITS.items():
            assert lo <= getattr(cfg, key) <= hi

    def test_apply_updates(self):
        cfg = apply_updates(default_config(), {"length": "12000", "cover_concrete": "5"})
        assert cfg.length == 12000.0
        assert cfg.cover_concrete == 25.0
        assert cfg.depth == DEFAULTS["depth"]
