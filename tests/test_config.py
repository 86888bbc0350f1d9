"""Tests for settings and seed resolution."""

import math
import os

import pytest

from py_hexmap.config import ConfigurationError, Settings, load_settings
from py_hexmap.utils.random import SEED_RANGE, new_seed, resolve_seed


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Run without HEXMAP_* variables or a stray .env file."""
    for key in list(os.environ):
        if key.startswith("HEXMAP_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


class TestSettings:
    """Test settings defaults and validation."""

    def test_defaults(self):
        settings = Settings()
        assert settings.map_width == 64
        assert settings.map_height == 48
        assert settings.hex_width == 32
        assert settings.hex_height == 30
        assert settings.seed is None
        assert settings.log_format == "json"

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("HEXMAP_MAP_WIDTH", "20")
        monkeypatch.setenv("HEXMAP_SEED", "12.5")
        settings = load_settings()
        assert settings.map_width == 20
        assert settings.seed == 12.5

    def test_overrides_beat_environment(self, monkeypatch):
        monkeypatch.setenv("HEXMAP_MAP_WIDTH", "20")
        assert load_settings(map_width=10).map_width == 10

    def test_none_overrides_ignored(self):
        assert load_settings(map_width=None).map_width == 64

    @pytest.mark.parametrize(
        "overrides",
        [
            {"map_width": 0},
            {"map_height": -3},
            {"hex_width": 0},
            {"seed": float("nan")},
            {"seed": float("inf")},
            {"log_format": "xml"},
            {"log_level": "LOUD"},
        ],
    )
    def test_invalid_values(self, overrides):
        with pytest.raises(ConfigurationError):
            load_settings(**overrides)

    def test_log_level_normalised(self, monkeypatch):
        monkeypatch.setenv("HEXMAP_LOG_LEVEL", "debug")
        assert load_settings().log_level == "DEBUG"

    def test_invalid_log_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("HEXMAP_LOG_LEVEL", "LOUD")
        with pytest.raises(ConfigurationError):
            load_settings()

    def test_configuration_error_is_value_error(self):
        assert issubclass(ConfigurationError, ValueError)


class TestSeeds:
    """Test seed resolution."""

    def test_explicit_seed(self):
        assert resolve_seed(42) == 42.0
        assert isinstance(resolve_seed(42), float)

    def test_fresh_seed(self):
        seed = resolve_seed(None)
        assert 0.0 <= seed < SEED_RANGE
        assert math.isfinite(seed)

    def test_fresh_seeds_differ(self):
        assert len({new_seed() for _ in range(5)}) > 1

    @pytest.mark.parametrize("seed", [float("nan"), float("-inf"), "twelve", [1]])
    def test_invalid(self, seed):
        with pytest.raises(ConfigurationError):
            resolve_seed(seed)
