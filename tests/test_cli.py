"""Tests for the command line entry point."""

import os

import pytest
from PIL import Image

from py_hexmap import cli
from py_hexmap.core.atlas import LOW_RES_ATLAS


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    for key in list(os.environ):
        if key.startswith("HEXMAP_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def atlas_path(tmp_path):
    path = tmp_path / "atlas.png"
    Image.new("RGBA", LOW_RES_ATLAS.image_size, (10, 120, 10, 255)).save(path)
    return path


class TestCli:
    """Test argument handling and the generate-render run."""

    def test_parser(self):
        args = cli.build_parser().parse_args(["--width", "10", "--seed", "3.5", "--log-format", "plain"])
        assert args.map_width == 10
        assert args.seed == 3.5
        assert args.map_height is None
        assert args.log_format == "plain"

    def test_renders_png(self, tmp_path, atlas_path):
        output = tmp_path / "map.png"
        code = cli.main([
            "--width", "8", "--height", "6", "--seed", "42",
            "--atlas", str(atlas_path), "--output", str(output),
            "--log-format", "plain",
        ])
        assert code == 0
        with Image.open(output) as frame:
            assert frame.size == (184, 182)
            assert frame.getpixel((20, 60))[:3] == (10, 120, 10)

    def test_missing_atlas_still_renders(self, tmp_path):
        output = tmp_path / "blank.png"
        code = cli.main([
            "--width", "4", "--height", "4", "--seed", "1",
            "--atlas", str(tmp_path / "nope.png"), "--output", str(output),
        ])
        assert code == 0
        assert output.exists()

    def test_invalid_configuration(self, tmp_path):
        code = cli.main(["--width", "0", "--output", str(tmp_path / "x.png")])
        assert code == 2
        assert not (tmp_path / "x.png").exists()

    def test_invalid_log_level(self, tmp_path):
        code = cli.main(["--width", "4", "--height", "4", "--log-level", "LOUD", "--output", str(tmp_path / "x.png")])
        assert code == 2
        assert not (tmp_path / "x.png").exists()

    def test_invalid_log_level_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HEXMAP_LOG_LEVEL", "LOUD")
        code = cli.main(["--width", "4", "--height", "4", "--output", str(tmp_path / "x.png")])
        assert code == 2
