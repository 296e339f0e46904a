#!/usr/bin/env python3
"""
命令行入口测试
"""

import pytest

from geoshift.cli import main
from geoshift.config import TILE_SOURCE_ENV


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out


def test_list(capsys):
    assert main(["list"]) == 0
    out = capsys.readouterr().out
    assert "openstreetmap" in out
    assert "baidu" in out


class TestConvert:
    def test_wgs_to_gcj(self, capsys):
        assert main(["convert", "--from", "wgs84", "--to", "gcj02", "--lat", "39.907354", "--lon", "116.39122"]) == 0
        out = capsys.readouterr().out
        assert "39.908755" in out
        assert "116.397461" in out

    def test_precise_inverse(self, capsys):
        args = ["convert", "--from", "bd09", "--to", "wgs84", "--lat", "39.915", "--lon", "116.404", "--precise"]
        assert main(args) == 0
        assert "hash:" in capsys.readouterr().out

    def test_invalid_coordinate(self, capsys):
        assert main(["convert", "--from", "wgs84", "--to", "bd09", "--lat", "91", "--lon", "0"]) == 1
        assert "无效坐标" in capsys.readouterr().out

    def test_unparseable_coordinate(self):
        assert main(["convert", "--from", "wgs84", "--to", "bd09", "--lat", "north", "--lon", "0"]) == 1

    def test_unknown_datum(self):
        with pytest.raises(SystemExit):
            main(["convert", "--from", "itrf", "--to", "bd09", "--lat", "0", "--lon", "0"])


class TestTile:
    def test_xyz(self, capsys):
        assert main(["tile", "--lat", "39.907354", "--lon", "116.39122", "-z", "15"]) == 0
        out = capsys.readouterr().out
        assert "26978" in out
        assert "12416" in out

    def test_tms(self, capsys):
        assert main(["tile", "--lat", "39.907354", "--lon", "116.39122", "-z", "15", "--scheme", "tms"]) == 0
        assert "20351" in capsys.readouterr().out

    def test_baidu_converts_wgs_input(self, capsys):
        assert main(["tile", "--lat", "39.907354", "--lon", "116.39122", "-z", "18", "--scheme", "baidu"]) == 0
        out = capsys.readouterr().out
        assert "50617" in out
        assert "18851" in out
        # 未经坐标转换直接按 BD09 切片得到的是 (50612, 18846)
        assert "50612" not in out

    def test_baidu_with_bd09_input(self, capsys):
        args = ["tile", "--from", "bd09", "--lat", "39.915", "--lon", "116.404", "-z", "18", "--scheme", "baidu"]
        assert main(args) == 0
        out = capsys.readouterr().out
        assert "50617" in out
        assert "18851" in out

    def test_zoom_range(self, capsys):
        assert main(["tile", "--lat", "0", "--lon", "0", "-z", "0-2"]) == 0
        out = capsys.readouterr().out
        for zoom in ["0", "1", "2"]:
            assert zoom in out

    def test_bad_zoom(self, capsys):
        assert main(["tile", "--lat", "0", "--lon", "0", "-z", "x"]) == 1


class TestBbox:
    WORLD = ["--north", "85", "--south", "-85", "--west", "-180", "--east", "179.9"]

    def test_tile_counts(self, capsys):
        assert main(["bbox", *self.WORLD, "--min-zoom", "0", "--max-zoom", "1"]) == 0
        assert "共 5 个瓦片" in capsys.readouterr().out

    def test_provider_urls(self, capsys):
        assert main(["bbox", *self.WORLD, "--min-zoom", "0", "--max-zoom", "0", "--provider", "openstreetmap"]) == 0
        assert "https://a.tile.osm.org/0/0/0.png" in capsys.readouterr().out

    def test_invalid_zoom_range(self, capsys):
        assert main(["bbox", *self.WORLD, "--min-zoom", "5", "--max-zoom", "3"]) == 1
        assert "缩放级别范围无效" in capsys.readouterr().out

    def test_unknown_provider(self):
        assert main(["bbox", *self.WORLD, "--min-zoom", "0", "--max-zoom", "0", "--provider", "nope"]) == 1


class TestUrl:
    def test_explicit_provider(self, capsys):
        assert main(["url", "--provider", "openstreetmap", "-z", "15", "-x", "26978", "-y", "12416"]) == 0
        assert "https://b.tile.osm.org/15/26978/12416.png" in capsys.readouterr().out

    def test_environment_provider(self, capsys, monkeypatch):
        monkeypatch.setenv(TILE_SOURCE_ENV, "tencent")
        assert main(["url", "-z", "15", "-x", "26978", "-y", "12416"]) == 0
        assert "y=20351" in capsys.readouterr().out

    def test_unknown_provider(self, capsys):
        assert main(["url", "--provider", "nope", "-z", "1", "-x", "0", "-y", "0"]) == 1
        assert "未知瓦片源" in capsys.readouterr().out


class TestDistance:
    def test_same_point(self, capsys):
        assert main(["distance", "39.9", "116.4", "39.9", "116.4"]) == 0
        assert "0.000 m" in capsys.readouterr().out

    def test_invalid(self):
        assert main(["distance", "100", "0", "0", "0"]) == 1
