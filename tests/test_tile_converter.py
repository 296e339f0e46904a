#!/usr/bin/env python3
"""
瓦片坐标转换测试（XYZ / TMS / 百度）
"""

import pytest

from geoshift.core import (
    BD09Coordinate,
    CoordinateTransformer,
    TileAddress,
    TileConverter,
    TileMath,
    WGS84Coordinate,
)

TIANANMEN = WGS84Coordinate(lat=39.907354, lon=116.39122)
ORIGIN = WGS84Coordinate(lat=0.0, lon=0.0)


class TestCoordToTile:
    def test_wgs_to_tile(self):
        # https://tile.openstreetmap.org/15/26978/12416.png
        assert TileMath.coord_to_tile(15, TIANANMEN) == (15, 26978, 12416)

    def test_returns_tile_address(self):
        tile = TileMath.coord_to_tile(15, TIANANMEN)
        assert isinstance(tile, TileAddress)
        assert tile.zoom == 15
        assert isinstance(tile.x, int)
        assert isinstance(tile.y, int)

    def test_gcj_to_tile(self):
        gcj = CoordinateTransformer.wgs_to_gcj(TIANANMEN)
        assert TileMath.coord_to_tile(15, gcj) == (15, 26978, 12416)

    def test_tencent_tms_row(self):
        gcj = CoordinateTransformer.wgs_to_gcj(TIANANMEN)
        z, x, y = TileMath.coord_to_tile(15, gcj)
        assert (z, x, TileMath.tms_convert_y(z, y)) == (15, 26978, 20351)

    def test_origin_at_zoom_zero(self):
        assert TileMath.coord_to_tile(0, ORIGIN) == (0, 0, 0)


class TestTileToCoord:
    def test_northwest_corner(self):
        coord = TileMath.tile_to_coord(0, 0, 0)
        assert coord.lon == -180.0
        assert coord.lat == pytest.approx(85.0511287798, abs=1e-9)

    def test_corner_is_northwest_of_point(self):
        corner = TileMath.tile_to_coord(15, 26978, 12416)
        assert isinstance(corner, WGS84Coordinate)
        assert corner.lat >= TIANANMEN.lat
        assert corner.lon <= TIANANMEN.lon

    def test_bbox(self):
        west, south, east, north = TileMath.tile_to_bbox(0, 0, 0)
        assert (west, east) == (-180.0, 180.0)
        assert north == pytest.approx(85.0511287798, abs=1e-9)
        assert south == pytest.approx(-85.0511287798, abs=1e-9)

    def test_bbox_contains_point(self):
        west, south, east, north = TileMath.tile_to_bbox(15, 26978, 12416)
        assert west <= TIANANMEN.lon < east
        assert south < TIANANMEN.lat <= north


class TestTms:
    @pytest.mark.parametrize("zoom, y, expected", [(0, 0, 0), (1, 0, 1), (15, 12416, 20351), (10, 341, 682)])
    def test_convert_y(self, zoom, y, expected):
        assert TileMath.tms_convert_y(zoom, y) == expected

    def test_involution(self):
        assert TileMath.tms_convert_y(12, TileMath.tms_convert_y(12, 1234)) == 1234


class TestTilesInBbox:
    def test_single_tile_at_zoom_zero(self):
        assert TileMath.tiles_in_bbox(-180, -90, 180, 90, 0) == [(0, 0)]

    def test_world_at_zoom_one(self):
        tiles = TileMath.tiles_in_bbox(-180, -85, 179.9, 85, 1)
        assert sorted(tiles) == [(0, 0), (0, 1), (1, 0), (1, 1)]

    def test_contains_point_tile(self):
        tiles = TileMath.tiles_in_bbox(116.3, 39.8, 116.5, 40.0, 15)
        assert (26978, 12416) in tiles

    def test_tms_rows(self):
        xyz = TileMath.tiles_in_bbox(116.3, 39.8, 116.5, 40.0, 12)
        tms = TileMath.tiles_in_bbox(116.3, 39.8, 116.5, 40.0, 12, is_tms=True)
        assert sorted(tms) == sorted((x, TileMath.tms_convert_y(12, y)) for x, y in xyz)

    def test_zoom_range(self):
        zoom_tiles = TileMath.tiles_in_zoom_range(116.3, 39.8, 116.5, 40.0, 10, 12)
        assert sorted(zoom_tiles) == [10, 11, 12]
        assert len(zoom_tiles[12]) >= len(zoom_tiles[10])


class TestGcjTiles:
    def test_identity(self):
        assert TileConverter.wgs_to_gcj(10, 512, 341) == (10, 512, 341)
        assert TileConverter.gcj_to_wgs(10, 512, 341) == (10, 512, 341)

    def test_round_trip(self):
        z, x, y = TileConverter.gcj_to_wgs(*TileConverter.wgs_to_gcj(10, 512, 341))
        assert (z, x, y) == (10, 512, 341)

    def test_zoom_zero(self):
        assert TileConverter.wgs_to_gcj(0, 0, 0) == (0, 0, 0)


class TestBaiduTiles:
    def test_coord_to_tile(self):
        assert TileConverter.baidu_coord_to_tile(18, BD09Coordinate(lat=39.915, lon=116.404)) == (18, 50617, 18851)
        assert TileConverter.baidu_coord_to_tile(11, BD09Coordinate(lat=29.570, lon=106.557)) == (11, 361, 104)

    def test_wgs_point_converted_before_tiling(self):
        bd = CoordinateTransformer.wgs_to_bd(TIANANMEN)
        assert TileConverter.baidu_coord_to_tile(18, bd) == (18, 50617, 18851)

    def test_coord_to_tile_zoom_10(self):
        assert TileConverter.baidu_coord_to_tile(10, BD09Coordinate(lat=39.915, lon=116.404)) == (10, 197, 73)

    def test_origin_at_zoom_zero(self):
        assert TileConverter.baidu_coord_to_tile(0, BD09Coordinate(lat=0.0, lon=0.0)) == (0, 0, 0)

    def test_tile_to_coord_round_trip(self):
        coord = TileConverter.baidu_tile_to_coord(18, 50617, 18851)
        assert isinstance(coord, BD09Coordinate)
        z, x, y = TileConverter.baidu_coord_to_tile(18, coord)
        assert z == 18
        assert abs(x - 50617) <= 1
        assert abs(y - 18851) <= 1

    def test_wgs_to_bd_round_trip(self):
        z_bd, x_bd, y_bd = TileConverter.wgs_to_bd(10, 512, 341)
        z, x, y = TileConverter.bd_to_wgs(z_bd, x_bd, y_bd)
        assert z == 10
        assert abs(x - 512) <= 1
        assert abs(y - 341) <= 1

    def test_bd_to_wgs(self):
        # 低缩放级别下百度瓦片可能落在标准金字塔之外
        assert TileConverter.bd_to_wgs(10, 512, 341) == (10, 1369, -61)

    def test_bd_to_wgs_zoom_zero(self):
        assert TileConverter.bd_to_wgs(0, 0, 0) == (0, 0, 0)
