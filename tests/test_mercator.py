#!/usr/bin/env python3
"""
百度墨卡托（BD09 <-> BD09MC）转换测试
"""

import pytest

from geoshift.core import BaiduMercator, MercatorPoint


def rounded(pair, digits):
    return round(pair[0], digits), round(pair[1], digits)


class TestLLToMC:
    @pytest.mark.parametrize(
        "lon, lat, expected",
        [
            # 北京天安门
            (116.404, 39.915, (12958175.0, 4825923.77)),
            # 上海外滩
            (121.499, 31.240, (13525353.98, 3641593.36)),
            (-120.0, 35.0, (-13358484.24, 4139145.66)),
            (120.0, -35.0, (13358484.24, -4139145.66)),
        ],
    )
    def test_reference_values(self, lon, lat, expected):
        assert rounded(BaiduMercator.ll_to_mc(lon, lat), 2) == expected

    def test_origin(self):
        assert BaiduMercator.ll_to_mc(0.0, 0.0) == (0.0, 0.0)

    def test_returns_mercator_point(self):
        point = BaiduMercator.ll_to_mc(116.404, 39.915)
        assert isinstance(point, MercatorPoint)
        assert point.x == pytest.approx(12958175.0, abs=0.01)

    def test_negative_latitude_is_mirrored(self):
        x1, y1 = BaiduMercator.ll_to_mc(113.264, 23.130)
        x2, y2 = BaiduMercator.ll_to_mc(113.264, -23.130)
        assert x1 == x2
        assert y1 == -y2

    def test_latitude_is_clamped(self):
        assert BaiduMercator.ll_to_mc(10.0, 80.0) == BaiduMercator.ll_to_mc(10.0, 74.0)

    def test_longitude_wraps(self):
        assert BaiduMercator.ll_to_mc(190.0, 30.0) == BaiduMercator.ll_to_mc(-170.0, 30.0)


class TestMCToLL:
    @pytest.mark.parametrize(
        "x, y, expected",
        [
            (12958224.0, 4825923.0, (116.40444, 39.91499)),
            (13529134.0, 3661910.0, (121.53296, 31.39669)),
            (-13000000.0, -4000000.0, (-116.77972, -33.96492)),
            (0.0, 0.0, (0.0, 0.0)),
        ],
    )
    def test_reference_values(self, x, y, expected):
        assert rounded(BaiduMercator.mc_to_ll(x, y), 5) == expected


class TestRoundTrip:
    @pytest.mark.parametrize(
        "lon, lat",
        [
            # 北京
            (116.404, 39.915),
            # 上海
            (121.499, 31.240),
            # 广州
            (113.264, 23.130),
            # 乌鲁木齐
            (87.617, 43.828),
            # 哈尔滨
            (126.642, 45.756),
            # 三亚
            (109.512, 18.253),
            # 漠河
            (122.536, 52.972),
        ],
    )
    def test_ll_mc_ll(self, lon, lat):
        x, y = BaiduMercator.ll_to_mc(lon, lat)
        back_lon, back_lat = BaiduMercator.mc_to_ll(x, y)
        assert abs(back_lon - lon) < 0.0001
        assert abs(back_lat - lat) < 0.0001

    def test_mc_ll_mc(self):
        lon, lat = BaiduMercator.mc_to_ll(12958224.0, 4825923.0)
        x, y = BaiduMercator.ll_to_mc(lon, lat)
        assert abs(x - 12958224.0) < 0.1
        assert abs(y - 4825923.0) < 0.1

    @pytest.mark.parametrize("lon, lat", [(180.0, 74.0), (-180.0, -74.0)])
    def test_extremes(self, lon, lat):
        x, y = BaiduMercator.ll_to_mc(lon, lat)
        assert (round(abs(x), 2), round(abs(y), 2)) == (20037726.37, 12474104.17)
        assert rounded(BaiduMercator.mc_to_ll(x, y), 1) == (lon, lat)
