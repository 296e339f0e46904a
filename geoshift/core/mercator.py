#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
百度墨卡托投影模块

BD09 经纬度与 BD09MC 平面坐标（米）之间的分段多项式转换
"""

from typing import Sequence, Tuple

from .constants import LL2MC, LLBAND, MC2LL, MCBAND
from .coordinate import MercatorPoint


class BaiduMercator:
    """
    百度墨卡托坐标转换类

    按纬度（或墨卡托 y）的绝对值选择系数表，每段系数为:
    [c0, c1, c2..c8, c9]，x' = c0 + c1*|x|，y' = c2 + c3*t + ... + c8*t^6，t = |y| / c9
    """

    @staticmethod
    def ll_to_mc(lon: float, lat: float) -> MercatorPoint:
        """
        经纬度 (BD09) -> 百度墨卡托 (BD09MC)

        经度回绕到 [-180, 180]，纬度限制在 [-74, 74]，结果保留两位小数

        Args:
            lon: 经度
            lat: 纬度

        Returns:
            MercatorPoint: 墨卡托坐标 (x, y)
        """
        lon = BaiduMercator._loop(lon, -180, 180)
        lat = BaiduMercator._clamp(lat, -74, 74)

        abs_lat = abs(lat)
        factors = LL2MC[-1]
        for band, row in zip(LLBAND, LL2MC):
            if abs_lat >= band:
                factors = row
                break

        x, y = BaiduMercator._convert(lon, lat, factors)
        return MercatorPoint(round(x, 2), round(y, 2))

    @staticmethod
    def mc_to_ll(x: float, y: float) -> Tuple[float, float]:
        """
        百度墨卡托 (BD09MC) -> 经纬度 (BD09)

        Args:
            x: 墨卡托 x
            y: 墨卡托 y

        Returns:
            tuple: (经度, 纬度)
        """
        abs_y = abs(y)
        factors = MC2LL[-1]
        for band, row in zip(MCBAND, MC2LL):
            if abs_y >= band:
                factors = row
                break

        return BaiduMercator._convert(x, y, factors)

    @staticmethod
    def _convert(x: float, y: float, factors: Sequence[float]) -> Tuple[float, float]:
        new_x = factors[0] + factors[1] * abs(x)
        t = abs(y) / factors[9]

        # Horner: c2 + t*(c3 + t*(c4 + ... + t*c8))
        new_y = factors[8]
        for c in reversed(factors[2:8]):
            new_y = new_y * t + c

        if x < 0:
            new_x = -new_x
        if y < 0:
            new_y = -new_y
        return new_x, new_y

    @staticmethod
    def _loop(value: float, low: float, high: float) -> float:
        while value > high:
            value -= high - low
        while value < low:
            value += high - low
        return value

    @staticmethod
    def _clamp(value: float, low: float, high: float) -> float:
        return min(max(value, low), high)
