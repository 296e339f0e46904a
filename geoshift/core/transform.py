#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
经纬度转换模块

支持 WGS84、GCJ02、BD09 之间的相互转换，包括一步近似的逆变换
和 Caijun 2014 式的迭代精确逆变换

参考 Artoria2e5 的 PRCoords: https://github.com/Artoria2e5/PRCoords
"""

import math
from typing import Callable, Tuple

from loguru import logger

from .constants import BD_DLAT, BD_DLON, GCJ_A, GCJ_EE, PI, PRC_EPS, PRC_MAX_ITERATIONS
from .coordinate import (
    BD09Coordinate,
    Coordinate,
    Datum,
    GCJ02Coordinate,
    WGS84Coordinate,
)
from .geodesy import distance, sanity_in_china


def _distortions(x: float, y: float) -> Tuple[float, float]:
    """
    计算扭曲值

    输入 (x = lon - 105, y = lat - 35)，返回以米为单位的弧长扭曲 (d_lat_m, d_lon_m)
    """
    d_lat_m = (
        -100 + 2 * x + 3 * y + 0.2 * y * y + 0.1 * x * y
        + 0.2 * math.sqrt(abs(x))
        + (2 * math.sin(x * 6 * PI) + 2 * math.sin(x * 2 * PI)
           + 2 * math.sin(y * PI) + 4 * math.sin(y / 3 * PI)
           + 16 * math.sin(y / 12 * PI) + 32 * math.sin(y / 30 * PI)) * 20 / 3
    )

    d_lon_m = (
        300 + x + 2 * y + 0.1 * x * x + 0.1 * x * y
        + 0.1 * math.sqrt(abs(x))
        + (2 * math.sin(x * 6 * PI) + 2 * math.sin(x * 2 * PI)
           + 2 * math.sin(x * PI) + 4 * math.sin(x / 3 * PI)
           + 15 * math.sin(x / 12 * PI) + 30 * math.sin(x / 30 * PI)) * 20 / 3
    )

    return d_lat_m, d_lon_m


def _iterate(forward: Callable[[Coordinate], Coordinate], target: Coordinate, estimate: Coordinate) -> Coordinate:
    """
    不动点迭代：反复用正向变换检验当前估计值，减去与目标的差值

    误差小于 PRC_EPS 时提前返回；到达最大迭代次数时返回当前最优估计
    """
    for _ in range(PRC_MAX_ITERATIONS):
        result = forward(estimate)
        d_lat = result.lat - target.lat
        d_lon = result.lon - target.lon

        if max(abs(d_lat), abs(d_lon)) <= PRC_EPS:
            return estimate

        estimate = estimate.shift(-d_lat, -d_lon)

    logger.debug(
        f"{target.datum.value} -> {estimate.datum.value} 迭代 {PRC_MAX_ITERATIONS} 次未收敛，"
        f"返回当前估计: target={target.as_tuple()}, estimate={estimate.as_tuple()}"
    )
    return estimate


class CoordinateTransformer:
    """
    坐标系转换工具类（WGS84 / GCJ02 / BD09）
    """

    distance = staticmethod(distance)
    sanity_in_china = staticmethod(sanity_in_china)

    @staticmethod
    def wgs_to_gcj(wgs: WGS84Coordinate, check_china: bool = True) -> GCJ02Coordinate:
        """
        将 WGS-84 坐标转换为 GCJ-02

        Args:
            wgs: WGS-84 坐标
            check_china: 为 True 时中国境外坐标原样返回

        Returns:
            GCJ02Coordinate: GCJ-02 坐标
        """
        lat, lon = wgs.lat, wgs.lon
        if check_china and not sanity_in_china(wgs):
            # 发现非中国坐标，直接返回
            return GCJ02Coordinate(lat=lat, lon=lon)

        x = lon - 105
        y = lat - 35
        d_lat_m, d_lon_m = _distortions(x, y)

        rad_lat = lat / 180 * PI
        magic = 1 - GCJ_EE * math.pow(math.sin(rad_lat), 2)

        lat_deg_arclen = PI / 180 * (GCJ_A * (1 - GCJ_EE)) / math.pow(magic, 1.5)
        lon_deg_arclen = PI / 180 * (GCJ_A * math.cos(rad_lat) / math.sqrt(magic))

        return GCJ02Coordinate(
            lat=lat + d_lat_m / lat_deg_arclen,
            lon=lon + d_lon_m / lon_deg_arclen,
        )

    @staticmethod
    def gcj_to_wgs(gcj: GCJ02Coordinate, check_china: bool = True) -> WGS84Coordinate:
        """
        将 GCJ-02 坐标转换为 WGS-84（一步近似，误差约 1~2 米）
        """
        # 把 GCJ-02 值当作 WGS-84 输入做一次正向变换，求出偏移量
        shifted = CoordinateTransformer.wgs_to_gcj(WGS84Coordinate(lat=gcj.lat, lon=gcj.lon), check_china)
        return WGS84Coordinate(
            lat=gcj.lat - (shifted.lat - gcj.lat),
            lon=gcj.lon - (shifted.lon - gcj.lon),
        )

    @staticmethod
    def gcj_to_bd(gcj: GCJ02Coordinate) -> BD09Coordinate:
        """
        将 GCJ-02 坐标转换为 BD-09
        """
        x = gcj.lon
        y = gcj.lat

        r = math.sqrt(x * x + y * y) + 0.00002 * math.sin(y * PI * 3000 / 180)
        theta = math.atan2(y, x) + 0.000003 * math.cos(x * PI * 3000 / 180)

        return BD09Coordinate(
            lat=r * math.sin(theta) + BD_DLAT,
            lon=r * math.cos(theta) + BD_DLON,
        )

    @staticmethod
    def bd_to_gcj(bd: BD09Coordinate) -> GCJ02Coordinate:
        """
        将 BD-09 坐标转换为 GCJ-02
        """
        x = bd.lon - BD_DLON
        y = bd.lat - BD_DLAT

        r = math.sqrt(x * x + y * y) - 0.00002 * math.sin(y * PI * 3000 / 180)
        theta = math.atan2(y, x) - 0.000003 * math.cos(x * PI * 3000 / 180)

        return GCJ02Coordinate(lat=r * math.sin(theta), lon=r * math.cos(theta))

    @staticmethod
    def bd_to_wgs(bd: BD09Coordinate, check_china: bool = True) -> WGS84Coordinate:
        """
        将 BD-09 坐标转换为 WGS-84
        """
        return CoordinateTransformer.gcj_to_wgs(CoordinateTransformer.bd_to_gcj(bd), check_china)

    @staticmethod
    def wgs_to_bd(wgs: WGS84Coordinate, check_china: bool = True) -> BD09Coordinate:
        """
        将 WGS-84 坐标转换为 BD-09
        """
        return CoordinateTransformer.gcj_to_bd(CoordinateTransformer.wgs_to_gcj(wgs, check_china))

    @staticmethod
    def gcj_to_wgs_precise(gcj: GCJ02Coordinate, check_china: bool = True) -> WGS84Coordinate:
        """
        使用迭代方法精确地将 GCJ-02 转换为 WGS-84

        通常调用 4 次 wgs_to_gcj，精度约 0.1 毫米
        """
        return _iterate(
            lambda wgs: CoordinateTransformer.wgs_to_gcj(wgs, check_china),
            gcj,
            CoordinateTransformer.gcj_to_wgs(gcj, check_china),
        )

    @staticmethod
    def bd_to_gcj_precise(bd: BD09Coordinate) -> GCJ02Coordinate:
        """
        使用迭代方法精确地将 BD-09 转换为 GCJ-02
        """
        return _iterate(CoordinateTransformer.gcj_to_bd, bd, CoordinateTransformer.bd_to_gcj(bd))

    @staticmethod
    def bd_to_wgs_precise(bd: BD09Coordinate, check_china: bool = True) -> WGS84Coordinate:
        """
        使用迭代方法精确地将 BD-09 转换为 WGS-84
        """
        return _iterate(
            lambda wgs: CoordinateTransformer.wgs_to_bd(wgs, check_china),
            bd,
            CoordinateTransformer.bd_to_wgs(bd, check_china),
        )

    @staticmethod
    def convert(
        coord: Coordinate,
        target: Datum,
        precise: bool = False,
        check_china: bool = True,
    ) -> Coordinate:
        """
        在任意两个坐标系之间转换

        Args:
            coord: 源坐标，坐标系由其类型决定
            target: 目标坐标系
            precise: 逆变换方向是否使用迭代精确算法
            check_china: 是否对中国境外坐标跳过加偏

        Returns:
            Coordinate: 目标坐标系下的坐标
        """
        source = coord.datum
        if source == target:
            return coord

        ct = CoordinateTransformer
        if source == Datum.WGS84:
            if target == Datum.GCJ02:
                return ct.wgs_to_gcj(coord, check_china)
            return ct.wgs_to_bd(coord, check_china)

        if source == Datum.GCJ02:
            if target == Datum.BD09:
                return ct.gcj_to_bd(coord)
            if precise:
                return ct.gcj_to_wgs_precise(coord, check_china)
            return ct.gcj_to_wgs(coord, check_china)

        if target == Datum.GCJ02:
            return ct.bd_to_gcj_precise(coord) if precise else ct.bd_to_gcj(coord)
        if precise:
            return ct.bd_to_wgs_precise(coord, check_china)
        return ct.bd_to_wgs(coord, check_china)
