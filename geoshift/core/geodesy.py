#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
大地测量工具模块

中国境内粗略判断与 Haversine 球面距离
"""

import math

from .constants import (
    CHINA_MAX_LAT,
    CHINA_MAX_LON,
    CHINA_MIN_LAT,
    CHINA_MIN_LON,
    EARTH_R,
    PI,
)
from .coordinate import Coordinate


def sanity_in_china(coord: Coordinate) -> bool:
    """
    检查坐标是否在中国境内（粗略矩形，只用于决定是否需要加偏）

    Args:
        coord: 任意坐标系的坐标

    Returns:
        bool: 是否在矩形范围内
    """
    return (
        CHINA_MIN_LAT <= coord.lat <= CHINA_MAX_LAT
        and CHINA_MIN_LON <= coord.lon <= CHINA_MAX_LON
    )


def _haversine(theta: float) -> float:
    return math.pow(math.sin(theta / 2), 2)


def distance(a: Coordinate, b: Coordinate) -> float:
    """
    使用 Haversine 方法计算两个坐标之间的距离（米）

    适用于短距离，如转换偏差检查

    Args:
        a: 坐标 A
        b: 坐标 B

    Returns:
        float: 距离（米）
    """
    lat1_rad = a.lat * PI / 180
    lat2_rad = b.lat * PI / 180
    delta_lat_rad = (a.lat - b.lat) * PI / 180
    delta_lon_rad = (a.lon - b.lon) * PI / 180

    h = _haversine(delta_lat_rad) + math.cos(lat1_rad) * math.cos(lat2_rad) * _haversine(delta_lon_rad)
    return 2 * EARTH_R * math.asin(math.sqrt(h))
