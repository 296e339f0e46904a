#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
geoshift包

功能特性：
1. WGS84、GCJ02、BD09 坐标系之间的相互转换
2. 迭代精确逆变换（GCJ02 -> WGS84、BD09 -> GCJ02、BD09 -> WGS84）
3. 百度墨卡托（BD09MC）投影
4. 标准 XYZ、TMS 以及百度瓦片坐标计算
5. 常用国内地图瓦片源的瓦片坐标转换与 URL 生成
6. 输入坐标规范化、格式化与哈希

版本：1.0
"""

from .core import (
    BaiduMercator,
    BD09Coordinate,
    Coordinate,
    CoordinateNormalizer,
    CoordinateTransformer,
    Datum,
    GCJ02Coordinate,
    MercatorPoint,
    TileAddress,
    TileConverter,
    TileMath,
    WGS84Coordinate,
    distance,
    sanity_in_china,
)
from .providers import ProviderManager

__all__ = [
    'Datum',
    'Coordinate',
    'WGS84Coordinate',
    'GCJ02Coordinate',
    'BD09Coordinate',
    'MercatorPoint',
    'TileAddress',
    'CoordinateNormalizer',
    'CoordinateTransformer',
    'BaiduMercator',
    'TileMath',
    'TileConverter',
    'ProviderManager',
    'distance',
    'sanity_in_china',
]
__version__ = '1.0'
