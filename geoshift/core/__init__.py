#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
坐标转换与瓦片寻址核心模块
"""

from geoshift.core.coordinate import (
    BD09Coordinate,
    Coordinate,
    Datum,
    GCJ02Coordinate,
    MercatorPoint,
    TileAddress,
    WGS84Coordinate,
)
from geoshift.core.normalizer import CoordinateNormalizer
from geoshift.core.geodesy import distance, sanity_in_china
from geoshift.core.transform import CoordinateTransformer
from geoshift.core.mercator import BaiduMercator
from geoshift.core.tile_math import TileConverter, TileMath
from geoshift.core.utils import parse_zoom_levels

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
    'distance',
    'sanity_in_china',
    'parse_zoom_levels',
]
