#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
瓦片坐标计算模块

标准 Web Mercator（XYZ）、TMS 行翻转以及百度瓦片坐标之间的转换
"""

import math
from typing import Dict, List, Tuple

from .constants import BD_ZOOM_LEVEL, PI, TILE_SIZE, WEB_MERCATOR_MAX_LAT
from .coordinate import BD09Coordinate, Coordinate, TileAddress, WGS84Coordinate
from .mercator import BaiduMercator


class TileMath:
    """
    瓦片坐标计算工具类（Web Mercator / XYZ）
    """

    @staticmethod
    def coord_to_tile(zoom: int, coord: Coordinate) -> TileAddress:
        """
        经纬度 -> 瓦片坐标 (zoom, x, y)

        不限制纬度，超出 Web Mercator 范围的纬度会得到金字塔之外的行号

        Args:
            zoom: 缩放级别
            coord: BD09 坐标

        Returns:
            TileAddress: 瓦片坐标
        """
        lat_rad = coord.lat * PI / 180
        n = math.pow(2, zoom)

        x = math.floor((coord.lon + 180) / 360 * n)
        y = math.floor((1 - math.asinh(math.tan(lat_rad)) / PI) / 2 * n)

        return TileAddress(zoom, x, y)

    @staticmethod
    def tile_to_coord(zoom: int, x: int, y: int) -> WGS84Coordinate:
        """
        瓦片坐标 -> 瓦片左上角经纬度
        """
        n = math.pow(2, zoom)

        lon = x / n * 360 - 180
        lat_rad = math.atan(math.sinh(PI * (1 - 2 * y / n)))
        lat = lat_rad * 180 / PI

        return WGS84Coordinate(lat=lat, lon=lon)

    @staticmethod
    def tile_to_bbox(zoom: int, x: int, y: int) -> Tuple[float, float, float, float]:
        """
        获取单个瓦片的地理范围 (west, south, east, north)
        """
        # 左上角
        north_west = TileMath.tile_to_coord(zoom, x, y)
        # 右下角（x+1, y+1）
        south_east = TileMath.tile_to_coord(zoom, x + 1, y + 1)
        return north_west.lon, south_east.lat, south_east.lon, north_west.lat

    @staticmethod
    def tms_convert_y(zoom: int, y: int) -> int:
        """
        标准瓦片 y 坐标 <-> TMS 坐标（互逆）

        适用于腾讯等使用 TMS 行序的地图提供商
        """
        return (2 ** zoom - 1) - y

    @staticmethod
    def tiles_in_bbox(
        west: float, south: float, east: float, north: float, zoom: int, is_tms: bool = False
    ) -> List[Tuple[int, int]]:
        """
        计算覆盖矩形区域的所有瓦片 (x, y)
        """
        n = 2 ** zoom
        max_valid_tile = n - 1

        # 限制纬度避免溢出
        north = max(min(north, WEB_MERCATOR_MAX_LAT), -WEB_MERCATOR_MAX_LAT)
        south = max(min(south, WEB_MERCATOR_MAX_LAT), -WEB_MERCATOR_MAX_LAT)

        _, min_x, min_y = TileMath.coord_to_tile(zoom, WGS84Coordinate(lat=north, lon=west))
        _, max_x, max_y = TileMath.coord_to_tile(zoom, WGS84Coordinate(lat=south, lon=east))

        # 确保瓦片坐标在有效范围内 [0, max_valid_tile]
        min_x = max(0, min_x)
        min_y = max(0, min_y)
        max_x = min(max_valid_tile, max_x)
        max_y = min(max_valid_tile, max_y)

        # 纠正一下顺序，保证 min <= max
        if min_x > max_x:
            min_x, max_x = max_x, min_x
        if min_y > max_y:
            min_y, max_y = max_y, min_y

        tiles = []
        for x in range(min_x, max_x + 1):
            for y in range(min_y, max_y + 1):
                tiles.append((x, TileMath.tms_convert_y(zoom, y) if is_tms else y))

        return tiles

    @staticmethod
    def tiles_in_zoom_range(
        west: float,
        south: float,
        east: float,
        north: float,
        min_zoom: int,
        max_zoom: int,
        is_tms: bool = False,
    ) -> Dict[int, List[Tuple[int, int]]]:
        """
        多个 zoom 级别的瓦片集合
        """
        zoom_tiles = {}
        for z in range(min_zoom, max_zoom + 1):
            zoom_tiles[z] = TileMath.tiles_in_bbox(west, south, east, north, z, is_tms)
        return zoom_tiles


class TileConverter:
    """
    不同坐标系地图之间的瓦片坐标转换
    """

    @staticmethod
    def wgs_to_gcj(zoom: int, x: int, y: int) -> TileAddress:
        # GCJ-02 的瓦片坐标和 WGS-84 的瓦片坐标是相同的
        return TileAddress(zoom, x, y)

    @staticmethod
    def gcj_to_wgs(zoom: int, x: int, y: int) -> TileAddress:
        return TileAddress(zoom, x, y)

    @staticmethod
    def wgs_to_bd(zoom: int, x: int, y: int) -> TileAddress:
        """
        将 WGS-84 瓦片坐标转换为百度瓦片坐标

        取瓦片左上角经纬度，不做坐标系转换，直接当作 BD09 坐标按百度墨卡托投影重新切片
        """
        corner = TileMath.tile_to_coord(zoom, x, y)
        return TileConverter.baidu_coord_to_tile(zoom, BD09Coordinate(lat=corner.lat, lon=corner.lon))

    @staticmethod
    def bd_to_wgs(zoom: int, x: int, y: int) -> TileAddress:
        """
        将百度瓦片坐标转换为 WGS-84 瓦片坐标
        """
        coord = TileConverter.baidu_tile_to_coord(zoom, x, y)
        return TileMath.coord_to_tile(zoom, coord)

    @staticmethod
    def baidu_coord_to_tile(zoom: int, coord: BD09Coordinate) -> TileAddress:
        """
        将 BD09 坐标转换为百度地图的瓦片坐标

        Args:
            zoom: 缩放级别
            coord: BD09 坐标

        Returns:
            TileAddress: 百度瓦片坐标，低缩放级别下可能为负数
        """
        mercator_x, mercator_y = BaiduMercator.ll_to_mc(coord.lon, coord.lat)

        # 18 是百度地图投影中的基准级别
        resolution = math.pow(2, zoom - BD_ZOOM_LEVEL)

        tile_x = math.floor(mercator_x * resolution / TILE_SIZE)
        tile_y = math.floor(mercator_y * resolution / TILE_SIZE)

        return TileAddress(zoom, tile_x, tile_y)

    @staticmethod
    def baidu_tile_to_coord(zoom: int, tile_x: int, tile_y: int) -> BD09Coordinate:
        """
        将百度地图瓦片坐标转换为 BD09 坐标（瓦片左下角）
        """
        resolution = math.pow(2, zoom - BD_ZOOM_LEVEL)

        mercator_x = tile_x * TILE_SIZE / resolution
        mercator_y = tile_y * TILE_SIZE / resolution

        lon, lat = BaiduMercator.mc_to_ll(mercator_x, mercator_y)
        return BD09Coordinate(lat=lat, lon=lon)
