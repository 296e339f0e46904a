#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
坐标规范化模块

把调用方传入的经纬度（浮点数、整数、Decimal、数字字符串）
转换为经过范围校验的坐标对象，同时提供格式化与哈希工具
"""

import re
import struct
import zlib
from decimal import Decimal
from typing import Any, Optional

from .coordinate import Coordinate, Datum

# 只接受 ASCII 数字；不允许首尾空白、inf/nan、下划线、全角或其它文字的数字等 float() 可以接受的写法
_NUMBER_PATTERN = re.compile(r"[+-]?[0-9]+(\.[0-9]+)?([eE][+-]?[0-9]+)?")


class CoordinateNormalizer:
    """
    坐标规范化工具类
    """

    @staticmethod
    def normalize(lat: Any, lon: Any, datum: Datum = Datum.WGS84) -> Optional[Coordinate]:
        """
        规范化输入坐标，确保为浮点数格式并校验经纬度范围

        两个参数必须是同一种类型（都为浮点数、都为整数、都为 Decimal 或都为字符串）。
        纬度范围：-90 到 90 度；经度范围：-180 到 180 度（包含边界）。

        Args:
            lat: 纬度
            lon: 经度
            datum: 结果坐标所属的坐标系，默认 WGS84

        Returns:
            Optional[Coordinate]: 规范化后的坐标，输入无效或超出范围时返回 None
        """
        lat_value = CoordinateNormalizer._to_float(lat, lon)
        lon_value = CoordinateNormalizer._to_float(lon, lat)
        if lat_value is None or lon_value is None:
            return None

        if not CoordinateNormalizer.valid_range(lat_value, lon_value):
            return None

        return datum.coordinate_class(lat=lat_value, lon=lon_value)

    @staticmethod
    def valid_range(lat: float, lon: float) -> bool:
        return -90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0

    @staticmethod
    def _to_float(value: Any, other: Any) -> Optional[float]:
        # bool 是 int 的子类，需要单独排除
        if isinstance(value, bool) or isinstance(other, bool):
            return None
        if type(value) is not type(other):
            return None

        if isinstance(value, Decimal) and not value.is_finite():
            return None
        if isinstance(value, str) and not _NUMBER_PATTERN.fullmatch(value):
            return None
        if not isinstance(value, (float, int, Decimal, str)):
            return None

        try:
            return float(value)
        except (OverflowError, ValueError):
            # 超大整数无法转换为浮点数
            return None

    @staticmethod
    def format(coord: Coordinate, precision: int = 6) -> Coordinate:
        """
        格式化坐标输出（保留指定小数位）

        Args:
            coord: 坐标
            precision: 保留的小数位数

        Returns:
            Coordinate: 同坐标系的新坐标
        """
        return type(coord)(lat=round(coord.lat, precision), lon=round(coord.lon, precision))

    @staticmethod
    def hash(coord: Coordinate) -> int:
        """
        生成坐标唯一标识符（32 位无符号整数）

        对经纬度的 IEEE-754 大端字节做 CRC-32，跨进程稳定

        Args:
            coord: 坐标

        Returns:
            int: 哈希值
        """
        payload = struct.pack(">dd", float(coord.lat), float(coord.lon))
        return zlib.crc32(payload) & 0xFFFFFFFF
