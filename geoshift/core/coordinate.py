#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
坐标数据类型模块

每种坐标系（WGS84、GCJ02、BD09）对应一个独立的不可变坐标类，
避免把 GCJ02 坐标误当作 WGS84 坐标传入转换函数
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, NamedTuple, Tuple, Type


class Datum(Enum):
    """
    坐标系枚举
    """
    WGS84 = "wgs84"
    GCJ02 = "gcj02"
    BD09 = "bd09"

    @property
    def coordinate_class(self) -> Type["Coordinate"]:
        return COORDINATE_CLASSES[self]

    @classmethod
    def parse(cls, value: str) -> "Datum":
        """
        根据名称解析坐标系，忽略大小写和连字符

        Args:
            value: 坐标系名称，如 wgs84、GCJ-02、bd09

        Returns:
            Datum: 坐标系

        Raises:
            ValueError: 未知的坐标系
        """
        key = value.strip().lower().replace("-", "").replace("_", "")
        for datum in cls:
            if datum.value == key:
                return datum
        raise ValueError(f"未知坐标系: {value}")


@dataclass(frozen=True)
class Coordinate:
    """
    经纬度坐标（度）
    """
    lat: float
    lon: float

    datum: ClassVar[Datum]

    def as_tuple(self) -> Tuple[float, float]:
        return self.lat, self.lon

    def shift(self, d_lat: float, d_lon: float):
        """返回平移后的同坐标系新坐标"""
        return type(self)(lat=self.lat + d_lat, lon=self.lon + d_lon)


@dataclass(frozen=True)
class WGS84Coordinate(Coordinate):
    datum: ClassVar[Datum] = Datum.WGS84


@dataclass(frozen=True)
class GCJ02Coordinate(Coordinate):
    datum: ClassVar[Datum] = Datum.GCJ02


@dataclass(frozen=True)
class BD09Coordinate(Coordinate):
    datum: ClassVar[Datum] = Datum.BD09


COORDINATE_CLASSES = {
    Datum.WGS84: WGS84Coordinate,
    Datum.GCJ02: GCJ02Coordinate,
    Datum.BD09: BD09Coordinate,
}


class MercatorPoint(NamedTuple):
    """百度墨卡托（BD09MC）平面坐标，单位米"""
    x: float
    y: float


class TileAddress(NamedTuple):
    """瓦片坐标 (zoom, x, y)"""
    zoom: int
    x: int
    y: int
