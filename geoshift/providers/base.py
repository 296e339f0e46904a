# geoshift/providers/base.py

from enum import Enum
from typing import List

from ..core.coordinate import Datum, TileAddress
from ..core.tile_math import TileConverter, TileMath


class TileProviderType(Enum):
    """
    瓦片提供商类型枚举
    """
    OSM = "osm"
    AMAP = "amap"
    GOOGLE = "google"
    TENCENT = "tencent"
    BAIDU = "baidu"
    CUSTOM = "custom"


class TileProvider:
    """
    瓦片提供商基类

    接收 WGS-84 标准瓦片请求，转换为提供商自己的坐标系/瓦片坐标，再生成瓦片 URL。
    只生成 URL，不发起网络请求
    """

    def __init__(
        self,
        name: str,
        provider_type: TileProviderType,
        url_template: str,
        min_zoom: int,
        max_zoom: int,
        subdomains: List[str],
        attribution: str = "",
        datum: Datum = Datum.WGS84,
        is_tms: bool = False,
    ):
        """
        初始化瓦片提供商

        Args:
            name: 提供商名称
            provider_type: 提供商类型
            url_template: URL模板，支持 {z} {x} {y} {-y} {s} 占位符
            min_zoom: 最小缩放级别
            max_zoom: 最大缩放级别
            subdomains: 子域名列表
            attribution: 版权信息
            datum: 瓦片内容使用的坐标系
            is_tms: 行号是否按 TMS 翻转
        """
        self.name = name
        self.provider_type = provider_type
        self.url_template = url_template
        self.min_zoom = min_zoom
        self.max_zoom = max_zoom
        self.subdomains = subdomains or []
        self.attribution = attribution
        self.datum = datum
        self.is_tms = is_tms

    def remap_tile(self, zoom: int, x: int, y: int) -> TileAddress:
        """
        将 WGS-84 标准瓦片坐标转换为提供商的瓦片坐标

        Args:
            zoom: 缩放级别
            x: 瓦片x坐标
            y: 瓦片y坐标

        Returns:
            TileAddress: 提供商瓦片坐标
        """
        if self.datum == Datum.BD09:
            # 百度地图使用 BD09 坐标系和自己的瓦片坐标
            return TileConverter.wgs_to_bd(zoom, x, y)
        if self.datum == Datum.GCJ02:
            return TileConverter.wgs_to_gcj(zoom, x, y)
        return TileAddress(zoom, x, y)

    def get_tile_url(self, x: int, y: int, zoom: int) -> str:
        """
        获取瓦片URL（x, y 为提供商自己的瓦片坐标）

        Args:
            x: 瓦片x坐标
            y: 瓦片y坐标
            zoom: 缩放级别

        Returns:
            str: 瓦片URL
        """
        url = self.url_template
        if "{-y}" in url:
            url = url.replace("{-y}", str(TileMath.tms_convert_y(zoom, y)))
        elif self.is_tms:
            y = TileMath.tms_convert_y(zoom, y)

        url = url.replace("{z}", str(zoom))
        url = url.replace("{x}", str(x))
        url = url.replace("{y}", str(y))

        # 处理子域名
        if "{s}" in url:
            url = url.replace("{s}", self._pick_subdomain(x, y))

        return url

    def build_tile_url(self, zoom: int, x: int, y: int) -> str:
        """
        WGS-84 标准瓦片请求 -> 提供商瓦片 URL
        """
        tile = self.remap_tile(zoom, x, y)
        return self.get_tile_url(tile.x, tile.y, tile.zoom)

    def supports_zoom(self, zoom: int) -> bool:
        return self.min_zoom <= zoom <= self.max_zoom

    def _pick_subdomain(self, x: int, y: int) -> str:
        if not self.subdomains:
            return ""
        return self.subdomains[(x + y) % len(self.subdomains)]
