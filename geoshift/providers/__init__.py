# geoshift/providers/__init__.py

from .base import TileProvider, TileProviderType
from .osm import OSMTileProvider
from .gcj import AmapTileProvider, GoogleTileProvider
from .tencent import TencentTileProvider
from .baidu import BaiduTileProvider
from .custom import CustomTileProvider
from .manager import ProviderManager

__all__ = [
    'TileProvider',
    'TileProviderType',
    'OSMTileProvider',
    'AmapTileProvider',
    'GoogleTileProvider',
    'TencentTileProvider',
    'BaiduTileProvider',
    'CustomTileProvider',
    'ProviderManager'
]
