# geoshift/providers/manager.py

from typing import Dict, List, Optional

from loguru import logger

from ..config import DEFAULT_TILE_SOURCE, get_tile_source
from .base import TileProvider
from .baidu import BaiduTileProvider
from .custom import CustomTileProvider
from .gcj import AmapTileProvider, GoogleTileProvider
from .osm import OSMTileProvider
from .tencent import TencentTileProvider


class ProviderManager:
    """
    简单的 provider 注册 / 获取
    """

    _providers: Dict[str, TileProvider] = {}

    @classmethod
    def register_provider(cls, provider: TileProvider):
        """
        注册瓦片提供商

        Args:
            provider: 瓦片提供商实例
        """
        cls._providers[provider.name.lower()] = provider

    @classmethod
    def get_provider(cls, name: str) -> TileProvider:
        """
        获取瓦片提供商

        Args:
            name: 提供商名称（忽略大小写）

        Returns:
            TileProvider: 瓦片提供商实例

        Raises:
            ValueError: 未知的瓦片提供商
        """
        p = cls._providers.get(name.lower())
        if not p:
            raise ValueError(f"未知瓦片源: {name}")
        return p

    @classmethod
    def resolve_provider(cls, name: Optional[str] = None) -> TileProvider:
        """
        按名称获取瓦片提供商，未指定时读取 MAP_TILE_SOURCE 配置，
        名称未知时回退到 OpenStreetMap

        Args:
            name: 提供商名称

        Returns:
            TileProvider: 瓦片提供商实例
        """
        source = name.strip() if isinstance(name, str) and name.strip() else get_tile_source()
        p = cls._providers.get(source.lower())
        if not p:
            logger.warning(f"未知瓦片源 {source}，使用默认瓦片源 {DEFAULT_TILE_SOURCE}")
            p = cls._providers[DEFAULT_TILE_SOURCE]
        return p

    @classmethod
    def list_providers(cls) -> List[str]:
        """
        列出所有已注册的瓦片提供商

        Returns:
            List[str]: 瓦片提供商名称列表
        """
        return list(cls._providers.keys())

    @classmethod
    def create_custom_provider(cls, name: str, url_template: str, **options) -> TileProvider:
        """
        创建并注册自定义瓦片提供商，同名的已有提供商会被替换

        Args:
            name: 提供商名称
            url_template: URL模板
            **options: 传给 CustomTileProvider 的其它参数
                （subdomains、min_zoom、max_zoom、datum、is_tms）

        Returns:
            TileProvider: 自定义瓦片提供商实例
        """
        provider = CustomTileProvider(name=name, url_template=url_template, **options)
        if provider.name.lower() in cls._providers:
            logger.warning(f"瓦片源 {name} 已存在，将被替换")
        cls.register_provider(provider)
        logger.debug(f"注册自定义瓦片源: {name} ({provider.datum.value})")
        return provider


# 注册默认 provider
ProviderManager.register_provider(OSMTileProvider())
ProviderManager.register_provider(AmapTileProvider())
ProviderManager.register_provider(GoogleTileProvider())
ProviderManager.register_provider(TencentTileProvider())
ProviderManager.register_provider(BaiduTileProvider())
