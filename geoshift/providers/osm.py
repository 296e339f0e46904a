# geoshift/providers/osm.py

from .base import TileProvider, TileProviderType


class OSMTileProvider(TileProvider):
    """
    OpenStreetMap 标准 XYZ 瓦片（WGS-84）
    """

    def __init__(self):
        """
        初始化OSM瓦片提供商
        """
        super().__init__(
            name="openstreetmap",
            provider_type=TileProviderType.OSM,
            url_template="https://{s}.tile.osm.org/{z}/{x}/{y}.png",
            min_zoom=0,
            max_zoom=19,
            subdomains=["a", "b", "c"],
            attribution="© OpenStreetMap contributors",
        )
