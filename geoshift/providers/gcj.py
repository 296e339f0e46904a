# geoshift/providers/gcj.py

from ..core.coordinate import Datum
from .base import TileProvider, TileProviderType


class AmapTileProvider(TileProvider):
    """
    高德地图矢量瓦片（GCJ-02，瓦片坐标与 WGS-84 相同）
    """

    def __init__(self):
        super().__init__(
            name="amap",
            provider_type=TileProviderType.AMAP,
            url_template=(
                "https://webrd0{s}.is.autonavi.com/appmaptile"
                "?z={z}&x={x}&y={y}&lang=zh_cn&size=1&scale=1&style=7"
            ),
            min_zoom=3,
            max_zoom=18,
            subdomains=["1", "2", "3", "4"],
            attribution="© AutoNavi",
            datum=Datum.GCJ02,
        )


class GoogleTileProvider(TileProvider):
    """
    Google 中国区地图（GCJ-02）
    """

    def __init__(self):
        super().__init__(
            name="google",
            provider_type=TileProviderType.GOOGLE,
            url_template="https://mt{s}.google.com/vt/?lyrs=m&hl=zh&gl=cn&z={z}&x={x}&y={y}",
            min_zoom=0,
            max_zoom=20,
            subdomains=["0", "1", "2", "3"],
            attribution="© Google",
            datum=Datum.GCJ02,
        )
