# geoshift/providers/baidu.py

from ..core.coordinate import Datum
from .base import TileProvider, TileProviderType


class BaiduTileProvider(TileProvider):
    """
    百度地图（BD-09 + 百度墨卡托瓦片坐标）

    百度瓦片以 (0, 0) 墨卡托原点为中心，低缩放级别下 x/y 可能为负数
    """

    def __init__(self):
        super().__init__(
            name="baidu",
            provider_type=TileProviderType.BAIDU,
            url_template="https://maponline{s}.bdimg.com/tile/?qt=vtile&z={z}&x={x}&y={y}&styles=pl&scaler=1",
            min_zoom=3,
            max_zoom=19,
            subdomains=["0", "1", "2", "3"],
            attribution="© Baidu",
            datum=Datum.BD09,
        )
