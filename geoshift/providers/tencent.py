# geoshift/providers/tencent.py

from ..core.coordinate import Datum
from .base import TileProvider, TileProviderType


class TencentTileProvider(TileProvider):
    """
    腾讯地图（GCJ-02），行号使用 TMS 顺序，模板中以 {-y} 表示
    """

    def __init__(self):
        super().__init__(
            name="tencent",
            provider_type=TileProviderType.TENCENT,
            url_template="https://rt{s}.map.gtimg.com/tile?z={z}&x={x}&y={-y}&type=vector&styleid=1",
            min_zoom=3,
            max_zoom=18,
            subdomains=["0", "1", "2", "3"],
            attribution="© Tencent",
            datum=Datum.GCJ02,
            is_tms=True,
        )
