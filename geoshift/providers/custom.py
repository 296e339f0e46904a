# geoshift/providers/custom.py

from typing import List, Optional, Union

from ..core.coordinate import Datum
from .base import TileProvider, TileProviderType

# 行号占位符二选一：{y} 为 XYZ 行号，{-y} 为 TMS 行号
_REQUIRED_PLACEHOLDERS = ("{z}", "{x}")
_ROW_PLACEHOLDERS = ("{y}", "{-y}")


class CustomTileProvider(TileProvider):
    """
    自定义瓦片提供商

    坐标系可以传 Datum 或名称字符串（如 "gcj-02"），
    URL 模板缺少 {z}、{x} 或行号占位符时抛出 ValueError
    """

    def __init__(
        self,
        name: str,
        url_template: str,
        subdomains: Optional[List[str]] = None,
        min_zoom: int = 0,
        max_zoom: int = 23,
        datum: Union[Datum, str] = Datum.WGS84,
        is_tms: bool = False,
    ):
        missing = [p for p in _REQUIRED_PLACEHOLDERS if p not in url_template]
        if not any(p in url_template for p in _ROW_PLACEHOLDERS):
            missing.append("{y}")
        if missing:
            raise ValueError(f"URL模板缺少占位符 {', '.join(missing)}: {url_template}")
        if min_zoom > max_zoom:
            raise ValueError(f"缩放级别范围无效: {min_zoom}-{max_zoom}")

        if isinstance(datum, str):
            datum = Datum.parse(datum)

        super().__init__(
            name=name,
            provider_type=TileProviderType.CUSTOM,
            url_template=url_template,
            min_zoom=min_zoom,
            max_zoom=max_zoom,
            subdomains=list(subdomains or []),
            attribution="Custom Provider",
            datum=datum,
            is_tms=is_tms,
        )
