# geoshift/cli.py
import argparse
import sys

from loguru import logger
from rich.console import Console
from rich.table import Table

from .config import setup_logging
from .core import (
    CoordinateNormalizer,
    CoordinateTransformer,
    Datum,
    TileConverter,
    TileMath,
    distance,
    parse_zoom_levels,
    sanity_in_china,
)
from .providers import ProviderManager

console = Console()

DATUM_CHOICES = [d.value for d in Datum]


def _fail(message: str) -> int:
    console.print(f"[bold red]错误:[/bold red] {message}")
    return 1


def cmd_list_providers(args) -> int:
    table = Table(title="可用瓦片源")
    table.add_column("name", style="cyan")
    table.add_column("type")
    table.add_column("datum")
    table.add_column("zoom_range")
    for name in ProviderManager.list_providers():
        p = ProviderManager.get_provider(name)
        table.add_row(name, p.provider_type.value, p.datum.value, f"{p.min_zoom}-{p.max_zoom}")
    console.print(table)
    return 0


def cmd_convert(args) -> int:
    source = Datum.parse(args.source)
    target = Datum.parse(args.target)

    coord = CoordinateNormalizer.normalize(args.lat, args.lon, source)
    if coord is None:
        return _fail(f"无效坐标: lat={args.lat}, lon={args.lon}")

    result = CoordinateTransformer.convert(
        coord, target, precise=args.precise, check_china=not args.no_check_china
    )
    formatted = CoordinateNormalizer.format(result, args.precision)

    table = Table(title=f"{source.value} -> {target.value}")
    table.add_column("datum", style="cyan")
    table.add_column("lat")
    table.add_column("lon")
    table.add_row(source.value, str(coord.lat), str(coord.lon))
    table.add_row(target.value, str(formatted.lat), str(formatted.lon))
    console.print(table)
    console.print(f"中国境内: {sanity_in_china(coord)}  偏移距离: {distance(coord, result):.3f} m")
    console.print(f"hash: {CoordinateNormalizer.hash(formatted)}")
    return 0


def cmd_tile(args) -> int:
    source = Datum.parse(args.source)
    coord = CoordinateNormalizer.normalize(args.lat, args.lon, source)
    if coord is None:
        return _fail(f"无效坐标: lat={args.lat}, lon={args.lon}")

    if args.scheme == "baidu":
        # 百度瓦片按 BD09 坐标切片
        coord = CoordinateTransformer.convert(coord, Datum.BD09)

    table = Table(title=f"瓦片坐标 ({args.scheme}, {coord.datum.value})")
    for column in ["zoom", "x", "y"]:
        table.add_column(column)

    for zoom in parse_zoom_levels(args.zoom):
        if args.scheme == "baidu":
            tile = TileConverter.baidu_coord_to_tile(zoom, coord)
        else:
            tile = TileMath.coord_to_tile(zoom, coord)
            if args.scheme == "tms":
                tile = tile._replace(y=TileMath.tms_convert_y(zoom, tile.y))
        table.add_row(str(tile.zoom), str(tile.x), str(tile.y))

    console.print(table)
    return 0


def cmd_bbox(args) -> int:
    if args.min_zoom < 0 or args.min_zoom > args.max_zoom:
        return _fail(f"缩放级别范围无效: {args.min_zoom}-{args.max_zoom}")

    zoom_tiles = TileMath.tiles_in_zoom_range(
        args.west, args.south, args.east, args.north, args.min_zoom, args.max_zoom, args.tms
    )

    table = Table(title=f"矩形区域瓦片 ({'tms' if args.tms else 'xyz'})")
    for column in ["zoom", "tiles", "x", "y"]:
        table.add_column(column)

    total = 0
    for zoom, tiles in zoom_tiles.items():
        xs = [x for x, _ in tiles]
        ys = [y for _, y in tiles]
        table.add_row(str(zoom), str(len(tiles)), f"{min(xs)}-{max(xs)}", f"{min(ys)}-{max(ys)}")
        total += len(tiles)

    console.print(table)
    console.print(f"共 {total} 个瓦片")

    if args.provider:
        provider = ProviderManager.get_provider(args.provider)
        for zoom in zoom_tiles:
            # URL 始终按 XYZ 行号生成，TMS 翻转由瓦片源自己处理
            for x, y in TileMath.tiles_in_bbox(args.west, args.south, args.east, args.north, zoom):
                console.print(provider.build_tile_url(zoom, x, y), soft_wrap=True)
    return 0


def cmd_url(args) -> int:
    if args.provider:
        provider = ProviderManager.get_provider(args.provider)
    else:
        provider = ProviderManager.resolve_provider()

    if not provider.supports_zoom(args.zoom):
        logger.warning(f"{provider.name} 不支持缩放级别 {args.zoom} ({provider.min_zoom}-{provider.max_zoom})")

    tile = provider.remap_tile(args.zoom, args.x, args.y)
    url = provider.get_tile_url(tile.x, tile.y, tile.zoom)
    logger.debug(f"{provider.name}: ({args.zoom}, {args.x}, {args.y}) -> {tuple(tile)}")
    console.print(url, soft_wrap=True)
    return 0


def cmd_distance(args) -> int:
    a = CoordinateNormalizer.normalize(args.lat1, args.lon1)
    b = CoordinateNormalizer.normalize(args.lat2, args.lon2)
    if a is None or b is None:
        return _fail("无效坐标")

    console.print(f"{distance(a, b):.3f} m")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="WGS84 / GCJ02 / BD09 坐标与瓦片坐标转换工具")
    parser.add_argument("-v", "--verbose", action="store_true", help="输出调试日志")
    subparsers = parser.add_subparsers(dest="cmd")

    subparsers.add_parser("list", help="列出支持的瓦片源")

    # 坐标以字符串传入，由 CoordinateNormalizer 负责解析与校验
    p_convert = subparsers.add_parser("convert", help="坐标系转换")
    p_convert.add_argument("--from", dest="source", required=True, choices=DATUM_CHOICES)
    p_convert.add_argument("--to", dest="target", required=True, choices=DATUM_CHOICES)
    p_convert.add_argument("--lat", required=True)
    p_convert.add_argument("--lon", required=True)
    p_convert.add_argument("--precise", action="store_true", help="逆变换使用迭代精确算法")
    p_convert.add_argument("--no-check-china", action="store_true", help="境外坐标也进行加偏")
    p_convert.add_argument("--precision", type=int, default=6, help="输出保留的小数位数")

    p_tile = subparsers.add_parser("tile", help="经纬度转瓦片坐标")
    p_tile.add_argument("--lat", required=True)
    p_tile.add_argument("--lon", required=True)
    p_tile.add_argument("-z", "--zoom", nargs="+", required=True, help="缩放级别，支持单个值或范围，如 14 或 8-15")
    p_tile.add_argument("--from", dest="source", choices=DATUM_CHOICES, default="wgs84",
                        help="输入坐标所属坐标系；xyz/tms 按输入坐标系切片，baidu 先转换为 BD09")
    p_tile.add_argument("--scheme", choices=["xyz", "tms", "baidu"], default="xyz")

    p_bbox = subparsers.add_parser("bbox", help="统计矩形区域覆盖的瓦片")
    p_bbox.add_argument("--north", type=float, required=True)
    p_bbox.add_argument("--south", type=float, required=True)
    p_bbox.add_argument("--west", type=float, required=True)
    p_bbox.add_argument("--east", type=float, required=True)
    p_bbox.add_argument("--min-zoom", type=int, required=True)
    p_bbox.add_argument("--max-zoom", type=int, required=True)
    p_bbox.add_argument("--tms", action="store_true", help="使用 TMS 行号")
    p_bbox.add_argument("--provider", default=None, help="同时输出该瓦片源的瓦片 URL")

    p_url = subparsers.add_parser("url", help="WGS-84 瓦片请求转换为瓦片源 URL")
    p_url.add_argument("--provider", default=None, help="瓦片源，默认读取 MAP_TILE_SOURCE")
    p_url.add_argument("-z", "--zoom", type=int, required=True)
    p_url.add_argument("-x", type=int, required=True)
    p_url.add_argument("-y", type=int, required=True)

    p_distance = subparsers.add_parser("distance", help="两点球面距离（米）")
    p_distance.add_argument("lat1")
    p_distance.add_argument("lon1")
    p_distance.add_argument("lat2")
    p_distance.add_argument("lon2")

    return parser


COMMANDS = {
    "list": cmd_list_providers,
    "convert": cmd_convert,
    "tile": cmd_tile,
    "bbox": cmd_bbox,
    "url": cmd_url,
    "distance": cmd_distance,
}


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging("DEBUG" if args.verbose else None)

    command = COMMANDS.get(args.cmd)
    if command is None:
        parser.print_help()
        return 0

    try:
        return command(args)
    except ValueError as e:
        logger.debug(f"命令 {args.cmd} 失败: {e}")
        return _fail(str(e))


if __name__ == "__main__":
    sys.exit(main())
