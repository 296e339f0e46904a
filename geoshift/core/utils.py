#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
工具函数模块
"""

from typing import Iterable, List, Optional


def parse_zoom_levels(zoom_args: Optional[Iterable[str]]) -> Optional[List[int]]:
    """
    解析缩放级别参数，支持单个值和范围格式

    Args:
        zoom_args: 命令行传递的缩放级别参数列表，如 ["14"] 或 ["8-15", "18"]

    Returns:
        list: 去重排序后的缩放级别列表，未传参数时返回 None

    Raises:
        ValueError: 参数无法解析或缩放级别为负数
    """
    if not zoom_args:
        return None

    zoom_levels = []
    for arg in zoom_args:
        arg = str(arg).strip()
        # 检查是否是范围格式，如 8-15
        if "-" in arg.lstrip("-"):
            start, end = map(int, arg.split("-", 1))
            # 确保start <= end
            if start > end:
                start, end = end, start
            zoom_levels.extend(range(start, end + 1))
        else:
            zoom_levels.append(int(arg))

    if any(z < 0 for z in zoom_levels):
        raise ValueError(f"缩放级别不能为负数: {list(zoom_args)}")

    # 去重并排序
    return sorted(set(zoom_levels))
