#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
配置模块

从环境变量读取默认瓦片源和日志级别
"""

import os
import sys

from loguru import logger

# 环境变量名
TILE_SOURCE_ENV = "MAP_TILE_SOURCE"
LOG_LEVEL_ENV = "GEOSHIFT_LOG_LEVEL"

DEFAULT_TILE_SOURCE = "openstreetmap"
DEFAULT_LOG_LEVEL = "INFO"


def get_tile_source() -> str:
    """
    获取配置的默认瓦片源名称（未配置或为空时使用 OpenStreetMap）
    """
    source = os.environ.get(TILE_SOURCE_ENV, "").strip()
    return source or DEFAULT_TILE_SOURCE


def get_log_level() -> str:
    return os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL


def setup_logging(level: str = None):
    """
    重新配置 loguru 的标准错误输出级别

    Args:
        level: 日志级别，默认读取 GEOSHIFT_LOG_LEVEL
    """
    logger.remove()
    logger.add(sys.stderr, level=(level or get_log_level()).upper())
