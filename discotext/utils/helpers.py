"""
@description 通用工具函数
@responsibility 提供项目级别的辅助功能
"""

from __future__ import annotations
from typing import Optional
import re

from loguru import logger


def validate_url_pattern(url: str, url_pattern: Optional[str]) -> bool:
    """
    校验链接 URL 是否符合平台的 URL 正则

    Args:
        url: 待校验的 URL
        url_pattern: 平台配置的正则，为空时不校验

    Returns:
        True 表示通过（或无需校验），False 表示不匹配

    Examples:
        >>> validate_url_pattern("https://open.spotify.com/artist/1", r"^https?://open\\.spotify\\.com/")
        True

        >>> validate_url_pattern("https://example.com", r"^https?://open\\.spotify\\.com/")
        False

        >>> validate_url_pattern("anything", None)
        True
    """
    if not url_pattern:
        return True

    try:
        regex = re.compile(url_pattern)
    except re.error as e:
        # 无效的正则按未配置处理
        logger.error(f"无效的 URL 正则: {url_pattern} ({e})")
        return True

    return regex.search(url) is not None
