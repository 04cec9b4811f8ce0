"""
@description 活动系列目录
@responsibility 持有已知活动系列，提供系列与回次推断、按基础名查找系列
"""

from typing import TYPE_CHECKING, Optional

from loguru import logger

from discotext.schemas.text import EventEditionInfo, EventSeries, SuggestResult
from discotext.services.event_name_parser import suggest_from_event_name
from discotext.services.name_utils import parse_event_edition

if TYPE_CHECKING:
    from discotext.core.config import Config


class SeriesCatalog:
    """活动系列目录（只读）"""

    def __init__(self, series: list[EventSeries]):
        self._series = tuple(series)

    @classmethod
    def from_config(cls, config: "Config") -> "SeriesCatalog":
        return cls(config.event_series)

    @property
    def series(self) -> tuple[EventSeries, ...]:
        return self._series

    def __len__(self) -> int:
        return len(self._series)

    def suggest(self, event_name: str) -> SuggestResult:
        """从活动名推断系列和回次，用于预填活动编辑表单"""
        result = suggest_from_event_name(event_name, list(self._series))
        logger.debug(
            f"活动名推断: {event_name!r} → series={result.series_id}, "
            f"edition={result.edition}"
        )
        return result

    def find_by_base_name(self, base_name: str) -> Optional[EventSeries]:
        """
        查找名称包含基础名的第一个系列

        Args:
            base_name: parse_event_edition 得到的基础名

        Returns:
            匹配的系列；基础名为空或未找到时返回 None
        """
        if not base_name or not base_name.strip():
            return None

        needle = base_name.strip().lower()
        for series in self._series:
            if needle in series.name.lower():
                return series
        return None

    def resolve_event(
        self, event_name: str
    ) -> tuple[Optional[EventSeries], EventEditionInfo]:
        """导入新活动时使用：解析回次后按基础名关联系列"""
        edition_info = parse_event_edition(event_name)
        series = self.find_by_base_name(edition_info.base_name)
        if series is None:
            logger.debug(f"活动 {event_name!r} 未关联到系列")
        return series, edition_info
