"""
@description 活动名解析服务
@responsibility 从活动名中提取回次，并根据已知系列列表推断所属系列
"""

import re
from typing import Optional

from discotext.schemas.text import EventSeries, SuggestResult
from discotext.services.kanji_numeral import KANJI_NUMERAL_CHARS, kanji_to_number


COUNTER_WORDS = "回幕章弾部期話巻節編夜祭宴弦"

ARABIC_PATTERN = re.compile(r"[0-9]+")

# "第一回" "第壱幕" "第五章" 等
DAI_PATTERN = re.compile(rf"第([{KANJI_NUMERAL_CHARS}]+)[{COUNTER_WORDS}]")

# 末尾的单独汉数字，如 "壱" "弐幕"
TRAILING_KANJI_PATTERN = re.compile(
    rf"([{KANJI_NUMERAL_CHARS}]+)[{COUNTER_WORDS}]?\Z"
)


def extract_edition(text: str) -> Optional[int]:
    """
    从文本中提取回次

    依次尝试：
    1. 阿拉伯数字（取第一段，如 "C104" → 104），与汉数字同时出现时优先
    2. 「第〇回」「第〇幕」等带量词的汉数字
    3. 末尾的汉数字（可带量词）

    Args:
        text: 活动名或其一部分

    Returns:
        回次；无法识别时返回 None
    """
    arabic_match = ARABIC_PATTERN.search(text)
    if arabic_match:
        edition = int(arabic_match.group())
        if edition > 0:
            return edition

    dai_match = DAI_PATTERN.search(text)
    if dai_match:
        return kanji_to_number(dai_match.group(1))

    trailing_match = TRAILING_KANJI_PATTERN.search(text)
    if trailing_match:
        return kanji_to_number(trailing_match.group(1))

    return None


def _find_series(
    name: str, series_list: list[EventSeries]
) -> tuple[Optional[EventSeries], bool]:
    """按名称长度降序查找系列，返回 (系列, 是否为活动名包含系列名)"""
    sorted_by_length = sorted(series_list, key=lambda s: len(s.name), reverse=True)

    for series in sorted_by_length:
        if series.name.lower() in name:
            return series, True

    # 输入是系列名的一部分（如截断的名称）
    for series in sorted_by_length:
        if name in series.name.lower():
            return series, False

    return None, False


def suggest_from_event_name(
    event_name: str, series_list: list[EventSeries]
) -> SuggestResult:
    """
    根据活动名推断系列和回次

    Args:
        event_name: 活动名，如 "博麗神社例大祭21"、"第二十一回博麗神社例大祭"
        series_list: 已知的活动系列列表

    Returns:
        SuggestResult，系列与回次各自可能为 None
    """
    if not event_name.strip() or not series_list:
        return SuggestResult(series_id=None, edition=None)

    normalized_name = event_name.lower()
    matched_series, contained = _find_series(normalized_name, series_list)

    if matched_series is None:
        # 没有匹配到系列时也尝试提取回次
        return SuggestResult(series_id=None, edition=extract_edition(event_name))

    if contained:
        index = normalized_name.find(matched_series.name.lower())
        before = event_name[:index]
        after = event_name[index + len(matched_series.name) :]
    else:
        # 活动名不含系列名时没有切分位置，去掉与系列名重叠的部分
        before = event_name[:-1]
        after = event_name[len(matched_series.name) - 1 :]

    # 回次通常在系列名之后
    edition = extract_edition(after)
    if edition is None:
        edition = extract_edition(before)

    return SuggestResult(series_id=matched_series.id, edition=edition)
