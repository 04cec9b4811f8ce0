"""
@description 汉数字转换服务
@responsibility 将日文汉数字（含大字、十/百/千位值组合）转换为整数
"""

from types import MappingProxyType
from typing import Optional


# 普通汉数字 + 大字（旧字体）
KANJI_DIGITS = MappingProxyType(
    {
        # 0
        "零": 0,
        "〇": 0,
        # 1
        "一": 1,
        "壱": 1,
        "壹": 1,
        # 2
        "二": 2,
        "弐": 2,
        "貳": 2,
        "貮": 2,
        # 3
        "三": 3,
        "参": 3,
        "參": 3,
        # 4
        "四": 4,
        "肆": 4,
        # 5
        "五": 5,
        "伍": 5,
        # 6
        "六": 6,
        "陸": 6,
        # 7
        "七": 7,
        "漆": 7,
        "柒": 7,
        "質": 7,
        # 8
        "八": 8,
        "捌": 8,
        # 9
        "九": 9,
        "玖": 9,
        # 位值
        "十": 10,
        "拾": 10,
        "百": 100,
        "佰": 100,
        "千": 1000,
        "仟": 1000,
    }
)

MULTIPLIERS = frozenset({10, 100, 1000})

# 供正则字符类使用
KANJI_NUMERAL_CHARS = "".join(KANJI_DIGITS)


def kanji_to_number(text: str) -> Optional[int]:
    """
    汉数字转整数

    Args:
        text: 汉数字串，如 "二十一"、"弐拾壱"、"百"

    Returns:
        转换结果；包含未知字符或结果为 0 时返回 None（0 不能作为回次）

    Examples:
        >>> kanji_to_number("百二十三")
        123
        >>> kanji_to_number("〇") is None
        True
    """
    # 单个数字字符直接查表
    if len(text) == 1 and text in KANJI_DIGITS:
        value = KANJI_DIGITS[text]
        return value if value > 0 else None

    result = 0
    current = 0

    for char in text:
        digit = KANJI_DIGITS.get(char)
        if digit is None:
            return None

        if digit in MULTIPLIERS:
            # 「十」单独出现表示 1×10
            if current == 0:
                current = 1
            result += current * digit
            current = 0
        else:
            current = current * 10 + digit

    result += current

    return result if result > 0 else None
