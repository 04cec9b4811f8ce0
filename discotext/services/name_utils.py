"""
@description 名称处理工具
@responsibility 英文判定、全角符号转半角、碟片信息解析、活动回次解析、名称信息生成
"""

import re

from discotext.schemas.text import DiscInfo, EventEditionInfo, NameInfo


# 全角 → 半角（源字符与目标字符互不相交，替换顺序无关）
FULL_WIDTH_SYMBOLS = (
    ("／", "/"),
    ("：", ":"),
    ("（", "("),
    ("）", ")"),
    ("　", " "),  # 全角空格
    ("！", "!"),
    ("？", "?"),
    ("＆", "&"),
    ("＝", "="),
    ("＋", "+"),
    ("－", "-"),
    ("＊", "*"),
    ("＠", "@"),
    ("＃", "#"),
    ("％", "%"),
    ("＄", "$"),
    ("￥", "\\"),
    ("｜", "|"),
    ("＜", "<"),
    ("＞", ">"),
    ("［", "["),
    ("］", "]"),
    ("｛", "{"),
    ("｝", "}"),
    ("‘", "'"),
    ("’", "'"),
    ("“", '"'),
    ("”", '"'),
    ("、", ","),
    ("。", "."),
)

# 碟片标记，按顺序尝试，先匹配者优先
DISC_PATTERNS = (
    # "作品名 DISC-1" / "作品名 Disc 2"
    re.compile(r"(.+?)\s*[Dd][Ii][Ss][CcKk][-\s]?([0-9]+)\s*"),
    # "作品名 disc1"
    re.compile(r"(.+?)\s*[Dd][Ii][Ss][CcKk]([0-9]+)\s*"),
    # "作品名【DISC-1】"
    re.compile(r"(.+?)\s*【[Dd][Ii][Ss][CcKk][-\s]?([0-9]+)】\s*"),
    # "作品名 (Disc 1)"
    re.compile(r"(.+?)\s*\([Dd][Ii][Ss][CcKk][-\s]?([0-9]+)\)\s*"),
)

# 活动回次，具体的模式放在前面，末尾直接跟数字的模式最后检查
EVENT_EDITION_PATTERNS = (
    # "博麗神社例大祭 第21回"
    re.compile(r"(.+?)\s*第([0-9]+)回"),
    # "M3 Vol.5"
    re.compile(r"(.+?)\s*[Vv][Oo][Ll]\.?\s*([0-9]+)"),
    # "コミックマーケット108"
    re.compile(r"(.+?)([0-9]+)"),
)

# 1000 以上多半是年份而不是回次
MAX_EVENT_EDITION = 1000


def is_english_only(text: str) -> bool:
    """
    判断字符串是否只由 ASCII 可打印字符（及 Tab/换行/回车）组成

    空字符串返回 False
    """
    if not text:
        return False

    for char in text:
        code = ord(char)
        if code in (0x09, 0x0A, 0x0D):
            continue
        if 0x20 <= code <= 0x7E:
            continue
        return False
    return True


def normalize_full_width_symbols(text: str) -> str:
    if not text:
        return text

    result = text
    for full, half in FULL_WIDTH_SYMBOLS:
        result = result.replace(full, half)
    return result


def parse_disc_info(album_name: str) -> DiscInfo:
    """
    解析专辑名中的碟片信息

    Args:
        album_name: 原始专辑名，如 "作品名 DISC-2"

    Returns:
        DiscInfo，未找到碟片标记时视为第 1 张

    Examples:
        >>> parse_disc_info("作品名 DISC-2")
        DiscInfo(name='作品名', disc_number=2)
    """
    if not album_name:
        return DiscInfo(name=album_name, disc_number=1)

    for pattern in DISC_PATTERNS:
        match = pattern.fullmatch(album_name)
        if not match:
            continue
        disc_number = int(match.group(2))
        # DISC-0 不是有效编号
        if disc_number > 0:
            return DiscInfo(name=match.group(1).strip(), disc_number=disc_number)

    return DiscInfo(name=album_name.strip(), disc_number=1)


def parse_event_edition(event_name: str) -> EventEditionInfo:
    """
    从活动名推断回次

    "コミックマーケット108" → base_name="コミックマーケット", edition=108
    "M3 2024春" → base_name="M3 2024春", edition=None
    """
    if not event_name:
        return EventEditionInfo(base_name=event_name, edition=None)

    trimmed = event_name.strip()
    for pattern in EVENT_EDITION_PATTERNS:
        match = pattern.fullmatch(trimmed)
        if not match:
            continue
        edition = int(match.group(2))
        if 0 < edition < MAX_EVENT_EDITION:
            return EventEditionInfo(base_name=match.group(1).strip(), edition=edition)

    return EventEditionInfo(base_name=trimmed, edition=None)


def generate_name_info(original_name: str) -> NameInfo:
    name = normalize_full_width_symbols(original_name).strip()

    if is_english_only(name):
        return NameInfo(name=name, name_ja=None, name_en=name)

    return NameInfo(name=name, name_ja=name, name_en=None)


def generate_sort_name(name: str) -> str | None:
    # 假名/汉字需要读音数据，交给人工输入
    if is_english_only(name):
        return name.lower()
    return None
