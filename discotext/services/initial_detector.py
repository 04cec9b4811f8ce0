"""
@description 首字符判定服务
@responsibility 判定名称首字符的文字种类，并生成用于索引的首字母
"""

import unicodedata
from typing import Optional

from discotext.schemas.text import InitialInfo, InitialScript


INITIAL_SCRIPTS: tuple[InitialScript, ...] = (
    "latin",
    "hiragana",
    "katakana",
    "kanji",
    "digit",
    "symbol",
    "other",
)

# 浊点、半浊点的组合字符
VOICED_MARKS = ("\u3099", "\u309a")

# 全角片假名 → 平假名的码位差
KATAKANA_TO_HIRAGANA_OFFSET = 0x60


def detect_character_type(char: str) -> InitialScript:
    code = ord(char)

    # 半角 A-Z, a-z
    if 0x41 <= code <= 0x5A or 0x61 <= code <= 0x7A:
        return "latin"
    # 全角 Ａ-Ｚ, ａ-ｚ
    if 0xFF21 <= code <= 0xFF3A or 0xFF41 <= code <= 0xFF5A:
        return "latin"
    # ぁ-ゖ
    if 0x3041 <= code <= 0x3096:
        return "hiragana"
    # ァ-ヶ, ヷ-ヺ
    if 0x30A1 <= code <= 0x30FA:
        return "katakana"
    # 半角片假名 ｦ-ﾝ
    if 0xFF66 <= code <= 0xFF9D:
        return "katakana"
    # CJK 统一汉字及扩展 A
    if 0x4E00 <= code <= 0x9FFF or 0x3400 <= code <= 0x4DBF:
        return "kanji"
    if 0x30 <= code <= 0x39 or 0xFF10 <= code <= 0xFF19:
        return "digit"
    if (
        code <= 0x7F
        or 0x2000 <= code <= 0x206F  # 一般标点
        or 0x3000 <= code <= 0x303F  # CJK 符号和标点
        or code == 0x30FB  # 「・」
        or 0xFF00 <= code <= 0xFF0F
        or 0xFF1A <= code <= 0xFF20
        or 0xFF5B <= code <= 0xFF65
    ):
        return "symbol"

    return "other"


def _to_unvoiced_hiragana(char: str) -> str:
    # NFKC 把半角片假名转成全角，NFD 再把浊音拆成清音 + 浊点
    decomposed = unicodedata.normalize("NFD", unicodedata.normalize("NFKC", char))
    base = "".join(c for c in decomposed if c not in VOICED_MARKS)
    if not base:
        return char

    result = []
    for c in base:
        if 0x30A1 <= ord(c) <= 0x30F6:
            result.append(chr(ord(c) - KATAKANA_TO_HIRAGANA_OFFSET))
        else:
            result.append(c)
    return "".join(result)


def normalize_initial(char: str, script: InitialScript) -> Optional[str]:
    """
    标准化首字母

    - latin: 转为半角大写
    - hiragana: 去除浊点、半浊点
    - katakana: 转为平假名后去除浊点、半浊点
    - 其他种类不设置首字母
    """
    if script == "latin":
        return unicodedata.normalize("NFKC", char).upper()

    if script in ("hiragana", "katakana"):
        return _to_unvoiced_hiragana(char)

    return None


def detect_initial(name: str) -> InitialInfo:
    """
    判定名称的首字符种类和首字母

    Examples:
        >>> detect_initial("Beatles")
        InitialInfo(initial_script='latin', name_initial='B')
        >>> detect_initial("ピアノ")
        InitialInfo(initial_script='katakana', name_initial='ひ')
        >>> detect_initial("上海アリス")
        InitialInfo(initial_script='kanji', name_initial=None)
    """
    if not name:
        return InitialInfo(initial_script="other", name_initial=None)

    first_char = name[0]
    initial_script = detect_character_type(first_char)

    return InitialInfo(
        initial_script=initial_script,
        name_initial=normalize_initial(first_char, initial_script),
    )
