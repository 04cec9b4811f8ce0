"""
@description 首字符判定测试套件
@responsibility 验证文字种类判定和首字母标准化（全角转半角、片假名转平假名、去浊点）
"""

import pytest

from discotext.schemas.text import InitialInfo
from discotext.services.initial_detector import INITIAL_SCRIPTS, detect_initial


def test_initial_scripts():
    assert INITIAL_SCRIPTS == (
        "latin",
        "hiragana",
        "katakana",
        "kanji",
        "digit",
        "symbol",
        "other",
    )


class TestLatin:
    """测试拉丁字母"""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Beatles", "B"),
            ("beatles", "B"),
            ("Ｂｅａｔｌｅｓ", "B"),
            ("ａｂｃ", "A"),
            ("zun", "Z"),
        ],
    )
    def test_latin(self, name, expected):
        assert detect_initial(name) == InitialInfo(
            initial_script="latin", name_initial=expected
        )


class TestHiragana:
    """测试平假名"""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("あいうえお", "あ"),
            ("ぁ", "ぁ"),
            # 浊音
            ("がっこう", "か"),
            ("ぎんこう", "き"),
            ("ざっし", "さ"),
            ("じかん", "し"),
            ("だいがく", "た"),
            ("ぢめん", "ち"),
            ("づつ", "つ"),
            ("ばなな", "は"),
            ("ぼうし", "ほ"),
            # 半浊音
            ("ぱん", "は"),
            ("ぴあの", "ひ"),
            ("ぽすと", "ほ"),
            ("ゔぁ", "う"),
        ],
    )
    def test_hiragana(self, name, expected):
        assert detect_initial(name) == InitialInfo(
            initial_script="hiragana", name_initial=expected
        )


class TestKatakana:
    """测试片假名"""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("アイウエオ", "あ"),
            ("ガッコウ", "か"),
            ("ピアノ", "ひ"),
            ("ヴァイオリン", "う"),
            ("ヵ", "ゕ"),
            # ワ行浊音
            ("ヷ", "わ"),
            ("ヸ", "ゐ"),
            ("ヹ", "ゑ"),
            ("ヺ", "を"),
            # 半角片假名
            ("ｱｲｳ", "あ"),
            ("ｶﾞｯｺｳ", "か"),
            ("ｦ", "を"),
            ("ｯ", "っ"),
        ],
    )
    def test_katakana(self, name, expected):
        assert detect_initial(name) == InitialInfo(
            initial_script="katakana", name_initial=expected
        )


class TestNoInitial:
    """测试不设置首字母的文字种类"""

    @pytest.mark.parametrize(
        "name,script",
        [
            ("上海アリス", "kanji"),
            ("東方", "kanji"),
            ("㐀", "kanji"),
            ("123", "digit"),
            ("１２３", "digit"),
            ("!abc", "symbol"),
            (" abc", "symbol"),
            ("「東方」", "symbol"),
            ("・", "symbol"),
            ("＃", "symbol"),
            ("…", "symbol"),
            ("한국", "other"),
            ("Ω", "other"),
        ],
    )
    def test_no_initial(self, name, script):
        assert detect_initial(name) == InitialInfo(
            initial_script=script, name_initial=None
        )

    def test_empty(self):
        assert detect_initial("") == InitialInfo(initial_script="other", name_initial=None)
