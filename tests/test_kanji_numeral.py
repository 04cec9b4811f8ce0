"""
@description 汉数字转换测试套件
@responsibility 验证普通汉数字、大字、位值组合以及无效输入的处理
"""

import pytest

from discotext.services.kanji_numeral import KANJI_DIGITS, kanji_to_number


class TestSingleDigit:
    """测试单个汉数字"""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("一", 1),
            ("二", 2),
            ("三", 3),
            ("九", 9),
            # 大字
            ("壱", 1),
            ("壹", 1),
            ("弐", 2),
            ("貳", 2),
            ("貮", 2),
            ("参", 3),
            ("參", 3),
            ("肆", 4),
            ("伍", 5),
            ("陸", 6),
            ("漆", 7),
            ("柒", 7),
            ("質", 7),
            ("捌", 8),
            ("玖", 9),
        ],
    )
    def test_single_digit(self, text, expected):
        assert kanji_to_number(text) == expected

    @pytest.mark.parametrize("text", ["〇", "零"])
    def test_zero_rejected(self, text):
        """0 不能作为回次"""
        assert kanji_to_number(text) is None

    def test_legacy_glyph_equivalence(self):
        assert kanji_to_number("壱") == kanji_to_number("壹") == 1
        assert kanji_to_number("弐") == kanji_to_number("貳") == kanji_to_number("貮") == 2


class TestPositional:
    """测试十/百/千的位值组合"""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("十", 10),
            ("十一", 11),
            ("二十", 20),
            ("二十一", 21),
            ("九十九", 99),
            ("百", 100),
            ("百一", 101),
            ("百二十三", 123),
            ("三百", 300),
            ("千", 1000),
            ("千二百三十四", 1234),
            # 大字位值
            ("拾", 10),
            ("拾壱", 11),
            ("弐拾壱", 21),
            ("佰", 100),
            ("仟", 1000),
        ],
    )
    def test_positional(self, text, expected):
        assert kanji_to_number(text) == expected

    @pytest.mark.parametrize(
        "n,text",
        [
            (1, "一"),
            (2, "二"),
            (3, "三"),
            (9, "九"),
            (10, "十"),
            (11, "十一"),
            (20, "二十"),
            (21, "二十一"),
            (99, "九十九"),
            (100, "百"),
            (101, "百一"),
            (123, "百二十三"),
            (300, "三百"),
        ],
    )
    def test_canonical_spelling(self, n, text):
        """标准写法转换后应得到原数字"""
        assert kanji_to_number(text) == n

    def test_digits_without_multiplier(self):
        """无位值字符时按十进制逐位累加"""
        assert kanji_to_number("二〇") == 20
        assert kanji_to_number("一二三") == 123

    def test_multi_char_zero(self):
        assert kanji_to_number("〇〇") is None


class TestInvalidInput:
    """测试无效输入"""

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "いち",
            "123",
            "二十a",
            "回",
            "十回",
            "\ud800",
        ],
    )
    def test_invalid_returns_none(self, text):
        assert kanji_to_number(text) is None


class TestKanjiTable:
    """测试汉数字表"""

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            KANJI_DIGITS["万"] = 10000
