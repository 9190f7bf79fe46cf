import pytest

from seteuk.text import char_count, measure, neis_byte_length


class TestNeisByteLength:
    def test_empty_string_is_zero(self) -> None:
        assert neis_byte_length("") == 0

    def test_hangul_syllable_is_three_bytes(self) -> None:
        assert neis_byte_length("가") == 3

    def test_ascii_is_one_byte_each(self) -> None:
        assert neis_byte_length("A1 ") == 3

    def test_syllable_range_bounds(self) -> None:
        assert neis_byte_length("가힣") == 6

    def test_just_outside_syllable_range_is_one_byte(self) -> None:
        assert neis_byte_length("꯿힤") == 2

    def test_jamo_and_compatibility_jamo(self) -> None:
        assert neis_byte_length("ᄀᇿ") == 6
        assert neis_byte_length("ㄱㅏ") == 6

    def test_newline_and_punctuation(self) -> None:
        assert neis_byte_length("\n.,!") == 4

    def test_other_scripts_are_one_byte(self) -> None:
        assert neis_byte_length("漢字かな") == 4

    def test_emoji_counts_as_single_code_point(self) -> None:
        assert neis_byte_length("🚨") == 1

    def test_mixed_sentence(self) -> None:
        assert neis_byte_length("파이썬 3.12") == 3 * 3 + 5

    @pytest.mark.parametrize(
        ("left", "right"),
        [
            ("", ""),
            ("가나", "abc"),
            ("ㄱ", "\n"),
            ("자료 구조", "딕셔너리 item"),
        ],
    )
    def test_additive_over_concatenation(self, left: str, right: str) -> None:
        assert neis_byte_length(left + right) == neis_byte_length(left) + neis_byte_length(right)


class TestCharCount:
    def test_counts_whitespace_by_default(self) -> None:
        assert char_count("가 나\n") == 4

    def test_can_exclude_whitespace(self) -> None:
        assert char_count("가 나\n다", include_whitespace=False) == 3


class TestMeasure:
    def test_reports_all_counters(self) -> None:
        stats = measure("코드 a")
        assert stats.chars == 4
        assert stats.chars_no_space == 3
        assert stats.bytes == 3 + 3 + 1 + 1
