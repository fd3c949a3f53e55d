from typing import List, Tuple

import pytest

from gs1barcode.barcodegen.exceptions import BarcodeGenError, FormatError
from gs1barcode.barcodegen.segments import Segment, parse_segments
from gs1barcode.config import EncoderConfig


def _pairs(segments: List[Segment]) -> List[Tuple[str, str]]:
    return [(s.application_identifier, s.value) for s in segments]


class TestParseSegments:
    """Разбор "(AI)значение" на сегменты."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("(10)123", [("10", "123")]),
            ("(01)1234(10)56", [("01", "1234"), ("10", "56")]),
            ("(01)1234'(10)56", [("01", "1234"), ("10", "56")]),
            ("(01)1234567890123", [("01", "1234567890123")]),
            ("(21)34(10)12(17)250101", [("21", "34"), ("10", "12"), ("17", "250101")]),
            ("0112", [("01", "12")]),
            ("(01)12(", [("01", "12")]),
        ],
    )
    def test_valid_input(self, raw: str, expected: List[Tuple[str, str]]) -> None:
        assert _pairs(parse_segments(raw)) == expected

    def test_short_chunks_discarded(self) -> None:
        # "1" and "12" are too short to hold an AI plus a value
        assert _pairs(parse_segments("(1(12(01)99")) == [("01", "99")]

    def test_closing_parenthesis_removed_from_value(self) -> None:
        assert _pairs(parse_segments("(10)1)2")) == [("10", "12")]

    def test_order_preserved(self) -> None:
        segments = parse_segments("(30)1(10)2(01)3")
        assert [s.application_identifier for s in segments] == ["30", "10", "01"]

    def test_custom_terminator(self) -> None:
        cfg = EncoderConfig(terminator="|")
        assert _pairs(parse_segments("(01)12|(10)3", cfg)) == [("01", "12"), ("10", "3")]

    def test_apostrophe_is_plain_text_with_custom_terminator(self) -> None:
        cfg = EncoderConfig(terminator="|")
        with pytest.raises(FormatError):
            parse_segments("(01)12'(10)3", cfg)

    @pytest.mark.parametrize("raw", ["", "()", "(1", "((("])
    def test_no_segments(self, raw: str) -> None:
        with pytest.raises(FormatError, match="No \\(AI\\)value segments"):
            parse_segments(raw)

    @pytest.mark.parametrize("raw", ["(AB)12", "(1A)12", "( 1)12"])
    def test_invalid_ai(self, raw: str) -> None:
        with pytest.raises(FormatError, match="two digits"):
            parse_segments(raw)

    def test_empty_value(self) -> None:
        with pytest.raises(FormatError, match="empty"):
            parse_segments("(01)")

    @pytest.mark.parametrize("raw", ["(01)12AB", "(10)1 2", "(01)١٢"])
    def test_non_digit_value(self, raw: str) -> None:
        with pytest.raises(FormatError, match="only digits"):
            parse_segments(raw)

    def test_non_string_input(self) -> None:
        with pytest.raises(FormatError, match="must be a string"):
            parse_segments(123)  # type: ignore[arg-type]

    def test_error_carries_context(self) -> None:
        with pytest.raises(FormatError) as exc_info:
            parse_segments("(01)12(XY)34")
        assert exc_info.value.context["ai"] == "XY"
        assert exc_info.value.context["index"] == 1
        assert isinstance(exc_info.value, BarcodeGenError)


class TestSegment:
    def test_str(self) -> None:
        assert str(Segment("10", "123")) == "(10)123"

    def test_frozen(self) -> None:
        seg = Segment("10", "123")
        with pytest.raises(AttributeError):
            seg.value = "456"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert Segment("01", "12") == Segment("01", "12")
