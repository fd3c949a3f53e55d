from typing import Tuple

import pytest

from gs1barcode.barcodegen.exceptions import PanicError
from gs1barcode.barcodegen.patterns import (
    STOP_MODULES,
    SYMBOL_MODULES,
    SYMBOL_PATTERNS,
    pattern_for,
    validate_table,
)


def _bits(widths: Tuple[int, ...]) -> str:
    return "".join(("1" if i % 2 == 0 else "0") * w for i, w in enumerate(widths))


class TestSymbolTable:
    """Таблица шаблонов Code 128: размер и суммы ширин."""

    def test_table_has_107_entries(self) -> None:
        assert len(SYMBOL_PATTERNS) == 107

    @pytest.mark.parametrize("value", range(106))
    def test_regular_symbol_spans_11_modules(self, value: int) -> None:
        widths = SYMBOL_PATTERNS[value]
        assert len(widths) == 6
        assert sum(widths) == SYMBOL_MODULES == 11

    def test_stop_spans_13_modules(self) -> None:
        widths = SYMBOL_PATTERNS[106]
        assert len(widths) == 7
        assert sum(widths) == STOP_MODULES == 13

    def test_all_patterns_distinct(self) -> None:
        assert len(set(SYMBOL_PATTERNS)) == len(SYMBOL_PATTERNS)

    @pytest.mark.parametrize(
        "value,expected",
        [
            (0, "11011001100"),
            (1, "11001101100"),
            (10, "11001000100"),
            (12, "10110011100"),
            (99, "10111011110"),
            (100, "10111101110"),
            (102, "11110101110"),
            (105, "11010011100"),
            (106, "1100011101011"),
        ],
    )
    def test_known_bit_patterns(self, value: int, expected: str) -> None:
        assert _bits(SYMBOL_PATTERNS[value]) == expected

    def test_validate_table_accepts_builtin(self) -> None:
        validate_table()


class TestValidateTable:
    def test_wrong_size(self) -> None:
        with pytest.raises(PanicError, match="entries"):
            validate_table(SYMBOL_PATTERNS[:-1])

    def test_wrong_sum(self) -> None:
        broken = list(SYMBOL_PATTERNS)
        broken[5] = (1, 1, 1, 1, 1, 1)
        with pytest.raises(PanicError, match="symbol 5 spans"):
            validate_table(tuple(broken))

    def test_wrong_length(self) -> None:
        broken = list(SYMBOL_PATTERNS)
        broken[106] = (2, 1, 2, 2, 2, 2)
        with pytest.raises(PanicError, match="malformed"):
            validate_table(tuple(broken))

    def test_zero_width(self) -> None:
        broken = list(SYMBOL_PATTERNS)
        broken[0] = (0, 3, 2, 2, 2, 2)
        with pytest.raises(PanicError, match="malformed"):
            validate_table(tuple(broken))


class TestPatternFor:
    def test_returns_table_entry(self) -> None:
        assert pattern_for(105) == (2, 1, 1, 2, 3, 2)

    @pytest.mark.parametrize("value", [-1, 107, 1000])
    def test_out_of_range_panics(self, value: int) -> None:
        with pytest.raises(PanicError, match="outside 0..106"):
            pattern_for(value)
