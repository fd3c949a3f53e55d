"""
RU: Таблица шаблонов символов Code 128: значение символа -> ширины штрихов/пробелов
EN: Code 128 symbol pattern table: symbol value -> bar/space module widths

Each entry alternates bar/space starting with a bar. Values 0..105 have six
widths summing to 11 modules; the stop symbol (106) has seven widths summing
to 13 modules. The table is checked once at import time.
"""

from __future__ import annotations

import logging
from typing import Final, Tuple

from gs1barcode.barcodegen.exceptions import PanicError
from gs1barcode.model.enums import MAX_SYMBOL, MIN_SYMBOL, SpecialSymbol

logger = logging.getLogger(__name__)

__all__ = [
    "SYMBOL_PATTERNS",
    "SYMBOL_MODULES",
    "STOP_MODULES",
    "pattern_for",
    "validate_table",
]

SYMBOL_MODULES: Final[int] = 11
STOP_MODULES: Final[int] = 13

Pattern = Tuple[int, ...]

SYMBOL_PATTERNS: Final[Tuple[Pattern, ...]] = (
    (2, 1, 2, 2, 2, 2),  # 0
    (2, 2, 2, 1, 2, 2),  # 1
    (2, 2, 2, 2, 2, 1),  # 2
    (1, 2, 1, 2, 2, 3),  # 3
    (1, 2, 1, 3, 2, 2),  # 4
    (1, 3, 1, 2, 2, 2),  # 5
    (1, 2, 2, 2, 1, 3),  # 6
    (1, 2, 2, 3, 1, 2),  # 7
    (1, 3, 2, 2, 1, 2),  # 8
    (2, 2, 1, 2, 1, 3),  # 9
    (2, 2, 1, 3, 1, 2),  # 10
    (2, 3, 1, 2, 1, 2),  # 11
    (1, 1, 2, 2, 3, 2),  # 12
    (1, 2, 2, 1, 3, 2),  # 13
    (1, 2, 2, 2, 3, 1),  # 14
    (1, 1, 3, 2, 2, 2),  # 15
    (1, 2, 3, 1, 2, 2),  # 16
    (1, 2, 3, 2, 2, 1),  # 17
    (2, 2, 3, 2, 1, 1),  # 18
    (2, 2, 1, 1, 3, 2),  # 19
    (2, 2, 1, 2, 3, 1),  # 20
    (2, 1, 3, 2, 1, 2),  # 21
    (2, 2, 3, 1, 1, 2),  # 22
    (3, 1, 2, 1, 3, 1),  # 23
    (3, 1, 1, 2, 2, 2),  # 24
    (3, 2, 1, 1, 2, 2),  # 25
    (3, 2, 1, 2, 2, 1),  # 26
    (3, 1, 2, 2, 1, 2),  # 27
    (3, 2, 2, 1, 1, 2),  # 28
    (3, 2, 2, 2, 1, 1),  # 29
    (2, 1, 2, 1, 2, 3),  # 30
    (2, 1, 2, 3, 2, 1),  # 31
    (2, 3, 2, 1, 2, 1),  # 32
    (1, 1, 1, 3, 2, 3),  # 33
    (1, 3, 1, 1, 2, 3),  # 34
    (1, 3, 1, 3, 2, 1),  # 35
    (1, 1, 2, 3, 1, 3),  # 36
    (1, 3, 2, 1, 1, 3),  # 37
    (1, 3, 2, 3, 1, 1),  # 38
    (2, 1, 1, 3, 1, 3),  # 39
    (2, 3, 1, 1, 1, 3),  # 40
    (2, 3, 1, 3, 1, 1),  # 41
    (1, 1, 2, 1, 3, 3),  # 42
    (1, 1, 2, 3, 3, 1),  # 43
    (1, 3, 2, 1, 3, 1),  # 44
    (1, 1, 3, 1, 2, 3),  # 45
    (1, 1, 3, 3, 2, 1),  # 46
    (1, 3, 3, 1, 2, 1),  # 47
    (3, 1, 3, 1, 2, 1),  # 48
    (2, 1, 1, 3, 3, 1),  # 49
    (2, 3, 1, 1, 3, 1),  # 50
    (2, 1, 3, 1, 1, 3),  # 51
    (2, 1, 3, 3, 1, 1),  # 52
    (2, 1, 3, 1, 3, 1),  # 53
    (3, 1, 1, 1, 2, 3),  # 54
    (3, 1, 1, 3, 2, 1),  # 55
    (3, 3, 1, 1, 2, 1),  # 56
    (3, 1, 2, 1, 1, 3),  # 57
    (3, 1, 2, 3, 1, 1),  # 58
    (3, 3, 2, 1, 1, 1),  # 59
    (3, 1, 4, 1, 1, 1),  # 60
    (2, 2, 1, 4, 1, 1),  # 61
    (4, 3, 1, 1, 1, 1),  # 62
    (1, 1, 1, 2, 2, 4),  # 63
    (1, 1, 1, 4, 2, 2),  # 64
    (1, 2, 1, 1, 2, 4),  # 65
    (1, 2, 1, 4, 2, 1),  # 66
    (1, 4, 1, 1, 2, 2),  # 67
    (1, 4, 1, 2, 2, 1),  # 68
    (1, 1, 2, 2, 1, 4),  # 69
    (1, 1, 2, 4, 1, 2),  # 70
    (1, 2, 2, 1, 1, 4),  # 71
    (1, 2, 2, 4, 1, 1),  # 72
    (1, 4, 2, 1, 1, 2),  # 73
    (1, 4, 2, 2, 1, 1),  # 74
    (2, 4, 1, 2, 1, 1),  # 75
    (2, 2, 1, 1, 1, 4),  # 76
    (4, 1, 3, 1, 1, 1),  # 77
    (2, 4, 1, 1, 1, 2),  # 78
    (1, 3, 4, 1, 1, 1),  # 79
    (1, 1, 1, 2, 4, 2),  # 80
    (1, 2, 1, 1, 4, 2),  # 81
    (1, 2, 1, 2, 4, 1),  # 82
    (1, 1, 4, 2, 1, 2),  # 83
    (1, 2, 4, 1, 1, 2),  # 84
    (1, 2, 4, 2, 1, 1),  # 85
    (4, 1, 1, 2, 1, 2),  # 86
    (4, 2, 1, 1, 1, 2),  # 87
    (4, 2, 1, 2, 1, 1),  # 88
    (2, 1, 2, 1, 4, 1),  # 89
    (2, 1, 4, 1, 2, 1),  # 90
    (4, 1, 2, 1, 2, 1),  # 91
    (1, 1, 1, 1, 4, 3),  # 92
    (1, 1, 1, 3, 4, 1),  # 93
    (1, 3, 1, 1, 4, 1),  # 94
    (1, 1, 4, 1, 1, 3),  # 95
    (1, 1, 4, 3, 1, 1),  # 96
    (4, 1, 1, 1, 1, 3),  # 97
    (4, 1, 1, 3, 1, 1),  # 98
    (1, 1, 3, 1, 4, 1),  # 99
    (1, 1, 4, 1, 3, 1),  # 100
    (3, 1, 1, 1, 4, 1),  # 101
    (4, 1, 1, 1, 3, 1),  # 102
    (2, 1, 1, 4, 1, 2),  # 103
    (2, 1, 1, 2, 1, 4),  # 104
    (2, 1, 1, 2, 3, 2),  # 105
    (2, 3, 3, 1, 1, 1, 2),  # 106
)


def validate_table(patterns: Tuple[Pattern, ...] = SYMBOL_PATTERNS) -> None:
    """
    Check the width-sum constraint of every table entry.

    Raises:
        PanicError: if the table has the wrong size or an entry has the wrong
            number of widths, a non-positive width or a wrong module sum.
    """
    if len(patterns) != MAX_SYMBOL + 1:
        raise PanicError(
            f"symbol table has {len(patterns)} entries, expected {MAX_SYMBOL + 1}"
        )
    for value, widths in enumerate(patterns):
        if value == SpecialSymbol.STOP:
            expected_len, expected_sum = 7, STOP_MODULES
        else:
            expected_len, expected_sum = 6, SYMBOL_MODULES
        if len(widths) != expected_len or any(w < 1 for w in widths):
            raise PanicError(f"symbol {value} has malformed widths {widths!r}")
        if sum(widths) != expected_sum:
            raise PanicError(
                f"symbol {value} spans {sum(widths)} modules, expected {expected_sum}"
            )


def pattern_for(value: int) -> Pattern:
    """Return the module widths for a symbol value (0..106)."""
    if not MIN_SYMBOL <= value <= MAX_SYMBOL:
        raise PanicError(f"symbol value {value} outside {MIN_SYMBOL}..{MAX_SYMBOL}")
    return SYMBOL_PATTERNS[value]


validate_table()
logger.debug("Code 128 symbol table verified: %d entries", len(SYMBOL_PATTERNS))
