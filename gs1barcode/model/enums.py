"""
model/enums.py

(Краткое RU: Перечисления для модели GS1-128: наборы кодов, служебные символы, состояния кодера.)

EN: Domain enums for the GS1-128 encoder (Code 128 subset C with Code Set B fallback).
NO table lookup or module logic here!

See Also:
    - gs1barcode/barcodegen/patterns.py (symbol -> module widths)
    - gs1barcode/barcodegen/encoder.py (state machine)
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Final, Literal

# === SYMBOL RANGE ===
MIN_SYMBOL: Final[int] = 0
MAX_SYMBOL: Final[int] = 106
MAX_PAIR_SYMBOL: Final[int] = 99

# Code Set B value of the digit "0"
CODE_B_DIGIT_OFFSET: Final[int] = 16

CHECKSUM_MODULUS: Final[int] = 103


class SpecialSymbol(IntEnum):
    CODE_C = 99  # resume digit-pair mode (from Code Set B)
    CODE_B = 100  # switch to Code Set B (from Code Set C)
    FNC1 = 102
    START_C = 105
    STOP = 106

    def localized_name(self, lang: Literal["ru", "en"] = "ru") -> str:
        names_ru = {
            SpecialSymbol.CODE_C: "Переход в Code C",
            SpecialSymbol.CODE_B: "Переход в Code B",
            SpecialSymbol.FNC1: "FNC1",
            SpecialSymbol.START_C: "Старт Code C",
            SpecialSymbol.STOP: "Стоп",
        }
        names_en = {
            SpecialSymbol.CODE_C: "Code C",
            SpecialSymbol.CODE_B: "Code B",
            SpecialSymbol.FNC1: "FNC1",
            SpecialSymbol.START_C: "Start Code C",
            SpecialSymbol.STOP: "Stop",
        }
        return names_ru[self] if lang == "ru" else names_en[self]


class CodeSet(str, Enum):
    B = "B"
    C = "C"

    @property
    def switch_symbol(self) -> SpecialSymbol:
        """Symbol that switches the scanner into this code set."""
        return SpecialSymbol.CODE_B if self is CodeSet.B else SpecialSymbol.CODE_C

    def localized_name(self, lang: str = "ru") -> str:
        names = {
            "B": {"ru": "Набор B (символы)", "en": "Code Set B"},
            "C": {"ru": "Набор C (пары цифр)", "en": "Code Set C"},
        }
        return names[self.value][lang] if lang in names[self.value] else self.value


class EncoderState(str, Enum):
    AWAITING_SEGMENT = "awaiting_segment"
    EMITTING_FIXED_PAIR = "emitting_fixed_pair"
    EMITTING_ODD_TAIL = "emitting_odd_tail"


__all__ = [
    "MIN_SYMBOL",
    "MAX_SYMBOL",
    "MAX_PAIR_SYMBOL",
    "CODE_B_DIGIT_OFFSET",
    "CHECKSUM_MODULUS",
    "SpecialSymbol",
    "CodeSet",
    "EncoderState",
]
