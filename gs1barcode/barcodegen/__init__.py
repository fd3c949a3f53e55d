"""
barcodegen

Кодирование строк GS1 "(AI)значение" в штрихкод GS1-128 (Code 128, набор C + FNC1).

- Разбор сегментов, выбор набора C/B, вставка FNC1 после полей переменной длины.
- Взвешенная контрольная сумма (mod 103) и таблица шаблонов символов 0..106.
- Растровый рендеринг через Pillow, PNG/base64/data URI.

Public API:
    - Gs1128Generator: генератор штрихкода GS1-128 (class)
    - encode: строка -> Barcode (function)
    - parse_segments, Segment: разбор входной строки
    - SymbolEncoder: конечный автомат кодера
    - ModuleSequenceBuilder: построитель последовательности модулей
    - BarcodeGenError, FormatError, EncodeError, RenderError, PanicError

Примеры:
    >>> from gs1barcode.barcodegen import Gs1128Generator, encode
    >>> encode("(10)123").symbols
    (105, 102, 10, 12, 100, 19, 99, 13, 106)
    >>> img = Gs1128Generator("(01)12345678901231").render_image(width=600, height=150)

Зависимости:
    Pillow
"""

from gs1barcode.barcodegen.exceptions import (
    BarcodeGenError,
    EncodeError,
    FormatError,
    PanicError,
    RenderError,
)
from gs1barcode.barcodegen.patterns import SYMBOL_PATTERNS, pattern_for
from gs1barcode.barcodegen.modules import ModuleSequenceBuilder
from gs1barcode.barcodegen.segments import Segment, parse_segments
from gs1barcode.barcodegen.encoder import SymbolEncoder, encode
from gs1barcode.barcodegen.barcode_generator import (
    BarcodeRenderOptions,
    Gs1128Generator,
)

__all__ = [
    "BarcodeGenError",
    "FormatError",
    "EncodeError",
    "RenderError",
    "PanicError",
    "SYMBOL_PATTERNS",
    "pattern_for",
    "ModuleSequenceBuilder",
    "Segment",
    "parse_segments",
    "SymbolEncoder",
    "encode",
    "Gs1128Generator",
    "BarcodeRenderOptions",
]
