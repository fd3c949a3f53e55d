"""Domain model: enums and the Barcode aggregate."""

from gs1barcode.model.barcode import Barcode
from gs1barcode.model.enums import CodeSet, EncoderState, SpecialSymbol

__all__ = ["Barcode", "CodeSet", "EncoderState", "SpecialSymbol"]
