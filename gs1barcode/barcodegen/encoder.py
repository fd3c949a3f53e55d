"""
RU: Кодер символов GS1-128 (Code 128, набор C с переходом в набор B для нечётной цифры).
EN: GS1-128 symbol encoder (Code 128 subset C, Code Set B fallback for an odd trailing digit).

Symbol stream:
    Start C, FNC1, then per segment: [FNC1 if the previous segment was
    variable-length], AI pair, value pairs, [Code B, digit, Code C] for an
    odd tail; finally the check symbol and Stop.

Checksum:
    Start C counts once; every following symbol is weighted by its position
    (FNC1 after Start = 1, first AI = 2, ...). The check symbol is
    sum mod 103 and does not count itself.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from gs1barcode.barcodegen.exceptions import EncodeError, PanicError
from gs1barcode.barcodegen.modules import ModuleSequenceBuilder
from gs1barcode.barcodegen.segments import Segment, parse_segments
from gs1barcode.config import EncoderConfig
from gs1barcode.model.barcode import Barcode
from gs1barcode.model.enums import (
    CHECKSUM_MODULUS,
    CODE_B_DIGIT_OFFSET,
    MAX_PAIR_SYMBOL,
    MIN_SYMBOL,
    CodeSet,
    EncoderState,
    SpecialSymbol,
)

logger = logging.getLogger(__name__)

__all__ = ["SymbolEncoder", "encode"]


class SymbolEncoder:
    """
    One-shot encoder: feeds segments in order and produces a Barcode.

    Module emission and checksum weighting share a single ``_emit`` step,
    so the weight counter always matches the number of emitted symbols.

    Args:
        config: Encoder configuration (variable-length AIs, quiet zone).

    Example:
        >>> enc = SymbolEncoder()
        >>> bc = enc.encode_segments([Segment("10", "123")], data="(10)123")
        >>> bc.symbols
        (105, 102, 10, 12, 100, 19, 99, 13, 106)
    """

    def __init__(self, config: Optional[EncoderConfig] = None) -> None:
        self.config = config or EncoderConfig()
        self.state = EncoderState.AWAITING_SEGMENT
        self.code_set = CodeSet.C
        self._builder = ModuleSequenceBuilder()
        self._symbols: List[int] = []
        self._checksum = 0
        self._weight = 0
        self._used = False

    def _emit(self, value: int) -> None:
        self._builder.append_symbol(value)
        self._symbols.append(value)
        # Start C carries weight 1 and the first symbol after it weight 1 too
        self._checksum += value * max(self._weight, 1)
        self._weight += 1

    def _emit_pair(self, pair: int) -> None:
        if not MIN_SYMBOL <= pair <= MAX_PAIR_SYMBOL:
            raise PanicError(f"digit pair {pair} outside {MIN_SYMBOL}..{MAX_PAIR_SYMBOL}")
        self._emit(pair)

    def _emit_ai(self, ai: str) -> None:
        if len(ai) != 2 or not ai.isascii() or not ai.isdigit():
            raise EncodeError(
                "GS1-128-C supports only 0-9 for application identifiers",
                context={"ai": ai},
            )
        self._emit_pair(int(ai))

    def _emit_value(self, segment: Segment, variable_length: bool) -> None:
        value = segment.value
        if not variable_length and len(value) % 2 != 0:
            value = "0" + value

        for i in range(0, len(value), 2):
            block = value[i : i + 2]
            if not block.isascii() or not block.isdigit():
                raise EncodeError(
                    "GS1-128-C supports only digits 0-9 in values",
                    context={"ai": segment.application_identifier, "block": block},
                )
            if len(block) == 2:
                self.state = EncoderState.EMITTING_FIXED_PAIR
                self._emit_pair(int(block))
            else:
                self.state = EncoderState.EMITTING_ODD_TAIL
                self._emit(CodeSet.B.switch_symbol)
                self.code_set = CodeSet.B
                self._emit(CODE_B_DIGIT_OFFSET + int(block))
                logger.debug(
                    "Odd tail digit %s emitted in %s", block, self.code_set.localized_name("en")
                )
                self._emit(CodeSet.C.switch_symbol)
                self.code_set = CodeSet.C

    def encode_segments(self, segments: Iterable[Segment], data: str = "") -> Barcode:
        """
        Encode parsed segments into a Barcode.

        Raises:
            EncodeError: non-numeric AI or value block.
            PanicError: encoder reused, or an internal invariant broke.
        """
        if self._used:
            raise PanicError("SymbolEncoder instances are single-use")
        self._used = True

        quiet_zone = self.config.quiet_zone_modules
        self._builder.append_quiet_zone(quiet_zone)
        self._emit(SpecialSymbol.START_C)
        self._emit(SpecialSymbol.FNC1)

        previous_variable = False
        count = 0
        for segment in segments:
            self.state = EncoderState.AWAITING_SEGMENT
            if previous_variable:
                # close the open variable-length field
                self._emit(SpecialSymbol.FNC1)
                logger.debug(
                    "%s separator before AI %s",
                    SpecialSymbol.FNC1.localized_name("en"),
                    segment.application_identifier,
                )
            self._emit_ai(segment.application_identifier)
            previous_variable = self.config.is_variable_length(
                segment.application_identifier
            )
            self._emit_value(segment, previous_variable)
            count += 1
            logger.debug("Encoded segment %s (variable=%s)", segment, previous_variable)

        self.state = EncoderState.AWAITING_SEGMENT
        check = self._checksum % CHECKSUM_MODULUS
        self._builder.append_symbol(check)
        self._symbols.append(check)
        self._builder.append_symbol(SpecialSymbol.STOP)
        self._symbols.append(int(SpecialSymbol.STOP))
        self._builder.append_quiet_zone(quiet_zone)

        barcode = Barcode(
            data=data,
            symbols=tuple(int(s) for s in self._symbols),
            modules=self._builder.finish(),
            quiet_zone_modules=quiet_zone,
        )
        logger.info(
            "GS1-128 encoded: %d segments, %d symbols, %d modules, check=%d",
            count,
            len(barcode.symbols),
            barcode.module_count(),
            check,
        )
        return barcode


def encode(data: str, config: Optional[EncoderConfig] = None) -> Barcode:
    """
    Parse and encode a "(AI)value..." string.

    Args:
        data: Raw identifier string, e.g. "(01)12345678901231(10)123".
        config: Optional encoder configuration.

    Returns:
        Immutable Barcode.

    Raises:
        FormatError: malformed segment syntax.
        EncodeError: value block that cannot be encoded.

    Example:
        >>> encode("(10)12").symbols
        (105, 102, 10, 12, 57, 106)
    """
    cfg = config or EncoderConfig()
    segments = parse_segments(data, cfg)
    return SymbolEncoder(cfg).encode_segments(segments, data=data)
