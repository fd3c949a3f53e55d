"""
RU: Разбор входной строки "(AI)значение..." на сегменты.
EN: Splits "(AI)value..." input into application-identifier segments.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Optional

from gs1barcode.barcodegen.exceptions import FormatError
from gs1barcode.config import EncoderConfig

logger = logging.getLogger(__name__)

__all__ = ["Segment", "parse_segments"]

_AI_PATTERN = re.compile(r"[0-9]{2}")


@dataclass(frozen=True)
class Segment:
    """One application identifier and its digit-string value."""

    application_identifier: str
    value: str

    def __str__(self) -> str:
        return f"({self.application_identifier}){self.value}"


def parse_segments(raw: str, config: Optional[EncoderConfig] = None) -> List[Segment]:
    """
    Split raw input into ordered segments.

    The input is cut at "(" and at the configured terminator. Chunks of two
    characters or fewer are discarded. Each remaining chunk starts with the
    two-digit AI; the rest, with ")" removed, is the value.

    Args:
        raw: Input such as "(01)12345678901231(10)123".
        config: Encoder configuration (terminator character).

    Returns:
        Segments in input order.

    Raises:
        FormatError: non-string input, no segments, a non-numeric AI, an
            empty value or a value containing non-digit characters.

    Example:
        >>> parse_segments("(01)1234(10)56")
        [Segment(application_identifier='01', value='1234'), Segment(application_identifier='10', value='56')]
    """
    if not isinstance(raw, str):
        raise FormatError(f"Barcode data must be a string, got {type(raw).__name__}")
    cfg = config or EncoderConfig()

    chunks = re.split(f"[({re.escape(cfg.terminator)}]", raw)
    segments: List[Segment] = []
    for chunk in chunks:
        if len(chunk) <= 2:
            continue
        ai = chunk[:2]
        value = chunk[2:].replace(")", "")
        if not _AI_PATTERN.fullmatch(ai):
            logger.error("Invalid application identifier %r in %r", ai, raw)
            raise FormatError(
                "Application identifier must be two digits",
                context={"ai": ai, "index": len(segments)},
            )
        if not value:
            raise FormatError("Segment value is empty", context={"ai": ai})
        if not value.isascii() or not value.isdigit():
            logger.error("Non-digit value %r for AI %s", value, ai)
            raise FormatError(
                "Segment value must contain only digits 0-9",
                context={"ai": ai, "value": value},
            )
        segments.append(Segment(application_identifier=ai, value=value))

    if not segments:
        raise FormatError("No (AI)value segments found", context={"input": raw})

    logger.debug("Parsed %d segments from %r", len(segments), raw)
    return segments
