# RU: Доменная модель штрихкода GS1-128: неизменяемая последовательность модулей и символов.
# EN: GS1-128 barcode domain model: immutable module and symbol sequence with dict (de)serialization.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Tuple

from gs1barcode.barcodegen.exceptions import FormatError
from gs1barcode.config import MIN_QUIET_ZONE_MODULES
from gs1barcode.model.enums import CHECKSUM_MODULUS, MAX_SYMBOL, MIN_SYMBOL, SpecialSymbol

logger = logging.getLogger(__name__)

__all__ = ["Barcode"]


def _weighted_check(data: Tuple[int, ...]) -> int:
    """Start value once, then each later symbol times its position, mod 103."""
    total = data[0] + sum(pos * value for pos, value in enumerate(data[1:], start=1))
    return total % CHECKSUM_MODULUS


@dataclass(frozen=True)
class Barcode:
    """
    Complete encoded GS1-128 symbol, produced once per input string.

        - modules: True = space (white), False = bar (black), quiet zones included
        - symbols: emitted symbol values from Start C to Stop, check symbol included

    Examples:
        bc = Gs1128Generator("(01)1234567890123").encode()
        bc.module_count()          # 154
        bc.is_white_module(0)      # True (quiet zone)
        Barcode.from_dict(bc.to_dict()) == bc
    """

    schema_version: ClassVar[str] = "1.0"

    data: str
    symbols: Tuple[int, ...]
    modules: Tuple[bool, ...]
    quiet_zone_modules: int = 10

    def module_count(self) -> int:
        return len(self.modules)

    def is_white_module(self, index: int) -> bool:
        """Return True when module ``index`` is a space; IndexError when out of range."""
        if not 0 <= index < len(self.modules):
            raise IndexError(
                f"module index {index} out of range 0..{len(self.modules) - 1}"
            )
        return self.modules[index]

    @property
    def check_symbol(self) -> int:
        return self.symbols[-2]

    def to_bitstring(self) -> str:
        """Modules as "1" (bar) / "0" (space), e.g. for SVG or printer bitmaps."""
        return "".join("0" if white else "1" for white in self.modules)

    def __len__(self) -> int:
        return len(self.modules)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "schema_version": self.schema_version,
            "data": self.data,
            "symbols": list(self.symbols),
            "quiet_zone_modules": self.quiet_zone_modules,
            "modules": self.to_bitstring(),
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Barcode":
        """
        Rebuild a Barcode from to_dict() output.

        The module string is re-derived from the symbols and must match.

        Raises:
            FormatError: on symbols outside 0..106, a missing Start C/FNC1
                header or Stop, a wrong check symbol, a quiet zone below the
                minimum, or a module string that disagrees with the symbols.
        """
        # local import: barcodegen imports this module
        from gs1barcode.barcodegen.modules import ModuleSequenceBuilder

        d = dict(d)
        if "schema_version" in d and d["schema_version"] != cls.schema_version:
            logger.warning(
                "Schema version mismatch (expected %s, got %s)",
                cls.schema_version,
                d["schema_version"],
            )
        symbols = tuple(int(s) for s in d["symbols"])
        if not symbols or any(not MIN_SYMBOL <= s <= MAX_SYMBOL for s in symbols):
            raise FormatError(
                f"Symbols must be values in {MIN_SYMBOL}..{MAX_SYMBOL}",
                context={"data": d.get("data", "")},
            )
        if (
            len(symbols) < 4
            or symbols[:2] != (SpecialSymbol.START_C, SpecialSymbol.FNC1)
            or symbols[-1] != SpecialSymbol.STOP
        ):
            raise FormatError(
                "Symbols must start with Start C, FNC1 and end with Stop",
                context={"data": d.get("data", "")},
            )
        if symbols[-2] != _weighted_check(symbols[:-2]):
            raise FormatError(
                "Check symbol does not match symbol sequence",
                context={"data": d.get("data", ""), "check": symbols[-2]},
            )
        quiet_zone = int(d.get("quiet_zone_modules", MIN_QUIET_ZONE_MODULES))
        if quiet_zone < MIN_QUIET_ZONE_MODULES:
            raise FormatError(
                f"quiet_zone_modules must be >= {MIN_QUIET_ZONE_MODULES}",
                context={"quiet_zone_modules": quiet_zone},
            )

        builder = ModuleSequenceBuilder()
        builder.append_quiet_zone(quiet_zone)
        for symbol in symbols:
            builder.append_symbol(symbol)
        builder.append_quiet_zone(quiet_zone)
        modules = builder.finish()

        bits = d.get("modules")
        if bits is not None and bits != "".join("0" if m else "1" for m in modules):
            raise FormatError(
                "Module string does not match symbol sequence",
                context={"data": d.get("data", "")},
            )
        return cls(
            data=str(d.get("data", "")),
            symbols=symbols,
            modules=modules,
            quiet_zone_modules=quiet_zone,
        )

    def __str__(self) -> str:
        datashow: str = self.data[:24] + ("..." if len(self.data) > 24 else "")
        return f"Barcode(GS1-128, data={datashow}, modules={len(self.modules)})"
