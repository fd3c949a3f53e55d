"""
RU: Построитель последовательности модулей (True = пробел/белый, False = штрих/чёрный)
EN: Module sequence builder (True = space/white, False = bar/black)
"""

from __future__ import annotations

import logging
from typing import List, Tuple

from gs1barcode.barcodegen.exceptions import PanicError
from gs1barcode.barcodegen.patterns import pattern_for

logger = logging.getLogger(__name__)

__all__ = ["ModuleSequenceBuilder", "ModuleSequence"]

ModuleSequence = Tuple[bool, ...]


class ModuleSequenceBuilder:
    """
    Growing ordered sequence of black/white module flags.

    Example:
        >>> builder = ModuleSequenceBuilder()
        >>> builder.append_quiet_zone(10)
        >>> builder.append_symbol(105)
        >>> modules = builder.finish()
        >>> len(modules)
        21
    """

    def __init__(self) -> None:
        self._modules: List[bool] = []
        self._finished = False

    def __len__(self) -> int:
        return len(self._modules)

    def _push(self, is_white: bool, width: int) -> None:
        if self._finished:
            raise PanicError("module sequence already finished")
        self._modules.extend([is_white] * width)

    def append_quiet_zone(self, width: int) -> None:
        """Append ``width`` white modules."""
        if width < 0:
            raise PanicError(f"quiet zone width must be >= 0, got {width}")
        self._push(True, width)

    def append_symbol(self, value: int) -> None:
        """Append the alternating bar/space runs of one symbol."""
        widths = pattern_for(value)
        for i, width in enumerate(widths):
            # even positions are bars
            self._push(i % 2 == 1, width)

    def finish(self) -> ModuleSequence:
        """Freeze the sequence; no appends are accepted afterwards."""
        self._finished = True
        logger.debug("Module sequence finished: %d modules", len(self._modules))
        return tuple(self._modules)
