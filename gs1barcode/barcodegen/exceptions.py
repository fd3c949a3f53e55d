"""
Исключения генератора GS1-128.

Иерархия типизированных исключений для разбора, кодирования и рендеринга.
Пользовательские ошибки наследуют от BarcodeGenError; нарушение внутренних
инвариантов сигнализируется отдельным PanicError.

Example:
    >>> from gs1barcode.barcodegen.exceptions import BarcodeGenError
    >>> try:
    ...     Gs1128Generator("(01)12AB").encode()
    ... except BarcodeGenError as e:
    ...     logger.error(f"GS1-128 failed: {e}")

Иерархия:
    BarcodeGenError (базовое)
    ├── FormatError
    ├── EncodeError
    └── RenderError

    PanicError (RuntimeError, не BarcodeGenError)
"""

from __future__ import annotations

from typing import Any, Dict, Optional

__all__: list[str] = [
    "BarcodeGenError",
    "FormatError",
    "EncodeError",
    "RenderError",
    "PanicError",
]


class BarcodeGenError(Exception):
    """
    Базовое исключение для всех ошибок входных данных и рендеринга.

    Attributes:
        message: Человекочитаемое сообщение об ошибке
        context: Дополнительный контекст для отладки (опционально)

    Example:
        >>> raise BarcodeGenError("Bad input", context={"segment": 2})
    """

    def __init__(
        self,
        message: str,
        *,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """
        Строковое представление исключения.

        Example:
            >>> str(FormatError("Value must be digits", context={"ai": "01"}))
            'FormatError: Value must be digits (ai=01)'
        """
        parts = [self.__class__.__name__, ": ", self.message]

        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            parts.append(f" ({ctx_str})")

        return "".join(parts)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"context={self.context!r})"
        )


class FormatError(BarcodeGenError):
    """
    Некорректный синтаксис сегмента во входной строке.

    Raises когда:
    - Идентификатор применения (AI) не состоит из двух цифр
    - Значение сегмента содержит нецифровые символы
    - Во входной строке нет ни одного сегмента
    """


class EncodeError(BarcodeGenError):
    """Блок значения не может быть закодирован в Code Set C/B."""


class RenderError(BarcodeGenError):
    """
    Штрихкод не помещается в заданное разрешение или изображение не
    удалось закодировать.
    """


class PanicError(RuntimeError):
    """
    Нарушение внутреннего инварианта (ошибка программы, не входных данных).

    Example:
        >>> pattern_for(107)
        PanicError: symbol value 107 outside 0..106
    """
