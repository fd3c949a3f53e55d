# -*- coding: utf-8 -*-
"""
RU: Конфигурация кодера и рендерера GS1-128 с профилями AI переменной длины.
EN: GS1-128 encoder and renderer configuration with variable-length AI profiles.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Final, FrozenSet, Mapping

_AI_PATTERN: Final = re.compile(r"[0-9]{2}")

MIN_QUIET_ZONE_MODULES: Final[int] = 10
MAX_IMAGE_WIDTH: Final[int] = 10000
MAX_IMAGE_HEIGHT: Final[int] = 10000


class VariableLengthProfile(str, Enum):
    """Predefined sets of application identifiers that need an FNC1 separator."""

    # Only AI 10 (batch/lot), the historical behavior
    LEGACY = "legacy"

    # Every two-digit GS1 AI whose value is variable-length
    GS1 = "gs1"


_PROFILE_AIS: Final[dict[VariableLengthProfile, FrozenSet[str]]] = {
    VariableLengthProfile.LEGACY: frozenset({"10"}),
    VariableLengthProfile.GS1: frozenset(
        {"10", "21", "22", "30", "37"} | {str(ai) for ai in range(90, 100)}
    ),
}


@dataclass(frozen=True)
class EncoderConfig:
    """
    GS1-128 encoder parameters.

    Attributes:
        variable_length_ais: AIs whose value must be closed by FNC1 when
            another segment follows.
        quiet_zone_modules: White modules before and after the symbol.
        terminator: Extra chunk delimiter next to "(".

    Examples:
        >>> EncoderConfig().variable_length_ais
        frozenset({'10'})

        >>> cfg = EncoderConfig.from_profile(VariableLengthProfile.GS1)
        >>> "21" in cfg.variable_length_ais
        True
    """

    variable_length_ais: FrozenSet[str] = field(
        default_factory=lambda: _PROFILE_AIS[VariableLengthProfile.LEGACY]
    )
    quiet_zone_modules: int = MIN_QUIET_ZONE_MODULES
    terminator: str = "'"

    def __post_init__(self) -> None:
        """Validate parameters."""
        if not isinstance(self.variable_length_ais, frozenset):
            object.__setattr__(
                self, "variable_length_ais", frozenset(self.variable_length_ais)
            )
        for ai in self.variable_length_ais:
            if not isinstance(ai, str) or not _AI_PATTERN.fullmatch(ai):
                raise ValueError(f"variable-length AI must be two digits, got {ai!r}")
        if self.quiet_zone_modules < MIN_QUIET_ZONE_MODULES:
            raise ValueError(
                f"quiet_zone_modules must be >= {MIN_QUIET_ZONE_MODULES}"
            )
        if (
            len(self.terminator) != 1
            or self.terminator.isdigit()
            or self.terminator in "()"
        ):
            raise ValueError(
                "terminator must be a single character other than a digit, '(' or ')'"
            )

    def is_variable_length(self, ai: str) -> bool:
        return ai in self.variable_length_ais

    @staticmethod
    def from_profile(profile: VariableLengthProfile) -> "EncoderConfig":
        """
        Create configuration from a predefined profile.

        Examples:
            >>> EncoderConfig.from_profile(VariableLengthProfile.LEGACY).variable_length_ais
            frozenset({'10'})
        """
        return EncoderConfig(variable_length_ais=_PROFILE_AIS[profile])

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> "EncoderConfig":
        """Build from a load_config() dictionary."""
        ais = config.get("variable_length_ais")
        if ais is None:
            profile = VariableLengthProfile(config.get("variable_length_profile", "legacy"))
            ais = _PROFILE_AIS[profile]
        return cls(
            variable_length_ais=frozenset(ais),
            quiet_zone_modules=int(config.get("quiet_zone_modules", MIN_QUIET_ZONE_MODULES)),
            terminator=str(config.get("segment_terminator", "'")),
        )


@dataclass(frozen=True)
class RenderConfig:
    """
    Raster rendering parameters.

    Examples:
        >>> RenderConfig(width=600, height=150).image_format
        'PNG'
    """

    width: int = 400
    height: int = 120
    foreground: str = "black"
    background: str = "white"
    image_format: str = "PNG"

    def __post_init__(self) -> None:
        """Validate parameters."""
        if self.width <= 0 or self.width > MAX_IMAGE_WIDTH:
            raise ValueError(f"width must be in 1..{MAX_IMAGE_WIDTH}, got {self.width}")
        if self.height <= 0 or self.height > MAX_IMAGE_HEIGHT:
            raise ValueError(
                f"height must be in 1..{MAX_IMAGE_HEIGHT}, got {self.height}"
            )

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> "RenderConfig":
        return cls(
            width=int(config.get("render_width", 400)),
            height=int(config.get("render_height", 120)),
            foreground=str(config.get("foreground", "black")),
            background=str(config.get("background", "white")),
            image_format=str(config.get("image_format", "PNG")).upper(),
        )


__all__ = [
    "VariableLengthProfile",
    "EncoderConfig",
    "RenderConfig",
    "MIN_QUIET_ZONE_MODULES",
    "MAX_IMAGE_WIDTH",
    "MAX_IMAGE_HEIGHT",
]
