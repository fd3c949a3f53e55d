from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional, Tuple, TypedDict

from PIL import Image

from gs1barcode.barcodegen import renderer
from gs1barcode.barcodegen.encoder import SymbolEncoder
from gs1barcode.barcodegen.exceptions import FormatError
from gs1barcode.barcodegen.segments import Segment, parse_segments
from gs1barcode.config import EncoderConfig, RenderConfig
from gs1barcode.model.barcode import Barcode

logger = logging.getLogger(__name__)

__all__ = [
    "Gs1128Generator",
    "BarcodeRenderOptions",
]


class BarcodeRenderOptions(TypedDict, total=False):
    """Типобезопасные опции рендеринга штрихкода."""

    foreground: str
    background: str
    caption: str
    caption_font_path: str
    caption_font_size: int


class Gs1128Generator:
    """
    GS1-128 generator: "(AI)value..." string -> Barcode -> image.

    Args:
        data: Payload string, e.g. "(01)12345678901231(10)123"
        config: Optional encoder configuration
        render_config: Optional default image size/colors

    Example:
        >>> gen = Gs1128Generator("(01)12345678901231(10)123")
        >>> gen.encode().module_count()
        >>> png = gen.render_bytes(width=600, height=150)
    """

    def __init__(
        self,
        data: str,
        config: Optional[EncoderConfig] = None,
        render_config: Optional[RenderConfig] = None,
    ) -> None:
        self.data = data
        self.config = config or EncoderConfig()
        self.render_config = render_config or RenderConfig()
        self._barcode: Optional[Barcode] = None

    def validate(self) -> List[Segment]:
        """
        Validate data against the GS1-128 segment syntax.
        Проверяет входные данные и возвращает разобранные сегменты.
        Raises:
            FormatError: при ошибке синтаксиса сегментов.
        """
        if not isinstance(self.data, str) or not self.data.strip():
            raise FormatError("Barcode data must be non-empty string")
        return parse_segments(self.data, self.config)

    def encode(self) -> Barcode:
        """Encode once; later calls return the same immutable Barcode."""
        if self._barcode is None:
            segments = self.validate()
            self._barcode = SymbolEncoder(self.config).encode_segments(
                segments, data=self.data
            )
        return self._barcode

    def render_image(
        self,
        width: Optional[int] = None,
        height: Optional[int] = None,
        options: Optional[BarcodeRenderOptions] = None,
    ) -> Image.Image:
        """
        Рендеринг изображения штрихкода.

        Args:
            width: Ширина изображения в пикселях (по умолчанию: из RenderConfig).
            height: Высота штрихов в пикселях (по умолчанию: из RenderConfig).
            options: Цвета и подпись.

        Returns:
            PIL Image объект (RGB режим).

        Raises:
            FormatError, EncodeError: при ошибке входных данных.
            RenderError: если штрихкод не помещается в заданную ширину.
        """
        opts: Dict[str, Any] = {
            "foreground": self.render_config.foreground,
            "background": self.render_config.background,
            **(options or {}),
        }
        barcode = self.encode()
        logger.debug("Rendering image for GS1-128 data=%s", self.data)
        return renderer.render_image(
            barcode,
            self.render_config.width if width is None else width,
            self.render_config.height if height is None else height,
            **opts,
        )

    def render_bytes(
        self,
        width: Optional[int] = None,
        height: Optional[int] = None,
        options: Optional[BarcodeRenderOptions] = None,
        image_format: Optional[str] = None,
    ) -> bytes:
        img = self.render_image(width, height, options)
        return renderer.render_bytes(img, image_format or self.render_config.image_format)

    def to_base64(
        self,
        width: Optional[int] = None,
        height: Optional[int] = None,
        options: Optional[BarcodeRenderOptions] = None,
    ) -> str:
        return renderer.to_base64_png(self.render_image(width, height, options))

    def to_data_uri(
        self,
        width: Optional[int] = None,
        height: Optional[int] = None,
        options: Optional[BarcodeRenderOptions] = None,
    ) -> str:
        return renderer.to_data_uri_png(self.render_image(width, height, options))

    @classmethod
    def batch_generate(
        cls,
        items: List[Dict[str, Any]],
        parallel: bool = False,
        config: Optional[EncoderConfig] = None,
    ) -> List[Tuple[Dict[str, Any], Image.Image]]:
        """Batch-generate barcode images.

        Args:
            items: List of dicts {data, width?, height?, options?}.
            parallel: Enable parallel threads.
            config: Encoder configuration shared by all items.

        Returns:
            List of (input_dict, Image.Image) tuples in input order.

        Example:
            >>> Gs1128Generator.batch_generate([{"data": "(10)123", "width": 400}])
        """

        def gen(item: Dict[str, Any]) -> Tuple[Dict[str, Any], Image.Image]:
            generator = cls(item["data"], config=config)
            img = generator.render_image(
                width=item.get("width"),
                height=item.get("height"),
                options=item.get("options"),
            )
            return item, img

        if parallel:
            with ThreadPoolExecutor() as pool:
                result = list(pool.map(gen, items))
        else:
            result = [gen(i) for i in items]
        logger.info("Batch barcode generation complete: %d items", len(items))
        return result
