#!/usr/bin/env python3
"""
GS1-128 command line tool.

Usage:
    python -m gs1barcode "(01)12345678901231(10)123" --output label.png
    python -m gs1barcode "(10)123" --data-uri --width 484
    python -m gs1barcode "(10)123(21)45" --profile gs1 --symbols
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from PIL import Image

from gs1barcode import get_logger, load_config
from gs1barcode.barcodegen import BarcodeGenError, Gs1128Generator
from gs1barcode.config import EncoderConfig, RenderConfig, VariableLengthProfile

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gs1barcode", description="Encode and render GS1-128 barcodes"
    )
    parser.add_argument("data", help='GS1 string, e.g. "(01)12345678901231(10)123"')
    parser.add_argument("--output", "-o", help="Write the image to this file")
    parser.add_argument("--width", type=int, help="Image width in pixels")
    parser.add_argument("--height", type=int, help="Bar height in pixels")
    parser.add_argument("--caption", help="Human readable text under the bars")
    parser.add_argument(
        "--profile",
        choices=[p.value for p in VariableLengthProfile],
        help="Variable-length AI set (default: from config, else legacy)",
    )
    parser.add_argument("--config", type=Path, help="JSON config file")
    parser.add_argument(
        "--data-uri", action="store_true", help="Print a data:image/png;base64 URI"
    )
    parser.add_argument(
        "--symbols", action="store_true", help="Print the encoded symbols as JSON"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config = load_config(args.config)
    if args.profile:
        config["variable_length_profile"] = args.profile
        config.pop("variable_length_ais", None)

    try:
        encoder_config = EncoderConfig.from_mapping(config)
        render_config = RenderConfig.from_mapping(config)
    except ValueError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    gen = Gs1128Generator(args.data, config=encoder_config, render_config=render_config)
    options = {"caption": args.caption} if args.caption else None
    try:
        barcode = gen.encode()
        if args.symbols:
            print(json.dumps(barcode.to_dict(), ensure_ascii=False, indent=2))
        if args.data_uri:
            print(gen.to_data_uri(args.width, args.height, options))
        if args.output:
            output = Path(args.output)
            image_format = Image.registered_extensions().get(output.suffix.lower())
            output.write_bytes(
                gen.render_bytes(args.width, args.height, options, image_format)
            )
            print(f"Barcode saved: {output}")
        if not (args.symbols or args.data_uri or args.output):
            print(
                f"GS1-128 {args.data}: {len(barcode.symbols)} symbols, "
                f"{barcode.module_count()} modules, check={barcode.check_symbol}"
            )
    except BarcodeGenError as e:
        logger.error("GS1-128 generation failed: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
