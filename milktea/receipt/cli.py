"""CLI entry point for the receipt engine."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from .config import load_config
from .nutrition import estimate_item
from .ocr import StaticTextSource, TesseractTextSource
from .parser import parse_receipt
from .processor import ReceiptProcessor
from .quota import WeeklyUsageLimiter
from .vision import create_client


def main(argv: list[str] | None = None) -> None:
    load_dotenv()

    parser = argparse.ArgumentParser(
        prog="milktea-receipt",
        description="Extract drink items from milk tea receipts",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="path to a TOML config file",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # scan
    scan_parser = sub.add_parser("scan", help="extract a receipt image")
    scan_parser.add_argument("image", type=str, help="receipt image file")
    scan_parser.add_argument("--json", action="store_true", help="print JSON")
    scan_parser.add_argument(
        "--no-ai", action="store_true", help="skip the AI service, use OCR only"
    )
    scan_parser.add_argument(
        "--text",
        type=str,
        default=None,
        metavar="FILE",
        help="use the text in FILE instead of running OCR",
    )

    # parse
    parse_parser = sub.add_parser("parse", help="parse receipt text")
    parse_parser.add_argument(
        "file", type=str, nargs="?", default=None, help="text file (default: stdin)"
    )
    parse_parser.add_argument("--json", action="store_true", help="print JSON")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    match args.command:
        case "scan":
            asyncio.run(_cmd_scan(config, args))
        case "parse":
            _cmd_parse(args)


async def _cmd_scan(config, args) -> None:
    if args.text:
        ocr = StaticTextSource(Path(args.text).read_text(encoding="utf-8"))
    else:
        ocr = TesseractTextSource(languages=config.ocr.languages)

    ai_client = None if args.no_ai else create_client(config)

    processor = ReceiptProcessor(
        ocr=ocr,
        ai_client=ai_client,
        usage=WeeklyUsageLimiter(config.usage.weekly_limit),
        max_dimension=config.image.max_dimension,
        jpeg_quality=config.image.jpeg_quality,
    )
    result = await processor.process(args.image)

    if result.failed:
        print(f"Could not read receipt: {result.error}", file=sys.stderr)
        sys.exit(1)

    if args.json:
        data = result.receipt.to_dict()
        data["usedFallback"] = result.used_fallback
        print(json.dumps(data, ensure_ascii=False, indent=2))
    else:
        source = "OCR parser" if result.used_fallback else "AI"
        print(f"(extracted by {source})")
        _print_receipt(result.receipt)


def _cmd_parse(args) -> None:
    if args.file:
        text = Path(args.file).read_text(encoding="utf-8")
    else:
        text = sys.stdin.read()

    receipt = parse_receipt(text)
    if args.json:
        print(json.dumps(receipt.to_dict(), ensure_ascii=False, indent=2))
    else:
        _print_receipt(receipt)


def _print_receipt(receipt) -> None:
    brand = receipt.matched_brand_name or receipt.raw_brand_name or "unknown"
    print(f"Brand: {brand}")
    if not receipt.items:
        print("No drinks found.")
    for item in receipt.items:
        price = f"${item.price}" if item.price is not None else "-"
        kcal = estimate_item(item).calories
        print(
            f"  {item.drink_name:<24} {price:>8}  "
            f"size={item.size.value} sugar={item.sugar_level.value} "
            f"ice={item.ice_level.value} topping={item.topping_level.value} "
            f"~{kcal:.0f} kcal"
        )
    if receipt.total_price is not None:
        print(f"Total: ${receipt.total_price}")
