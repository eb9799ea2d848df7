#!/usr/bin/env python3
"""
LabelKu CLI: shipping receipts from the terminal.

Usage:
    python -m labelku <command> [options]

Commands:
    render      Render a receipt JSON file to a label PDF
    text        Print the plain-text receipt (optionally copy it)
    quote       List shipping services and prices for a form
    create      Turn a filled-in form into a receipt with tracking number
    share       Build (and optionally open) a WhatsApp/Telegram/email link
    sizes       List the supported paper sizes
    couriers    List the supported couriers
    info        Show page size and metadata of a generated PDF
    config      Show or change default paper size, orientation, output folder

Examples:
    labelku-cli create form.json -o receipt.json --service Express
    labelku-cli render receipt.json -o labels/ --paper-size 50x100mm
    labelku-cli render receipt.json --orientation landscape
    labelku-cli text receipt.json --copy
    labelku-cli share receipt.json --via whatsapp --open
    labelku-cli info labels/resi-JNT12345678ABCD.pdf
"""

import argparse
import dataclasses
import json
import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Any

from labelku.config import APP_DESCRIPTION, APP_NAME, APP_VERSION, LOG_DATE_FORMAT, LOG_FORMAT
from labelku.models import Orientation, ReceiptData
from labelku.services.paper import PAPER_SIZES
from labelku.services.receipt_pdf import render_receipt_pdf
from labelku.services.sharing import SHARE_TARGETS, copy_to_clipboard, open_url, save_receipt_pdf
from labelku.services.shipping import COURIERS, check_shipping_cost, create_receipt
from labelku.services.text_format import format_receipt_text
from labelku.utils.config_manager import ConfigManager, get_config_manager
from labelku.utils.exceptions import InvalidReceiptFileError, LabelkuError, OutputPathError
from labelku.utils.format_utils import format_rupiah
from labelku.utils.pdf_utils import get_pdf_info

# ---------------------------------------------------------------------------
# Input helpers
# ---------------------------------------------------------------------------


def _parse_datetime(text: str) -> datetime:
    """argparse type for ISO 8601 timestamps ("2026-10-19T14:30")."""
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid date '{text}'. Use ISO format like 2026-10-19T14:30."
        ) from None


def _load_json(path: Path) -> dict[str, Any]:
    """Read a JSON object from ``path``.

    Raises:
        InvalidReceiptFileError: If the file is unreadable, not JSON, or not an object
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise InvalidReceiptFileError(str(path), e.strerror or str(e)) from e
    except json.JSONDecodeError as e:
        raise InvalidReceiptFileError(str(path), f"not valid JSON ({e.msg})") from e

    if not isinstance(data, dict):
        raise InvalidReceiptFileError(str(path), "expected a JSON object")
    return data


def _load_receipt(path: Path, args: argparse.Namespace, config: ConfigManager) -> ReceiptData:
    """Load a receipt, filling paper settings from CLI options, file, then config."""
    data = _load_json(path)
    try:
        receipt = ReceiptData.from_dict(data)
    except (TypeError, ValueError) as e:
        raise InvalidReceiptFileError(str(path), str(e)) from e

    paper_size = getattr(args, "paper_size", None)
    if not paper_size and "paperSize" not in data and "paper_size" not in data:
        paper_size = config.get("label.paper_size")

    orientation = getattr(args, "orientation", None)
    if not orientation and "orientation" not in data:
        orientation = config.get("label.orientation")

    changes: dict[str, str] = {}
    if paper_size:
        changes["paper_size"] = paper_size
    if orientation:
        changes["orientation"] = Orientation.parse(orientation).value
    return dataclasses.replace(receipt, **changes)


# ---------------------------------------------------------------------------
# Argument parser construction
# ---------------------------------------------------------------------------


def _add_paper_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--paper-size",
        type=str,
        default=None,
        help="Paper size token, e.g. 100x150mm (see 'sizes'). Unknown sizes fall back to 100x150mm.",
    )
    parser.add_argument(
        "--orientation",
        choices=[o.value for o in Orientation],
        default=None,
        help="Page orientation. Default: from the receipt file or settings.",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with subcommands."""
    p = argparse.ArgumentParser(
        prog="labelku-cli",
        description=f"{APP_NAME}: {APP_DESCRIPTION}.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Verbose logging (DEBUG)")
    p.add_argument("--version", action="version", version=f"{APP_NAME} {APP_VERSION}")
    p.add_argument("--config", type=str, default=None, help="Settings file to use")

    sub = p.add_subparsers(dest="command", help="Available commands")

    # --- render ---
    render_p = sub.add_parser("render", help="Render a receipt to a label PDF")
    render_p.add_argument("input", type=Path, help="Receipt JSON file")
    render_p.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output folder, or a .pdf file path. Default: settings, then current folder.",
    )
    _add_paper_options(render_p)
    render_p.add_argument(
        "--date", type=_parse_datetime, default=None, help="Generation time for the footer"
    )

    # --- text ---
    text_p = sub.add_parser("text", help="Print the plain-text receipt")
    text_p.add_argument("input", type=Path, help="Receipt JSON file")
    text_p.add_argument("--copy", action="store_true", help="Also copy the text to the clipboard")
    text_p.add_argument("--date", type=_parse_datetime, default=None, help="Date on the last line")

    # --- quote ---
    quote_p = sub.add_parser("quote", help="List shipping services for a form")
    quote_p.add_argument("input", type=Path, help="Shipping form JSON file")

    # --- create ---
    create_p = sub.add_parser("create", help="Create a receipt from a shipping form")
    create_p.add_argument("input", type=Path, help="Shipping form JSON file")
    create_p.add_argument(
        "-o", "--output", type=Path, default=None, help="Write the receipt JSON here (default: stdout)"
    )
    create_p.add_argument("--service", type=str, default=None, help="Service name to select")
    _add_paper_options(create_p)

    # --- share ---
    share_p = sub.add_parser("share", help="Build a share link for a receipt")
    share_p.add_argument("input", type=Path, help="Receipt JSON file")
    share_p.add_argument("--via", choices=sorted(SHARE_TARGETS), required=True)
    share_p.add_argument("--open", action="store_true", help="Open the link in the default app")
    share_p.add_argument("--date", type=_parse_datetime, default=None, help="Date in the text")

    # --- sizes / couriers ---
    sub.add_parser("sizes", help="List supported paper sizes")
    sub.add_parser("couriers", help="List supported couriers")

    # --- info ---
    info_p = sub.add_parser("info", help="Show size and metadata of a PDF")
    info_p.add_argument("input", type=Path, help="PDF file")

    # --- config ---
    config_p = sub.add_parser("config", help="Show or change default settings")
    _add_paper_options(config_p)
    config_p.add_argument("--output-dir", type=str, default=None, help="Default output folder")

    return p


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


def _cmd_render(args, config, logger) -> int:
    receipt = _load_receipt(args.input, args, config)
    rendered = render_receipt_pdf(receipt, now=args.date)

    output = args.output
    if output is not None and output.suffix.lower() == ".pdf":
        try:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_bytes(rendered.pdf)
        except OSError as e:
            raise OutputPathError(str(output), e.strerror or str(e)) from e
        saved = str(output)
    else:
        directory = str(output) if output else config.get("output.destination_folder") or "."
        saved = save_receipt_pdf(rendered, directory)
        if saved is None:
            raise OutputPathError(directory, "could not write the receipt PDF")

    if rendered.truncated:
        print(
            f"Warning: {rendered.dropped_lines} line(s) did not fit on "
            f"{receipt.paper_size} ({receipt.orientation}) and were left out",
            file=sys.stderr,
        )
    print(f"Saved: {saved}")
    return 0


def _cmd_text(args, config, logger) -> int:
    receipt = _load_receipt(args.input, args, config)
    text = format_receipt_text(receipt, now=args.date)
    print(text)

    if args.copy:
        if copy_to_clipboard(text):
            print("Copied to clipboard.", file=sys.stderr)
        else:
            print("Error: could not copy to clipboard", file=sys.stderr)
            return 1
    return 0


def _cmd_quote(args, config, logger) -> int:
    services = check_shipping_cost(_load_json(args.input))
    for service in services:
        print(f"{service.name:<10} {format_rupiah(service.price):>12}  {service.estimated_days}")
    return 0


def _cmd_create(args, config, logger) -> int:
    form = _load_json(args.input)
    if args.service:
        form["service"] = args.service
    if args.paper_size:
        form["paperSize"] = args.paper_size
    elif "paperSize" not in form and "paper_size" not in form:
        form["paperSize"] = config.get("label.paper_size")
    if args.orientation:
        form["orientation"] = args.orientation
    elif "orientation" not in form:
        form["orientation"] = config.get("label.orientation")

    services = check_shipping_cost(form)
    receipt = create_receipt(form, services)
    payload = json.dumps(receipt.to_dict(), indent=2, ensure_ascii=False)

    if args.output:
        try:
            args.output.write_text(payload + "\n", encoding="utf-8")
        except OSError as e:
            raise OutputPathError(str(args.output), e.strerror or str(e)) from e
        logger.info(f"Receipt written to {args.output}")
    else:
        print(payload)

    print(
        f"No. Resi: {receipt.tracking_number}  Ongkir: {format_rupiah(receipt.shipping_cost)}",
        file=sys.stderr,
    )
    return 0


def _cmd_share(args, config, logger) -> int:
    receipt = _load_receipt(args.input, args, config)
    url = SHARE_TARGETS[args.via](format_receipt_text(receipt, now=args.date))
    print(url)

    if args.open and not open_url(url):
        print(f"Error: could not open {args.via} link", file=sys.stderr)
        return 1
    return 0


def _cmd_sizes(args, config, logger) -> int:
    default = config.get("label.paper_size")
    for token, (width, height) in PAPER_SIZES.items():
        marker = " (default)" if token == default else ""
        print(f"{token:<10} {width:g} x {height:g} mm{marker}")
    return 0


def _cmd_couriers(args, config, logger) -> int:
    for courier in COURIERS:
        print(f"{courier.code:<8} {courier.label}")
    return 0


def _cmd_info(args, config, logger) -> int:
    info = get_pdf_info(str(args.input))
    if not info["pages"]:
        print(f"Error: {args.input} is not a readable PDF", file=sys.stderr)
        return 1

    print(f"File:     {args.input}")
    print(f"Pages:    {info['pages']}")
    print(
        f"Size:     {info['width_mm']:g} x {info['height_mm']:g} mm "
        f"({info['width_pt']:.1f} x {info['height_pt']:.1f} pt)"
    )
    if info["title"]:
        print(f"Title:    {info['title']}")
    if info["producer"]:
        print(f"Producer: {info['producer']}")
    return 0


def _cmd_config(args, config, logger) -> int:
    updates = {
        "label.paper_size": args.paper_size,
        "label.orientation": args.orientation,
        "output.destination_folder": args.output_dir,
    }
    changed = False
    for key, value in updates.items():
        if value is not None:
            config.set(key, value, save_immediately=False)
            changed = True
    if changed and not config.save():
        print("Error: could not save settings", file=sys.stderr)
        return 1

    for key in updates:
        print(f"{key} = {config.get(key)!r}")
    return 0


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    logging.getLogger().setLevel(level)
    logger = logging.getLogger("labelku.cli")

    input_path = getattr(args, "input", None)
    if input_path is not None and not os.path.exists(input_path):
        print(f"Error: {input_path} not found", file=sys.stderr)
        return 1

    config = ConfigManager(config_path=args.config) if args.config else get_config_manager()

    handlers = {
        "render": _cmd_render,
        "text": _cmd_text,
        "quote": _cmd_quote,
        "create": _cmd_create,
        "share": _cmd_share,
        "sizes": _cmd_sizes,
        "couriers": _cmd_couriers,
        "info": _cmd_info,
        "config": _cmd_config,
    }

    try:
        return handlers[args.command](args, config, logger)
    except LabelkuError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
