"""Command line entry point for ``unicodeconv``."""
from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path
from typing import Callable, List, Optional

from unicodeconv.app.selftest import render_report, run_selftest
from unicodeconv.adapters.registry import available_codecs
from unicodeconv.app.settings import ConverterSettings, SettingsError
from unicodeconv.domain.errors import ConversionError, LengthOverflowError
from unicodeconv.domain.text import utf16_units_from_bytes, utf16_units_to_bytes
from unicodeconv.usecases import Utf8ToUtf16Converter, Utf16ToUtf8Converter
from unicodeconv.utils.logging import apply_level_override, configure_root

log = logging.getLogger("unicodeconv.cli")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

Handler = Callable[[argparse.Namespace, ConverterSettings], int]


def _cmd_to_utf8(args: argparse.Namespace, settings: ConverterSettings) -> int:
    data = Path(args.src).read_bytes()
    log.debug("Read %d bytes of UTF-16 (%s-endian) from %s", len(data), args.byteorder, args.src)
    try:
        units = utf16_units_from_bytes(data, args.byteorder)
    except ValueError as exc:
        log.error("%s: %s", args.src, exc)
        return EXIT_FAILURE
    convert = Utf16ToUtf8Converter(codec=settings.build_codec(), length_limit=settings.length_limit)
    utf8 = convert(units)
    Path(args.dst).write_bytes(utf8)
    log.info("Wrote %d UTF-8 bytes to %s", len(utf8), args.dst)
    return EXIT_OK


def _cmd_to_utf16(args: argparse.Namespace, settings: ConverterSettings) -> int:
    data = Path(args.src).read_bytes()
    log.debug("Read %d bytes of UTF-8 from %s", len(data), args.src)
    convert = Utf8ToUtf16Converter(codec=settings.build_codec(), length_limit=settings.length_limit)
    utf16 = convert(data)
    Path(args.dst).write_bytes(utf16_units_to_bytes(utf16, args.byteorder))
    log.info("Wrote %d UTF-16 code units to %s", len(utf16), args.dst)
    return EXIT_OK


def _cmd_selftest(args: argparse.Namespace, settings: ConverterSettings) -> int:
    results = run_selftest(settings.build_codec())
    print(f"*** unicodeconv self-test (codec: {settings.codec}) ***")
    for line in render_report(results):
        print(line)
    return EXIT_OK if all(result.passed for result in results) else EXIT_FAILURE


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unicodeconv",
        description="Strict conversion between UTF-16 and UTF-8 files.",
    )
    parser.add_argument(
        "--codec",
        choices=available_codecs(),
        help="codec implementation (default: $UNICODECONV_CODEC or 'table')",
    )
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="log level (default: $UNICODECONV_LOG_LEVEL or WARNING)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    for name, handler, help_text in (
        ("to-utf8", _cmd_to_utf8, "convert a UTF-16 file to UTF-8"),
        ("to-utf16", _cmd_to_utf16, "convert a UTF-8 file to UTF-16"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("src", help="input file")
        cmd.add_argument("dst", help="output file")
        cmd.add_argument(
            "--byteorder",
            choices=("little", "big"),
            default="little",
            help="byte order of the UTF-16 side (default: little)",
        )
        cmd.set_defaults(handler=handler)

    selftest = sub.add_parser("selftest", help="run the built-in conversion checks")
    selftest.set_defaults(handler=_cmd_selftest)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    effective = configure_root()
    override = apply_level_override(args.log_level)
    if override is not None:
        effective = override
    log.debug("Log level %s", logging.getLevelName(effective))

    try:
        settings = ConverterSettings.from_env()
        if args.codec:
            settings = replace(settings, codec=args.codec)
    except SettingsError as exc:
        log.error("Invalid settings: %s", exc)
        return EXIT_USAGE
    log.debug("Using codec %r, length limit %d", settings.codec, settings.length_limit)

    handler: Handler = args.handler
    try:
        return handler(args, settings)
    except (ConversionError, LengthOverflowError) as exc:
        log.error("Conversion failed: %s", exc)
        return EXIT_FAILURE
    except OSError as exc:
        log.error("I/O error: %s", exc)
        return EXIT_FAILURE


if __name__ == "__main__":
    raise SystemExit(main())
