"""CLI entry point for the transaction decoder.

Usage:
    python -m txdecode 0100000002...           # Decode a hex argument
    python -m txdecode --file tx.hex           # Decode hex read from a file
    echo 0100... | python -m txdecode -        # Decode hex from stdin
    python -m txdecode --strict --indent 4 ... # Reject non-minimal sizes
"""

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv

from txdecode.config.decoder_config import LOG_LEVELS, LOG_MODES, DecoderConfig
from txdecode.config.logging_config import setup_logging
from txdecode.errors import TransactionDecodeError
from txdecode.presenter import render
from txdecode.tx_processor import TransactionProcessor

logger = logging.getLogger("txdecode.cli")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="txdecode",
        description="Decode a raw Bitcoin transaction (hex) into JSON",
        epilog="Examples:\n"
        "  python -m txdecode 0100000002...      # Hex argument\n"
        "  python -m txdecode --file tx.hex      # Hex file\n"
        "  cat tx.hex | python -m txdecode -     # Stdin",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "hex",
        nargs="?",
        help="Raw transaction hex ('-' or omitted reads stdin)",
    )

    parser.add_argument(
        "--file",
        type=Path,
        help="Read the raw transaction hex from a file",
    )

    parser.add_argument(
        "--indent",
        type=int,
        help="JSON indentation (default: TXDECODE_JSON_INDENT or 2; 0 = compact)",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Reject non-minimal compact size encodings",
    )

    parser.add_argument(
        "--reject-trailing",
        action="store_true",
        default=None,
        help="Fail if bytes follow the locktime field",
    )

    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: LOG_LEVEL or INFO)",
    )

    parser.add_argument(
        "--log-mode",
        choices=LOG_MODES,
        help="development (readable) or production (JSON) logs",
    )

    args = parser.parse_args(argv)
    if args.file and args.hex:
        parser.error("pass either a hex argument or --file, not both")
    if args.indent is not None and args.indent < 0:
        parser.error("--indent must be >= 0")
    return args


def build_config(args: argparse.Namespace) -> DecoderConfig:
    """Environment config with command line overrides applied."""
    overrides = {
        "strict_compact_size": args.strict,
        "reject_trailing_bytes": args.reject_trailing,
        "json_indent": args.indent,
        "log_level": args.log_level,
        "log_mode": args.log_mode,
    }
    return dataclasses.replace(
        DecoderConfig(), **{k: v for k, v in overrides.items() if v is not None}
    )


def read_hex(args: argparse.Namespace) -> str:
    if args.file:
        return args.file.read_text()
    if args.hex and args.hex != "-":
        return args.hex
    return sys.stdin.read()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 = decoded, 1 = config, input or decode failure)
    """
    env_path = Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    args = parse_args(argv)
    try:
        config = build_config(args)
    except ValueError as e:
        # Logging is configured from this config, so report directly
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    setup_logging(
        name="txdecode",
        level=config.log_level,
        mode=config.log_mode,
        log_dir=config.log_dir,
    )

    try:
        raw_hex = read_hex(args)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read input: {e}")
        return 1

    try:
        tx = TransactionProcessor(config).parse_hex(raw_hex)
    except TransactionDecodeError as e:
        logger.error(f"Decode failed: {e}")
        return 1

    print(render(tx, indent=config.json_indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
