"""
CLI interface for GS1 Intake.

Usage:
    python -m gs1_intake "<barcode text>" [options]

Options:
    --json              Output as JSON
    --human             With --json, use display names and drop absent fields
    --gs-token TOKEN    Text standing in for ASCII 29 (default: <GS>)
    --verbose           Log decoding steps to stderr
"""

import argparse
import logging
import sys
from typing import Optional

from .core.decoder import ParsedRecord, decode_gs1
from .core.normalizer import normalize
from .formatters.json_formatter import format_date_for_input, record_to_json
from .validators.validators import validate_expiry_date

GS = '\x1d'


def format_result(record: ParsedRecord) -> str:
    """Format a decoded record for display."""
    lines = [
        "=" * 60,
        "GS1 Decode Result",
        "=" * 60,
        f"Raw Input: {record.raw!r}",
        f"Normalized: {normalize(record.raw)!r}",
        f"GS1: {record.is_gs1}",
    ]

    if not record.is_gs1:
        lines.append("Not a GS1 barcode; use the raw value for lookup.")
        return '\n'.join(lines)

    lines.extend([
        f"Encoding: {record.encoding.value}",
        "",
        "Fields:",
        "-" * 40,
        f"  GTIN: {record.gtin or '-'}",
        f"  Expiry (raw): {record.expiry_date_raw or '-'}",
        f"  Expiry: {format_date_for_input(record.expiry_date) or '-'}",
        f"  Batch/Lot: {record.batch or '-'}",
        f"  Serial: {record.serial or '-'}",
    ])

    if record.has_invalid_expiry:
        validation = validate_expiry_date(record.expiry_date_raw)
        lines.extend([
            "",
            "Errors:",
            "-" * 40,
        ])
        for error in validation.errors:
            lines.append(f"  [INVALID_DATE] {error}")

    return '\n'.join(lines)


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='gs1_intake',
        description='Decode GS1 barcodes from medicine packaging'
    )

    parser.add_argument(
        'barcode',
        help='Barcode data to decode'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Output result as JSON'
    )

    parser.add_argument(
        '--human',
        action='store_true',
        help='With --json, use display field names and omit absent fields'
    )

    parser.add_argument(
        '--gs-token',
        default='<GS>',
        help='Text to treat as the ASCII 29 group separator (default: %(default)s)'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Log decoding steps to stderr'
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(levelname)s %(name)s: %(message)s',
        )

    barcode = args.barcode
    if args.gs_token:
        barcode = barcode.replace(args.gs_token, GS)

    record = decode_gs1(barcode)

    if args.json:
        print(record_to_json(record, human_readable=args.human))
    else:
        print(format_result(record))

    # 0 for GS1 input, 1 for plain barcodes
    return 0 if record.is_gs1 else 1


if __name__ == '__main__':
    sys.exit(main())
