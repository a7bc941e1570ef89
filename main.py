import argparse
import json
import sys
import logging

from config import SAMPLE_NUMBER, AADHAAR_BODY_LENGTH
from errors import TableConstructionError
from formatting import format_elements, format_tables
from group import DihedralGroup
from logging_config import configure_logging
from reference import verify_tables
from tables import build_tables
from validator import Validator, digit_string

logger = logging.getLogger(__name__)


def read_number(stream=None):
    """Reads one line, falling back to the sample number when it is empty."""
    stream = stream or sys.stdin
    sys.stderr.write("Enter a number (empty for sample): ")
    sys.stderr.flush()
    line = stream.readline().strip()
    if not line:
        logger.info(f"No input given, using sample {SAMPLE_NUMBER}")
        return SAMPLE_NUMBER
    return line


def main(argv=None):
    parser = argparse.ArgumentParser(description="Verhoeff check digits from the dihedral group D5")
    parser.add_argument("--number", help="Number to validate and extend (read from stdin if omitted)")
    parser.add_argument("--show-tables", action="store_true", help="Print group elements and derived tables")
    parser.add_argument("--self-test", action="store_true", help="Exit non-zero if tables differ from the canonical ones")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.debug else logging.INFO)

    # 1. Derive tables
    try:
        group = DihedralGroup()
        tables = build_tables(group)
    except TableConstructionError as e:
        logger.error(f"Table construction failed: {e}")
        return 2

    if args.show_tables:
        print(format_elements(group), file=sys.stderr)
        print(format_tables(tables), file=sys.stderr)

    # 2. Self-check against the published tables
    tables_match = verify_tables(tables)

    # 3. Checksum
    number = args.number if args.number is not None else read_number()
    validator = Validator(tables)
    digits = digit_string(number)

    result = {
        "input": number,
        "digits": digits,
        "checksum_valid": validator.validate_verhoeff(number),
        "check_digit": validator.generate_verhoeff_checksum(number),
        "with_check_digit": validator.append_check_digit(number),
        "needs_one_digit": len(digits) == AADHAAR_BODY_LENGTH,
        "tables_match_reference": tables_match,
    }

    print(json.dumps(result, indent=2))

    if args.self_test and not tables_match:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
