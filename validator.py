import logging
from tables import get_tables

logger = logging.getLogger(__name__)

ASCII_DIGITS = "0123456789"


def extract_digits(text):
    """ASCII digits of text, in order. Everything else is dropped."""
    return [ord(ch) - ord("0") for ch in text if ch in ASCII_DIGITS]


def digit_string(text):
    return "".join(str(d) for d in extract_digits(text))


def _accumulate(digits, d, p, start):
    c = 0
    for pos, digit in enumerate(reversed(digits), start):
        c = d[c][p[pos % len(p)][digit]]
    return c


def validate(text, d, p):
    """
    Verhoeff check: process digits right to left, rightmost at position 0.
    Valid when the accumulator returns to the identity.
    """
    return _accumulate(extract_digits(text), d, p, 0) == 0


def generate_check_digit(text, d, p, inv):
    """
    Check digit for text. Positions start at 1 because the appended
    digit will occupy position 0.
    """
    return inv[_accumulate(extract_digits(text), d, p, 1)]


class Validator:
    def __init__(self, tables=None):
        # Derived tables, shared read-only
        self.tables = tables if tables is not None else get_tables()

    def validate_verhoeff(self, number_str):
        """
        Validates the Verhoeff checksum of a number string.
        Non-digit characters (spaces, hyphens) are ignored.
        """
        return validate(number_str, self.tables.d, self.tables.p)

    def generate_verhoeff_checksum(self, number_str):
        """
        Generates the Verhoeff check digit for number_str.
        """
        check = generate_check_digit(number_str, self.tables.d, self.tables.p, self.tables.inv)
        logger.debug(f"Generated check digit {check} for {digit_string(number_str)}")
        return check

    def append_check_digit(self, number_str):
        """Digits of number_str followed by their check digit."""
        digits = digit_string(number_str)
        return digits + str(self.generate_verhoeff_checksum(digits))
