import re
import logging
from config import LOG_FORMAT, MASK_MIN_DIGITS, MASK_KEEP_DIGITS

# Digit runs, allowing one space or hyphen between digits
NUMBER_RUN = re.compile(r'\d(?:[ \t-]?\d){%d,}' % (MASK_MIN_DIGITS - 1))


def _mask_run(match):
    run = match.group()
    to_mask = sum(ch.isdigit() for ch in run) - MASK_KEEP_DIGITS
    masked = []
    for ch in run:
        if ch.isdigit() and to_mask > 0:
            masked.append('X')
            to_mask -= 1
        else:
            masked.append(ch)
    return ''.join(masked)


def mask_digits(text):
    """Masks numbers in text, keeping only their last few digits and separators."""
    return NUMBER_RUN.sub(_mask_run, text)


# Numbers being checked may be identity numbers, so they never reach the log in full
class DigitMaskingFormatter(logging.Formatter):
    def format(self, record):
        # Mask the message only, so timestamps stay readable
        masked = logging.makeLogRecord(record.__dict__)
        masked.msg = mask_digits(record.getMessage())
        masked.args = None
        return super().format(masked)


def configure_logging(level=logging.INFO, name=None):
    """
    Attaches a masking stream handler to the named logger (root by default).
    Safe to call more than once.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if not any(isinstance(h.formatter, DigitMaskingFormatter) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(DigitMaskingFormatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
