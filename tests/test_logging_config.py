import logging

from logging_config import DigitMaskingFormatter, configure_logging, mask_digits


def test_masks_long_digit_runs():
    assert mask_digits("number 894625975073 ok") == "number XXXXXXXX5073 ok"


def test_masks_spaced_aadhaar():
    assert mask_digits("got 8946 2597 5073") == "got XXXX XXXX 5073"


def test_short_numbers_untouched():
    assert mask_digits("check digit 3 for 2363") == "check digit 3 for 2363"


def test_formatter_masks_message():
    formatter = DigitMaskingFormatter("%(message)s")
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "Validated %s", ("123456789012",), None)
    assert formatter.format(record) == "Validated XXXXXXXX9012"


def test_configure_logging_adds_one_handler():
    logger = configure_logging(logging.DEBUG, name="verhoeff-test")
    configure_logging(logging.DEBUG, name="verhoeff-test")
    masking = [h for h in logger.handlers if isinstance(h.formatter, DigitMaskingFormatter)]
    assert len(masking) == 1
    assert logger.level == logging.DEBUG


def test_masks_hyphenated_number():
    assert mask_digits("for 8946-2597-5073") == "for XXXX-XXXX-5073"


def test_masks_sixteen_digit_spaced_number():
    assert mask_digits("1234 5678 9012 3456") == "XXXX XXXX XXXX 3456"


def test_formatter_masks_hyphenated_generation_log():
    formatter = DigitMaskingFormatter("%(levelname)s %(message)s")
    record = logging.LogRecord("validator", logging.DEBUG, __file__, 1,
                               "Generated check digit %d for %s", (6, "8946-2597-5073"), None)
    assert formatter.format(record) == "DEBUG Generated check digit 6 for XXXX-XXXX-5073"
    # The original record is left alone for other handlers
    assert record.getMessage() == "Generated check digit 6 for 8946-2597-5073"


def test_timestamps_are_not_masked():
    formatter = DigitMaskingFormatter("%(asctime)s|%(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "ready", None, None)
    stamp, message = formatter.format(record).split("|")
    assert "X" not in stamp
    assert message == "ready"
