"""
Logging setup for fdkeys.
"""

import logging
import sys

FORMATS = {
    'simple': '%(levelname)s | %(name)s | %(message)s',
    'detailed': '%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | %(message)s',
}


def setup_logging(level: str = 'WARNING', format_type: str = 'simple') -> None:
    """ Send records of the fdkeys loggers at level or above to stderr,
    so that results printed on stdout stay clean.
    format_type is 'simple' or 'detailed'. """
    log_level = getattr(logging, level.upper(), logging.WARNING)
    formatter = logging.Formatter(
        fmt=FORMATS.get(format_type, FORMATS['simple']),
        datefmt='%Y-%m-%d %H:%M:%S',
    )

    package_logger = logging.getLogger('fdkeys')
    package_logger.setLevel(log_level)
    package_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)


def get_logger(name: str) -> logging.Logger:
    """ Get a logger instance, typically get_logger(__name__). """
    return logging.getLogger(name)
