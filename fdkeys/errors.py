"""
Exceptions raised by fdkeys.
"""

from typing import Optional


class FDKeysError(Exception):
    """ Base class for all fdkeys errors. """


class PreconditionError(FDKeysError, AssertionError):
    """ A caller broke the contract of a core operation (bad attribute index,
    removing an absent attribute, minimizing a non-superkey, ...).
    These are programming errors and are never handled inside the core. """


class CapacityError(FDKeysError, ValueError):
    """ The attribute count is outside the supported range. """


class ParseError(FDKeysError, ValueError):
    """ A dependency file could not be parsed. """
    def __init__(self, message: str, line: Optional[int] = None):
        self.message = message
        self.line = line
        if line is not None:
            message = 'line ' + str(line) + ': ' + message
        super().__init__(message)


class ConfigError(FDKeysError, ValueError):
    """ Invalid configuration value or file. """
