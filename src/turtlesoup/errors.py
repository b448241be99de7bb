"""Errors raised by turtle primitives, generators and the exporter."""


class TurtleError(Exception):
    pass


class InvalidInputError(TurtleError, ValueError):
    """Non-finite number, count below 1, or otherwise unusable argument."""


class DivisionByZeroError(InvalidInputError, ZeroDivisionError):
    """A zero count would have been used as a divisor."""


class ExportError(TurtleError, OSError):
    """The rendered document could not be written."""
