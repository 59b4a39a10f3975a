"""
Exception types raised by the Punycode codec.

Both operations are one-shot transforms: any of these errors aborts the
call and no partial result is returned. Callers doing IDNA processing
should treat either error as a malformed label.
"""


class PunycodeError(Exception):
    """Base exception for Punycode encoding and decoding errors."""


class BadInput(PunycodeError, ValueError):
    """Input is not a valid Punycode string or code point sequence."""


class PunycodeOverflowError(PunycodeError, OverflowError):
    """An accumulator would exceed the 32-bit unsigned range."""
