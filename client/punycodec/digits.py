"""
Shared arithmetic for the Punycode encoder and decoder.

Provides:
- The digit threshold function t(k) and bias adaptation (RFC 3492 6.1)
- Mapping between digit values and their ASCII characters
- Overflow-checked addition and multiplication against MAXINT
"""

from .constants import (
    BASE,
    DAMP,
    DIGITS,
    INITIAL_N,
    MAXINT,
    SKEW,
    TMAX,
    TMIN,
)
from .exceptions import PunycodeOverflowError


def is_basic(cp: int) -> bool:
    """Return True if the code point is basic (ASCII)."""
    return cp < INITIAL_N


def threshold(k: int, bias: int) -> int:
    """
    Compute the threshold t(k) for the digit at position k.

    Args:
        k: Multiple of BASE identifying the digit position
        bias: Current bias

    Returns:
        TMIN, TMAX or k - bias, clamped to [TMIN, TMAX]

    Example:
        >>> threshold(36, 72)
        1
        >>> threshold(108, 72)
        26
    """
    if k <= bias:
        return TMIN
    if k >= bias + TMAX:
        return TMAX
    return k - bias


def adapt(delta: int, numpoints: int, firsttime: bool) -> int:
    """
    Compute the new bias after a delta has been encoded or decoded.

    The delta is scaled down by DAMP on the first adaptation and halved
    afterwards, then divided down in steps of BASE - TMIN until it falls
    under the cap, each step raising the bias by BASE.

    Args:
        delta: The delta just processed
        numpoints: Number of code points handled so far, including this one
        firsttime: True for the first adaptation of a call

    Returns:
        The new bias
    """
    delta = delta // DAMP if firsttime else delta // 2
    delta += delta // numpoints
    k = 0
    while delta > ((BASE - TMIN) * TMAX) // 2:
        delta //= BASE - TMIN
        k += BASE
    return k + (BASE - TMIN + 1) * delta // (delta + SKEW)


def encode_digit(d: int, upper: bool = False) -> str:
    """
    Return the character for digit value d (0..BASE-1).

    Letters are lowercase unless upper is set; 0..9 have no case.
    """
    ch = DIGITS[d]
    return ch.upper() if upper else ch


def decode_digit(ch: str) -> int:
    """
    Return the digit value of a character, or BASE if it is not a digit.

    Example:
        >>> decode_digit('k'), decode_digit('K'), decode_digit('9')
        (10, 10, 35)
    """
    if '0' <= ch <= '9':
        return ord(ch) - 22
    if 'A' <= ch <= 'Z':
        return ord(ch) - ord('A')
    if 'a' <= ch <= 'z':
        return ord(ch) - ord('a')
    return BASE


def is_flagged(ch: str) -> bool:
    """Return True if the character is an uppercase ASCII letter."""
    return 'A' <= ch <= 'Z'


def encode_basic(cp: int, upper: bool) -> str:
    """
    Return basic code point cp as a character, forced to the given case.

    Only ASCII letters are affected; everything else is returned as is.
    """
    ch = chr(cp)
    if upper and 'a' <= ch <= 'z':
        return ch.upper()
    if not upper and 'A' <= ch <= 'Z':
        return ch.lower()
    return ch


def checked_add(a: int, b: int) -> int:
    """Return a + b, raising PunycodeOverflowError above MAXINT."""
    result = a + b
    if result > MAXINT:
        raise PunycodeOverflowError(f"Overflow: {a} + {b} exceeds {MAXINT:#x}")
    return result


def checked_mul(a: int, b: int) -> int:
    """Return a * b, raising PunycodeOverflowError above MAXINT."""
    result = a * b
    if result > MAXINT:
        raise PunycodeOverflowError(f"Overflow: {a} * {b} exceeds {MAXINT:#x}")
    return result
