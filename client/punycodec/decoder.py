"""
Punycode Decoder

Decodes a Punycode string back into the sequence of Unicode code points
it was produced from (RFC 3492 section 6.2).
"""

import sys
from typing import List, Optional, Tuple

from .constants import BASE, DELIMITER, INITIAL_BIAS, INITIAL_N
from .digits import (
    adapt,
    checked_add,
    checked_mul,
    decode_digit,
    is_basic,
    is_flagged,
    threshold,
)
from .exceptions import BadInput


def decode(
    encoded: str,
    case_flags: bool = False
) -> Tuple[List[int], Optional[List[bool]]]:
    """
    Decode a Punycode string into code points.

    The last delimiter separates the basic code points from the digit
    suffix. Digits are case-insensitive; when case flags are requested,
    a basic character is flagged if it is an uppercase letter and an
    extended code point is flagged if the last digit of its group is.

    Args:
        encoded: Punycode string (without any 'xn--' prefix)
        case_flags: If True, also return an uppercase flag per code point

    Returns:
        Tuple of (code points, flags), flags being None unless requested

    Raises:
        BadInput: Non-ASCII input, invalid digit or truncated digit group
        PunycodeOverflowError: A digit group does not fit in 32 bits

    Example:
        >>> decode('bcher-kva')[0] == [ord(c) for c in 'bücher']
        True
    """
    for pos, ch in enumerate(encoded):
        if not is_basic(ord(ch)):
            raise BadInput(f"Non-ASCII character {ch!r} at position {pos}")

    n = INITIAL_N
    i = 0
    bias = INITIAL_BIAS

    output: List[int] = []
    flags: Optional[List[bool]] = [] if case_flags else None

    # A delimiter at position 0 is not a separator: the whole string is digits
    b = max(encoded.rfind(DELIMITER), 0)
    for ch in encoded[:b]:
        output.append(ord(ch))
        if flags is not None:
            flags.append(is_flagged(ch))

    pos = b + 1 if b > 0 else 0
    while pos < len(encoded):
        oldi = i
        w = 1
        k = BASE
        while True:
            if pos >= len(encoded):
                raise BadInput(f"Truncated digit group in {encoded!r}")
            ch = encoded[pos]
            pos += 1
            digit = decode_digit(ch)
            if digit >= BASE:
                raise BadInput(f"Invalid digit {ch!r} at position {pos - 1}")
            i = checked_add(i, checked_mul(digit, w))
            t = threshold(k, bias)
            if digit < t:
                break
            w = checked_mul(w, BASE - t)
            k += BASE

        out = len(output) + 1
        bias = adapt(i - oldi, out, oldi == 0)
        n = checked_add(n, i // out)
        i %= out

        output.insert(i, n)
        if flags is not None:
            flags.insert(i, is_flagged(ch))
        i += 1

    return output, flags


def decode_text(encoded: str) -> str:
    """
    Decode a Punycode string into a Python string.

    Example:
        >>> decode_text('mnchen-3ya')
        'münchen'
    """
    codepoints, _ = decode(encoded)
    for cp in codepoints:
        if cp > sys.maxunicode:
            raise BadInput(f"Decoded value {cp:#x} is not a Unicode code point")
    return ''.join(chr(cp) for cp in codepoints)
