"""
Punycode Encoder

Encodes a sequence of Unicode code points into the ASCII-only Punycode
form used for IDNA labels (RFC 3492 section 6.3).

Basic (ASCII) code points are copied to the output first, followed by a
delimiter and a suffix of base-36 digits describing where each extended
code point is inserted.
"""

from typing import List, Optional, Sequence

from .constants import BASE, DELIMITER, INITIAL_BIAS, INITIAL_N, MAXINT
from .digits import (
    adapt,
    checked_add,
    checked_mul,
    encode_basic,
    encode_digit,
    is_basic,
    threshold,
)
from .exceptions import BadInput, PunycodeOverflowError


def encode(
    codepoints: Sequence[int],
    case_flags: Optional[Sequence[bool]] = None
) -> str:
    """
    Encode a sequence of code points as a Punycode string.

    Without case flags basic code points are copied verbatim and the
    digits are lowercase. With case flags, each basic letter is forced to
    the case its flag asks for and the last digit of each extended code
    point is uppercased when its flag is set, so that decode() can
    recover the flags. Flags only survive on letters and extended code
    points: a flag on a non-letter basic code point is dropped, and a
    true flag turns a lowercase basic letter into its uppercase code point.

    Args:
        codepoints: Code points to encode
        case_flags: Optional uppercase flag per code point

    Returns:
        ASCII string (without any 'xn--' prefix)

    Raises:
        ValueError: case_flags length does not match codepoints
        BadInput: A code point is negative
        PunycodeOverflowError: The input cannot be encoded in 32 bits

    Example:
        >>> encode([ord(c) for c in 'bücher'])
        'bcher-kva'
    """
    # The main loop rescans the input for every extended code point
    cps: List[int] = list(codepoints)
    flags: Optional[List[bool]] = list(case_flags) if case_flags is not None else None

    if flags is not None and len(flags) != len(cps):
        raise ValueError(
            f"case_flags has {len(flags)} entries for {len(cps)} code points"
        )
    for cp in cps:
        if cp < 0:
            raise BadInput(f"Negative code point: {cp}")
        if cp > MAXINT:
            raise PunycodeOverflowError(f"Code point {cp:#x} exceeds {MAXINT:#x}")

    output: List[str] = []
    for j, cp in enumerate(cps):
        if is_basic(cp):
            output.append(encode_basic(cp, flags[j]) if flags is not None else chr(cp))

    # h is the number of code points handled, b the number of basic ones
    h = b = len(output)
    if b > 0:
        output.append(DELIMITER)

    n = INITIAL_N
    delta = 0
    bias = INITIAL_BIAS

    while h < len(cps):
        m = min(cp for cp in cps if cp >= n)
        delta = checked_add(delta, checked_mul(m - n, h + 1))
        n = m

        for j, cp in enumerate(cps):
            if cp < n:
                delta = checked_add(delta, 1)
            elif cp == n:
                q = delta
                k = BASE
                while True:
                    t = threshold(k, bias)
                    if q < t:
                        break
                    output.append(encode_digit(t + (q - t) % (BASE - t)))
                    q = (q - t) // (BASE - t)
                    k += BASE
                output.append(encode_digit(q, flags is not None and flags[j]))
                bias = adapt(delta, h + 1, h == b)
                delta = 0
                h += 1

        delta += 1
        n += 1

    return ''.join(output)


def encode_text(text: str) -> str:
    """
    Encode a Python string as Punycode.

    Args:
        text: Unicode text, typically a single domain label

    Returns:
        Punycode string

    Example:
        >>> encode_text('münchen')
        'mnchen-3ya'
    """
    return encode([ord(ch) for ch in text])
