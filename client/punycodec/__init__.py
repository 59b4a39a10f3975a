"""
Punycode Codec

This library provides tools for:
- Encoding Unicode code points into ASCII-only Punycode (RFC 3492)
- Decoding Punycode back into code points, optionally with case flags
- Convenience wrappers working directly on Python strings

Each call handles one domain label; 'xn--' prefixes, normalization and
label validation belong to the calling IDNA layer.
"""

from .encoder import encode, encode_text
from .decoder import decode, decode_text
from .exceptions import PunycodeError, BadInput, PunycodeOverflowError

__all__ = [
    # Encoder
    'encode',
    'encode_text',
    # Decoder
    'decode',
    'decode_text',
    # Errors
    'PunycodeError',
    'BadInput',
    'PunycodeOverflowError',
]

__version__ = '1.0.0'
