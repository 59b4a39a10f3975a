"""
Cross-check against dnspython's IDNA 2003 codec

dnspython converts Unicode domain names to ASCII with the standard
library's IDNA 2003 implementation. For labels that nameprep leaves
untouched (lowercase, already normalized) its 'xn--' labels must carry
exactly the Punycode this package produces.
"""

from typing import Optional

import dns.exception
import dns.name

from .decoder import decode_text
from .encoder import encode_text
from .exceptions import PunycodeError

ACE_PREFIX = 'xn--'

# Lowercase, NFKC-stable labels covering several scripts
CROSS_CHECK_LABELS = [
    'bücher',
    'münchen',
    'ελληνικά',
    'испытание',
    'рф',
    '中国',
    '日本語',
    'مثال',
    'उदाहरण',
]


def dnspython_ace_label(label: str) -> str:
    """
    Convert a single Unicode label to its ASCII form with dnspython.

    Args:
        label: Unicode label without dots

    Returns:
        The ASCII label, including 'xn--' when the label is not ASCII

    Example:
        >>> dnspython_ace_label('bücher')
        'xn--bcher-kva'
    """
    name = dns.name.from_unicode(label + '.', idna_codec=dns.name.IDNA_2003)
    return name.labels[0].decode('ascii')


def dnspython_unicode_label(ace_label: str) -> str:
    """Convert an 'xn--' label back to Unicode with dnspython."""
    name = dns.name.from_text(ace_label + '.')
    return name.to_unicode(omit_final_dot=True, idna_codec=dns.name.IDNA_2003)


def cross_check_label(label: str) -> dict:
    """
    Compare encode/decode with dnspython for one label.

    Args:
        label: Unicode label containing at least one non-ASCII character

    Returns:
        Dict with both encodings, the decoded label and a 'match' verdict
    """
    detail = {
        'label': label,
        'punycode': None,
        'dnspython': None,
        'decoded': None,
        'match': False,
        'error': None
    }

    try:
        punycode = encode_text(label)
        detail['punycode'] = punycode
        detail['dnspython'] = dnspython_ace_label(label)
        detail['decoded'] = decode_text(punycode)
    except (PunycodeError, dns.exception.DNSException) as e:
        detail['error'] = str(e)
        return detail

    reference = strip_ace_prefix(detail['dnspython'])
    detail['match'] = (
        reference == punycode
        and detail['decoded'] == label
        and dnspython_unicode_label(ACE_PREFIX + punycode) == label
    )
    return detail


def strip_ace_prefix(ace_label: str) -> Optional[str]:
    """Return the Punycode part of an 'xn--' label, or None for other labels."""
    if not ace_label.lower().startswith(ACE_PREFIX):
        return None
    return ace_label[len(ACE_PREFIX):]
