"""
Tests comparing the codec with dnspython's IDNA 2003 codec.
"""

import pytest
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from punycodec.crosscheck import (
    CROSS_CHECK_LABELS,
    cross_check_label,
    dnspython_ace_label,
    dnspython_unicode_label,
    strip_ace_prefix,
)


class TestDnspythonHelpers:
    """Tests for the dnspython wrappers."""

    def test_ace_label(self):
        """dnspython produces the xn-- label for bücher."""
        assert dnspython_ace_label('bücher') == 'xn--bcher-kva'

    def test_ascii_label_untouched(self):
        """ASCII labels are not punycoded by IDNA."""
        assert dnspython_ace_label('example') == 'example'

    def test_unicode_label(self):
        """dnspython decodes the xn-- label back."""
        assert dnspython_unicode_label('xn--mnchen-3ya') == 'münchen'

    def test_strip_ace_prefix(self):
        """Only xn-- labels have a Punycode part."""
        assert strip_ace_prefix('xn--bcher-kva') == 'bcher-kva'
        assert strip_ace_prefix('XN--bcher-kva') == 'bcher-kva'
        assert strip_ace_prefix('example') is None


class TestCrossCheck:
    """Tests for cross_check_label."""

    @pytest.mark.parametrize('label', CROSS_CHECK_LABELS)
    def test_matches_dnspython(self, label):
        """Our encoding agrees with dnspython's for each label."""
        detail = cross_check_label(label)
        assert detail['error'] is None
        assert detail['match'], detail

    def test_detail_fields(self):
        """The detail dict records both encodings."""
        detail = cross_check_label('bücher')
        assert detail['punycode'] == 'bcher-kva'
        assert detail['dnspython'] == 'xn--bcher-kva'
        assert detail['decoded'] == 'bücher'
