"""
Unit tests for the decoder module.

Tests Punycode decoding, delimiter handling, case flags and rejection
of malformed input.
"""

import pytest
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from punycodec.decoder import decode, decode_text
from punycodec.encoder import encode
from punycodec.exceptions import BadInput, PunycodeError, PunycodeOverflowError
from punycodec.samples import (
    RFC3492_MIXED_CASE_RUSSIAN,
    RFC3492_MIXED_CASE_RUSSIAN_FLAGS,
    RFC3492_SAMPLES,
)


def codepoints(text):
    return [ord(ch) for ch in text]


class TestDecode:
    """Tests for decode function."""

    def test_known_vector(self):
        """bcher-kva decodes to bücher."""
        assert decode('bcher-kva') == (codepoints('bücher'), None)

    def test_empty_input(self):
        """Empty input decodes to nothing."""
        assert decode('') == ([], None)

    def test_basic_only(self):
        """A trailing delimiter leaves a basic-only string with no digits."""
        assert decode('abc-') == (codepoints('abc'), None)

    def test_no_delimiter_is_all_digits(self):
        """Without a delimiter every character is a digit."""
        result, _ = decode('fiqs8s')
        assert result == codepoints('中国')

    def test_no_delimiter_never_yields_basic(self):
        """Digits only ever insert extended code points."""
        result, _ = decode('abc')
        assert len(result) == 3
        assert all(cp >= 0x80 for cp in result)

    def test_last_delimiter_is_authoritative(self):
        """Hyphens before the last one belong to the basic part."""
        result, _ = decode('Hello-Another-Way--fc4qua05auwb3674vfr0b')
        assert result[:18] == codepoints('Hello-Another-Way-')

    def test_output_length(self):
        """Output is the basic prefix plus one code point per digit group."""
        encoded = '-with-SUPER-MONKEYS-pc58ag80a8qai00g7n9n'
        result, _ = decode(encoded)
        prefix = encoded[:encoded.rfind('-')]
        assert len(result) == len(prefix) + 5

    def test_digits_are_case_insensitive(self):
        """Uppercase digits decode to the same code points."""
        assert decode('bcher-KVA')[0] == codepoints('bücher')

    def test_basic_case_is_preserved(self):
        """Basic characters are copied verbatim."""
        assert decode('BCHER-KVA')[0] == codepoints('BüCHER')

    @pytest.mark.parametrize('label,cps,encoded', RFC3492_SAMPLES)
    def test_rfc3492_samples(self, label, cps, encoded):
        """Every RFC 3492 sample string decodes exactly."""
        assert decode(encoded)[0] == cps


class TestDecodeCaseFlags:
    """Tests for decode with case flags."""

    def test_flags_for_basic(self):
        """Uppercase basic letters are flagged."""
        result, flags = decode('Bcher-kva', case_flags=True)
        assert result == codepoints('Bücher')
        assert flags == [True, False, False, False, False, False]

    def test_flags_for_extended(self):
        """The last digit's case flags the inserted code point."""
        result, flags = decode('bcher-kvA', case_flags=True)
        assert result == codepoints('bücher')
        assert flags == [False, True, False, False, False, False]

    def test_flags_length_matches_output(self):
        """One flag per decoded code point."""
        result, flags = decode('Hello-Another-Way--fc4qua05auwb3674vfr0b', case_flags=True)
        assert len(flags) == len(result)

    def test_rfc3492_mixed_case_sample(self):
        """The RFC's mixed-case annotation of sample (I) is recovered."""
        result, flags = decode(RFC3492_MIXED_CASE_RUSSIAN, case_flags=True)
        assert result == RFC3492_SAMPLES[8][1]
        assert flags == RFC3492_MIXED_CASE_RUSSIAN_FLAGS

    def test_flags_round_trip(self):
        """Flags given to encode come back from decode."""
        cps = codepoints('ÜberGrößE')
        flags = [True, False, False, False, True, False, False, False, True]
        assert decode(encode(cps, flags), case_flags=True) == (cps, flags)

    def test_flag_on_non_letter_is_dropped(self):
        """Basic characters without case cannot carry a flag."""
        assert encode([42], [True]) == '*-'
        assert decode('*-', case_flags=True) == ([42], [False])

    def test_flag_on_lowercase_letter_changes_code_point(self):
        """A flagged lowercase letter comes back as its uppercase form."""
        assert encode([ord('a')], [True]) == 'A-'
        assert decode('A-', case_flags=True) == ([ord('A')], [True])


class TestDecodeErrors:
    """Tests for decode failure modes."""

    def test_non_ascii_input(self):
        """Any non-ASCII character is rejected."""
        with pytest.raises(BadInput):
            decode('bücher')

    def test_non_ascii_in_suffix(self):
        """Non-ASCII after the delimiter is rejected too."""
        with pytest.raises(BadInput):
            decode('bcher-kvä')

    def test_invalid_digit(self):
        """Characters outside a-z, A-Z, 0-9 are not digits."""
        with pytest.raises(BadInput):
            decode('bcher-k!a')

    def test_leading_delimiter_only(self):
        """A delimiter at position 0 is read as a digit and rejected."""
        with pytest.raises(BadInput):
            decode('-kva')

    def test_truncated_group(self):
        """Input ending in the middle of a digit group is rejected."""
        with pytest.raises(BadInput):
            decode('bcher-kv')

    def test_overflow(self):
        """A digit group wider than 32 bits aborts the call."""
        with pytest.raises(PunycodeOverflowError):
            decode('9' * 11)

    def test_overflow_is_deterministic(self):
        """The same input fails the same way every time."""
        for _ in range(5):
            with pytest.raises(OverflowError):
                decode('a-' + '9' * 11)

    def test_code_point_overflow(self):
        """A group pushing n past 32 bits aborts the call."""
        with pytest.raises(PunycodeOverflowError, match="128 \\+ 4294967285"):
            decode('9z902716a')

    def test_bad_input_is_value_error(self):
        """BadInput can be caught as ValueError or PunycodeError."""
        with pytest.raises(ValueError):
            decode('é')
        with pytest.raises(PunycodeError):
            decode('é')


class TestDecodeText:
    """Tests for decode_text convenience function."""

    def test_decode_text(self):
        """Decode to a Python string."""
        assert decode_text('mnchen-3ya') == 'münchen'

    def test_decode_text_empty(self):
        """Empty input gives an empty string."""
        assert decode_text('') == ''

    def test_beyond_unicode(self):
        """Values beyond the Unicode range cannot become a str."""
        with pytest.raises(BadInput):
            decode_text(encode([0x110000]))


class TestRoundTrip:
    """Tests for encode/decode round trip."""

    @pytest.mark.parametrize('text', [
        'bücher',
        'abc',
        'a-b',
        '-',
        'ελληνικά',
        'Hello-Wörld-',
        '\U0001F600\U0001F601',
        '日本語abc',
    ])
    def test_roundtrip(self, text):
        """Encoded text decodes back to the same code points."""
        cps = codepoints(text)
        assert decode(encode(cps))[0] == cps
