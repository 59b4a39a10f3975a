#!/usr/bin/env python3
"""
Punycode Vector Verification Script

Checks the codec against known-good output:
1. Every RFC 3492 section 7.1 sample encodes and decodes exactly
2. The RFC's mixed-case sample round-trips its case flags
3. Lowercase IDN labels match dnspython's IDNA 2003 codec
"""

import argparse
import json
import os
import sys
from pathlib import Path
from typing import List, Tuple

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from punycodec import PunycodeError, decode, encode
from punycodec.crosscheck import CROSS_CHECK_LABELS, cross_check_label
from punycodec.samples import (
    RFC3492_MIXED_CASE_RUSSIAN,
    RFC3492_MIXED_CASE_RUSSIAN_FLAGS,
    RFC3492_SAMPLES,
)


def verify_rfc_samples() -> Tuple[List[dict], int]:
    """
    Run every RFC 3492 sample through encode and decode.

    Returns:
        Tuple of (sample_details, failure_count)
    """
    details: List[dict] = []
    failures = 0

    print(f"\n{'='*60}")
    print("RFC 3492 SAMPLE STRINGS")
    print(f"{'='*60}")

    for label, codepoints, expected in RFC3492_SAMPLES:
        detail = {
            'label': label,
            'expected': expected,
            'encoded': None,
            'decoded_ok': False,
            'success': False
        }

        try:
            detail['encoded'] = encode(codepoints)
            decoded, _ = decode(expected)
            detail['decoded_ok'] = decoded == codepoints
        except PunycodeError as e:
            print(f"[!] {label}: {e}")

        detail['success'] = detail['encoded'] == expected and detail['decoded_ok']
        if detail['success']:
            print(f"[+] {label}: {expected}")
        else:
            print(f"[!] {label}: expected {expected}, got {detail['encoded']}")
            failures += 1
        details.append(detail)

    codepoints = RFC3492_SAMPLES[8][1]
    flags = RFC3492_MIXED_CASE_RUSSIAN_FLAGS
    encoded = encode(codepoints, flags)
    decoded = decode(RFC3492_MIXED_CASE_RUSSIAN, case_flags=True)
    mixed_ok = encoded == RFC3492_MIXED_CASE_RUSSIAN and decoded == (codepoints, flags)
    if mixed_ok:
        print(f"[+] (I) with case flags: {encoded}")
    else:
        print(f"[!] (I) with case flags: expected {RFC3492_MIXED_CASE_RUSSIAN}, got {encoded}")
        failures += 1
    details.append({
        'label': '(I) Russian (Cyrillic), mixed case',
        'expected': RFC3492_MIXED_CASE_RUSSIAN,
        'encoded': encoded,
        'decoded_ok': decoded == (codepoints, flags),
        'success': mixed_ok
    })

    return details, failures


def verify_dnspython(labels: List[str]) -> Tuple[List[dict], int]:
    """
    Compare each label's Punycode with dnspython's IDNA 2003 output.

    Returns:
        Tuple of (label_details, failure_count)
    """
    details: List[dict] = []
    failures = 0

    print(f"\n{'='*60}")
    print("DNSPYTHON IDNA 2003 CROSS-CHECK")
    print(f"{'='*60}")

    for label in labels:
        detail = cross_check_label(label)
        if detail['match']:
            print(f"[+] {label} -> {detail['punycode']} (dnspython: {detail['dnspython']})")
        elif detail['error']:
            print(f"[!] {label}: {detail['error']}")
            failures += 1
        else:
            print(f"[!] {label}: punycodec {detail['punycode']}, dnspython {detail['dnspython']}")
            failures += 1
        details.append(detail)

    return details, failures


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Verify the Punycode codec against RFC 3492 and dnspython'
    )
    parser.add_argument(
        '--label', '-l',
        action='append',
        dest='labels',
        help='Extra Unicode label to cross-check (repeatable)'
    )
    parser.add_argument(
        '--skip-dnspython',
        action='store_true',
        help='Only check the RFC 3492 samples'
    )
    parser.add_argument(
        '--output', '-o',
        default=os.environ.get('RESULTS_PATH'),
        help='Output file for JSON results'
    )

    args = parser.parse_args(argv)

    sample_details, sample_failures = verify_rfc_samples()

    label_details: List[dict] = []
    label_failures = 0
    if not args.skip_dnspython:
        labels = CROSS_CHECK_LABELS + (args.labels or [])
        label_details, label_failures = verify_dnspython(labels)

    failures = sample_failures + label_failures

    print(f"\n{'='*60}")
    print("VERIFICATION RESULTS")
    print(f"{'='*60}")
    print(f"RFC samples checked:   {len(sample_details)}")
    print(f"RFC sample failures:   {sample_failures}")
    print(f"Labels cross-checked:  {len(label_details)}")
    print(f"Cross-check failures:  {label_failures}")

    if failures == 0:
        print("\n✓ SUCCESS: all vectors match")
        verdict = "SUCCESS"
    else:
        print(f"\n✗ FAILED: {failures} mismatches")
        verdict = "FAILED"

    if args.output:
        results = {
            'phase': 'verify',
            'samples': sample_details,
            'labels': label_details,
            'failures': failures,
            'verdict': verdict
        }
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps(results, indent=2, ensure_ascii=False))
        print(f"\n[+] Results saved to: {args.output}")

    return 0 if failures == 0 else 1


if __name__ == '__main__':
    sys.exit(main())
