#!/usr/bin/env python3
"""
Punycode Conversion Script

Encodes Unicode labels to Punycode, or decodes Punycode labels back to
Unicode, one word per argument.

This script:
1. Converts each word with the punycodec library
2. Prints the result (or the error) per word
3. Optionally records all results as JSON
4. Exits non-zero if any word could not be converted
"""

import argparse
import json
import os
import sys
from pathlib import Path
from typing import List, Optional

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from punycodec import PunycodeError, decode, encode


def convert_word(word: str, mode: str, case_flags: bool = False) -> dict:
    """
    Convert a single word and describe the outcome.

    Args:
        word: Unicode label (encode) or Punycode label (decode)
        mode: 'encode' or 'decode'
        case_flags: Carry uppercase information through the conversion

    Returns:
        Dict with the input, output, code points and any error message
    """
    detail = {
        'input': word,
        'mode': mode,
        'success': False,
        'output': None,
        'codepoints': None,
        'error': None
    }

    try:
        if mode == 'encode':
            codepoints = [ord(ch) for ch in word]
            flags = [ch.isupper() for ch in word] if case_flags else None
            detail['output'] = encode(codepoints, flags)
        else:
            codepoints, flags = decode(word, case_flags=case_flags)
            text = ''.join(chr(cp) for cp in codepoints)
            if flags is not None:
                text = ''.join(
                    ch.upper() if flag else ch.lower()
                    for ch, flag in zip(text, flags)
                )
            detail['output'] = text
        detail['codepoints'] = [f"U+{cp:04X}" for cp in codepoints]
        detail['success'] = True
    except (PunycodeError, ValueError) as e:
        detail['error'] = str(e)

    return detail


def convert_words(words: List[str], mode: str, case_flags: bool = False) -> List[dict]:
    """Convert every word, printing one line per result."""
    results = []

    for word in words:
        detail = convert_word(word, mode, case_flags)
        if detail['success']:
            print(f"[+] {word} -> {detail['output']}")
        else:
            print(f"[!] {word}: {detail['error']}")
        results.append(detail)

    return results


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description='Convert labels between Unicode and Punycode'
    )
    parser.add_argument(
        'words',
        nargs='+',
        help='Labels to convert'
    )
    parser.add_argument(
        '--decode', '-d',
        action='store_const',
        const='decode',
        dest='mode',
        default=os.environ.get('PUNYCODE_MODE', 'encode'),
        help='Decode Punycode instead of encoding'
    )
    parser.add_argument(
        '--case-flags', '-c',
        action='store_true',
        help='Preserve letter case through the conversion'
    )
    parser.add_argument(
        '--output', '-o',
        default=os.environ.get('RESULTS_PATH'),
        help='Output file for JSON results'
    )

    args = parser.parse_args(argv)

    if args.mode not in ('encode', 'decode'):
        parser.error(f"invalid mode {args.mode!r} (PUNYCODE_MODE must be 'encode' or 'decode')")

    results = convert_words(args.words, args.mode, args.case_flags)
    failures = sum(1 for r in results if not r['success'])

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps({
            'mode': args.mode,
            'case_flags': args.case_flags,
            'failures': failures,
            'results': results
        }, indent=2, ensure_ascii=False))
        print(f"\n[+] Results saved to: {args.output}")

    return 0 if failures == 0 else 1


if __name__ == '__main__':
    sys.exit(main())
