"""
Bootstring parameters for Punycode (RFC 3492 section 5).
"""

BASE = 36
TMIN = 1
TMAX = 26
SKEW = 38
DAMP = 700
INITIAL_BIAS = 72
INITIAL_N = 0x80

DELIMITER = '-'

# Width of the RFC's punycode_uint accumulator
MAXINT = 0xFFFFFFFF

# Digit values 0..25 map to a..z, 26..35 map to 0..9
DIGITS = 'abcdefghijklmnopqrstuvwxyz0123456789'
