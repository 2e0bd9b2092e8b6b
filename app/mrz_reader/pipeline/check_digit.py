"""ICAO 9303 check digits.

Digits map to their value, letters A-Z to 10-35 and the filler ``<`` to 0.
Anything else (lowercase, OCR noise such as ``«``) is also read as 0 rather
than rejected; callers that need a strict alphabet validate it upstream.
"""

from __future__ import annotations

import string
from typing import Dict

MRZ_WEIGHTS = (7, 3, 1)
FILLER = "<"

MRZ_CHAR_VALUES: Dict[str, int] = {FILLER: 0}
for _idx, _char in enumerate(string.digits):
    MRZ_CHAR_VALUES[_char] = _idx
for _idx, _char in enumerate(string.ascii_uppercase):
    MRZ_CHAR_VALUES[_char] = 10 + _idx


def char_value(char: str) -> int:
    return MRZ_CHAR_VALUES.get(char, 0)


def calculate_check_digit(data: str) -> int:
    """Weighted sum of ``data`` modulo 10. The empty string yields 0."""
    total = 0
    for i, char in enumerate(data):
        total += char_value(char) * MRZ_WEIGHTS[i % len(MRZ_WEIGHTS)]
    return total % 10


def validate_check_digit(data: str, claimed: str) -> bool:
    # A filler or any other non-digit in a check position never validates.
    if len(claimed) != 1 or claimed not in string.digits:
        return False
    return calculate_check_digit(data) == int(claimed)
