"""
Resource quantity parsing.

Converts the human readable memory and CPU strings of a function request
into the integer units used by the Docker Engine API.

Example:
    >>> parse_memory_size("40m")
    41943040
    >>> parse_cpu_quantity("500000000")
    500000000
"""

import math
import re
from fnswarm.exceptions import InvalidQuantity


MEMORY_UNITS = {
    '': 1,
    'k': 1024,
    'm': 1024**2,
    'g': 1024**3,
    't': 1024**4,
    'p': 1024**5,
}

INT64_MIN = -2**63
INT64_MAX = 2**63 - 1

_memory_pattern = re.compile(r'(\d+(?:\.\d+)*) ?([kmgtp])?i?b?', re.IGNORECASE | re.ASCII)
_cpu_pattern = re.compile(r'[+-]?\d+', re.ASCII)


def parse_memory_size(text: str) -> int:
    """
    Parse a human readable memory size into bytes.

    Suffixes k, m, g, t and p are binary multiples (1k = 1024 bytes) and may be followed
    by `i` and/or `b` in any case ("1g", "1Gi", "1GB" and "1gib" are all 1073741824).
    A single space is allowed between the number and the unit.

    Args:
        text (str): Memory size, e.g. '40m' or '1.5g'.

    Returns:
        int: Size in bytes, fractional bytes are truncated.

    Raises:
        InvalidQuantity: If `text` is not a valid memory size or does not fit in 64 bits.
    """
    match = _memory_pattern.fullmatch(text)
    if match is None:
        raise InvalidQuantity(f"invalid size: '{text}'")

    try:
        size = float(match.group(1))
    except ValueError:
        # e.g. '1.2.3' is accepted by the pattern but is no number
        raise InvalidQuantity(f"invalid size: '{text}'")
    if not math.isfinite(size):
        raise InvalidQuantity(f"size out of range: '{text}'")

    unit = (match.group(2) or '').lower()
    try:
        value = int(size * MEMORY_UNITS[unit])
    except OverflowError:
        raise InvalidQuantity(f"size out of range: '{text}'")
    if value < INT64_MIN or value > INT64_MAX:
        raise InvalidQuantity(f"size out of range: '{text}'")
    return value


def parse_cpu_quantity(text: str) -> int:
    """
    Parse a CPU quantity given as a base-10 integer of nano CPUs.

    Args:
        text (str): Number of nano CPUs, e.g. '500000000' for half a CPU.

    Returns:
        int: Nano CPUs.

    Raises:
        InvalidQuantity: If `text` is not an integer or does not fit in 64 bits.
    """
    if not _cpu_pattern.fullmatch(text):
        raise InvalidQuantity(f"invalid cpu quantity: '{text}'")

    value = int(text)
    if value < INT64_MIN or value > INT64_MAX:
        raise InvalidQuantity(f"cpu quantity out of range: '{text}'")
    return value
