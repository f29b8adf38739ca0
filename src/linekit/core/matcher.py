# src/linekit/core/matcher.py
import re
from typing import BinaryIO, List, Pattern

from linekit.core.source import read_lines

class PatternError(ValueError):
    """Raised when a grep pattern does not compile."""

def compile_pattern(pattern: str, insensitive: bool = False) -> Pattern[str]:
    flags = re.IGNORECASE if insensitive else 0
    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise PatternError(f'Invalid pattern "{pattern}"') from e

def find_lines(stream: BinaryIO, pattern: Pattern[str], invert: bool = False) -> List[str]:
    """
    Returns the lines of stream (terminators kept) for which a pattern
    match differs from invert, in input order.
    """
    return [line for line in read_lines(stream) if bool(pattern.search(line)) != invert]
