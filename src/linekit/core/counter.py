# src/linekit/core/counter.py
import re
from typing import BinaryIO, Sequence, Tuple

from linekit.config import DEFAULT_FIELDS, FIELD_ORDER, FIELD_WIDTH, STDIN_MARKER, TEXT_ENCODING
from linekit.core.source import decode_line, iter_raw_lines
from linekit.models import FileInfo

# Runs of anything but Unicode White_Space. str.split() would also break on
# the \x1c-\x1f separator controls, which are not White_Space.
WORD_PATTERN = re.compile(r"(?:\S|[\x1c-\x1f])+")

def count_words(line: str) -> int:
    return len(WORD_PATTERN.findall(line))

def count_chars(raw: bytes) -> int:
    """Characters in the valid UTF-8 of a raw line; undecodable bytes are not characters."""
    return len(raw.decode(TEXT_ENCODING, errors="ignore"))

def count(stream: BinaryIO) -> FileInfo:
    """
    Counts lines, whitespace-separated words, bytes and characters in one pass.
    Bytes are measured on the raw line, characters on its valid UTF-8 text.
    """
    num_lines = num_words = num_bytes = num_chars = 0

    for raw in iter_raw_lines(stream):
        num_lines += 1
        num_bytes += len(raw)
        num_words += count_words(decode_line(raw))
        num_chars += count_chars(raw)

    return FileInfo(num_lines, num_words, num_bytes, num_chars)

def resolve_fields(lines: bool = False, words: bool = False, bytes_: bool = False, chars: bool = False) -> Tuple[str, ...]:
    """Returns the requested fields in display order, or the default set if none were requested."""
    requested = {"lines": lines, "words": words, "bytes": bytes_, "chars": chars}
    if not any(requested.values()):
        return DEFAULT_FIELDS
    return tuple(name for name in FIELD_ORDER if requested[name])

def format_counts(info: FileInfo, fields: Sequence[str], label: str = STDIN_MARKER) -> str:
    columns = "".join(f"{info.field(name):>{FIELD_WIDTH}}" for name in FIELD_ORDER if name in fields)
    if label == STDIN_MARKER:
        return columns
    return f"{columns} {label}"
