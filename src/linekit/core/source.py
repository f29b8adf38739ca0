# src/linekit/core/source.py
import sys
from contextlib import contextmanager
from typing import BinaryIO, Iterator, Optional

from linekit.config import STDIN_MARKER, TEXT_ENCODING

@contextmanager
def open_source(name: str) -> Iterator[BinaryIO]:
    """
    Opens a source for buffered binary reading.
    '-' means standard input, which is left open on exit; named files are closed.
    """
    if name == STDIN_MARKER:
        yield sys.stdin.buffer
        return

    with open(name, "rb") as f:
        yield f

@contextmanager
def open_sink(name: Optional[str] = None) -> Iterator[BinaryIO]:
    """Opens the binary output destination: a created file, or stdout when no name is given."""
    if name is None:
        sys.stdout.flush()
        yield sys.stdout.buffer
        # write errors such as a closed pipe surface here
        sys.stdout.buffer.flush()
        return

    with open(name, "wb") as f:
        yield f

def iter_raw_lines(stream: BinaryIO, name: Optional[str] = None) -> Iterator[bytes]:
    """
    Yields raw lines, terminator included, until the stream is exhausted.
    A read error that carries no filename is tagged with name.
    """
    while True:
        try:
            line = stream.readline()
        except OSError as e:
            if e.filename is None:
                e.filename = name
            raise
        if not line:
            break
        yield line

def decode_line(raw: bytes) -> str:
    return raw.decode(TEXT_ENCODING, errors="replace")

def read_lines(stream: BinaryIO) -> Iterator[str]:
    for raw in iter_raw_lines(stream):
        yield decode_line(raw)
