# src/linekit/core/dedupe.py
from typing import BinaryIO, Iterable, Optional, Tuple

from linekit.config import RUN_COUNT_WIDTH

Run = Tuple[int, bytes]

def trimmed(line: bytes) -> bytes:
    return line.rstrip(b"\r\n")

class RunTracker:
    """
    Tracks the current run of consecutive duplicate lines.

    Lines are raw bytes so undecodable input is compared and written back
    untouched. feed() returns the run it just closed, if any; flush() returns
    the run still open at end of input. The emitted text is the first line
    of the run, terminator and all.
    """

    def __init__(self):
        self.text: Optional[bytes] = None
        self.count = 0

    def feed(self, line: bytes) -> Optional[Run]:
        if self.text is not None and trimmed(line) == trimmed(self.text):
            self.count += 1
            return None

        finished = self.flush()
        self.text = line
        self.count = 1
        return finished

    def flush(self) -> Optional[Run]:
        if self.text is None or self.count == 0:
            return None
        finished = (self.count, self.text)
        self.text = None
        self.count = 0
        return finished

def format_run(count: int, text: bytes, show_count: bool = False) -> bytes:
    if show_count:
        return f"{count:>{RUN_COUNT_WIDTH}} ".encode("ascii") + text
    return text

def collapse_runs(lines: Iterable[bytes], out: BinaryIO, show_count: bool = False) -> None:
    """Writes one line per run of duplicates to out, optionally with its count."""
    tracker = RunTracker()

    for line in lines:
        finished = tracker.feed(line)
        if finished:
            out.write(format_run(*finished, show_count=show_count))

    finished = tracker.flush()
    if finished:
        out.write(format_run(*finished, show_count=show_count))
