# src/linekit/models.py
from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class FileInfo:
    """Immutable line/word/byte/char counts for one source."""
    num_lines: int = 0
    num_words: int = 0
    num_bytes: int = 0
    num_chars: int = 0

    def __add__(self, other: "FileInfo") -> "FileInfo":
        return FileInfo(
            num_lines=self.num_lines + other.num_lines,
            num_words=self.num_words + other.num_words,
            num_bytes=self.num_bytes + other.num_bytes,
            num_chars=self.num_chars + other.num_chars,
        )

    def field(self, name: str) -> int:
        return getattr(self, f"num_{name}")

@dataclass(frozen=True)
class SourceEntry:
    """A grep source found on disk, or the reason it could not be used."""
    path: str
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
