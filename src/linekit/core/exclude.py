# src/linekit/core/exclude.py
from pathlib import Path
from typing import List, Optional
import pathspec

def load_exclude_spec(exclude_file: Optional[Path] = None, extra_patterns: Optional[List[str]] = None) -> Optional[pathspec.PathSpec]:
    """
    Builds a gitignore-style PathSpec from an exclude file plus any extra patterns.
    Returns None when there are no rules at all, so the walk can skip matching.
    """
    lines: List[str] = []

    if exclude_file is not None:
        with open(exclude_file, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()

    if extra_patterns:
        lines.extend(extra_patterns)

    if not any(line.strip() and not line.lstrip().startswith("#") for line in lines):
        return None

    return pathspec.PathSpec.from_lines("gitwildmatch", lines)

def is_excluded(spec: Optional[pathspec.PathSpec], rel_path: Path, is_directory: bool = False) -> bool:
    if spec is None:
        return False
    candidate = rel_path.as_posix()
    # "build/" style rules only match when the path is marked as a directory
    if is_directory:
        candidate += "/"
    return spec.match_file(candidate)
