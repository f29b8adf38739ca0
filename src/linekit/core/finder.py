# src/linekit/core/finder.py
import os
import stat
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

import pathspec

from linekit.config import STDIN_MARKER
from linekit.core.exclude import is_excluded
from linekit.models import SourceEntry

def walk_files(root_dir: Path, exclude_spec: Optional[pathspec.PathSpec] = None) -> Iterator[str]:
    """
    Walks root_dir depth-first, pruning excluded directories, and yields
    the path of every regular file that is not excluded.
    """
    for root, dirs, files in os.walk(root_dir):
        root_path = Path(root)

        # os.walk descends into whatever is left in dirs, so prune in place
        for d in list(dirs):
            dir_rel_path = (root_path / d).relative_to(root_dir)
            if is_excluded(exclude_spec, dir_rel_path, is_directory=True):
                dirs.remove(d)
        dirs.sort()

        for f in sorted(files):
            file_abs_path = root_path / f
            if not file_abs_path.is_file():
                continue
            if is_excluded(exclude_spec, file_abs_path.relative_to(root_dir)):
                continue
            yield str(file_abs_path)

def find_files(paths: Sequence[str], recursive: bool, exclude_spec: Optional[pathspec.PathSpec] = None) -> List[SourceEntry]:
    """
    Resolves path arguments into grep sources, keeping argument order.
    Directories expand to their files only when recursive; otherwise they,
    like paths that cannot be stat'ed, become error entries.
    """
    results: List[SourceEntry] = []

    for path in paths:
        if path == STDIN_MARKER:
            results.append(SourceEntry(path))
            continue

        try:
            mode = os.stat(path).st_mode
        except OSError as e:
            results.append(SourceEntry(path, error=f"{path}: {e.strerror}"))
            continue

        if stat.S_ISDIR(mode):
            if recursive:
                results.extend(SourceEntry(p) for p in walk_files(Path(path), exclude_spec))
            else:
                results.append(SourceEntry(path, error=f"{path} is a directory"))
        elif stat.S_ISREG(mode):
            results.append(SourceEntry(path))

    return results
