"""
File system utilities for GodotEnv.

This module provides the path helpers used to compute installation paths and
a depth-first recursive search used to locate Godot executables inside an
extracted installation:
- Path utilities (combine, absolute paths)
- Recursive search with file selector, directory pruning and per-directory/match
  callbacks
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, List, Optional, Union

from godotenv.core.exceptions import ExecutableSearchError

logger = logging.getLogger(__name__)

FileSelector = Callable[[Path], bool]
DirectorySelector = Callable[[Path], bool]
DirectoryCallback = Callable[[Path, str], None]
MatchCallback = Callable[[Path, str], None]

INDENT = "  "


# ============================================================================
# Path Utilities
# ============================================================================


def combine(*parts: Union[str, Path]) -> Path:
    """
    Join path segments.

    Example:
        >>> combine("/home/user", ".local/share", "godot")
        PosixPath('/home/user/.local/share/godot')
    """
    return Path(*parts)


def get_full_path(path: Union[str, Path]) -> Path:
    """
    Make a path absolute and collapse '..' segments without resolving symlinks.

    Example:
        >>> get_full_path("/opt/godot/../templates")
        PosixPath('/opt/templates')
    """
    return Path(os.path.abspath(os.fspath(path)))


# ============================================================================
# Recursive Search
# ============================================================================


def _list_directory(directory: Path):
    """Split a directory's entries into sorted files and subdirectories."""
    try:
        with os.scandir(directory) as entries:
            files = []
            dirs = []
            for entry in entries:
                if entry.is_dir(follow_symlinks=False):
                    dirs.append(Path(entry.path))
                elif entry.is_file():
                    files.append(Path(entry.path))
    except OSError as e:
        raise ExecutableSearchError(directory, e.strerror or str(e)) from e

    files.sort(key=lambda p: p.name)
    dirs.sort(key=lambda p: p.name)
    return files, dirs


def search_recursively(
    root: Union[str, Path],
    selector: FileSelector,
    dir_selector: Optional[DirectorySelector] = None,
    on_directory: Optional[DirectoryCallback] = None,
    on_match: Optional[MatchCallback] = None,
    max_workers: Optional[int] = None,
) -> List[Path]:
    """
    Search a directory tree depth-first for files accepted by a selector.

    Within a directory, entries are visited in name order: files first, then
    subdirectories. The files of one directory are passed to ``selector``
    concurrently on a thread pool. Matches are returned and passed to
    ``on_match`` in traversal order, once all selectors of the directory are done.

    Args:
        root: Directory to search
        selector: Called as selector(file); True keeps the file
        dir_selector: Called as dir_selector(directory); False prunes the
            directory and everything beneath it. The root is never pruned.
        on_directory: Called as on_directory(directory, indent) for every
            directory entered, root included
        on_match: Called as on_match(file, indent) for every accepted file,
            in traversal order
        max_workers: Thread pool size for selector calls (None uses the
            ThreadPoolExecutor default, 1 runs selectors sequentially)

    Returns:
        Files accepted by the selector, in traversal order

    Raises:
        ExecutableSearchError: If the root or any directory cannot be read

    Example:
        >>> search_recursively(
        ...     "/opt/godot",
        ...     selector=lambda f: f.suffix == ".exe",
        ...     dir_selector=lambda d: d.name != "Debug",
        ... )
        [PosixPath('/opt/godot/Godot_v4.2-stable_win64.exe')]
    """
    root = Path(root)
    if not root.is_dir():
        raise ExecutableSearchError(root, "not a directory")

    matches: List[Path] = []

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        # Explicit stack of (directory, depth); children pushed in reverse so
        # they pop in name order.
        stack = [(root, 0)]
        while stack:
            directory, depth = stack.pop()
            indent = INDENT * depth

            if on_directory is not None:
                on_directory(directory, indent)

            files, dirs = _list_directory(directory)

            file_indent = INDENT * (depth + 1)
            selected = list(executor.map(selector, files))
            for file, keep in zip(files, selected):
                if not keep:
                    continue
                matches.append(file)
                if on_match is not None:
                    on_match(file, file_indent)

            children = [
                d for d in dirs if dir_selector is None or dir_selector(d)
            ]
            for child in reversed(children):
                stack.append((child, depth + 1))

    logger.debug(f"Recursive search in {root} matched {len(matches)} file(s)")
    return matches


__all__ = [
    "combine",
    "get_full_path",
    "search_recursively",
    "FileSelector",
    "DirectorySelector",
    "DirectoryCallback",
    "MatchCallback",
]
