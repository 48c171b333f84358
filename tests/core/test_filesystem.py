"""
Unit tests for filesystem utilities.

Tests cover:
- Path helpers
- Recursive search order, pruning and callbacks
- Error reporting for unreadable directories
"""

import os
import threading
import time
from pathlib import Path
from unittest.mock import patch

import pytest

from godotenv.core.exceptions import ExecutableSearchError, FilesystemError
from godotenv.core.filesystem import (
    combine,
    get_full_path,
    search_recursively,
)
from tests.fixtures.installations import make_files


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def tree(tmp_path) -> Path:
    """
    root/
        b.txt
        a.txt
        zeta/z.txt
        alpha/c.txt
        alpha/inner/d.txt
        skip/e.txt
    """
    root = tmp_path / "root"
    make_files(
        root,
        [
            "b.txt",
            "a.txt",
            "zeta/z.txt",
            "alpha/c.txt",
            "alpha/inner/d.txt",
            "skip/e.txt",
        ],
    )
    return root


def relative(paths, root):
    return [p.relative_to(root).as_posix() for p in paths]


# ============================================================================
# Path Utilities
# ============================================================================


class TestPathUtilities:
    def test_combine(self):
        assert combine("a", "b", Path("c")) == Path("a", "b", "c")

    def test_get_full_path_is_absolute(self):
        assert get_full_path("relative/dir").is_absolute()

    def test_get_full_path_collapses_parent_segments(self, tmp_path):
        assert get_full_path(tmp_path / "x" / ".." / "y") == get_full_path(tmp_path / "y")


# ============================================================================
# Recursive Search
# ============================================================================


class TestSearchRecursively:
    def test_depth_first_order(self, tree):
        result = search_recursively(tree, selector=lambda f: True)
        assert relative(result, tree) == [
            "a.txt",
            "b.txt",
            "alpha/c.txt",
            "alpha/inner/d.txt",
            "skip/e.txt",
            "zeta/z.txt",
        ]

    def test_selector_filters(self, tree):
        result = search_recursively(
            tree, selector=lambda f: f.name in ("a.txt", "d.txt")
        )
        assert relative(result, tree) == ["a.txt", "alpha/inner/d.txt"]

    def test_dir_selector_prunes_subtree(self, tree):
        result = search_recursively(
            tree,
            selector=lambda f: True,
            dir_selector=lambda d: d.name not in ("skip", "alpha"),
        )
        assert relative(result, tree) == ["a.txt", "b.txt", "zeta/z.txt"]

    def test_root_is_never_pruned(self, tree):
        result = search_recursively(
            tree, selector=lambda f: True, dir_selector=lambda d: False
        )
        assert relative(result, tree) == ["a.txt", "b.txt"]

    def test_on_directory_called_for_entered_directories(self, tree):
        visited = []
        search_recursively(
            tree,
            selector=lambda f: False,
            dir_selector=lambda d: d.name != "skip",
            on_directory=lambda d, indent: visited.append((d.name, indent)),
        )
        assert visited == [
            ("root", ""),
            ("alpha", "  "),
            ("inner", "    "),
            ("zeta", "  "),
        ]

    def test_on_match_receives_indent(self, tree):
        indents = {}
        search_recursively(
            tree,
            selector=lambda f: True,
            on_match=lambda f, indent: indents.__setitem__(f.name, indent),
        )
        assert indents["a.txt"] == "  "
        assert indents["d.txt"] == "      "

    def test_on_match_skips_rejected_files(self, tree):
        matched = []
        search_recursively(
            tree,
            selector=lambda f: f.name != "b.txt",
            on_match=lambda f, indent: matched.append(f.name),
        )
        assert "b.txt" not in matched

    def test_on_match_follows_traversal_order_when_selectors_finish_out_of_order(
        self, tmp_path
    ):
        make_files(tmp_path, ["a.bin", "b.bin", "c.bin"])
        delays = {"a.bin": 0.3, "b.bin": 0.15, "c.bin": 0.0}
        finished = []
        matched = []

        def slow_selector(file):
            time.sleep(delays[file.name])
            finished.append(file.name)
            return True

        search_recursively(
            tmp_path,
            selector=slow_selector,
            on_match=lambda f, indent: matched.append(f.name),
            max_workers=3,
        )
        assert finished == ["c.bin", "b.bin", "a.bin"]
        assert matched == ["a.bin", "b.bin", "c.bin"]

    def test_empty_result(self, tree):
        assert search_recursively(tree, selector=lambda f: False) == []

    def test_order_is_stable_with_concurrent_selectors(self, tmp_path):
        names = [f"file{i:02d}.bin" for i in range(40)]
        make_files(tmp_path, names)
        barrier = threading.Barrier(4, timeout=5)

        def slow_selector(file):
            # Force several selectors to be in flight at the same time.
            if file.name in names[:4]:
                barrier.wait()
            return True

        result = search_recursively(tmp_path, selector=slow_selector, max_workers=4)
        assert [p.name for p in result] == names

    def test_sequential_selectors(self, tree):
        result = search_recursively(tree, selector=lambda f: True, max_workers=1)
        assert len(result) == 6

    def test_missing_root(self, tmp_path):
        with pytest.raises(ExecutableSearchError):
            search_recursively(tmp_path / "missing", selector=lambda f: True)

    def test_file_as_root(self, tree):
        with pytest.raises(FilesystemError):
            search_recursively(tree / "a.txt", selector=lambda f: True)

    def test_unreadable_directory_fails_search(self, tree):
        real_scandir = os.scandir

        def failing_scandir(path):
            if Path(path).name == "inner":
                raise PermissionError(13, "Permission denied", str(path))
            return real_scandir(path)

        with patch("godotenv.core.filesystem.os.scandir", side_effect=failing_scandir):
            with pytest.raises(ExecutableSearchError) as exc_info:
                search_recursively(tree, selector=lambda f: True)

        assert "Permission denied" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, PermissionError)

    def test_selector_errors_propagate(self, tree):
        def selector(file):
            raise ValueError("boom")

        with pytest.raises(ValueError, match="boom"):
            search_recursively(tree, selector=selector)
