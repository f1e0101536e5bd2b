#!/usr/bin/env python3

"""Unit tests for path utilities."""

from pathlib import Path

import pytest

from mocksmith.utils.path_utils import canonicalize, header_path, maybe_write_file


@pytest.mark.unit
class TestHeaderPath:
    """Test suite for computing include paths of headers."""

    @pytest.fixture
    def tree(self, tmp_path: Path) -> Path:
        """Header at project/include/foo/ifoo.h."""
        header = tmp_path / "project" / "include" / "foo" / "ifoo.h"
        header.parent.mkdir(parents=True)
        header.write_text("", encoding="utf-8")
        (tmp_path / "unrelated").mkdir()
        return header

    def test_shortest_relative_path_wins(self, tree: Path, tmp_path: Path) -> None:
        include_paths = [tmp_path / "project", tmp_path / "project" / "include", tmp_path / "unrelated"]

        assert header_path(tree, include_paths) == "foo/ifoo.h"

    def test_order_of_include_paths_does_not_matter(self, tree: Path, tmp_path: Path) -> None:
        include_paths = [tmp_path / "project" / "include", tmp_path / "project"]

        assert header_path(tree, include_paths) == "foo/ifoo.h"

    def test_relative_include_path_is_canonicalized(
        self, tree: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path / "project")

        assert header_path(tree, [Path("include/foo/..")]) == "foo/ifoo.h"

    def test_header_outside_include_paths_is_used_as_given(self, tree: Path, tmp_path: Path) -> None:
        assert header_path(Path("foo/ifoo.h"), [tmp_path / "unrelated"]) == "foo/ifoo.h"

    def test_system_include_directories(self) -> None:
        include_paths = [Path("/usr/include"), Path("/usr/local/include")]

        assert header_path(Path("/usr/local/include/another/header.h"), include_paths) == (
            "another/header.h"
        )

    def test_no_include_paths(self) -> None:
        assert header_path(Path("a/b/c.h"), []) == "a/b/c.h"


@pytest.mark.unit
def test_canonicalize_falls_back_to_literal_path() -> None:
    path = Path("does/not/exist.h")
    assert canonicalize(path) == path


@pytest.mark.unit
class TestMaybeWriteFile:
    """Test suite for writing files only when their content changes."""

    def test_writes_new_file(self, tmp_path: Path) -> None:
        file = tmp_path / "mock.h"

        assert maybe_write_file(file, "content")
        assert file.read_text(encoding="utf-8") == "content"

    def test_unchanged_file_is_not_written(self, tmp_path: Path) -> None:
        file = tmp_path / "mock.h"
        file.write_text("content", encoding="utf-8")

        assert not maybe_write_file(file, "content")
        assert maybe_write_file(file, "content", always_write=True)

    def test_changed_file_is_written(self, tmp_path: Path) -> None:
        file = tmp_path / "mock.h"
        file.write_text("old", encoding="utf-8")

        assert maybe_write_file(file, "new")
        assert file.read_text(encoding="utf-8") == "new"

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            maybe_write_file(tmp_path / "missing" / "mock.h", "content")
