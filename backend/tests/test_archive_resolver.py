"""
Tests for statistics archive resolution.

These tests verify:
1. Explicit .gfs files are returned as typed, sorted
2. Explicit non-.gfs files fail resolution (no partial set)
3. Missing paths fail resolution with the absolute path in the message
4. Directories are searched recursively, non-archives skipped silently
5. Deduplication is by exact string, not by file identity
"""

import os
from pathlib import Path

import pytest

from mgmtshell.archives import (
    ArchiveFileSet,
    InvalidFileExtensionError,
    PathNotFoundError,
    ResolutionFailureKind,
    is_archive_file,
    is_archive_file_or_directory,
    resolve_archive_files,
)


# -----------------------------------------------------------------------------
# Explicit files
# -----------------------------------------------------------------------------

class TestExplicitFiles:
    """Top-level files are validated strictly."""

    def test_explicit_archives_returned_sorted(self, tmp_path: Path):
        names = ["zebra.gfs", "apple.gfs", "mango.gfs"]
        for name in names:
            (tmp_path / name).write_text("stats")

        result = resolve_archive_files([str(tmp_path / name) for name in names])

        assert result.ok
        assert list(result.files) == sorted(str(tmp_path / name) for name in names)

    def test_literal_relative_form_is_kept(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        Path("server1.gfs").write_text("stats")

        result = resolve_archive_files(["server1.gfs"])

        assert list(result.files) == ["server1.gfs"]

    def test_same_file_listed_twice_appears_once(self, tmp_path: Path):
        archive = tmp_path / "a.gfs"
        archive.write_text("stats")

        result = resolve_archive_files([str(archive), str(archive)])

        assert list(result.files) == [str(archive)]

    def test_wrong_extension_fails(self, tmp_path: Path):
        good = tmp_path / "a.gfs"
        good.write_text("stats")
        bad = tmp_path / "notes.txt"
        bad.write_text("text")

        result = resolve_archive_files([str(good), str(bad)])

        assert not result.ok
        assert result.failure.kind == ResolutionFailureKind.INVALID_FILE_EXTENSION
        assert result.failure.message == (
            "A Statistics Archive File must end with a .gfs file extension."
        )
        assert len(result.files) == 0

    def test_extension_is_case_sensitive(self, tmp_path: Path):
        upper = tmp_path / "SERVER.GFS"
        upper.write_text("stats")

        result = resolve_archive_files([str(upper)])

        assert result.failure.kind == ResolutionFailureKind.INVALID_FILE_EXTENSION

    def test_file_named_only_extension_is_accepted(self, tmp_path: Path):
        bare = tmp_path / ".gfs"
        bare.write_text("stats")

        result = resolve_archive_files([str(bare)])

        assert list(result.files) == [str(bare)]


# -----------------------------------------------------------------------------
# Missing paths
# -----------------------------------------------------------------------------

class TestMissingPaths:

    def test_missing_path_fails_with_absolute_path(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        result = resolve_archive_files(["missing.gfs"])

        expected = str(Path.cwd() / "missing.gfs")
        assert result.failure.kind == ResolutionFailureKind.PATH_NOT_FOUND
        assert result.failure.path == expected
        assert result.failure.message == (
            f"The pathname ({expected}) does not exist.  Please check the path and try again."
        )

    def test_resolution_stops_at_first_bad_path(self, tmp_path: Path):
        """A bad path aborts before later paths are examined."""
        bad_extension = tmp_path / "later.txt"
        bad_extension.write_text("text")

        result = resolve_archive_files([str(tmp_path / "nope"), str(bad_extension)])

        assert result.failure.kind == ResolutionFailureKind.PATH_NOT_FOUND


# -----------------------------------------------------------------------------
# Directory descent
# -----------------------------------------------------------------------------

class TestDirectoryDescent:
    """Directories are searched permissively."""

    def test_recursive_archives_only(self, archive_tree: Path):
        result = resolve_archive_files([str(archive_tree)])

        assert result.ok
        assert list(result.files) == [
            str(archive_tree / "a.gfs"),
            str(archive_tree / "sub" / "b.gfs"),
            str(archive_tree / "sub" / "deeper" / "c.gfs"),
        ]

    def test_explicit_file_plus_directory(self, archive_tree: Path):
        """
        GIVEN: /data/a.gfs and /data/sub (holding b.gfs, notes.txt)
        WHEN: both are resolved
        THEN: a.gfs as typed plus everything under sub, notes.txt skipped
        """
        result = resolve_archive_files(
            [str(archive_tree / "a.gfs"), str(archive_tree / "sub")]
        )

        assert list(result.files) == [
            str(archive_tree / "a.gfs"),
            str(archive_tree / "sub" / "b.gfs"),
            str(archive_tree / "sub" / "deeper" / "c.gfs"),
        ]

    def test_relative_directory_yields_absolute_paths(self, archive_tree: Path, monkeypatch):
        monkeypatch.chdir(archive_tree.parent)

        result = resolve_archive_files(["data/sub"])

        assert list(result.files) == [
            str(Path.cwd() / "data" / "sub" / "b.gfs"),
            str(Path.cwd() / "data" / "sub" / "deeper" / "c.gfs"),
        ]

    def test_same_file_under_two_string_forms_is_not_merged(self, archive_tree: Path, monkeypatch):
        """Literal and absolute forms of one file are two entries."""
        monkeypatch.chdir(archive_tree.parent)

        result = resolve_archive_files(["data/a.gfs", "data"])

        assert "data/a.gfs" in result.files
        assert str(Path.cwd() / "data" / "a.gfs") in result.files
        assert len(result.files) == 4

    def test_empty_directory_yields_empty_set(self, tmp_path: Path):
        empty = tmp_path / "empty"
        empty.mkdir()

        result = resolve_archive_files([str(empty)])

        assert result.ok
        assert len(result.files) == 0


# -----------------------------------------------------------------------------
# Empty input and unwrap
# -----------------------------------------------------------------------------

class TestResolutionResult:

    @pytest.mark.parametrize("pathnames", [None, []])
    def test_no_input_is_empty_set(self, pathnames):
        result = resolve_archive_files(pathnames)

        assert result.ok
        assert result.unwrap() == ArchiveFileSet()

    def test_unwrap_raises_path_not_found(self, tmp_path: Path):
        result = resolve_archive_files([str(tmp_path / "gone")])

        with pytest.raises(PathNotFoundError) as exc_info:
            result.unwrap()
        assert exc_info.value.path == str(tmp_path / "gone")

    def test_unwrap_raises_invalid_extension(self, tmp_path: Path):
        bad = tmp_path / "bad.log"
        bad.write_text("log")

        with pytest.raises(InvalidFileExtensionError):
            resolve_archive_files([str(bad)]).unwrap()


class TestFilters:

    def test_directory_is_not_an_archive(self, tmp_path: Path):
        looks_like = tmp_path / "dir.gfs"
        looks_like.mkdir()

        assert not is_archive_file(looks_like)
        assert is_archive_file_or_directory(looks_like)

    def test_non_archive_file_rejected_by_both(self, tmp_path: Path):
        text = tmp_path / "a.txt"
        text.write_text("x")

        assert not is_archive_file(text)
        assert not is_archive_file_or_directory(text)


# -----------------------------------------------------------------------------
# Literal path forms
# -----------------------------------------------------------------------------

class TestLiteralPathForms:
    """Paths are used as typed; nothing is normalized."""

    def test_empty_pathname_does_not_exist(self, tmp_path: Path, monkeypatch):
        """
        GIVEN: a working directory holding an archive
        WHEN: an empty pathname is resolved
        THEN: it fails as missing instead of searching the working directory
        """
        monkeypatch.chdir(tmp_path)
        Path("x.gfs").write_text("stats")

        result = resolve_archive_files([""])

        assert result.failure.kind == ResolutionFailureKind.PATH_NOT_FOUND
        assert result.failure.path == os.getcwd()
        assert len(result.files) == 0

    def test_dot_components_are_kept(self, archive_tree: Path, monkeypatch):
        monkeypatch.chdir(archive_tree.parent)

        result = resolve_archive_files(["./data/sub"])

        assert list(result.files) == [
            os.path.join(os.getcwd(), "./data/sub", "b.gfs"),
            os.path.join(os.getcwd(), "./data/sub", "deeper", "c.gfs"),
        ]

    def test_dot_and_plain_forms_are_distinct_entries(self, archive_tree: Path, monkeypatch):
        monkeypatch.chdir(archive_tree.parent)

        result = resolve_archive_files(["./data/sub/deeper", "data/sub/deeper"])

        assert list(result.files) == sorted([
            os.path.join(os.getcwd(), "./data/sub/deeper", "c.gfs"),
            os.path.join(os.getcwd(), "data/sub/deeper", "c.gfs"),
        ])

    def test_missing_relative_path_message_keeps_dots(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        result = resolve_archive_files(["./stats/missing.gfs"])

        assert result.failure.path == os.path.join(os.getcwd(), "./stats/missing.gfs")
