"""Tests for filesystem path resolution."""

import pytest

from datahandling.pipeline.interfaces import IPathResolver
from datahandling.pipeline.path_merger import as_directory, make_relative, normalize_path
from datahandling.pipeline.resolver import (
    FilesystemPathResolver,
    format_and_resolve_directory,
    format_and_resolve_path
)
from datahandling.utils.exceptions import PathNotFoundError


class StaticResolver(IPathResolver):
    """Resolver that anchors every path below a virtual root."""

    def resolve(self, path: str) -> str:
        return "/virtual/" + path


@pytest.fixture
def fixture_file(tmp_path):
    """Create fixtures/directory/file.txt below tmp_path."""
    directory = tmp_path / "fixtures" / "directory"
    directory.mkdir(parents=True)
    file_path = directory / "file.txt"
    file_path.write_text("content", encoding="utf-8")
    return file_path


class TestFormatAndResolvePath:
    """Test format_and_resolve_path()."""

    def test_resolves_existing_file(self, tmp_path, fixture_file):
        """Test resolving fragments to a normalized absolute path."""
        expected = normalize_path(str(fixture_file.resolve()))

        assert format_and_resolve_path(str(tmp_path), "fixtures/directory/file.txt") == expected
        assert format_and_resolve_path(
            str(tmp_path), "./fixtures/../fixtures//directory/file.txt"
        ) == expected

    def test_relative_to_working_directory(self, tmp_path, fixture_file, monkeypatch):
        """Test that relative paths resolve against the working directory."""
        monkeypatch.chdir(tmp_path)

        resolved = format_and_resolve_path("fixtures/directory/file.txt")
        assert resolved == normalize_path(str(fixture_file.resolve()))

    def test_missing_path(self, tmp_path):
        """Test that a missing path raises PathNotFoundError."""
        with pytest.raises(PathNotFoundError):
            format_and_resolve_path(str(tmp_path), "fixtures/directory/doesnotexist.txt")

    def test_symlink_loop(self, tmp_path):
        """Test that a symlink cycle raises PathNotFoundError."""
        try:
            (tmp_path / "a").symlink_to(tmp_path / "b")
            (tmp_path / "b").symlink_to(tmp_path / "a")
        except OSError:
            pytest.skip("symlinks not supported")

        with pytest.raises(PathNotFoundError):
            format_and_resolve_path(str(tmp_path), "a")

    def test_custom_resolver(self):
        """Test that an injected resolver is used before normalization."""
        resolved = format_and_resolve_path("a\\b", "../c", resolver=StaticResolver())
        assert resolved == "/virtual/a/c"


class TestFormatAndResolveDirectory:
    """Test format_and_resolve_directory()."""

    def test_trailing_separator(self, tmp_path, fixture_file):
        """Test that resolved directories end with a separator."""
        directory = format_and_resolve_directory(str(tmp_path))

        assert directory == as_directory(normalize_path(str(tmp_path.resolve())))
        assert directory.endswith("/")

    def test_relative_to_resolved_root(self, tmp_path, fixture_file):
        """Test combining resolution with make_relative()."""
        root = format_and_resolve_directory(str(tmp_path))
        resolved = format_and_resolve_path(str(fixture_file))

        assert make_relative(resolved, root) == "fixtures/directory/file.txt"


class TestFilesystemPathResolver:
    """Test FilesystemPathResolver."""

    def test_follows_symlinks(self, tmp_path, fixture_file):
        """Test that symlinks are resolved to their target."""
        link = tmp_path / "link.txt"
        try:
            link.symlink_to(fixture_file)
        except OSError:
            pytest.skip("Symlinks not supported")

        resolver = FilesystemPathResolver()
        assert resolver.resolve(str(link)) == str(fixture_file.resolve())
