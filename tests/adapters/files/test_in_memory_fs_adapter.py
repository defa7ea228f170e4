"""
Tests for the InMemoryFileSystemAdapter.
"""

import pytest

from console_emulator.adapters.files.in_memory_fs_adapter import (
    DIRECTORY_SIZE,
    InMemoryFileSystemAdapter,
)
from console_emulator.exceptions import FileInspectionError, InvalidPathError


class TestInMemoryFileSystemAdapter:
    """Test cases for the InMemoryFileSystemAdapter."""

    def test_root_always_exists(self):
        adapter = InMemoryFileSystemAdapter()

        assert adapter.is_directory("/")
        assert adapter.is_readable("/")
        assert adapter.list_children("/") == []

    def test_add_file_creates_parents(self):
        """Test that missing parent directories are created."""
        adapter = InMemoryFileSystemAdapter()

        assert adapter.add_file("/a/b//c.txt", size=7) == "/a/b/c.txt"

        assert adapter.is_directory("/a")
        assert adapter.is_directory("/a/b")
        assert adapter.size("/a/b/c.txt") == 7
        assert adapter.size("/a") == DIRECTORY_SIZE

    def test_permission_flags(self, memory_fs):
        """Test that permissions are reported as configured."""
        assert not memory_fs.is_readable("/root/locked")
        assert memory_fs.is_writable("/root/locked")
        assert not memory_fs.is_writable("/root/run.sh")
        assert memory_fs.is_executable("/root/run.sh")
        assert not memory_fs.is_executable("/root/notes.txt")

    def test_missing_entries(self, memory_fs):
        """Test that queries on missing entries report False."""
        assert not memory_fs.exists("/root/missing")
        assert not memory_fs.is_directory("/root/missing")
        assert not memory_fs.is_readable("/root/missing")

        with pytest.raises(FileInspectionError, match="No such file or directory"):
            memory_fs.size("/root/missing")

    def test_symlink_is_followed(self, memory_fs):
        """Test that queries follow symbolic links."""
        assert memory_fs.is_directory("/root/link")
        assert memory_fs.exists("/root/link/a.txt")
        assert memory_fs.size("/root/link/a.txt") == 5

    def test_dangling_symlink_does_not_exist(self, memory_fs):
        memory_fs.add_symlink("/root/dangling", "/nowhere")

        assert not memory_fs.exists("/root/dangling")

    def test_list_children(self, memory_fs):
        """Test that only immediate children are listed, as absolute paths."""
        assert sorted(memory_fs.list_children("/root")) == [
            "/root/link",
            "/root/locked",
            "/root/notes.txt",
            "/root/run.sh",
            "/root/sub",
        ]
        assert memory_fs.list_children("/root/link") == ["/root/sub/a.txt"]

    @pytest.mark.parametrize(
        "path,message",
        [
            ("/root/notes.txt", "Not a directory"),
            ("/root/missing", "Not a directory"),
            ("/root/locked", "Permission denied"),
        ],
    )
    def test_list_children_errors(self, memory_fs, path, message):
        with pytest.raises(FileInspectionError, match=message):
            memory_fs.list_children(path)

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("/", "/"),
            ("//root///sub/", "/root/sub"),
            ("/root/./sub/../notes.txt", "/root/notes.txt"),
            ("/../..", "/"),
            ("/root/link", "/root/sub"),
            ("/root/link/..", "/root"),
            ("/root/missing/../sub", "/root/sub"),
        ],
    )
    def test_canonicalize(self, memory_fs, path, expected):
        """Test resolution of dot segments, duplicate separators and links."""
        assert memory_fs.canonicalize(path) == expected

    def test_canonicalize_absolute_link(self, memory_fs):
        """Test that an absolute link target restarts resolution at the root."""
        memory_fs.add_symlink("/root/sub/home", "/root")

        assert memory_fs.canonicalize("/root/sub/home/notes.txt") == "/root/notes.txt"

    def test_canonicalize_chained_links(self, memory_fs):
        memory_fs.add_symlink("/root/alias", "link")

        assert memory_fs.canonicalize("/root/alias/a.txt") == "/root/sub/a.txt"

    def test_canonicalize_loop(self, memory_fs):
        """Test that a link cycle raises InvalidPathError."""
        memory_fs.add_symlink("/root/ping", "pong")
        memory_fs.add_symlink("/root/pong", "ping")

        with pytest.raises(InvalidPathError, match="too many levels of symbolic links"):
            memory_fs.canonicalize("/root/ping")
        assert not memory_fs.exists("/root/ping")

    @pytest.mark.parametrize(
        "path,message",
        [("relative/path", "not an absolute path"), ("/root/\0", "embedded null byte")],
    )
    def test_canonicalize_invalid(self, memory_fs, path, message):
        with pytest.raises(InvalidPathError, match=message):
            memory_fs.canonicalize(path)
