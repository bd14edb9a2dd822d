"""Filesystem Integration Tests"""

import errno
import logging
import os
import tempfile

import pytest

from modemuncher import ErrnoException, ModeOptions, chmod, stat, umask
from modemuncher.guards import os_error_to_fs_error


def _make_file(tmpdir: str, name: str = "file.txt", mode: int = 0o644) -> str:
    path = os.path.join(tmpdir, name)
    with open(path, "w") as f:
        f.write("content")
    os.chmod(path, mode)
    return path


def _perms(path: str) -> int:
    return os.stat(path).st_mode & 0o7777


class TestStat:
    """stat"""

    def test_regular_file(self):
        """Should report a regular file with its permissions"""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = _make_file(tmpdir, mode=0o640)

            stats = stat(path)
            assert stats.is_file()
            assert not stats.is_directory()
            assert stats.type == "regular"
            assert stats.permissions == "rw-r-----"
            assert stats.size == len("content")
            assert stats.ino == os.stat(path).st_ino

    def test_directory(self):
        """Should report a directory"""
        with tempfile.TemporaryDirectory() as tmpdir:
            stats = stat(tmpdir)
            assert stats.is_directory()
            assert stats.type == "directory"

    def test_does_not_follow_symlinks(self):
        """Should stat the link itself"""
        with tempfile.TemporaryDirectory() as tmpdir:
            target = _make_file(tmpdir)
            link = os.path.join(tmpdir, "link")
            os.symlink(target, link)

            stats = stat(link)
            assert stats.is_symbolic_link()
            assert stats.type == "link"

    def test_missing_path(self):
        """Should throw ENOENT for a missing path"""
        with tempfile.TemporaryDirectory() as tmpdir:
            missing = os.path.join(tmpdir, "missing")
            with pytest.raises(FileNotFoundError) as exc_info:
                stat(missing)
            assert exc_info.value.code == "ENOENT"
            assert exc_info.value.syscall == "lstat"
            assert exc_info.value.path == missing

    def test_not_a_directory(self):
        """Should throw ENOTDIR when a path component is a file"""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = _make_file(tmpdir)

            with pytest.raises(ErrnoException) as exc_info:
                stat(os.path.join(path, "x"))
            assert exc_info.value.code == "ENOTDIR"
            assert not isinstance(exc_info.value, FileNotFoundError)


class TestChmod:
    """chmod"""

    def test_symbolic_change(self):
        """Should apply a symbolic change to the file"""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = _make_file(tmpdir, mode=0o644)

            assert chmod(path, "u+x") == 0o744
            assert _perms(path) == 0o744

    def test_multiple_clauses(self):
        """Should apply every clause"""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = _make_file(tmpdir, mode=0o644)

            chmod(path, "u=rwx,g=rx,o=")
            assert _perms(path) == 0o750

    def test_rwx_form(self):
        """Should set permissions from a rwxrwxrwx string"""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = _make_file(tmpdir, mode=0o777)

            chmod(path, "rw-------")
            assert _perms(path) == 0o600

    def test_octal_form(self):
        """Should set permissions from an octal string"""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = _make_file(tmpdir, mode=0o644)

            assert chmod(path, "0600") == 0o600
            assert _perms(path) == 0o600

    def test_directory(self):
        """Should change a directory's permissions"""
        with tempfile.TemporaryDirectory() as tmpdir:
            subdir = os.path.join(tmpdir, "sub")
            os.mkdir(subdir, 0o755)
            os.chmod(subdir, 0o755)

            chmod(subdir, "go-rx")
            assert _perms(subdir) == 0o700

    def test_bad_mode_leaves_file_untouched(self):
        """Should throw EINVAL and not change the file"""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = _make_file(tmpdir, mode=0o644)

            with pytest.raises(ErrnoException) as exc_info:
                chmod(path, "u*x")
            assert exc_info.value.code == "EINVAL"
            assert exc_info.value.syscall == "chmod"
            assert "bad operator" in str(exc_info.value)
            assert _perms(path) == 0o644

    def test_empty_mode(self):
        """Should throw EINVAL for an empty mode string"""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = _make_file(tmpdir)

            with pytest.raises(ErrnoException) as exc_info:
                chmod(path, "")
            assert exc_info.value.code == "EINVAL"

    def test_strict_option(self):
        """Should honour strict parsing"""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = _make_file(tmpdir, mode=0o644)

            with pytest.raises(ErrnoException) as exc_info:
                chmod(path, "rw-------x", ModeOptions(strict=True))
            assert exc_info.value.code == "EINVAL"
            assert _perms(path) == 0o644

    def test_missing_path(self):
        """Should throw ENOENT for a missing path"""
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(FileNotFoundError) as exc_info:
                chmod(os.path.join(tmpdir, "missing"), "u+x")
            assert exc_info.value.code == "ENOENT"
            assert exc_info.value.syscall == "chmod"


class TestUmask:
    """umask"""

    def setup_method(self):
        self._saved = os.umask(0o022)

    def teardown_method(self):
        os.umask(self._saved)

    def test_read(self):
        """Should report the allowed permissions without changing the mask"""
        assert umask() == "rwxr-xr-x"
        assert os.umask(0o022) == 0o022

    def test_set_rwx_form(self):
        """Should install the complement of the allowed permissions"""
        assert umask("rwxr-x---") == "rwxr-x---"
        assert os.umask(0o022) == 0o027

    def test_symbolic_change(self):
        """Should apply a symbolic change to the allowed permissions"""
        os.umask(0)
        assert umask("go-w") == "rwxr-xr-x"
        assert os.umask(0o022) == 0o022

    def test_octal(self):
        """Should accept octal allowed permissions"""
        assert umask("0700") == "rwx------"
        assert os.umask(0o022) == 0o077

    def test_setid_bits_dropped(self):
        """Should keep only rwx bits"""
        assert umask("a+s") == "rwxr-xr-x"

    def test_bad_mode_leaves_mask_unchanged(self):
        """Should throw EINVAL and keep the current mask"""
        with pytest.raises(ErrnoException) as exc_info:
            umask("u*x")
        assert exc_info.value.code == "EINVAL"
        assert exc_info.value.syscall == "umask"
        assert os.umask(0o022) == 0o022


class TestChmodLinksAndErrors:
    """chmod through symlinks, errno translation and logging"""

    def test_follows_symlink(self):
        """Should change the link target, not the link"""
        with tempfile.TemporaryDirectory() as tmpdir:
            target = _make_file(tmpdir, mode=0o644)
            link = os.path.join(tmpdir, "link")
            os.symlink(target, link)

            assert chmod(link, "u+x") == 0o744
            assert _perms(target) == 0o744
            assert stat(link).is_symbolic_link()

    def test_symlink_loop(self):
        """Should report a symlink loop as ELOOP"""
        with tempfile.TemporaryDirectory() as tmpdir:
            loop = os.path.join(tmpdir, "loop")
            os.symlink(loop, loop)

            with pytest.raises(ErrnoException) as exc_info:
                chmod(loop, "u+x")
            assert exc_info.value.code == "ELOOP"
            assert exc_info.value.syscall == "chmod"
            assert exc_info.value.path == loop

    def test_errno_names_pass_through(self):
        """Should use the platform's errno name"""
        err = os_error_to_fs_error(OSError(errno.EROFS, "Read-only file system"), "chmod", "/ro")
        assert err.code == "EROFS"
        assert str(err) == "EROFS: read-only file system, chmod '/ro'"

    def test_unknown_errno(self):
        """Should fall back to EIO for an errno with no name"""
        err = os_error_to_fs_error(OSError(99999, "Mystery"), "chmod", "/x")
        assert err.code == "EIO"

    def test_logs_empty_mode(self, caplog):
        """Should log an empty mode string like any other rejected mode"""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = _make_file(tmpdir)

            with caplog.at_level(logging.WARNING, logger="modemuncher.filesystem"):
                with pytest.raises(ErrnoException):
                    chmod(path, "")
                with pytest.raises(ErrnoException):
                    chmod(path, "u*x")
            rejected = [r for r in caplog.records if "rejected mode" in r.getMessage()]
            assert len(rejected) == 2

    def test_logs_empty_umask_mode(self, caplog):
        """Should log an empty umask mode and leave the mask alone"""
        saved = os.umask(0o022)
        try:
            with caplog.at_level(logging.WARNING, logger="modemuncher.filesystem"):
                with pytest.raises(ErrnoException) as exc_info:
                    umask("")
            assert exc_info.value.code == "EINVAL"
            assert any("rejected umask mode" in r.getMessage() for r in caplog.records)
            assert os.umask(0o022) == 0o022
        finally:
            os.umask(saved)
