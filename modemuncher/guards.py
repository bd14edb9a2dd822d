"""Guard functions for filesystem operations validation"""

import errno
import os
from typing import Optional

from .errors import ErrnoException, FsErrorCode, FsSyscall, ModeSpecError, create_fs_error
from .muncher import ModeOptions, munch


def os_error_to_fs_error(
    err: OSError, syscall: FsSyscall, path: Optional[str] = None
) -> ErrnoException:
    """Translate an OSError into an ErrnoException"""
    # Errno names not listed in FsErrorCode pass through as-is
    code: FsErrorCode = errno.errorcode.get(err.errno, "EIO")
    message = err.strerror.lower() if err.strerror else None
    return create_fs_error(code=code, syscall=syscall, path=path, message=message)


def assert_mode_string(spec: object, syscall: FsSyscall, path: Optional[str] = None) -> None:
    """Assert that a mode argument is a non-empty string"""
    if not isinstance(spec, str) or not spec:
        raise create_fs_error(
            code="EINVAL",
            syscall=syscall,
            path=path,
            message=f"mode must be a non-empty string, got {spec!r}",
        )


def stat_or_throw(path: str, syscall: FsSyscall, follow_symlinks: bool = True) -> os.stat_result:
    """Stat a path or throw the matching errno error"""
    try:
        return os.stat(path, follow_symlinks=follow_symlinks)
    except OSError as e:
        raise os_error_to_fs_error(e, syscall, path) from e


def munch_or_throw(
    current: int,
    spec: str,
    syscall: FsSyscall,
    path: Optional[str] = None,
    options: Optional[ModeOptions] = None,
) -> int:
    """Apply a mode string or throw EINVAL naming the parse error"""
    try:
        return munch(current, spec, options)
    except ModeSpecError as e:
        raise create_fs_error(
            code="EINVAL",
            syscall=syscall,
            path=path,
            message=str(e),
        ) from e
