"""Error types for mode parsing and filesystem operations"""

from enum import Enum
from typing import Literal, Optional

# POSIX-style error codes for filesystem operations
FsErrorCode = Literal[
    "ENOENT",   # No such file or directory
    "ENOTDIR",  # Not a directory (when directory expected)
    "EPERM",    # Operation not permitted
    "EACCES",   # Permission denied
    "EINVAL",   # Invalid argument (bad mode string)
    "ELOOP",    # Too many levels of symbolic links
    "EROFS",    # Read-only filesystem
    "ENAMETOOLONG",  # File name too long
    "EIO",      # Errno the platform has no name for
]

# Syscall names for error reporting
FsSyscall = Literal[
    "stat",
    "lstat",
    "chmod",
    "umask",
]


class ModeError(Enum):
    """Reason a mode string was rejected

    Each member's value is a (message, legacy_code) pair. The legacy
    codes are the negative integers the C mode muncher returned; two
    members share -4 there, so compare members, not codes.
    """

    BAD_RWX_TOKEN = ("bad rwxrwxrwx mode change", -4)
    BAD_OCTAL_SYNTAX = ("bad octal mode", -4)
    BAD_OPERATOR = ("bad operator", -1)
    BAD_CHANGE_SYNTAX = ("bad mode change", -2)

    @property
    def message(self) -> str:
        return self.value[0]

    @property
    def legacy_code(self) -> int:
        return self.value[1]


class ModeSpecError(ValueError):
    """Raised by munch() when a mode string cannot be applied"""

    def __init__(self, error: ModeError, spec: str):
        super().__init__(f"{error.message}: {spec!r}")
        self.error = error
        self.spec = spec


class ErrnoException(Exception):
    """Exception with errno-style attributes"""

    def __init__(
        self,
        message: str,
        code: Optional[FsErrorCode] = None,
        syscall: Optional[FsSyscall] = None,
        path: Optional[str] = None,
    ):
        super().__init__(message)
        self.code = code
        self.syscall = syscall
        self.path = path


class FileNotFoundErrnoException(ErrnoException, FileNotFoundError):
    pass


def create_fs_error(
    code: FsErrorCode,
    syscall: FsSyscall,
    path: Optional[str] = None,
    message: Optional[str] = None,
) -> ErrnoException:
    """Create a filesystem error with consistent formatting

    Args:
        code: POSIX error code (e.g., 'ENOENT')
        syscall: System call name (e.g., 'chmod')
        path: Optional path involved in the error
        message: Optional custom message (defaults to code)

    Returns:
        ErrnoException with formatted message and attributes
    """
    base = message if message else code
    suffix = f" '{path}'" if path is not None else ""
    error_message = f"{code}: {base}, {syscall}{suffix}"

    # ENOENT also inherits from FileNotFoundError so callers can catch either
    if code == "ENOENT":
        return FileNotFoundErrnoException(error_message, code=code, syscall=syscall, path=path)

    return ErrnoException(error_message, code=code, syscall=syscall, path=path)
