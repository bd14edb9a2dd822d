"""Mode Muncher

chmod-style mode strings (rwxrwxrwx, octal, ugoa+-=rwxs) applied to
numeric file modes.
"""

from .errors import ErrnoException, FsErrorCode, FsSyscall, ModeError, ModeSpecError, create_fs_error
from .filesystem import chmod, stat, umask
from .muncher import ModeOptions, apply_mode_spec, munch
from .stats import Stats, file_type, mode_to_string

__version__ = "0.1.0"

__all__ = [
    "apply_mode_spec",
    "munch",
    "ModeOptions",
    "ModeError",
    "ModeSpecError",
    "mode_to_string",
    "file_type",
    "Stats",
    "stat",
    "chmod",
    "umask",
    "ErrnoException",
    "FsErrorCode",
    "FsSyscall",
    "create_fs_error",
]
