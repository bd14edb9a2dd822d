"""stat/chmod/umask on the real filesystem, driven by mode strings"""

import logging
import os
from typing import Optional

from .constants import ACCESS_MASK, PERMISSION_MASK
from .errors import ErrnoException
from .guards import assert_mode_string, munch_or_throw, os_error_to_fs_error, stat_or_throw
from .muncher import ModeOptions
from .stats import Stats, mode_to_string

logger = logging.getLogger(__name__)


def stat(path: str) -> Stats:
    """Get file/directory statistics

    Symbolic links are not followed.

    Args:
        path: Path to stat

    Returns:
        Stats for the path itself

    Example:
        >>> st = stat('/etc/passwd')
        >>> st.permissions, st.type
        ('rw-r--r--', 'regular')
    """
    return Stats.from_stat_result(stat_or_throw(path, "lstat", follow_symlinks=False))


def chmod(path: str, spec: str, options: Optional[ModeOptions] = None) -> int:
    """Change the permissions of a path using a mode string

    The current mode is read from the path (following symlinks), the
    mode string is applied to it, and the resulting permission bits are
    written back.

    Args:
        path: Path to change
        spec: Mode string, e.g. 'u+x', 'rw-r-----' or '0640'
        options: Parser options

    Returns:
        The permission bits that were written

    Raises:
        ErrnoException: EINVAL for a bad mode string (the path is left
            untouched), or the errno of a failed stat/chmod

    Example:
        >>> oct(chmod('script.sh', 'a+x'))
        '0o755'
    """
    st = stat_or_throw(path, "chmod")
    try:
        assert_mode_string(spec, "chmod", path)
        mode = munch_or_throw(st.st_mode, spec, "chmod", path, options) & PERMISSION_MASK
    except ErrnoException:
        logger.warning("rejected mode %r for %s", spec, path)
        raise

    try:
        os.chmod(path, mode)
    except OSError as e:
        raise os_error_to_fs_error(e, "chmod", path) from e

    logger.debug("chmod %s: %o -> %o (%s)", path, st.st_mode & PERMISSION_MASK, mode, spec)
    return mode


def umask(spec: Optional[str] = None, options: Optional[ModeOptions] = None) -> str:
    """Read or change the file creation mask

    The mask is expressed as the permissions it allows rather than the
    bits it removes, so a umask of 022 reads as 'rwxr-xr-x'. Changing it
    applies `spec` to those allowed permissions.

    Args:
        spec: Optional mode string to apply, e.g. 'go-w' or 'rwxr-x---'
        options: Parser options

    Returns:
        The allowed permissions as rwxrwxrwx, after any change

    Raises:
        ErrnoException: EINVAL for a bad mode string (the mask is left
            unchanged)
    """
    # os.umask can only read by writing
    old = os.umask(0)
    os.umask(old)
    allowed = ~old & ACCESS_MASK

    if spec is not None:
        try:
            assert_mode_string(spec, "umask")
            allowed = munch_or_throw(allowed, spec, "umask", options=options) & ACCESS_MASK
        except ErrnoException:
            logger.warning("rejected umask mode %r", spec)
            raise
        os.umask(~allowed & ACCESS_MASK)
        logger.debug("umask %03o -> %03o (%s)", old, ~allowed & ACCESS_MASK, spec)

    return mode_to_string(allowed)
