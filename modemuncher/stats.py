"""Rendering of numeric modes and stat results"""

import os
from dataclasses import dataclass

from .constants import (
    RWX_SLOTS,
    S_IFBLK,
    S_IFCHR,
    S_IFDIR,
    S_IFIFO,
    S_IFLNK,
    S_IFMT,
    S_IFREG,
    S_IFSOCK,
    S_ISGID,
    S_ISUID,
    S_ISVTX,
    S_IXGRP,
    S_IXOTH,
    S_IXUSR,
)

_FILE_TYPES = {
    S_IFREG: "regular",
    S_IFLNK: "link",
    S_IFDIR: "directory",
    S_IFCHR: "character device",
    S_IFBLK: "block device",
    S_IFIFO: "fifo",
    S_IFSOCK: "socket",
}


def mode_to_string(mode: int) -> str:
    """Render the permission bits of a mode as rwxrwxrwx

    Setuid and setgid show as 's' in the execute slot, or 'S' when the
    matching execute bit is off. The sticky bit shows as 't' or 'T' in
    the other execute slot.

    Example:
        >>> mode_to_string(0o4755)
        'rwsr-xr-x'
    """
    chars = [letter if mode & bit else "-" for letter, bit in RWX_SLOTS]
    if mode & S_ISUID:
        chars[2] = "s" if mode & S_IXUSR else "S"
    if mode & S_ISGID:
        chars[5] = "s" if mode & S_IXGRP else "S"
    if mode & S_ISVTX:
        chars[8] = "t" if mode & S_IXOTH else "T"
    return "".join(chars)


def file_type(mode: int) -> str:
    """Name the file type encoded in a mode ('?' if unknown)"""
    return _FILE_TYPES.get(mode & S_IFMT, "?")


@dataclass
class Stats:
    """File/directory statistics

    Attributes:
        ino: Inode number
        mode: File mode and permissions
        nlink: Number of hard links
        uid: User ID
        gid: Group ID
        size: File size in bytes
        atime: Access time (Unix timestamp)
        mtime: Modification time (Unix timestamp)
        ctime: Change time (Unix timestamp)
    """

    ino: int
    mode: int
    nlink: int
    uid: int
    gid: int
    size: int
    atime: int
    mtime: int
    ctime: int

    @staticmethod
    def from_stat_result(st: os.stat_result) -> "Stats":
        return Stats(
            ino=st.st_ino,
            mode=st.st_mode,
            nlink=st.st_nlink,
            uid=st.st_uid,
            gid=st.st_gid,
            size=st.st_size,
            atime=int(st.st_atime),
            mtime=int(st.st_mtime),
            ctime=int(st.st_ctime),
        )

    @property
    def permissions(self) -> str:
        """Permission bits as rwxrwxrwx"""
        return mode_to_string(self.mode)

    @property
    def type(self) -> str:
        return file_type(self.mode)

    def is_file(self) -> bool:
        """Check if this is a regular file"""
        return (self.mode & S_IFMT) == S_IFREG

    def is_directory(self) -> bool:
        """Check if this is a directory"""
        return (self.mode & S_IFMT) == S_IFDIR

    def is_symbolic_link(self) -> bool:
        """Check if this is a symbolic link"""
        return (self.mode & S_IFMT) == S_IFLNK
