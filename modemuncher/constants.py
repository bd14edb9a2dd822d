"""File mode constants"""

# File types for mode field
S_IFMT = 0o170000  # File type mask
S_IFSOCK = 0o140000  # Socket
S_IFLNK = 0o120000  # Symbolic link
S_IFREG = 0o100000  # Regular file
S_IFBLK = 0o060000  # Block device
S_IFDIR = 0o040000  # Directory
S_IFCHR = 0o020000  # Character device
S_IFIFO = 0o010000  # FIFO

# Special bits
S_ISUID = 0o4000  # Set user ID on execution
S_ISGID = 0o2000  # Set group ID on execution
S_ISVTX = 0o1000  # Sticky bit

# Permission bits
S_IRUSR = 0o400
S_IWUSR = 0o200
S_IXUSR = 0o100
S_IRGRP = 0o040
S_IWGRP = 0o020
S_IXGRP = 0o010
S_IROTH = 0o004
S_IWOTH = 0o002
S_IXOTH = 0o001

PERMISSION_MASK = 0o7777  # Bits this package interprets
ACCESS_MASK = 0o777  # rwx for owner, group and other

# rwxrwxrwx slots, owner first
RWX_SLOTS = (
    ("r", S_IRUSR),
    ("w", S_IWUSR),
    ("x", S_IXUSR),
    ("r", S_IRGRP),
    ("w", S_IWGRP),
    ("x", S_IXGRP),
    ("r", S_IROTH),
    ("w", S_IWOTH),
    ("x", S_IXOTH),
)

# Slots where 's' is accepted, and the bits it turns on
SETID_SLOTS = {
    2: S_ISUID | S_IXUSR,
    5: S_ISGID | S_IXGRP,
}

# ugoa selectors -> affected bits
WHO_MASKS = {
    "u": 0o4700,
    "g": 0o2070,
    "o": 0o1007,
    "a": 0o7777,
}

# rwxs permission letters -> bits before masking by selector
PERM_MASKS = {
    "r": 0o444,
    "w": 0o222,
    "x": 0o111,
    "s": 0o6000,
}

OPERATORS = "+-="
OCTAL_DIGITS = "01234567"
MAX_OCTAL_LENGTH = 8
