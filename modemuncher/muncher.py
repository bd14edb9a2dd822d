"""Mode muncher: apply chmod-style mode strings to numeric file modes

Three grammars are accepted, chosen by the first character of the string:

    rw-r--r--       every permission bit given positionally ('r' or '-')
    0755            octal, replaces the mode outright ('0'-'7')
    u+x,go-w        symbolic changes, comma separated (anything else)
"""

from dataclasses import dataclass
from typing import Optional, Union

from .constants import (
    MAX_OCTAL_LENGTH,
    OCTAL_DIGITS,
    OPERATORS,
    PERM_MASKS,
    PERMISSION_MASK,
    RWX_SLOTS,
    S_ISGID,
    S_ISUID,
    SETID_SLOTS,
    WHO_MASKS,
)
from .errors import ModeError, ModeSpecError


@dataclass
class ModeOptions:
    """Options for mode string parsing

    Attributes:
        strict: Reject rwxrwxrwx strings that are not exactly nine valid
            characters. By default unknown characters leave their bit
            alone and anything past the ninth character is ignored.
    """

    strict: bool = False


def munch(current: int, spec: str, options: Optional[ModeOptions] = None) -> int:
    """Apply a mode string to a mode

    Args:
        current: Mode to start from (e.g. st_mode from a stat call)
        spec: Mode string in rwxrwxrwx, octal or ugoa+-=rwxs form
        options: Parser options (defaults to ModeOptions())

    Returns:
        The new mode. `current` is never modified.

    Raises:
        ModeSpecError: If the mode string is malformed

    Example:
        >>> oct(munch(0o644, 'u+x,go-r'))
        '0o700'
    """
    if not isinstance(spec, str):
        raise TypeError(f"mode string must be str, not {type(spec).__name__}")
    options = options or ModeOptions()

    first = spec[:1]
    if first in ("r", "-"):
        return _munch_rwx(current, spec, options.strict)
    if first and first in OCTAL_DIGITS:
        return _munch_octal(spec)
    return _munch_clauses(current, spec)


def apply_mode_spec(
    current: int, spec: str, options: Optional[ModeOptions] = None
) -> Union[int, ModeError]:
    """Apply a mode string, returning the error instead of raising it

    Returns:
        The new mode, or the ModeError describing why `spec` was rejected
    """
    try:
        return munch(current, spec, options)
    except ModeSpecError as e:
        return e.error


def _munch_rwx(current: int, spec: str, strict: bool) -> int:
    """rwxrwxrwx form: each slot sets or clears its bit"""
    if strict and len(spec) != len(RWX_SLOTS):
        raise ModeSpecError(ModeError.BAD_RWX_TOKEN, spec)

    # setuid/setgid survive only if spelled out again
    mode = current & ~(S_ISUID | S_ISGID)
    for slot, ((letter, bit), char) in enumerate(zip(RWX_SLOTS, spec)):
        if char == letter:
            mode |= bit
        elif char == "-":
            mode &= ~bit
        elif char == "s":
            if slot not in SETID_SLOTS:
                raise ModeSpecError(ModeError.BAD_RWX_TOKEN, spec)
            mode |= SETID_SLOTS[slot]
        elif strict:
            raise ModeSpecError(ModeError.BAD_RWX_TOKEN, spec)
    return mode


def _munch_octal(spec: str) -> int:
    if len(spec) > MAX_OCTAL_LENGTH or any(c not in OCTAL_DIGITS for c in spec):
        raise ModeSpecError(ModeError.BAD_OCTAL_SYNTAX, spec)
    return int(spec, 8)


def _munch_clauses(current: int, spec: str) -> int:
    """ugoa+-=rwxs form, one clause per comma"""
    mode = current
    pos = 0
    end = len(spec)

    while True:
        # who is affected
        affected = 0
        while pos < end and (spec[pos] in WHO_MASKS or spec[pos] == " "):
            affected |= WHO_MASKS.get(spec[pos], 0)
            pos += 1
        if not affected:
            affected = PERMISSION_MASK

        # how it changes
        if pos >= end or spec[pos] not in OPERATORS:
            raise ModeSpecError(ModeError.BAD_OPERATOR, spec)
        op = spec[pos]
        pos += 1

        # what changes
        perms = 0
        while pos < end and (spec[pos] in PERM_MASKS or spec[pos] == " "):
            perms |= PERM_MASKS.get(spec[pos], 0)
            pos += 1

        if pos < end and spec[pos] != ",":
            raise ModeSpecError(ModeError.BAD_CHANGE_SYNTAX, spec)

        change = perms & affected
        if op == "+":
            mode |= change
        elif op == "-":
            mode &= ~change
        else:
            mode = (mode & ~affected) | change

        if pos >= end:
            return mode
        pos += 1  # skip ','
