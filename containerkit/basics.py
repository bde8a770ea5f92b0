"""Small arithmetic helpers and bit-flag status handling."""

from __future__ import annotations

from enum import IntFlag


def add(a: int, b: int) -> int:
    return a + b


def sub(a: int, b: int) -> int:
    return a - b


def mul(a: int, b: int) -> int:
    return a * b


class Status(IntFlag):
    """Status bits that can be combined into one value."""

    HUNGRY = 0x001
    THIRSTY = 0x002
    TIRED = 0x004
    FIRE = 0x008
    COLD = 0x010
    POISON = 0x020
    HOT1 = 0x040
    HOT2 = 0x080
    HOT3 = 0x100
    HOT4 = 0x200
    HOT5 = 0x300
    HOT6 = 0x400


def add_status(current: int, flag: int) -> Status:
    """Return ``current`` with the bits of ``flag`` set."""
    return Status(int(current) | int(flag))


def has_status(current: int, flag: int) -> bool:
    """Return whether any bit of ``flag`` is set in ``current``."""
    return bool(int(current) & int(flag))


def remove_status(current: int, flag: int) -> Status:
    """Return ``current`` with the bits of ``flag`` cleared."""
    return Status(int(current) & ~int(flag))