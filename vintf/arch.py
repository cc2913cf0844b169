"""Bitness of a passthrough HAL implementation."""

from __future__ import annotations

import enum

__all__ = ["Arch", "has32", "has64", "contains"]


class Arch(enum.IntFlag):
    """Bitness flags; ``ARCH_32 | ARCH_64`` is ``ARCH_32_64``."""

    ARCH_EMPTY = 0
    ARCH_32 = 1
    ARCH_64 = 2
    ARCH_32_64 = 3

    def __str__(self) -> str:
        return _ARCH_STRINGS.get(int(self), str(int(self)))

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


_ARCH_STRINGS = {0: "", 1: "32", 2: "64", 3: "32+64"}


def has32(arch: Arch) -> bool:
    """Return whether ``arch`` includes 32-bit."""
    return arch in (Arch.ARCH_32, Arch.ARCH_32_64)


def has64(arch: Arch) -> bool:
    """Return whether ``arch`` includes 64-bit."""
    return arch in (Arch.ARCH_64, Arch.ARCH_32_64)


def contains(lft: Arch, rgt: Arch) -> bool:
    """Return whether ``lft`` defines every bitness in ``rgt``."""
    return not (~int(lft) & int(rgt))