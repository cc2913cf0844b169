"""Flags that select compatibility checks and serialized XML sections."""

from __future__ import annotations

import enum
from typing import ClassVar

__all__ = ["CheckFlag", "CheckFlags", "SerializeFlag", "SerializeFlags"]

_MASK = 0xFFFFFFFF


class CheckFlag(enum.IntEnum):
    """Bit positions of the checks run by ``check_compatibility``."""

    AVB = 0
    RUNTIME_INFO = 1
    KERNEL = 2


class SerializeFlag(enum.IntEnum):
    """Bit positions of the sections written when serializing."""

    HALS = 0
    AVB = 1
    SEPOLICY = 2
    VNDK = 3
    KERNEL = 4
    XML_FILES = 5
    SSDK = 6
    FQNAME = 7
    KERNEL_CONFIGS = 8
    KERNEL_MINOR_REVISION = 9
    META_VERSION = 10
    SCHEMA_TYPE = 11


class _BitFlags:
    """Immutable 32-bit set of flags addressed by an ``IntEnum`` of bit positions."""

    __slots__ = ("_value",)
    _FIELDS: ClassVar[type[enum.IntEnum]]

    def __init__(self, value: int) -> None:
        object.__setattr__(self, "_value", int(value) & _MASK)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def value(self) -> int:
        return self._value

    def _bit(self, field) -> int:
        if not isinstance(field, self._FIELDS):
            raise TypeError(f"expected {self._FIELDS.__name__}, got {field!r}")
        return 1 << int(field)

    def enable(self, *fields) -> "_BitFlags":
        """Return a copy with the given fields turned on."""
        value = self._value
        for field in fields:
            value |= self._bit(field)
        return type(self)(value)

    def disable(self, *fields) -> "_BitFlags":
        """Return a copy with the given fields turned off."""
        value = self._value
        for field in fields:
            value &= ~self._bit(field)
        return type(self)(value)

    def is_enabled(self, field) -> bool:
        return bool(self._value & self._bit(field))

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __repr__(self) -> str:
        names = "|".join(f.name for f in self._FIELDS if self.is_enabled(f))
        return f"{type(self).__name__}({names or '0'})"


class CheckFlags(_BitFlags):
    """Which checks ``check_compatibility`` performs."""

    __slots__ = ()
    _FIELDS = CheckFlag

    ENABLE_ALL_CHECKS: ClassVar["CheckFlags"]
    DISABLE_ALL_CHECKS: ClassVar["CheckFlags"]
    DISABLE_AVB_CHECK: ClassVar["CheckFlags"]
    DISABLE_RUNTIME_INFO: ClassVar["CheckFlags"]
    DEFAULT: ClassVar["CheckFlags"]


CheckFlags.ENABLE_ALL_CHECKS = CheckFlags(~0)
CheckFlags.DISABLE_ALL_CHECKS = CheckFlags(0)
CheckFlags.DISABLE_AVB_CHECK = CheckFlags.ENABLE_ALL_CHECKS.disable(CheckFlag.AVB)
CheckFlags.DISABLE_RUNTIME_INFO = CheckFlags.ENABLE_ALL_CHECKS.disable(CheckFlag.RUNTIME_INFO)
CheckFlags.DEFAULT = CheckFlags.DISABLE_AVB_CHECK


class SerializeFlags(_BitFlags):
    """Which sections are written when serializing to XML."""

    __slots__ = ()
    _FIELDS = SerializeFlag

    EVERYTHING: ClassVar["SerializeFlags"]
    NO_HALS: ClassVar["SerializeFlags"]
    NO_AVB: ClassVar["SerializeFlags"]
    NO_SEPOLICY: ClassVar["SerializeFlags"]
    NO_VNDK: ClassVar["SerializeFlags"]
    NO_KERNEL: ClassVar["SerializeFlags"]
    NO_XMLFILES: ClassVar["SerializeFlags"]
    NO_SSDK: ClassVar["SerializeFlags"]
    NO_FQNAME: ClassVar["SerializeFlags"]
    NO_KERNEL_CONFIGS: ClassVar["SerializeFlags"]
    NO_KERNEL_MINOR_REVISION: ClassVar["SerializeFlags"]
    NO_TAGS: ClassVar["SerializeFlags"]
    HALS_ONLY: ClassVar["SerializeFlags"]
    XMLFILES_ONLY: ClassVar["SerializeFlags"]
    SEPOLICY_ONLY: ClassVar["SerializeFlags"]
    VNDK_ONLY: ClassVar["SerializeFlags"]
    HALS_NO_FQNAME: ClassVar["SerializeFlags"]
    SSDK_ONLY: ClassVar["SerializeFlags"]


_everything = SerializeFlags(~0)
SerializeFlags.EVERYTHING = _everything
SerializeFlags.NO_HALS = _everything.disable(SerializeFlag.HALS)
SerializeFlags.NO_AVB = _everything.disable(SerializeFlag.AVB)
SerializeFlags.NO_SEPOLICY = _everything.disable(SerializeFlag.SEPOLICY)
SerializeFlags.NO_VNDK = _everything.disable(SerializeFlag.VNDK)
SerializeFlags.NO_KERNEL = _everything.disable(SerializeFlag.KERNEL)
SerializeFlags.NO_XMLFILES = _everything.disable(SerializeFlag.XML_FILES)
SerializeFlags.NO_SSDK = _everything.disable(SerializeFlag.SSDK)
SerializeFlags.NO_FQNAME = _everything.disable(SerializeFlag.FQNAME)
SerializeFlags.NO_KERNEL_CONFIGS = _everything.disable(SerializeFlag.KERNEL_CONFIGS)
SerializeFlags.NO_KERNEL_MINOR_REVISION = _everything.disable(
    SerializeFlag.KERNEL_MINOR_REVISION
)

_no_tags = SerializeFlags(0).enable(SerializeFlag.META_VERSION, SerializeFlag.SCHEMA_TYPE)
SerializeFlags.NO_TAGS = _no_tags
SerializeFlags.HALS_ONLY = _no_tags.enable(SerializeFlag.HALS, SerializeFlag.FQNAME)
SerializeFlags.XMLFILES_ONLY = _no_tags.enable(SerializeFlag.XML_FILES)
SerializeFlags.SEPOLICY_ONLY = _no_tags.enable(SerializeFlag.SEPOLICY)
SerializeFlags.VNDK_ONLY = _no_tags.enable(SerializeFlag.VNDK)
SerializeFlags.HALS_NO_FQNAME = _no_tags.enable(SerializeFlag.HALS)
SerializeFlags.SSDK_ONLY = _no_tags.enable(SerializeFlag.SSDK)
del _everything, _no_tags