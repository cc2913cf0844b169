"""Enumerations used by manifests and compatibility matrices."""

from __future__ import annotations

import enum
import sys

__all__ = [
    "HalFormat",
    "Transport",
    "KernelConfigType",
    "Tristate",
    "SchemaType",
    "XmlSchemaFormat",
    "Level",
]


class _LabeledEnum(int, enum.Enum):
    """Integer enumeration whose string form is a fixed label."""

    def __new__(cls, value: int, label: str):
        member = int.__new__(cls, value)
        member._value_ = value
        member._label = label
        return member

    def __str__(self) -> str:
        return self._label

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


class HalFormat(_LabeledEnum):
    HIDL = (0, "hidl")
    NATIVE = (1, "native")
    AIDL = (2, "aidl")


class Transport(_LabeledEnum):
    EMPTY = (0, "")
    PASSTHROUGH = (1, "passthrough")
    HWBINDER = (2, "hwbinder")


class KernelConfigType(_LabeledEnum):
    STRING = (0, "string")
    INTEGER = (1, "int")
    RANGE = (2, "range")
    TRISTATE = (3, "tristate")


class Tristate(_LabeledEnum):
    NO = (0, "n")
    YES = (1, "y")
    MODULE = (2, "m")


class SchemaType(_LabeledEnum):
    DEVICE = (0, "device")
    FRAMEWORK = (1, "framework")


class XmlSchemaFormat(_LabeledEnum):
    DTD = (0, "dtd")
    XSD = (1, "xsd")


_SIZE_MAX = 2**64 - 1


class Level(int):
    """FCM version of a manifest or matrix.

    Any non-negative integer up to ``Level.UNSPECIFIED`` is a valid level;
    the named class attributes are well-known values.
    """

    __slots__ = ()

    LEGACY: "Level"
    O: "Level"  # noqa: E741
    O_MR1: "Level"
    P: "Level"
    Q: "Level"
    R: "Level"
    UNSPECIFIED: "Level"

    def __new__(cls, value: int = _SIZE_MAX) -> "Level":
        number = int(value)
        if not 0 <= number <= _SIZE_MAX:
            raise ValueError(f"level out of range: {value!r}")
        return super().__new__(cls, number)

    def __repr__(self) -> str:
        name = _LEVEL_NAMES.get(int(self))
        return f"Level.{name}" if name else f"Level({int(self)})"


_LEVEL_NAMES = {
    0: "LEGACY",
    1: "O",
    2: "O_MR1",
    3: "P",
    4: "Q",
    5: "R",
    _SIZE_MAX: "UNSPECIFIED",
}

for _number, _name in _LEVEL_NAMES.items():
    setattr(Level, _name, Level(_number))
del _number, _name

assert sys.maxsize <= _SIZE_MAX