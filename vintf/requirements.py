"""Sepolicy, VNDK, vendor NDK and system SDK requirements."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .version import VersionRange

__all__ = ["Sepolicy", "VendorNdk", "VndkVersionRange", "Vndk", "SystemSdk"]


@dataclass(frozen=True)
class Sepolicy:
    """The ``<sepolicy>`` section of a compatibility matrix."""

    kernel_sepolicy_version: int = 0
    sepolicy_versions: tuple[VersionRange, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.kernel_sepolicy_version, int) or self.kernel_sepolicy_version < 0:
            raise ValueError(
                f"kernel sepolicy version must be a non-negative integer, "
                f"got {self.kernel_sepolicy_version!r}"
            )
        object.__setattr__(self, "sepolicy_versions", tuple(self.sepolicy_versions))


@dataclass(frozen=True, eq=False)
class VendorNdk:
    """A vendor NDK version with its libraries; equality looks at the version only."""

    version: str = ""
    libraries: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "libraries", frozenset(self.libraries))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VendorNdk):
            return NotImplemented
        return self.version == other.version

    def __hash__(self) -> int:
        return hash(self.version)


@dataclass(frozen=True)
class VndkVersionRange:
    """Deprecated VNDK version range ``sdk.vndk.patch_min-patch_max``."""

    sdk: int = 0
    vndk: int = 0
    patch_min: int = 0
    patch_max: int = field(default=None)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.patch_max is None:
            object.__setattr__(self, "patch_max", self.patch_min)
        for name in ("sdk", "vndk", "patch_min", "patch_max"):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer, got {value!r}")

    def is_single_version(self) -> bool:
        return self.patch_min == self.patch_max


@dataclass(frozen=True)
class Vndk:
    """Deprecated ``<vndk>`` entry."""

    version_range: VndkVersionRange = field(default_factory=VndkVersionRange)
    libraries: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "libraries", frozenset(self.libraries))


@dataclass
class SystemSdk:
    """System SDK versions provided for vendor apps."""

    versions: set[str] = field(default_factory=set)

    def __init__(self, versions: Iterable[str] = ()) -> None:
        self.versions = set(versions)

    def empty(self) -> bool:
        return not self.versions

    def remove_versions(self, other: "SystemSdk") -> "SystemSdk":
        """Return the versions in ``self`` that are not in ``other``."""
        return SystemSdk(self.versions - other.versions)

    def add_all(self, other: "SystemSdk") -> None:
        """Move every version of ``other`` into ``self``."""
        self.versions |= other.versions
        other.versions.clear()