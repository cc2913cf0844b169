"""Versions, kernel versions and version ranges."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["Version", "KernelVersion", "VersionRange", "META_VERSION"]


def _check_sizes(obj, *names: str) -> None:
    for name in names:
        value = getattr(obj, name)
        if not isinstance(value, int) or value < 0:
            raise ValueError(f"{name} must be a non-negative integer, got {value!r}")


@dataclass(frozen=True, order=True)
class Version:
    """A ``major.minor`` version."""

    major_ver: int = 0
    minor_ver: int = 0

    def __post_init__(self) -> None:
        _check_sizes(self, "major_ver", "minor_ver")

    def minor_at_least(self, other: "Version") -> bool:
        """Same major version and a minor version no lower than ``other``'s."""
        return self.major_ver == other.major_ver and self.minor_ver >= other.minor_ver


@dataclass(frozen=True, order=True)
class KernelVersion:
    """A ``version.major.minor`` kernel version."""

    version: int = 0
    major_rev: int = 0
    minor_rev: int = 0

    def __post_init__(self) -> None:
        _check_sizes(self, "version", "major_rev", "minor_rev")

    def drop_minor(self) -> Version:
        """Return the ``version.major`` part as a :class:`Version`."""
        return Version(self.version, self.major_rev)


@dataclass(frozen=True)
class VersionRange:
    """A range of minor versions under one major version, e.g. ``2.3-7``.

    When ``max_minor`` is omitted the range holds the single version
    ``major_ver.min_minor``.
    """

    major_ver: int = 0
    min_minor: int = 0
    max_minor: int = field(default=None)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.max_minor is None:
            object.__setattr__(self, "max_minor", self.min_minor)
        _check_sizes(self, "major_ver", "min_minor", "max_minor")

    def min_ver(self) -> Version:
        return Version(self.major_ver, self.min_minor)

    def max_ver(self) -> Version:
        return Version(self.major_ver, self.max_minor)

    def is_single_version(self) -> bool:
        return self.min_minor == self.max_minor

    def contains(self, ver: Version) -> bool:
        """Return whether ``ver`` lies within the range, bounds included."""
        return self.min_ver() <= ver <= self.max_ver()

    def supported_by(self, ver: Version) -> bool:
        """Return whether ``ver`` has the same major and at least the minimum minor."""
        return self.major_ver == ver.major_ver and self.min_minor <= ver.minor_ver

    def overlaps(self, other: "VersionRange") -> bool:
        """Return whether the two ranges share a version; symmetric."""
        return (
            self.major_ver == other.major_ver
            and self.min_minor <= other.max_minor
            and other.min_minor <= self.max_minor
        )


META_VERSION = Version(2, 0)