"""Groups of HAL entries keyed by component name."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Any, Generic, Iterator, Optional, TypeVar

from .enums import HalFormat
from .version import Version

__all__ = ["Named", "HalGroup"]

T = TypeVar("T")
H = TypeVar("H")


@dataclass
class Named(Generic[T]):
    """An object together with the name it was loaded under."""

    name: str = ""
    object: Optional[T] = None


class HalGroup(abc.ABC, Generic[H]):
    """A multimap from component name (e.g. ``android.hardware.foo``) to HALs.

    A HAL stored here has ``name`` and ``format`` attributes and an
    ``instances()`` method yielding its instances. Each instance has
    ``format`` and ``interface`` attributes.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._hals: dict[str, list[H]] = {}

    def should_add(self, hal: H) -> bool:
        """Filter applied by :meth:`add`; accepts everything by default."""
        return True

    def add(self, hal: H) -> bool:
        """Add ``hal`` unless the filter rejects it; return whether it was added."""
        return self._add_internal(hal) is not None

    def _add_internal(self, hal: H) -> Optional[H]:
        if not self.should_add(hal):
            return None
        self._hals.setdefault(hal.name, []).append(hal)
        return hal

    def add_all_hals(self, other: "HalGroup[H]") -> None:
        """Move every HAL of ``other`` into ``self``.

        Raises ValueError on the first HAL that is rejected; HALs moved
        before it stay in ``self`` and ``other`` is left as it was.
        """
        for hal in list(other.hals()):
            if not self.add(hal):
                raise ValueError(f'HAL "{hal.name}" has a conflict.')
        other._hals.clear()

    def hals(self) -> Iterator[H]:
        """Yield every HAL, ordered by name and then by insertion."""
        for name in sorted(self._hals):
            yield from self._hals[name]

    def hals_named(self, name: str) -> list[H]:
        """Return all HALs with the given component name, in insertion order."""
        return list(self._hals.get(name, ()))

    def get_any_hal(self, name: str) -> Optional[H]:
        """Return one HAL with the given name, or None if there is none."""
        entries = self._hals.get(name)
        return entries[0] if entries else None

    def instances(self, fmt: Optional[HalFormat] = None) -> Iterator[Any]:
        """Yield the instances of every HAL, optionally only those of format ``fmt``."""
        for hal in self.hals():
            for instance in hal.instances():
                if fmt is None or instance.format == fmt:
                    yield instance

    def instances_of_package(self, fmt: HalFormat, package: str) -> Iterator[Any]:
        """Yield the instances of the HALs named ``package`` whose format is ``fmt``."""
        for hal in self.hals_named(package):
            if hal.format != fmt:
                continue
            yield from hal.instances()

    @abc.abstractmethod
    def instances_of_version(
        self, fmt: HalFormat, package: str, version: Version
    ) -> Iterator[Any]:
        """Yield the instances of ``package@version::*/*``.

        A query for ``a.h.foo@1.0`` also yields ``a.h.foo@1.1`` instances.
        For AIDL, ``version`` is the placeholder AIDL version.
        """

    def instances_of_interface(
        self, fmt: HalFormat, package: str, version: Version, interface: str
    ) -> Iterator[Any]:
        """Yield the instances of ``package@version::interface/*``."""
        for instance in self.instances_of_version(fmt, package, version):
            if instance.interface == interface:
                yield instance

    def get_hidl_fq_instances(
        self, package: str, version: Version, interface: str = ""
    ) -> list[Any]:
        """Return HIDL instances of ``package@version``, limited to ``interface`` if given."""
        if not interface:
            return list(self.instances_of_version(HalFormat.HIDL, package, version))
        return list(
            self.instances_of_interface(HalFormat.HIDL, package, version, interface)
        )