"""Transport and bitness of a manifest HAL."""

from __future__ import annotations

from dataclasses import dataclass

from .arch import Arch
from .enums import Transport

__all__ = ["TransportArch"]


@dataclass(frozen=True, order=True)
class TransportArch:
    """The ``<transport arch="...">`` element of a manifest HAL."""

    transport: Transport = Transport.EMPTY
    arch: Arch = Arch.ARCH_EMPTY

    def empty(self) -> bool:
        """Return whether neither transport nor arch is set."""
        return self.transport == Transport.EMPTY and self.arch == Arch.ARCH_EMPTY

    def is_valid(self) -> bool:
        """Passthrough needs an arch; hwbinder and no transport must have none."""
        if self.transport == Transport.PASSTHROUGH:
            return self.arch != Arch.ARCH_EMPTY
        return self.arch == Arch.ARCH_EMPTY