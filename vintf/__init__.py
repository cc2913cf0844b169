"""Value types and containers for vendor interface manifests and compatibility matrices."""

__version__ = "0.1.0"

__all__ = [
    "arch",
    "enums",
    "version",
    "transport_arch",
    "flags",
    "requirements",
    "xml_file",
    "hal_group",
]