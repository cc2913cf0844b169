"""``<xmlfile>`` entries and groups of them keyed by name."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterator, TypeVar

from .enums import XmlSchemaFormat
from .version import Version, VersionRange

__all__ = ["XmlFile", "MatrixXmlFile", "ManifestXmlFile", "XmlFileGroup"]


@dataclass(frozen=True)
class XmlFile:
    """A named XML file, possibly at an overridden path."""

    name: str = ""
    overridden_path: str = ""


@dataclass(frozen=True)
class MatrixXmlFile(XmlFile):
    """An ``<xmlfile>`` entry in a compatibility matrix."""

    optional: bool = False
    format: XmlSchemaFormat = XmlSchemaFormat.DTD
    version_range: VersionRange = field(default_factory=VersionRange)


@dataclass(frozen=True)
class ManifestXmlFile(XmlFile):
    """An ``<xmlfile>`` entry in a manifest."""

    version: Version = field(default_factory=Version)


T = TypeVar("T", bound=XmlFile)


class XmlFileGroup(Generic[T]):
    """A multimap from file name to XML file entries, iterated in name order."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._xml_files: dict[str, list[T]] = {}

    def should_add_xml_file(self, xml_file: T) -> bool:
        """Filter applied by :meth:`add_xml_file`; accepts everything by default."""
        return True

    def add_xml_file(self, xml_file: T) -> bool:
        """Add ``xml_file`` unless the filter rejects it; return whether it was added."""
        if not self.should_add_xml_file(xml_file):
            return False
        self._xml_files.setdefault(xml_file.name, []).append(xml_file)
        return True

    def get_xml_files(self, name: str) -> list[T]:
        """Return all entries with the given name, in insertion order."""
        return list(self._xml_files.get(name, ()))

    def xml_files(self) -> Iterator[T]:
        """Yield every entry, ordered by name and then by insertion."""
        for name in sorted(self._xml_files):
            yield from self._xml_files[name]

    def add_all_xml_files(self, other: "XmlFileGroup[T]") -> None:
        """Move every entry of ``other`` into ``self``.

        Raises ValueError on the first entry that is rejected; entries moved
        before it stay in ``self`` and ``other`` is left as it was.
        """
        for xml_file in list(other.xml_files()):
            if not self.add_xml_file(xml_file):
                raise ValueError(f'XML File "{xml_file.name}" has a conflict.')
        other._xml_files.clear()