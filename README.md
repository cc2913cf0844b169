# vintf

Value types and containers for vendor interface metadata, meaning HAL
manifests and compatibility matrices. The package supplies the pieces that
such documents are built from. It has no third-party dependencies.

## Modules

- `vintf.arch`: `Arch` is an `IntFlag` that gives the bitness of a
  passthrough HAL. Its members are `ARCH_EMPTY`, `ARCH_32`, `ARCH_64` and
  `ARCH_32_64`, and they convert to the strings `""`, `"32"`, `"64"` and
  `"32+64"`. Because it is a flag, `ARCH_32 | ARCH_64 == ARCH_32_64`. The
  module also has the helpers `has32`, `has64` and `contains(lft, rgt)`. The
  last one is true when `lft` defines every bitness in `rgt`.
- `vintf.enums`: `HalFormat`, `Transport`, `KernelConfigType`, `Tristate`,
  `SchemaType` and `XmlSchemaFormat` are integer enums. Each one converts to
  its label, so `str(HalFormat.AIDL)` is `"aidl"` and `str(Tristate.MODULE)`
  is `"m"`. `Level` is the FCM version. It is an `int` subclass that takes any
  value from 0 up to `Level.UNSPECIFIED`, which is 2**64 - 1 and is also the
  default. Its named values are `LEGACY`, `O`, `O_MR1`, `P`, `Q` and `R`.
- `vintf.version`: `Version` holds `major.minor` and `KernelVersion` holds
  `version.major.minor`. Both are frozen and ordered, and both reject negative
  parts. `VersionRange(major, min_minor, max_minor)` is a range under a single
  major version, such as `2.3-7`, and provides `min_ver`, `max_ver`,
  `is_single_version`, `contains`, `supported_by` and `overlaps`. The module
  also defines `META_VERSION`, which is `Version(2, 0)`.
- `vintf.transport_arch`: `TransportArch` pairs a `Transport` with an `Arch`.
  `is_valid()` is true for passthrough with an arch, and for hwbinder or an
  empty transport without one.
- `vintf.flags`: `CheckFlags` and `SerializeFlags` are immutable 32-bit flag
  sets. The fields they address are `CheckFlag` and `SerializeFlag`. Use
  `enable(...)`, `disable(...)` and `is_enabled(...)` on them. Presets such as
  `CheckFlags.DEFAULT` (AVB check off), `SerializeFlags.EVERYTHING` and
  `SerializeFlags.HALS_ONLY` are class attributes.
- `vintf.requirements`: this module has `Sepolicy`, `VendorNdk`, `Vndk` and
  `VndkVersionRange`, and also `SystemSdk`. `VendorNdk` objects compare equal
  by version alone. `SystemSdk.add_all(other)` moves the versions of `other`
  into `self`.
- `vintf.xml_file`: the `<xmlfile>` entries are `XmlFile`, `MatrixXmlFile`
  and `ManifestXmlFile`. `XmlFileGroup` is a multimap of these entries keyed
  by name, and it iterates in name order. `add_all_xml_files` raises
  `ValueError` when the `should_add_xml_file` filter rejects an entry.
- `vintf.hal_group`: `HalGroup` is an abstract multimap of HALs keyed by
  component name. Its queries over instances are `instances`,
  `instances_of_package`, `instances_of_interface` and
  `get_hidl_fq_instances`. A subclass has to implement
  `instances_of_version`. `Named` attaches a name to an object.

## Examples

```python
from vintf.arch import Arch, contains
from vintf.enums import Transport
from vintf.flags import CheckFlag, CheckFlags, SerializeFlag, SerializeFlags
from vintf.transport_arch import TransportArch
from vintf.version import Version, VersionRange

assert contains(Arch.ARCH_32_64, Arch.ARCH_64)

vr = VersionRange(2, 3, 7)
assert vr.contains(Version(2, 5))
assert vr.supported_by(Version(2, 9))
assert not vr.overlaps(VersionRange(1, 0, 9))

assert TransportArch(Transport.PASSTHROUGH, Arch.ARCH_64).is_valid()
assert not TransportArch(Transport.HWBINDER, Arch.ARCH_32).is_valid()

assert not CheckFlags.DEFAULT.is_enabled(CheckFlag.AVB)
assert SerializeFlags.HALS_ONLY.is_enabled(SerializeFlag.FQNAME)
```

## What it does not do

The package does not read or write manifest or matrix XML. It has no
manifest or compatibility-matrix classes and no compatibility checking. It
does not query a device for runtime information. `HalGroup` fixes no HAL or
instance type: you supply those, along with `instances_of_version`.

## Running the tests

```
pip install -e ".[test]"
pytest
```