from dataclasses import dataclass, field

import pytest

from vintf.enums import HalFormat
from vintf.hal_group import HalGroup, Named
from vintf.version import Version


@dataclass(frozen=True)
class FakeInstance:
    package: str
    version: Version
    interface: str
    instance: str
    format: HalFormat = HalFormat.HIDL


@dataclass
class FakeHal:
    name: str
    format: HalFormat = HalFormat.HIDL
    entries: list = field(default_factory=list)

    def instances(self):
        yield from self.entries


class Group(HalGroup):
    def instances_of_version(self, fmt, package, version):
        for inst in self.instances_of_package(fmt, package):
            if inst.version.minor_at_least(version):
                yield inst


class RejectingGroup(Group):
    def should_add(self, hal):
        return hal.name != "bad"


def make_hal(name, fmt=HalFormat.HIDL, version=Version(1, 0), specs=(("IFoo", "default"),)):
    return FakeHal(
        name,
        fmt,
        [FakeInstance(name, version, intf, inst, fmt) for intf, inst in specs],
    )


def test_named_holds_name_and_object():
    named = Named("manifest.xml", 42)
    assert named.name == "manifest.xml"
    assert named.object == 42


def test_hal_group_is_abstract():
    with pytest.raises(TypeError):
        HalGroup()


def test_hals_are_ordered_by_name_then_insertion():
    group = Group()
    b = make_hal("b")
    a1 = make_hal("a")
    a2 = make_hal("a", version=Version(2, 0))
    for hal in (b, a1, a2):
        assert group.add(hal)
    assert list(group.hals()) == [a1, a2, b]
    assert group.hals_named("a") == [a1, a2]
    assert group.hals_named("missing") == []


def test_get_any_hal():
    group = Group()
    hal = make_hal("a", version=Version(1, 2))
    group.add(hal)
    assert group.get_any_hal("a") is hal
    assert group.get_any_hal("missing") is None


def test_should_add_rejects():
    group = RejectingGroup()
    assert group.add(make_hal("bad", version=Version(1, 0))) is False
    assert list(group.hals()) == []


def test_add_all_hals_moves_everything():
    src = Group()
    src.add(make_hal("x", version=Version(1, 0)))
    src.add(make_hal("y", version=Version(1, 0)))
    dst = Group()
    dst.add(make_hal("z", version=Version(1, 0)))
    dst.add_all_hals(src)
    assert [h.name for h in dst.hals()] == ["x", "y", "z"]
    assert list(src.hals()) == []


def test_add_all_hals_conflict_raises():
    src = Group()
    src.add(make_hal("bad", version=Version(1, 0)))
    dst = RejectingGroup()
    with pytest.raises(ValueError, match='HAL "bad" has a conflict.'):
        dst.add_all_hals(src)
    assert [h.name for h in src.hals()] == ["bad"]


def test_instances_filtered_by_format():
    group = Group()
    hidl = make_hal("a.h.foo", version=Version(1, 0))
    aidl = make_hal("a.h.bar", fmt=HalFormat.AIDL, version=Version(1, 0))
    group.add(hidl)
    group.add(aidl)
    assert len(list(group.instances())) == 2
    assert list(group.instances(HalFormat.AIDL)) == aidl.entries
    assert list(group.instances(HalFormat.HIDL)) == hidl.entries


def test_instances_of_package_skips_other_format():
    group = Group()
    group.add(make_hal("a.h.foo", fmt=HalFormat.AIDL, version=Version(1, 0)))
    hidl = make_hal("a.h.foo", version=Version(1, 0))
    group.add(hidl)
    assert list(group.instances_of_package(HalFormat.HIDL, "a.h.foo")) == hidl.entries


def test_instances_of_version_returns_newer_minor():
    group = Group()
    hal = make_hal("a.h.foo", version=Version(1, 1))
    group.add(hal)
    assert list(group.instances_of_version(HalFormat.HIDL, "a.h.foo", Version(1, 0))) == hal.entries
    assert list(group.instances_of_version(HalFormat.HIDL, "a.h.foo", Version(2, 0))) == []


def test_instances_of_interface():
    group = Group()
    hal = make_hal("a.h.foo", specs=(("IFoo", "default"), ("IBar", "default")))
    group.add(hal)
    result = list(
        group.instances_of_interface(HalFormat.HIDL, "a.h.foo", Version(1, 0), "IBar")
    )
    assert [i.interface for i in result] == ["IBar"]


def test_get_hidl_fq_instances():
    group = Group()
    group.add(make_hal("a.h.foo", specs=(("IFoo", "default"), ("IBar", "other"))))
    group.add(make_hal("a.h.foo", fmt=HalFormat.AIDL))
    everything = group.get_hidl_fq_instances("a.h.foo", Version(1, 0))
    assert {(i.interface, i.instance) for i in everything} == {
        ("IFoo", "default"),
        ("IBar", "other"),
    }
    assert all(i.format == HalFormat.HIDL for i in everything)
    only_foo = group.get_hidl_fq_instances("a.h.foo", Version(1, 0), "IFoo")
    assert [i.instance for i in only_foo] == ["default"]