import pytest

from vintf.arch import Arch, contains, has32, has64


def test_or_combines_bitness():
    combined = Arch.ARCH_32 | Arch.ARCH_64
    assert combined == Arch.ARCH_32_64
    assert has32(combined) is True
    assert has64(combined) is True


def test_in_place_or():
    arch = Arch.ARCH_EMPTY
    arch |= Arch.ARCH_64
    assert arch == Arch.ARCH_64
    assert contains(arch, Arch.ARCH_64) is True
    assert has32(arch) is False
    arch |= Arch.ARCH_32
    assert arch == Arch.ARCH_32_64
    assert contains(arch, Arch.ARCH_32) is True


@pytest.mark.parametrize(
    "lft, rgt, expected",
    [
        (Arch.ARCH_32_64, Arch.ARCH_32_64, True),
        (Arch.ARCH_32_64, Arch.ARCH_64, True),
        (Arch.ARCH_32_64, Arch.ARCH_32, True),
        (Arch.ARCH_32_64, Arch.ARCH_EMPTY, True),
        (Arch.ARCH_32, Arch.ARCH_EMPTY, True),
        (Arch.ARCH_64, Arch.ARCH_EMPTY, True),
        (Arch.ARCH_32, Arch.ARCH_32_64, False),
        (Arch.ARCH_64, Arch.ARCH_32_64, False),
        (Arch.ARCH_32, Arch.ARCH_64, False),
        (Arch.ARCH_64, Arch.ARCH_32, False),
        (Arch.ARCH_EMPTY, Arch.ARCH_32, False),
        (Arch.ARCH_EMPTY, Arch.ARCH_64, False),
    ],
)
def test_contains(lft, rgt, expected):
    assert contains(lft, rgt) is expected


@pytest.mark.parametrize(
    "arch, is32, is64",
    [
        (Arch.ARCH_EMPTY, False, False),
        (Arch.ARCH_32, True, False),
        (Arch.ARCH_64, False, True),
        (Arch.ARCH_32_64, True, True),
    ],
)
def test_has32_has64(arch, is32, is64):
    assert has32(arch) is is32
    assert has64(arch) is is64


@pytest.mark.parametrize(
    "arch, text",
    [
        (Arch.ARCH_EMPTY, ""),
        (Arch.ARCH_32, "32"),
        (Arch.ARCH_64, "64"),
        (Arch.ARCH_32_64, "32+64"),
    ],
)
def test_string_form(arch, text):
    assert str(arch) == text
    assert f"{arch}" == text


def test_every_arch_contains_itself():
    for arch in (Arch.ARCH_EMPTY, Arch.ARCH_32, Arch.ARCH_64, Arch.ARCH_32_64):
        assert contains(arch, arch)