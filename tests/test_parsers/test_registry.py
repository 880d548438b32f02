from pathlib import Path

import pytest

from flagyard.exceptions import DuplicateFlagError, RegistryClosedError
from flagyard.parser.flag import Flag
from flagyard.parser.registry import FlagRegistry, define_flag, get_registry


@pytest.fixture
def clean_registry():
    registry = get_registry()
    registry.clear()
    yield registry
    registry.clear()


def test_register_and_lookup():
    registry = FlagRegistry()
    flag = registry.register(Flag.declare("--big-menu", "-b", default=False))
    assert registry.find_by_long("big-menu") is flag
    assert registry.find_by_long("--big-menu") is flag
    assert registry.find_by_short("b") is flag
    assert registry.find_by_short("-b") is flag
    assert registry.find_by_long("nope") is None
    assert registry.find_by_short("z") is None
    assert len(registry) == 1
    assert "--big-menu" in registry
    assert "big-menu" in registry
    assert "nope" not in registry
    assert 42 not in registry


def test_duplicate_long_name_rejected():
    registry = FlagRegistry()
    define_flag("--language", "-l", default="english", registry=registry)
    with pytest.raises(DuplicateFlagError) as excinfo:
        define_flag("--language", default="french", registry=registry)
    assert "--language" in str(excinfo.value)
    assert len(registry) == 1
    assert registry.find_by_long("language").default == "english"


def test_duplicate_short_name_rejected():
    registry = FlagRegistry()
    define_flag("--language", "-l", default="english", registry=registry)
    with pytest.raises(DuplicateFlagError) as excinfo:
        define_flag("--level", "-l", default=3, registry=registry)
    assert "-l" in str(excinfo.value)
    assert "--language" in str(excinfo.value)
    assert len(registry) == 1
    assert registry.find_by_long("level") is None


def test_flags_without_short_names_do_not_clash():
    registry = FlagRegistry()
    define_flag("--one", default=1, registry=registry)
    define_flag("--two", default=2, registry=registry)
    assert len(registry) == 2


def test_sealed_registry_rejects_registration():
    registry = FlagRegistry()
    define_flag("--one", default=1, registry=registry)
    registry.seal()
    assert registry.sealed
    with pytest.raises(RegistryClosedError):
        define_flag("--two", default=2, registry=registry)
    assert len(registry) == 1


def test_all_keeps_registration_order():
    registry = FlagRegistry()
    for name in ("zeta", "alpha", "mid"):
        define_flag(name, default="", registry=registry)
    assert [flag.long_name for flag in registry.all()] == ["zeta", "alpha", "mid"]
    assert [flag.long_name for flag in registry] == ["zeta", "alpha", "mid"]


def test_sorted_is_case_sensitive():
    registry = FlagRegistry()
    for name in ("beta", "alpha", "Zeta", "Alpha"):
        define_flag(name, default="", registry=registry)
    assert [flag.long_name for flag in registry.sorted()] == [
        "Alpha",
        "Zeta",
        "alpha",
        "beta",
    ]


def test_to_dict_skips_flags_without_values():
    registry = FlagRegistry()
    define_flag("--big-menu", default=False, registry=registry)
    file_flag = define_flag("--file", type=Path, registry=registry)
    assert registry.to_dict() == {"big_menu": False}
    file_flag._store(Path("/tmp/x"))
    assert registry.to_dict() == {"big_menu": False, "file": Path("/tmp/x")}


def test_reset_values_and_clear():
    registry = FlagRegistry()
    flag = define_flag("--count", default=0, registry=registry)
    flag._store(4)
    registry.seal()
    registry.reset_values()
    assert not flag.is_present()
    assert registry.sealed

    registry.clear()
    assert len(registry) == 0
    assert not registry.sealed
    define_flag("--count", default=0, registry=registry)


def test_str():
    registry = FlagRegistry()
    define_flag("--count", "-c", default=0, registry=registry)
    define_flag("--name", default="", registry=registry)
    assert str(registry) == "FlagRegistry(flags=2, short=1, present=0, sealed=False)"
    assert repr(registry) == str(registry)


def test_define_flag_uses_global_registry(clean_registry):
    flag = define_flag("--global-flag", "-g", default=True)
    assert get_registry() is clean_registry
    assert clean_registry.find_by_long("global-flag") is flag
    with pytest.raises(DuplicateFlagError):
        define_flag("--global-flag", default=False)
