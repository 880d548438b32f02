import sys
import textwrap

import pytest

from flagyard.exceptions import DuplicateFlagError
from flagyard.importer import import_flag_modules
from flagyard.parser.registry import get_registry


@pytest.fixture
def clean_registry():
    registry = get_registry()
    registry.clear()
    yield registry
    registry.clear()


@pytest.fixture
def make_package(tmp_path, monkeypatch):
    monkeypatch.syspath_prepend(str(tmp_path))
    created = []

    def _make(name, files):
        for relative, source in files.items():
            path = tmp_path / name / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(textwrap.dedent(source), encoding="UTF-8")
        created.append(name)
        return name

    yield _make

    for module_name in list(sys.modules):
        if any(module_name == name or module_name.startswith(f"{name}.") for name in created):
            del sys.modules[module_name]


def test_import_registers_scattered_flags(clean_registry, make_package):
    name = make_package(
        "yard_scattered",
        {
            "__init__.py": "",
            "render.py": """
                from flagyard import define_flag

                BIG_MENU = define_flag("--big-menu", default=False)
            """,
            "nested/__init__.py": "",
            "nested/lang.py": """
                from flagyard import define_flag

                LANGUAGE = define_flag("--language", "-l", default="english")
            """,
        },
    )
    modules = import_flag_modules(name)
    assert modules[0].__name__ == name
    assert {module.__name__ for module in modules} == {
        name,
        f"{name}.render",
        f"{name}.nested",
        f"{name}.nested.lang",
    }
    assert "big-menu" in clean_registry
    assert clean_registry.find_by_short("l").long_name == "language"


def test_import_accepts_module_object(clean_registry, make_package):
    name = make_package(
        "yard_object",
        {"__init__.py": "", "flags.py": "from flagyard import define_flag\nX = define_flag('--x', default=1)\n"},
    )
    package = __import__(name)
    import_flag_modules(package)
    assert "x" in clean_registry


def test_import_surfaces_duplicates(clean_registry, make_package):
    name = make_package(
        "yard_dupes",
        {
            "__init__.py": "",
            "a.py": "from flagyard import define_flag\nA = define_flag('--same', default=1)\n",
            "b.py": "from flagyard import define_flag\nB = define_flag('--same', default=2)\n",
        },
    )
    with pytest.raises(DuplicateFlagError):
        import_flag_modules(name)


def test_import_rejects_plain_module():
    with pytest.raises(ValueError):
        import_flag_modules("json.decoder")


def test_import_missing_package():
    with pytest.raises(ImportError):
        import_flag_modules("flagyard_no_such_package")
