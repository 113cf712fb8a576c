import logging
import types

import pytest

import fillpdf.registry_init as reg_init
from fillpdf.core.registry import Operation, Registry, register_operation, registry


@pytest.fixture(autouse=True)
def reset_init_flag():
    """Ensure initialize_registry.initialized flag is reset before each test."""
    if hasattr(reg_init.initialize_registry, "initialized"):
        delattr(reg_init.initialize_registry, "initialized")
    yield
    if hasattr(reg_init.initialize_registry, "initialized"):
        delattr(reg_init.initialize_registry, "initialized")


def test_discover_modules_imports_all(monkeypatch, caplog):
    fake_pkg = types.ModuleType("fillpdf.operations")
    fake_pkg.__path__ = ["/fake/fillpdf/operations"]

    monkeypatch.setattr(
        reg_init.pkgutil,
        "iter_modules",
        lambda path: [(None, "alpha", False), (None, "beta", False)],
    )
    imported = []
    monkeypatch.setattr(
        reg_init.importlib, "import_module", lambda name: imported.append(name)
    )

    caplog.set_level(logging.DEBUG, logger="fillpdf.registry_init")
    loaded = reg_init._discover_modules([fake_pkg], "operation")

    assert imported == ["fillpdf.operations.alpha", "fillpdf.operations.beta"]
    assert loaded == imported
    assert any("Loaded 2 operation modules" in msg for msg in caplog.messages)


def test_initialize_registry_idempotent(monkeypatch):
    calls = []
    monkeypatch.setattr(reg_init, "_discover_modules", lambda pkgs, label: calls.append(label))

    reg_init.initialize_registry()
    reg_init.initialize_registry()

    assert calls == ["operation"]
    assert reg_init.initialize_registry.initialized is True


def test_real_operations_are_registered():
    reg_init.initialize_registry()
    assert {"fill_form", "dump_data_fields", "dump_data", "generate_fdf", "generate_xfdf"} <= set(
        registry.operations
    )


def test_duplicate_registration_rejected():
    reg = Registry()
    reg.add(Operation(name="x", function=print, desc="", usage=""))
    with pytest.raises(ValueError, match="already registered"):
        reg.add(Operation(name="x", function=print, desc="", usage=""))


def test_register_operation_decorator_returns_function(monkeypatch):
    fresh = Registry()
    monkeypatch.setattr("fillpdf.core.registry.registry", fresh)

    @register_operation("noop", desc="Do nothing", usage="<input> noop", flags=("quiet",))
    def noop(input_filename, op_args, options):
        return None

    assert fresh.operations["noop"].function is noop
    assert fresh.operations["noop"].flags == ("quiet",)
