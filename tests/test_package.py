"""Tests for the public export lists."""

import importlib

import pytest


@pytest.mark.parametrize(
    "module_name",
    ["linopt", "linopt.core", "linopt.optimizer", "linopt.preprocessing", "linopt.cost"],
)
def test_exported_names_exist(module_name):
    module = importlib.import_module(module_name)
    missing = [name for name in module.__all__ if not hasattr(module, name)]
    assert missing == []


def test_core_exports_only_defaults_and_enums():
    from enum import EnumMeta

    import linopt.core as core

    for name in core.__all__:
        value = getattr(core, name)
        assert (
            name.startswith("DEFAULT_") or isinstance(value, EnumMeta) or name == "as_enum"
        ), name
