"""Tests for the public import surface of Epochal."""

from __future__ import annotations

import importlib

import pytest


@pytest.mark.parametrize(
    "module_name",
    [
        "epochal",
        "epochal.core",
        "epochal.convert",
        "epochal.format",
        "epochal.units",
        "epochal._internal",
    ],
)
def test_public_names_resolve(module_name: str) -> None:
    """Every name a package lists in __all__ is importable from it."""
    module = importlib.import_module(module_name)

    assert module.__all__
    for name in module.__all__:
        assert hasattr(module, name), f"{module_name}.{name}"


def test_top_level_reexports_are_canonical() -> None:
    """Names re-exported at the top level are the subpackage objects."""
    import epochal
    from epochal.convert.epoch import epoch_to_fields
    from epochal.core.datetime import DateTime
    from epochal.format.spec import FormatSpec, parse_format

    assert epochal.__version__ == "0.1.0"
    assert epochal.DateTime is DateTime
    assert epochal.FormatSpec is FormatSpec
    assert epochal.parse_format is parse_format
    assert epochal.epoch_to_fields is epoch_to_fields


def test_library_logger_is_silent_by_default() -> None:
    """The package logger carries a NullHandler."""
    import logging

    import epochal  # noqa: F401

    handlers = logging.getLogger("epochal").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)
