"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator

import pytest

from prescriptivism.core.cards import CardCatalog
from prescriptivism.core.targets import TargetEnumerator
from prescriptivism.core.validation import Validator

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for bridge tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture(scope="session")
def catalog() -> CardCatalog:
    return CardCatalog.standard()


@pytest.fixture(scope="session")
def validator(catalog: CardCatalog) -> Validator:
    return Validator(catalog)


@pytest.fixture(scope="session")
def enumerator(validator: Validator) -> TargetEnumerator:
    return TargetEnumerator(validator)
