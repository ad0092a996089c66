"""Fixtures compartidos: árboles chicos, superficie grabadora y app Qt offscreen."""
import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from rueda.core.models import Node
from rueda.render.surface import RecordingSurface

RUEDA_ENV = (
    "RUEDA_WIDTH", "RUEDA_HEIGHT", "RUEDA_SCALE",
    "RUEDA_LINE_WIDTH", "RUEDA_FONT_DIVISOR", "RUEDA_FONT_FAMILY",
    "RUEDA_STROKE", "RUEDA_TEXT_COLOR", "RUEDA_CENTER_COLOR", "RUEDA_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_rueda_env(monkeypatch):
    """Cada test arranca sin RUEDA_* y lo que escriba se deshace al terminar."""
    for key in RUEDA_ENV:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)


def tree(spec):
    """{'A': {'a1': ['x', 'y']}} -> Node (raíz 'root')."""
    return Node("root", tuple(
        Node(cat, tuple(Node(sub, tuple(Node(leaf) for leaf in leaves)) for sub, leaves in subs.items()))
        for cat, subs in spec.items()
    ))


@pytest.fixture
def two_by_two():
    """2 categorías, 1 subcategoría cada una, 2 hojas cada subcategoría."""
    return tree({"Alpha": {"a1": ["x", "y"]}, "Beta": {"b1": ["z", "w"]}})


@pytest.fixture
def single_leaf():
    return tree({"Only": {"sub": ["leaf"]}})


@pytest.fixture
def recording():
    return RecordingSurface()


@pytest.fixture(scope="session")
def qt_app():
    from PySide6.QtGui import QGuiApplication
    from rueda.render.qt_surface import ensure_qt_app

    ensure_qt_app()
    return QGuiApplication.instance()


@pytest.fixture
def make_tree():
    return tree
