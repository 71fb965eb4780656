import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]

# Make the package importable without installing
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from shaderlab.processing.registry import (  # noqa: E402
    CATEGORY_BLUR,
    CATEGORY_COLOR_EFFECT,
    FilterDefinition,
    FilterInput,
    FilterRegistry,
)


def echo_apply(image, params):
    """Stand-in for pixel work: returns what the filter was given."""
    return {"image": image, "params": dict(params)}


def fake_definitions():
    return [
        FilterDefinition(
            name="Soften",
            display_name="Soften",
            categories=[CATEGORY_BLUR],
            apply=echo_apply,
            inputs=[
                FilterInput("radius", "Radius", 4.0, 0.0, 50.0),
                FilterInput("kernel", "Kernel", "gaussian"),
            ],
        ),
        FilterDefinition(
            name="Smear",
            display_name="",
            categories=[CATEGORY_BLUR],
            apply=echo_apply,
            inputs=[
                FilterInput("length", "Length", 20),
                FilterInput("wrap", "Wrap", True),
            ],
        ),
        FilterDefinition(
            name="Tint",
            display_name="Tint",
            categories=[CATEGORY_COLOR_EFFECT],
            apply=echo_apply,
            inputs=[FilterInput("amount", "Amount", 0.5, 0.0, 1.0)],
        ),
    ]


@pytest.fixture()
def fake_registry() -> FilterRegistry:
    return FilterRegistry(fake_definitions())


@pytest.fixture(scope="session")
def qapp():
    pytest.importorskip("PySide6.QtWidgets", reason="Qt widgets not available", exc_type=ImportError)
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app
