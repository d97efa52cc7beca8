import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt5.QtWidgets import QApplication  # noqa: E402

from clip_viewer.models.clip_window import ClipWindow  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    """Single QApplication shared by every Qt-dependent test."""
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def window():
    """The 600x400 window used by the default scene."""
    return ClipWindow(xmin=100, xmax=700, ymin=100, ymax=500)
