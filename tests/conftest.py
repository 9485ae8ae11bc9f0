"""Shared fixtures: every test gets its own empty data directory."""

import pytest
from PySide6.QtCore import QCoreApplication


@pytest.fixture(autouse=True)
def data_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("STUDY_ORGANIZER_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("STUDY_ORGANIZER_DB", raising=False)
    return tmp_path


@pytest.fixture(scope="session")
def qapp():
    """A core application so QTimer can be started without a GUI."""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app
