"""Top-level pytest configuration for viewfold."""

import os

import pytest

from tests.fake_logger import RecordingLogger
from tests.number_domain import even_number_view, odd_number_view
from viewfold.logging.config import LoggingSettings
from viewfold.projections.config import ProjectionSettings


@pytest.fixture(autouse=True)
def clear_viewfold_env(monkeypatch):
    """Keep VIEWFOLD_* variables from the outer environment out of the tests."""
    for key in list(os.environ):
        if key.startswith("VIEWFOLD_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def even_view():
    return even_number_view()


@pytest.fixture
def odd_view():
    return odd_number_view()


@pytest.fixture
def combined_view(even_view, odd_view):
    return even_view.combine_views(odd_view)


@pytest.fixture
def recording_logger():
    return RecordingLogger()


@pytest.fixture
def quiet_logging_settings():
    return LoggingSettings(console_enabled=False)


@pytest.fixture
def projection_settings():
    return ProjectionSettings()
