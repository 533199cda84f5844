"""Fixtures for server module unit tests."""

from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI


@pytest.fixture
def mock_fastapi_app():
    """Create a mock FastAPI application."""
    app = MagicMock(spec=FastAPI)
    app.state = MagicMock()
    return app


@pytest.fixture
def mock_logger():
    return MagicMock()
