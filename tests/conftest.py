"""Shared fixtures for the calculator service tests."""
from flask import Flask
from flask.testing import FlaskClient
import pytest

from calculator_service.server.app import create_app
from calculator_service.server.settings import ServiceSettings


@pytest.fixture
def app() -> Flask:
    """Application built with default settings in testing mode."""
    application = create_app(ServiceSettings())
    application.config.update(TESTING=True)
    return application


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Flask test client for the application."""
    return app.test_client()
