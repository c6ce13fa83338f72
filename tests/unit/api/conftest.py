"""Fixtures for API route tests."""

from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from roster.api.app import register_exception_handlers
from roster.api.dependencies import get_student_store
from roster.api.routes import register_routes
from roster.config import get_settings
from roster.config.models.imports import ImportConfig
from roster.config.settings import Settings
from roster.students.stores import InMemoryStudentStore


@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    """Staging directory for uploads made during a test."""
    return tmp_path / "uploads"


@pytest.fixture
def settings(upload_dir: Path) -> Settings:
    """Settings with uploads staged under the test's tmp_path."""
    return Settings(imports=ImportConfig(upload_dir=upload_dir))


@pytest.fixture
def store() -> InMemoryStudentStore:
    """Create a fresh in-memory student store."""
    return InMemoryStudentStore()


@pytest.fixture
def app(store: InMemoryStudentStore, settings: Settings) -> FastAPI:
    """Create a test FastAPI application."""
    app = FastAPI()
    register_exception_handlers(app)
    register_routes(app)

    app.dependency_overrides[get_student_store] = lambda: store
    app.dependency_overrides[get_settings] = lambda: settings

    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a test client."""
    return TestClient(app, raise_server_exceptions=False)
