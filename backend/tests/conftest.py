from __future__ import annotations

import pytest
from click.testing import CliRunner
from fastapi.testclient import TestClient

from backend.app.config import AppConfig
from backend.app.main import create_app


@pytest.fixture()
def config() -> AppConfig:
    return AppConfig()


@pytest.fixture()
def client(config: AppConfig):
    app = create_app(config)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def cli_runner() -> CliRunner:
    return CliRunner()
