from __future__ import annotations

import os

import pytest
from flask import Flask
from flask.testing import FlaskClient

from hello_world.app import create_app
from hello_world.core.config import Settings


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep exported HELLO_WORLD_* variables and any local .env out of tests."""
    for name in list(os.environ):
        if name.upper().startswith("HELLO_WORLD_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture()
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture()
def app(settings: Settings) -> Flask:
    flask_app = create_app(settings)
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
