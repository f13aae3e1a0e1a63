"""Shared pytest fixtures and test helpers for annoguide tests."""

from __future__ import annotations

import copy
import functools
from pathlib import Path
from typing import Any

import httpx
import pytest
from click.testing import CliRunner

from annoguide.config.settings import AppSettings
from annoguide.infrastructure.http import ApiClient

# Trimmed copies of GET /users/2 and GET /posts/1 from jsonplaceholder.
USER_PAYLOAD: dict[str, Any] = {
    "id": 2,
    "name": "Ervin Howell",
    "username": "Antonette",
    "email": "Shanna@melissa.tv",
    "address": {
        "street": "Victor Plains",
        "suite": "Suite 879",
        "city": "Wisokyburgh",
        "zipcode": "90566-7771",
        "geo": {"lat": "-43.9509", "lng": "-34.4618"},
    },
    "phone": "010-692-6593 x09125",
    "website": "anastasia.net",
    "company": {"name": "Deckow-Crist"},
}

POST_PAYLOAD: dict[str, Any] = {
    "userId": 1,
    "id": 1,
    "title": "sunt aut facere repellat provident",
    "body": "quia et suscipit\nsuscipit recusandae",
}


class FakeApi:
    """Route table behind an ``httpx.MockTransport`` that records requests."""

    def __init__(self, user: dict[str, Any], post: dict[str, Any]) -> None:
        self.routes: dict[str, tuple[int, Any]] = {
            "/users/2": (200, user),
            "/posts/1": (200, post),
        }
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self.routes.get(request.url.path, (404, {}))
        return httpx.Response(status, json=body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def user_payload() -> dict[str, Any]:
    return copy.deepcopy(USER_PAYLOAD)


@pytest.fixture
def post_payload() -> dict[str, Any]:
    return copy.deepcopy(POST_PAYLOAD)


@pytest.fixture
def fake_api(user_payload: dict[str, Any], post_payload: dict[str, Any]) -> FakeApi:
    return FakeApi(user_payload, post_payload)


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> AppSettings:
    """Default settings with no config file and a test token."""
    monkeypatch.delenv("ANNOGUIDE_CONFIG", raising=False)
    monkeypatch.setenv("ANNOGUIDE_API__AUTH_TOKEN", "test-token")
    return AppSettings.from_cli(start=tmp_path)


@pytest.fixture
def api_client(settings: AppSettings, fake_api: FakeApi) -> ApiClient:
    client = ApiClient(settings.api, transport=fake_api.transport)
    try:
        yield client
    finally:
        client.close()


@pytest.fixture
def _isolated_cli(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, fake_api: FakeApi) -> None:
    """Run the CLI from an empty directory against the fake API.

    Use via ``@pytest.mark.usefixtures("_isolated_cli")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ANNOGUIDE_CONFIG", raising=False)
    monkeypatch.setenv("ANNOGUIDE_API__AUTH_TOKEN", "test-token")
    monkeypatch.setattr(
        "annoguide.infrastructure.http.ApiClient",
        functools.partial(ApiClient, transport=fake_api.transport),
    )
