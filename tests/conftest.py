"""Shared test fixtures for zuglang-tools tests."""

from __future__ import annotations

import pytest
from starlette.testclient import TestClient

from zuglang_tools.server.app import create_app
from zuglang_tools.server.router import ExecutionRouter

BASE_URL = "https://zuglang.example.net/api"


@pytest.fixture
def router() -> ExecutionRouter:
    """ExecutionRouter over all Zuglang tools."""
    return ExecutionRouter()


@pytest.fixture
def client(router: ExecutionRouter) -> TestClient:
    """TestClient for an anonymous app with a fixed discovery base URL."""
    return TestClient(create_app(router, base_url=BASE_URL))
