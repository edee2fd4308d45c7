"""Root conftest — shared app and client fixtures.

Invariants:
    - Every test gets a freshly built app (own ServiceConfig, own uptime)
    - Requests go through httpx's ASGI transport; no socket is opened

Design Decisions:
    - create_app() per test over the module-level app: seeds stay isolated,
      so tests can run in parallel
"""

import os

import pytest
from httpx import ASGITransport, AsyncClient

# Keep a developer's .env or shell from changing test behavior
os.environ.setdefault("LOG_FORMAT", "text")

from cicd_sample.main import create_app  # noqa: E402


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
