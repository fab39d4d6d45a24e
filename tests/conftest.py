"""Shared pytest fixtures for the AI Survey System test suite.

The service has no required infrastructure: the database is optional and is
only touched by the health-check probe, which the tests either mock or point
at a closed local port.

Fixture scopes
--------------
* ``settings`` (function): deterministic ``Settings`` with no integrations.
* ``app`` (function): a fresh application built around ``settings``.
* ``async_client`` (function): httpx client wrapping ``app`` in-process.
* ``client_factory`` (function): build clients for ad-hoc ``Settings`` overrides.
"""

import os
from collections.abc import AsyncGenerator, AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Any

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

# ---------------------------------------------------------------------------
# Environment bootstrap: must run before any ``src.*`` import
# ---------------------------------------------------------------------------

# ``src.main`` builds a module-level app from the environment at import time;
# make sure a developer's shell never points it at a real database.
for _var in ("DATABASE_URL", "TWILIO_ACCOUNT_SID", "OPENAI_API_KEY"):
    os.environ.pop(_var, None)

from src.config import Settings  # noqa: E402
from src.main import create_app  # noqa: E402


def make_settings(**overrides: Any) -> Settings:
    """Return ``Settings`` that ignore ``.env`` and default every integration to off."""
    values: dict[str, Any] = {
        "node_env": "test",
        "database_url": None,
        "twilio_account_sid": None,
        "openai_api_key": None,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """httpx.AsyncClient that drives the full FastAPI app in-process."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def client_factory() -> Callable[..., AbstractAsyncContextManager[AsyncClient]]:
    """Return ``factory(**settings_overrides)`` yielding a client for a fresh app.

    Usage::

        async with client_factory(twilio_account_sid="AC123") as client:
            ...
    """

    @asynccontextmanager
    async def _factory(**overrides: Any) -> AsyncIterator[AsyncClient]:
        application = create_app(make_settings(**overrides))
        async with AsyncClient(
            transport=ASGITransport(app=application), base_url="http://test"
        ) as client:
            yield client

    return _factory
