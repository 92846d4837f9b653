"""Pytest fixtures for htmx prototype tests."""

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from htmx_prototype.config import Settings
from htmx_prototype.counter import CounterState
from htmx_prototype.main import create_app


@pytest.fixture()
def settings() -> Settings:
    """Return default settings, independent of the process environment cache."""
    return Settings()


@pytest.fixture()
def counter() -> CounterState:
    return CounterState()


@pytest.fixture()
def app(settings: Settings, counter: CounterState) -> FastAPI:
    """Return a freshly built application with a zero counter."""
    return create_app(settings, counter=counter)


@pytest_asyncio.fixture()
async def async_client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Provide an `httpx.AsyncClient` wired to the application in-process."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        yield client
