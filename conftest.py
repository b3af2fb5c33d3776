"""
Root conftest for the pytest test suite.

This file contains the main fixtures that are used across the entire test suite.

Each test runs against a fresh, isolated in-memory SQLite database, created by
an async autouse fixture in the same event loop as the test itself. HTTP tests
drive the ASGI app through httpx in that same loop, so the app sees the test
database without going through its production lifespan.

Key Fixtures:
- `initialize_test_db`: (autouse) Creates a fresh DB schema for each test.
- `app_for_testing`: Provides the FastAPI application instance with its production
  lifespan disabled to allow `initialize_test_db` to manage the test DB.
- `client`: Provides an httpx AsyncClient bound to the application.
- `api`: The API prefix the routers are mounted under.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Generator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise

from orderdesk.core import config
from orderdesk.main import app as actual_app


@pytest_asyncio.fixture(scope="function", autouse=True)
async def initialize_test_db() -> AsyncGenerator[None, None]:
    """
    Initializes the database for each test function.

    This async, autouse fixture creates a fresh in-memory database and schema
    for each test and tears it down afterwards.
    """
    await Tortoise.init(config=config.tortoise_config("sqlite://:memory:"))
    await Tortoise.generate_schemas()

    yield

    await Tortoise.close_connections()


@pytest.fixture(scope="function")
def app_for_testing() -> Generator[FastAPI, Any, None]:
    """
    Provides the FastAPI application with its production lifespan replaced by
    a no-op, so nothing re-initialises Tortoise against the real database.
    """
    original_lifespan = actual_app.router.lifespan_context

    @asynccontextmanager
    async def dummy_lifespan(app: FastAPI):
        yield

    actual_app.router.lifespan_context = dummy_lifespan

    yield actual_app

    # Restore the original lifespan context after the test
    actual_app.router.lifespan_context = original_lifespan


@pytest_asyncio.fixture(scope="function")
async def client(app_for_testing: FastAPI) -> AsyncGenerator[AsyncClient, Any]:
    """
    Provides an httpx AsyncClient that calls the app in-process.
    """
    transport = ASGITransport(app=app_for_testing)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture(scope="session")
def api() -> str:
    return config.API_PREFIX
