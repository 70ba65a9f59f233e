# tests/conftest.py

from __future__ import annotations

import logging
from typing import AsyncIterator

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from quest_log.api.main import create_app
from quest_log.client import TaskAPIClient
from quest_log.controller import QuestLogController
from quest_log.settings import Settings

from .fakes import BASE_URL


@pytest.fixture()
def settings() -> Settings:
    """
    Explicit settings, so tests never depend on the caller's environment.
    """
    return Settings(
        backend_url=BASE_URL,
        request_timeout=5.0,
        log_level="DEBUG",
        cors_allow_origins=["*"],
        host="127.0.0.1",
        port=8000,
    )


@pytest.fixture()
def app(settings: Settings) -> FastAPI:
    """A fresh reference service with empty storage."""
    return create_app(settings)


@pytest_asyncio.fixture()
async def api_client(app: FastAPI) -> AsyncIterator[TaskAPIClient]:
    """TaskAPIClient wired to the reference service in-process."""
    async with TaskAPIClient(BASE_URL, transport=httpx.ASGITransport(app=app)) as client:
        yield client


@pytest_asyncio.fixture()
async def controller(api_client: TaskAPIClient) -> AsyncIterator[QuestLogController]:
    """Controller after its initial refresh against the reference service."""
    async with QuestLogController(client=api_client) as ctl:
        yield ctl


@pytest.fixture()
def restore_root_logging():
    """setup_logging replaces root handlers; put pytest's back afterwards."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for h in list(root.handlers):
        root.removeHandler(h)
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)
