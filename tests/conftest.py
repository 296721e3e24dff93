"""
tests/conftest.py

Shared fixtures: a fetch client wired to a scripted session and a manual clock.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from app.connectors.base import FetchClient, FetchOptions, RetryPolicy
from tests.fakes import FakeSession, ManualClock


@pytest.fixture()
def sleeps() -> list[float]:
    """Delays requested by the client instead of really sleeping."""
    return []


@pytest.fixture()
def make_client(sleeps: list[float]) -> Callable[..., tuple[FetchClient, FakeSession]]:
    def _make(routes: dict[str, Any] | None = None, *, max_attempts: int = 2) -> tuple[FetchClient, FakeSession]:
        session = FakeSession(routes)
        client = FetchClient(
            options=FetchOptions(timeout_seconds=5.0, retry=RetryPolicy(max_attempts=max_attempts)),
            session=session,  # type: ignore[arg-type]
            sleep=sleeps.append,
        )
        return client, session

    return _make


@pytest.fixture()
def clock() -> ManualClock:
    return ManualClock()
