# tests/conftest.py

from __future__ import annotations

import pytest

from todo_list_app.api import TodoApi
from todo_list_app.client import TodoClient

from .fakes import BASE_URL, FakeBackend, FakeSession, Notifications


@pytest.fixture()
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture()
def session(backend: FakeBackend) -> FakeSession:
    return FakeSession(backend)


@pytest.fixture()
def api(session: FakeSession) -> TodoApi:
    return TodoApi(BASE_URL, session=session, timeout=5)


@pytest.fixture()
def notifications() -> Notifications:
    return Notifications()


@pytest.fixture()
def client(api: TodoApi, notifications: Notifications) -> TodoClient:
    return TodoClient(api, notifications)
