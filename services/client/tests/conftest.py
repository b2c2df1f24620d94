"""Fixtures for the dispatcher client."""

from typing import Any

import pytest

from policy_mail_client import ClientConfig, DispatcherTransport, PolicyMailClient


class FakeResponse:
    def __init__(self, status_code: int = 200, body: Any = None):
        self.status_code = status_code
        self._body = body

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    @property
    def text(self) -> str:
        return str(self._body)

    def json(self) -> Any:
        return self._body


class FakeSession:
    """Stands in for requests.Session; replies from a queue and records posts."""

    def __init__(self):
        self.replies: list[FakeResponse | Exception] = []
        self.posts: list[dict[str, Any]] = []
        self.closed = False

    def reply(self, status_code: int = 200, body: Any = None) -> None:
        self.replies.append(FakeResponse(status_code, body))

    def fail(self, error: Exception) -> None:
        self.replies.append(error)

    def post(self, url, json=None, data=None, files=None, timeout=None):
        self.posts.append(
            {"url": url, "json": json, "data": data, "files": files, "timeout": timeout}
        )
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(base_url="https://mail.agency.test/", api_path="/api/gemini")


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def sleeps() -> list[float]:
    return []


@pytest.fixture
def client(config, session, sleeps) -> PolicyMailClient:
    transport = DispatcherTransport(config, session=session)
    return PolicyMailClient(transport=transport, config=config, sleep=sleeps.append)
