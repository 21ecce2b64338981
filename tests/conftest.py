import json
import os
from dataclasses import dataclass
from typing import Any

import pytest

from esclient.config.settings import get_settings
from esclient.repositories.base import Server
from esclient.resources import transport as transport_module
from esclient.resources.transport import BaseTransport, Reply

_ENV_VARS_TO_ISOLATE = ["ES_SERVER", "ES_TIMEOUT", "LOG_LEVEL"]


@dataclass
class SentRequest:
    url: str
    method: str
    body: bytes | None

    def json(self) -> Any:
        return json.loads(self.body) if self.body is not None else None


class RecordingTransport(BaseTransport):
    """Records every request and answers from a queue of replies (200 {} when empty)."""

    def __init__(self) -> None:
        self.requests: list[SentRequest] = []
        self.replies: list[Reply] = []
        self.closed = False

    def queue(self, status_code: int, body: bytes | dict | str = b"") -> None:
        if isinstance(body, dict):
            body = json.dumps(body).encode("utf-8")
        elif isinstance(body, str):
            body = body.encode("utf-8")
        self.replies.append(Reply(status_code=status_code, body=body))

    def send(self, url: str, method: str, body: bytes | None = None) -> Reply:
        self.requests.append(SentRequest(url=url, method=method, body=body))
        if self.replies:
            return self.replies.pop(0)
        return Reply(status_code=200, body=b"{}")

    def close(self) -> None:
        self.closed = True

    @property
    def last(self) -> SentRequest:
        return self.requests[-1]


@pytest.fixture(autouse=True)
def env_isolation():
    """Isolate environment variables and cached settings/transport between tests."""
    backup = {k: os.environ.get(k) for k in _ENV_VARS_TO_ISOLATE}
    get_settings.cache_clear()
    transport_module._transport = None
    try:
        yield
    finally:
        for k, v in backup.items():
            if v is None:
                os.environ.pop(k, None)
            else:
                os.environ[k] = v
        get_settings.cache_clear()
        transport_module._transport = None


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def server() -> Server:
    return Server(url="http://es.test:9200")


def evaluate(filter_json: dict[str, Any], doc: dict[str, Any]) -> bool:
    """Reference matching semantics for serialized and/or/match_all/exists/bool/term filters."""
    kinds = [k for k in filter_json if k != "_cache"]
    assert len(kinds) == 1, filter_json
    kind = kinds[0]
    body = filter_json[kind]
    if kind == "match_all":
        return True
    if kind == "and":
        return all(evaluate(f, doc) for f in body)
    if kind == "or":
        return any(evaluate(f, doc) for f in body)
    if kind == "exists":
        return doc.get(body["field"]) is not None
    if kind == "term":
        ((field, value),) = body.items()
        return doc.get(field) == value
    if kind == "bool":
        if "must" in body:
            return evaluate(body["must"], doc)
        if "must_not" in body:
            return not evaluate(body["must_not"], doc)
        return any(evaluate(t, doc) for t in body["should"])
    raise AssertionError(f"no reference semantics for {kind!r}")


@pytest.fixture
def matches():
    return evaluate
