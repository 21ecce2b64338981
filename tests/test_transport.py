"""OpenSearchTransport request mapping, failure wrapping, shared transport lifecycle, and health checks."""

import threading
import time

import pytest
from opensearchpy import Urllib3HttpConnection
from opensearchpy.exceptions import ConnectionError as OSConnectionError
from opensearchpy.exceptions import ConnectionTimeout as OSConnectionTimeout

from esclient import (
    OpenSearchTransport,
    Server,
    TransportFailure,
    close_transport,
    get_status,
    get_transport,
    index_exists,
    ping_server,
)
from esclient.config.settings import get_settings
from esclient.config.transport import get_transport_config

STATUS_BODY = {
    "ok": True,
    "status": 200,
    "name": "Blackout",
    "version": {
        "number": "0.90.7",
        "build_hash": "36897d07",
        "build_timestamp": "2013-11-13T12:06:54Z",
        "build_snapshot": False,
        "lucene_version": "4.5.1",
    },
    "tagline": "You Know, for Search",
}


@pytest.fixture
def performed(monkeypatch):
    """Replace the urllib3 connection's request method; records calls and answers from `responses`."""
    calls = []
    responses = []

    def fake_perform_request(self, method, url, params=None, body=None, timeout=None, ignore=(), headers=None):
        calls.append({"host": self.host, "method": method, "url": url, "body": body, "ignore": ignore})
        result = responses.pop(0) if responses else (200, {}, "{}")
        if isinstance(result, Exception):
            raise result
        return result

    monkeypatch.setattr(Urllib3HttpConnection, "perform_request", fake_perform_request)
    return calls, responses


def test_send_splits_url_into_connection_and_path(performed):
    calls, responses = performed
    responses.append((201, {}, '{"ok":true}'))
    reply = OpenSearchTransport().send("http://es.test:9200/twitter/tweet/1", "PUT", b'{"a":1}')
    assert reply.status_code == 201
    assert reply.body == b'{"ok":true}'
    assert calls[0]["host"] == "http://es.test:9200"
    assert (calls[0]["method"], calls[0]["url"], calls[0]["body"]) == ("PUT", "/twitter/tweet/1", b'{"a":1}')


def test_send_keeps_query_string_and_defaults_ports(performed):
    calls, _ = performed
    transport = OpenSearchTransport()
    transport.send("http://es.test/events/_search?q=hostname:localhost&size=1", "GET")
    transport.send("https://secure.test/", "HEAD")
    assert calls[0]["host"] == "http://es.test:80"
    assert calls[0]["url"] == "/events/_search?q=hostname:localhost&size=1"
    assert calls[1]["host"] == "https://secure.test:443"
    assert calls[1]["url"] == "/"


def test_error_statuses_come_back_as_replies(performed):
    calls, responses = performed
    responses.append((404, {}, '{"error":"IndexMissingException[[nope] missing]","status":404}'))
    reply = OpenSearchTransport().send("http://es.test:9200/nope", "GET")
    assert reply.status_code == 404
    assert reply.is_error
    assert b"IndexMissingException" in reply.body
    assert 404 in calls[0]["ignore"] and 500 in calls[0]["ignore"]


def test_connections_are_reused_per_host(performed):
    transport = OpenSearchTransport()
    transport.send("http://es.test:9200/a", "GET")
    transport.send("http://es.test:9200/b", "GET")
    transport.send("http://other.test:9200/c", "GET")
    assert len(transport._connections) == 2
    transport.close()
    assert transport._connections == {}


@pytest.mark.parametrize("error", [OSConnectionError("N/A", "refused", None), OSConnectionTimeout("TIMEOUT", "slow", None)])
def test_network_failures_raise_transport_failure(performed, error):
    _, responses = performed
    responses.append(error)
    with pytest.raises(TransportFailure) as excinfo:
        OpenSearchTransport().send("http://es.test:9200/twitter", "HEAD")
    assert excinfo.value.cause is error


def test_exists_propagates_network_failure(performed):
    _, responses = performed
    responses.append(OSConnectionError("N/A", "refused", None))
    with pytest.raises(TransportFailure):
        index_exists(Server(url="http://es.test:9200"), "twitter", transport=OpenSearchTransport())


def test_shared_transport_uses_settings(monkeypatch):
    monkeypatch.setenv("ES_TIMEOUT", "7")
    assert get_transport_config() == {"server": "http://localhost:9200", "timeout": 7}
    shared = get_transport()
    assert isinstance(shared, OpenSearchTransport)
    assert shared.timeout == 7
    assert get_transport() is shared
    close_transport()
    assert get_transport() is not shared


def test_close_transport_closes_shared_instance(transport, monkeypatch):
    from esclient.resources import transport as transport_module

    monkeypatch.setattr(transport_module, "_transport", transport)
    close_transport()
    assert transport.closed
    assert transport_module._transport is None


def test_settings_defaults_and_validation(monkeypatch):
    settings = get_settings()
    assert settings.es_server == "http://localhost:9200"
    assert settings.es_timeout == 30
    assert settings.log_level == "INFO"
    monkeypatch.setenv("ES_TIMEOUT", "0")
    get_settings.cache_clear()
    with pytest.raises(ValueError):
        get_settings()


def test_get_status(server, transport):
    transport.queue(200, STATUS_BODY)
    status = get_status(server, transport=transport)
    assert (transport.last.method, transport.last.url) == ("GET", "http://es.test:9200")
    assert status.version.lucene_version == "4.5.1"


def test_ping_server(server, transport):
    transport.queue(200, STATUS_BODY)
    assert ping_server(server, transport=transport) == {"ok": True}

    transport.queue(503, "<html>unavailable</html>")
    assert ping_server(server, transport=transport) == {"ok": False, "error": "unexpected_response"}


def test_ping_server_connection_failure(server, performed):
    _, responses = performed
    responses.append(OSConnectionError("N/A", "refused", None))
    assert ping_server(server, transport=OpenSearchTransport()) == {"ok": False, "error": "connection_failed"}


def test_concurrent_first_use_builds_one_connection(performed, monkeypatch):
    built = []
    original_init = Urllib3HttpConnection.__init__

    def slow_init(self, *args, **kwargs):
        built.append(kwargs.get("host"))
        time.sleep(0.01)
        original_init(self, *args, **kwargs)

    monkeypatch.setattr(Urllib3HttpConnection, "__init__", slow_init)
    transport = OpenSearchTransport()
    threads = [threading.Thread(target=transport.send, args=("http://es.test:9200/a", "GET")) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert built == ["es.test"]
    assert len(transport._connections) == 1
