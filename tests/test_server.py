import threading

import httpx
import pytest

from wikirelay.server import RelayServer

from .conftest import CAT_RESULTS, failing_handler, json_handler, make_api


@pytest.fixture
def relay():
    def start(handler):
        server = RelayServer(make_api(handler), "127.0.0.1", 0)
        thread = threading.Thread(target=server.serve_forever, daemon=True)
        thread.start()
        servers.append(server)
        host, port = server.server_address[:2]
        return f"http://{host}:{port}"

    servers = []
    yield start
    for server in servers:
        server.shutdown()
        server.server_close()


def test_root_greeting(relay, requests):
    base = relay(json_handler(CAT_RESULTS, requests))
    r = httpx.get(f"{base}/", trust_env=False)
    assert r.status_code == 200
    assert r.headers["content-type"] == "text/plain"
    assert r.text == "Hello, World!\n"
    assert requests == []


def test_test_route_searches(relay, requests):
    base = relay(json_handler(CAT_RESULTS, requests))
    r = httpx.get(f"{base}/test", params={"title": "Cat"}, trust_env=False)
    assert r.status_code == 200
    assert r.text == "Hello, World!\n"

    assert len(requests) == 1
    assert requests[0].url.host == "en.wikipedia.org"
    assert requests[0].url.params["gpssearch"] == "Cat"


def test_test_route_search_failure(relay):
    base = relay(failing_handler)
    r = httpx.get(f"{base}/test", params={"title": "Cat"}, trust_env=False)
    assert r.status_code == 200
    assert r.text == "Hello, World!\n"


def test_test_route_unexpected_page(relay):
    payload = {"query": {"pages": [{"title": "X", "terms": {"description": "oops"}}]}}
    base = relay(json_handler(payload))
    r = httpx.get(f"{base}/test", params={"title": "X"}, trust_env=False)
    assert r.status_code == 200
    assert r.text == "Hello, World!\n"
