import httpx
import orjson
import pytest
from httpx import AsyncClient, Client

from wikirelay import AsyncHttpClient, AsyncWikipediaAPI, HttpClient, WikipediaAPI

CAT_RESULTS = {
    "batchcomplete": True,
    "query": {
        "pages": [
            {
                "pageid": 6678,
                "ns": 0,
                "title": "Cat",
                "index": 2,
                "thumbnail": {
                    "source": "https://upload.wikimedia.org/cat.jpg",
                    "width": 70,
                    "height": 56,
                },
                "terms": {"description": ["small domesticated carnivorous mammal"]},
            },
            {
                "pageid": 2011,
                "ns": 0,
                "title": "Cat (disambiguation)",
                "index": 1,
                "terms": {"description": ["Wikimedia disambiguation page"]},
            },
        ]
    },
}

CAT_PAGE = {
    "batchcomplete": True,
    "query": {
        "pages": [
            {
                "pageid": 6678,
                "ns": 0,
                "title": "Cat",
                "description": "Small domesticated carnivorous mammal",
                "extract": "The cat (Felis catus) is a domestic species.",
                "thumbnail": {
                    "source": "https://upload.wikimedia.org/cat.jpg",
                    "width": 250,
                    "height": 200,
                },
                "langlinks": [
                    {"lang": "pt", "url": "https://pt.wikipedia.org/wiki/Gato", "title": "Gato"}
                ],
                "fullurl": "https://en.wikipedia.org/wiki/Cat",
                "contentmodel": "wikitext",
            }
        ]
    },
}

EMPTY_PAGES = {"batchcomplete": True, "query": {"pages": []}}


def json_handler(payload, requests=None, status_code=200):
    def handler(request: httpx.Request) -> httpx.Response:
        if requests is not None:
            requests.append(request)
        return httpx.Response(status_code, content=orjson.dumps(payload))

    return handler


def failing_handler(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("getaddrinfo ENOTFOUND", request=request)


def make_api(handler) -> WikipediaAPI:
    return WikipediaAPI(HttpClient(Client(transport=httpx.MockTransport(handler))))


def make_async_api(handler) -> AsyncWikipediaAPI:
    return AsyncWikipediaAPI(
        AsyncHttpClient(AsyncClient(transport=httpx.MockTransport(handler)))
    )


@pytest.fixture
def requests():
    return []
