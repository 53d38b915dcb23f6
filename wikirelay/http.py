import logging
import os
from typing import Any, Optional

import orjson
from httpx import AsyncClient, Client, HTTPError, InvalidURL, Response

from .errors import ParseError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "wikirelay/0.1 (https://github.com/wikirelay/wikirelay)"
DEFAULT_HEADERS = {"User-Agent": DEFAULT_USER_AGENT, "Accept": "application/json"}


def parse_response(r: Response) -> Any:
    logger.debug("STATUS: %s %s", r.status_code, r.url)
    logger.debug("HEADERS: %s", dict(r.headers))
    logger.debug("BODY: %s", r.text)
    try:
        r.raise_for_status()
    except HTTPError as e:
        raise TransportError(str(e)) from e
    try:
        return orjson.loads(r.content)
    except orjson.JSONDecodeError as e:
        raise ParseError(f"Response from {r.url} is not valid JSON: {e}") from e


class HttpClient:
    """Issues requests to absolute URLs and returns the decoded JSON body."""

    def __init__(self, client: Optional[Client] = None, timeout: Optional[float] = None):
        self.client = client or Client(
            proxy=os.getenv("https_proxy"), headers=DEFAULT_HEADERS, timeout=timeout
        )

    def get(self, url: str) -> Any:
        return self.execute("GET", url)

    def post(self, url: str, data: Any = None) -> Any:
        return self.execute("POST", url, data)

    def put(self, url: str, data: Any = None) -> Any:
        return self.execute("PUT", url, data)

    def delete(self, url: str) -> Any:
        return self.execute("DELETE", url)

    def execute(self, method: str, url: str, data: Any = None) -> Any:
        try:
            r = self.client.request(method, url, json=data)
        except (HTTPError, InvalidURL) as e:
            logger.error("problem with request: %s", e)
            raise TransportError(str(e)) from e
        return parse_response(r)

    def close(self) -> None:
        self.client.close()


class AsyncHttpClient(HttpClient):
    def __init__(
        self, client: Optional[AsyncClient] = None, timeout: Optional[float] = None
    ):
        self.client = client or AsyncClient(
            proxy=os.getenv("https_proxy"), headers=DEFAULT_HEADERS, timeout=timeout
        )

    async def get(self, url: str) -> Any:
        return await self.execute("GET", url)

    async def post(self, url: str, data: Any = None) -> Any:
        return await self.execute("POST", url, data)

    async def put(self, url: str, data: Any = None) -> Any:
        return await self.execute("PUT", url, data)

    async def delete(self, url: str) -> Any:
        return await self.execute("DELETE", url)

    async def execute(self, method: str, url: str, data: Any = None) -> Any:
        try:
            r = await self.client.request(method, url, json=data)
        except (HTTPError, InvalidURL) as e:
            logger.error("problem with request: %s", e)
            raise TransportError(str(e)) from e
        return parse_response(r)

    async def close(self) -> None:
        await self.client.aclose()
