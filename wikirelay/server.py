import logging
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import parse_qs, urlparse

from .query import Language
from .wikipedia import WikipediaAPI

logger = logging.getLogger(__name__)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000
GREETING = b"Hello, World!\n"


class RelayHandler(BaseHTTPRequestHandler):
    server: "RelayServer"

    def do_GET(self):
        url = urlparse(self.path)
        if url.path == "/test":
            title = parse_qs(url.query).get("title", [""])[0]
            self.search(title)

        # the /test results are never sent back, every path gets the greeting
        self.send_response(200)
        self.send_header("Content-Type", "text/plain")
        self.send_header("Content-Length", str(len(GREETING)))
        self.end_headers()
        self.wfile.write(GREETING)

    def search(self, title: str) -> None:
        try:
            results = self.server.api.search_results(title, Language.ENGLISH.value)
        except Exception as e:  # the route always greets
            logger.error("Search for %r failed: %s", title, e)
            return
        logger.info("Search for %r returned %d pages", title, len(results))

    def log_message(self, format, *args):
        logger.debug("%s - %s", self.address_string(), format % args)


class RelayServer(ThreadingHTTPServer):
    def __init__(self, api: WikipediaAPI, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT):
        super().__init__((host, port), RelayHandler)
        self.api = api

    def serve_forever(self, poll_interval: float = 0.5) -> None:
        host, port = self.server_address[:2]
        logger.info("Server running at http://%s:%s/", host, port)
        super().serve_forever(poll_interval)
