import logging
import os

import fire
import orjson
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

from .server import DEFAULT_HOST, DEFAULT_PORT, RelayServer
from .wikipedia import WikipediaAPI

load_dotenv()

console = Console(highlight=False)


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True))],
    )


def print_json(data) -> None:
    console.print_json(orjson.dumps(data).decode())


def serve(host: str = None, port: int = None, verbose: bool = False):
    """Runs the local relay server."""
    setup_logging(verbose)
    host = host or os.getenv("WIKIRELAY_HOST", DEFAULT_HOST)
    port = int(port or os.getenv("WIKIRELAY_PORT", DEFAULT_PORT))
    api = WikipediaAPI()
    server = RelayServer(api, host, port)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.server_close()
        api.close()


def search(
    title: str,
    language: str = None,
    thumbnail_size: int = 70,
    include_disambiguation: bool = False,
    verbose: bool = False,
):
    """Prefix-searches pages by title."""
    setup_logging(verbose)
    api = WikipediaAPI()
    try:
        results = api.search_results(
            title, language, thumbnail_size, include_disambiguation
        )
    finally:
        api.close()
    print_json([page.model_dump(exclude_none=True) for page in results])


def title(title: str, language: str = None, thumbnail_size: int = 250, verbose: bool = False):
    """Fetches a single page by title."""
    setup_logging(verbose)
    api = WikipediaAPI()
    try:
        page = api.search_title(title, language, thumbnail_size)
    finally:
        api.close()
    print_json(page.model_dump(exclude_none=True))


def page(page_id: int, language: str = None, thumbnail_size: int = 250, verbose: bool = False):
    """Fetches a single page by page id."""
    setup_logging(verbose)
    api = WikipediaAPI()
    try:
        result = api.get_page_by_id(page_id, language, thumbnail_size)
    finally:
        api.close()
    print_json(result.model_dump(exclude_none=True))


def image(title: str, language: str = None, thumbnail_size: int = 250, verbose: bool = False):
    """Fetches the thumbnail of a page."""
    setup_logging(verbose)
    api = WikipediaAPI()
    try:
        info = api.search_image(title, language, thumbnail_size)
    finally:
        api.close()
    print_json(info.model_dump(exclude_none=True))


def main():
    fire.Fire(
        {
            "serve": serve,
            "search": search,
            "title": title,
            "page": page,
            "image": image,
        }
    )


if __name__ == "__main__":
    main()
