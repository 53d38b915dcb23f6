import logging
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ValidationError

from .errors import PageNotFoundError, ParseError
from .http import AsyncHttpClient, HttpClient
from .models import ImageInfo, WikipediaPage
from .query import (
    BASE_URL,
    Action,
    Flag,
    Generator,
    InfoProp,
    Language,
    LangLinkProp,
    PageImageProp,
    Prop,
    TermType,
    build_url,
)
from .utils import find_key

logger = logging.getLogger(__name__)

DISAMBIGUATION_MARKERS = {
    Language.ENGLISH.value: "disambiguation",
    Language.PORTUGUESE.value: "desambiguação",
    Language.SPANISH.value: "desambiguación",
}

PAGE_PROPS = [Prop.PAGEIMAGES, Prop.DESCRIPTION, Prop.EXTRACTS, Prop.LANGLINKS, Prop.INFO]


def placeholder_image() -> ImageInfo:
    return ImageInfo(url="", width=250, height=250)


class WikipediaAPI(BaseModel):
    """
    Searches terms, images and articles on Wikipedia.

    Build one instance at startup and pass it to whatever needs it. Every
    search issues exactly one request through `http`; no state is kept
    between calls.
    """

    http: Any
    base_url: str = BASE_URL
    default_language: str = Language.ENGLISH.value
    disambiguation_markers: Dict[str, str] = DISAMBIGUATION_MARKERS

    def __init__(self, http: Optional[HttpClient] = None, **kwargs):
        super().__init__(http=http or self.new_http(), **kwargs)

    def new_http(self) -> HttpClient:
        return HttpClient()

    def build_url(self, params: Dict[str, Any]) -> str:
        return build_url(self.base_url, params, self.default_language)

    def resolve_language(self, language: Optional[Union[str, Language]]) -> str:
        if isinstance(language, Language):
            return language.value
        return language or self.default_language

    # Request parameters, shared by the sync and async facades

    def image_params(
        self, title: str, language: str, thumbnail_size: int
    ) -> Dict[str, Any]:
        return {
            "language": language,
            "titles": [title],
            "action": Action.QUERY,
            "prop": [Prop.PAGEIMAGES],
            "piprop": [PageImageProp.THUMBNAIL],
            "pithumbsize": thumbnail_size,
        }

    def title_params(
        self, title: str, language: str, thumbnail_size: int
    ) -> Dict[str, Any]:
        return {
            "language": language,
            "titles": [title],
            "action": Action.QUERY,
            "prop": PAGE_PROPS,
            "piprop": [PageImageProp.THUMBNAIL],
            "pithumbsize": thumbnail_size,
            "exsentences": 3,
            "exintro": Flag.TRUE,
            "explaintext": Flag.TRUE,
            "llprop": LangLinkProp.URL,
            "inprop": InfoProp.URL,
            "redirects": Flag.TRUE,
        }

    def page_id_params(
        self, page_id: int, language: str, thumbnail_size: int
    ) -> Dict[str, Any]:
        return {
            "language": language,
            "action": Action.QUERY,
            "prop": PAGE_PROPS,
            "piprop": [PageImageProp.THUMBNAIL],
            "pithumbsize": thumbnail_size,
            "pilimit": 10,
            "exsentences": 3,
            "exintro": Flag.TRUE,
            "explaintext": Flag.TRUE,
            "llprop": LangLinkProp.URL,
            "inprop": InfoProp.URL,
            "pageids": [page_id],
            "indexpageids": Flag.TRUE,
            "redirects": Flag.TRUE,
        }

    def results_params(
        self, title: str, language: str, thumbnail_size: int
    ) -> Dict[str, Any]:
        return {
            "language": language,
            "action": Action.QUERY,
            "prop": [Prop.PAGEIMAGES, Prop.PAGETERMS],
            "piprop": [PageImageProp.THUMBNAIL],
            "pilimit": 10,
            "pithumbsize": thumbnail_size,
            "generator": Generator.PREFIXSEARCH,
            "wbptterms": TermType.DESCRIPTION,
            "gpssearch": title,
            "gpslimit": 10,
            "redirects": Flag.TRUE,
        }

    # Response parsing

    def parse_image(self, response: Any) -> ImageInfo:
        thumbnail = find_key("thumbnail", response)
        if not thumbnail:
            logger.warning("No thumbnail in response, using placeholder image")
            return placeholder_image()
        try:
            return ImageInfo.model_validate(thumbnail)
        except ValidationError as e:
            logger.warning("Invalid thumbnail %r: %s", thumbnail, e)
            return placeholder_image()

    def parse_page(self, response: Any) -> WikipediaPage:
        pages = find_key("pages", response)
        if not pages or not isinstance(pages, list):
            raise PageNotFoundError(f"No pages in response: {response}")
        try:
            return WikipediaPage.model_validate(pages[0])
        except ValidationError as e:
            raise ParseError(f"Unexpected page in response: {e}") from e

    def parse_results(
        self, response: Any, language: str, include_disambiguation: bool
    ) -> List[WikipediaPage]:
        pages = find_key("pages", response)
        # a prefix search with no hits has no `query` at all
        if not isinstance(pages, list):
            return []
        try:
            results = [WikipediaPage.model_validate(page) for page in pages]
        except ValidationError as e:
            raise ParseError(f"Unexpected page in response: {e}") from e

        marker = self.disambiguation_markers.get(language)
        if not include_disambiguation and marker:
            results = [r for r in results if marker not in r.first_description_term]

        for page in results:
            page.lang = language
        results.sort(key=lambda page: (page.index is None, page.index or 0))

        return results

    # Searches

    def search_image(
        self,
        title: str,
        language: Optional[str] = None,
        thumbnail_size: int = 250,
    ) -> ImageInfo:
        """
        Searches the thumbnail of a page. Never raises: any failure returns
        a blank 250x250 placeholder instead.
        """
        try:
            url = self.build_url(
                self.image_params(title, self.resolve_language(language), thumbnail_size)
            )
            response = self.http.get(url)
        except Exception as e:  # any failure degrades to the placeholder
            logger.warning("Image search for %r failed: %s", title, e)
            return placeholder_image()
        return self.parse_image(response)

    def search_title(
        self,
        title: str,
        language: Optional[str] = None,
        thumbnail_size: int = 250,
    ) -> WikipediaPage:
        """Searches a single page by full or partial title."""
        url = self.build_url(
            self.title_params(title, self.resolve_language(language), thumbnail_size)
        )
        return self.parse_page(self.http.get(url))

    def get_page_by_id(
        self,
        page_id: int,
        language: Optional[str] = None,
        thumbnail_size: int = 250,
    ) -> WikipediaPage:
        """Fetches a single page by its page id."""
        url = self.build_url(
            self.page_id_params(page_id, self.resolve_language(language), thumbnail_size)
        )
        return self.parse_page(self.http.get(url))

    def search_results(
        self,
        title: str,
        language: Optional[str] = None,
        thumbnail_size: int = 70,
        include_disambiguation: bool = False,
    ) -> List[WikipediaPage]:
        """
        Prefix-searches up to 10 pages for `title`, most relevant first.
        Disambiguation pages are dropped unless `include_disambiguation`.
        """
        language = self.resolve_language(language)
        url = self.build_url(self.results_params(title, language, thumbnail_size))
        return self.parse_results(self.http.get(url), language, include_disambiguation)

    def close(self) -> None:
        self.http.close()


class AsyncWikipediaAPI(WikipediaAPI):
    def new_http(self) -> AsyncHttpClient:
        return AsyncHttpClient()

    async def search_image(
        self,
        title: str,
        language: Optional[str] = None,
        thumbnail_size: int = 250,
    ) -> ImageInfo:
        try:
            url = self.build_url(
                self.image_params(title, self.resolve_language(language), thumbnail_size)
            )
            response = await self.http.get(url)
        except Exception as e:
            logger.warning("Image search for %r failed: %s", title, e)
            return placeholder_image()
        return self.parse_image(response)

    async def search_title(
        self,
        title: str,
        language: Optional[str] = None,
        thumbnail_size: int = 250,
    ) -> WikipediaPage:
        url = self.build_url(
            self.title_params(title, self.resolve_language(language), thumbnail_size)
        )
        return self.parse_page(await self.http.get(url))

    async def get_page_by_id(
        self,
        page_id: int,
        language: Optional[str] = None,
        thumbnail_size: int = 250,
    ) -> WikipediaPage:
        url = self.build_url(
            self.page_id_params(page_id, self.resolve_language(language), thumbnail_size)
        )
        return self.parse_page(await self.http.get(url))

    async def search_results(
        self,
        title: str,
        language: Optional[str] = None,
        thumbnail_size: int = 70,
        include_disambiguation: bool = False,
    ) -> List[WikipediaPage]:
        language = self.resolve_language(language)
        url = self.build_url(self.results_params(title, language, thumbnail_size))
        return self.parse_results(
            await self.http.get(url), language, include_disambiguation
        )

    async def close(self) -> None:
        await self.http.close()
