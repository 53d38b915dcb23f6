from enum import Enum
from typing import Any, Dict, Optional
from urllib.parse import quote

from .errors import InvalidParameterError

BASE_URL = "https://{{language}}.wikipedia.org/w/api.php"
LANGUAGE_PLACEHOLDER = "{{language}}"
LIST_SEPARATOR = "|"
TRAILER_PARAMS = (("format", "json"), ("formatversion", 2))


class Action(str, Enum):
    QUERY = "query"


class Prop(str, Enum):
    """Which properties to get for the queried pages."""

    # information about images on the page, such as thumbnail and presence of photos
    PAGEIMAGES = "pageimages"
    # short plain-text description of what the page is about; may contain raw
    # HTML tags that must be escaped before rendering
    DESCRIPTION = "description"
    # plain-text or limited HTML extracts of the pages
    EXTRACTS = "extracts"
    # all interlanguage links from the pages
    LANGLINKS = "langlinks"
    # basic page information
    INFO = "info"
    # Wikidata terms (labels, descriptions, aliases) linked to the page
    PAGETERMS = "pageterms"


class PageImageProp(str, Enum):
    THUMBNAIL = "thumbnail"


class LangLinkProp(str, Enum):
    URL = "url"


class InfoProp(str, Enum):
    URL = "url"


class TermType(str, Enum):
    """Wikidata term types, each returned as a list of strings keyed by type."""

    ALIAS = "alias"
    LABEL = "label"
    DESCRIPTION = "description"


class Generator(str, Enum):
    # prefix search over page titles
    PREFIXSEARCH = "prefixsearch"


class Flag(int, Enum):
    """Encoding of boolean API flags (redirects, exintro, explaintext, indexpageids)."""

    TRUE = 1


class Language(str, Enum):
    ENGLISH = "en"
    PORTUGUESE = "pt"
    RUSSIAN = "ru"
    SPANISH = "es"


def _serialize(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, (list, tuple)):
        return LIST_SEPARATOR.join(_serialize(v) for v in value)
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def _encode(text: str) -> str:
    return quote(text, safe="")


def build_url(
    template: str, params: Dict[str, Any], default_language: Optional[str] = None
) -> str:
    """
    Builds an encoded Wikipedia API URL.

    `language` is taken out of `params` (falling back to `default_language`)
    and substituted into the template; every other parameter is serialized in
    insertion order, lists joined with "|". `format=json&formatversion=2` is
    always appended. `params` itself is left untouched.
    """
    params = dict(params)
    language = params.pop("language", None) or default_language
    if not language:
        raise InvalidParameterError("A language is required to build the query URL.")

    url = template.replace(LANGUAGE_PLACEHOLDER, _encode(_serialize(language)))
    pairs = list(params.items()) + list(TRAILER_PARAMS)
    query = "&".join(f"{_encode(k)}={_encode(_serialize(v))}" for k, v in pairs)

    return f"{url}?{query}"
