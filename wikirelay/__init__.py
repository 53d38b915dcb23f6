from .errors import (
    EmptyResultError,
    InvalidParameterError,
    PageNotFoundError,
    ParseError,
    TransportError,
    WikiRelayError,
)
from .http import AsyncHttpClient, HttpClient
from .models import ImageInfo, WikipediaPage
from .query import Language, build_url
from .utils import find_key
from .wikipedia import AsyncWikipediaAPI, WikipediaAPI
