class WikiRelayError(Exception):
    """Base class for every error raised by wikirelay."""


class TransportError(WikiRelayError):
    """The remote API could not be reached or answered with an HTTP error."""


class ParseError(WikiRelayError):
    """The response body was not valid JSON."""


class PageNotFoundError(WikiRelayError):
    """The response had no `pages`, or an empty `pages` list."""


# the name used in the error taxonomy
EmptyResultError = PageNotFoundError


class InvalidParameterError(WikiRelayError, ValueError):
    """A query could not be built, e.g. no language was given."""
