"""Domain-specific exceptions.

Every error carries a message and an optional wrapped cause. Concrete types
combine a domain base with a kind base so callers can catch either way::

    try:
        builder.execute()
    except SearchError:        # anything from the search domain
        ...
    except ApiError:           # non-200 from any domain
        ...
"""

from __future__ import annotations

from dataclasses import dataclass


class UnbxdError(Exception):
    def __init__(self, message: str = "", cause: BaseException | None = None) -> None:
        if not message and cause is not None:
            message = str(cause) or cause.__class__.__name__
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        return self.message


class ConfigurationError(UnbxdError):
    """Builder state is conflicting or incomplete; raised before any I/O."""


class EncodingError(UnbxdError):
    """A value could not be percent-encoded as UTF-8."""


class TransportError(UnbxdError):
    """The HTTP GET failed at the connection or protocol level."""


class DecodeError(UnbxdError):
    """A 200 response body was not a JSON object."""


class ApiError(UnbxdError):
    """Non-200 response; the message is the raw response body."""

    def __init__(
        self,
        message: str = "",
        cause: BaseException | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, cause)
        self.status_code = status_code


class SearchError(UnbxdError):
    pass


class SearchConfigurationError(SearchError, ConfigurationError):
    pass


class SearchEncodingError(SearchError, EncodingError):
    pass


class SearchTransportError(SearchError, TransportError):
    pass


class SearchDecodeError(SearchError, DecodeError):
    pass


class SearchApiError(SearchError, ApiError):
    pass


class AutoSuggestError(UnbxdError):
    pass


class AutoSuggestConfigurationError(AutoSuggestError, ConfigurationError):
    pass


class AutoSuggestEncodingError(AutoSuggestError, EncodingError):
    pass


class AutoSuggestTransportError(AutoSuggestError, TransportError):
    pass


class AutoSuggestDecodeError(AutoSuggestError, DecodeError):
    pass


class AutoSuggestApiError(AutoSuggestError, ApiError):
    pass


class RecommendationsError(UnbxdError):
    pass


class RecommendationsConfigurationError(RecommendationsError, ConfigurationError):
    pass


class RecommendationsEncodingError(RecommendationsError, EncodingError):
    pass


class RecommendationsTransportError(RecommendationsError, TransportError):
    pass


class RecommendationsDecodeError(RecommendationsError, DecodeError):
    pass


class RecommendationsApiError(RecommendationsError, ApiError):
    pass


@dataclass(frozen=True, slots=True)
class ErrorFamily:
    """The concrete error types raised on behalf of one API domain."""

    domain: str
    configuration: type[ConfigurationError]
    encoding: type[EncodingError]
    transport: type[TransportError]
    decode: type[DecodeError]
    api: type[ApiError]


SEARCH_ERRORS = ErrorFamily(
    domain="search",
    configuration=SearchConfigurationError,
    encoding=SearchEncodingError,
    transport=SearchTransportError,
    decode=SearchDecodeError,
    api=SearchApiError,
)

AUTOSUGGEST_ERRORS = ErrorFamily(
    domain="autosuggest",
    configuration=AutoSuggestConfigurationError,
    encoding=AutoSuggestEncodingError,
    transport=AutoSuggestTransportError,
    decode=AutoSuggestDecodeError,
    api=AutoSuggestApiError,
)

RECOMMENDATIONS_ERRORS = ErrorFamily(
    domain="recommendations",
    configuration=RecommendationsConfigurationError,
    encoding=RecommendationsEncodingError,
    transport=RecommendationsTransportError,
    decode=RecommendationsDecodeError,
    api=RecommendationsApiError,
)


__all__ = [
    "UnbxdError",
    "ConfigurationError",
    "EncodingError",
    "TransportError",
    "DecodeError",
    "ApiError",
    "SearchError",
    "SearchConfigurationError",
    "SearchEncodingError",
    "SearchTransportError",
    "SearchDecodeError",
    "SearchApiError",
    "AutoSuggestError",
    "AutoSuggestConfigurationError",
    "AutoSuggestEncodingError",
    "AutoSuggestTransportError",
    "AutoSuggestDecodeError",
    "AutoSuggestApiError",
    "RecommendationsError",
    "RecommendationsConfigurationError",
    "RecommendationsEncodingError",
    "RecommendationsTransportError",
    "RecommendationsDecodeError",
    "RecommendationsApiError",
    "ErrorFamily",
    "SEARCH_ERRORS",
    "AUTOSUGGEST_ERRORS",
    "RECOMMENDATIONS_ERRORS",
]
