"""Client for the Unbxd search, autosuggest and recommendations APIs."""

from unbxd_client.client import UnbxdClient
from unbxd_client.config import ClientSettings, get_settings
from unbxd_client.exceptions import (
    ApiError,
    AutoSuggestError,
    ConfigurationError,
    DecodeError,
    EncodingError,
    RecommendationsError,
    SearchError,
    TransportError,
    UnbxdError,
)
from unbxd_client.logging import configure_logging
from unbxd_client.models import AutoSuggestResponse, RecommendationResponse, SearchResponse
from unbxd_client.params import BoxType, SortDir

__all__ = [
    "UnbxdClient",
    "ClientSettings",
    "get_settings",
    "configure_logging",
    "UnbxdError",
    "ConfigurationError",
    "EncodingError",
    "TransportError",
    "DecodeError",
    "ApiError",
    "SearchError",
    "AutoSuggestError",
    "RecommendationsError",
    "SearchResponse",
    "AutoSuggestResponse",
    "RecommendationResponse",
    "BoxType",
    "SortDir",
]
