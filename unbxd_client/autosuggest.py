"""Fluent builder for the autosuggest API."""

from __future__ import annotations

from unbxd_client.builders import RequestBuilder
from unbxd_client.exceptions import AUTOSUGGEST_ERRORS
from unbxd_client.models import AutoSuggestResponse
from unbxd_client.params import UNSET_COUNT, AutoSuggestRequest
from unbxd_client.urls import build_autosuggest_url


class AutoSuggestRequestBuilder(RequestBuilder[AutoSuggestResponse]):
    """Accumulates an autosuggest query and per-section result counts.

    Counts left at ``UNSET_COUNT`` are not sent, letting the server apply
    its own defaults.
    """

    errors = AUTOSUGGEST_ERRORS
    response_type = AutoSuggestResponse

    def __init__(self, settings, executor) -> None:
        super().__init__(settings, executor)
        self._query: str | None = None
        self._in_fields_count = UNSET_COUNT
        self._popular_products_count = UNSET_COUNT
        self._keyword_suggestions_count = UNSET_COUNT
        self._top_queries_count = UNSET_COUNT

    def autosuggest(self, query: str) -> "AutoSuggestRequestBuilder":
        self._query = query
        return self

    def set_in_fields_count(self, count: int) -> "AutoSuggestRequestBuilder":
        self._in_fields_count = count
        return self

    def set_popular_products_count(self, count: int) -> "AutoSuggestRequestBuilder":
        self._popular_products_count = count
        return self

    def set_keyword_suggestions_count(self, count: int) -> "AutoSuggestRequestBuilder":
        self._keyword_suggestions_count = count
        return self

    def set_top_queries_count(self, count: int) -> "AutoSuggestRequestBuilder":
        self._top_queries_count = count
        return self

    def build(self) -> AutoSuggestRequest:
        return AutoSuggestRequest(
            query=self._query,
            in_fields_count=self._in_fields_count,
            popular_products_count=self._popular_products_count,
            keyword_suggestions_count=self._keyword_suggestions_count,
            top_queries_count=self._top_queries_count,
        )

    def _render(self, request: AutoSuggestRequest) -> str:
        return build_autosuggest_url(request, self._settings)


__all__ = ["AutoSuggestRequestBuilder"]
