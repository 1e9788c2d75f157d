"""Fluent builder for the search and browse APIs."""

from __future__ import annotations

from typing import Iterable, Mapping

from unbxd_client.builders import RequestBuilder
from unbxd_client.exceptions import SEARCH_ERRORS
from unbxd_client.models import SearchResponse
from unbxd_client.params import (
    DEFAULT_PAGE_NUMBER,
    DEFAULT_PAGE_SIZE,
    BrowseMode,
    QueryMode,
    SearchRequest,
    SortDir,
)
from unbxd_client.urls import build_search_url


class SearchRequestBuilder(RequestBuilder[SearchResponse]):
    """Accumulates search options.

    A query (:meth:`search`, :meth:`bucket`) and a category browse
    (:meth:`browse`) are mutually exclusive; selecting both is reported as a
    :class:`~unbxd_client.exceptions.SearchConfigurationError` when the
    request is built.
    """

    errors = SEARCH_ERRORS
    response_type = SearchResponse

    def __init__(self, settings, executor) -> None:
        super().__init__(settings, executor)
        self._query_mode: QueryMode | None = None
        self._browse_mode: BrowseMode | None = None
        self._query_params: dict[str, str] = {}
        self._filters: dict[str, tuple[str, ...]] = {}
        self._sorts: dict[str, SortDir] = {}
        self._page_number = DEFAULT_PAGE_NUMBER
        self._page_size = DEFAULT_PAGE_SIZE

    def search(self, query: str, query_params: Mapping[str, str] | None = None) -> "SearchRequestBuilder":
        self._query_mode = QueryMode(query=query)
        self._set_query_params(query_params)
        return self

    def bucket(
        self,
        query: str,
        bucket_field: str,
        query_params: Mapping[str, str] | None = None,
    ) -> "SearchRequestBuilder":
        """Search for ``query`` with results grouped on ``bucket_field``."""

        self._query_mode = QueryMode(query=query, bucket_field=bucket_field)
        self._set_query_params(query_params)
        return self

    def browse(
        self,
        node_ids: str | Iterable[str],
        query_params: Mapping[str, str] | None = None,
    ) -> "SearchRequestBuilder":
        """Browse one category node, or several when a node has multiple parents."""

        ids = (node_ids,) if isinstance(node_ids, str) else tuple(node_ids)
        if not ids:
            raise SEARCH_ERRORS.configuration("At least one category id is required to browse")
        self._browse_mode = BrowseMode(category_ids=ids)
        self._set_query_params(query_params)
        return self

    def add_filter(self, field_name: str, *values: str) -> "SearchRequestBuilder":
        self._filters[field_name] = tuple(values)
        return self

    def add_sort(self, field: str, direction: SortDir | str = SortDir.DESC) -> "SearchRequestBuilder":
        if not isinstance(direction, SortDir):
            try:
                direction = SortDir(direction.lower())
            except ValueError as exc:
                raise SEARCH_ERRORS.configuration(
                    f"Unknown sort direction {direction!r}", cause=exc
                ) from exc
        self._sorts[field] = direction
        return self

    def set_page(self, page_number: int, page_size: int) -> "SearchRequestBuilder":
        self._page_number = page_number
        self._page_size = page_size
        return self

    def _set_query_params(self, query_params: Mapping[str, str] | None) -> None:
        self._query_params = dict(query_params or {})

    def build(self) -> SearchRequest:
        if self._query_mode is not None and self._browse_mode is not None:
            raise SEARCH_ERRORS.configuration("Can't set query and node id at the same time")
        mode = self._query_mode or self._browse_mode
        return SearchRequest(
            mode=mode,  # type: ignore[arg-type]
            query_params=tuple(self._query_params.items()),
            filters=tuple(self._filters.items()),
            sorts=tuple(self._sorts.items()),
            page_number=self._page_number,
            page_size=self._page_size,
        )

    def _render(self, request: SearchRequest) -> str:
        return build_search_url(request, self._settings)


__all__ = ["SearchRequestBuilder", "SortDir"]
