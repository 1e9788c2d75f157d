"""Response wrappers returned by the three API domains."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True, slots=True)
class RawResponse:
    status_code: int
    body: str


class UnbxdResponse(BaseModel):
    """Opaque wrapper over the decoded JSON object."""

    model_config = ConfigDict(frozen=True)

    data: dict[str, Any] = Field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def __contains__(self, key: object) -> bool:
        return key in self.data

    def _section(self, key: str) -> dict[str, Any]:
        value = self.data.get(key)
        return value if isinstance(value, dict) else {}


class SearchResponse(UnbxdResponse):
    @property
    def metadata(self) -> dict[str, Any]:
        return self._section("searchMetaData")

    @property
    def status(self) -> int | None:
        return self.metadata.get("status")

    @property
    def query_time(self) -> int | None:
        return self.metadata.get("queryTime")

    @property
    def num_found(self) -> int:
        response = self._section("response")
        return int(response.get("numFound", response.get("numberOfProducts", 0)) or 0)

    @property
    def start(self) -> int:
        return int(self._section("response").get("start", 0) or 0)

    @property
    def products(self) -> list[dict[str, Any]]:
        response = self._section("response")
        return list(response.get("products") or response.get("docs") or [])

    @property
    def facets(self) -> dict[str, Any]:
        return self._section("facets")

    @property
    def buckets(self) -> dict[str, Any]:
        return self._section("buckets")

    @property
    def spellcheck(self) -> list[Any]:
        return list(self.data.get("didYouMean") or [])


class AutoSuggestResponse(UnbxdResponse):
    IN_FIELD: ClassVar[str] = "IN_FIELD"
    POPULAR_PRODUCTS: ClassVar[str] = "POPULAR_PRODUCTS"
    KEYWORD_SUGGESTION: ClassVar[str] = "KEYWORD_SUGGESTION"
    TOP_SEARCH_QUERIES: ClassVar[str] = "TOP_SEARCH_QUERIES"

    @property
    def num_found(self) -> int:
        return int(self._section("response").get("numFound", 0) or 0)

    @property
    def suggestions(self) -> list[dict[str, Any]]:
        response = self._section("response")
        return list(response.get("products") or response.get("docs") or [])

    def by_doctype(self, doctype: str) -> list[dict[str, Any]]:
        return [doc for doc in self.suggestions if doc.get("doctype") == doctype]

    @property
    def in_fields(self) -> list[dict[str, Any]]:
        return self.by_doctype(self.IN_FIELD)

    @property
    def popular_products(self) -> list[dict[str, Any]]:
        return self.by_doctype(self.POPULAR_PRODUCTS)

    @property
    def keyword_suggestions(self) -> list[dict[str, Any]]:
        return self.by_doctype(self.KEYWORD_SUGGESTION)

    @property
    def top_queries(self) -> list[dict[str, Any]]:
        return self.by_doctype(self.TOP_SEARCH_QUERIES)


class RecommendationResponse(UnbxdResponse):
    @property
    def status(self) -> int | None:
        return self.data.get("status")

    @property
    def box_type(self) -> str | None:
        return self.data.get("boxType")

    @property
    def products(self) -> list[dict[str, Any]]:
        return list(self.data.get("Recommendations") or self.data.get("recommendations") or [])

    @property
    def count(self) -> int:
        value = self.data.get("count")
        if value is None:
            return len(self.products)
        return int(value)


__all__ = [
    "RawResponse",
    "UnbxdResponse",
    "SearchResponse",
    "AutoSuggestResponse",
    "RecommendationResponse",
]
