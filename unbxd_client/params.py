"""Immutable request snapshots consumed by the URL generator.

A builder accumulates options and hands one of these to ``urls``. Each
snapshot validates itself on construction, so a request that exists is a
request that can be rendered.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from unbxd_client.exceptions import (
    AutoSuggestConfigurationError,
    RecommendationsConfigurationError,
    SearchConfigurationError,
)

DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 10
UNSET_COUNT = -1


class SortDir(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True, slots=True)
class QueryMode:
    """Free-text search, optionally bucketed on a field."""

    query: str
    bucket_field: str | None = None


@dataclass(frozen=True, slots=True)
class BrowseMode:
    """Category browse; multiple node ids are ANDed server-side."""

    category_ids: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.category_ids:
            raise SearchConfigurationError("At least one category id is required to browse")


SearchMode = Union[QueryMode, BrowseMode]


@dataclass(frozen=True, slots=True)
class SearchRequest:
    mode: SearchMode
    query_params: tuple[tuple[str, str], ...] = ()
    # field -> values; values of one field are ORed, fields are ANDed
    filters: tuple[tuple[str, tuple[str, ...]], ...] = ()
    # priority order
    sorts: tuple[tuple[str, SortDir], ...] = ()
    page_number: int = DEFAULT_PAGE_NUMBER
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if not isinstance(self.mode, (QueryMode, BrowseMode)):
            raise SearchConfigurationError("Either a query or a category id must be set")
        if self.page_number < 1:
            raise SearchConfigurationError(f"Page number must be positive, got {self.page_number}")
        if self.page_size < 1:
            raise SearchConfigurationError(f"Page size must be positive, got {self.page_size}")


@dataclass(frozen=True, slots=True)
class AutoSuggestRequest:
    query: str | None = None
    in_fields_count: int = UNSET_COUNT
    popular_products_count: int = UNSET_COUNT
    keyword_suggestions_count: int = UNSET_COUNT
    top_queries_count: int = UNSET_COUNT

    def __post_init__(self) -> None:
        for name in (
            "in_fields_count",
            "popular_products_count",
            "keyword_suggestions_count",
            "top_queries_count",
        ):
            value = getattr(self, name)
            if value != UNSET_COUNT and value < 0:
                raise AutoSuggestConfigurationError(f"{name} must not be negative, got {value}")

    def counts(self) -> list[tuple[str, int]]:
        """Return the explicitly set count parameters in wire order."""

        pairs = [
            ("inFields.count", self.in_fields_count),
            ("popularProducts.count", self.popular_products_count),
            ("keywordSuggestions.count", self.keyword_suggestions_count),
            ("topQueries.count", self.top_queries_count),
        ]
        return [(name, value) for name, value in pairs if value != UNSET_COUNT]


class BoxType(str, Enum):
    ALSO_VIEWED = "also-viewed"
    ALSO_BOUGHT = "also-bought"
    RECENTLY_VIEWED = "recently-viewed"
    RECOMMENDED_FOR_YOU = "recommended-for-you"
    MORE_LIKE_THESE = "more-like-these"
    TOP_SELLERS = "top-sellers"
    CATEGORY_TOP_SELLERS = "category-top-sellers"
    BRAND_TOP_SELLERS = "brand-top-sellers"
    PDP_TOP_SELLERS = "pdp-top-sellers"
    CART_RECOMMEND = "cart-recommend"


@dataclass(frozen=True)
class _ProductBox:
    product_id: str

    box_type: ClassVar[BoxType]
    route: ClassVar[str]
    requires: ClassVar[str] = "a product id"

    @property
    def path_param(self) -> str | None:
        return self.product_id


@dataclass(frozen=True)
class _UserBox:
    uid: str

    box_type: ClassVar[BoxType]
    route: ClassVar[str]
    requires: ClassVar[str] = "a user id"

    @property
    def path_param(self) -> str | None:
        return self.uid


class AlsoViewed(_ProductBox):
    box_type = BoxType.ALSO_VIEWED
    route = "also-viewed"


class AlsoBought(_ProductBox):
    box_type = BoxType.ALSO_BOUGHT
    route = "also-bought"


class MoreLikeThese(_ProductBox):
    box_type = BoxType.MORE_LIKE_THESE
    route = "more-like-these"


class PdpTopSellers(_ProductBox):
    box_type = BoxType.PDP_TOP_SELLERS
    route = "pdp-top-sellers"


class RecentlyViewed(_UserBox):
    box_type = BoxType.RECENTLY_VIEWED
    route = "recently-viewed"


class RecommendedForYou(_UserBox):
    box_type = BoxType.RECOMMENDED_FOR_YOU
    route = "recommend"


class CartRecommend(_UserBox):
    box_type = BoxType.CART_RECOMMEND
    route = "cart-recommend"


@dataclass(frozen=True)
class TopSellers:
    box_type: ClassVar[BoxType] = BoxType.TOP_SELLERS
    route: ClassVar[str] = "top-sellers"
    requires: ClassVar[str] = "nothing"

    @property
    def path_param(self) -> str | None:
        return None


@dataclass(frozen=True)
class CategoryTopSellers:
    category: str

    box_type: ClassVar[BoxType] = BoxType.CATEGORY_TOP_SELLERS
    route: ClassVar[str] = "category-top-sellers"
    requires: ClassVar[str] = "a category name"

    @property
    def path_param(self) -> str | None:
        return self.category


@dataclass(frozen=True)
class BrandTopSellers:
    brand: str

    box_type: ClassVar[BoxType] = BoxType.BRAND_TOP_SELLERS
    route: ClassVar[str] = "brand-top-sellers"
    requires: ClassVar[str] = "a brand name"

    @property
    def path_param(self) -> str | None:
        return self.brand


RecommendationBox = Union[
    AlsoViewed,
    AlsoBought,
    RecentlyViewed,
    RecommendedForYou,
    MoreLikeThese,
    TopSellers,
    CategoryTopSellers,
    BrandTopSellers,
    PdpTopSellers,
    CartRecommend,
]

_BOX_CLASSES = (_ProductBox, _UserBox, TopSellers, CategoryTopSellers, BrandTopSellers)


@dataclass(frozen=True, slots=True)
class RecommendationRequest:
    box: RecommendationBox | None
    uid: str | None = None
    ip: str | None = None

    def __post_init__(self) -> None:
        if self.box is None or not isinstance(self.box, _BOX_CLASSES):
            raise RecommendationsConfigurationError("no recommendation widget selected")
        if isinstance(self.box, TopSellers):
            return
        param = self.box.path_param
        if param is None or not str(param).strip():
            raise RecommendationsConfigurationError(
                f"{self.box.box_type.value} requires {self.box.requires}"
            )


__all__ = [
    "DEFAULT_PAGE_NUMBER",
    "DEFAULT_PAGE_SIZE",
    "UNSET_COUNT",
    "SortDir",
    "QueryMode",
    "BrowseMode",
    "SearchMode",
    "SearchRequest",
    "AutoSuggestRequest",
    "BoxType",
    "AlsoViewed",
    "AlsoBought",
    "RecentlyViewed",
    "RecommendedForYou",
    "MoreLikeThese",
    "TopSellers",
    "CategoryTopSellers",
    "BrandTopSellers",
    "PdpTopSellers",
    "CartRecommend",
    "RecommendationBox",
    "RecommendationRequest",
]
