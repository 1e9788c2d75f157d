"""Fluent builder for the recommendations API."""

from __future__ import annotations

from dataclasses import replace

from unbxd_client.builders import RequestBuilder
from unbxd_client.exceptions import RECOMMENDATIONS_ERRORS
from unbxd_client.models import RecommendationResponse
from unbxd_client.params import (
    AlsoBought,
    AlsoViewed,
    BrandTopSellers,
    CartRecommend,
    CategoryTopSellers,
    MoreLikeThese,
    PdpTopSellers,
    RecentlyViewed,
    RecommendationBox,
    RecommendationRequest,
    RecommendedForYou,
    TopSellers,
)
from unbxd_client.urls import build_recommendations_url


class RecommendationsRequestBuilder(RequestBuilder[RecommendationResponse]):
    """Selects one recommendation widget (box type) per request.

    ``uid`` identifies the visitor. It is the path parameter of the
    user-centric widgets and is sent as a ``uid`` query parameter on every
    call when known. Selecting a widget replaces any earlier selection.
    """

    errors = RECOMMENDATIONS_ERRORS
    response_type = RecommendationResponse

    def __init__(self, settings, executor, uid: str | None = None) -> None:
        super().__init__(settings, executor)
        self._uid = uid
        self._ip: str | None = None
        self._box: RecommendationBox | None = None

    def _select(self, box: RecommendationBox) -> "RecommendationsRequestBuilder":
        self._box = box
        return self

    def _select_localized(self, box: RecommendationBox, ip: str | None) -> "RecommendationsRequestBuilder":
        # widgets taking an ip always replace it, None included
        self._ip = ip
        return self._select(box)

    def with_uid(self, uid: str | None) -> "RecommendationsRequestBuilder":
        self._uid = uid
        return self

    def with_ip(self, ip: str | None) -> "RecommendationsRequestBuilder":
        self._ip = ip
        return self

    def recently_viewed(self) -> "RecommendationsRequestBuilder":
        return self._select(RecentlyViewed(uid=self._uid or ""))

    def recommended_for_you(self, ip: str | None = None) -> "RecommendationsRequestBuilder":
        return self._select_localized(RecommendedForYou(uid=self._uid or ""), ip)

    def more_like_these(self, product_id: str) -> "RecommendationsRequestBuilder":
        return self._select(MoreLikeThese(product_id=product_id))

    def also_viewed(self, product_id: str) -> "RecommendationsRequestBuilder":
        return self._select(AlsoViewed(product_id=product_id))

    def also_bought(self, product_id: str) -> "RecommendationsRequestBuilder":
        return self._select(AlsoBought(product_id=product_id))

    def top_sellers(self, ip: str | None = None) -> "RecommendationsRequestBuilder":
        return self._select_localized(TopSellers(), ip)

    def category_top_sellers(self, category: str, ip: str | None = None) -> "RecommendationsRequestBuilder":
        return self._select_localized(CategoryTopSellers(category=category), ip)

    def brand_top_sellers(self, brand: str, ip: str | None = None) -> "RecommendationsRequestBuilder":
        return self._select_localized(BrandTopSellers(brand=brand), ip)

    def pdp_top_sellers(self, product_id: str, ip: str | None = None) -> "RecommendationsRequestBuilder":
        return self._select_localized(PdpTopSellers(product_id=product_id), ip)

    def cart_recommendations(self, ip: str | None = None) -> "RecommendationsRequestBuilder":
        return self._select_localized(CartRecommend(uid=self._uid or ""), ip)

    def build(self) -> RecommendationRequest:
        box = self._box
        if isinstance(box, (RecentlyViewed, RecommendedForYou, CartRecommend)):
            # uid may have changed since the widget was selected
            box = replace(box, uid=self._uid or "")
        return RecommendationRequest(box=box, uid=self._uid, ip=self._ip)

    def _render(self, request: RecommendationRequest) -> str:
        return build_recommendations_url(request, self._settings)


__all__ = ["RecommendationsRequestBuilder"]
