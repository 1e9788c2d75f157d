"""Render request snapshots into fully encoded query URLs.

Every value-bearing segment is percent-encoded as UTF-8 with no safe
characters, so spaces become ``%20`` and commas ``%2C``. Parameter names are
emitted verbatim.
"""

from __future__ import annotations

from urllib.parse import quote

from unbxd_client.config import ClientSettings
from unbxd_client.exceptions import (
    AUTOSUGGEST_ERRORS,
    RECOMMENDATIONS_ERRORS,
    SEARCH_ERRORS,
    ErrorFamily,
)
from unbxd_client.params import (
    AutoSuggestRequest,
    BrowseMode,
    QueryMode,
    RecommendationRequest,
    SearchRequest,
    TopSellers,
)

ENCODING = "utf-8"
RECOMMENDATIONS_VERSION = "v1.0"


def encode(value: object, errors: ErrorFamily) -> str:
    """Percent-encode ``value`` as UTF-8, raising the family's encoding error."""

    try:
        return quote(str(value), safe="", encoding=ENCODING, errors="strict")
    except UnicodeError as exc:
        raise errors.encoding(f"Could not encode {value!r} as {ENCODING}", cause=exc) from exc


class QueryString:
    """Accumulates ``&key=value`` pairs onto a base URL in insertion order."""

    def __init__(self, base_url: str, errors: ErrorFamily) -> None:
        self._parts = [base_url]
        self._errors = errors

    def add(self, key: str, value: object) -> "QueryString":
        self._parts.append(f"&{key}={encode(value, self._errors)}")
        return self

    def add_raw(self, key: str, value: int) -> "QueryString":
        self._parts.append(f"&{key}={value}")
        return self

    def render(self) -> str:
        return "".join(self._parts)


def search_base_url(settings: ClientSettings, endpoint: str) -> str:
    api_key = settings.api_key.get_secret_value()
    return f"{settings.scheme}://{settings.search_host}/{api_key}/{settings.site_key}/{endpoint}?wt=json"


def recommendations_base_url(settings: ClientSettings) -> str:
    api_key = settings.api_key.get_secret_value()
    return (
        f"{settings.scheme}://{settings.recommendations_host}/"
        f"{RECOMMENDATIONS_VERSION}/{api_key}/{settings.site_key}/"
    )


def build_search_url(request: SearchRequest, settings: ClientSettings) -> str:
    mode = request.mode
    if isinstance(mode, QueryMode):
        url = QueryString(search_base_url(settings, "search"), SEARCH_ERRORS)
        url.add("q", mode.query)
        if mode.bucket_field is not None:
            url.add("bucket.field", mode.bucket_field)
    elif isinstance(mode, BrowseMode):
        url = QueryString(search_base_url(settings, "browse"), SEARCH_ERRORS)
        url.add("category-id", ",".join(mode.category_ids))
    else:
        raise SEARCH_ERRORS.configuration("Either a query or a category id must be set")

    for key, value in request.query_params:
        url.add(key, value)

    for field, values in request.filters:
        for value in values:
            url.add("filter", f'{field}:"{value}"')

    if request.sorts:
        url.add("sort", ",".join(f"{field} {direction.value}" for field, direction in request.sorts))

    url.add_raw("pageNumber", request.page_number)
    url.add_raw("rows", request.page_size)
    return url.render()


def build_autosuggest_url(request: AutoSuggestRequest, settings: ClientSettings) -> str:
    url = QueryString(search_base_url(settings, "autosuggest"), AUTOSUGGEST_ERRORS)
    if request.query is not None:
        url.add("q", request.query)
    for name, count in request.counts():
        url.add(name, count)
    return url.render()


def build_recommendations_url(request: RecommendationRequest, settings: ClientSettings) -> str:
    box = request.box
    if box is None:
        raise RECOMMENDATIONS_ERRORS.configuration("no recommendation widget selected")

    if isinstance(box, TopSellers):
        route = f"{box.route}/"
    else:
        route = f"{box.route}/{encode(box.path_param, RECOMMENDATIONS_ERRORS)}"

    url = QueryString(
        f"{recommendations_base_url(settings)}{route}?format=json", RECOMMENDATIONS_ERRORS
    )
    if request.uid is not None:
        url.add("uid", request.uid)
    if request.ip is not None:
        url.add("ip", request.ip)
    return url.render()


def redact(url: str, settings: ClientSettings) -> str:
    """Mask the api key so URLs can be logged."""

    api_key = settings.api_key.get_secret_value()
    if not api_key:
        return url
    return url.replace(api_key, "***")


__all__ = [
    "ENCODING",
    "encode",
    "QueryString",
    "search_base_url",
    "recommendations_base_url",
    "build_search_url",
    "build_autosuggest_url",
    "build_recommendations_url",
    "redact",
]
