"""Tests for the autosuggest request builder."""

from __future__ import annotations

import httpx
import pytest

from unbxd_client.exceptions import AutoSuggestApiError, AutoSuggestConfigurationError, AutoSuggestError
from unbxd_client.models import AutoSuggestResponse


def test_no_counts_are_emitted_by_default(client):
    url = client.autosuggest().autosuggest("sho").generate_url()
    assert url == "https://search.unbxdapi.com/secret-key/demo-site/autosuggest?wt=json&q=sho"


def test_only_explicitly_set_count_is_emitted(client):
    url = client.autosuggest().autosuggest("sho").set_popular_products_count(5).generate_url()
    counts = [part for part in url.split("&") if ".count=" in part]
    assert counts == ["popularProducts.count=5"]


def test_all_counts_in_wire_order(client):
    url = (
        client.autosuggest()
        .autosuggest("sho")
        .set_top_queries_count(4)
        .set_keyword_suggestions_count(3)
        .set_popular_products_count(2)
        .set_in_fields_count(1)
        .generate_url()
    )
    assert url.endswith(
        "&q=sho&inFields.count=1&popularProducts.count=2"
        "&keywordSuggestions.count=3&topQueries.count=4"
    )


def test_count_reset_to_unset_is_not_emitted(client):
    url = client.autosuggest().autosuggest("sho").set_in_fields_count(3).set_in_fields_count(-1).generate_url()
    assert "inFields.count" not in url


def test_zero_count_is_emitted(client):
    url = client.autosuggest().autosuggest("sho").set_top_queries_count(0).generate_url()
    assert url.endswith("&topQueries.count=0")


def test_negative_count_is_rejected(client):
    with pytest.raises(AutoSuggestConfigurationError):
        client.autosuggest().autosuggest("sho").set_in_fields_count(-5).generate_url()


def test_query_is_encoded(client):
    url = client.autosuggest().autosuggest("t-shirt & jeans").generate_url()
    assert "&q=t-shirt%20%26%20jeans" in url


def test_execute_groups_suggestions(make_client):
    docs = [
        {"doctype": "IN_FIELD", "autosuggest": "shoes in men"},
        {"doctype": "POPULAR_PRODUCTS", "autosuggest": "Runner 2"},
        {"doctype": "KEYWORD_SUGGESTION", "autosuggest": "shoe rack"},
        {"doctype": "TOP_SEARCH_QUERIES", "autosuggest": "shoes"},
    ]

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/secret-key/demo-site/autosuggest"
        assert request.url.params["popularProducts.count"] == "5"
        return httpx.Response(200, json={"response": {"numFound": 4, "products": docs}})

    client = make_client(handler)
    response = client.autosuggest().autosuggest("sho").set_popular_products_count(5).execute()

    assert isinstance(response, AutoSuggestResponse)
    assert response.num_found == 4
    assert [doc["autosuggest"] for doc in response.popular_products] == ["Runner 2"]
    assert len(response.in_fields) == 1
    assert len(response.keyword_suggestions) == 1
    assert len(response.top_queries) == 1


def test_execute_api_error_belongs_to_autosuggest_domain(make_client):
    client = make_client(lambda request: httpx.Response(500, text="boom"))

    with pytest.raises(AutoSuggestApiError) as exc_info:
        client.autosuggest().autosuggest("sho").execute()
    assert isinstance(exc_info.value, AutoSuggestError)
    assert str(exc_info.value) == "boom"
