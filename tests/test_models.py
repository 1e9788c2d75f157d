from __future__ import annotations

from unbxd_client.models import AutoSuggestResponse, RecommendationResponse, SearchResponse


def test_search_response_accessors():
    response = SearchResponse(
        data={
            "searchMetaData": {"status": 0, "queryTime": 12},
            "response": {"numberOfProducts": 40, "start": 10, "products": [{"uniqueId": "1"}]},
            "facets": {"text": {"list": []}},
            "didYouMean": [{"suggestion": "shoes"}],
        }
    )
    assert response.status == 0
    assert response.query_time == 12
    assert response.num_found == 40
    assert response.start == 10
    assert response.products == [{"uniqueId": "1"}]
    assert response.facets == {"text": {"list": []}}
    assert response.buckets == {}
    assert response.spellcheck == [{"suggestion": "shoes"}]


def test_empty_responses_have_safe_defaults():
    assert SearchResponse(data={}).num_found == 0
    assert SearchResponse(data={"response": None}).products == []
    assert AutoSuggestResponse(data={}).suggestions == []
    assert RecommendationResponse(data={}).count == 0


def test_recommendation_count_falls_back_to_product_list():
    response = RecommendationResponse(data={"Recommendations": [{"uniqueId": "a"}]})
    assert response.count == 1
    assert response.get("missing", "x") == "x"
