import httpx
import pytest

from algolia_search import (
    ConfigurationError,
    Index,
    QueryValidationError,
    SearchQuery,
    TaskTimeoutError,
)


def test_search_appends_serialized_query(make_dispatcher, recorder) -> None:
    index = Index(make_dispatcher(recorder), "products")

    index.search(SearchQuery(query="phone").with_hits_per_page(5))

    assert recorder.last.method == "GET"
    assert recorder.last_path() == "/1/indexes/products?hitsPerPage=5&query=phone"


def test_search_without_parameters_hits_index_root(make_dispatcher, recorder) -> None:
    index = Index(make_dispatcher(recorder), "products")

    index.search()

    assert recorder.last_path() == "/1/indexes/products"


def test_search_accepts_plain_text(make_dispatcher, recorder) -> None:
    index = Index(make_dispatcher(recorder), "products")

    index.search("smart tv")

    assert recorder.last_path() == "/1/indexes/products?query=smart%20tv"


def test_search_accepts_field_mapping(make_dispatcher, recorder) -> None:
    index = Index(make_dispatcher(recorder), "products")

    index.search({"query": "phone", "hits_per_page": 5})

    assert recorder.last_path() == "/1/indexes/products?hitsPerPage=5&query=phone"


def test_search_with_invalid_mapping_is_rejected_before_request(make_dispatcher, recorder) -> None:
    index = Index(make_dispatcher(recorder), "products")

    with pytest.raises(QueryValidationError):
        index.search({"page": -1})
    assert recorder.requests == []


def test_index_name_is_percent_encoded(make_dispatcher, recorder) -> None:
    index = Index(make_dispatcher(recorder), "my index/2")

    index.get_settings()

    assert recorder.last_path() == "/1/indexes/my%20index%2F2/settings"


def test_add_object_posts_without_id_and_puts_with_id(make_dispatcher, recorder) -> None:
    index = Index(make_dispatcher(recorder), "products")

    index.add_object({"name": "tv"})
    assert recorder.last.method == "POST"
    assert recorder.last_path() == "/1/indexes/products"
    assert recorder.last_json() == {"name": "tv"}

    index.add_object({"name": "radio"}, object_id="42")
    assert recorder.last.method == "PUT"
    assert recorder.last_path() == "/1/indexes/products/42"


def test_add_objects_sends_batch_of_add_actions(make_dispatcher, recorder) -> None:
    index = Index(make_dispatcher(recorder), "products")

    index.add_objects([{"name": "a"}, {"name": "b"}])

    assert recorder.last.method == "POST"
    assert recorder.last_path() == "/1/indexes/products/batch"
    assert recorder.last_json() == {
        "requests": [
            {"action": "addObject", "body": {"name": "a"}},
            {"action": "addObject", "body": {"name": "b"}},
        ]
    }


def test_save_objects_requires_object_id(make_dispatcher, recorder) -> None:
    index = Index(make_dispatcher(recorder), "products")

    with pytest.raises(ConfigurationError):
        index.save_objects([{"objectID": "1"}, {"name": "missing-id"}])

    assert recorder.requests == []


def test_save_object_puts_full_object(make_dispatcher, recorder) -> None:
    index = Index(make_dispatcher(recorder), "products")

    index.save_object({"objectID": "7", "name": "tv"})

    assert recorder.last.method == "PUT"
    assert recorder.last_path() == "/1/indexes/products/7"


def test_partial_update_object_posts_to_partial_endpoint(make_dispatcher, recorder) -> None:
    index = Index(make_dispatcher(recorder), "products")

    index.partial_update_object({"objectID": "7", "price": 10})

    assert recorder.last.method == "POST"
    assert recorder.last_path() == "/1/indexes/products/7/partial"
    assert recorder.last_json() == {"objectID": "7", "price": 10}


def test_partial_update_objects_sends_batch(make_dispatcher, recorder) -> None:
    index = Index(make_dispatcher(recorder), "products")

    index.partial_update_objects([{"objectID": "7", "price": 10}])

    assert recorder.last_json() == {
        "requests": [
            {
                "action": "partialUpdateObject",
                "objectID": "7",
                "body": {"objectID": "7", "price": 10},
            }
        ]
    }


def test_delete_object_with_empty_id_is_rejected(make_dispatcher, recorder) -> None:
    index = Index(make_dispatcher(recorder), "products")

    with pytest.raises(ConfigurationError):
        index.delete_object("")

    assert recorder.requests == []


def test_delete_objects_sends_delete_actions(make_dispatcher, recorder) -> None:
    index = Index(make_dispatcher(recorder), "products")

    index.delete_objects(["1", "2"])

    assert recorder.last_json() == {
        "requests": [
            {"action": "deleteObject", "objectID": "1", "body": {}},
            {"action": "deleteObject", "objectID": "2", "body": {}},
        ]
    }


def test_empty_batch_is_rejected(make_dispatcher, recorder) -> None:
    index = Index(make_dispatcher(recorder), "products")

    with pytest.raises(ConfigurationError):
        index.batch([])


def test_get_object_with_attribute_selection(make_dispatcher, recorder) -> None:
    index = Index(make_dispatcher(recorder), "products")

    index.get_object("7", attributes_to_retrieve=["name", "price"])

    assert recorder.last_path() == "/1/indexes/products/7?attributes=name%2Cprice"


def test_settings_clear_and_browse_paths(make_dispatcher, recorder) -> None:
    index = Index(make_dispatcher(recorder), "products")

    index.set_settings({"hitsPerPage": 50})
    assert (recorder.last.method, recorder.last_path()) == ("PUT", "/1/indexes/products/settings")
    assert recorder.last_json() == {"hitsPerPage": 50}

    index.clear_index()
    assert (recorder.last.method, recorder.last_path()) == ("POST", "/1/indexes/products/clear")

    index.browse(page=2, hits_per_page=100)
    assert recorder.last_path() == "/1/indexes/products/browse?page=2&hitsPerPage=100"


def test_wait_task_polls_until_published(make_dispatcher) -> None:
    statuses = iter(["notPublished", "notPublished", "published"])

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"status": next(statuses)})

    dispatcher = make_dispatcher(handler)
    index = Index(dispatcher, "products")

    result = index.wait_task(123, poll_interval_ms=1)

    assert result == {"status": "published"}


def test_wait_task_raises_after_deadline(make_dispatcher) -> None:
    dispatcher = make_dispatcher(lambda request: httpx.Response(200, json={"status": "notPublished"}))
    index = Index(dispatcher, "products")

    with pytest.raises(TaskTimeoutError):
        index.wait_task(123, poll_interval_ms=1, timeout_sec=0)


@pytest.mark.parametrize("poll_interval_ms", [0, -5])
def test_wait_task_rejects_non_positive_poll_interval(
    make_dispatcher, recorder, poll_interval_ms: int
) -> None:
    index = Index(make_dispatcher(recorder), "products")

    with pytest.raises(ConfigurationError):
        index.wait_task(123, poll_interval_ms=poll_interval_ms)
    assert recorder.requests == []


def test_index_scoped_keys_use_index_path(make_dispatcher, recorder) -> None:
    index = Index(make_dispatcher(recorder), "products")

    index.keys.list_user_keys()

    assert recorder.last_path() == "/1/indexes/products/keys"


def test_empty_index_name_is_rejected(make_dispatcher, recorder) -> None:
    with pytest.raises(ConfigurationError):
        Index(make_dispatcher(recorder), "")
