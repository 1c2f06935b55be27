import httpx
import pytest

from algolia_search import ClientConfig, ConfigurationError, Index, SearchClient


def _client(recorder) -> SearchClient:
    return SearchClient.create(
        "app",
        "admin-key",
        ["h1.example.test"],
        transport=httpx.MockTransport(recorder),
    )


def test_list_indexes(recorder) -> None:
    with _client(recorder) as client:
        client.list_indexes()

    assert recorder.last.method == "GET"
    assert recorder.last_path() == "/1/indexes/"


def test_delete_index_encodes_name(recorder) -> None:
    with _client(recorder) as client:
        client.delete_index("old products")

    assert recorder.last.method == "DELETE"
    assert recorder.last_path() == "/1/indexes/old%20products"


@pytest.mark.parametrize("operation", ["move", "copy"])
def test_move_and_copy_post_operation_payload(recorder, operation: str) -> None:
    with _client(recorder) as client:
        getattr(client, f"{operation}_index")("src", "dst")

    assert recorder.last.method == "POST"
    assert recorder.last_path() == "/1/indexes/src/operation"
    assert recorder.last_json() == {"operation": operation, "destination": "dst"}


def test_get_logs_paths(recorder) -> None:
    with _client(recorder) as client:
        client.get_logs()
        assert recorder.last_path() == "/1/logs"

        client.get_logs(offset=5, length=100)
        assert recorder.last_path() == "/1/logs?offset=5&length=100"

        with pytest.raises(ConfigurationError):
            client.get_logs(offset=0, length=1_001)


def test_init_index_does_not_call_server(recorder) -> None:
    with _client(recorder) as client:
        index = client.init_index("products")

    assert isinstance(index, Index)
    assert index.name == "products"
    assert recorder.requests == []


def test_add_user_key_payload(recorder) -> None:
    with _client(recorder) as client:
        client.keys.add_user_key(["search"], validity=3600, max_queries_per_ip_per_hour=100)

    assert recorder.last.method == "POST"
    assert recorder.last_path() == "/1/keys"
    assert recorder.last_json() == {
        "acl": ["search"],
        "validity": 3600,
        "maxQueriesPerIPPerHour": 100,
        "maxHitsPerQuery": 0,
    }


def test_user_key_get_and_delete_paths(recorder) -> None:
    with _client(recorder) as client:
        client.keys.get_user_key_acl("abc")
        assert (recorder.last.method, recorder.last_path()) == ("GET", "/1/keys/abc")

        client.keys.delete_user_key("abc")
        assert (recorder.last.method, recorder.last_path()) == ("DELETE", "/1/keys/abc")


@pytest.mark.parametrize("acl", [[], ["fly"]])
def test_add_user_key_rejects_invalid_acl(recorder, acl: list[str]) -> None:
    with _client(recorder) as client:
        with pytest.raises(ConfigurationError):
            client.keys.add_user_key(acl)

    assert recorder.requests == []


def test_rate_limit_forward_passthrough(recorder) -> None:
    with _client(recorder) as client:
        client.enable_rate_limit_forward("admin-key", "198.51.100.1", "limited-key")
        client.list_indexes()
        assert recorder.last.headers["X-Forwarded-API-Key"] == "limited-key"

        client.disable_rate_limit_forward()
        client.list_indexes()
        assert "X-Forwarded-API-Key" not in recorder.last.headers


@pytest.mark.parametrize(
    ("application_id", "api_key", "hosts"),
    [("", "key", None), ("app", "", None), ("app", "key", [])],
)
def test_create_rejects_empty_values(application_id: str, api_key: str, hosts) -> None:
    with pytest.raises(ConfigurationError):
        SearchClient.create(application_id, api_key, hosts)


def test_client_accepts_validated_config(recorder) -> None:
    config = ClientConfig(application_id="app", api_key="key", hosts=["h1.example.test"])

    with SearchClient(config, transport=httpx.MockTransport(recorder)) as client:
        assert client.dispatcher.config is config
        assert client.dispatcher.hosts == ("h1.example.test",)


def test_close_releases_http_client(recorder) -> None:
    client = _client(recorder)

    client.close()

    with pytest.raises(RuntimeError):
        client.list_indexes()
