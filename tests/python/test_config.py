import pytest
from pydantic import ValidationError

from algolia_search import ClientConfig, ConfigurationError, default_hosts
from algolia_search.config import build_client_config, build_rate_limit_forward


def test_default_hosts_are_derived_from_application_id() -> None:
    assert default_hosts("APPID") == [
        "APPID-1.algolia.io",
        "APPID-2.algolia.io",
        "APPID-3.algolia.io",
    ]


def test_omitted_hosts_fall_back_to_default_pool() -> None:
    config = ClientConfig(application_id="app", api_key="key")

    assert config.host_list() == default_hosts("app")
    assert config.timeout_sec == 30.0


def test_hosts_are_stripped() -> None:
    config = ClientConfig(application_id="app", api_key="key", hosts=[" h1 ", "h2"])

    assert config.host_list() == ["h1", "h2"]


@pytest.mark.parametrize(
    "values",
    [
        {"application_id": "", "api_key": "key"},
        {"application_id": "   ", "api_key": "key"},
        {"application_id": "app", "api_key": ""},
        {"application_id": "app", "api_key": "key", "hosts": []},
        {"application_id": "app", "api_key": "key", "task_poll_interval_ms": 0},
    ],
)
def test_invalid_values_raise_configuration_error(values: dict) -> None:
    with pytest.raises(ConfigurationError):
        build_client_config(values)


@pytest.mark.parametrize(
    "host",
    ["h1:notaport", "h1.example.test/1", "user@h1.example.test", "h1 bad.example.test"],
)
def test_malformed_host_raises_configuration_error(host: str) -> None:
    with pytest.raises(ConfigurationError):
        build_client_config(
            {"application_id": "app", "api_key": "key", "hosts": [host, "h2.example.test"]}
        )


def test_host_with_port_is_accepted() -> None:
    config = build_client_config(
        {"application_id": "app", "api_key": "key", "hosts": ["h1.example.test:8443"]}
    )

    assert config.host_list() == ["h1.example.test:8443"]


def test_config_is_frozen() -> None:
    config = ClientConfig(application_id="app", api_key="key")

    with pytest.raises(ValidationError):
        config.api_key = "other"


def test_rate_limit_forward_is_built_as_one_value() -> None:
    forward = build_rate_limit_forward("admin", "10.0.0.1", "limited")

    assert (forward.admin_api_key, forward.end_user_ip, forward.rate_limit_api_key) == (
        "admin",
        "10.0.0.1",
        "limited",
    )
