"""
목적:
- 계정 단위 API 진입점 클래스를 제공한다.

설명:
- 애플리케이션 ID/API 키/호스트 풀로 디스패처를 만들고 인덱스/로그/키 관리 호출을 노출한다.
- `init_index()`는 서버 호출 없이 `Index` 객체만 만든다.

디자인 패턴:
- 파사드(Facade).

참조:
- src_py/algolia_search/transport/dispatcher.py
- src_py/algolia_search/client/index.py
- src_py/algolia_search/client/keys.py
"""

from __future__ import annotations

import random
from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import ValidationError

from algolia_search.client.index import Index
from algolia_search.client.keys import KeyManagement
from algolia_search.client.paths import INDEXES_PATH, KEYS_PATH, LOGS_PATH, index_path
from algolia_search.config.models import ClientConfig
from algolia_search.contracts.index_models import IndexOperation
from algolia_search.exceptions import ConfigurationError
from algolia_search.transport.codec import JsonCodec
from algolia_search.transport.dispatcher import RequestDispatcher

MAX_LOG_LENGTH = 1_000


class SearchClient:
    """검색 서비스 계정 클라이언트."""

    def __init__(
        self,
        config: ClientConfig | Mapping[str, Any],
        *,
        transport: httpx.BaseTransport | None = None,
        json_codec: JsonCodec | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._dispatcher = RequestDispatcher(
            config,
            transport=transport,
            json_codec=json_codec,
            rng=rng,
        )
        self.keys = KeyManagement(self._dispatcher, KEYS_PATH)

    @classmethod
    def create(
        cls,
        application_id: str,
        api_key: str,
        hosts: list[str] | None = None,
        *,
        timeout_sec: float | None = None,
        **kwargs: Any,
    ) -> "SearchClient":
        """애플리케이션 ID/API 키로 클라이언트를 생성한다. hosts를 생략하면 기본 호스트 풀을 쓴다."""
        values: dict[str, Any] = {
            "application_id": application_id,
            "api_key": api_key,
            "hosts": hosts,
        }
        if timeout_sec is not None:
            values["timeout_sec"] = timeout_sec
        return cls(values, **kwargs)

    @property
    def dispatcher(self) -> RequestDispatcher:
        return self._dispatcher

    def enable_rate_limit_forward(
        self,
        admin_api_key: str,
        end_user_ip: str,
        rate_limit_api_key: str,
    ) -> None:
        """프록시 뒤의 최종 사용자 IP 기준 레이트 리밋을 사용한다."""
        self._dispatcher.enable_rate_limit_forward(admin_api_key, end_user_ip, rate_limit_api_key)

    def disable_rate_limit_forward(self) -> None:
        self._dispatcher.disable_rate_limit_forward()

    def list_indexes(self) -> Any:
        """전체 인덱스 목록을 조회한다."""
        return self._dispatcher.request("GET", f"{INDEXES_PATH}/")

    def delete_index(self, index_name: str) -> Any:
        if not index_name:
            raise ConfigurationError("index_name은 비어 있을 수 없습니다")
        return self._dispatcher.request("DELETE", index_path(index_name))

    def move_index(self, src_index_name: str, dst_index_name: str) -> Any:
        """인덱스를 이동한다. 대상 인덱스가 있으면 덮어쓴다."""
        return self._index_operation("move", src_index_name, dst_index_name)

    def copy_index(self, src_index_name: str, dst_index_name: str) -> Any:
        """인덱스를 복사한다. 대상 인덱스가 있으면 덮어쓴다."""
        return self._index_operation("copy", src_index_name, dst_index_name)

    def get_logs(self, offset: int | None = None, length: int | None = None) -> Any:
        """최근 API 로그를 조회한다. 인자를 생략하면 서버 기본값(최근 10건)을 사용한다."""
        if offset is None and length is None:
            return self._dispatcher.request("GET", LOGS_PATH)

        offset = 0 if offset is None else offset
        length = 10 if length is None else length
        if offset < 0:
            raise ConfigurationError("offset은 0 이상이어야 합니다")
        if not 1 <= length <= MAX_LOG_LENGTH:
            raise ConfigurationError(f"length는 1 이상 {MAX_LOG_LENGTH} 이하여야 합니다")
        return self._dispatcher.request("GET", f"{LOGS_PATH}?offset={offset}&length={length}")

    def init_index(self, index_name: str) -> Index:
        return Index(self._dispatcher, index_name)

    def close(self) -> None:
        self._dispatcher.close()

    def __enter__(self) -> "SearchClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _index_operation(self, operation: str, src_index_name: str, dst_index_name: str) -> Any:
        if not src_index_name:
            raise ConfigurationError("src_index_name은 비어 있을 수 없습니다")
        try:
            request = IndexOperation(operation=operation, destination=dst_index_name)
        except ValidationError as exc:
            raise ConfigurationError(f"인덱스 작업 요청이 유효하지 않습니다: {exc}") from exc
        path = f"{index_path(src_index_name)}/operation"
        return self._dispatcher.request("POST", path, request.to_payload())
