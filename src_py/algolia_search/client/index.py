"""
목적:
- 단일 인덱스에 대한 검색/객체/설정/배치 호출을 제공한다.

설명:
- 모든 메서드는 디스패처 호출 한 번(또는 `wait_task`의 폴링 반복)으로 구성된다.
- 인덱스 이름과 객체 ID는 경로 세그먼트로 퍼센트 인코딩한다.
- 빈 객체 ID 삭제는 인덱스 루트 삭제로 이어질 수 있으므로 호출 전에 거절한다.

디자인 패턴:
- 서비스 레이어(Service Layer).

참조:
- src_py/algolia_search/transport/dispatcher.py
- src_py/algolia_search/contracts/query_models.py
- src_py/algolia_search/contracts/index_models.py
"""

from __future__ import annotations

import time
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from algolia_search.client.keys import KeyManagement
from algolia_search.client.paths import index_path, segment
from algolia_search.contracts.index_models import BatchAction, BatchOperation
from algolia_search.contracts.query_models import SearchQuery, build_search_query
from algolia_search.exceptions import ConfigurationError, TaskTimeoutError
from algolia_search.shared.logger import logger
from algolia_search.transport.dispatcher import RequestDispatcher

OBJECT_ID_KEY = "objectID"
TASK_PUBLISHED = "published"


class Index:
    """인덱스 단위 API 클래스. 생성 시 서버 호출은 없다."""

    def __init__(self, dispatcher: RequestDispatcher, index_name: str) -> None:
        if not index_name:
            raise ConfigurationError("index_name은 비어 있을 수 없습니다")
        self._dispatcher = dispatcher
        self._name = index_name
        self._path = index_path(index_name)
        self.keys = KeyManagement(dispatcher, f"{self._path}/keys")

    @property
    def name(self) -> str:
        return self._name

    def search(self, query: SearchQuery | Mapping[str, Any] | str | None = None) -> Any:
        """검색을 실행한다. 문자열을 넘기면 전문 검색 질의로, 매핑을 넘기면 필드 값으로 사용한다."""
        if isinstance(query, str):
            query = {"query": query}
        query_string = build_search_query(query).to_query_string()
        path = f"{self._path}?{query_string}" if query_string else self._path
        return self._dispatcher.request("GET", path)

    def browse(self, page: int = 0, hits_per_page: int | None = None) -> Any:
        """인덱스 전체 내용을 페이지 단위로 조회한다."""
        if page < 0:
            raise ConfigurationError("page는 0 이상이어야 합니다")
        path = f"{self._path}/browse?page={page}"
        if hits_per_page is not None:
            if hits_per_page < 1:
                raise ConfigurationError("hits_per_page는 1 이상이어야 합니다")
            path += f"&hitsPerPage={hits_per_page}"
        return self._dispatcher.request("GET", path)

    def add_object(self, obj: dict[str, Any], object_id: str | None = None) -> Any:
        """객체를 추가한다. object_id를 주면 해당 ID로 저장한다."""
        if object_id is None:
            return self._dispatcher.request("POST", self._path, obj)
        return self._dispatcher.request("PUT", self._object_path(object_id), obj)

    def add_objects(self, objects: list[dict[str, Any]]) -> Any:
        return self.batch(_to_operations("addObject", objects))

    def get_object(self, object_id: str, attributes_to_retrieve: list[str] | None = None) -> Any:
        path = self._object_path(object_id)
        if attributes_to_retrieve:
            path += f"?attributes={segment(','.join(attributes_to_retrieve))}"
        return self._dispatcher.request("GET", path)

    def save_object(self, obj: dict[str, Any]) -> Any:
        """`objectID`를 가진 객체 전체를 덮어쓴다."""
        return self._dispatcher.request("PUT", self._object_path(_require_object_id(obj)), obj)

    def save_objects(self, objects: list[dict[str, Any]]) -> Any:
        return self.batch(_to_operations("updateObject", objects))

    def partial_update_object(self, obj: dict[str, Any]) -> Any:
        """`objectID`를 가진 객체의 일부 속성만 갱신한다."""
        path = f"{self._object_path(_require_object_id(obj))}/partial"
        return self._dispatcher.request("POST", path, obj)

    def partial_update_objects(self, objects: list[dict[str, Any]]) -> Any:
        return self.batch(_to_operations("partialUpdateObject", objects))

    def delete_object(self, object_id: str) -> Any:
        return self._dispatcher.request("DELETE", self._object_path(object_id))

    def delete_objects(self, object_ids: list[str]) -> Any:
        operations = [
            _build_operation("deleteObject", object_id=object_id, body={})
            for object_id in object_ids
        ]
        return self.batch(operations)

    def batch(self, operations: list[BatchOperation]) -> Any:
        """여러 쓰기 작업을 한 번의 요청으로 전송한다."""
        if not operations:
            raise ConfigurationError("batch 작업 목록이 비어 있습니다")
        payload = {"requests": [operation.to_payload() for operation in operations]}
        return self._dispatcher.request("POST", f"{self._path}/batch", payload)

    def wait_task(
        self,
        task_id: int | str,
        poll_interval_ms: int | None = None,
        timeout_sec: float | None = None,
    ) -> Any:
        """태스크가 `published` 상태가 될 때까지 폴링한다."""
        if poll_interval_ms is None:
            interval_ms = self._dispatcher.config.task_poll_interval_ms
        elif poll_interval_ms < 1:
            raise ConfigurationError("poll_interval_ms는 1 이상이어야 합니다")
        else:
            interval_ms = poll_interval_ms
        if timeout_sec is not None and timeout_sec < 0:
            raise ConfigurationError("timeout_sec는 0 이상이어야 합니다")
        deadline = None if timeout_sec is None else time.monotonic() + timeout_sec
        path = f"{self._path}/task/{segment(str(task_id))}"

        while True:
            result = self._dispatcher.request("GET", path)
            if isinstance(result, dict) and result.get("status") == TASK_PUBLISHED:
                return result
            if deadline is not None and time.monotonic() >= deadline:
                raise TaskTimeoutError(
                    f"태스크 대기 시간이 초과되었습니다: index={self._name} task_id={task_id}"
                )
            logger.debug("태스크 대기 중: index={} task_id={}", self._name, task_id)
            time.sleep(interval_ms / 1000.0)

    def clear_index(self) -> Any:
        """인덱스 설정은 유지하고 모든 객체를 삭제한다."""
        return self._dispatcher.request("POST", f"{self._path}/clear")

    def get_settings(self) -> Any:
        return self._dispatcher.request("GET", f"{self._path}/settings")

    def set_settings(self, settings: dict[str, Any]) -> Any:
        return self._dispatcher.request("PUT", f"{self._path}/settings", settings)

    def _object_path(self, object_id: str) -> str:
        if not object_id:
            raise ConfigurationError("object_id는 비어 있을 수 없습니다")
        return f"{self._path}/{segment(object_id)}"


def _require_object_id(obj: dict[str, Any]) -> str:
    object_id = obj.get(OBJECT_ID_KEY)
    if not object_id:
        raise ConfigurationError(f"객체에 {OBJECT_ID_KEY}가 없습니다")
    return str(object_id)


def _to_operations(action: BatchAction, objects: list[dict[str, Any]]) -> list[BatchOperation]:
    operations: list[BatchOperation] = []
    for obj in objects:
        object_id = None if action == "addObject" else _require_object_id(obj)
        operations.append(_build_operation(action, object_id=object_id, body=obj))
    return operations


def _build_operation(
    action: BatchAction,
    *,
    object_id: str | None,
    body: dict[str, Any],
) -> BatchOperation:
    try:
        return BatchOperation(action=action, object_id=object_id, body=body)
    except ValidationError as exc:
        raise ConfigurationError(f"배치 작업이 유효하지 않습니다: {exc}") from exc
