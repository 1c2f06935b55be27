"""
목적:
- 사용자 API 키 관리 호출을 제공한다.

설명:
- 계정 단위(`/1/keys`)와 인덱스 단위(`/1/indexes/{name}/keys`) 키 관리를 같은 클래스로 처리한다.
- 모든 호출은 디스패처 한 번으로 끝나며, 응답 JSON을 그대로 반환한다.

디자인 패턴:
- 서비스 레이어(Service Layer).

참조:
- src_py/algolia_search/transport/dispatcher.py
- src_py/algolia_search/contracts/index_models.py
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from algolia_search.client.paths import segment
from algolia_search.contracts.index_models import UserKeySpec
from algolia_search.exceptions import ConfigurationError
from algolia_search.transport.dispatcher import RequestDispatcher


class KeyManagement:
    """사용자 API 키 CRUD 클래스."""

    def __init__(self, dispatcher: RequestDispatcher, base_path: str) -> None:
        self._dispatcher = dispatcher
        self._base_path = base_path.rstrip("/")

    @property
    def base_path(self) -> str:
        return self._base_path

    def list_user_keys(self) -> Any:
        """등록된 사용자 키와 ACL 목록을 조회한다."""
        return self._dispatcher.request("GET", self._base_path)

    def get_user_key_acl(self, key: str) -> Any:
        return self._dispatcher.request("GET", self._key_path(key))

    def delete_user_key(self, key: str) -> Any:
        return self._dispatcher.request("DELETE", self._key_path(key))

    def add_user_key(
        self,
        acl: list[str],
        validity: int = 0,
        max_queries_per_ip_per_hour: int = 0,
        max_hits_per_query: int = 0,
    ) -> Any:
        """새 사용자 키를 생성한다.

        Args:
            acl: 허용 권한 목록 (search, addObject, deleteObject, deleteIndex, settings, editSettings)
            validity: 키 자동 삭제까지의 초 (0이면 무기한)
            max_queries_per_ip_per_hour: IP당 시간별 최대 호출 수 (0이면 무제한)
            max_hits_per_query: 호출당 최대 조회 건수 (0이면 무제한)
        """
        try:
            spec = UserKeySpec(
                acl=acl,
                validity=validity,
                max_queries_per_ip_per_hour=max_queries_per_ip_per_hour,
                max_hits_per_query=max_hits_per_query,
            )
        except ValidationError as exc:
            raise ConfigurationError(f"사용자 키 요청이 유효하지 않습니다: {exc}") from exc
        return self._dispatcher.request("POST", self._base_path, spec.to_payload())

    def _key_path(self, key: str) -> str:
        if not key:
            raise ConfigurationError("key는 비어 있을 수 없습니다")
        return f"{self._base_path}/{segment(key)}"
