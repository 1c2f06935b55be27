"""
목적:
- 인덱스/키 관리 요청 본문 모델을 정의한다.

설명:
- 배치 작업 항목, 인덱스 이동/복사 작업, 사용자 키 생성 요청을 명시적으로 검증한다.
- `to_payload()`는 서버 계약의 camelCase 키로 변환한 dict를 반환한다.

디자인 패턴:
- DTO(Data Transfer Object).

참조:
- src_py/algolia_search/client/index.py
- src_py/algolia_search/client/keys.py
- src_py/algolia_search/client/search_client.py
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

BatchAction = Literal["addObject", "updateObject", "partialUpdateObject", "deleteObject"]
IndexOperationName = Literal["move", "copy"]
AclName = Literal["search", "addObject", "deleteObject", "deleteIndex", "settings", "editSettings"]


class BatchOperation(BaseModel):
    """배치 요청의 단일 작업 모델."""

    action: BatchAction
    object_id: str | None = Field(default=None, min_length=1)
    body: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def validate_object_id(self) -> "BatchOperation":
        if self.action != "addObject" and self.object_id is None:
            raise ValueError(f"{self.action} 작업에는 object_id가 필요합니다")
        return self

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"action": self.action, "body": self.body}
        if self.object_id is not None:
            payload["objectID"] = self.object_id
        return payload


class IndexOperation(BaseModel):
    """인덱스 이동/복사 요청 모델."""

    operation: IndexOperationName
    destination: str = Field(min_length=1)

    def to_payload(self) -> dict[str, Any]:
        return {"operation": self.operation, "destination": self.destination}


class UserKeySpec(BaseModel):
    """사용자 API 키 생성 요청 모델.

    validity가 0이면 만료되지 않으며, 두 한도 값이 0이면 제한이 없다.
    """

    acl: list[AclName] = Field(min_length=1)
    validity: int = Field(default=0, ge=0)
    max_queries_per_ip_per_hour: int = Field(default=0, ge=0)
    max_hits_per_query: int = Field(default=0, ge=0)

    def to_payload(self) -> dict[str, Any]:
        return {
            "acl": list(self.acl),
            "validity": self.validity,
            "maxQueriesPerIPPerHour": self.max_queries_per_ip_per_hour,
            "maxHitsPerQuery": self.max_hits_per_query,
        }
