"""
목적:
- Algolia Search 클라이언트의 설정 인터페이스를 정의한다.

설명:
- 애플리케이션 ID/API 키/호스트 풀/타임아웃 값을 단일 모델로 관리한다.
- 라이브러리는 `.env`나 환경 변수를 직접 읽지 않고, 외부에서 생성된 설정 객체를 주입받는다.
- 호스트 목록을 생략하면 애플리케이션 ID 기반 기본 호스트 풀을 사용한다.

디자인 패턴:
- 값 객체(Value Object).

참조:
- scripts/run-search.py
- src_py/algolia_search/transport/dispatcher.py
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from algolia_search.exceptions import ConfigurationError

DEFAULT_HOST_SUFFIX = "algolia.io"
DEFAULT_HOST_COUNT = 3


def default_hosts(application_id: str) -> list[str]:
    """애플리케이션 ID로 기본 호스트 풀을 생성한다."""
    return [
        f"{application_id}-{index}.{DEFAULT_HOST_SUFFIX}"
        for index in range(1, DEFAULT_HOST_COUNT + 1)
    ]


def _validate_host(host: str) -> None:
    """`https://{host}` 형태로 조립 가능한 호스트(선택적 포트 포함)인지 확인한다."""
    if any(char in "/?#@" or char.isspace() for char in host):
        raise ValueError(f"호스트 이름에 공백/경로/쿼리/인증 정보를 포함할 수 없습니다: {host}")
    try:
        url = httpx.URL(f"https://{host}")
    except httpx.InvalidURL as exc:
        raise ValueError(f"유효하지 않은 호스트입니다: {host}: {exc}") from exc
    if not url.host:
        raise ValueError(f"유효하지 않은 호스트입니다: {host}")


class ClientConfig(BaseModel):
    """API 클라이언트 접속 설정 모델."""

    model_config = ConfigDict(frozen=True)

    application_id: str = Field(min_length=1)
    api_key: str = Field(min_length=1)
    hosts: list[str] | None = Field(default=None)
    timeout_sec: float = Field(default=30.0, gt=0)
    task_poll_interval_ms: int = Field(default=100, ge=1)

    @field_validator("application_id", "api_key")
    @classmethod
    def validate_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("공백만으로 이루어진 값은 사용할 수 없습니다")
        return value

    @field_validator("hosts")
    @classmethod
    def validate_hosts(cls, value: list[str] | None) -> list[str] | None:
        if value is None:
            return None
        if not value:
            raise ValueError("hosts는 최소 1개 이상이어야 합니다")
        normalized = [host.strip() for host in value]
        if any(not host for host in normalized):
            raise ValueError("hosts에 빈 호스트 이름이 포함되어 있습니다")
        for host in normalized:
            _validate_host(host)
        return normalized

    @model_validator(mode="before")
    @classmethod
    def fill_default_hosts(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("hosts") is None and data.get("application_id"):
            return {**data, "hosts": default_hosts(str(data["application_id"]))}
        return data

    def host_list(self) -> list[str]:
        """검증된 호스트 목록 사본을 반환한다."""
        return list(self.hosts or [])


class RateLimitForward(BaseModel):
    """레이트 리밋 전달 모드의 자격 증명 3종 모델.

    세 값은 항상 함께 설정되거나 함께 해제된다.
    """

    model_config = ConfigDict(frozen=True)

    admin_api_key: str = Field(min_length=1)
    end_user_ip: str = Field(min_length=1)
    rate_limit_api_key: str = Field(min_length=1)


def build_client_config(value: ClientConfig | Mapping[str, Any]) -> ClientConfig:
    """설정 객체 또는 매핑을 검증된 `ClientConfig`로 변환한다."""
    if isinstance(value, ClientConfig):
        return value
    try:
        return ClientConfig.model_validate(dict(value))
    except ValidationError as exc:
        raise ConfigurationError(f"클라이언트 설정이 유효하지 않습니다: {exc}") from exc


def build_rate_limit_forward(
    admin_api_key: str,
    end_user_ip: str,
    rate_limit_api_key: str,
) -> RateLimitForward:
    """레이트 리밋 전달 자격 증명 3종을 한 번에 검증한다."""
    try:
        return RateLimitForward(
            admin_api_key=admin_api_key,
            end_user_ip=end_user_ip,
            rate_limit_api_key=rate_limit_api_key,
        )
    except ValidationError as exc:
        raise ConfigurationError(f"레이트 리밋 전달 설정이 유효하지 않습니다: {exc}") from exc
