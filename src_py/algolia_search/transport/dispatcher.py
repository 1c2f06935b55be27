"""
목적:
- 다중 호스트 장애 조치(failover) 요청 디스패처를 제공한다.

설명:
- 호스트 순서는 생성 시점에 한 번만 섞고 인스턴스 수명 동안 고정한다.
- 하나의 논리 요청은 호스트를 순서대로 하나씩 시도하며, 병렬로 보내지 않는다.
- 네트워크 오류/HTTP 503/JSON 파싱 실패는 다음 호스트로 넘어가고,
  HTTP 403/404는 즉시 종료 예외로 전파한다.
- 모든 호스트가 실패하면 `HostsUnreachableError` 하나로 보고한다.

디자인 패턴:
- 어댑터(Adapter) + 장애 조치 루프(Failover Loop).

참조:
- src_py/algolia_search/config/models.py
- src_py/algolia_search/transport/codec.py
- src_py/algolia_search/client/search_client.py
"""

from __future__ import annotations

import random
import threading
from collections.abc import Mapping
from typing import Any

import httpx

from algolia_search.config.models import (
    ClientConfig,
    RateLimitForward,
    build_client_config,
    build_rate_limit_forward,
)
from algolia_search.exceptions import (
    AuthenticationError,
    ConfigurationError,
    HostsUnreachableError,
    ResourceNotFoundError,
)
from algolia_search.shared.logger import logger
from algolia_search.shared.settings import ProjectSettings, default_settings
from algolia_search.transport.codec import JsonCodec, StdJsonCodec

SUPPORTED_METHODS = frozenset({"GET", "PUT", "POST", "DELETE"})

APPLICATION_ID_HEADER = "X-Algolia-Application-Id"
API_KEY_HEADER = "X-Algolia-API-Key"
FORWARDED_FOR_HEADER = "X-Forwarded-For"
FORWARDED_API_KEY_HEADER = "X-Forwarded-API-Key"


class RequestDispatcher:
    """호스트 풀을 순차 시도하는 인증 HTTP 디스패처."""

    def __init__(
        self,
        config: ClientConfig | Mapping[str, Any],
        *,
        transport: httpx.BaseTransport | None = None,
        json_codec: JsonCodec | None = None,
        rng: random.Random | None = None,
        settings: ProjectSettings | None = None,
    ) -> None:
        self._config = build_client_config(config)
        hosts = self._config.host_list()
        if not hosts:
            raise ConfigurationError("호스트 목록이 비어 있습니다")

        (rng or random.Random()).shuffle(hosts)
        self._hosts: tuple[str, ...] = tuple(hosts)
        self._codec: JsonCodec = json_codec or StdJsonCodec()
        self._settings = settings or default_settings()
        self._forward: RateLimitForward | None = None
        self._forward_lock = threading.Lock()
        self._client = httpx.Client(
            transport=transport,
            timeout=self._config.timeout_sec,
            headers={"User-Agent": self._settings.user_agent()},
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def hosts(self) -> tuple[str, ...]:
        """생성 시점에 고정된 호스트 시도 순서."""
        return self._hosts

    @property
    def codec(self) -> JsonCodec:
        return self._codec

    @property
    def rate_limit_forward(self) -> RateLimitForward | None:
        with self._forward_lock:
            return self._forward

    def enable_rate_limit_forward(
        self,
        admin_api_key: str,
        end_user_ip: str,
        rate_limit_api_key: str,
    ) -> None:
        """관리자 키로 인증하되 최종 사용자 IP/레이트 리밋 키를 전달하도록 설정한다."""
        forward = build_rate_limit_forward(admin_api_key, end_user_ip, rate_limit_api_key)
        with self._forward_lock:
            self._forward = forward
        logger.info("레이트 리밋 전달 모드 활성화: end_user_ip={}", end_user_ip)

    def disable_rate_limit_forward(self) -> None:
        """레이트 리밋 전달 모드를 해제한다."""
        with self._forward_lock:
            self._forward = None
        logger.info("레이트 리밋 전달 모드 비활성화")

    def request(self, method: str, path: str, payload: Any = None) -> Any:
        """payload를 JSON으로 인코딩한 뒤 `execute`를 호출한다."""
        body = None if payload is None else self._codec.dumps(payload)
        return self.execute(method, path, body)

    def execute(self, method: str, path: str, body: str | None = None) -> Any:
        """논리 요청 하나를 호스트 순서대로 시도하고 파싱된 JSON 값을 반환한다."""
        normalized_method = method.upper()
        if normalized_method not in SUPPORTED_METHODS:
            raise ConfigurationError(f"지원하지 않는 HTTP 메서드입니다: {method}")
        if not path.startswith("/"):
            raise ConfigurationError(f"path는 '/'로 시작해야 합니다: {path}")

        # 한 논리 요청 안에서는 같은 자격 증명 묶음을 사용한다.
        headers = self._build_headers(self.rate_limit_forward, has_body=body is not None)
        content = body.encode("utf-8") if body is not None else None
        attempts: list[str] = []

        for host in self._hosts:
            url = f"https://{host}{path}"
            logger.debug("요청 시도: method={} url={}", normalized_method, url)

            try:
                response = self._client.request(
                    normalized_method,
                    url,
                    headers=headers,
                    content=content,
                    timeout=self._config.timeout_sec,
                )
            except (httpx.TransportError, httpx.DecodingError) as exc:
                # 압축 해제 실패도 본문 파싱 실패와 같이 다음 호스트로 넘긴다.
                attempts.append(f"{host}: {type(exc).__name__}: {exc}")
                logger.warning("호스트 전송 실패, 다음 호스트로 이동: host={} error={}", host, exc)
                continue

            status = response.status_code
            if status == 403:
                raise AuthenticationError("유효하지 않은 애플리케이션 ID 또는 API 키입니다")
            if status == 404:
                raise ResourceNotFoundError(f"리소스가 존재하지 않습니다: {path}")
            if status == 503:
                attempts.append(f"{host}: HTTP 503")
                logger.warning("호스트 일시 불가(HTTP 503), 다음 호스트로 이동: host={}", host)
                continue

            try:
                return self._codec.loads(response.content.decode("utf-8"))
            except ValueError as exc:
                # 상태 코드와 무관하게 본문 파싱 실패는 장애 조치 대상이다.
                attempts.append(f"{host}: HTTP {status} JSON 파싱 실패: {exc}")
                logger.warning(
                    "응답 JSON 파싱 실패, 다음 호스트로 이동: host={} status={}", host, status
                )
                continue

        raise HostsUnreachableError(
            f"모든 호스트에 연결할 수 없습니다: tried={len(self._hosts)}",
            attempts=attempts,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "RequestDispatcher":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _build_headers(
        self,
        forward: RateLimitForward | None,
        *,
        has_body: bool,
    ) -> dict[str, str]:
        headers = {APPLICATION_ID_HEADER: self._config.application_id}
        if forward is None:
            headers[API_KEY_HEADER] = self._config.api_key
        else:
            headers[API_KEY_HEADER] = forward.admin_api_key
            headers[FORWARDED_FOR_HEADER] = forward.end_user_ip
            headers[FORWARDED_API_KEY_HEADER] = forward.rate_limit_api_key
        if has_body:
            headers["Content-Type"] = "application/json"
        return headers
