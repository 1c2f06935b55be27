"""
목적:
- Algolia Search 클라이언트 계층의 예외 타입을 표준화한다.

설명:
- 설정 오류, 인증/리소스 오류, 호스트 소진 오류를 명시적으로 구분해
  라이브러리 소비자가 재시도 여부와 처리 전략을 선택할 수 있게 한다.

디자인 패턴:
- 계층형 예외(Hierarchical Exception).

참조:
- src_py/algolia_search/transport/dispatcher.py
- src_py/algolia_search/client/index.py
"""

from __future__ import annotations


class AlgoliaSearchError(Exception):
    """Algolia Search 공통 베이스 예외."""


class ConfigurationError(AlgoliaSearchError):
    """설정값 또는 호출 인자가 유효하지 않을 때 발생한다."""


class QueryValidationError(AlgoliaSearchError):
    """검색 쿼리 파라미터가 유효하지 않을 때 발생한다."""


class AuthenticationError(AlgoliaSearchError):
    """애플리케이션 ID 또는 API 키가 거절되었을 때(HTTP 403) 발생한다."""


class ResourceNotFoundError(AlgoliaSearchError):
    """요청한 리소스가 존재하지 않을 때(HTTP 404) 발생한다."""


class HostsUnreachableError(AlgoliaSearchError):
    """모든 호스트를 시도했지만 응답을 얻지 못했을 때 발생한다.

    `attempts`는 진단용 기록이며 예외 계약에는 포함되지 않는다.
    """

    def __init__(self, message: str, attempts: list[str] | None = None) -> None:
        super().__init__(message)
        self.attempts = list(attempts or [])


class TaskTimeoutError(AlgoliaSearchError):
    """태스크 대기 중 호출자가 지정한 제한 시간을 초과했을 때 발생한다."""
