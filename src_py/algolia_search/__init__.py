"""
목적:
- Algolia Search Python 패키지의 공개 진입점을 제공한다.

설명:
- 라이브러리 핵심 클래스는 `SearchClient`, `Index`, `RequestDispatcher` 세 가지다.
- 설정/쿼리 모델/예외/로깅 설정 함수를 함께 노출한다.

디자인 패턴:
- 퍼사드(Facade).

참조:
- src_py/algolia_search/client/search_client.py
- src_py/algolia_search/transport/dispatcher.py
"""

from .client import Index, KeyManagement, SearchClient
from .config.models import ClientConfig, RateLimitForward, default_hosts
from .contracts.index_models import BatchOperation, IndexOperation, UserKeySpec
from .contracts.query_models import (
    GeoAroundPoint,
    GeoBoundingBox,
    QueryType,
    SearchQuery,
    build_search_query,
)
from .exceptions import (
    AlgoliaSearchError,
    AuthenticationError,
    ConfigurationError,
    HostsUnreachableError,
    QueryValidationError,
    ResourceNotFoundError,
    TaskTimeoutError,
)
from .shared.logger import configure_logging
from .transport import JsonCodec, RequestDispatcher, StdJsonCodec
from .version import __version__

__all__ = [
    "__version__",
    "SearchClient",
    "Index",
    "KeyManagement",
    "RequestDispatcher",
    "JsonCodec",
    "StdJsonCodec",
    "ClientConfig",
    "RateLimitForward",
    "default_hosts",
    "SearchQuery",
    "build_search_query",
    "QueryType",
    "GeoBoundingBox",
    "GeoAroundPoint",
    "BatchOperation",
    "IndexOperation",
    "UserKeySpec",
    "configure_logging",
    "AlgoliaSearchError",
    "ConfigurationError",
    "QueryValidationError",
    "AuthenticationError",
    "ResourceNotFoundError",
    "HostsUnreachableError",
    "TaskTimeoutError",
]
