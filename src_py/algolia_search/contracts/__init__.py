"""
목적:
- Python 계약 모델 계층의 공개 심볼을 제공한다.

설명:
- 검색 쿼리/배치/키 관리 모델을 하나의 네임스페이스에서 재노출한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/algolia_search/contracts/query_models.py
- src_py/algolia_search/contracts/index_models.py
"""

from .index_models import BatchOperation, IndexOperation, UserKeySpec
from .query_models import (
    GeoAroundPoint,
    GeoBoundingBox,
    QueryType,
    SearchQuery,
    build_search_query,
)

__all__ = [
    "SearchQuery",
    "build_search_query",
    "QueryType",
    "GeoBoundingBox",
    "GeoAroundPoint",
    "BatchOperation",
    "IndexOperation",
    "UserKeySpec",
]
