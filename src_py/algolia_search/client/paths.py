"""
목적:
- REST 경로 조립 유틸을 제공한다.

설명:
- 인덱스 이름/객체 ID/키 같은 경로 세그먼트는 예약 문자를 모두 퍼센트 인코딩한다.

디자인 패턴:
- 유틸리티 모듈(Utility Module).

참조:
- src_py/algolia_search/client/index.py
- src_py/algolia_search/client/keys.py
"""

from __future__ import annotations

from urllib.parse import quote

API_PREFIX = "/1"
INDEXES_PATH = f"{API_PREFIX}/indexes"
KEYS_PATH = f"{API_PREFIX}/keys"
LOGS_PATH = f"{API_PREFIX}/logs"


def segment(value: str) -> str:
    """단일 경로 세그먼트를 인코딩한다."""
    return quote(value, safe="")


def index_path(index_name: str) -> str:
    return f"{INDEXES_PATH}/{segment(index_name)}"
