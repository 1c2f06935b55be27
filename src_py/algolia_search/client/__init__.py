"""
목적:
- 클라이언트 계층의 공개 진입점을 제공한다.

설명:
- 계정 클라이언트, 인덱스, 키 관리 클래스를 재노출한다.

디자인 패턴:
- 파사드(Facade).

참조:
- src_py/algolia_search/client/search_client.py
- src_py/algolia_search/client/index.py
- src_py/algolia_search/client/keys.py
"""

from .index import Index
from .keys import KeyManagement
from .search_client import SearchClient

__all__ = ["SearchClient", "Index", "KeyManagement"]
