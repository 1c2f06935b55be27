"""
목적:
- HTTP 전송 계층의 공개 진입점을 제공한다.

설명:
- 상위 클라이언트는 httpx를 직접 다루지 않고 본 디스패처를 통해 호출한다.

디자인 패턴:
- 파사드(Facade).

참조:
- src_py/algolia_search/transport/dispatcher.py
- src_py/algolia_search/transport/codec.py
"""

from .codec import JsonCodec, StdJsonCodec
from .dispatcher import RequestDispatcher

__all__ = ["RequestDispatcher", "JsonCodec", "StdJsonCodec"]
