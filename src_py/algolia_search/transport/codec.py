"""
목적:
- 디스패처가 사용하는 JSON 인코딩/디코딩 경계를 정의한다.

설명:
- 디스패처는 특정 JSON 라이브러리에 묶이지 않고 `JsonCodec` 프로토콜만 사용한다.
- `loads`는 해석할 수 없는 본문에 대해 `ValueError`(또는 하위 타입)를 발생시켜야 한다.

디자인 패턴:
- 전략(Strategy).

참조:
- src_py/algolia_search/transport/dispatcher.py
"""

from __future__ import annotations

import json
from typing import Any, Protocol


class JsonCodec(Protocol):
    """JSON 텍스트 변환 프로토콜."""

    def loads(self, text: str) -> Any: ...

    def dumps(self, value: Any) -> str: ...


class StdJsonCodec:
    """표준 `json` 모듈 기반 기본 구현."""

    def loads(self, text: str) -> Any:
        return json.loads(text)

    def dumps(self, value: Any) -> str:
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
