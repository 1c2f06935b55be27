"""
목적:
- 공통 설정/로거 공개 심볼을 정의한다.

설명:
- 패키지 전역 기본값과 로거를 중앙에서 재사용하기 위한 진입점이다.

디자인 패턴:
- 설정 객체(Configuration Object).

참조:
- src_py/algolia_search/shared/settings.py
- src_py/algolia_search/shared/logger.py
"""

from .logger import configure_logging
from .settings import ProjectSettings, default_settings

__all__ = ["ProjectSettings", "default_settings", "configure_logging"]
