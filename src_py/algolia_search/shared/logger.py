"""
목적:
- 라이브러리 공통 로거를 제공한다.

설명:
- loguru 로거를 그대로 사용하되, 라이브러리 네임스페이스는 import 시점에 비활성화한다.
- 소비자 애플리케이션이 `configure_logging()`을 호출할 때만 로그가 출력된다.
- 자격 증명(API 키)은 어떤 레벨에서도 기록하지 않는다.

디자인 패턴:
- 모듈 싱글턴(Module Singleton).

참조:
- src_py/algolia_search/transport/dispatcher.py
- scripts/run-search.py
"""

from __future__ import annotations

import sys
from typing import Any

from loguru import logger

PACKAGE_NAME = "algolia_search"

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{message}</cyan>"
)

PLAIN_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}"

logger.disable(PACKAGE_NAME)


def _package_filter(record: dict) -> bool:  # type: ignore[type-arg]
    return record["name"].startswith(PACKAGE_NAME)


def configure_logging(level: str = "INFO", sink: Any = None, colorize: bool | None = None) -> int:
    """라이브러리 로그를 활성화하고 싱크를 등록한다.

    Args:
        level: 최소 로그 레벨
        sink: loguru 싱크(기본: stderr)
        colorize: 색상 사용 여부(기본: 터미널 여부로 판단)

    Returns:
        `logger.remove()`에 넘길 수 있는 싱크 ID
    """
    logger.enable(PACKAGE_NAME)
    target = sink if sink is not None else sys.stderr
    log_format = CONSOLE_FORMAT if target is sys.stderr else PLAIN_FORMAT
    return logger.add(
        target,
        level=level.upper(),
        format=log_format,
        filter=_package_filter,  # type: ignore[arg-type]
        colorize=colorize,
    )


__all__ = ["logger", "configure_logging", "PACKAGE_NAME"]
