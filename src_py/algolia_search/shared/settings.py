"""
목적:
- 프로젝트 기본 메타 설정을 제공한다.

설명:
- User-Agent 헤더와 로그/진단에서 공통으로 사용할 식별자 정보를 유지한다.

디자인 패턴:
- 값 객체(Value Object).

참조:
- src_py/algolia_search/transport/dispatcher.py
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from algolia_search.version import __version__


class ProjectSettings(BaseModel):
    """Algolia Search 기본 메타 설정 모델."""

    project_name: str = Field(default="Algolia Search")
    python_package: str = Field(default="algolia_search")
    api_version: str = Field(default="1")
    version: str = Field(default=__version__)

    def user_agent(self) -> str:
        """요청 헤더용 User-Agent 문자열을 생성한다."""
        return f"{self.python_package}/{self.version} (API v{self.api_version})"


def default_settings() -> ProjectSettings:
    """기본 설정 객체를 생성한다."""
    return ProjectSettings()
