"""
목적:
- 검색 쿼리 파라미터 값 객체와 쿼리 문자열 직렬화를 정의한다.

설명:
- `SearchQuery`는 불변 모델이며, `with_*` 메서드는 검증된 새 인스턴스를 반환한다.
- 직렬화는 기본값과 다른 필드만 고정된 순서로 `key=value` 형태로 이어 붙인다.
- 값은 UTF-8 기준으로 퍼센트 인코딩하고, 지리 조건은 숫자 리터럴 그대로 출력한다.

디자인 패턴:
- 값 객체(Value Object) + 복사 후 수정(Copy-on-Write).

참조:
- src_py/algolia_search/client/index.py
"""

from __future__ import annotations

import json
from enum import Enum
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from algolia_search.exceptions import QueryValidationError

DEFAULT_MIN_WORD_SIZE_FOR_ONE_TYPO = 3
DEFAULT_MIN_WORD_SIZE_FOR_TWO_TYPOS = 7
DEFAULT_HITS_PER_PAGE = 20


class QueryType(str, Enum):
    """질의 단어의 접두어 해석 방식."""

    PREFIX_ALL = "prefixAll"
    PREFIX_LAST = "prefixLast"
    PREFIX_NONE = "prefixNone"


class GeoBoundingBox(BaseModel):
    """두 꼭짓점으로 정의한 사각형 검색 영역."""

    model_config = ConfigDict(frozen=True)

    latitude_p1: float
    longitude_p1: float
    latitude_p2: float
    longitude_p2: float

    def to_param(self) -> str:
        return (
            f"insideBoundingBox={self.latitude_p1},{self.longitude_p1},"
            f"{self.latitude_p2},{self.longitude_p2}"
        )


class GeoAroundPoint(BaseModel):
    """위경도 중심점과 반경(미터)으로 정의한 검색 영역."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float
    radius: int
    precision: int | None = Field(default=None)

    def to_param(self) -> str:
        param = f"aroundLatLng={self.latitude},{self.longitude}&aroundRadius={self.radius}"
        if self.precision is not None:
            param += f"&aroundPrecision={self.precision}"
        return param


class SearchQuery(BaseModel):
    """검색 파라미터 값 객체.

    생성자를 직접 호출하면 pydantic `ValidationError`가 그대로 발생한다.
    라이브러리 예외가 필요하면 `build_search_query()`를 사용한다.
    """

    model_config = ConfigDict(frozen=True)

    attributes_to_retrieve: list[str] | None = Field(default=None)
    attributes_to_highlight: list[str] | None = Field(default=None)
    attributes_to_snippet: list[str] | None = Field(default=None)
    min_word_size_for_one_typo: int = Field(default=DEFAULT_MIN_WORD_SIZE_FOR_ONE_TYPO)
    min_word_size_for_two_typos: int = Field(default=DEFAULT_MIN_WORD_SIZE_FOR_TWO_TYPOS)
    get_ranking_info: bool = Field(default=False)
    distinct: bool = Field(default=False)
    page: int = Field(default=0, ge=0)
    hits_per_page: int = Field(default=DEFAULT_HITS_PER_PAGE)
    tag_filters: str | None = Field(default=None)
    numeric_filters: str | None = Field(default=None)
    bounding_box: GeoBoundingBox | None = Field(default=None)
    around: GeoAroundPoint | None = Field(default=None)
    query: str | None = Field(default=None)
    facets: str | None = Field(default=None)
    facet_filters: str | None = Field(default=None)
    max_number_of_facets: int = Field(default=0)
    optional_words: str | None = Field(default=None)
    query_type: QueryType = Field(default=QueryType.PREFIX_LAST)

    def with_query(self, query: str | None) -> "SearchQuery":
        """전문 검색 질의 문자열을 지정한다."""
        return self._replace(query=query)

    def with_query_type(self, query_type: QueryType) -> "SearchQuery":
        return self._replace(query_type=query_type)

    def with_attributes_to_retrieve(self, attributes: list[str] | None) -> "SearchQuery":
        """조회할 속성 목록을 지정한다. None이면 서버 기본값(전체)을 사용한다."""
        return self._replace(attributes_to_retrieve=attributes)

    def with_attributes_to_highlight(self, attributes: list[str] | None) -> "SearchQuery":
        return self._replace(attributes_to_highlight=attributes)

    def with_attributes_to_snippet(self, attributes: list[str] | None) -> "SearchQuery":
        """스니펫 속성 목록을 지정한다. 항목 형식은 `attributeName:nbWords`다."""
        return self._replace(attributes_to_snippet=attributes)

    def with_min_word_size_for_one_typo(self, nb_chars: int) -> "SearchQuery":
        return self._replace(min_word_size_for_one_typo=nb_chars)

    def with_min_word_size_for_two_typos(self, nb_chars: int) -> "SearchQuery":
        return self._replace(min_word_size_for_two_typos=nb_chars)

    def with_ranking_info(self, enabled: bool = True) -> "SearchQuery":
        return self._replace(get_ranking_info=enabled)

    def with_distinct(self, enabled: bool = True) -> "SearchQuery":
        """`attributeForDistinct` 기준 중복 제거를 켜거나 끈다."""
        return self._replace(distinct=enabled)

    def with_page(self, page: int) -> "SearchQuery":
        """0부터 시작하는 페이지 번호를 지정한다."""
        return self._replace(page=page)

    def with_hits_per_page(self, hits_per_page: int) -> "SearchQuery":
        return self._replace(hits_per_page=hits_per_page)

    def with_tag_filters(self, tags: str | None) -> "SearchQuery":
        """태그 필터 식을 지정한다. 예: `tag1,(tag2,tag3)`."""
        return self._replace(tag_filters=tags)

    def with_numeric_filters(self, numerics: str | list[str] | None) -> "SearchQuery":
        """숫자 필터를 지정한다. 예: `price>100,price<1000`."""
        return self._replace(numeric_filters=_join_or_none(numerics))

    def with_inside_bounding_box(
        self,
        latitude_p1: float,
        longitude_p1: float,
        latitude_p2: float,
        longitude_p2: float,
    ) -> "SearchQuery":
        """사각형 영역 조건을 지정한다. 중심점 조건보다 우선한다."""
        return self._replace(
            bounding_box=GeoBoundingBox(
                latitude_p1=latitude_p1,
                longitude_p1=longitude_p1,
                latitude_p2=latitude_p2,
                longitude_p2=longitude_p2,
            )
        )

    def with_around_lat_lng(
        self,
        latitude: float,
        longitude: float,
        radius: int,
        precision: int | None = None,
    ) -> "SearchQuery":
        """중심점/반경(미터) 조건을 지정한다."""
        return self._replace(
            around=GeoAroundPoint(
                latitude=latitude,
                longitude=longitude,
                radius=radius,
                precision=precision,
            )
        )

    def with_facets(self, facets: list[str] | None) -> "SearchQuery":
        """패싯 대상 속성 목록을 지정한다. `*`는 전체 패싯 속성을 뜻한다."""
        return self._replace(facets=_json_array_or_none(facets))

    def with_facet_filters(self, facet_filters: list[str] | None) -> "SearchQuery":
        """`attributeName:value` 형식의 패싯 필터 목록을 지정한다."""
        return self._replace(facet_filters=_json_array_or_none(facet_filters))

    def with_max_number_of_facets(self, count: int) -> "SearchQuery":
        return self._replace(max_number_of_facets=count)

    def with_optional_words(self, words: str | list[str] | None) -> "SearchQuery":
        return self._replace(optional_words=_join_or_none(words))

    def to_query_string(self) -> str:
        """기본값과 다른 필드만 고정 순서로 직렬화한 쿼리 문자열을 반환한다."""
        params: list[str] = []

        if self.attributes_to_retrieve is not None:
            params.append(f"attributes={_encode(','.join(self.attributes_to_retrieve))}")
        if self.attributes_to_highlight is not None:
            params.append(
                f"attributesToHighlight={_encode(','.join(self.attributes_to_highlight))}"
            )
        if self.attributes_to_snippet is not None:
            params.append(f"attributesToSnippet={_encode(','.join(self.attributes_to_snippet))}")
        if self.min_word_size_for_one_typo != DEFAULT_MIN_WORD_SIZE_FOR_ONE_TYPO:
            params.append(f"minWordSizefor1Typo={self.min_word_size_for_one_typo}")
        if self.min_word_size_for_two_typos != DEFAULT_MIN_WORD_SIZE_FOR_TWO_TYPOS:
            params.append(f"minWordSizefor2Typos={self.min_word_size_for_two_typos}")
        if self.get_ranking_info:
            params.append("getRankingInfo=1")
        if self.distinct:
            params.append("distinct=1")
        if self.page > 0:
            params.append(f"page={self.page}")
        if self.hits_per_page != DEFAULT_HITS_PER_PAGE and self.hits_per_page > 0:
            params.append(f"hitsPerPage={self.hits_per_page}")
        if self.tag_filters is not None:
            params.append(f"tagFilters={_encode(self.tag_filters)}")
        if self.numeric_filters is not None:
            params.append(f"numericFilters={_encode(self.numeric_filters)}")
        if self.bounding_box is not None:
            params.append(self.bounding_box.to_param())
        elif self.around is not None:
            params.append(self.around.to_param())
        if self.query is not None:
            params.append(f"query={_encode(self.query)}")
        if self.facets is not None:
            params.append(f"facets={_encode(self.facets)}")
        if self.facet_filters is not None:
            params.append(f"facetFilters={_encode(self.facet_filters)}")
        if self.max_number_of_facets > 0:
            params.append(f"maxNumberOfFacets={self.max_number_of_facets}")
        if self.optional_words is not None:
            params.append(f"optionalWords={_encode(self.optional_words)}")
        if self.query_type is not QueryType.PREFIX_LAST:
            params.append(f"queryType={self.query_type.value}")

        return "&".join(params)

    def _replace(self, **changes: Any) -> "SearchQuery":
        payload = self.model_dump()
        payload.update(changes)
        try:
            return type(self).model_validate(payload)
        except ValidationError as exc:
            raise QueryValidationError(str(exc)) from exc


def _encode(value: str) -> str:
    return quote(value, safe="")


def _join_or_none(value: str | list[str] | None) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return ",".join(value)


def _json_array_or_none(values: list[str] | None) -> str | None:
    if values is None:
        return None
    return json.dumps(list(values), ensure_ascii=False, separators=(",", ":"))


def build_search_query(value: SearchQuery | Mapping[str, Any] | None = None) -> SearchQuery:
    """쿼리 객체 또는 매핑을 검증된 `SearchQuery`로 변환한다."""
    if value is None:
        return SearchQuery()
    if isinstance(value, SearchQuery):
        return value
    try:
        return SearchQuery.model_validate(dict(value))
    except ValidationError as exc:
        raise QueryValidationError(f"검색 쿼리가 유효하지 않습니다: {exc}") from exc
