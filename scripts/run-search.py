"""
목적:
- 루트 `.env`를 읽어 SearchClient로 검색 1회를 실행하는 드라이버 스크립트를 제공한다.

설명:
- 라이브러리 본체는 환경 파일을 직접 읽지 않는다.
- 이 스크립트는 설정 생성 -> 인덱스 초기화 -> 검색 -> JSON 출력 흐름을 데모한다.

디자인 패턴:
- 드라이버(Driver Script).

참조:
- src_py/algolia_search/config/models.py
- src_py/algolia_search/client/search_client.py
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path

from algolia_search import ClientConfig, SearchClient, SearchQuery, configure_logging

REQUIRED_ENV_KEYS = [
    "ALGOLIA_APPLICATION_ID",
    "ALGOLIA_API_KEY",
]


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Algolia Search 드라이버")
    parser.add_argument("--index", required=True, help="검색할 인덱스 이름")
    parser.add_argument("--query", default="", help="검색 질의 텍스트")
    parser.add_argument("--page", type=int, default=0, help="0부터 시작하는 페이지 번호")
    parser.add_argument("--hits-per-page", type=int, default=20, help="페이지당 결과 수")
    parser.add_argument("--log-level", default="INFO", help="로그 레벨 (기본: INFO)")
    parser.add_argument(
        "--env-file",
        default=".env",
        help="루트 기준 환경 파일 경로 (기본: .env)",
    )
    return parser.parse_args()


def load_env_file(path: Path) -> None:
    if not path.exists():
        raise RuntimeError(f"환경 파일이 존재하지 않습니다: {path}")

    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        os.environ[key] = value


def ensure_required_env() -> None:
    missing = [key for key in REQUIRED_ENV_KEYS if not os.environ.get(key)]
    if missing:
        raise RuntimeError(f"필수 환경 변수가 누락되었습니다: {', '.join(missing)}")


def parse_hosts(raw: str | None) -> list[str] | None:
    if not raw:
        return None
    return [token.strip() for token in raw.split(",") if token.strip()]


def build_config() -> ClientConfig:
    values: dict[str, object] = {
        "application_id": os.environ["ALGOLIA_APPLICATION_ID"],
        "api_key": os.environ["ALGOLIA_API_KEY"],
        "hosts": parse_hosts(os.environ.get("ALGOLIA_HOSTS")),
    }
    if os.environ.get("ALGOLIA_TIMEOUT_SEC"):
        values["timeout_sec"] = float(os.environ["ALGOLIA_TIMEOUT_SEC"])
    return ClientConfig.model_validate(values)


def main() -> int:
    args = parse_args()
    repo_root = Path(__file__).resolve().parents[1]
    load_env_file(repo_root / args.env_file)
    ensure_required_env()
    configure_logging(level=args.log_level)

    config = build_config()
    query = (
        SearchQuery(query=args.query)
        .with_page(args.page)
        .with_hits_per_page(args.hits_per_page)
    )

    with SearchClient(config) as client:
        index = client.init_index(args.index)
        print("[query]", query.to_query_string())
        result = index.search(query)

    print("[result]", json.dumps(result, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    try:
        raise SystemExit(main())
    except Exception as exc:  # noqa: BLE001
        print(f"[error] {exc}", file=sys.stderr)
        raise SystemExit(1)
