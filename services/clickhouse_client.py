import logging
from typing import Any, Dict

import httpx

from config.settings import settings
from models.query_model import QueryResult
from services.errors import ServiceError, SERVER_ERROR

logger = logging.getLogger(__name__)


def _parse_compact(data: Dict[str, Any]) -> Dict[str, Any]:
    meta = data.get("meta") or []
    return QueryResult(
        columns=[m.get("name", "") for m in meta],
        schemas=[m.get("type", "") for m in meta],
        values=[list(row) for row in data.get("data") or []],
    ).model_dump()


def run_query(host: str, db: str, sql: str) -> Dict[str, Any]:
    """
    ClickHouse HTTP 인터페이스로 SQL 실행.
      POST http://{host}:{CLICKHOUSE_PORT}/?database={db}&default_format=JSONCompact
      body: SQL 원문
      resp: { "meta": [{ "name": ..., "type": ... }], "data": [[...]], ... }
    """
    url = f"http://{host}:{settings.CLICKHOUSE_PORT}/"
    params = {"database": db, "default_format": "JSONCompact"}
    headers = {
        "X-ClickHouse-User": settings.CLICKHOUSE_USER,
        "X-ClickHouse-Key": settings.CLICKHOUSE_PASSWORD,
    }
    timeout = settings.REQUEST_TIMEOUT_SECONDS

    try:
        with httpx.Client(timeout=timeout, headers=headers) as client:
            resp = client.post(url, params=params, content=sql.encode("utf-8"))
    except httpx.HTTPError as e:
        logger.warning("clickhouse %s unreachable: %s", host, e)
        raise ServiceError(SERVER_ERROR, f"clickhouse unreachable: {e}") from e

    exception_code = resp.headers.get("X-ClickHouse-Exception-Code")
    if resp.is_error or exception_code:
        logger.warning("clickhouse query failed (%d, code=%s): %s",
                       resp.status_code, exception_code, resp.text.strip())
        raise ServiceError(SERVER_ERROR, resp.text.strip())

    # DDL/INSERT 등은 본문이 비어 있음
    if not resp.content.strip():
        return _parse_compact({})

    # 응답 도중 실패하면 200 이후 본문에 예외가 섞여 옴
    try:
        data = resp.json()
    except ValueError as e:
        logger.warning("clickhouse returned a non-JSONCompact body: %s", resp.text.strip())
        raise ServiceError(SERVER_ERROR, resp.text.strip()) from e

    if not isinstance(data, dict) or "meta" not in data or "data" not in data:
        logger.warning("clickhouse returned an unexpected body: %s", resp.text.strip())
        raise ServiceError(SERVER_ERROR, f"unexpected clickhouse response: {resp.text.strip()}")

    return _parse_compact(data)
