import logging
from typing import Any, Callable, Dict

from config.settings import settings
from services import clickhouse_client, postgres_client
from services.errors import ServiceError, INVALID_POST_DATA, SERVER_ERROR

logger = logging.getLogger(__name__)

ENGINES: Dict[str, Callable[[str, str, str], Dict[str, Any]]] = {
    "clickhouse": clickhouse_client.run_query,
    "postgres": postgres_client.run_query,
}


def _resolve_host(ip: str) -> str:
    # 요청의 ip는 명시적으로 신뢰하도록 설정된 경우에만 사용
    if settings.TRUST_REQUEST_IP and ip:
        return ip
    return settings.QUERY_HOST


def execute(args: Dict[str, str]) -> Dict[str, Any]:
    """
    쿼리 실행:
      1) sql 확인 (비어 있으면 INVALID_POST_DATA)
      2) 대상 호스트 / db 결정
      3) 설정된 엔진(QUERY_ENGINE)으로 실행
    결과: { "columns": [...], "schemas": [...], "values": [[...]] }
    """
    sql = (args.get("sql") or "").strip()
    if not sql:
        raise ServiceError(INVALID_POST_DATA, "sql is required")

    host = _resolve_host(args.get("ip") or "")
    db = args.get("db") or settings.DEFAULT_DB

    engine = settings.QUERY_ENGINE
    run_query = ENGINES.get(engine)
    if run_query is None:
        raise ServiceError(SERVER_ERROR, f"unsupported query engine: {engine}")

    logger.debug("execute engine=%s host=%s db=%s sql=%s", engine, host, db, sql)
    return run_query(host, db, sql)
