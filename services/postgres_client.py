import logging
from typing import Any, Dict, List

import psycopg

from config.settings import settings
from models.query_model import QueryResult
from services.errors import ServiceError, SERVER_ERROR

logger = logging.getLogger(__name__)


def _type_name(conn: psycopg.Connection, oid: int) -> str:
    info = conn.adapters.types.get(oid)
    return info.name if info else str(oid)


def run_query(host: str, db: str, sql: str) -> Dict[str, Any]:
    """요청마다 연결을 새로 열어 SQL 실행 (풀 없음)"""
    try:
        with psycopg.connect(
            host=host,
            port=settings.POSTGRES_PORT,
            dbname=db,
            user=settings.POSTGRES_USER,
            password=settings.POSTGRES_PASSWORD,
            connect_timeout=settings.REQUEST_TIMEOUT_SECONDS,
        ) as conn:
            with conn.cursor() as cur:
                cur.execute(sql)
                if cur.description is None:
                    return QueryResult().model_dump()
                columns = [d.name for d in cur.description]
                schemas = [_type_name(conn, d.type_code) for d in cur.description]
                values: List[List[Any]] = [list(row) for row in cur.fetchall()]
    except psycopg.Error as e:
        logger.warning("postgres query on %s/%s failed: %s", host, db, e)
        raise ServiceError(SERVER_ERROR, str(e).strip()) from e

    return QueryResult(columns=columns, schemas=schemas, values=values).model_dump()
