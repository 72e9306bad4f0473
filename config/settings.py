import os


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_log_level(name: str = "LOG_LEVEL", default: str = "INFO") -> str:
    # logging은 대문자 레벨 이름만 허용
    return os.getenv(name, default).strip().upper()


class Settings:
    # 실행 엔진: clickhouse | postgres
    QUERY_ENGINE: str = os.getenv("QUERY_ENGINE", "clickhouse")

    # 쿼리 대상 호스트 (서버 측 설정)
    # 요청의 ip 필드는 TRUST_REQUEST_IP=true 일 때만 사용
    QUERY_HOST: str = os.getenv("QUERY_HOST", "127.0.0.1")
    TRUST_REQUEST_IP: bool = _env_bool("TRUST_REQUEST_IP")
    DEFAULT_DB: str = os.getenv("DEFAULT_DB", "default")

    # ClickHouse HTTP 인터페이스
    CLICKHOUSE_PORT: int = int(os.getenv("CLICKHOUSE_PORT", 8123))
    CLICKHOUSE_USER: str = os.getenv("CLICKHOUSE_USER", "default")
    CLICKHOUSE_PASSWORD: str = os.getenv("CLICKHOUSE_PASSWORD", "")

    # Postgres (psycopg v3)
    POSTGRES_PORT: int = int(os.getenv("POSTGRES_PORT", 5432))
    POSTGRES_USER: str = os.getenv("POSTGRES_USER", "postgres")
    POSTGRES_PASSWORD: str = os.getenv("POSTGRES_PASSWORD", "postgres")

    REQUEST_TIMEOUT_SECONDS: int = int(os.getenv("REQUEST_TIMEOUT_SECONDS", 15))

    LOG_LEVEL: str = _env_log_level()


settings = Settings()
