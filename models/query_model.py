from typing import Any, Dict, List

from pydantic import BaseModel


class QueryArgs(BaseModel):
    ip: str = ""
    db: str = ""
    sql: str = ""

    def as_args(self) -> Dict[str, str]:
        return {"ip": self.ip, "db": self.db, "sql": self.sql}


class QueryResult(BaseModel):
    columns: List[str] = []
    schemas: List[str] = []
    values: List[List[Any]] = []


class QueryResponse(BaseModel):
    OPT_STATUS: str
    DESCRIPTION: str = ""
    result: Dict[str, Any] | None = None
