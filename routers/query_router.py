from typing import Annotated, Any, Callable, Dict

from fastapi import APIRouter, Depends, Form, Query
from fastapi.responses import JSONResponse

from models.query_model import QueryArgs, QueryResponse
from routers.response import json_response
from services import query_service
from services.errors import ServiceError

router = APIRouter()

Executor = Callable[[Dict[str, str]], Dict[str, Any]]


def get_executor() -> Executor:
    return query_service.execute


@router.post(
    "/query/",
    response_model=QueryResponse,
    responses={400: {"model": QueryResponse}, 500: {"model": QueryResponse}},
)
def execute_query(
    executor: Annotated[Executor, Depends(get_executor)],
    ip: Annotated[str, Query()] = "",
    db: Annotated[str, Form()] = "",
    sql: Annotated[str, Form()] = "",
) -> JSONResponse:
    # TODO: ip는 요청이 아니라 서버 설정(QUERY_HOST)에서만 받도록 전환
    args = QueryArgs(ip=ip, db=db, sql=sql).as_args()
    try:
        data, err = executor(args), None
    except ServiceError as e:
        data, err = None, e
    return json_response(data, err)
