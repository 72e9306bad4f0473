from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from services.errors import (
    ServiceError,
    BAD_REQUEST_STATUSES,
    FAIL,
    SUCCESS,
)


def http_response(status_code: int, data: Any, opt_status: str, description: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(
            {"OPT_STATUS": opt_status, "DESCRIPTION": description, "result": data}
        ),
    )


def json_response(data: Any, err: Exception | None) -> JSONResponse:
    """
    (data, err) 결과를 HTTP 응답으로 변환.
      - err 없음: 200 SUCCESS
      - ServiceError(잘못된 요청 계열): 400, result 없음
      - 그 외 ServiceError / 예외: 500
    """
    if err is None:
        return http_response(status.HTTP_200_OK, data, SUCCESS, "")

    if isinstance(err, ServiceError):
        if err.status in BAD_REQUEST_STATUSES:
            return http_response(status.HTTP_400_BAD_REQUEST, None, err.status, err.message)
        return http_response(status.HTTP_500_INTERNAL_SERVER_ERROR, data, err.status, err.message)

    return http_response(status.HTTP_500_INTERNAL_SERVER_ERROR, data, FAIL, str(err))
