import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from config.settings import settings
from routers.query_router import router as query_router
from routers.response import json_response
from services.errors import ServiceError, INVALID_POST_DATA

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s  %(levelname)-7s  %(name)-20s │ %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Querier Service")

app.include_router(query_router, prefix="/v1", tags=["Query"])


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    message = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    return json_response(None, ServiceError(INVALID_POST_DATA, message))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(
        "Unhandled exception",
        extra={"path": request.url.path, "method": request.method},
    )
    return json_response(None, exc)


@app.get("/health", include_in_schema=False)
async def health_check():
    return {"status": "healthy"}
