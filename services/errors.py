SUCCESS = "SUCCESS"
FAIL = "FAIL"
INVALID_POST_DATA = "INVALID_POST_DATA"
RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
RESOURCE_NUM_EXCEEDED = "RESOURCE_NUM_EXCEEDED"
SELECTED_RESOURCES_NUM_EXCEEDED = "SELECTED_RESOURCES_NUM_EXCEEDED"
SERVER_ERROR = "SERVER_ERROR"

# 400으로 응답하는 상태
BAD_REQUEST_STATUSES = (
    INVALID_POST_DATA,
    RESOURCE_NOT_FOUND,
    RESOURCE_NUM_EXCEEDED,
    SELECTED_RESOURCES_NUM_EXCEEDED,
)


class ServiceError(Exception):
    def __init__(self, status: str, message: str = ""):
        super().__init__(message)
        self.status = status
        self.message = message

    def __repr__(self) -> str:
        return f"ServiceError(status={self.status!r}, message={self.message!r})"
