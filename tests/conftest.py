import pytest
from fastapi.testclient import TestClient

from app import app
from routers.query_router import get_executor


class RecordingExecutor:
    """execute 대역: 받은 args를 기록하고 지정된 결과를 돌려주거나 예외를 던짐"""

    def __init__(self):
        self.calls = []
        self.result = {"columns": ["1"], "schemas": ["UInt8"], "values": [[1]]}
        self.error = None

    def __call__(self, args):
        self.calls.append(args)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def executor():
    fake = RecordingExecutor()
    app.dependency_overrides[get_executor] = lambda: fake
    yield fake
    app.dependency_overrides.pop(get_executor, None)


@pytest.fixture
def client(executor):
    return TestClient(app, raise_server_exceptions=False)
