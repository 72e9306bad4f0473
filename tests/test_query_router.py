from fastapi.testclient import TestClient

from app import app
from config.settings import settings
from services import query_service
from services.errors import ServiceError, INVALID_POST_DATA, SERVER_ERROR


def test_forwards_all_fields(client, executor):
    response = client.post(
        "/v1/query/",
        params={"ip": "10.0.0.1"},
        data={"db": "analytics", "sql": "SELECT 1"},
    )

    assert response.status_code == 200
    assert executor.calls == [{"ip": "10.0.0.1", "db": "analytics", "sql": "SELECT 1"}]


def test_missing_fields_become_empty_strings(client, executor):
    response = client.post("/v1/query/", data={"sql": "SELECT 1"})

    assert response.status_code == 200
    assert executor.calls == [{"ip": "", "db": "", "sql": "SELECT 1"}]


def test_empty_request(client, executor):
    client.post("/v1/query/")

    assert executor.calls == [{"ip": "", "db": "", "sql": ""}]


def test_ip_is_read_from_query_string_only(client, executor):
    client.post("/v1/query/", data={"ip": "1.2.3.4", "sql": "SELECT 1"})

    assert executor.calls[0]["ip"] == ""


def test_success_envelope(client, executor):
    response = client.post("/v1/query/", data={"sql": "SELECT 1"})

    assert response.json() == {
        "OPT_STATUS": "SUCCESS",
        "DESCRIPTION": "",
        "result": {"columns": ["1"], "schemas": ["UInt8"], "values": [[1]]},
    }


def test_invalid_post_data_is_bad_request(client, executor):
    executor.error = ServiceError(INVALID_POST_DATA, "sql is required")

    response = client.post("/v1/query/")

    assert response.status_code == 400
    body = response.json()
    assert body["OPT_STATUS"] == INVALID_POST_DATA
    assert body["DESCRIPTION"] == "sql is required"
    assert body["result"] is None


def test_server_error_is_not_reported_as_success(client, executor):
    executor.error = ServiceError(SERVER_ERROR, "Code: 60. Table default.nope doesn't exist")

    response = client.post("/v1/query/", data={"sql": "SELECT * FROM nope"})

    assert response.status_code == 500
    body = response.json()
    assert body["OPT_STATUS"] == SERVER_ERROR
    assert body["result"] is None


def test_unexpected_exception_is_fail(client, executor):
    executor.error = RuntimeError("boom")

    response = client.post("/v1/query/", data={"sql": "SELECT 1"})

    assert response.status_code == 500
    assert response.json() == {"OPT_STATUS": "FAIL", "DESCRIPTION": "boom", "result": None}


def test_get_is_not_allowed(client):
    response = client.get("/v1/query/")
    assert response.status_code == 405


def test_health(client):
    response = client.get("/health")
    assert response.json() == {"status": "healthy"}


def test_blank_sql_through_query_service(monkeypatch):
    calls = []
    monkeypatch.setattr(settings, "QUERY_ENGINE", "clickhouse")
    monkeypatch.setitem(query_service.ENGINES, "clickhouse",
                        lambda host, db, sql: calls.append((host, db, sql)))
    client = TestClient(app, raise_server_exceptions=False)

    response = client.post("/v1/query/", params={"ip": "10.0.0.1"}, data={"db": "analytics", "sql": "  "})

    assert response.status_code == 400
    assert response.json() == {
        "OPT_STATUS": INVALID_POST_DATA,
        "DESCRIPTION": "sql is required",
        "result": None,
    }
    assert calls == []


def test_query_service_result_through_http(monkeypatch):
    monkeypatch.setattr(settings, "QUERY_ENGINE", "clickhouse")
    monkeypatch.setattr(settings, "QUERY_HOST", "ch.internal")
    monkeypatch.setattr(settings, "TRUST_REQUEST_IP", False)
    monkeypatch.setitem(query_service.ENGINES, "clickhouse", lambda host, db, sql: {
        "columns": ["host"], "schemas": ["String"], "values": [[host]],
    })
    client = TestClient(app, raise_server_exceptions=False)

    response = client.post("/v1/query/", params={"ip": "10.0.0.1"}, data={"sql": "SELECT hostName()"})

    assert response.status_code == 200
    assert response.json()["result"]["values"] == [["ch.internal"]]


def test_validation_error_uses_envelope(client, executor):
    response = client.post(
        "/v1/query/",
        data={"sql": "SELECT 1"},
        files={"db": ("db.txt", b"analytics", "text/plain")},
    )

    assert response.status_code == 400
    body = response.json()
    assert body["OPT_STATUS"] == INVALID_POST_DATA
    assert "db" in body["DESCRIPTION"]
    assert body["result"] is None
    assert executor.calls == []
