"""Error Handlers: verifies 404 fallback and the 500 catch-all.

Tests:
    - Unknown paths and unsupported methods → 404 with the endpoint list
    - Uncaught exceptions → 500 with the message, no traceback, logged
    - The app keeps serving after a fault
"""

import logging

import pytest

NOT_FOUND_BODY = {
    "error": "Endpoint not found",
    "availableEndpoints": [
        "GET /health",
        "GET /blacklisted",
        "GET /blacklisted?name=<name>",
    ],
}


@pytest.mark.parametrize("path", ["/nonexistent", "/", "/health/", "/health/extra", "/blacklisted/John"])
async def test_unknown_path_returns_404_with_endpoint_list(client, path):
    res = await client.get(path)
    assert res.status_code == 404
    assert res.json() == NOT_FOUND_BODY


@pytest.mark.parametrize("method", ["POST", "PUT", "DELETE", "PATCH"])
async def test_unsupported_method_returns_404(client, method):
    res = await client.request(method, "/health")
    assert res.status_code == 404
    assert res.json() == NOT_FOUND_BODY


async def test_404_is_not_logged_as_error(client, caplog):
    with caplog.at_level(logging.DEBUG):
        await client.get("/nonexistent")
    assert not [r for r in caplog.records if r.levelno >= logging.ERROR]


async def test_404_log_carries_path_and_method(client, caplog):
    with caplog.at_level(logging.DEBUG, logger="blacklist_api.api.error_handlers"):
        await client.post("/nonexistent")
    records = [r for r in caplog.records if r.getMessage() == "No endpoint matched"]
    assert records
    assert records[0].path == "/nonexistent"
    assert records[0].method == "POST"
    assert records[0].error_code == "ENDPOINT_NOT_FOUND"


@pytest.fixture
async def faulty_client(make_app, make_client):
    app = make_app()

    @app.get("/boom")
    async def boom():
        raise RuntimeError("kaboom")

    async with make_client(app) as c:
        yield c


async def test_unhandled_exception_returns_500(faulty_client):
    res = await faulty_client.get("/boom")
    assert res.status_code == 500
    assert res.json() == {"error": "Internal server error", "message": "kaboom"}


async def test_500_body_has_no_traceback(faulty_client):
    res = await faulty_client.get("/boom")
    assert "Traceback" not in res.text
    assert "RuntimeError" not in res.text


async def test_unhandled_exception_is_logged_with_detail(faulty_client, caplog):
    with caplog.at_level(logging.ERROR):
        await faulty_client.get("/boom")
    errors = [r for r in caplog.records if "Unhandled exception" in r.getMessage()]
    assert errors
    assert errors[0].exc_info is not None


async def test_app_keeps_serving_after_fault(faulty_client):
    await faulty_client.get("/boom")
    res = await faulty_client.get("/health")
    assert res.status_code == 200
