"""
Unit tests for the centralized error handlers.

Uses a bare application with only the error handlers and a few routes
that raise, so each response shape is checked in isolation.
"""

import json
import logging

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from payload_guard.api.errors import (
    NOT_FOUND_BODY,
    FormRedirect,
    handle_errors,
    register_error_handlers,
)
from payload_guard.config.settings import Settings
from payload_guard.domain import HandlerError, PayloadValidationError, ValidationFailure
from payload_guard.validation import ProductCreate

PRICE_FAILURE = ValidationFailure(
    message="price: Input should be greater than or equal to 0.01",
    path=("price",),
    kind="greater_than_equal",
)


def build_app(debug: bool = False) -> FastAPI:
    test_app = FastAPI()
    test_app.state.settings = Settings(debug=debug)
    register_error_handlers(test_app)

    @test_app.get("/boom")
    async def boom() -> None:
        raise HandlerError("boom")

    @test_app.get("/forbidden")
    async def forbidden() -> None:
        raise HandlerError("not yours", status_code=403)

    @test_app.get("/invalid")
    async def invalid() -> None:
        raise PayloadValidationError([PRICE_FAILURE])

    @test_app.get("/crash")
    async def crash() -> None:
        raise RuntimeError("database exploded")

    @test_app.get("/redirect")
    async def redirect() -> None:
        raise FormRedirect("/signup")

    @test_app.post("/native")
    async def native(product: ProductCreate) -> dict:
        return {"ok": True}

    return test_app


@pytest.fixture
def client() -> TestClient:
    """Client that turns unhandled exceptions into 500 responses."""
    return TestClient(build_app(), raise_server_exceptions=False)


def make_request(path: str = "/anything") -> Request:
    return Request({"type": "http", "method": "GET", "path": path, "query_string": b"", "headers": []})


class TestHandleErrors:
    """Tests for handle_errors()."""

    @pytest.mark.asyncio
    async def test_missing_status_defaults_to_500(self) -> None:
        """An error without status is answered with 500."""
        error = HandlerError("boom")

        response = await handle_errors(make_request(), error)

        assert response.status_code == 500
        assert json.loads(response.body) == {"statusCode": 500, "message": "boom"}
        assert error.status_code == 500

    @pytest.mark.asyncio
    async def test_explicit_status_kept(self) -> None:
        """An error with status 400 is answered with 400."""
        response = await handle_errors(make_request(), HandlerError("bad", status_code=400))

        assert response.status_code == 400
        assert json.loads(response.body) == {"statusCode": 400, "message": "bad"}

    @pytest.mark.asyncio
    async def test_error_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """The handler logs the error message once."""
        with caplog.at_level(logging.WARNING, logger="payload_guard.api.errors"):
            await handle_errors(make_request("/products"), HandlerError("boom"))

        records = [record for record in caplog.records if "boom" in record.getMessage()]
        assert len(records) == 1
        assert records[0].levelno == logging.ERROR
        assert "/products" in records[0].getMessage()

    @pytest.mark.asyncio
    async def test_client_errors_logged_as_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        """4xx errors are logged below ERROR."""
        with caplog.at_level(logging.WARNING, logger="payload_guard.api.errors"):
            await handle_errors(make_request(), HandlerError("bad", status_code=400))

        assert [record.levelno for record in caplog.records] == [logging.WARNING]


class TestRegisteredHandlers:
    """Tests for the handlers installed by register_error_handlers()."""

    def test_handler_error_without_status(self, client: TestClient) -> None:
        """Forwarded errors without status become 500 JSON responses."""
        response = client.get("/boom")
        assert response.status_code == 500
        assert response.json() == {"statusCode": 500, "message": "boom"}

    def test_handler_error_with_status(self, client: TestClient) -> None:
        """Forwarded errors keep their status."""
        response = client.get("/forbidden")
        assert response.status_code == 403
        assert response.json() == {"statusCode": 403, "message": "not yours"}

    def test_validation_error(self, client: TestClient) -> None:
        """Validation errors are answered with 400 and their message."""
        response = client.get("/invalid")
        assert response.status_code == 400
        assert response.json() == {"statusCode": 400, "message": PRICE_FAILURE.message}

    def test_unexpected_exception_is_generic_500(self, client: TestClient) -> None:
        """Unexpected exceptions do not leak their text."""
        response = client.get("/crash")
        assert response.status_code == 500
        assert response.json() == {"statusCode": 500, "message": "Internal Server Error"}

    def test_unexpected_exception_text_in_debug(self) -> None:
        """Debug mode appends the exception text."""
        client = TestClient(build_app(debug=True), raise_server_exceptions=False)
        response = client.get("/crash")
        assert response.status_code == 500
        assert response.json()["message"] == "Internal Server Error: database exploded"

    def test_native_validation_error_uses_same_shape(self, client: TestClient) -> None:
        """FastAPI body validation errors are rendered like other errors."""
        response = client.post("/native", json={"description": "red book", "price": 0.0001})
        assert response.status_code == 400
        assert response.json() == {
            "statusCode": 400,
            "message": "price: Input should be greater than or equal to 0.01",
        }

    def test_form_redirect(self, client: TestClient) -> None:
        """FormRedirect answers 303 to its path without a JSON body."""
        response = client.get("/redirect", follow_redirects=False)
        assert response.status_code == 303
        assert response.headers["location"] == "/signup"

    def test_not_found(self, client: TestClient) -> None:
        """Unknown routes get a fixed plain-text 404."""
        response = client.get("/does-not-exist")
        assert response.status_code == 404
        assert response.text == NOT_FOUND_BODY

    def test_method_not_allowed(self, client: TestClient) -> None:
        """Framework HTTP errors use the JSON error shape."""
        response = client.delete("/boom")
        assert response.status_code == 405
        assert response.json() == {"statusCode": 405, "message": "Method Not Allowed"}
