"""
Unit tests for the Controller base class.
"""

import asyncio

import pytest
from pydantic import BaseModel, ValidationError

from lambda_adapter.contracts.controller import Controller
from lambda_adapter.errors import Unauthorized
from lambda_adapter.models.request import HandlerResult, NormalizedRequest


class CreateAccountBody(BaseModel):
    name: str
    email: str


class EchoController(Controller):
    async def handle(self, request: NormalizedRequest) -> HandlerResult:
        return HandlerResult(status_code=200, body={"body": request.body, "account_id": request.account_id})


class CreateAccountController(Controller):
    schema = CreateAccountBody

    async def handle(self, request: NormalizedRequest) -> HandlerResult:
        assert isinstance(request.body, CreateAccountBody)
        return HandlerResult(status_code=201, body=request.body)


class MeController(Controller):
    requires_account = True

    async def handle(self, request: NormalizedRequest) -> HandlerResult:
        return HandlerResult(status_code=200, body={"id": request.account_id})


class TestController:
    """Test cases for Controller.execute."""

    def test_execute_without_schema_passes_body_through(self):
        """Test that without a schema the raw body reaches the controller."""
        result = asyncio.run(EchoController().execute(NormalizedRequest(body={"a": 1})))

        assert result.body == {"body": {"a": 1}, "account_id": None}

    def test_execute_validates_body_with_schema(self):
        """Test that the body is replaced by the validated schema model."""
        request = NormalizedRequest(body={"name": "Jane", "email": "jane@example.com"})

        result = asyncio.run(CreateAccountController().execute(request))

        assert result.status_code == 201
        assert result.body == CreateAccountBody(name="Jane", email="jane@example.com")

    def test_original_request_is_not_mutated(self):
        """Test that validation does not change the caller's request."""
        request = NormalizedRequest(body={"name": "Jane", "email": "jane@example.com"})

        asyncio.run(CreateAccountController().execute(request))

        assert request.body == {"name": "Jane", "email": "jane@example.com"}

    def test_invalid_body_raises_validation_error(self):
        """Test that a body failing the schema raises pydantic ValidationError."""
        with pytest.raises(ValidationError) as exc_info:
            asyncio.run(CreateAccountController().execute(NormalizedRequest(body={"name": "Jane"})))

        assert [error["loc"] for error in exc_info.value.errors()] == [("email",)]

    def test_missing_body_is_validated_as_empty_object(self):
        """Test that a missing body reports every required field."""
        with pytest.raises(ValidationError) as exc_info:
            asyncio.run(CreateAccountController().execute(NormalizedRequest()))

        assert [error["loc"] for error in exc_info.value.errors()] == [("name",), ("email",)]

    def test_requires_account_rejects_anonymous_requests(self):
        """Test that account-only controllers reject requests without an account id."""
        with pytest.raises(Unauthorized):
            asyncio.run(MeController().execute(NormalizedRequest()))

    def test_requires_account_accepts_authenticated_requests(self):
        """Test that account-only controllers accept requests with an account id."""
        result = asyncio.run(MeController().execute(NormalizedRequest(account_id="abc123")))

        assert result.body == {"id": "abc123"}
