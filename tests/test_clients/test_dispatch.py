"""
Request dispatcher tests.

Covers headers, body encoding, URL building, status handling, transport
failures and response decoding of ChargilyClient.dispatch.
"""

import json

import httpx
import pytest

from chargily_pay import (
    ApiError,
    ApiMode,
    ChargilyClient,
    ConfigurationError,
    DeserializationError,
    HttpError,
    TransportError,
    ValidationError,
)
from chargily_pay.schemas import CreateCustomerParams, ResourcePath
from mocks import LIVE_BASE, MOCK_API_KEY, TEST_BASE


class TestClientConfiguration:

    def test_test_mode_uses_test_url(self):
        client = ChargilyClient(api_key=MOCK_API_KEY, mode="test")
        assert client.mode is ApiMode.TEST
        assert client.api_url == TEST_BASE

    def test_live_mode_uses_live_url(self):
        client = ChargilyClient(api_key=MOCK_API_KEY, mode=ApiMode.LIVE)
        assert client.api_url == LIVE_BASE

    def test_mode_is_case_insensitive(self):
        assert ChargilyClient(api_key=MOCK_API_KEY, mode="LIVE").mode is ApiMode.LIVE

    def test_unknown_mode_rejected(self):
        with pytest.raises(ConfigurationError):
            ChargilyClient(api_key=MOCK_API_KEY, mode="staging")

    def test_empty_api_key_rejected(self):
        with pytest.raises(ConfigurationError):
            ChargilyClient(api_key="")

    @pytest.mark.asyncio
    async def test_clients_keep_their_own_credentials(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.headers["Authorization"])
            return httpx.Response(200, json={})

        transport = httpx.MockTransport(handler)
        async with ChargilyClient(api_key="key_a", transport=transport) as a, \
                ChargilyClient(api_key="key_b", transport=transport) as b:
            await a.dispatch("balance")
            await b.dispatch("balance")
            await a.dispatch("balance")

        assert seen == ["Bearer key_a", "Bearer key_b", "Bearer key_a"]


class TestDispatchRequest:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["GET", "POST", "PATCH", "DELETE"])
    async def test_every_verb_carries_auth_and_content_type(self, client, api, method):
        await client.dispatch("customers", method)

        request = api.last
        assert request.method == method
        assert request.headers["Authorization"] == f"Bearer {MOCK_API_KEY}"
        assert request.headers["Content-Type"] == "application/json"

    @pytest.mark.asyncio
    async def test_default_verb_is_get(self, client, api):
        await client.dispatch("balance")
        assert api.last.method == "GET"

    @pytest.mark.asyncio
    async def test_lowercase_verb_accepted(self, client, api):
        await client.dispatch("customers", "post", {"name": "x"})
        assert api.last.method == "POST"

    @pytest.mark.asyncio
    async def test_path_joined_to_base_url(self, client, api):
        await client.dispatch("customers/abc")
        assert str(api.last.url) == f"{TEST_BASE}/customers/abc"

    @pytest.mark.asyncio
    async def test_resource_path_is_rendered(self, client, api):
        path = ResourcePath(resource="products", resource_id="p1", action="prices", query={"per_page": 5})
        await client.dispatch(path)
        assert str(api.last.url) == f"{TEST_BASE}/products/p1/prices?per_page=5"

    @pytest.mark.asyncio
    async def test_body_serialized_as_json(self, client, api):
        body = {"name": "Amine", "metadata": {"order": 42}, "tags": ["a", "b"]}
        await client.dispatch("customers", "POST", body)
        assert json.loads(api.last.content) == body

    @pytest.mark.asyncio
    async def test_model_body_drops_unset_fields(self, client, api):
        await client.dispatch("customers", "POST", CreateCustomerParams(name="Amine"))
        assert json.loads(api.last.content) == {"name": "Amine"}

    @pytest.mark.asyncio
    async def test_no_body_sends_empty_content(self, client, api):
        await client.dispatch("checkouts/c1/expire", "POST")
        assert api.last.content == b""

    @pytest.mark.asyncio
    async def test_empty_path_rejected_before_sending(self, client, api):
        with pytest.raises(ValidationError):
            await client.dispatch("")
        assert api.requests == []

    @pytest.mark.asyncio
    async def test_unsupported_verb_rejected_before_sending(self, client, api):
        with pytest.raises(ValidationError):
            await client.dispatch("customers", "PUT")
        assert api.requests == []

    @pytest.mark.asyncio
    async def test_unserializable_body_rejected(self, client, api):
        with pytest.raises(ValidationError):
            await client.dispatch("customers", "POST", {"handle": object()})
        assert api.requests == []


class TestDispatchResponse:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [200, 201, 204, 299])
    async def test_success_returns_parsed_json(self, client, api, status_code):
        api.reply({"id": "abc", "entity": "customer"}, status_code=status_code)
        assert await client.dispatch("customers/abc") == {"id": "abc", "entity": "customer"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [301, 400, 401, 404, 422, 429, 500, 503])
    async def test_non_success_raises_http_error(self, client, api, status_code):
        api.reply({"message": "nope"}, status_code=status_code)

        with pytest.raises(HttpError) as exc_info:
            await client.dispatch("customers/abc")

        error = exc_info.value
        assert error.status_code == status_code
        assert error.status_text == httpx.codes.get_reason_phrase(status_code)
        assert error.method == "GET"
        assert error.url == f"{TEST_BASE}/customers/abc"
        assert isinstance(error, ApiError)

    @pytest.mark.asyncio
    async def test_http_error_ignores_unparseable_body(self, client, api):
        api.reply(status_code=500, raw=b"<html>oops</html>")
        with pytest.raises(HttpError) as exc_info:
            await client.dispatch("balance")
        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_invalid_json_raises_deserialization_error(self, client, api):
        api.reply(raw=b"not json at all")
        with pytest.raises(DeserializationError):
            await client.dispatch("balance")

    @pytest.mark.asyncio
    async def test_connect_error_raises_transport_error(self, client, api):
        api.fail_with(lambda request: httpx.ConnectError("connection refused", request=request))

        with pytest.raises(TransportError) as exc_info:
            await client.dispatch("balance")

        assert isinstance(exc_info.value.cause, httpx.ConnectError)
        assert exc_info.value.__cause__ is exc_info.value.cause

    @pytest.mark.asyncio
    async def test_timeout_raises_transport_error(self, client, api):
        api.fail_with(lambda request: httpx.ReadTimeout("timed out", request=request))
        with pytest.raises(TransportError):
            await client.dispatch("balance")

    @pytest.mark.asyncio
    async def test_single_attempt_per_call(self, client, api):
        api.reply(status_code=503)
        with pytest.raises(HttpError):
            await client.dispatch("balance")
        assert len(api.requests) == 1
