from unittest.mock import AsyncMock, MagicMock, patch
from urllib.parse import urlparse

import httpx
import pytest
from pydantic import ValidationError

from propublica_congress.client import ClientConfig, create_client
from propublica_congress.errors import InvalidArgumentError, InvalidResponseError


def make_response(payload):
    response = MagicMock()
    response.status_code = 200
    response.json.return_value = payload
    return response


@pytest.fixture
def mock_http_get():
    with patch("propublica_congress.client.http.get", new_callable=AsyncMock) as mock_get:
        mock_get.return_value = make_response({"results": ["relevantData"]})
        yield mock_get


@pytest.fixture
def client():
    return create_client("SOME_KEY", version="2", host="https://somehost.org")


def test_create_sets_key():
    assert create_client("SOME_KEY").key == "SOME_KEY"


def test_create_defaults():
    client = create_client("SOME_KEY")
    assert client.version == "1"
    assert client.host == "https://api.propublica.org"
    assert client.config.strict_results is True
    assert client.config.max_attempts == 1


def test_create_overrides():
    client = create_client("SOME_KEY", version="2", host="https://somehost.org/")
    assert client.version == "2"
    assert client.host == "https://somehost.org"


@pytest.mark.parametrize("key", ["", None, 2, {}])
def test_create_rejects_invalid_key(key):
    with pytest.raises(InvalidArgumentError) as exc:
        create_client(key)
    assert "Received invalid API key" in str(exc.value)


def test_config_is_immutable():
    config = ClientConfig(key="SOME_KEY")
    with pytest.raises(ValidationError):
        config.key = "OTHER_KEY"


@pytest.mark.asyncio
async def test_get_sets_api_key_header(client, mock_http_get):
    await client.get("some/endpoint")
    headers = mock_http_get.call_args.kwargs["headers"]
    assert headers["X-API-Key"] == "SOME_KEY"
    assert headers["Accept"] == "application/json"


@pytest.mark.asyncio
async def test_get_builds_versioned_json_url(client, mock_http_get):
    await client.get("some/endpoint")
    url = mock_http_get.call_args.args[0]
    assert url == "https://somehost.org/congress/v2/some/endpoint.json"
    path = urlparse(url).path.lstrip("/").split("/")
    assert path[0] == "congress"
    assert path[1] == "v2"


@pytest.mark.asyncio
async def test_get_sends_offset_only_when_non_zero(client, mock_http_get):
    await client.get("some/endpoint", 20)
    assert mock_http_get.call_args.kwargs["params"] == {"offset": 20}

    await client.get("some/endpoint")
    assert mock_http_get.call_args.kwargs["params"] == {}


@pytest.mark.asyncio
async def test_get_passes_the_shared_http_client(client, mock_http_get):
    await client.get("some/endpoint")
    assert mock_http_get.call_args.kwargs["client"] is client.http_client
    assert mock_http_get.call_args.kwargs["max_attempts"] == 1


@pytest.mark.asyncio
async def test_get_rejects_invalid_offset_without_request(client, mock_http_get):
    with pytest.raises(InvalidArgumentError) as exc:
        await client.get("some/endpoint", 21)
    assert "Received invalid offset: 21" in str(exc.value)
    mock_http_get.assert_not_called()


@pytest.mark.asyncio
async def test_get_resolves_to_first_result(client, mock_http_get):
    assert await client.get("some/endpoint") == "relevantData"
    mock_http_get.assert_called_once()


@pytest.mark.asyncio
async def test_strict_results_rejects_several_results(client, mock_http_get):
    mock_http_get.return_value = make_response({"results": ["first", "second"]})
    with pytest.raises(InvalidResponseError) as exc:
        await client.get("some/endpoint")
    assert exc.value.payload == {"results": ["first", "second"]}


@pytest.mark.asyncio
async def test_lenient_results_take_the_first(mock_http_get):
    client = create_client("SOME_KEY", strict_results=False)
    mock_http_get.return_value = make_response({"results": ["first", "second"]})
    assert await client.get("some/endpoint") == "first"


@pytest.mark.asyncio
@pytest.mark.parametrize("strict", [True, False])
@pytest.mark.parametrize("payload", [{"results": []}, {}, {"status": "ERROR", "errors": [{"error": "bad"}]}])
async def test_malformed_envelope_is_rejected(mock_http_get, strict, payload):
    client = create_client("SOME_KEY", strict_results=strict)
    mock_http_get.return_value = make_response(payload)
    with pytest.raises(InvalidResponseError):
        await client.get("some/endpoint")


@pytest.mark.asyncio
async def test_api_error_status_is_reported(client, mock_http_get):
    mock_http_get.return_value = make_response({"status": "ERROR", "errors": [{"error": "bad"}]})
    with pytest.raises(InvalidResponseError) as exc:
        await client.get("some/endpoint")
    assert exc.value.message == "API returned an error"


@pytest.mark.asyncio
async def test_non_json_body_is_rejected(client, mock_http_get):
    response = make_response(None)
    response.json.side_effect = ValueError("Expecting value")
    response.text = "<html>"
    mock_http_get.return_value = response
    with pytest.raises(InvalidResponseError) as exc:
        await client.get("some/endpoint")
    assert exc.value.message == "Response body is not JSON"


@pytest.mark.asyncio
async def test_transport_errors_propagate_unchanged(client, mock_http_get):
    error = httpx.ConnectError("connection refused")
    mock_http_get.side_effect = error
    with pytest.raises(httpx.ConnectError) as exc:
        await client.get("some/endpoint")
    assert exc.value is error


@pytest.mark.asyncio
async def test_status_errors_propagate_unchanged(client, mock_http_get):
    request = httpx.Request("GET", "https://somehost.org/congress/v2/some/endpoint.json")
    response = httpx.Response(403, request=request, text="Forbidden")
    mock_http_get.side_effect = httpx.HTTPStatusError("Forbidden", request=request, response=response)
    with pytest.raises(httpx.HTTPStatusError):
        await client.get("some/endpoint")


@pytest.mark.asyncio
async def test_aclose_closes_owned_http_client():
    client = create_client("SOME_KEY")
    client.http_client.aclose = AsyncMock()
    async with client:
        pass
    client.http_client.aclose.assert_awaited_once()


@pytest.mark.asyncio
async def test_aclose_leaves_shared_http_client_open():
    shared = MagicMock(spec=httpx.AsyncClient)
    shared.aclose = AsyncMock()
    client = create_client("SOME_KEY", http_client=shared)
    await client.aclose()
    shared.aclose.assert_not_called()
