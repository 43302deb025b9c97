import json

import pytest

from ajax_fetch import EffectiveRequest, ParseError, RequestError, RequestOptions, TransportResponse
from ajax_fetch.resolver import read_body, resolve_response


class UnreadableResponse:
    """Response whose body must never be touched."""

    def __init__(self, status: int) -> None:
        self.status = status
        self.ok = 200 <= status <= 299
        self.status_text = "No Content"

    async def json(self):
        raise AssertionError("json() should not be called")

    async def text(self):
        raise AssertionError("text() should not be called")


GET = EffectiveRequest(method="GET", url="http://test")
HEAD = EffectiveRequest(method="HEAD", url="http://test")


def test_transport_response_defaults_status_text() -> None:
    assert TransportResponse(status=400).status_text == "Bad Request"
    assert TransportResponse(status=599).status_text == ""
    assert TransportResponse(status=418, status_text="Teapot").status_text == "Teapot"
    assert TransportResponse(status=204).ok is True
    assert TransportResponse(status=302).ok is False


@pytest.mark.asyncio
async def test_text_is_the_default_body_format() -> None:
    response = TransportResponse(status=200, body=b'{"a": 1}')
    assert await read_body(GET, response, RequestOptions(url="http://test")) == '{"a": 1}'


@pytest.mark.asyncio
async def test_json_body_is_decoded() -> None:
    response = TransportResponse(status=200, body=b'{"status": "ok"}')
    options = RequestOptions(url="http://test", data_type="json")
    assert await read_body(GET, response, options) == {"status": "ok"}


@pytest.mark.asyncio
async def test_head_responses_are_not_read() -> None:
    options = RequestOptions(url="http://test", data_type="json")
    assert await read_body(HEAD, UnreadableResponse(200), options) is None


@pytest.mark.asyncio
async def test_no_content_json_response_is_not_parsed() -> None:
    options = RequestOptions(url="http://test", data_type="json")
    assert await read_body(GET, UnreadableResponse(204), options) is None


@pytest.mark.asyncio
async def test_no_content_text_response_reads_empty_text() -> None:
    response = TransportResponse(status=204)
    assert await read_body(GET, response, RequestOptions(url="http://test")) == ""


@pytest.mark.asyncio
async def test_invalid_json_raises_parse_error() -> None:
    response = TransportResponse(status=200, body=b"")
    options = RequestOptions(url="http://test", data_type="json")
    with pytest.raises(ParseError) as excinfo:
        await read_body(GET, response, options)
    assert isinstance(excinfo.value.cause, json.JSONDecodeError)
    assert excinfo.value.__cause__ is excinfo.value.cause
    assert not hasattr(excinfo.value, "response")


@pytest.mark.asyncio
async def test_failed_response_raises_request_error_and_notifies() -> None:
    seen: list[RequestError] = []
    response = TransportResponse(status=500, body=b"boom")
    options = RequestOptions(url="http://test", error=seen.append)
    with pytest.raises(RequestError) as excinfo:
        await resolve_response(GET, response, options)
    error = excinfo.value
    assert str(error) == "Internal Server Error"
    assert error.status == 500
    assert error.status_text == "Internal Server Error"
    assert error.response is response
    assert error.response_data == "boom"
    assert seen == [error]


@pytest.mark.asyncio
async def test_parse_error_on_failed_response_skips_error_callback() -> None:
    seen: list[RequestError] = []
    response = TransportResponse(status=502, body=b"<html>bad gateway</html>")
    options = RequestOptions(url="http://test", data_type="json", error=seen.append)
    with pytest.raises(ParseError):
        await resolve_response(GET, response, options)
    assert seen == []
