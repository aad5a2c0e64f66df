"""Testes para error_decoder (decodificação best-effort)."""

from __future__ import annotations

import httpx
import pytest

from api.connectors.greenapi.error_decoder import decode_error, decode_error_body

URL = "https://7103.api.greenapi.com/waInstance7103123456/sendMessage/token"


def _status_error(status_code: int, content: bytes) -> httpx.HTTPStatusError:
    request = httpx.Request("POST", URL)
    response = httpx.Response(status_code, content=content, request=request)
    return httpx.HTTPStatusError("error", request=request, response=response)


class TestDecodeError:
    """Testes para decode_error."""

    def test_structured_envelope(self) -> None:
        exc = _status_error(400, b'{"message":"bad request","code":"INVALID_NUMBER"}')
        detail = decode_error(exc)
        assert detail.message == "bad request"
        assert detail.code == "INVALID_NUMBER"
        assert detail.status_code == 400
        assert detail.raw == '{"message":"bad request","code":"INVALID_NUMBER"}'

    def test_numeric_code_is_stringified(self) -> None:
        detail = decode_error(_status_error(466, b'{"code":466,"message":"quota exceeded"}'))
        assert detail.code == "466"

    def test_plain_text_body_falls_back_to_raw_text(self) -> None:
        detail = decode_error(_status_error(500, b"Internal Server Error"))
        assert detail.message == "Internal Server Error"
        assert detail.code is None
        assert detail.status_code == 500

    def test_json_without_message_falls_back_to_raw_text(self) -> None:
        detail = decode_error(_status_error(400, b'{"error":"nope"}'))
        assert detail.message == '{"error":"nope"}'
        assert detail.code is None

    def test_null_message_falls_back_to_raw_text(self) -> None:
        body = b'{"message":null,"code":"X"}'
        detail = decode_error(_status_error(400, body))
        assert detail.message == body.decode()
        assert detail.code is None

    def test_empty_body_uses_status(self) -> None:
        detail = decode_error(_status_error(502, b""))
        assert detail.message == "HTTP 502"

    def test_transport_exception_without_response(self) -> None:
        exc = httpx.ConnectError("Name or service not known")
        detail = decode_error(exc)
        assert detail.message == "Name or service not known"
        assert detail.status_code is None
        assert detail.is_transport_failure

    def test_exception_without_message_uses_type_name(self) -> None:
        detail = decode_error(httpx.ReadTimeout(""))
        assert detail.message == "ReadTimeout"


class TestDecodeErrorBody:
    """Testes para decode_error_body."""

    @pytest.mark.parametrize("body", ["[1, 2]", '"just a string"', "null", "{bad json"])
    def test_non_object_bodies_are_raw_text(self, body: str) -> None:
        assert decode_error_body(body, 400).message == body
