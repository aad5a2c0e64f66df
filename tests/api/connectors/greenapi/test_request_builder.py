"""Testes para request_builder e catálogo de endpoints."""

from __future__ import annotations

import pytest

from api.connectors.greenapi.endpoints import ENDPOINTS, get_endpoint_spec
from api.connectors.greenapi.errors import ConfigurationError
from api.connectors.greenapi.request_builder import (
    build_query_string,
    build_request,
    build_url,
)
from api.payload_builders.greenapi.messaging import build_send_message_payload
from app.constants.greenapi import Endpoint, HttpMethod
from config.settings import GreenApiSettings

API_TOKEN = "token-abc"
BASE_URL = "https://7103.api.greenapi.com/waInstance7103123456"


class TestEndpointCatalogue:
    """Testes para o catálogo declarativo."""

    def test_every_endpoint_has_a_spec(self) -> None:
        assert set(ENDPOINTS) == set(Endpoint)

    @pytest.mark.parametrize(
        ("endpoint", "method"),
        [
            (Endpoint.SEND_MESSAGE, HttpMethod.POST),
            (Endpoint.GET_STATE_INSTANCE, HttpMethod.GET),
            (Endpoint.DELETE_NOTIFICATION, HttpMethod.DELETE),
            (Endpoint.CLEAR_WEBHOOKS_QUEUE, HttpMethod.DELETE),
            (Endpoint.LAST_INCOMING_MESSAGES, HttpMethod.GET),
        ],
    )
    def test_methods(self, endpoint: Endpoint, method: HttpMethod) -> None:
        assert get_endpoint_spec(endpoint).method == method

    def test_lookup_by_plain_name(self) -> None:
        assert get_endpoint_spec("sendPoll").name == Endpoint.SEND_POLL

    def test_unknown_endpoint_raises(self) -> None:
        with pytest.raises(ValueError):
            get_endpoint_spec("notAnEndpoint")


class TestBuildUrl:
    """Testes para montagem de URL."""

    def test_base_url_uses_first_four_digits(self, settings: GreenApiSettings) -> None:
        assert settings.base_url == BASE_URL

    def test_endpoint_and_token_segments(self, settings: GreenApiSettings) -> None:
        url = build_url(settings, "sendMessage")
        assert url == f"{BASE_URL}/sendMessage/{API_TOKEN}"

    def test_path_params_appended_after_token(self, settings: GreenApiSettings) -> None:
        url = build_url(settings, "deleteNotification", path_params=(42,))
        assert url == f"{BASE_URL}/deleteNotification/{API_TOKEN}/42"

    def test_query_keeps_insertion_order_and_encodes(self, settings: GreenApiSettings) -> None:
        url = build_url(
            settings,
            "getMessageStatus",
            query={"idMessage": "3EB0 A&B=C", "minutes": 5},
        )
        assert url.endswith("?idMessage=3EB0+A%26B%3DC&minutes=5")

    def test_none_query_values_are_dropped(self) -> None:
        assert build_query_string({"minutes": None}) == ""
        assert build_query_string({"a": 1, "b": None, "c": True}) == "?a=1&c=true"


class TestBuildRequest:
    """Testes para build_request."""

    def test_post_with_body(self, settings: GreenApiSettings) -> None:
        body = {"chatId": "27731234567@c.us", "message": "oi"}
        request = build_request(settings, get_endpoint_spec(Endpoint.SEND_MESSAGE), body=body)

        assert request.method == HttpMethod.POST
        assert request.url == f"{BASE_URL}/sendMessage/{API_TOKEN}"
        assert request.endpoint == "sendMessage"
        assert request.headers["Content-Type"] == "application/json"
        assert request.body is body

    def test_get_without_body_has_no_content_type(self, settings: GreenApiSettings) -> None:
        request = build_request(settings, get_endpoint_spec(Endpoint.GET_STATE_INSTANCE))
        assert request.body is None
        assert "Content-Type" not in request.headers

    def test_optional_field_absent_is_omitted(self, settings: GreenApiSettings) -> None:
        body = build_send_message_payload("27731234567@c.us", "oi")
        request = build_request(settings, get_endpoint_spec(Endpoint.SEND_MESSAGE), body=body)
        assert request.body == {"chatId": "27731234567@c.us", "message": "oi"}
        assert "quotedMessageId" not in request.body
        assert "linkPreview" not in request.body

    @pytest.mark.parametrize(
        "settings_kwargs",
        [
            {"id_instance": "", "api_token_instance": "t"},
            {"id_instance": "7103123456", "api_token_instance": ""},
            {},
        ],
    )
    def test_missing_credentials_raise_before_url(self, settings_kwargs: dict[str, str]) -> None:
        spec = get_endpoint_spec(Endpoint.SEND_MESSAGE)
        with pytest.raises(ConfigurationError, match="missing Green API credentials"):
            build_request(GreenApiSettings(**settings_kwargs), spec, body={})
