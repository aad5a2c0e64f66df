"""Fixtures compartilhadas pelos testes do conector Green API."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from config.settings import GreenApiSettings

ID_INSTANCE = "7103123456"
API_TOKEN = "token-abc"
BASE_URL = f"https://7103.api.greenapi.com/waInstance{ID_INSTANCE}"


@pytest.fixture
def settings() -> GreenApiSettings:
    return GreenApiSettings(id_instance=ID_INSTANCE, api_token_instance=API_TOKEN)


@pytest.fixture
def make_http_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.Client]:
    """Cria httpx.Client com MockTransport (sem rede)."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(handler))

    return _make
