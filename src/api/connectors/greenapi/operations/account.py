"""Operações de conta/instância."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from api.connectors.greenapi.errors import ValidationError
from api.connectors.greenapi.models import ApiResult
from api.normalizers.phone import normalize_to_plain_digits
from api.payload_builders.greenapi.base import compact_payload
from api.payload_builders.greenapi.media import build_picture_payload, encode_file
from app.constants.greenapi import Endpoint

from .base import OperationBase


class AccountOperations(OperationBase):
    """Settings, estado, QR, autorização e perfil da instância."""

    def get_settings(self) -> ApiResult[Any]:
        return self._call(Endpoint.GET_SETTINGS)

    def set_settings(self, settings: Mapping[str, Any]) -> ApiResult[Any]:
        """Atualiza settings da instância; só as chaves presentes são enviadas."""
        body = compact_payload(settings)
        if not body:
            raise ValidationError("at least one setting is required")
        return self._call(Endpoint.SET_SETTINGS, body=body)

    def get_state_instance(self) -> ApiResult[Any]:
        return self._call(Endpoint.GET_STATE_INSTANCE)

    def get_status_instance(self) -> ApiResult[Any]:
        return self._call(Endpoint.GET_STATUS_INSTANCE)

    def reboot(self) -> ApiResult[Any]:
        return self._call(Endpoint.REBOOT)

    def logout(self) -> ApiResult[Any]:
        return self._call(Endpoint.LOGOUT)

    def qr(self) -> ApiResult[Any]:
        return self._call(Endpoint.QR)

    def get_authorization_code(self, phone_number: str) -> ApiResult[Any]:
        """Solicita código de pareamento para o número informado."""
        digits = normalize_to_plain_digits(phone_number, self._settings.default_country_code)
        return self._call(Endpoint.GET_AUTHORIZATION_CODE, body={"phoneNumber": int(digits)})

    def set_profile_picture(self, path: str | Path) -> ApiResult[Any]:
        encoded = encode_file(path, self._settings.media_max_size_bytes)
        return self._call(Endpoint.SET_PROFILE_PICTURE, body=build_picture_payload(encoded))

    def update_api_token(self) -> ApiResult[Any]:
        return self._call(Endpoint.UPDATE_API_TOKEN)

    def get_wa_settings(self) -> ApiResult[Any]:
        return self._call(Endpoint.GET_WA_SETTINGS)
