"""Builders para envio de arquivos (upload base64 e URL)."""

from __future__ import annotations

import base64
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from api.connectors.greenapi.errors import ValidationError
from api.payload_builders.greenapi.base import build_chat_payload, compact_payload


@dataclass(frozen=True, slots=True)
class EncodedFile:
    """Arquivo local lido e codificado em base64."""

    data: str
    file_name: str
    mime_type: str | None
    size_bytes: int


def encode_file(path: str | Path, max_size_bytes: int | None = None) -> EncodedFile:
    """Lê um arquivo local e o codifica em base64.

    Raises:
        ValidationError: Se o arquivo não existe ou excede o limite
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise ValidationError(f"file not found: {file_path.name}")

    content = file_path.read_bytes()
    if max_size_bytes is not None and len(content) > max_size_bytes:
        raise ValidationError(f"file exceeds maximum size of {max_size_bytes} bytes")

    mime_type, _ = mimetypes.guess_type(file_path.name)
    return EncodedFile(
        data=base64.b64encode(content).decode("ascii"),
        file_name=file_path.name,
        mime_type=mime_type,
        size_bytes=len(content),
    )


def build_file_upload_payload(
    chat_id: str,
    encoded: EncodedFile,
    *,
    file_name: str | None = None,
    caption: str | None = None,
    quoted_message_id: str | None = None,
) -> dict[str, Any]:
    """Corpo de sendFileByUpload com o arquivo embutido em base64."""
    return build_chat_payload(
        chat_id,
        file=encoded.data,
        fileName=file_name or encoded.file_name,
        caption=caption,
        quotedMessageId=quoted_message_id,
    )


def build_file_by_url_payload(
    chat_id: str,
    url_file: str,
    file_name: str,
    *,
    caption: str | None = None,
    quoted_message_id: str | None = None,
) -> dict[str, Any]:
    return build_chat_payload(
        chat_id,
        urlFile=url_file,
        fileName=file_name,
        caption=caption,
        quotedMessageId=quoted_message_id,
    )


def build_picture_payload(encoded: EncodedFile, group_id: str | None = None) -> dict[str, Any]:
    """Corpo de setProfilePicture / setGroupPicture."""
    return compact_payload({"groupId": group_id, "file": encoded.data})
