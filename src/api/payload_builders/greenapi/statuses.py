"""Builders para publicação de status."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from api.payload_builders.greenapi.base import compact_payload


def build_status_media_payload(
    url_file: str,
    file_name: str,
    *,
    caption: str | None = None,
    participants: Sequence[str] | None = None,
) -> dict[str, Any]:
    """Corpo de sendStatusMedia / sendStatusAudio (áudio ignora caption)."""
    return compact_payload(
        {
            "urlFile": url_file,
            "fileName": file_name,
            "caption": caption,
            "participants": list(participants) if participants else None,
        }
    )
