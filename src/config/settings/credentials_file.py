"""Persistência das credenciais da instância em arquivo por usuário.

Formato (JSON):
    {"idInstance": "...", "apiTokenInstance": "...", "DateCreated": "..."}
"""

from __future__ import annotations

import json
import logging
import os
import sys
import tempfile
from datetime import UTC, datetime
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

logger = logging.getLogger(__name__)

APP_DIR_NAME = "greenapi-client"
CREDENTIALS_FILE_NAME = "credentials.json"


class CredentialsFileError(ValueError):
    """Arquivo de credenciais ilegível ou com formato inválido."""


class CredentialsFile(BaseModel):
    """Conteúdo do arquivo de credenciais."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id_instance: str = Field(alias="idInstance", min_length=1)
    api_token_instance: str = Field(alias="apiTokenInstance", min_length=1)
    date_created: str | None = Field(default=None, alias="DateCreated")


def get_user_config_dir() -> Path:
    """Diretório de configuração por usuário (cross-platform)."""
    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_DIR_NAME
    return Path.home() / ".config" / APP_DIR_NAME


def get_credentials_path() -> Path:
    return get_user_config_dir() / CREDENTIALS_FILE_NAME


def load_credentials_file(path: Path | None = None) -> CredentialsFile | None:
    """Lê o arquivo de credenciais.

    Args:
        path: Caminho explícito. Usa o diretório do usuário se None.

    Returns:
        Credenciais lidas, ou None se o arquivo não existe.

    Raises:
        CredentialsFileError: Se o arquivo existe mas é inválido.
    """
    target = path or get_credentials_path()
    if not target.exists():
        return None

    try:
        data = json.loads(target.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise CredentialsFileError(f"unreadable credentials file: {target}") from exc

    if not isinstance(data, dict):
        raise CredentialsFileError(f"credentials file must hold a JSON object: {target}")

    try:
        return CredentialsFile.model_validate(data)
    except PydanticValidationError as exc:
        raise CredentialsFileError(f"invalid credentials file: {target}") from exc


def save_credentials_file(
    id_instance: str,
    api_token_instance: str,
    path: Path | None = None,
) -> Path:
    """Grava as credenciais de forma atômica (arquivo temporário + replace).

    Returns:
        Caminho do arquivo gravado.
    """
    credentials = CredentialsFile(
        idInstance=id_instance,
        apiTokenInstance=api_token_instance,
        DateCreated=datetime.now(UTC).isoformat(),
    )
    target = path or get_credentials_path()
    target.parent.mkdir(parents=True, exist_ok=True)

    content = json.dumps(credentials.model_dump(by_alias=True), indent=2)
    fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=".credentials-")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(content)
        os.replace(tmp_name, target)
    except OSError:
        Path(tmp_name).unlink(missing_ok=True)
        raise

    logger.info("greenapi_credentials_saved", extra={"path": str(target)})
    return target
