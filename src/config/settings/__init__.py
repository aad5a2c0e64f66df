"""Agregador de settings do cliente Green API.

Re-exporta settings base, settings da instância e helpers do arquivo
de credenciais.
"""

from __future__ import annotations

from config.settings.base import (
    VALID_LOG_LEVELS,
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.credentials_file import (
    CredentialsFile,
    CredentialsFileError,
    get_credentials_path,
    get_user_config_dir,
    load_credentials_file,
    save_credentials_file,
)
from config.settings.greenapi import GreenApiSettings, get_greenapi_settings

__all__ = [
    "VALID_LOG_LEVELS",
    "BaseSettings",
    "CredentialsFile",
    "CredentialsFileError",
    "Environment",
    "GreenApiSettings",
    "get_base_settings",
    "get_credentials_path",
    "get_greenapi_settings",
    "get_user_config_dir",
    "load_credentials_file",
    "save_credentials_file",
]
