"""Transporte HTTP síncrono para a API Green API.

Uma chamada bloqueante por operação: sem retries, sem fila, sem pool
compartilhado. Toda falha vira `ApiResult.failure(ErrorDetail)`; nada é
retornado como None silencioso.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Any

import httpx

from .api_logging import log_api_error, log_success
from .error_decoder import decode_error
from .models import ApiResult, ErrorDetail, RequestDescriptor

logger: logging.Logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0
DOWNLOAD_CHUNK_SIZE = 64 * 1024


class GreenApiHttpClient:
    """Executa RequestDescriptors e devolve ApiResult.

    Se um `httpx.Client` é injetado, ele é usado (e fechado pelo dono);
    caso contrário um client novo é aberto e fechado a cada chamada.
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._client = client
        self._timeout_seconds = timeout_seconds

    def execute(self, request: RequestDescriptor) -> ApiResult[Any]:
        """Executa a requisição e decodifica o JSON de sucesso.

        Args:
            request: Descritor montado pelo request_builder

        Returns:
            Success(payload JSON) ou Failure(ErrorDetail)
        """
        try:
            response = self._send(request)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            return self._failure(decode_error(exc), request)

        if not response.content:
            log_success(request.method, request.endpoint, response.status_code)
            return ApiResult.success(None)

        try:
            payload = response.json()
        except ValueError:
            detail = ErrorDetail(
                message="provider returned a non-JSON success body",
                code="invalid_json",
                raw=response.text,
                status_code=response.status_code,
            )
            return self._failure(detail, request)

        log_success(request.method, request.endpoint, response.status_code)
        return ApiResult.success(payload)

    def download(
        self,
        url: str,
        destination: Path,
        max_size_bytes: int | None = None,
    ) -> ApiResult[Path]:
        """Baixa um arquivo para `destination`.

        Escreve num arquivo temporário no mesmo diretório e só renomeia
        após sucesso; em qualquer falha o temporário é removido e nenhum
        arquivo parcial fica em `destination`.
        """
        tmp_path: Path | None = None
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=destination.parent, prefix=".download-")
            tmp_path = Path(tmp_name)
            with os.fdopen(fd, "wb") as handle:
                detail = self._stream_to(url, handle, max_size_bytes)
            if detail is None:
                os.replace(tmp_path, destination)
        except OSError as exc:
            detail = ErrorDetail(message=str(exc), code="file_write_error")
        finally:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)

        if detail is not None:
            log_api_error(detail, "GET", "download")
            return ApiResult.failure(detail)

        logger.debug("greenapi_file_downloaded", extra={"size_bytes": destination.stat().st_size})
        return ApiResult.success(destination)

    def _stream_to(
        self,
        url: str,
        handle: Any,
        max_size_bytes: int | None,
    ) -> ErrorDetail | None:
        client = self._client or httpx.Client(timeout=self._timeout_seconds)
        try:
            with client.stream("GET", url, follow_redirects=True) as response:
                try:
                    response.raise_for_status()
                except httpx.HTTPStatusError as exc:
                    return decode_error(exc)

                if _exceeds(response.headers.get("content-length"), max_size_bytes):
                    return _too_large(response.status_code, max_size_bytes)

                written = 0
                for chunk in response.iter_bytes(DOWNLOAD_CHUNK_SIZE):
                    written += len(chunk)
                    if max_size_bytes is not None and written > max_size_bytes:
                        return _too_large(response.status_code, max_size_bytes)
                    handle.write(chunk)
        except httpx.HTTPError as exc:
            return decode_error(exc)
        finally:
            if self._client is None:
                client.close()
        return None

    def _send(self, request: RequestDescriptor) -> httpx.Response:
        kwargs: dict[str, Any] = {"headers": request.headers}
        if request.has_body:
            kwargs["json"] = request.body

        if self._client is not None:
            return self._client.request(request.method, request.url, **kwargs)

        with httpx.Client(timeout=self._timeout_seconds) as client:
            return client.request(request.method, request.url, **kwargs)

    def _failure(self, detail: ErrorDetail, request: RequestDescriptor) -> ApiResult[Any]:
        log_api_error(detail, request.method, request.endpoint)
        return ApiResult.failure(detail)


def _exceeds(content_length: str | None, max_size_bytes: int | None) -> bool:
    if max_size_bytes is None or not content_length or not content_length.isdigit():
        return False
    return int(content_length) > max_size_bytes


def _too_large(status_code: int, max_size_bytes: int | None) -> ErrorDetail:
    return ErrorDetail(
        message=f"file exceeds maximum size of {max_size_bytes} bytes",
        code="media_too_large",
        status_code=status_code,
    )
