"""Conector Green API - adapter de borda para o gateway WhatsApp-over-HTTP.

Este pacote é o único ponto de IO com o provedor:
- endpoints: catálogo declarativo (nome, método)
- request_builder: URL + headers + corpo
- http_client: transporte síncrono (httpx)
- error_decoder: envelope de erro -> ErrorDetail
- client: fachada com uma operação por endpoint (importar de .client)
"""

from .endpoints import ENDPOINTS, EndpointSpec, get_endpoint_spec
from .error_decoder import decode_error, decode_error_body
from .errors import (
    ApiError,
    ConfigurationError,
    GreenApiError,
    NormalizationError,
    TransportError,
    ValidationError,
)
from .http_client import GreenApiHttpClient
from .models import ApiResult, ErrorDetail, RequestDescriptor
from .request_builder import build_request, build_url, ensure_credentials

__all__ = [
    "ENDPOINTS",
    "ApiError",
    "ApiResult",
    "ConfigurationError",
    "EndpointSpec",
    "ErrorDetail",
    "GreenApiError",
    "GreenApiHttpClient",
    "NormalizationError",
    "RequestDescriptor",
    "TransportError",
    "ValidationError",
    "build_request",
    "build_url",
    "decode_error",
    "decode_error_body",
    "ensure_credentials",
    "get_endpoint_spec",
]
