"""Errores tipados del cliente de JioSaavn.

Las rutas los colapsan en un 500 genérico; `kind` queda para los logs.
"""

from __future__ import annotations

from typing import Optional


class SaavnError(Exception):
    kind = "saavn"


class UpstreamUnavailableError(SaavnError):
    """Timeout, DNS o conexión rechazada."""

    kind = "unreachable"


class UpstreamHTTPError(SaavnError):
    kind = "upstream_http"

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class UpstreamClientError(UpstreamHTTPError):
    kind = "upstream_4xx"


class UpstreamServerError(UpstreamHTTPError):
    kind = "upstream_5xx"


class ShapeMismatchError(SaavnError):
    """La respuesta no trae el campo esperado (o no es JSON)."""

    kind = "shape_mismatch"


class SongReferenceError(SaavnError):
    kind = "bad_reference"
