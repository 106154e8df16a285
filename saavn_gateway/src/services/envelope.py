"""Normalización de respuestas de JioSaavn al sobre `{data: ...}`.

La API devuelve tres formas distintas según la llamada:
- una lista suelta (SEQUENCE)
- un objeto que ya trae `data` (ENVELOPED)
- un objeto sin `data` (OBJECT)

La forma se decide una sola vez, al parsear el cuerpo crudo.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict

from .errors import ShapeMismatchError


class UpstreamShape(str, Enum):
    SEQUENCE = "sequence"
    ENVELOPED = "enveloped"
    OBJECT = "object"


def classify(raw: Any) -> UpstreamShape:
    if isinstance(raw, list):
        return UpstreamShape.SEQUENCE
    if isinstance(raw, dict):
        return UpstreamShape.ENVELOPED if "data" in raw else UpstreamShape.OBJECT
    raise ShapeMismatchError(f"Respuesta de forma desconocida: {type(raw).__name__}")


def format_response(raw: Any) -> Dict[str, Any]:
    shape = classify(raw)
    if shape is UpstreamShape.ENVELOPED:
        return raw
    return {"data": raw}


def with_status(envelope: Dict[str, Any], status: int) -> Dict[str, Any]:
    """Copia del sobre con el status HTTP como clave hermana de `data`."""
    out = dict(envelope)
    out["status"] = status
    return out
