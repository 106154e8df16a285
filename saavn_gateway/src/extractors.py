"""Campos que cada endpoint de `/api` toma del sobre normalizado."""

from typing import Any, Dict

from .services.errors import ShapeMismatchError
from .utils import dig


def _require(result: Dict[str, Any], *path: str) -> Any:
    value = dig(result, *path)
    if value is None:
        raise ShapeMismatchError(f"Falta {'.'.join(path)} en la respuesta de JioSaavn")
    return value


def search_results(result: Dict[str, Any]) -> Any:
    return _require(result, "data", "songs", "data")


def charts(result: Dict[str, Any]) -> Any:
    return _require(result, "data", "charts")


def new_release_albums(result: Dict[str, Any]) -> Any:
    return _require(result, "data", "albums")
