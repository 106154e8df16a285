"""Cliente de JioSaavn (API no oficial `api.php`).

Todas las llamadas son POST sin cuerpo y con los parámetros en la query.
Los headers se fijan al construir el servicio y no cambian entre llamadas.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from ..config import Config
from ..utils import build_headers, dig, extract_song_id, pick_user_agent, select_bitrate
from .base import CatalogService
from .envelope import format_response, with_status
from .errors import (
    ShapeMismatchError,
    SongReferenceError,
    UpstreamClientError,
    UpstreamServerError,
    UpstreamUnavailableError,
)


logger = logging.getLogger(__name__)

CTX = "web6dot0"
API_VERSION = "4"


class SaavnService(CatalogService):
    name = "jiosaavn"

    def __init__(
        self,
        api_url: str | None = None,
        timeout: float | None = None,
        user_agent: str | None = None,
        seed: str | None = None,
    ):
        self.api_url = api_url or Config.SAAVN_API_URL
        self.timeout = timeout or Config.SAAVN_TIMEOUT
        user_agent = user_agent or Config.SAAVN_USER_AGENT
        if not user_agent:
            user_agent = pick_user_agent(seed if seed is not None else Config.SAAVN_USER_AGENT_SEED)
        self.headers = build_headers(user_agent)

    def _call(self, operation: str, **params: str) -> requests.Response:
        query = {"__call": operation, "_format": "json", "_marker": "0", "ctx": CTX}
        query.update(params)
        logger.debug("jiosaavn %s params=%s", operation, params)
        try:
            r = requests.post(self.api_url, params=query, headers=self.headers, timeout=self.timeout)
        except requests.Timeout as exc:
            raise UpstreamUnavailableError(f"JioSaavn {operation}: timeout tras {self.timeout}s") from exc
        except requests.RequestException as exc:
            raise UpstreamUnavailableError(f"JioSaavn {operation}: {exc}") from exc
        if r.status_code >= 500:
            raise UpstreamServerError(f"JioSaavn error {r.status_code} en {operation}", r.status_code)
        if r.status_code >= 400:
            raise UpstreamClientError(f"JioSaavn rechazó {operation} ({r.status_code})", r.status_code)
        return r

    @staticmethod
    def _json(r: requests.Response, operation: str) -> Any:
        try:
            return r.json()
        except ValueError as exc:
            raise ShapeMismatchError(f"JioSaavn {operation}: respuesta no es JSON") from exc

    def _enveloped(self, operation: str, **params: str) -> Dict[str, Any]:
        r = self._call(operation, **params)
        return with_status(format_response(self._json(r, operation)), r.status_code)

    def search(self, query_text: str) -> Dict[str, Any]:
        if not query_text:
            raise ValueError("query_text requerido")
        return self._enveloped("autocomplete.get", query=query_text)

    def get_song_details(self, song_ref: str) -> Dict[str, Any]:
        try:
            song_id = extract_song_id(song_ref)
        except ValueError as exc:
            raise SongReferenceError(f"Referencia de canción inválida: {song_ref!r}") from exc
        if not song_id:
            raise SongReferenceError(f"Referencia de canción inválida: {song_ref!r}")
        r = self._call(
            "webapi.get",
            token=song_id,
            type="song",
            includeMetaTags="0",
            api_version=API_VERSION,
        )
        data = self._json(r, "webapi.get")
        if not isinstance(data, dict):
            raise ShapeMismatchError("webapi.get no devolvió un objeto")
        return data

    def get_song_direct_link(self, song_ref: str) -> str:
        details = self.get_song_details(song_ref)
        songs = details.get("songs")
        if not isinstance(songs, list) or not songs:
            raise ShapeMismatchError(f"Sin canciones para {song_ref!r}")
        more_info: Optional[Dict[str, Any]] = dig(songs, 0, "more_info")
        if not isinstance(more_info, dict):
            raise ShapeMismatchError("La canción no trae more_info")
        enc_url = more_info.get("encrypted_media_url")
        if not enc_url:
            raise ShapeMismatchError("La canción no trae encrypted_media_url")

        envelope = self._enveloped(
            "song.generateAuthToken",
            url=enc_url,
            bitrate=select_bitrate(more_info),
            api_version=API_VERSION,
        )
        auth_url = dig(envelope, "data", "auth_url")
        if not auth_url:
            raise ShapeMismatchError("generateAuthToken no devolvió auth_url")
        return auth_url

    def get_top_charts(self) -> Dict[str, Any]:
        return self._enveloped("content.getCharts", api_version=API_VERSION)

    def get_new_releases(self, page: int = 1, limit: int = 50) -> Dict[str, Any]:
        return self._enveloped(
            "content.getAlbums",
            p=str(page),
            n=str(limit),
            api_version=API_VERSION,
        )
