from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict


class CatalogService(ABC):
    """Clase base para servicios de catálogo de música.

    Define la interfaz que consumen las rutas de `/api`.
    """

    name: str = "provider"

    @abstractmethod
    def search(self, query_text: str) -> Dict[str, Any]:
        """Autocompletado; devuelve el sobre `{data, status}`."""
        raise NotImplementedError

    @abstractmethod
    def get_song_details(self, song_ref: str) -> Dict[str, Any]:
        raise NotImplementedError

    @abstractmethod
    def get_song_direct_link(self, song_ref: str) -> str:
        """Resuelve una canción a una URL reproducible."""
        raise NotImplementedError

    @abstractmethod
    def get_top_charts(self) -> Dict[str, Any]:
        raise NotImplementedError

    @abstractmethod
    def get_new_releases(self, page: int = 1, limit: int = 50) -> Dict[str, Any]:
        raise NotImplementedError
