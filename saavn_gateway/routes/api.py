"""Endpoints públicos sobre el catálogo de JioSaavn.

Cualquier fallo aguas arriba se devuelve como un 500 plano `{error}`; la
clasificación interna (`kind`) sólo queda en los logs.
"""

import logging

from flask import Blueprint, current_app, jsonify, request

from ..src import extractors
from ..src.services.base import CatalogService
from ..src.services.errors import SaavnError
from ..src.utils import last_path_segment


bp = Blueprint("api", __name__)

NEW_RELEASES_PAGE = 1
NEW_RELEASES_LIMIT = 50


def _service() -> CatalogService:
    return current_app.extensions["saavn"]


def _failure(message: str, exc: SaavnError):
    logging.warning("%s [%s]: %s", message, exc.kind, exc)
    return jsonify({"error": message}), 500


@bp.get("/search")
def search():
    query = request.args.get("query")
    if not query:
        return jsonify({"error": "Query parameter is required"}), 400
    try:
        result = _service().search(query)
        return jsonify({"status": 200, "data": extractors.search_results(result)}), 200
    except SaavnError as e:
        return _failure("Failed to search songs", e)


@bp.get("/song/<path:song_id>")
def song_link(song_id: str):
    """Link directo de reproducción.

    El id puede venir con `/` embebidos (p. ej. un link completo); se usa el
    último segmento.
    """
    if "/" in song_id:
        song_id = last_path_segment(song_id)
    try:
        link = _service().get_song_direct_link(song_id)
        return jsonify({"status": 200, "downloadLink": link}), 200
    except SaavnError as e:
        return _failure("Failed to get song link", e)


@bp.get("/charts")
def charts():
    try:
        result = _service().get_top_charts()
        return jsonify({"status": 200, "data": extractors.charts(result)}), 200
    except SaavnError as e:
        return _failure("Failed to get charts", e)


@bp.get("/new-releases")
def new_releases():
    try:
        result = _service().get_new_releases(page=NEW_RELEASES_PAGE, limit=NEW_RELEASES_LIMIT)
        return jsonify({"status": 200, "data": extractors.new_release_albums(result)}), 200
    except SaavnError as e:
        return _failure("Failed to get new releases", e)
