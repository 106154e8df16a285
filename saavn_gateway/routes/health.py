from flask import Blueprint, current_app, jsonify
from ..src.config import Config


bp = Blueprint("health", __name__)


@bp.get("/health")
def health():
    return jsonify({
        "status": "ok",
        "service": "saavn_gateway",
        "upstream": current_app.extensions["saavn"].name,
        "debug": Config.DEBUG,
    }), 200
