from flask import Flask, jsonify, request, g
import time
import logging
from flask_cors import CORS

from .src.config import Config
from .src.services.base import CatalogService
from .src.services.saavn_service import SaavnService
from .routes.health import bp as health_bp
from .routes.api import bp as api_bp


def create_app(service: CatalogService | None = None):
    app = Flask(__name__)
    app.config.from_object(Config)

    CORS(app, resources={r"/*": {"origins": Config.CORS_ORIGINS}})

    # Un único cliente por proceso: los headers se eligen aquí y no cambian
    app.extensions["saavn"] = service or SaavnService()

    app.register_blueprint(health_bp)
    app.register_blueprint(api_bp, url_prefix="/api")

    # Logging simple de todas las peticiones entrantes
    logging.basicConfig(level=logging.DEBUG if Config.DEBUG else logging.INFO)

    @app.before_request
    def _log_start():
        g._start_time = time.time()

    @app.after_request
    def _log_request(resp):
        started = getattr(g, '_start_time', None)
        dur_ms = int((time.time() - started) * 1000) if started else -1
        logging.info(
            "%s %s -> %s (%d ms) ip=%s",
            request.method,
            request.path,
            resp.status_code,
            dur_ms,
            request.headers.get('X-Forwarded-For', request.remote_addr),
        )
        return resp

    @app.get("/")
    def root():
        return jsonify({"name": "saavn_gateway", "status": "ok"}), 200

    return app
