"""
handlers/api_handler.py
-----------------------
JSON routes of the API service: /, /health and /users.

Each request opens its own store connection through ``open_gateway`` and
releases it when the handler returns. Store failures are turned into JSON
fields here; they never produce an HTTP error or a stack trace.
"""

from flask import Blueprint, current_app, jsonify
from werkzeug.exceptions import HTTPException

from config import AppConfig
from db.connection import open_gateway
from models.envelope import ResponseEnvelope
from services.status_service import StatusVariant, build_status
from services.user_service import list_users
from utils.logger import get_logger

logger = get_logger(__name__)

bp = Blueprint("api", __name__)


def _config() -> AppConfig:
    return current_app.extensions["app_config"]


def _connector():
    return current_app.extensions.get("store_connector")


@bp.route("/", methods=["GET"])
def root_status():
    """Service status with the endpoints map; also initializes the schema."""
    config = _config()
    with open_gateway(config.store, _connector()) as connected:
        envelope = build_status(config.service_name, connected, StatusVariant.ROOT)
    return jsonify(envelope.to_dict())


@bp.route("/health", methods=["GET"])
def health():
    """Liveness check; does not touch the store."""
    envelope = build_status(_config().service_name, variant=StatusVariant.HEALTH)
    return jsonify(envelope.to_dict())


@bp.route("/users", methods=["GET"])
def users():
    config = _config()
    with open_gateway(config.store, _connector()) as connected:
        if not connected.ok:
            envelope = ResponseEnvelope.error(connected.error.message)
        else:
            envelope = list_users(connected.value)
    return jsonify(envelope.to_dict())


@bp.app_errorhandler(HTTPException)
def http_error(e: HTTPException):
    return jsonify(ResponseEnvelope.error(e.description or e.name).to_dict()), e.code


@bp.app_errorhandler(Exception)
def unexpected_error(e: Exception):
    logger.exception(f"Unhandled error: {e}")
    return jsonify(ResponseEnvelope.error("Internal server error").to_dict()), 500
