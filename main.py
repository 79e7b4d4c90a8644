"""
main.py
-------
Entry point for the API and frontend services.

Responsibilities:
    - Build the configuration once from the environment.
    - Create the Flask application for either process.
    - Start the chosen process:
        python main.py api
        python main.py frontend

WSGI servers can use the factories directly, e.g.
    gunicorn "main:create_api_app()"
"""

import argparse
from typing import Optional

from flask import Flask

from clients.api_client import ApiClient
from config import AppConfig
from db.connection import Connector
from handlers import api_handler, dashboard_handler
from utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


def _flask_app(config: AppConfig) -> Flask:
    app = Flask(__name__)
    app.json.compact = False
    app.json.sort_keys = False
    app.extensions["app_config"] = config
    return app


def create_api_app(config: Optional[AppConfig] = None,
                   connector: Optional[Connector] = None) -> Flask:
    """
    Build the JSON API application.

    Args:
        config: Settings; read from the environment when omitted.
        connector: DB-API ``connect`` callable; PyMySQL's when omitted.
    """
    config = config or AppConfig.from_env()
    app = _flask_app(config)
    app.extensions["store_connector"] = connector
    app.register_blueprint(api_handler.bp)
    logger.info(
        f"API service '{config.service_name}' using store "
        f"{config.store.host}:{config.store.port}/{config.store.dbname}"
    )
    return app


def create_frontend_app(config: Optional[AppConfig] = None,
                        client: Optional[ApiClient] = None) -> Flask:
    """Build the HTML dashboard application."""
    config = config or AppConfig.from_env()
    app = _flask_app(config)
    app.extensions["api_client"] = client or ApiClient(config.api_url, timeout=config.fetch_timeout)
    app.register_blueprint(dashboard_handler.bp)
    logger.info(f"Frontend reading from API at {config.api_url}")
    return app


def main(argv: Optional[list[str]] = None) -> None:
    """Parse the command line and run the selected service."""
    parser = argparse.ArgumentParser(description="Users data service and dashboard.")
    parser.add_argument("service", choices=["api", "frontend"], help="Which process to run.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=None)
    args = parser.parse_args(argv)

    config = AppConfig.from_env()
    configure_logging(config.log_level)

    if args.service == "api":
        app = create_api_app(config)
        port = args.port or config.api_port
    else:
        app = create_frontend_app(config)
        port = args.port or config.frontend_port

    logger.info(f"🚀 Starting {args.service} service on {args.host}:{port}")
    app.run(host=args.host, port=port)


if __name__ == "__main__":
    main()
