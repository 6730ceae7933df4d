"""
Flask application factory module.

This module creates and configures the Flask application using
the factory pattern, allowing for different configurations
(development, testing, production). Each application instance owns
its own TodoStore, reachable from request handlers via ``get_store``.
"""

import logging
import time

from flask import Flask, Response, current_app, g, request

from app.models import DEFAULT_TODOS, TodoStore
from config import get_config

STORE_EXTENSION = "todo_store"

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)
request_logger = logging.getLogger("app.requests")


def get_store() -> TodoStore:
    """Return the todo store of the application handling this request."""
    return current_app.extensions[STORE_EXTENSION]


def _register_request_logging(app: Flask) -> None:
    """Log method, path, status and duration of every response."""

    @app.before_request
    def _start_timer() -> None:
        g.request_started = time.perf_counter()

    @app.after_request
    def _log_response(response: Response) -> Response:
        started = g.pop("request_started", None)
        elapsed_ms = (time.perf_counter() - started) * 1000 if started is not None else 0.0
        request_logger.info(
            "%s %s -> %s (%.2f ms)",
            request.method,
            request.path,
            response.status_code,
            elapsed_ms,
        )
        return response


def create_app(config_name: str | None = None) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config_name: Configuration environment name.
                     If None, uses FLASK_ENV environment variable.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__)

    # Load configuration
    config_class = get_config(config_name)
    app.config.from_object(config_class)
    logging.getLogger("app").setLevel(app.config["LOG_LEVEL"])

    logger.info("Creating app with config: %s", config_class.__name__)

    seed = DEFAULT_TODOS if app.config["SEED_TODOS"] else ()
    app.extensions[STORE_EXTENSION] = TodoStore(seed)
    logger.info("Todo store initialised with %d todos", len(seed))

    _register_request_logging(app)

    # Register blueprints
    from app.routes.api import api_bp
    from app.routes.views import views_bp

    app.register_blueprint(api_bp, url_prefix="/v1/todos")
    app.register_blueprint(views_bp)

    return app
