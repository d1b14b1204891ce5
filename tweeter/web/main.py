"""Main entry point for the Tweeter web server."""

import logging
import os
import sys
from logging import Formatter
from logging.handlers import RotatingFileHandler
from typing import Any

import click
from flask import Flask

from tweeter.api.routes.static_bp import static_bp
from tweeter.core.config import config
from tweeter.routing.table import ResourceLoadError, build_route_table

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s %(filename)s:%(lineno)d"
_CONSOLE_HANDLER = "tweeter.console"


def setup_logging(log_path: str | None = "tweeter.log") -> None:
    """
    Configure root logger with console and rotating file handlers.

    Calling it again is a no-op for handlers that are already installed.
    """
    log_formatter = Formatter(_LOG_FORMAT)
    root = logging.getLogger()
    env = os.getenv("FLASK_ENV", "default").lower()
    root.setLevel(logging.DEBUG if env in ("development", "default") else logging.INFO)

    if not any(h.get_name() == _CONSOLE_HANDLER for h in root.handlers):
        console = logging.StreamHandler()
        console.setFormatter(log_formatter)
        console.set_name(_CONSOLE_HANDLER)
        root.addHandler(console)

    if log_path:
        target = os.path.abspath(log_path)
        if not any(getattr(h, "baseFilename", None) == target for h in root.handlers):
            file_handler = RotatingFileHandler(target, maxBytes=2 * 1024 * 1024, backupCount=5)
            file_handler.setFormatter(log_formatter)
            root.addHandler(file_handler)


def create_app(config_name: str = "default", **overrides: Any) -> Flask:
    """Factory function to create and configure the Flask app.

    Keyword overrides are applied on top of the selected config class.
    """
    config_cls = config.get(config_name, config["default"])
    setup_logging(overrides.get("LOG_PATH", config_cls.LOG_PATH))

    flask_app = Flask(__name__)

    # Load and validate config
    flask_app.config.from_object(config_cls)
    flask_app.config.update(overrides)
    try:
        config_cls.validate(overrides)
    except ValueError as err:
        flask_app.logger.error("Configuration validation failed: %s", err)
        raise

    # Preload every static resource; a missing file aborts startup
    try:
        route_table = build_route_table(flask_app.config["PUBLIC_DIR"])
    except ResourceLoadError as err:
        flask_app.logger.error("Static resource loading failed: %s", err)
        raise

    # Attach to app context
    flask_app.route_table = route_table  # type: ignore[attr-defined]

    # Exact-match routing: no slash merging or redirects
    flask_app.url_map.merge_slashes = False
    flask_app.url_map.strict_slashes = False

    # Register blueprints
    flask_app.register_blueprint(static_bp)

    # CLI commands
    @flask_app.cli.command("list-resources")
    def list_resources() -> None:
        """List every served path with its status, type and size."""
        for entry in route_table:
            click.echo(f"{entry.path}\t{entry.status}\t{entry.content_type}\t{len(entry.content)}")
        fallback = route_table.fallback
        click.echo(f"*\t{fallback.status}\t{fallback.content_type}\t{len(fallback.content)}")

    flask_app.logger.info("Application initialized successfully | resources=%d", len(route_table))
    return flask_app


def main() -> None:
    """Build the app and listen on the configured port until terminated."""
    try:
        app = create_app(os.getenv("FLASK_ENV", "default"))
    except (ValueError, ResourceLoadError):
        logger.critical("Server failed to start")
        sys.exit(1)

    host = app.config["HOST"]
    port = app.config["PORT"]
    app.logger.info("Server is listening on port: %d | host=%s", port, host)
    app.run(host=host, port=port, threaded=True, use_reloader=False)


if __name__ == "__main__":
    main()
