"""Flask application package for the items API."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dotenv import load_dotenv
from flask import Flask


def create_app(
    config_overrides: Mapping[str, Any] | None = None,
    item_service: Any | None = None,
) -> Flask:
    """Application factory.

    Args:
        config_overrides: Values applied on top of the environment config.
        item_service: Service backing the item routes. Defaults to an
            ``ItemService`` over the SQL repository.

    Returns:
        Configured Flask application.
    """
    load_dotenv()

    from items_api.config import get_config
    from items_api.db import init_db
    from items_api.error_handlers import register_error_handlers
    from items_api.logging_config import configure_logging
    from items_api.routes.docs import docs_bp
    from items_api.routes.health import health_bp
    from items_api.routes.items import items_bp
    from items_api.services.item_service import ItemService
    from items_api.utils.json_provider import DecimalJSONProvider

    app = Flask(__name__)
    app.json = DecimalJSONProvider(app)
    app.config.from_object(get_config())
    if config_overrides:
        app.config.update(config_overrides)

    configure_logging(app)
    init_db(app)
    register_error_handlers(app)

    app.extensions["item_service"] = item_service or ItemService()

    app.register_blueprint(health_bp)
    app.register_blueprint(docs_bp)
    app.register_blueprint(items_bp)

    return app
