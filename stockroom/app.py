# stockroom/app.py
import logging

from flask import Flask, redirect, url_for

from stockroom.config import Config
from stockroom.extensions import db, migrate, cors

# Blueprints
from stockroom.admin import admin_bp
from stockroom.api.routes.product_routes import api_products
from stockroom.api.routes.category_routes import api_categories
from stockroom.cli import register_commands
from stockroom.errors import register_error_handlers
from stockroom import models as _models  # noqa: F401


def create_app(config_object=Config) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_object)

    logging.basicConfig(
        level=getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO").upper())

    # Init extensions
    db.init_app(app)
    migrate.init_app(app, db)
    cors.init_app(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}})

    # Keep non-ASCII category names readable and field order stable in the envelope
    app.json.ensure_ascii = False
    app.json.sort_keys = False

    # Register blueprints
    app.register_blueprint(admin_bp)
    app.register_blueprint(api_products)
    app.register_blueprint(api_categories)

    register_error_handlers(app)
    register_commands(app)

    @app.get("/")
    def index():
        return redirect(url_for("admin.products"))

    @app.get("/health")
    def health():
        return {"status": "ok"}, 200

    return app
