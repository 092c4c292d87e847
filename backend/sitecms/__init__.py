from typing import Any, Dict, Optional
from flask import Flask, send_file, current_app
from .config import config_by_name
from .extensions import db, migrate, STORE_EXTENSION_KEY
from .api.v1 import v1_bp
from .application.access_gate import AccessGate
from .application.exceptions import ValidationFailed
from .application.users import create_user
from .errors import register_error_handlers
from .storage import build_store
from .storage.seed import seed_default_content
from flask_swagger_ui import get_swaggerui_blueprint
import click
import os


def create_app(config_name: str = "development", config_override: Optional[Dict[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    if config_override:
        app.config.update(config_override)

    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    from . import models  # noqa: F401  registers tables with db.metadata

    db.init_app(app)
    migrate.init_app(app, db)

    # -------------------------------------------------
    # Entity store + access gate (one per application)
    # -------------------------------------------------
    backend = app.config["STORAGE_BACKEND"]
    store = build_store(backend)
    app.extensions[STORE_EXTENSION_KEY] = store
    app.extensions["access_gate"] = AccessGate.from_config(app.config)

    with app.app_context():
        if backend == "database" and app.config.get("AUTO_CREATE_TABLES"):
            db.create_all()

        if app.config.get("SEED_DEFAULT_CONTENT"):
            created = seed_default_content(store)
            app.logger.info("Seeded %s default rows into %s store", created, backend)

    app.logger.info("Storage backend: %s", backend)

    @app.cli.command("seed")
    def seed_command():
        """Insert the default pages and menu items."""
        created = seed_default_content(store)
        print(f"Seeded {created} rows")

    @app.cli.command("create-user")
    @click.argument("username")
    @click.password_option()
    def create_user_command(username, password):
        """Add a row to the users table."""
        try:
            user = create_user(store=store, username=username, password=password)
        except ValidationFailed as exc:
            details = "; ".join(error["msg"] for error in exc.errors)
            raise click.ClickException(f"{exc.message}: {details}") from exc
        print(f"Created user {user['username']} (id={user['id']})")

    # -------------------------------------------------
    # API Blueprints
    # -------------------------------------------------
    app.register_blueprint(v1_bp, url_prefix="/api")
    register_error_handlers(app)

    # -------------------------------------------------
    # Serve OpenAPI YAML
    # -------------------------------------------------
    @app.route("/openapi/cms.yaml", methods=["GET"], endpoint="openapi_cms")
    def serve_openapi():
        openapi_path = os.path.join(
            current_app.root_path,
            "api",
            "v1",
            "cms_openapi.yaml",
        )

        if not os.path.exists(openapi_path):
            raise FileNotFoundError("cms_openapi.yaml not found")

        return send_file(
            openapi_path,
            mimetype="application/yaml",
            as_attachment=False,
        )

    # -------------------------------------------------
    # Swagger UI
    # -------------------------------------------------
    SWAGGER_URL = "/swagger"
    API_URL = "/openapi/cms.yaml"

    swaggerui_blueprint = get_swaggerui_blueprint(
        SWAGGER_URL,
        API_URL,
        config={
            "app_name": "Site CMS API",
            "deepLinking": True,
        },
    )

    app.register_blueprint(swaggerui_blueprint, url_prefix=SWAGGER_URL)

    return app
