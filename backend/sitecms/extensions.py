from flask import current_app
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()
migrate = Migrate()

STORE_EXTENSION_KEY = "entity_store"


def get_store():
    """Entity store bound to the running application."""
    return current_app.extensions[STORE_EXTENSION_KEY]
