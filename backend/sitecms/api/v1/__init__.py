from flask import Blueprint

# Create the API blueprint
v1_bp = Blueprint("v1", __name__)

# Import route modules so they register with v1_bp
from . import health
from . import auth
from . import pages
from . import menu
from . import custom_buttons
from . import settings
from . import render
