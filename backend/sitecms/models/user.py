from sitecms.extensions import db
from .base import BaseModel

class User(BaseModel):
    __tablename__ = 'users'

    username = db.Column(db.String(120), unique=True, nullable=False)
    # werkzeug hash, see sitecms.application.users
    password = db.Column(db.String(256), nullable=False)
