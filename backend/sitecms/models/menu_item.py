from sitecms.extensions import db
from .base import BaseModel

class MenuItem(BaseModel):
    __tablename__ = "menu_items"

    text = db.Column(db.Text, nullable=False)
    order = db.Column(db.Integer, nullable=False, index=True)
    type = db.Column(db.String(20), nullable=False)  # internal, external, iframe
    internal_link = db.Column(db.Text, nullable=True)  # page slug
    external_url = db.Column(db.Text, nullable=True)
