from sitecms.extensions import db
from .base import BaseModel

class SiteSetting(BaseModel):
    __tablename__ = "site_settings"

    name = db.Column(db.String(200), nullable=False, unique=True, index=True)
    value = db.Column(db.JSON, nullable=False)
