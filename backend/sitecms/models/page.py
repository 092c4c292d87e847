from sitecms.extensions import db
from sitecms.utils.timestamps import utc_now
from .base import BaseModel

class Page(BaseModel):
    __tablename__ = 'pages'

    title = db.Column(db.Text, nullable=False)
    slug = db.Column(db.String(200), nullable=False, unique=True, index=True)
    content = db.Column(db.Text, nullable=False)

    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)
