from sitecms.extensions import db
from sitecms.utils.timestamps import utc_now
from .base import BaseModel

class CustomButton(BaseModel):
    __tablename__ = "custom_buttons"

    text = db.Column(db.Text, nullable=False)
    type = db.Column(db.String(20), nullable=False)  # internal, external, iframe, email
    url = db.Column(db.Text, nullable=False)
    internal_link = db.Column(db.Text, nullable=True)
    external_url = db.Column(db.Text, nullable=True)
    email = db.Column(db.Text, nullable=True)
    page_slug = db.Column(db.String(200), nullable=False, index=True)
    style = db.Column(db.String(20), nullable=False, default="primary")
    size = db.Column(db.String(20), nullable=False, default="default")
    open_in_new_tab = db.Column(db.Boolean, default=True)

    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utc_now)
