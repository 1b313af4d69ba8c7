from sitebuilder.extensions import db
from .base import BaseModel
from .website_mixin import SingletonMixin


class ContactInfo(BaseModel, SingletonMixin):
    __tablename__ = "contact_info"

    heading = db.Column(db.String(255), nullable=False)
    subheading = db.Column(db.String(255), nullable=True)
    email = db.Column(db.String(255), nullable=True)
    phone = db.Column(db.String(50), nullable=True)
    address = db.Column(db.String(255), nullable=True)
    city = db.Column(db.String(100), nullable=True)
    state = db.Column(db.String(100), nullable=True)
    zip_code = db.Column(db.String(20), nullable=True)
    country = db.Column(db.String(100), nullable=True)
    google_maps_url = db.Column(db.String(1024), nullable=True)
    facebook_messenger_id = db.Column(db.String(100), nullable=True)
    social_links = db.Column(db.JSON, default=dict)
    show_contact_form = db.Column(db.Boolean, default=True)
    show_map = db.Column(db.Boolean, default=True)
    form_email_recipient = db.Column(db.String(255), nullable=True)
