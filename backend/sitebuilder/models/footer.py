from sitebuilder.extensions import db
from .base import BaseModel
from .website_mixin import SingletonMixin


class FooterContent(BaseModel, SingletonMixin):
    __tablename__ = "footer_content"

    about_text = db.Column(db.Text, nullable=True)
    copyright_text = db.Column(db.String(255), nullable=True)
    footer_columns = db.Column(db.JSON, default=list)
    show_social_links = db.Column(db.Boolean, default=True)
    show_newsletter = db.Column(db.Boolean, default=False)
    newsletter_heading = db.Column(db.String(255), nullable=True)
    newsletter_placeholder = db.Column(db.String(255), nullable=True)
