from sitebuilder.extensions import db
from .base import BaseModel
from .website_mixin import SingletonMixin


class HeroContent(BaseModel, SingletonMixin):
    __tablename__ = "hero_content"

    slides = db.Column(db.JSON, default=list)
    button_text = db.Column(db.String(100), nullable=True)
    button_link = db.Column(db.String(512), nullable=True)
    show_button = db.Column(db.Boolean, default=True)
    autoplay = db.Column(db.Boolean, default=True)
    autoplay_interval = db.Column(db.Integer, default=5000)
    show_navigation = db.Column(db.Boolean, default=True)
    show_indicators = db.Column(db.Boolean, default=True)
    parallax_enabled = db.Column(db.Boolean, default=False)
