from sitebuilder.extensions import db
from .base import BaseModel
from .website_mixin import SingletonMixin


class WebsiteTheme(BaseModel, SingletonMixin):
    __tablename__ = "website_themes"

    theme_config = db.Column(db.JSON, default=dict)  # colors, fonts, spacing, borderRadius
    custom_css = db.Column(db.Text, nullable=True)
