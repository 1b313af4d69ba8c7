from sitebuilder.extensions import db
from .base import BaseModel
from .website_mixin import SingletonMixin


class NavbarContent(BaseModel, SingletonMixin):
    __tablename__ = "navbar_content"

    brand_name = db.Column(db.String(255), nullable=False)
    brand_logo_url = db.Column(db.String(512), nullable=True)
    show_cart = db.Column(db.Boolean, default=True)
    sticky_nav = db.Column(db.Boolean, default=True)
    nav_items = db.Column(db.JSON, default=list)
    cta_button = db.Column(db.JSON, default=dict)
