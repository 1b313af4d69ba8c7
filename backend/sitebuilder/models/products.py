from sitebuilder.extensions import db
from .base import BaseModel
from .website_mixin import SingletonMixin, WebsiteMixin


class FeaturedProductsConfig(BaseModel, SingletonMixin):
    __tablename__ = "featured_products_config"

    heading = db.Column(db.String(255), nullable=False)
    subheading = db.Column(db.String(255), nullable=True)
    layout = db.Column(db.String(20), default="grid")
    max_items = db.Column(db.Integer, default=6)
    show_add_to_cart = db.Column(db.Boolean, default=True)


class Product(BaseModel, WebsiteMixin):
    __tablename__ = "products"

    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)
    price = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    image_url = db.Column(db.String(512), nullable=True)
    category = db.Column(db.String(100), nullable=True)
    is_featured = db.Column(db.Boolean, default=False)
    is_available = db.Column(db.Boolean, default=True)
    display_order = db.Column(db.Integer, default=0)
    badges = db.Column(db.JSON, default=list)
