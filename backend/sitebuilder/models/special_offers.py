from sitebuilder.extensions import db
from .base import BaseModel
from .website_mixin import SingletonMixin, WebsiteMixin


class SpecialOffersConfig(BaseModel, SingletonMixin):
    __tablename__ = "special_offers_config"

    heading = db.Column(db.String(255), nullable=False)
    subheading = db.Column(db.String(255), nullable=True)
    layout = db.Column(db.String(20), default="grid")
    show_expiry_date = db.Column(db.Boolean, default=True)


class SpecialOffer(BaseModel, WebsiteMixin):
    __tablename__ = "special_offers"

    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)
    discount_percentage = db.Column(db.Integer, nullable=True)
    discount_amount = db.Column(db.Numeric(10, 2), nullable=True)
    promo_code = db.Column(db.String(50), nullable=True)
    image_url = db.Column(db.String(512), nullable=True)
    valid_from = db.Column(db.Date, nullable=True)
    valid_until = db.Column(db.Date, nullable=True)
    terms_conditions = db.Column(db.Text, nullable=True)
    is_active = db.Column(db.Boolean, default=True)
    display_order = db.Column(db.Integer, default=0)
