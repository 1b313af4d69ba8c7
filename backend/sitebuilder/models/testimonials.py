from sitebuilder.extensions import db
from .base import BaseModel
from .website_mixin import SingletonMixin, WebsiteMixin


class TestimonialsConfig(BaseModel, SingletonMixin):
    __tablename__ = "testimonials_config"

    heading = db.Column(db.String(255), nullable=False)
    subheading = db.Column(db.String(255), nullable=True)
    layout = db.Column(db.String(20), default="slider")  # slider, grid, masonry
    show_ratings = db.Column(db.Boolean, default=True)
    autoplay = db.Column(db.Boolean, default=True)


class Testimonial(BaseModel, WebsiteMixin):
    __tablename__ = "testimonials"

    customer_name = db.Column(db.String(255), nullable=False)
    customer_role = db.Column(db.String(255), nullable=True)
    customer_image_url = db.Column(db.String(512), nullable=True)
    rating = db.Column(db.Integer, default=5)
    testimonial_text = db.Column(db.Text, nullable=False)
    display_order = db.Column(db.Integer, default=0)
    is_featured = db.Column(db.Boolean, default=False)
