from sitebuilder.extensions import db
from .base import BaseModel
from .website_mixin import SingletonMixin


class AboutContent(BaseModel, SingletonMixin):
    __tablename__ = "about_content"

    heading = db.Column(db.String(255), nullable=False)
    subheading = db.Column(db.String(255), nullable=True)
    description = db.Column(db.Text, nullable=True)
    image_url = db.Column(db.String(512), nullable=True)
    image_position = db.Column(db.String(10), default="left")  # left, right
    features = db.Column(db.JSON, default=list)
    stats = db.Column(db.JSON, default=list)


class WhyChooseUsContent(BaseModel, SingletonMixin):
    __tablename__ = "why_choose_us_content"

    heading = db.Column(db.String(255), nullable=False)
    subheading = db.Column(db.String(255), nullable=True)
    reasons = db.Column(db.JSON, default=list)
    background_style = db.Column(db.String(20), default="light")  # light, dark, gradient
