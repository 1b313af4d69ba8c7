from sitebuilder.extensions import db
from .base import BaseModel
from .website_mixin import SingletonMixin, WebsiteMixin


class FAQConfig(BaseModel, SingletonMixin):
    __tablename__ = "faq_config"

    heading = db.Column(db.String(255), nullable=False)
    subheading = db.Column(db.String(255), nullable=True)
    layout = db.Column(db.String(20), default="accordion")  # accordion, list, grid
    show_categories = db.Column(db.Boolean, default=True)


class FAQCategory(BaseModel, WebsiteMixin):
    __tablename__ = "faq_categories"

    name = db.Column(db.String(255), nullable=False)
    display_order = db.Column(db.Integer, default=0)


class FAQ(BaseModel, WebsiteMixin):
    __tablename__ = "faqs"

    # Uncategorised FAQs are valid
    category_id = db.Column(
        db.String(36),
        db.ForeignKey("faq_categories.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    question = db.Column(db.Text, nullable=False)
    answer = db.Column(db.Text, nullable=False)
    display_order = db.Column(db.Integer, default=0)
    is_featured = db.Column(db.Boolean, default=False)
