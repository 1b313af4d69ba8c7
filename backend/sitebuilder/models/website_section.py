from sitebuilder.extensions import db
from .base import BaseModel
from .website_mixin import WebsiteMixin


class WebsiteSection(BaseModel, WebsiteMixin):
    __tablename__ = "website_sections"

    section_name = db.Column(db.String(50), nullable=False)  # hero, menu, faq, ...
    is_enabled = db.Column(db.Boolean, default=True, nullable=False)
    display_order = db.Column(db.Integer, default=0, nullable=False)
    custom_config = db.Column(db.JSON, default=dict)

    __table_args__ = (
        db.UniqueConstraint("website_id", "section_name", name="uq_section_per_website"),
        db.Index("idx_section_website_order", "website_id", "display_order"),
    )
