from sitebuilder.extensions import db
from .base import BaseModel
from .website_mixin import SingletonMixin, WebsiteMixin


class MenuSectionConfig(BaseModel, SingletonMixin):
    __tablename__ = "menu_section_config"

    heading = db.Column(db.String(255), nullable=False)
    subheading = db.Column(db.String(255), nullable=True)
    layout = db.Column(db.String(20), default="tabs")  # tabs, accordion, grid
    show_categories = db.Column(db.Boolean, default=True)
    show_filters = db.Column(db.Boolean, default=False)


class MenuCategory(BaseModel, WebsiteMixin):
    __tablename__ = "menu_categories"

    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)
    icon = db.Column(db.String(100), nullable=True)
    display_order = db.Column(db.Integer, default=0)
    is_visible = db.Column(db.Boolean, default=True)


class MenuItem(BaseModel, WebsiteMixin):
    __tablename__ = "menu_items"

    category_id = db.Column(
        db.String(36),
        db.ForeignKey("menu_categories.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)
    price = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    image_url = db.Column(db.String(512), nullable=True)
    is_available = db.Column(db.Boolean, default=True)
    is_popular = db.Column(db.Boolean, default=False)
    display_order = db.Column(db.Integer, default=0)
    tags = db.Column(db.JSON, default=list)
