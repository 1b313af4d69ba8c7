from sitebuilder.extensions import db
from .base import BaseModel
from .website_mixin import SingletonMixin, WebsiteMixin


class TeamSectionConfig(BaseModel, SingletonMixin):
    __tablename__ = "team_section_config"

    heading = db.Column(db.String(255), nullable=False)
    subheading = db.Column(db.String(255), nullable=True)
    layout = db.Column(db.String(20), default="grid")  # grid, slider, list
    columns = db.Column(db.Integer, default=3)
    show_social_links = db.Column(db.Boolean, default=True)


class TeamMember(BaseModel, WebsiteMixin):
    __tablename__ = "team_members"

    name = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(255), nullable=True)
    bio = db.Column(db.Text, nullable=True)
    image_url = db.Column(db.String(512), nullable=True)
    social_links = db.Column(db.JSON, default=dict)
    display_order = db.Column(db.Integer, default=0)
    is_featured = db.Column(db.Boolean, default=False)
