from sitebuilder.extensions import db
from .base import BaseModel
from .website_mixin import SingletonMixin


class InstagramFeedConfig(BaseModel, SingletonMixin):
    __tablename__ = "instagram_feed_config"

    heading = db.Column(db.String(255), nullable=False)
    subheading = db.Column(db.String(255), nullable=True)
    instagram_handle = db.Column(db.String(100), nullable=True)
    instagram_url = db.Column(db.String(512), nullable=True)
    feed_items = db.Column(db.JSON, default=list)
    max_items = db.Column(db.Integer, default=6)
    layout = db.Column(db.String(20), default="grid")


class ChatSupportConfig(BaseModel, SingletonMixin):
    __tablename__ = "chat_support_config"

    is_enabled = db.Column(db.Boolean, default=True)
    greeting_message = db.Column(db.Text, nullable=False)
    offline_message = db.Column(db.Text, nullable=True)
    position = db.Column(db.String(20), default="bottom-right")  # bottom-right, bottom-left
    theme_color = db.Column(db.String(20), nullable=True)
    agent_name = db.Column(db.String(100), nullable=False)
    agent_avatar_url = db.Column(db.String(512), nullable=True)
