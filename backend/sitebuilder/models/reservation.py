from sitebuilder.extensions import db
from .base import BaseModel
from .website_mixin import SingletonMixin


class ReservationConfig(BaseModel, SingletonMixin):
    __tablename__ = "reservation_config"

    heading = db.Column(db.String(255), nullable=False)
    subheading = db.Column(db.String(255), nullable=True)
    description = db.Column(db.Text, nullable=True)
    features = db.Column(db.JSON, default=list)
    working_hours = db.Column(db.JSON, default=dict)
    max_party_size = db.Column(db.Integer, default=10)
    booking_instructions = db.Column(db.Text, nullable=True)
