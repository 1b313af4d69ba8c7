from sitebuilder.extensions import db
from .base import BaseModel


class Website(BaseModel):
    __tablename__ = "websites"

    # Basic info
    subdomain = db.Column(db.String(63), unique=True, nullable=False, index=True)
    site_title = db.Column(db.String(255), nullable=False)
    site_description = db.Column(db.Text, nullable=True)
    logo_url = db.Column(db.String(512), nullable=True)
    favicon_url = db.Column(db.String(512), nullable=True)
    is_active = db.Column(db.Boolean, default=True, nullable=False)

    # unprovisioned -> provisioning -> provisioned
    provisioning_status = db.Column(db.String(20), default="unprovisioned", nullable=False)

    def to_summary(self):
        return {
            "id": self.id,
            "subdomain": self.subdomain,
            "site_title": self.site_title,
            "is_active": self.is_active,
            "provisioning_status": self.provisioning_status,
        }
