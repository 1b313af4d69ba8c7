from sqlalchemy.orm import declared_attr
from sitebuilder.extensions import db


class WebsiteMixin:
    """Scopes a content row to one website."""

    @declared_attr
    def website_id(cls):
        return db.Column(
            db.String(36),
            db.ForeignKey("websites.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )


class SingletonMixin(WebsiteMixin):
    """At most one row per website (hero, footer, *_config tables)."""

    @declared_attr
    def __table_args__(cls):
        return (
            db.UniqueConstraint("website_id", name=f"uq_{cls.__tablename__}_website"),
        )
