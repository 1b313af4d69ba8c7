"""Content tables cloned from a template website, in copy order."""
from dataclasses import dataclass
from typing import Tuple

# Never copied between websites.
ROW_IDENTITY_FIELDS = frozenset({"id", "website_id", "created_at", "updated_at"})

SECTIONS_TABLE = "website_sections"

# At most one row per website; upserted.
SINGLETON_TABLES: Tuple[str, ...] = (
    "website_themes",
    "navbar_content",
    "hero_content",
    "about_content",
    "why_choose_us_content",
    "team_section_config",
    "menu_section_config",
    "contact_info",
    "instagram_feed_config",
    "footer_content",
    "testimonials_config",
    "faq_config",
    "reservation_config",
    "featured_products_config",
    "special_offers_config",
    "chat_support_config",
)

# Many rows per website, no references to other content rows.
COLLECTION_TABLES: Tuple[str, ...] = (
    "team_members",
    "products",
    "testimonials",
    "special_offers",
)


@dataclass(frozen=True)
class Hierarchy:
    parent: str
    child: str
    fk: str = "category_id"
    nullable: bool = False


HIERARCHIES: Tuple[Hierarchy, ...] = (
    Hierarchy(parent="menu_categories", child="menu_items"),
    Hierarchy(parent="faq_categories", child="faqs", nullable=True),
)


def content_fields(row):
    """Copy of ``row`` without its identity and timestamps."""
    return {k: v for k, v in row.items() if k not in ROW_IDENTITY_FIELDS}
