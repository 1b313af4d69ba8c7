from typing import Tuple

# Fixed set of toggleable page regions, in default page order.
SECTION_NAMES: Tuple[str, ...] = (
    "hero",
    "about",
    "whyChooseUs",
    "team",
    "featuredProducts",
    "menu",
    "reservation",
    "testimonials",
    "specialOffers",
    "faq",
    "contact",
    "instagramFeed",
)

# Newly provisioned websites start with these off unless an allowlist says otherwise.
DISABLED_BY_DEFAULT = frozenset({"specialOffers"})


def is_known_section(section_name: str) -> bool:
    return section_name in SECTION_NAMES
