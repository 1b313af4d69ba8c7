# Importing every model registers its table on db.metadata, which the
# row-level store resolves tables from.
from .website import Website
from .website_section import WebsiteSection
from .audit_log import AuditLog
from .theme import WebsiteTheme
from .navbar import NavbarContent
from .hero import HeroContent
from .about import AboutContent, WhyChooseUsContent
from .team import TeamSectionConfig, TeamMember
from .products import FeaturedProductsConfig, Product
from .menu import MenuSectionConfig, MenuCategory, MenuItem
from .faq import FAQConfig, FAQCategory, FAQ
from .testimonials import TestimonialsConfig, Testimonial
from .special_offers import SpecialOffersConfig, SpecialOffer
from .contact import ContactInfo
from .reservation import ReservationConfig
from .social import InstagramFeedConfig, ChatSupportConfig
from .footer import FooterContent
