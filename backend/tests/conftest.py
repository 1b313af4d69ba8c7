"""
Shared fixtures.

Every test gets a fresh app on an in-memory SQLite database. The template
website is seeded through the row-level store so fixtures and the code under
test share one path to the tables.
"""
import pytest
from flask_jwt_extended import create_access_token

from sitebuilder import create_app
from sitebuilder.extensions import db
from sitebuilder.models import Website
from sitebuilder.store import SqlAlchemyStore, StoreError
from sitebuilder.store.base import Store


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class RecordingStore(Store):
    """Wraps a store, recording calls and failing chosen (operation, table) pairs."""

    def __init__(self, inner):
        self.inner = inner
        self.calls = []
        self.fail_on = set()

    def _record(self, operation, table):
        self.calls.append((operation, table))
        if (operation, table) in self.fail_on or (operation, "*") in self.fail_on:
            raise StoreError(table, operation, RuntimeError("injected failure"))

    def count(self, operation, table):
        return self.calls.count((operation, table))

    def select(self, table, filters, order_by=None, columns=None):
        self._record("select", table)
        return self.inner.select(table, filters, order_by=order_by, columns=columns)

    def insert(self, table, rows):
        self._record("insert", table)
        return self.inner.insert(table, rows)

    def update(self, table, id_or_filters, patch):
        self._record("update", table)
        return self.inner.update(table, id_or_filters, patch)

    def delete(self, table, filters):
        self._record("delete", table)
        return self.inner.delete(table, filters)


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    return SqlAlchemyStore()


@pytest.fixture
def recording_store(store):
    return RecordingStore(store)


@pytest.fixture
def clock():
    return FakeClock()


def make_website(subdomain, *, is_active=True, site_title=None):
    website = Website()
    website.subdomain = subdomain
    website.site_title = site_title or subdomain.replace("-", " ").title()
    website.is_active = is_active
    db.session.add(website)
    db.session.commit()
    return website.id


@pytest.fixture
def website_factory(app):
    return make_website


def seed_template_content(store, website_id):
    """A small but complete content graph: singletons, flags, collections, hierarchies."""
    store.insert("website_themes", [{
        "website_id": website_id,
        "theme_config": {"colors": {"primary": "#8B4513"}},
        "custom_css": ".hero { color: red; }",
    }])
    store.insert("hero_content", [{
        "website_id": website_id,
        "slides": [{"id": 1, "title": "Fresh bread", "image": "/hero.jpg", "subtitle": "Daily", "order": 1}],
        "button_text": "Order now",
        "button_link": "#menu",
    }])
    store.insert("about_content", [{
        "website_id": website_id,
        "heading": "Our story",
        "description": "Baking since 1990.",
        "features": [],
        "stats": [{"label": "Years", "value": "30+"}],
    }])
    store.insert("footer_content", [{
        "website_id": website_id,
        "about_text": "Golden Crumb bakery",
        "footer_columns": [],
    }])

    store.insert("website_sections", [
        {"website_id": website_id, "section_name": name, "is_enabled": True,
         "display_order": order, "custom_config": {}}
        for order, name in enumerate(
            ["hero", "about", "menu", "specialOffers", "faq", "testimonials", "contact"]
        )
    ])

    store.insert("team_members", [
        {"website_id": website_id, "name": "Ana", "role": "Baker", "display_order": 0},
        {"website_id": website_id, "name": "Ben", "role": "Pastry chef", "display_order": 1},
    ])
    store.insert("testimonials", [
        {"website_id": website_id, "customer_name": "Cleo", "testimonial_text": "Lovely", "rating": 5,
         "display_order": 0},
    ])

    breads, cakes = store.insert("menu_categories", [
        {"website_id": website_id, "name": "Breads", "display_order": 0},
        {"website_id": website_id, "name": "Cakes", "display_order": 1},
    ])
    store.insert("menu_items", [
        {"website_id": website_id, "category_id": breads["id"], "name": "Sourdough", "price": 6, "display_order": 0},
        {"website_id": website_id, "category_id": breads["id"], "name": "Baguette", "price": 3, "display_order": 1},
        {"website_id": website_id, "category_id": cakes["id"], "name": "Carrot cake", "price": 5, "display_order": 2},
    ])

    (general,) = store.insert("faq_categories", [
        {"website_id": website_id, "name": "General", "display_order": 0},
    ])
    store.insert("faqs", [
        {"website_id": website_id, "category_id": general["id"], "question": "Open Sundays?",
         "answer": "Yes", "display_order": 0},
        {"website_id": website_id, "category_id": None, "question": "Gluten free?",
         "answer": "Some items", "display_order": 1},
    ])


@pytest.fixture
def template_website(app, store):
    website_id = make_website("golden-crumb", site_title="Golden Crumb")
    seed_template_content(store, website_id)
    return website_id


@pytest.fixture
def admin_headers(app):
    token = create_access_token(identity="admin-1", additional_claims={"role": "admin"})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def editor_headers(app):
    token = create_access_token(identity="editor-1", additional_claims={"role": "editor"})
    return {"Authorization": f"Bearer {token}"}
