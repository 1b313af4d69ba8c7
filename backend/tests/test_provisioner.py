import pytest

from sitebuilder.domain.errors import ProvisionError, ProvisionStepFailure, TemplateNotFound
from sitebuilder.domain.invariants.exceptions import InvariantViolation
from sitebuilder.domain.sections import SECTION_NAMES
from sitebuilder.provisioning import TemplateProvisioner
from sitebuilder.provisioning.tables import COLLECTION_TABLES, HIERARCHIES, SINGLETON_TABLES, content_fields
from sitebuilder.store import StoreError
from sitebuilder.tenancy import SectionGate

CONTENT_TABLES = (
    SINGLETON_TABLES
    + ("website_sections",)
    + COLLECTION_TABLES
    + tuple(t for h in HIERARCHIES for t in (h.parent, h.child))
)


@pytest.fixture
def provisioner(recording_store):
    return TemplateProvisioner(recording_store, template_subdomain="golden-crumb")


@pytest.fixture
def target_id(website_factory):
    return website_factory("new-bakery")


def snapshot(store, website_id):
    """Content of every table for one website, with ids swapped for parent names."""
    state = {}
    for table in CONTENT_TABLES:
        rows = store.select(table, {"website_id": website_id})
        state[table] = sorted(
            (sorted((k, repr(v)) for k, v in content_fields(row).items() if k != "category_id")
             for row in rows),
        )

    for hierarchy in HIERARCHIES:
        parents = {p["id"]: p["name"] for p in store.select(hierarchy.parent, {"website_id": website_id})}
        children = store.select(hierarchy.child, {"website_id": website_id})
        state[f"{hierarchy.child}->parent"] = sorted(
            (c["display_order"], parents.get(c[hierarchy.fk])) for c in children
        )
    return state


def flags(store, website_id):
    rows = store.select("website_sections", {"website_id": website_id})
    return {row["section_name"]: row["is_enabled"] for row in rows}


class TestCopy:
    def test_copies_singletons_without_identity(self, provisioner, store, template_website, target_id):
        provisioner.provision(target_id)

        (hero,) = store.select("hero_content", {"website_id": target_id})
        (source_hero,) = store.select("hero_content", {"website_id": template_website})
        assert hero["id"] != source_hero["id"]
        assert content_fields(hero) == content_fields(source_hero)

    def test_absent_source_singletons_are_skipped(self, provisioner, store, template_website, target_id):
        report = provisioner.provision(target_id)

        assert store.select("chat_support_config", {"website_id": target_id}) == []
        assert report.rows["chat_support_config"] == 0
        assert report.rows["hero_content"] == 1

    def test_singleton_upsert_updates_existing_row(self, provisioner, store, template_website, target_id):
        (existing,) = store.insert("about_content", [{"website_id": target_id, "heading": "Old heading"}])

        provisioner.provision(target_id)

        (about,) = store.select("about_content", {"website_id": target_id})
        assert about["id"] == existing["id"]
        assert about["heading"] == "Our story"

    def test_collections_replace_target_rows(self, provisioner, store, template_website, target_id):
        store.insert("team_members", [{"website_id": target_id, "name": "Stale", "display_order": 9}])

        provisioner.provision(target_id)

        names = [m["name"] for m in store.select("team_members", {"website_id": target_id}, order_by="display_order")]
        assert names == ["Ana", "Ben"]

    def test_source_rows_are_untouched(self, provisioner, store, template_website, target_id):
        before = snapshot(store, template_website)
        provisioner.provision(target_id)
        assert snapshot(store, template_website) == before

    def test_report_and_status(self, provisioner, store, template_website, target_id):
        report = provisioner.provision(target_id)

        assert report.source_id == template_website
        assert report.status == "provisioned"
        assert report.rows["menu_items"] == 3
        assert report.rows["faqs"] == 2
        (website,) = store.select("websites", {"id": target_id})
        assert website["provisioning_status"] == "provisioned"


class TestReferentialIntegrity:
    def test_children_reference_parents_of_the_same_website(self, provisioner, store, template_website, target_id):
        provisioner.provision(target_id)

        for hierarchy in HIERARCHIES:
            parent_ids = {p["id"] for p in store.select(hierarchy.parent, {"website_id": target_id})}
            for child in store.select(hierarchy.child, {"website_id": target_id}):
                if child[hierarchy.fk] is not None:
                    assert child[hierarchy.fk] in parent_ids

    def test_items_keep_their_category(self, provisioner, store, template_website, target_id):
        provisioner.provision(target_id)

        categories = {c["id"]: c["name"] for c in store.select("menu_categories", {"website_id": target_id})}
        items = {i["name"]: categories[i["category_id"]] for i in store.select("menu_items", {"website_id": target_id})}
        assert items == {"Sourdough": "Breads", "Baguette": "Breads", "Carrot cake": "Cakes"}

    def test_uncategorised_faq_stays_uncategorised(self, provisioner, store, template_website, target_id):
        provisioner.provision(target_id)

        faqs = {f["question"]: f["category_id"] for f in store.select("faqs", {"website_id": target_id})}
        assert faqs["Gluten free?"] is None
        assert faqs["Open Sundays?"] is not None

    def test_duplicate_category_names_map_by_id(self, provisioner, store, website_factory, target_id):
        source_id = website_factory("twins")
        first, second = store.insert("menu_categories", [
            {"website_id": source_id, "name": "Specials", "display_order": 0},
            {"website_id": source_id, "name": "Specials", "display_order": 1},
        ])
        store.insert("menu_items", [
            {"website_id": source_id, "category_id": first["id"], "name": "Monday pie", "display_order": 0},
            {"website_id": source_id, "category_id": second["id"], "name": "Friday tart", "display_order": 1},
        ])

        provisioner.provision(target_id, source_id=source_id)

        categories = {c["id"]: c["display_order"] for c in store.select("menu_categories", {"website_id": target_id})}
        items = {i["name"]: categories[i["category_id"]] for i in store.select("menu_items", {"website_id": target_id})}
        assert items == {"Monday pie": 0, "Friday tart": 1}


class TestIdempotence:
    def test_second_run_yields_the_same_rows(self, provisioner, store, template_website, target_id):
        provisioner.provision(target_id, enabled_sections={"hero", "menu"})
        once = snapshot(store, target_id)

        provisioner.provision(target_id, enabled_sections={"hero", "menu"})
        assert snapshot(store, target_id) == once

    def test_rerun_does_not_duplicate_rows(self, provisioner, store, template_website, target_id):
        provisioner.provision(target_id)
        provisioner.provision(target_id)

        assert len(store.select("menu_items", {"website_id": target_id})) == 3
        assert len(store.select("website_sections", {"website_id": target_id})) == len(SECTION_NAMES)


class TestSectionPolicy:
    def test_allowlist_overrides_source_flags(self, provisioner, recording_store, template_website, target_id):
        provisioner.provision(target_id, enabled_sections={"hero", "menu"})

        gate = SectionGate(recording_store)
        assert gate.is_enabled(target_id, "hero") is True
        assert gate.is_enabled(target_id, "menu") is True
        assert gate.is_enabled(target_id, "about") is False
        assert gate.is_enabled(target_id, "team") is False
        assert gate.list_enabled(target_id) == ["hero", "menu"]

    def test_default_policy_disables_special_offers(self, provisioner, store, template_website, target_id):
        assert flags(store, template_website)["specialOffers"] is True

        provisioner.provision(target_id)

        target_flags = flags(store, target_id)
        assert target_flags["specialOffers"] is False
        assert target_flags["hero"] is True
        assert set(target_flags) == set(SECTION_NAMES)

    def test_source_display_order_is_kept(self, provisioner, store, template_website, target_id):
        provisioner.provision(target_id)

        rows = store.select("website_sections", {"website_id": target_id}, order_by="display_order")
        assert [r["section_name"] for r in rows][:3] == ["hero", "about", "menu"]

    def test_tied_source_orders_become_distinct(self, provisioner, store, website_factory, target_id):
        source_id = website_factory("ties")
        store.insert("website_sections", [
            {"website_id": source_id, "section_name": name, "is_enabled": True, "display_order": 0}
            for name in ("faq", "hero", "contact")
        ])

        provisioner.provision(target_id, source_id=source_id)

        rows = store.select("website_sections", {"website_id": target_id}, order_by="display_order")
        assert [r["display_order"] for r in rows] == list(range(len(SECTION_NAMES)))
        assert [r["section_name"] for r in rows][:3] == ["faq", "hero", "contact"]
        assert SectionGate(store).list_enabled(target_id)[:3] == ["faq", "hero", "contact"]

    def test_unknown_allowlist_names_are_rejected_before_writing(
        self, provisioner, recording_store, template_website, target_id
    ):
        with pytest.raises(InvariantViolation):
            provisioner.provision(target_id, enabled_sections={"hero", "blog"})
        assert recording_store.calls == []


class TestFailures:
    def test_missing_template(self, provisioner, target_id):
        with pytest.raises(TemplateNotFound):
            provisioner.provision(target_id)

    def test_inactive_template_is_not_used(self, provisioner, website_factory, target_id):
        website_factory("golden-crumb", is_active=False)
        with pytest.raises(TemplateNotFound):
            provisioner.provision(target_id)

    def test_unknown_source(self, provisioner, target_id):
        with pytest.raises(ProvisionError, match="Source website"):
            provisioner.provision(target_id, source_id="does-not-exist")

    def test_self_copy_is_rejected(self, provisioner, template_website):
        with pytest.raises(ProvisionError):
            provisioner.provision(template_website, source_id=template_website)

    def test_step_failure_names_table_and_operation(
        self, provisioner, recording_store, template_website, target_id
    ):
        recording_store.fail_on.add(("insert", "menu_items"))

        with pytest.raises(ProvisionStepFailure) as excinfo:
            provisioner.provision(target_id)

        assert excinfo.value.table == "menu_items"
        assert excinfo.value.operation == "insert"
        assert str(excinfo.value) == "Provisioning failed at insert on menu_items: injected failure"
        assert isinstance(excinfo.value.__cause__, StoreError)
        assert recording_store.count("insert", "faq_categories") == 0

    def test_retry_after_failure_completes(self, provisioner, recording_store, store, template_website, target_id):
        recording_store.fail_on.add(("delete", "products"))
        with pytest.raises(ProvisionStepFailure):
            provisioner.provision(target_id)
        (website,) = store.select("websites", {"id": target_id})
        assert website["provisioning_status"] == "provisioning"

        recording_store.fail_on.clear()
        report = provisioner.provision(target_id)
        assert report.status == "provisioned"
        assert len(store.select("menu_items", {"website_id": target_id})) == 3
