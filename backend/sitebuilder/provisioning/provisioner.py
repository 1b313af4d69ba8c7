"""
Template provisioning: clone a source website's content into a target.

Steps run in order because hierarchy children need the ids of freshly
inserted parents:

1. singleton tables are upserted,
2. section flags are replaced, applying the caller's allowlist,
3. independent collections are replaced,
4. dependent hierarchies are replaced with their foreign keys remapped.

There is no cross-table rollback. Every step is idempotent (upsert or
delete-then-insert), so a failed or interrupted run is retried from the top.
Callers must not run two provisionings of the same target concurrently.
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from sitebuilder.domain.errors import ProvisionError, ProvisionStepFailure, TemplateNotFound
from sitebuilder.domain.invariants.hierarchy import assert_children_reference
from sitebuilder.domain.invariants.section_flags import assert_known_sections
from sitebuilder.domain.lifecycle.provisioning import (
    PROVISIONED,
    PROVISIONING,
    assert_provisioning_transition,
)
from sitebuilder.domain.sections import DISABLED_BY_DEFAULT, SECTION_NAMES
from sitebuilder.store.base import Row, Store, StoreError
from .tables import (
    COLLECTION_TABLES,
    HIERARCHIES,
    SECTIONS_TABLE,
    SINGLETON_TABLES,
    Hierarchy,
    content_fields,
)

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_SUBDOMAIN = "golden-crumb"


@dataclass
class ProvisionReport:
    target_id: str
    source_id: str
    status: str = PROVISIONING
    rows: Dict[str, int] = field(default_factory=dict)

    def to_dict(self):
        return {
            "target_id": self.target_id,
            "source_id": self.source_id,
            "status": self.status,
            "rows": dict(self.rows),
        }


class TemplateProvisioner:
    def __init__(self, store: Store, template_subdomain: str = DEFAULT_TEMPLATE_SUBDOMAIN):
        self.store = store
        self.template_subdomain = template_subdomain

    def template_website_id(self) -> str:
        row = self.store.select_one(
            "websites",
            {"subdomain": self.template_subdomain, "is_active": True},
            columns=("id",),
        )
        if row is None:
            raise TemplateNotFound(self.template_subdomain)
        return row["id"]

    def provision(
        self,
        target_id: str,
        source_id: Optional[str] = None,
        enabled_sections: Optional[Iterable[str]] = None,
    ) -> ProvisionReport:
        """
        Copy every content table from ``source_id`` (default: the template
        website) into ``target_id``.

        ``enabled_sections``, when given, decides each section flag on its
        own; otherwise the source flags are copied with special offers
        switched off.
        """
        allowlist = None
        if enabled_sections is not None:
            allowlist = frozenset(enabled_sections)
            assert_known_sections(allowlist)

        try:
            if source_id is None:
                source_id = self.template_website_id()
            elif self.store.select_one("websites", {"id": source_id}, columns=("id",)) is None:
                raise ProvisionError(f"Source website {source_id} not found")

            if source_id == target_id:
                raise ProvisionError("A website cannot be provisioned from itself")

            report = ProvisionReport(target_id=target_id, source_id=source_id)
            self._set_status(target_id, PROVISIONING)

            logger.info("Provisioning website %s from %s", target_id, source_id)

            for table in SINGLETON_TABLES:
                report.rows[table] = self._copy_singleton(table, source_id, target_id)

            report.rows[SECTIONS_TABLE] = self._copy_sections(source_id, target_id, allowlist)

            for table in COLLECTION_TABLES:
                report.rows[table] = self._copy_collection(table, source_id, target_id)

            for hierarchy in HIERARCHIES:
                report.rows.update(self._copy_hierarchy(hierarchy, source_id, target_id))

            self._set_status(target_id, PROVISIONED)
            report.status = PROVISIONED
        except StoreError as exc:
            logger.error(
                "Provisioning of website %s aborted at %s on %s: %s",
                target_id, exc.operation, exc.table, exc.cause,
            )
            raise ProvisionStepFailure(exc.table, exc.operation, exc.cause) from exc

        logger.info(
            "Provisioned website %s from %s (%d rows)",
            target_id, source_id, sum(report.rows.values()),
        )
        return report

    # -------------------------------------------------
    # Lifecycle
    # -------------------------------------------------

    def _set_status(self, website_id: str, status: str) -> None:
        row = self.store.select_one("websites", {"id": website_id}, columns=("provisioning_status",))
        if row is None:
            raise ProvisionError(f"Website {website_id} not found")

        assert_provisioning_transition(from_status=row["provisioning_status"], to_status=status)
        self.store.update("websites", website_id, {"provisioning_status": status})

    # -------------------------------------------------
    # Steps
    # -------------------------------------------------

    def _copy_singleton(self, table: str, source_id: str, target_id: str) -> int:
        source = self.store.select_one(table, {"website_id": source_id})
        if source is None:
            return 0

        values = content_fields(source)
        existing = self.store.select_one(table, {"website_id": target_id}, columns=("id",))
        if existing is None:
            self.store.insert(table, [dict(values, website_id=target_id)])
        else:
            self.store.update(table, existing["id"], values)
        return 1

    @staticmethod
    def _section_enabled(section_name: str, source_flag, allowlist) -> bool:
        if allowlist is not None:
            return section_name in allowlist
        if section_name in DISABLED_BY_DEFAULT:
            return False
        return source_flag is not False

    def _copy_sections(self, source_id: str, target_id: str, allowlist) -> int:
        source_rows = self.store.select(
            SECTIONS_TABLE,
            {"website_id": source_id},
            order_by=("display_order", "created_at"),
        )

        rows: List[Row] = []
        seen = set()
        for row in source_rows:
            name = row["section_name"]
            if name in seen:
                logger.warning("Duplicate section flag %r on website %s skipped", name, source_id)
                continue
            seen.add(name)
            # Renumbered in source order so the target never carries display_order ties.
            rows.append({
                "website_id": target_id,
                "section_name": name,
                "is_enabled": self._section_enabled(name, row["is_enabled"], allowlist),
                "display_order": len(rows),
                "custom_config": row.get("custom_config") or {},
            })

        # The policy must hold for every known section, not only those the source has rows for.
        for name in SECTION_NAMES:
            if name in seen:
                continue
            rows.append({
                "website_id": target_id,
                "section_name": name,
                "is_enabled": self._section_enabled(name, True, allowlist),
                "display_order": len(rows),
                "custom_config": {},
            })

        self.store.delete(SECTIONS_TABLE, {"website_id": target_id})
        return len(self.store.insert(SECTIONS_TABLE, rows))

    def _copy_collection(self, table: str, source_id: str, target_id: str) -> int:
        source_rows = self.store.select(table, {"website_id": source_id}, order_by="display_order")

        self.store.delete(table, {"website_id": target_id})
        copies = [dict(content_fields(row), website_id=target_id) for row in source_rows]
        return len(self.store.insert(table, copies))

    def _copy_hierarchy(self, hierarchy: Hierarchy, source_id: str, target_id: str) -> Dict[str, int]:
        parents = self.store.select(hierarchy.parent, {"website_id": source_id}, order_by="display_order")
        children = self.store.select(hierarchy.child, {"website_id": source_id}, order_by="display_order")

        # Children first: they reference the parents being replaced.
        self.store.delete(hierarchy.child, {"website_id": target_id})
        self.store.delete(hierarchy.parent, {"website_id": target_id})

        new_parents = self.store.insert(
            hierarchy.parent,
            [dict(content_fields(row), website_id=target_id) for row in parents],
        )
        # Inserts come back in submitted order, so ids line up pairwise.
        id_map = {old["id"]: new["id"] for old, new in zip(parents, new_parents)}

        copies: List[Row] = []
        for child in children:
            copy = dict(content_fields(child), website_id=target_id)
            old_ref = child.get(hierarchy.fk)

            if old_ref in id_map:
                copy[hierarchy.fk] = id_map[old_ref]
            elif hierarchy.nullable:
                if old_ref is not None:
                    logger.warning(
                        "%s %s points at a missing %s row; copied without it",
                        hierarchy.child, child["id"], hierarchy.parent,
                    )
                copy[hierarchy.fk] = None
            else:
                logger.warning(
                    "%s %s has no %s row on website %s; skipped",
                    hierarchy.child, child["id"], hierarchy.parent, source_id,
                )
                continue

            copies.append(copy)

        assert_children_reference(
            copies,
            set(id_map.values()),
            fk=hierarchy.fk,
            nullable=hierarchy.nullable,
        )
        inserted = self.store.insert(hierarchy.child, copies)

        return {hierarchy.parent: len(new_parents), hierarchy.child: len(inserted)}
