"""
Section gate: which page regions a website shows.

Visibility is cosmetic, not security-bearing, so the gate fails open. A
missing flag row means "enabled" (sections introduced after a website was
created must not silently vanish), and a store error is logged and also
answered with "enabled". Cached answers live until ``invalidate`` is called
by the admin save path; there is no passive expiry.
"""
import logging
from typing import Dict, List, Mapping, Optional

from sitebuilder.domain.errors import SectionLookupFailure
from sitebuilder.domain.invariants.section_flags import (
    assert_known_sections,
    assert_one_flag_per_section,
)
from sitebuilder.domain.sections import SECTION_NAMES
from sitebuilder.store.base import Row, Store, StoreError
from .cache import MISSING, MemoryCache

logger = logging.getLogger(__name__)

TABLE = "website_sections"


class SectionGate:
    def __init__(self, store: Store, cache: Optional[MemoryCache] = None):
        self.store = store
        self.cache = cache if cache is not None else MemoryCache()

    @staticmethod
    def _cache_key(website_id: str, section_name: str) -> str:
        return f"{website_id}:{section_name}"

    def is_enabled(self, website_id: str, section_name: str) -> bool:
        key = self._cache_key(website_id, section_name)
        cached = self.cache.get(key)
        if cached is not MISSING:
            return cached

        try:
            row = self.store.select_one(
                TABLE,
                {"website_id": website_id, "section_name": section_name},
                columns=("is_enabled",),
            )
        except StoreError as exc:
            logger.warning("%s; defaulting to enabled", SectionLookupFailure(website_id, section_name, exc))
            return True

        enabled = True if row is None or row["is_enabled"] is None else bool(row["is_enabled"])
        self.cache.set(key, enabled)
        return enabled

    def list_enabled(self, website_id: str) -> List[str]:
        """
        Enabled section names in display order.

        Rows are ordered by ``display_order`` with insertion time breaking
        ties. Known sections without a row count as enabled and follow in
        their default order.
        """
        try:
            rows = self.store.select(
                TABLE,
                {"website_id": website_id},
                order_by=("display_order", "created_at"),
                columns=("section_name", "is_enabled"),
            )
        except StoreError as exc:
            logger.warning("%s; defaulting to every section", SectionLookupFailure(website_id, None, exc))
            return list(SECTION_NAMES)

        seen = {row["section_name"] for row in rows}
        enabled = [row["section_name"] for row in rows if row["is_enabled"] is not False]
        enabled.extend(name for name in SECTION_NAMES if name not in seen)
        return enabled

    def invalidate(self, website_id: Optional[str] = None) -> int:
        if website_id is None:
            return self.cache.clear()

        prefix = f"{website_id}:"
        return self.cache.clear(lambda key: key.startswith(prefix))

    # -------------------------------------------------
    # Admin paths
    # -------------------------------------------------

    def ensure_flags(self, website_id: str) -> List[Row]:
        """
        Return every flag row for a website, creating enabled rows for known
        sections that have none yet.
        """
        rows = self.store.select(TABLE, {"website_id": website_id}, order_by=("display_order", "created_at"))
        assert_one_flag_per_section(rows)

        existing = {row["section_name"] for row in rows}
        missing = [name for name in SECTION_NAMES if name not in existing]
        if not missing:
            return rows

        created = self.store.insert(TABLE, [
            {
                "website_id": website_id,
                "section_name": name,
                "is_enabled": True,
                "display_order": len(rows) + index,
                "custom_config": {},
            }
            for index, name in enumerate(missing)
        ])
        logger.info("Created %d missing section flags for website %s", len(created), website_id)
        return rows + created

    def update_flags(self, website_id: str, flags: Mapping[str, bool]) -> Dict[str, bool]:
        """Persist ``{section_name: enabled}`` and drop the website's cached answers."""
        assert_known_sections(flags)

        rows = self.ensure_flags(website_id)
        by_name = {row["section_name"]: row for row in rows}

        changed: Dict[str, bool] = {}
        for name, enabled in flags.items():
            row = by_name[name]
            if bool(row["is_enabled"]) == bool(enabled):
                continue
            self.store.update(TABLE, row["id"], {"is_enabled": bool(enabled)})
            changed[name] = bool(enabled)

        self.invalidate(website_id)
        return changed
