import logging
from dataclasses import dataclass
from typing import Optional

from sitebuilder.domain.errors import TenantInactive, TenantNotFound
from sitebuilder.store.base import Store
from .cache import MISSING, MemoryCache

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 5.0
WEBSITE_COLUMNS = ("id", "subdomain", "site_title", "is_active")


@dataclass(frozen=True)
class ResolvedWebsite:
    """The website a request belongs to. Safe to share between requests."""

    id: str
    subdomain: str
    site_title: str
    is_active: bool


class TenantResolver:
    """
    Maps a website key onto a website, honouring visibility.

    Anonymous callers only see active websites; authenticated callers (admins
    previewing a site) also see inactive ones. Successful resolutions are
    cached for a few seconds; activation changes are rare, so a short window
    of staleness is accepted and there is no invalidation API.
    """

    def __init__(self, store: Store, cache: Optional[MemoryCache] = None, ttl: float = DEFAULT_TTL_SECONDS):
        self.store = store
        self.cache = cache if cache is not None else MemoryCache(ttl=ttl)

    def resolve(self, key: Optional[str], authenticated: bool = False) -> str:
        return self.resolve_website(key, authenticated).id

    def resolve_website(self, key: Optional[str], authenticated: bool = False) -> ResolvedWebsite:
        if not key:
            raise TenantNotFound(key)

        cache_key = (key, bool(authenticated))
        cached = self.cache.get(cache_key)
        if cached is not MISSING:
            return cached

        filters = {"subdomain": key}
        if not authenticated:
            filters["is_active"] = True

        row = self.store.select_one("websites", filters, columns=WEBSITE_COLUMNS)
        if row is None:
            raise self._miss(key, authenticated)

        website = ResolvedWebsite(
            id=row["id"],
            subdomain=row["subdomain"],
            site_title=row["site_title"],
            is_active=bool(row["is_active"]),
        )
        self.cache.set(cache_key, website)
        return website

    def _miss(self, key: str, authenticated: bool) -> Exception:
        if authenticated:
            return TenantNotFound(key)

        # Only tells "hidden" apart from "absent"; no other field is read.
        hidden = self.store.select_one("websites", {"subdomain": key}, columns=("id",))
        if hidden is not None:
            logger.info("Website %r exists but is inactive", key)
            return TenantInactive(key)

        logger.debug("No website for key %r", key)
        return TenantNotFound(key)
