from .cache import MemoryCache
from .identifier import identify_tenant
from .resolver import ResolvedWebsite, TenantResolver
from .sections import SectionGate

__all__ = [
    "MemoryCache",
    "identify_tenant",
    "ResolvedWebsite",
    "TenantResolver",
    "SectionGate",
]
