"""
Error taxonomy for tenant resolution, section gating and provisioning.

Resolution and gate errors are recoverable at the call site (render a
"site unavailable" page, fall back to enabled). Provisioning errors are
not recovered locally and reach the administrative caller verbatim.
"""
from typing import Optional


class TenantError(Exception):
    """Base class for failures to map a request onto a website."""

    def __init__(self, key: Optional[str], message: str):
        super().__init__(message)
        self.key = key


class TenantNotFound(TenantError):
    def __init__(self, key: Optional[str]):
        super().__init__(key, f"No website matches {key!r}")


class TenantInactive(TenantError):
    """The website exists but is hidden from the current caller."""

    def __init__(self, key: Optional[str]):
        super().__init__(key, f"Website {key!r} is not currently available")


class SectionLookupFailure(Exception):
    """
    Transient store error while reading a section flag.

    Never raised to callers: the gate logs it and fails open.
    """

    def __init__(self, website_id: str, section_name: Optional[str], cause: Exception):
        super().__init__(f"Section lookup failed for {website_id}:{section_name or '*'}: {cause}")
        self.website_id = website_id
        self.section_name = section_name
        self.cause = cause


class ProvisionError(Exception):
    """Base class for provisioning failures."""


class TemplateNotFound(ProvisionError):
    def __init__(self, subdomain: str):
        super().__init__(f"Template website {subdomain!r} not found or inactive")
        self.subdomain = subdomain


class ProvisionStepFailure(ProvisionError):
    """
    A store operation failed mid-provisioning.

    Earlier steps may have completed. Every step is idempotent, so the
    whole provisioning call is safe to retry.
    """

    def __init__(self, table: str, operation: str, cause: Exception):
        super().__init__(f"Provisioning failed at {operation} on {table}: {cause}")
        self.table = table
        self.operation = operation
        self.cause = cause

    def to_dict(self):
        return {
            "table": self.table,
            "operation": self.operation,
            "cause": str(self.cause),
        }
