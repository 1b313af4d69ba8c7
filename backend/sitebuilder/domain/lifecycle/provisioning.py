from typing import Set

UNPROVISIONED = "unprovisioned"
PROVISIONING = "provisioning"
PROVISIONED = "provisioned"

# Re-running provisioning is always allowed: every step is idempotent.
# provisioning -> provisioning covers a retry after an interrupted run.
ALLOWED_PROVISIONING_TRANSITIONS: dict[str, Set[str]] = {
    UNPROVISIONED: {PROVISIONING},
    PROVISIONING: {PROVISIONING, PROVISIONED},
    PROVISIONED: {PROVISIONING},
}

def assert_provisioning_transition(*, from_status: str, to_status: str) -> None:
    """
    Guards a website's content lifecycle.
    Single source of truth for provisioning status changes.
    """
    allowed = ALLOWED_PROVISIONING_TRANSITIONS.get(from_status, set())

    if to_status not in allowed:
        raise ValueError(
            f"Illegal provisioning transition: {from_status} → {to_status}"
        )
