from typing import Optional
from sitebuilder.extensions import db
from sitebuilder.models.audit_log import AuditLog
from sitebuilder.utils.transaction import transactional

def log_action(
    *,
    website_id: str,
    action: str,
    entity_type: str,
    entity_id: Optional[str],
    actor_id: Optional[str] = None,
    payload: dict | None = None
) -> AuditLog:
    log = AuditLog()

    log.website_id = website_id
    log.actor_id = actor_id
    log.action = action
    log.entity_type = entity_type
    log.entity_id = entity_id or website_id
    log.payload = payload or {}

    with transactional():
        db.session.add(log)

    return log
