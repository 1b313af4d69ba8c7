from flask import current_app, jsonify
from sitebuilder.domain.errors import (
    ProvisionError,
    ProvisionStepFailure,
    TemplateNotFound,
    TenantInactive,
    TenantNotFound,
)
from sitebuilder.domain.invariants.exceptions import InvariantViolation
from sitebuilder.store.base import StoreError


def _error(name, message, status, **extra):
    response = jsonify({"error": name, "message": message, **extra})
    response.status_code = status
    return response


def register_error_handlers(app):
    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        return _error("InvariantViolation", str(error), 400)

    @app.errorhandler(TenantNotFound)
    def handle_tenant_not_found(error):
        return _error("TenantNotFound", "Site not found", 404)

    @app.errorhandler(TenantInactive)
    def handle_tenant_inactive(error):
        return _error("TenantInactive", "This site is currently unavailable", 403)

    @app.errorhandler(TemplateNotFound)
    def handle_template_not_found(error):
        return _error("TemplateNotFound", str(error), 404)

    @app.errorhandler(ProvisionStepFailure)
    def handle_provision_step_failure(error):
        return _error("ProvisionStepFailure", str(error), 502, **error.to_dict())

    @app.errorhandler(ProvisionError)
    def handle_provision_error(error):
        return _error("ProvisionError", str(error), 409)

    @app.errorhandler(StoreError)
    def handle_store_error(error):
        current_app.logger.error("Store unavailable: %s", error)
        return _error("StoreUnavailable", "Storage is temporarily unavailable", 503)
