from flask import current_app, g, request
from flask_jwt_extended import get_jwt_identity, verify_jwt_in_request
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError

from sitebuilder.tenancy import identify_tenant

# Only the public site API is tenant scoped; admin routes address websites by id.
SITE_PREFIX = "/api/v1/site"


def _caller_is_authenticated() -> bool:
    """A valid JWT lets the caller preview inactive websites."""
    try:
        verify_jwt_in_request(optional=True)
    except (JWTExtendedException, PyJWTError) as exc:
        current_app.logger.debug("Ignoring invalid token on site request: %s", exc)
        return False
    return get_jwt_identity() is not None


def tenant_middleware(app):
    @app.before_request
    def load_website():
        if not request.path.startswith(SITE_PREFIX):
            return None

        key = identify_tenant(request.host, request.args)
        resolver = current_app.extensions["tenant_resolver"]

        # TenantNotFound / TenantInactive are rendered by the error handlers
        g.current_website = resolver.resolve_website(key, authenticated=_caller_is_authenticated())
        return None
