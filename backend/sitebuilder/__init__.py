from flask import Flask
from .config import config_by_name
from .extensions import db, migrate, jwt
from .api.v1 import v1_bp
from .middleware.tenant_middleware import tenant_middleware
from .errors import register_error_handlers
from .logging_config import configure_logging
from .store import SqlAlchemyStore
from .tenancy import MemoryCache, SectionGate, TenantResolver
from .provisioning import TemplateProvisioner
from . import models  # noqa: F401  registers every table on db.metadata


def create_app(config_name: str = "development", config_overrides: dict | None = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    if config_overrides:
        app.config.update(config_overrides)

    configure_logging(app)

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)

    # -------------------------------------------------
    # Tenancy core (process-wide caches live on the app)
    # -------------------------------------------------
    store = SqlAlchemyStore()
    app.extensions["tenant_resolver"] = TenantResolver(
        store,
        cache=MemoryCache(ttl=app.config["TENANT_CACHE_TTL"]),
    )
    app.extensions["section_gate"] = SectionGate(store, cache=MemoryCache())
    app.extensions["template_provisioner"] = TemplateProvisioner(
        store,
        template_subdomain=app.config["DEFAULT_TEMPLATE_SUBDOMAIN"],
    )

    # -------------------------------------------------
    # Middleware
    # -------------------------------------------------
    tenant_middleware(app)

    # -------------------------------------------------
    # API Blueprints
    # -------------------------------------------------
    app.register_blueprint(v1_bp, url_prefix="/api/v1")
    register_error_handlers(app)

    return app
