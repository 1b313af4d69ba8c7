from flask import current_app, jsonify, request
from flask_jwt_extended import get_jwt_identity, jwt_required

from sitebuilder.domain.errors import ProvisionError, ProvisionStepFailure
from sitebuilder.extensions import db
from sitebuilder.models.website import Website
from sitebuilder.utils.audit import log_action
from sitebuilder.utils.decorators import roles_required
from . import v1_bp


def _get_website_or_404(website_id):
    return db.get_or_404(Website, website_id, description="Website not found")


@v1_bp.route("/admin/websites/<website_id>/sections", methods=["GET"])
@jwt_required()
@roles_required("admin")
def list_section_flags(website_id):
    _get_website_or_404(website_id)
    gate = current_app.extensions["section_gate"]

    rows = gate.ensure_flags(website_id)
    return jsonify({
        "items": [
            {
                "id": row["id"],
                "section_name": row["section_name"],
                "is_enabled": row["is_enabled"],
                "display_order": row["display_order"],
            }
            for row in sorted(rows, key=lambda r: r["display_order"])
        ]
    })


@v1_bp.route("/admin/websites/<website_id>/sections", methods=["PUT"])
@jwt_required()
@roles_required("admin")
def update_section_flags(website_id):
    _get_website_or_404(website_id)
    data = request.get_json(silent=True) or {}
    flags = data.get("sections")

    if not isinstance(flags, dict) or not all(isinstance(v, bool) for v in flags.values()):
        return jsonify({"error": "'sections' must map section names to booleans"}), 400

    gate = current_app.extensions["section_gate"]
    changed = gate.update_flags(website_id, flags)

    log_action(
        website_id=website_id,
        action="website.sections_update",
        entity_type="website",
        entity_id=website_id,
        actor_id=get_jwt_identity(),
        payload={"changed": changed},
    )

    return jsonify({"changed": changed})


@v1_bp.route("/admin/websites/<website_id>/provision", methods=["POST"])
@jwt_required()
@roles_required("admin")
def provision_website(website_id):
    _get_website_or_404(website_id)
    data = request.get_json(silent=True) or {}

    source_id = data.get("source_website_id")
    enabled_sections = data.get("enabled_sections")
    if enabled_sections is not None and (
        not isinstance(enabled_sections, list)
        or not all(isinstance(name, str) for name in enabled_sections)
    ):
        return jsonify({"error": "'enabled_sections' must be a list of section names"}), 400
    if source_id is not None and not isinstance(source_id, str):
        return jsonify({"error": "'source_website_id' must be a string"}), 400

    provisioner = current_app.extensions["template_provisioner"]
    actor_id = get_jwt_identity()

    try:
        report = provisioner.provision(
            website_id,
            source_id=source_id,
            enabled_sections=enabled_sections,
        )
    except ProvisionError as exc:
        details = exc.to_dict() if isinstance(exc, ProvisionStepFailure) else {"cause": str(exc)}
        log_action(
            website_id=website_id,
            action="website.provision_failed",
            entity_type="website",
            entity_id=website_id,
            actor_id=actor_id,
            payload=details,
        )
        raise
    finally:
        # Flags may have been replaced even when a later step failed
        current_app.extensions["section_gate"].invalidate(website_id)

    log_action(
        website_id=website_id,
        action="website.provision",
        entity_type="website",
        entity_id=website_id,
        actor_id=actor_id,
        payload={"source_id": report.source_id, "rows": report.rows},
    )

    return jsonify(report.to_dict()), 200
