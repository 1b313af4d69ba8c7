from flask import current_app, g, jsonify
from sitebuilder.domain.sections import is_known_section
from . import v1_bp


@v1_bp.route("/site", methods=["GET"])
def get_site():
    website = g.current_website
    gate = current_app.extensions["section_gate"]

    return jsonify({
        "id": website.id,
        "subdomain": website.subdomain,
        "site_title": website.site_title,
        "is_active": website.is_active,
        "sections": gate.list_enabled(website.id),
    })


@v1_bp.route("/site/sections/<section_name>", methods=["GET"])
def get_section_visibility(section_name):
    if not is_known_section(section_name):
        return jsonify({"error": f"Unknown section '{section_name}'"}), 404

    gate = current_app.extensions["section_gate"]
    return jsonify({
        "section": section_name,
        "enabled": gate.is_enabled(g.current_website.id, section_name),
    })
