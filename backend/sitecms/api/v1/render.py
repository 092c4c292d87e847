from flask import jsonify, request
from sitecms.application.rendering import render_menu_item, render_path
from sitecms.extensions import get_store
from sitecms.normalizers.render import normalize_render
from . import v1_bp


@v1_bp.route("/render", methods=["GET"])
def render():
    path = request.args.get("path", "/")
    outcome, buttons = render_path(store=get_store(), path=path)

    return jsonify(normalize_render(outcome, buttons))


@v1_bp.route("/render/menu/<int:item_id>", methods=["GET"])
def render_menu_target(item_id):
    rendered = render_menu_item(store=get_store(), item_id=item_id)
    if rendered is None:
        return jsonify({"message": "Menu item not found"}), 404

    outcome, buttons = rendered
    return jsonify(normalize_render(outcome, buttons))
