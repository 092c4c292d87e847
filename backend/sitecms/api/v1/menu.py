from flask import jsonify, request
from sitecms.application import menu as menu_service
from sitecms.extensions import get_store
from sitecms.normalizers.menu_item import normalize_menu_item, normalize_navigation_entry
from . import v1_bp


@v1_bp.route("/menu", methods=["GET"])
def list_menu_items():
    items = menu_service.list_menu_items(store=get_store())
    return jsonify([normalize_menu_item(i) for i in items])


@v1_bp.route("/menu/<int:item_id>", methods=["GET"])
def get_menu_item(item_id):
    item = menu_service.get_menu_item(store=get_store(), item_id=item_id)
    if item is None:
        return jsonify({"message": "Menu item not found"}), 404

    return jsonify(normalize_menu_item(item))


@v1_bp.route("/menu", methods=["POST"])
def create_menu_item():
    data = request.get_json(silent=True)
    item = menu_service.create_menu_item(store=get_store(), data=data)

    return jsonify(normalize_menu_item(item)), 201


@v1_bp.route("/menu/<int:item_id>", methods=["PUT"])
def update_menu_item(item_id):
    data = request.get_json(silent=True)
    item = menu_service.update_menu_item(store=get_store(), item_id=item_id, data=data)
    if item is None:
        return jsonify({"message": "Menu item not found"}), 404

    return jsonify(normalize_menu_item(item)), 200


@v1_bp.route("/menu/<int:item_id>", methods=["DELETE"])
def delete_menu_item(item_id):
    if not menu_service.delete_menu_item(store=get_store(), item_id=item_id):
        return jsonify({"message": "Menu item not found"}), 404

    return "", 204


@v1_bp.route("/menu/reorder", methods=["POST"])
def reorder_menu_items():
    data = request.get_json(silent=True)
    items = menu_service.reorder_menu_items(store=get_store(), data=data)

    return jsonify([normalize_menu_item(i) for i in items]), 200


@v1_bp.route("/navigation", methods=["GET"])
def navigation():
    entries = menu_service.navigation(store=get_store())
    return jsonify([normalize_navigation_entry(e) for e in entries])
