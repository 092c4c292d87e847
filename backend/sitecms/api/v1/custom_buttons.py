from flask import jsonify, request
from sitecms.application import custom_buttons as button_service
from sitecms.extensions import get_store
from sitecms.normalizers.custom_button import normalize_custom_button
from . import v1_bp


@v1_bp.route("/custom-buttons", methods=["GET"])
def list_custom_buttons():
    buttons = button_service.list_custom_buttons(store=get_store())
    return jsonify([normalize_custom_button(b) for b in buttons])


@v1_bp.route("/custom-buttons/page/<slug>", methods=["GET"])
def list_page_buttons(slug):
    buttons = button_service.list_buttons_for_page(store=get_store(), slug=slug)
    return jsonify([normalize_custom_button(b) for b in buttons])


@v1_bp.route("/custom-buttons/<int:button_id>", methods=["GET"])
def get_custom_button(button_id):
    button = button_service.get_custom_button(store=get_store(), button_id=button_id)
    if button is None:
        return jsonify({"message": "Custom button not found"}), 404

    return jsonify(normalize_custom_button(button))


@v1_bp.route("/custom-buttons", methods=["POST"])
def create_custom_button():
    data = request.get_json(silent=True)
    button = button_service.create_custom_button(store=get_store(), data=data)

    return jsonify(normalize_custom_button(button)), 201


@v1_bp.route("/custom-buttons/<int:button_id>", methods=["PUT"])
def update_custom_button(button_id):
    data = request.get_json(silent=True)
    button = button_service.update_custom_button(store=get_store(), button_id=button_id, data=data)
    if button is None:
        return jsonify({"message": "Custom button not found"}), 404

    return jsonify(normalize_custom_button(button)), 200


@v1_bp.route("/custom-buttons/<int:button_id>", methods=["DELETE"])
def delete_custom_button(button_id):
    if not button_service.delete_custom_button(store=get_store(), button_id=button_id):
        return jsonify({"message": "Custom button not found"}), 404

    return "", 204
