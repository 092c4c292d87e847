from flask import jsonify, request
from sitecms.application import settings as setting_service
from sitecms.application.exceptions import ValidationFailed
from sitecms.extensions import get_store
from sitecms.normalizers.setting import normalize_setting
from . import v1_bp


@v1_bp.route("/settings", methods=["GET"])
def list_settings():
    settings = setting_service.list_settings(store=get_store())
    return jsonify([normalize_setting(s) for s in settings])


@v1_bp.route("/settings/<name>", methods=["GET"])
def get_setting(name):
    setting = setting_service.get_setting(store=get_store(), name=name)
    if setting is None:
        return jsonify({"message": "Setting not found"}), 404

    return jsonify(normalize_setting(setting))


@v1_bp.route("/settings/<name>", methods=["PUT"])
def save_setting(name):
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or "value" not in data:
        raise ValidationFailed.for_field(
            setting_service.INVALID_SETTING, "value", "Field required", "missing"
        )

    setting = setting_service.save_setting(store=get_store(), name=name, value=data["value"])
    return jsonify(normalize_setting(setting)), 200


@v1_bp.route("/settings/<name>", methods=["DELETE"])
def delete_setting(name):
    if not setting_service.delete_setting(store=get_store(), name=name):
        return jsonify({"message": "Setting not found"}), 404

    return "", 204
