from flask import current_app, jsonify, request, session
from sitecms.application.access_gate import is_authenticated, login, logout
from sitecms.schemas.auth import AuthRequest
from sitecms.utils.validation import validate
from . import v1_bp


@v1_bp.route("/auth", methods=["POST"])
def authenticate():
    data = request.get_json(silent=True)
    payload = validate(AuthRequest, data, message="Invalid request data")

    gate = current_app.extensions["access_gate"]
    if login(gate, payload.password, session):
        return jsonify({"success": True}), 200

    return jsonify({
        "success": False,
        "message": "Incorrect password"
    }), 401


@v1_bp.route("/auth/logout", methods=["POST"])
def sign_out():
    logout(session)
    return jsonify({"success": True}), 200


@v1_bp.route("/auth/status", methods=["GET"])
def auth_status():
    return jsonify({"authenticated": is_authenticated(session)}), 200
