from flask import jsonify, request
from sitecms.application import pages as page_service
from sitecms.extensions import get_store
from sitecms.normalizers.page import normalize_page
from . import v1_bp


@v1_bp.route("/pages", methods=["GET"])
def list_pages():
    pages = page_service.list_pages(store=get_store())
    return jsonify([normalize_page(p) for p in pages])


@v1_bp.route("/pages/<slug>", methods=["GET"])
def get_page(slug):
    page = page_service.get_page_by_slug(store=get_store(), slug=slug)
    if page is None:
        return jsonify({"message": "Page not found"}), 404

    return jsonify(normalize_page(page))


@v1_bp.route("/pages/id/<int:page_id>", methods=["GET"])
def get_page_by_id(page_id):
    page = page_service.get_page(store=get_store(), page_id=page_id)
    if page is None:
        return jsonify({"message": "Page not found"}), 404

    return jsonify(normalize_page(page))


@v1_bp.route("/pages", methods=["POST"])
def create_page():
    data = request.get_json(silent=True)
    page = page_service.create_page(store=get_store(), data=data)

    return jsonify(normalize_page(page)), 201


@v1_bp.route("/pages/<int:page_id>", methods=["PUT"])
def update_page(page_id):
    data = request.get_json(silent=True)
    page = page_service.update_page(store=get_store(), page_id=page_id, data=data)
    if page is None:
        return jsonify({"message": "Page not found"}), 404

    return jsonify(normalize_page(page)), 200


@v1_bp.route("/pages/<int:page_id>", methods=["DELETE"])
def delete_page(page_id):
    if not page_service.delete_page(store=get_store(), page_id=page_id):
        return jsonify({"message": "Page not found"}), 404

    return "", 204
