from flask import jsonify
from sitecms.extensions import get_store
from . import v1_bp

@v1_bp.route('/health', methods=['GET'])
def health_check():
    return jsonify({
        "status": "ok",
        "service": "sitecms",
        "storage": get_store().backend_name
    })
