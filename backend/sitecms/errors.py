from flask import current_app, jsonify
from werkzeug.exceptions import HTTPException
from sitecms.application.exceptions import ValidationFailed
from sitecms.domain.invariants.exceptions import InvariantViolation
from sitecms.storage import StorageError, UniqueConstraintError

def register_error_handlers(app):
    @app.errorhandler(ValidationFailed)
    def handle_validation_failed(error):
        response = jsonify({
            "message": error.message,
            "errors": error.errors
        })
        response.status_code = 400
        return response

    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        response = jsonify({
            "error": "InvariantViolation",
            "message": str(error)
        })
        response.status_code = 400
        return response

    @app.errorhandler(UniqueConstraintError)
    def handle_unique_constraint(error):
        response = jsonify({
            "message": "Invalid data",
            "errors": [{"loc": [error.key], "msg": "Value already exists", "type": "unique"}]
        })
        response.status_code = 400
        return response

    @app.errorhandler(StorageError)
    def handle_storage_error(error):
        # details stay in the log
        current_app.logger.exception("Storage operation failed: %s", error)
        response = jsonify({"message": "Storage operation failed"})
        response.status_code = 500
        return response

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        response = jsonify({"message": error.description})
        response.status_code = error.code
        return response
