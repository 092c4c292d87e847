from typing import Any, Dict, List, Optional


class ValidationFailed(Exception):
    """Input rejected before any write; carries field-level detail."""

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []

    @classmethod
    def for_field(cls, message: str, field: str, msg: str, error_type: str = "value_error"):
        return cls(message, [{"loc": [field], "msg": msg, "type": error_type}])
