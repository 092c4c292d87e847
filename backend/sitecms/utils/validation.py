from typing import Any, Dict, List

from pydantic import BaseModel, TypeAdapter, ValidationError

from sitecms.application.exceptions import ValidationFailed


def format_errors(exc: ValidationError) -> List[Dict[str, Any]]:
    return [
        {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
        for error in exc.errors(include_url=False)
    ]


def validate(schema, data: Any, *, message: str):
    """
    Validate ``data`` against a pydantic model or TypeAdapter.

    Raises ValidationFailed (400) with pydantic's per-field errors.
    """
    try:
        if isinstance(schema, TypeAdapter):
            return schema.validate_python(data)
        if isinstance(schema, type) and issubclass(schema, BaseModel):
            return schema.model_validate(data)
        return TypeAdapter(schema).validate_python(data)
    except ValidationError as exc:
        raise ValidationFailed(message, format_errors(exc)) from exc
