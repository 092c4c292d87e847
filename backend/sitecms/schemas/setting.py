# sitecms/schemas/setting.py
from typing import Any

from pydantic import Field, field_validator

from .base import ApiModel


class SettingSave(ApiModel):
    name: str = Field(min_length=1, max_length=200)
    value: Any

    @field_validator("value")
    @classmethod
    def value_not_null(cls, v: Any):
        if v is None:
            raise ValueError("value is required")
        return v
