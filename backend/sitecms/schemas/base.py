# sitecms/schemas/base.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Same pattern as sitecms.domain.invariants.page.SLUG_PATTERN
SLUG_REGEX = r"^[a-z0-9-]+$"


class ApiModel(BaseModel):
    """JSON bodies use camelCase keys; Python code uses field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )
