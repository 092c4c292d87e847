# sitecms/schemas/page.py
from pydantic import Field

from .base import SLUG_REGEX, ApiModel


class PageCreate(ApiModel):
    title: str = Field(min_length=1)
    slug: str = Field(pattern=SLUG_REGEX)
    content: str


class PageUpdate(ApiModel):
    # Partial update: unset fields are left alone, explicit nulls are rejected
    title: str = Field(default=None, min_length=1)
    slug: str = Field(default=None, pattern=SLUG_REGEX)
    content: str = None
