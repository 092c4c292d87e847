# sitecms/schemas/targets.py
import re
from typing import Annotated

from pydantic import AfterValidator, Field

from .base import SLUG_REGEX

_ABSOLUTE_URL_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://\S+$")


def _require_absolute_url(value: str) -> str:
    if not _ABSOLUTE_URL_RE.match(value):
        raise ValueError("must be an absolute URL, e.g. https://example.com")
    return value


def _strip(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("must not be blank")
    return value


SlugLink = Annotated[str, Field(pattern=SLUG_REGEX)]

# Menu items accept host-only URLs; a scheme is added when the link is resolved
LooseUrl = Annotated[str, AfterValidator(_strip)]

AbsoluteUrl = Annotated[str, AfterValidator(_strip), AfterValidator(_require_absolute_url)]
