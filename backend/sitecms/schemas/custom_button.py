# sitecms/schemas/custom_button.py
from typing import Annotated, Literal, Optional, Union

from pydantic import EmailStr, Field, TypeAdapter

from .base import SLUG_REGEX, ApiModel
from .targets import AbsoluteUrl, SlugLink

ButtonType = Literal["internal", "external", "iframe", "email"]
ButtonStyle = Literal["primary", "secondary", "outline", "ghost"]
ButtonSize = Literal["default", "sm", "lg"]


class _ButtonBase(ApiModel):
    text: str = Field(min_length=1)
    page_slug: str = Field(pattern=SLUG_REGEX)
    style: ButtonStyle = "primary"
    size: ButtonSize = "default"
    open_in_new_tab: bool = True
    # accepted for compatibility, always recomputed from the target
    url: Optional[str] = None


class InternalButton(_ButtonBase):
    type: Literal["internal"]
    internal_link: SlugLink
    external_url: None = None
    email: None = None


class ExternalButton(_ButtonBase):
    type: Literal["external"]
    external_url: AbsoluteUrl
    internal_link: None = None
    email: None = None


class IframeButton(_ButtonBase):
    type: Literal["iframe"]
    external_url: AbsoluteUrl
    internal_link: None = None
    email: None = None


class EmailButton(_ButtonBase):
    type: Literal["email"]
    email: EmailStr
    internal_link: None = None
    external_url: None = None


CustomButtonCreate = Annotated[
    Union[InternalButton, ExternalButton, IframeButton, EmailButton],
    Field(discriminator="type"),
]

custom_button_adapter = TypeAdapter(CustomButtonCreate)


class CustomButtonUpdate(ApiModel):
    text: str = Field(default=None, min_length=1)
    type: ButtonType = None
    page_slug: str = Field(default=None, pattern=SLUG_REGEX)
    style: ButtonStyle = None
    size: ButtonSize = None
    open_in_new_tab: bool = None
    url: Optional[str] = None
    internal_link: Optional[str] = None
    external_url: Optional[str] = None
    email: Optional[str] = None
