# sitecms/schemas/menu_item.py
from typing import Annotated, List, Literal, Optional, Union

from pydantic import Field, StrictInt, TypeAdapter

from .base import ApiModel
from .targets import LooseUrl, SlugLink

MenuItemType = Literal["internal", "external", "iframe"]


class _MenuItemBase(ApiModel):
    text: str = Field(min_length=1)
    # accepted on create for compatibility; new items are always ranked last
    order: Optional[StrictInt] = None


class InternalMenuItem(_MenuItemBase):
    type: Literal["internal"]
    internal_link: SlugLink
    external_url: None = None


class ExternalMenuItem(_MenuItemBase):
    type: Literal["external"]
    external_url: LooseUrl
    internal_link: None = None


class IframeMenuItem(_MenuItemBase):
    type: Literal["iframe"]
    external_url: LooseUrl
    internal_link: None = None


MenuItemCreate = Annotated[
    Union[InternalMenuItem, ExternalMenuItem, IframeMenuItem],
    Field(discriminator="type"),
]

menu_item_adapter = TypeAdapter(MenuItemCreate)


class MenuItemUpdate(ApiModel):
    # order is only changed through reorder
    text: str = Field(default=None, min_length=1)
    type: MenuItemType = None
    internal_link: Optional[str] = None
    external_url: Optional[str] = None


class MenuReorder(ApiModel):
    item_ids: List[StrictInt]
