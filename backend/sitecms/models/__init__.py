from .page import Page
from .menu_item import MenuItem
from .custom_button import CustomButton
from .site_setting import SiteSetting
from .user import User

__all__ = ["Page", "MenuItem", "CustomButton", "SiteSetting", "User"]
