# sitecms/schemas/auth.py
from pydantic import StrictStr

from .base import ApiModel


class AuthRequest(ApiModel):
    password: StrictStr
