# app/schemas/user.py
from pydantic import BaseModel


class CurrentUserOut(BaseModel):
    username: str
    roles: list[str]
