# app/auth/user_details.py
"""
Login lookup: resolves a username to its stored credential and role names.
Consulted by the HTTP Basic dependency, never by the truck service.
"""

from dataclasses import dataclass, field
from sqlalchemy.orm import Session
from app.repositories.user_repository import UserRepository
from app.services.exceptions import UserNotFoundError


@dataclass
class UserDetails:
    username: str
    password_hash: str
    roles: set[str] = field(default_factory=set)

    def has_any_role(self, *roles: str) -> bool:
        return bool(self.roles.intersection(roles))


def load_user_by_username(db: Session, username: str) -> UserDetails:
    user = UserRepository(db).find_by_username(username)
    if user is None:
        raise UserNotFoundError(username)
    return UserDetails(
        username=user.username,
        password_hash=user.password,  # already hashed
        roles={role.name for role in user.roles},
    )
