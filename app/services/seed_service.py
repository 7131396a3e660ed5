# app/services/seed_service.py
"""
Startup seeding of the two fixed roles and the two default accounts.
Idempotent: each role and user is inserted only when missing, so restarts
never create duplicates and never reset a changed password.
"""

from sqlalchemy.orm import Session
from app.auth.basic_auth import ROLE_ADMIN, ROLE_USER
from app.auth.passwords_handler import hash_password
from app.config import settings
from app.models.user import Role, User
from app.repositories.user_repository import RoleRepository, UserRepository
from app.utils.logger import get_logger

logger = get_logger(__name__)


def ensure_role(db: Session, name: str) -> Role:
    roles = RoleRepository(db)
    role = roles.find_by_name(name)
    if role is None:
        role = roles.save(Role(name=name))
        logger.info(f"Seeded role {name}")
    return role


def ensure_user(db: Session, username: str, password: str, role: Role) -> User:
    users = UserRepository(db)
    user = users.find_by_username(username)
    if user is None:
        user = users.save(User(username=username, password=hash_password(password), roles=[role]))
        logger.info(f"Seeded user '{username}' with {role.name}")
    return user


def seed_default_users(db: Session) -> None:
    admin_role = ensure_role(db, ROLE_ADMIN)
    user_role = ensure_role(db, ROLE_USER)
    ensure_user(db, settings.ADMIN_USERNAME, settings.ADMIN_PASSWORD, admin_role)
    ensure_user(db, settings.USER_USERNAME, settings.USER_PASSWORD, user_role)
