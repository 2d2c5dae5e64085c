"""User service layer. Owns uniqueness checks, password storage and the last-admin guard."""

import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.sql import func

from portal.errors import ConstraintError, PolicyError
from portal.models.user import User
from portal.schemas.user import UserCreate, UserOut, UserUpdate
from portal.utils.query import paginate, patch_fields
from portal.utils.security import hash_password

logger = logging.getLogger(__name__)

ADMIN = "admin"
LAST_ADMIN_DELETE = "Cannot delete the last active admin"
LAST_ADMIN_CHANGE = "Cannot demote or deactivate the last active admin"


def to_out(user: User) -> UserOut:
    return UserOut(
        id=user.id,
        username=user.username,
        email=user.email,
        password_hash="",
        role=user.role,
        is_active=bool(user.is_active),
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


def _is_active_admin(role: str, is_active: bool) -> bool:
    return role == ADMIN and bool(is_active)


def _lock_active_admin_ids(db: Session) -> set[int]:
    # FOR UPDATE serializes concurrent guards on PostgreSQL/MySQL;
    # SQLite already allows a single writer at a time.
    rows = (
        db.query(User.id)
        .filter(User.role == ADMIN, User.is_active == True)  # noqa: E712
        .with_for_update()
        .all()
    )
    return {row[0] for row in rows}


def _count_active_admins(db: Session) -> int:
    return db.query(User).filter(User.role == ADMIN, User.is_active == True).count()  # noqa: E712


def _ensure_unique(db: Session, username: Optional[str], email: Optional[str], exclude_id: Optional[int] = None):
    if username is not None:
        q = db.query(User).filter(User.username == username)
        if exclude_id is not None:
            q = q.filter(User.id != exclude_id)
        if q.first():
            raise ConstraintError("Username is already taken", field="username")
    if email is not None:
        q = db.query(User).filter(User.email == email)
        if exclude_id is not None:
            q = q.filter(User.id != exclude_id)
        if q.first():
            raise ConstraintError("Email is already registered", field="email")


def _commit_or_conflict(db: Session):
    try:
        db.commit()
    except IntegrityError:
        # A concurrent writer claimed the username or email after our check.
        db.rollback()
        raise ConstraintError("Username or email is already in use")


def create_user(db: Session, data: UserCreate) -> UserOut:
    _ensure_unique(db, data.username, data.email)
    user = User(
        username=data.username,
        email=data.email,
        password_hash=hash_password(data.password),
        role=data.role,
        is_active=True,
    )
    db.add(user)
    _commit_or_conflict(db)
    db.refresh(user)
    logger.info("[user] created id=%s role=%s", user.id, user.role)
    return to_out(user)


def get_users(db: Session, limit: Optional[int] = None, offset: Optional[int] = None) -> List[UserOut]:
    q = db.query(User).order_by(User.id.asc())
    return [to_out(user) for user in paginate(q, limit, offset).all()]


def get_user_by_id(db: Session, user_id: int) -> Optional[UserOut]:
    user = db.query(User).filter(User.id == user_id).first()
    return to_out(user) if user else None


def get_user_by_username(db: Session, username: str) -> Optional[User]:
    """Full account row including ``password_hash``; meant for authentication."""
    return db.query(User).filter(User.username == username).first()


def update_user(db: Session, user_id: int, data: UserUpdate) -> Optional[UserOut]:
    payload = patch_fields(data)
    leaving_admin = "role" in payload or "is_active" in payload
    admin_ids = _lock_active_admin_ids(db) if leaving_admin else set()

    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        db.rollback()
        return None

    try:
        _ensure_unique(db, payload.get("username"), payload.get("email"), exclude_id=user_id)
    except ConstraintError:
        db.rollback()
        raise

    next_role = payload.get("role", user.role)
    next_active = payload.get("is_active", user.is_active)
    if user.id in admin_ids and not _is_active_admin(next_role, next_active):
        if not admin_ids - {user.id}:
            db.rollback()
            logger.warning("[user] refused to demote last active admin id=%s", user_id)
            raise PolicyError(LAST_ADMIN_CHANGE)

    password = payload.pop("password", None)
    if password is not None:
        user.password_hash = hash_password(password)
    for key, value in payload.items():
        setattr(user, key, value)
    user.updated_at = func.now()
    _commit_or_conflict(db)
    db.refresh(user)
    logger.info(
        "[user] updated id=%s fields=%s",
        user_id,
        sorted(payload) + (["password"] if password is not None else []),
    )
    return to_out(user)


def delete_user(db: Session, user_id: int) -> bool:
    """Delete a user unless it would leave the site without an active admin.

    The admin rows are locked before the check, and the count is verified
    again after the delete is flushed, all inside one transaction.
    """
    admin_ids = _lock_active_admin_ids(db)
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        db.rollback()
        return False

    guarded = _is_active_admin(user.role, user.is_active)
    if guarded and not admin_ids - {user.id}:
        db.rollback()
        logger.warning("[user] refused to delete last active admin id=%s", user_id)
        raise PolicyError(LAST_ADMIN_DELETE)

    db.delete(user)
    db.flush()
    if guarded and _count_active_admins(db) == 0:
        db.rollback()
        logger.warning("[user] delete of admin id=%s rolled back, no active admin left", user_id)
        raise PolicyError(LAST_ADMIN_DELETE)
    db.commit()
    logger.info("[user] deleted id=%s", user_id)
    return True
