"""Users API router. Password hashes only leave the server through getUserByUsername."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from portal.database import get_db
from portal.schemas.common import DeleteResult
from portal.schemas.user import UserCreate, UserOut, UserUpdate, UserWithSecretOut
from portal.services import user_service

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserOut, operation_id="createUser")
def create_user(data: UserCreate, db: Session = Depends(get_db)):
    return user_service.create_user(db, data)


@router.get("", response_model=List[UserOut], operation_id="getUsers")
def get_users(
    limit: Optional[int] = Query(default=None, gt=0),
    offset: Optional[int] = Query(default=None, ge=0),
    db: Session = Depends(get_db),
):
    return user_service.get_users(db, limit, offset)


@router.get("/by-username/{username}", response_model=Optional[UserWithSecretOut], operation_id="getUserByUsername")
def get_user_by_username(username: str, db: Session = Depends(get_db)):
    return user_service.get_user_by_username(db, username)


@router.get("/{user_id}", response_model=Optional[UserOut], operation_id="getUserById")
def get_user_by_id(user_id: int, db: Session = Depends(get_db)):
    return user_service.get_user_by_id(db, user_id)


@router.put("/{user_id}", response_model=Optional[UserOut], operation_id="updateUser")
def update_user(user_id: int, data: UserUpdate, db: Session = Depends(get_db)):
    return user_service.update_user(db, user_id, data)


@router.delete("/{user_id}", response_model=DeleteResult, operation_id="deleteUser")
def delete_user(user_id: int, db: Session = Depends(get_db)):
    return DeleteResult(success=user_service.delete_user(db, user_id))
