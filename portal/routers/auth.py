"""Auth API router. Exchanges credentials for a bearer token."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from portal.database import get_db
from portal.middleware.auth_middleware import get_current_user
from portal.models.user import User
from portal.schemas.user import LoginRequest, TokenResponse, UserOut
from portal.services import user_service
from portal.services.auth_service import authenticate, create_access_token

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse, operation_id="login")
def login(request: LoginRequest, db: Session = Depends(get_db)):
    user = authenticate(db, request.username, request.password)
    token = create_access_token(user.id)
    return TokenResponse(access_token=token, user=user_service.to_out(user))


@router.get("/me", response_model=UserOut, operation_id="me")
def me(current_user: User = Depends(get_current_user)):
    return user_service.to_out(current_user)
