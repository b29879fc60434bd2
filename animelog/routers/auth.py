from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from animelog.db import get_db
from animelog.schemas.user import UserCreate, UserLogin, UserResponse, Token
from animelog.services.user_service import UserService
from animelog.core.auth import get_current_user, get_current_token, decode_access_token
from animelog.models.user import User
from animelog.routers.common import handle_exception

router = APIRouter(prefix="/auth", tags=["authentication"])

@router.post("/register", response_model=Token, status_code=status.HTTP_201_CREATED)
def register(user_data: UserCreate, db: Session = Depends(get_db)):
    """Register a new user and sign them in"""
    try:
        return UserService(db).register(user_data)
    except Exception as e:
        raise handle_exception(e)

@router.post("/login", response_model=Token)
def login(user_credentials: UserLogin, db: Session = Depends(get_db)):
    """Login user and return access token"""
    try:
        return UserService(db).login(user_credentials)
    except Exception as e:
        raise handle_exception(e)

@router.post("/logout")
def logout(
    current_user: User = Depends(get_current_user),
    token: Optional[str] = Depends(get_current_token),
    db: Session = Depends(get_db)
):
    """End the session behind the access token"""
    payload = decode_access_token(token) or {}
    try:
        UserService(db).logout(payload.get("sid", ""))
    except Exception as e:
        raise handle_exception(e)
    return {"message": "Logged out"}

@router.get("/me", response_model=UserResponse)
def get_current_user_info(current_user: User = Depends(get_current_user)):
    """Get current user information"""
    return current_user

@router.delete("/me", status_code=status.HTTP_204_NO_CONTENT)
def delete_current_user(current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """Delete the account and everything it owns"""
    try:
        UserService(db).delete_user(current_user.id)
    except Exception as e:
        raise handle_exception(e)
