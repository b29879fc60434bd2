import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from animelog.schemas.user import UserCreate, UserLogin, Token
from animelog.core.auth import get_password_hash, verify_password, create_access_token
from animelog.core.config import get_settings
from animelog.core.exceptions import (
    UserNotFoundException, UserAlreadyExistsException,
    InvalidCredentialsException, ValidationException
)
from animelog.repositories.user_repository import UserRepository, AuthSessionRepository
from animelog.models.user import User

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6

class UserService:
    """Registration, sign-in and account management"""
    
    def __init__(self, db: Session):
        self.db = db
        self.settings = get_settings()
        self.user_repository = UserRepository(db)
        self.session_repository = AuthSessionRepository(db)
    
    def get_user_by_email(self, email: str) -> Optional[User]:
        """Get user by email"""
        return self.user_repository.get_by_email(email)
    
    def create_user(self, user_data: UserCreate) -> User:
        """Create a new user"""
        if not user_data.name or not user_data.email or not user_data.password:
            raise ValidationException("All fields are required")
        
        if len(user_data.password) < MIN_PASSWORD_LENGTH:
            raise ValidationException(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        
        if self.user_repository.email_exists(user_data.email):
            raise UserAlreadyExistsException("Email already in use")
        
        try:
            logger.info(f"Creating user with email: {user_data.email}")
            user = self.user_repository.create_user(
                name=user_data.name,
                email=user_data.email,
                hashed_password=get_password_hash(user_data.password),
            )
        except IntegrityError:
            self.db.rollback()
            raise UserAlreadyExistsException("Email already in use")
        
        logger.info(f"User created successfully with ID: {user.id}")
        return user
    
    def register(self, user_data: UserCreate) -> Token:
        """Create the account and sign it in right away"""
        self.create_user(user_data)
        return self.login(UserLogin(email=user_data.email, password=user_data.password))
    
    def authenticate_user(self, email: str, password: str) -> Optional[User]:
        """Authenticate user with email and password"""
        user = self.get_user_by_email(email)
        if not user:
            return None
        
        if not verify_password(password, user.password):
            return None
        
        return user
    
    def login(self, credentials: UserLogin) -> Token:
        """Open a session and issue an access token for it"""
        if not credentials.email or not credentials.password:
            raise ValidationException("All fields are required")
        
        user = self.authenticate_user(credentials.email, credentials.password)
        if not user:
            raise InvalidCredentialsException("Invalid email or password")
        
        expires_delta = timedelta(minutes=self.settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        session_token = secrets.token_urlsafe(32)
        self.session_repository.create_session(
            user_id=user.id,
            session_token=session_token,
            expires=datetime.now(timezone.utc) + expires_delta,
        )
        access_token = create_access_token(
            data={"sub": str(user.id), "sid": session_token}, expires_delta=expires_delta
        )
        return Token(access_token=access_token, token_type="bearer")
    
    def logout(self, session_token: str) -> bool:
        return self.session_repository.delete_by_token(session_token)
    
    def delete_user(self, user_id: UUID) -> bool:
        """Delete the account together with its sessions, genres and list entries"""
        if not self.user_repository.delete(user_id):
            raise UserNotFoundException("User not found")
        logger.info(f"User {user_id} deleted")
        return True
