from datetime import datetime
from typing import Optional
from uuid import UUID
from sqlalchemy.orm import Session
from animelog.repositories.base_repository import BaseRepository
from animelog.models.user import User, AuthSession

class UserRepository(BaseRepository[User]):
    """User repository with user-specific operations"""
    
    def __init__(self, db: Session):
        super().__init__(User, db)
    
    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email"""
        return self.filter_one_by(email=email)
    
    def email_exists(self, email: str) -> bool:
        """Check if email exists"""
        return self.exists(email=email)
    
    def create_user(self, name: str, email: str, hashed_password: Optional[str]) -> User:
        """Create new user"""
        return self.create({
            "name": name,
            "email": email,
            "password": hashed_password,
        })

class AuthSessionRepository(BaseRepository[AuthSession]):
    """Server-side sessions backing issued access tokens"""
    
    def __init__(self, db: Session):
        super().__init__(AuthSession, db)
    
    def create_session(self, user_id: UUID, session_token: str, expires: datetime) -> AuthSession:
        return self.create({
            "user_id": user_id,
            "session_token": session_token,
            "expires": expires,
        })
    
    def get_valid_session(self, session_token: str, current_time: datetime) -> Optional[AuthSession]:
        """Get an unexpired session by token"""
        session = self.filter_one_by(session_token=session_token)
        if session is None:
            return None
        expires = session.expires
        # SQLite hands back naive datetimes
        if expires.tzinfo is None and current_time.tzinfo is not None:
            current_time = current_time.replace(tzinfo=None)
        if expires <= current_time:
            return None
        return session
    
    def delete_by_token(self, session_token: str) -> bool:
        deleted = self.db.query(AuthSession).filter(AuthSession.session_token == session_token).delete()
        self.db.commit()
        return deleted > 0
