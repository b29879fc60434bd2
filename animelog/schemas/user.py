from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime
from uuid import UUID

class UserCreate(BaseModel):
    name: str = ""
    email: str = ""
    password: str = ""

class UserLogin(BaseModel):
    email: str = ""
    password: str = ""

class UserResponse(BaseModel):
    id: UUID
    name: str
    email: str
    created_at: datetime
    
    class Config:
        from_attributes = True

class Token(BaseModel):
    access_token: str
    token_type: str

class GenrePreferencesUpdate(BaseModel):
    genres: List[str] = Field(default_factory=list, description="Genre labels, e.g. 'Action'")

class PreferencesPage(BaseModel):
    genres: List[str]
    available_genres: List[str]
