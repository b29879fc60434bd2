from sqlalchemy import (
    Column, Integer, String, Boolean, DateTime, Text, ForeignKey, Uuid, Enum, UniqueConstraint, false
)
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from animelog.db import Base
from animelog.core.enums import AnimeStatus

class UserAnime(Base):
    """A user's relationship to one catalog title: favorite flag plus watch status"""
    __tablename__ = "user_anime"
    __table_args__ = (
        UniqueConstraint("user_id", "mal_id", name="user_anime_unique"),
    )
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    mal_id = Column(Integer, nullable=False)
    title = Column(String(500), nullable=False)
    image_url = Column(Text, nullable=True)
    status = Column(
        Enum(AnimeStatus, name="anime_status", values_callable=lambda e: [m.value for m in e]),
        nullable=True,
    )
    is_favorite = Column(Boolean, nullable=False, default=False, server_default=false())
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
    
    user = relationship("User", back_populates="anime_entries")
