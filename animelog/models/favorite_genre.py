from sqlalchemy import Column, Integer, String, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from animelog.db import Base

class FavoriteGenre(Base):
    __tablename__ = "favorite_genres"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    genre = Column(String(100), nullable=False)
    # Jikan genre id resolved when the preference is saved; NULL for unknown labels
    mal_genre_id = Column(Integer, nullable=True)
    
    user = relationship("User", back_populates="favorite_genres")
