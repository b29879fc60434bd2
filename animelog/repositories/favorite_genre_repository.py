from typing import List, Optional, Sequence, Tuple
from uuid import UUID
from sqlalchemy import delete
from sqlalchemy.orm import Session
from animelog.repositories.base_repository import BaseRepository
from animelog.models.favorite_genre import FavoriteGenre

class FavoriteGenreRepository(BaseRepository[FavoriteGenre]):
    """Repository for a user's favorite genres"""
    
    def __init__(self, db: Session):
        super().__init__(FavoriteGenre, db)
    
    def get_user_genres(self, user_id: UUID) -> List[FavoriteGenre]:
        return self.filter_by(user_id=user_id)
    
    def replace_user_genres(self, user_id: UUID, genres: Sequence[Tuple[str, Optional[int]]]) -> List[FavoriteGenre]:
        """Delete all genre rows of the user and insert ``genres`` in one transaction"""
        try:
            self.db.execute(delete(FavoriteGenre).where(FavoriteGenre.user_id == user_id))
            rows = [
                FavoriteGenre(user_id=user_id, genre=label, mal_genre_id=mal_genre_id)
                for label, mal_genre_id in genres
            ]
            self.db.add_all(rows)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return self.get_user_genres(user_id)
