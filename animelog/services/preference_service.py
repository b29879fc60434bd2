import logging
from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session

from animelog.core.enums import GenreHelper
from animelog.core.exceptions import NOT_AUTHENTICATED
from animelog.models.user import User
from animelog.repositories.favorite_genre_repository import FavoriteGenreRepository
from animelog.schemas.anime import ActionResult
from animelog.schemas.user import PreferencesPage

logger = logging.getLogger(__name__)

class PreferenceService:
    """Favorite genre preferences"""
    
    def __init__(self, db: Session):
        self.db = db
        self.repository = FavoriteGenreRepository(db)
    
    def update_genre_preferences(self, user: Optional[User], genres: List[str]) -> ActionResult:
        """Replace the user's whole genre set"""
        if user is None:
            return ActionResult(success=False, error=NOT_AUTHENTICATED)
        
        labels = list(genres)
        
        self.repository.replace_user_genres(
            user.id, [(label, GenreHelper.get_genre_id(label)) for label in labels]
        )
        logger.info(f"Saved {len(labels)} favorite genres for user={user.id}")
        return ActionResult(success=True, invalidated=["/", "/preferences"])
    
    def get_user_genres(self, user_id: UUID) -> List[str]:
        return [row.genre for row in self.repository.get_user_genres(user_id)]
    
    def get_user_genre_ids(self, user_id: UUID) -> List[int]:
        """Jikan ids of the user's genres in saved order; unknown labels are skipped"""
        ids = []
        for row in self.repository.get_user_genres(user_id):
            mal_genre_id = row.mal_genre_id if row.mal_genre_id is not None else GenreHelper.get_genre_id(row.genre)
            if mal_genre_id is not None:
                ids.append(mal_genre_id)
        return ids
    
    def get_preferences_page(self, user_id: UUID) -> PreferencesPage:
        return PreferencesPage(
            genres=self.get_user_genres(user_id),
            available_genres=GenreHelper.get_all_labels(),
        )
