import logging
from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session

from animelog.core.enums import AnimeStatus
from animelog.core.exceptions import NOT_AUTHENTICATED
from animelog.models.user import User
from animelog.models.user_anime import UserAnime
from animelog.repositories.user_anime_repository import UserAnimeRepository
from animelog.schemas.anime import ActionResult, UserAnimeResponse, MyListPage, MyListCounts

logger = logging.getLogger(__name__)


def invalidated_paths(mal_id: int) -> List[str]:
    """Pages whose content depends on a user's entry for ``mal_id``"""
    return ["/my-list", f"/anime/{mal_id}"]

class UserAnimeService:
    """Favorite / watch-status actions on a user's anime list"""
    
    def __init__(self, db: Session):
        self.db = db
        self.repository = UserAnimeRepository(db)
    
    def _result(self, mal_id: int, entry: Optional[UserAnime]) -> ActionResult:
        return ActionResult(
            success=True,
            entry=UserAnimeResponse.model_validate(entry) if entry is not None else None,
            invalidated=invalidated_paths(mal_id),
        )
    
    def toggle_favorite(self, user: Optional[User], mal_id: int, title: str, image_url: Optional[str]) -> ActionResult:
        """Add to favorites, or flip the favorite flag of an existing entry"""
        if user is None:
            return ActionResult(success=False, error=NOT_AUTHENTICATED)
        if not title:
            return ActionResult(success=False, error="Title is required")
        
        entry = self.repository.toggle_favorite(user.id, mal_id, title, image_url)
        logger.info(f"Toggled favorite user={user.id} mal_id={mal_id} -> {entry.is_favorite if entry else 'removed'}")
        return self._result(mal_id, entry)
    
    def set_anime_status(self, user: Optional[User], mal_id: int, title: str, image_url: Optional[str],
                         status: Optional[AnimeStatus]) -> ActionResult:
        """Overwrite the watch status; None clears it"""
        if user is None:
            return ActionResult(success=False, error=NOT_AUTHENTICATED)
        if not title:
            return ActionResult(success=False, error="Title is required")
        
        entry = self.repository.set_status(user.id, mal_id, title, image_url, status)
        logger.info(f"Set status user={user.id} mal_id={mal_id} -> {status.value if status else None}")
        return self._result(mal_id, entry)
    
    def remove_from_list(self, user: Optional[User], mal_id: int) -> ActionResult:
        """Delete the entry; succeeds whether or not it existed"""
        if user is None:
            return ActionResult(success=False, error=NOT_AUTHENTICATED)
        
        if self.repository.remove(user.id, mal_id):
            logger.info(f"Removed mal_id={mal_id} from list of user={user.id}")
        return self._result(mal_id, None)
    
    def get_user_anime_entry(self, user_id: UUID, mal_id: int) -> Optional[UserAnime]:
        return self.repository.get_entry(user_id, mal_id)
    
    def get_user_anime_list(self, user_id: UUID) -> List[UserAnime]:
        return self.repository.get_user_entries(user_id)
    
    def get_my_list(self, user_id: UUID) -> MyListPage:
        """All entries plus the favorites / watching / watched views"""
        entries = [UserAnimeResponse.model_validate(e) for e in self.get_user_anime_list(user_id)]
        favorites = [e for e in entries if e.is_favorite]
        watching = [e for e in entries if e.status == AnimeStatus.WATCHING]
        watched = [e for e in entries if e.status == AnimeStatus.WATCHED]
        return MyListPage(
            all=entries,
            favorites=favorites,
            watching=watching,
            watched=watched,
            counts=MyListCounts(
                all=len(entries),
                favorites=len(favorites),
                watching=len(watching),
                watched=len(watched),
            ),
        )
