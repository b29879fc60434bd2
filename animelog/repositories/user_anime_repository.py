import logging
from typing import List, Optional
from uuid import UUID
from sqlalchemy import delete, false, func, not_, select
from sqlalchemy.orm import Session

from animelog.core.enums import AnimeStatus
from animelog.models.user_anime import UserAnime
from animelog.repositories.base_repository import BaseRepository

logger = logging.getLogger(__name__)

def _dialect_insert(db: Session):
    """Return the dialect-specific insert() that supports ON CONFLICT"""
    dialect = db.get_bind().dialect.name
    if dialect == "postgresql":
        from sqlalchemy.dialects.postgresql import insert
    elif dialect == "sqlite":
        from sqlalchemy.dialects.sqlite import insert
    else:
        raise NotImplementedError(f"Upsert is not supported for dialect {dialect}")
    return insert

class UserAnimeRepository(BaseRepository[UserAnime]):
    """Repository for user anime entries.

    Writes go through a single ``INSERT ... ON CONFLICT (user_id, mal_id) DO
    UPDATE`` so two requests for the same pair can't both insert. Rows that end
    up with no favorite flag and no status are deleted in the same transaction.
    """
    
    def __init__(self, db: Session):
        super().__init__(UserAnime, db)
    
    def get_entry(self, user_id: UUID, mal_id: int) -> Optional[UserAnime]:
        """Get user's entry for a catalog item"""
        return self.filter_one_by(user_id=user_id, mal_id=mal_id)
    
    def get_user_entries(self, user_id: UUID) -> List[UserAnime]:
        """Get every entry of a user, oldest first"""
        return self.filter_by(user_id=user_id)
    
    def toggle_favorite(self, user_id: UUID, mal_id: int, title: str, image_url: Optional[str]) -> Optional[UserAnime]:
        """Create as favorite, or flip the favorite flag of the existing row"""
        insert = _dialect_insert(self.db)
        table = UserAnime.__table__
        stmt = insert(UserAnime).values(
            user_id=user_id,
            mal_id=mal_id,
            title=title,
            image_url=image_url,
            is_favorite=True,
            status=None,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[table.c.user_id, table.c.mal_id],
            set_={"is_favorite": not_(table.c.is_favorite), "updated_at": func.now()},
        )
        return self._write(stmt, user_id, mal_id)
    
    def set_status(self, user_id: UUID, mal_id: int, title: str, image_url: Optional[str],
                   status: Optional[AnimeStatus]) -> Optional[UserAnime]:
        """Create with the status, or overwrite the status of the existing row"""
        insert = _dialect_insert(self.db)
        table = UserAnime.__table__
        stmt = insert(UserAnime).values(
            user_id=user_id,
            mal_id=mal_id,
            title=title,
            image_url=image_url,
            is_favorite=False,
            status=status,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[table.c.user_id, table.c.mal_id],
            set_={"status": stmt.excluded.status, "updated_at": func.now()},
        )
        return self._write(stmt, user_id, mal_id)
    
    def remove(self, user_id: UUID, mal_id: int) -> bool:
        """Delete the entry if present"""
        try:
            result = self.db.execute(
                delete(UserAnime).where(UserAnime.user_id == user_id, UserAnime.mal_id == mal_id)
            )
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return result.rowcount > 0
    
    def _write(self, stmt, user_id: UUID, mal_id: int) -> Optional[UserAnime]:
        try:
            self.db.execute(stmt)
            pruned = self.db.execute(
                delete(UserAnime).where(
                    UserAnime.user_id == user_id,
                    UserAnime.mal_id == mal_id,
                    UserAnime.is_favorite == false(),
                    UserAnime.status.is_(None),
                )
            )
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        if pruned.rowcount:
            logger.info(f"Removed empty entry user={user_id} mal_id={mal_id}")
            return None
        return self.db.execute(
            select(UserAnime)
            .where(UserAnime.user_id == user_id, UserAnime.mal_id == mal_id)
            .execution_options(populate_existing=True)
        ).scalar_one_or_none()
