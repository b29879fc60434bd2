import logging
from typing import Optional
from uuid import UUID
from sqlalchemy.orm import Session

from animelog.core.interfaces import AnimeCatalogInterface
from animelog.schemas.anime import JikanPaginatedResponse
from animelog.services.preference_service import PreferenceService

logger = logging.getLogger(__name__)

MAX_RECOMMENDATION_GENRES = 3

class RecommendationService:
    """Genre-based recommendations for the home page"""
    
    def __init__(self, db: Session, catalog: AnimeCatalogInterface):
        self.db = db
        self.catalog = catalog
        self.preference_service = PreferenceService(db)
    
    def get_recommended_anime(self, user_id: UUID) -> Optional[JikanPaginatedResponse]:
        """One catalog query over the first mappable genre ids; None when there are none"""
        genre_ids = self.preference_service.get_user_genre_ids(user_id)[:MAX_RECOMMENDATION_GENRES]
        if not genre_ids:
            logger.info(f"No mappable genres for user={user_id}, skipping recommendations")
            return None
        return self.catalog.get_anime_by_genre(",".join(str(g) for g in genre_ids), 1)
