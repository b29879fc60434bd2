import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional
from sqlalchemy.orm import Session

from animelog.core.exceptions import AnimeNotFoundException
from animelog.core.interfaces import AnimeCatalogInterface, JikanError
from animelog.models.user import User
from animelog.schemas.anime import HomePage, BrowsePage, AnimeDetailPage
from animelog.services.recommendation_service import RecommendationService
from animelog.services.user_anime_service import UserAnimeService

logger = logging.getLogger(__name__)

SECTION_SIZE = 10

class PageService:
    """Composes catalog reads and user state into page payloads.

    Catalog calls run on worker threads; the database session stays on the
    calling thread.
    """
    
    def __init__(self, db: Session, catalog: AnimeCatalogInterface):
        self.db = db
        self.catalog = catalog
        self.user_anime_service = UserAnimeService(db)
        self.recommendation_service = RecommendationService(db, catalog)
    
    def get_home_page(self, user: Optional[User]) -> HomePage:
        with ThreadPoolExecutor(max_workers=2) as executor:
            top_future = executor.submit(self.catalog.get_top_anime, 1)
            seasonal_future = executor.submit(self.catalog.get_seasonal_anime, 1)
            # reads preferences, so it runs here rather than on a worker
            recommended = None
            if user is not None:
                recommended = self.recommendation_service.get_recommended_anime(user.id)
            top = top_future.result()
            seasonal = seasonal_future.result()
        
        return HomePage(
            top=top.data[:SECTION_SIZE],
            seasonal=seasonal.data[:SECTION_SIZE],
            recommended=recommended.data[:SECTION_SIZE] if recommended and recommended.data else None,
        )
    
    def get_browse_page(self, query: Optional[str], genres: Optional[str], page: int) -> BrowsePage:
        """Search when a query or genre filter is given, top anime otherwise"""
        if query or genres:
            result = self.catalog.search_anime(query or "", page, genres)
        else:
            result = self.catalog.get_top_anime(page)
        
        return BrowsePage(
            query=query or None,
            genres=genres or None,
            page=page,
            data=result.data,
            pagination=result.pagination,
            previous_page=page - 1 if page > 1 else None,
            next_page=page + 1 if result.pagination.has_next_page else None,
        )
    
    def get_anime_detail_page(self, mal_id: int, user: Optional[User]) -> AnimeDetailPage:
        with ThreadPoolExecutor(max_workers=1) as executor:
            anime_future = executor.submit(self.catalog.get_anime_by_id, mal_id)
            entry = self.user_anime_service.get_user_anime_entry(user.id, mal_id) if user else None
            try:
                anime_res = anime_future.result()
            except JikanError as e:
                if e.status_code == 404:
                    raise AnimeNotFoundException(f"Anime {mal_id} not found")
                raise
        
        anime = anime_res.data
        if anime is None:
            raise AnimeNotFoundException(f"Anime {mal_id} not found")
        
        return AnimeDetailPage(
            anime=anime,
            title=anime.display_title,
            image_url=anime.large_image_url,
            is_authenticated=user is not None,
            is_favorite=entry.is_favorite if entry else False,
            status=entry.status if entry else None,
        )
