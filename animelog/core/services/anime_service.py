import logging
from typing import Any, Dict, List, Optional
from ..interfaces import AnimeCatalogInterface, JikanClientInterface, JikanError
from animelog.schemas.anime import (
    JikanGenre, JikanPaginatedResponse, JikanSingleResponse
)

logger = logging.getLogger(__name__)

CACHE_TTL_1H = 60 * 60

class AnimeCatalogService(AnimeCatalogInterface):
    """Read-only access to the Jikan anime catalog"""
    
    def __init__(self, client: JikanClientInterface, cache, ttl_seconds: int = CACHE_TTL_1H, page_size: int = 20):
        self.client = client
        self.cache = cache
        self.ttl_seconds = ttl_seconds
        self.page_size = page_size
    
    def _fetch(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """GET an endpoint through the cache; non-2xx raises JikanError"""
        params = params or {}
        parts = [f"{k}={v}" for k, v in sorted(params.items())]
        cache_key = f"jikan:{endpoint.strip('/')}:{'&'.join(parts) or 'none'}"
        cached = self.cache.get_json(cache_key)
        if cached is not None:
            return cached
        resp = self.client.make_request(endpoint, dict(params))
        if not resp.success:
            raise JikanError(f"Jikan API error: {resp.status_code}", resp.status_code)
        self.cache.set_json(cache_key, resp.data, self.ttl_seconds)
        return resp.data
    
    def get_top_anime(self, page: int = 1) -> JikanPaginatedResponse:
        """Get top anime"""
        data = self._fetch("top/anime", {"page": page, "limit": self.page_size})
        return JikanPaginatedResponse.model_validate(data)
    
    def search_anime(self, query: str, page: int = 1, genres: Optional[str] = None) -> JikanPaginatedResponse:
        """Full-text search, optionally narrowed to comma-separated genre ids"""
        params = {"q": query, "page": page, "limit": self.page_size, "sfw": "true"}
        if genres:
            params["genres"] = genres
        return JikanPaginatedResponse.model_validate(self._fetch("anime", params))
    
    def get_anime_by_id(self, mal_id: int) -> JikanSingleResponse:
        """Get full anime details by MyAnimeList id"""
        return JikanSingleResponse.model_validate(self._fetch(f"anime/{mal_id}/full"))
    
    def get_anime_by_genre(self, genre_ids: str, page: int = 1) -> JikanPaginatedResponse:
        """Anime in the given genres, best scored first"""
        params = {
            "genres": genre_ids,
            "order_by": "score",
            "sort": "desc",
            "page": page,
            "limit": self.page_size,
            "sfw": "true",
        }
        return JikanPaginatedResponse.model_validate(self._fetch("anime", params))
    
    def get_seasonal_anime(self, page: int = 1) -> JikanPaginatedResponse:
        """Anime airing this season"""
        data = self._fetch("seasons/now", {"page": page, "limit": self.page_size})
        return JikanPaginatedResponse.model_validate(data)
    
    def get_genres(self) -> List[JikanGenre]:
        """Get anime genre list from Jikan"""
        data = self._fetch("genres/anime")
        return [JikanGenre.model_validate(item) for item in data.get("data", [])]
