import logging
from typing import Optional
from .interfaces import JikanConfig
from .jikan_client import JikanClient
from .cache import CacheService, NullCache
from .config import get_settings
from .services.anime_service import AnimeCatalogService

logger = logging.getLogger(__name__)

class JikanServiceFactory:
    """Factory class for creating Jikan services"""
    
    @staticmethod
    def create_anime_service(base_url: Optional[str] = None, cache=None) -> AnimeCatalogService:
        """Create a new catalog service instance from settings"""
        settings = get_settings()
        config = JikanConfig(
            base_url=base_url or settings.JIKAN_BASE_URL,
            timeout=settings.JIKAN_TIMEOUT,
        )
        if cache is None:
            cache = CacheService() if settings.CACHE_ENABLED else NullCache()
        client = JikanClient(config)
        return AnimeCatalogService(client, cache, ttl_seconds=settings.CATALOG_CACHE_TTL, page_size=config.page_size)

_catalog_service: Optional[AnimeCatalogService] = None

def get_catalog_service() -> AnimeCatalogService:
    """Dependency returning the shared catalog service"""
    global _catalog_service
    if _catalog_service is None:
        _catalog_service = JikanServiceFactory.create_anime_service()
        logger.info("Catalog service created")
    return _catalog_service
