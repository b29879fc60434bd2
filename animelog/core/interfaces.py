from abc import ABC, abstractmethod
from typing import Dict, List, Optional
from dataclasses import dataclass

@dataclass
class JikanConfig:
    """Configuration class for Jikan API"""
    base_url: str = "https://api.jikan.moe/v4"
    timeout: int = 30
    page_size: int = 20

class JikanResponse:
    """Response wrapper for Jikan API calls"""
    def __init__(self, data: Dict, status_code: int, success: bool):
        self.data = data
        self.status_code = status_code
        self.success = success

class JikanError(Exception):
    """Custom exception for Jikan API errors"""
    def __init__(self, message: str, status_code: int = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

class JikanClientInterface(ABC):
    """Abstract interface for Jikan client"""
    
    @abstractmethod
    def make_request(self, endpoint: str, params: Dict = None) -> JikanResponse:
        pass

class AnimeCatalogInterface(ABC):
    """Abstract interface for the anime catalog"""
    
    @abstractmethod
    def get_top_anime(self, page: int = 1):
        pass
    
    @abstractmethod
    def search_anime(self, query: str, page: int = 1, genres: Optional[str] = None):
        pass
    
    @abstractmethod
    def get_anime_by_id(self, mal_id: int):
        pass
    
    @abstractmethod
    def get_anime_by_genre(self, genre_ids: str, page: int = 1):
        pass
    
    @abstractmethod
    def get_seasonal_anime(self, page: int = 1):
        pass
    
    @abstractmethod
    def get_genres(self) -> List:
        pass
