from .base_repository import BaseRepository
from .user_repository import UserRepository, AuthSessionRepository
from .user_anime_repository import UserAnimeRepository
from .favorite_genre_repository import FavoriteGenreRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "AuthSessionRepository",
    "UserAnimeRepository",
    "FavoriteGenreRepository",
]
