from animelog.db import Base
from .user import User, AuthSession
from .favorite_genre import FavoriteGenre
from .user_anime import UserAnime

__all__ = ['Base', 'User', 'AuthSession', 'FavoriteGenre', 'UserAnime']
