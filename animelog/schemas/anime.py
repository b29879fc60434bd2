from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime

from animelog.core.enums import AnimeStatus

# Jikan Response Schemas
class JikanImage(BaseModel):
    image_url: Optional[str] = None
    large_image_url: Optional[str] = None

class JikanImages(BaseModel):
    jpg: JikanImage = Field(default_factory=JikanImage)
    webp: JikanImage = Field(default_factory=JikanImage)

class JikanGenreRef(BaseModel):
    mal_id: int
    name: str

class JikanTrailer(BaseModel):
    youtube_id: Optional[str] = None

class JikanAnime(BaseModel):
    """Jikan anime data structure"""
    mal_id: int
    title: str
    title_english: Optional[str] = None
    images: JikanImages = Field(default_factory=JikanImages)
    synopsis: Optional[str] = None
    score: Optional[float] = None
    scored_by: Optional[int] = None
    episodes: Optional[int] = None
    status: Optional[str] = None
    rating: Optional[str] = None
    genres: List[JikanGenreRef] = Field(default_factory=list)
    year: Optional[int] = None
    season: Optional[str] = None
    type: Optional[str] = None
    members: Optional[int] = None
    rank: Optional[int] = None
    popularity: Optional[int] = None
    trailer: Optional[JikanTrailer] = None

    @property
    def display_title(self) -> str:
        return self.title_english or self.title

    @property
    def large_image_url(self) -> Optional[str]:
        return self.images.webp.large_image_url or self.images.jpg.large_image_url

class JikanPagination(BaseModel):
    last_visible_page: int = 1
    has_next_page: bool = False
    current_page: int = 1

class JikanPaginatedResponse(BaseModel):
    """Paginated list response shared by top, search, genre and season endpoints"""
    data: List[JikanAnime] = Field(default_factory=list)
    pagination: JikanPagination = Field(default_factory=JikanPagination)

class JikanSingleResponse(BaseModel):
    data: Optional[JikanAnime] = None

class JikanGenre(BaseModel):
    mal_id: int
    name: str
    count: int = 0

# User Anime Schemas
class UserAnimeWrite(BaseModel):
    """Snapshot of catalog metadata sent along with a list action"""
    title: str = Field(..., description="Display title at the time of the action")
    image_url: Optional[str] = None

class UserAnimeStatusUpdate(UserAnimeWrite):
    status: Optional[AnimeStatus] = Field(None, description="'watching', 'watched' or null to clear")

class UserAnimeResponse(BaseModel):
    """User anime entry response"""
    id: int
    mal_id: int
    title: str
    image_url: Optional[str] = None
    status: Optional[AnimeStatus] = None
    is_favorite: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    
    class Config:
        from_attributes = True

class ActionResult(BaseModel):
    """Outcome of a mutating action.

    ``invalidated`` lists the page paths whose data changed so a client can
    refetch them.
    """
    success: bool
    error: Optional[str] = None
    entry: Optional[UserAnimeResponse] = None
    invalidated: List[str] = Field(default_factory=list)

# Page Schemas
class HomePage(BaseModel):
    top: List[JikanAnime]
    seasonal: List[JikanAnime]
    recommended: Optional[List[JikanAnime]] = None

class BrowsePage(BaseModel):
    query: Optional[str] = None
    genres: Optional[str] = None
    page: int
    data: List[JikanAnime]
    pagination: JikanPagination
    previous_page: Optional[int] = None
    next_page: Optional[int] = None

class AnimeDetailPage(BaseModel):
    anime: JikanAnime
    title: str
    image_url: Optional[str] = None
    is_authenticated: bool
    is_favorite: bool = False
    status: Optional[AnimeStatus] = None

class MyListCounts(BaseModel):
    all: int
    favorites: int
    watching: int
    watched: int

class MyListPage(BaseModel):
    all: List[UserAnimeResponse]
    favorites: List[UserAnimeResponse]
    watching: List[UserAnimeResponse]
    watched: List[UserAnimeResponse]
    counts: MyListCounts
