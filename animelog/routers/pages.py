from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from animelog.db import get_db
from animelog.core.auth import get_current_user, get_optional_user
from animelog.core.jikan_service import get_catalog_service
from animelog.core.services.anime_service import AnimeCatalogService
from animelog.models.user import User
from animelog.schemas.anime import HomePage, BrowsePage, MyListPage, JikanGenre
from animelog.services.page_service import PageService
from animelog.services.user_anime_service import UserAnimeService
from animelog.routers.common import handle_exception

router = APIRouter(tags=["pages"])

def parse_page(page: Optional[str]) -> int:
    """Page number from the query string; anything unusable means page 1"""
    try:
        value = int(page) if page else 1
    except ValueError:
        return 1
    return value if value >= 1 else 1

@router.get("/", response_model=HomePage)
def home(
    current_user: Optional[User] = Depends(get_optional_user),
    db: Session = Depends(get_db),
    catalog: AnimeCatalogService = Depends(get_catalog_service)
):
    """Top and seasonal anime, plus recommendations for signed-in users"""
    try:
        return PageService(db, catalog).get_home_page(current_user)
    except Exception as e:
        raise handle_exception(e)

@router.get("/browse", response_model=BrowsePage)
def browse(
    q: Optional[str] = Query(None, description="Free-text search"),
    genres: Optional[str] = Query(None, description="Comma-separated Jikan genre ids"),
    page: Optional[str] = Query(None, description="Page number"),
    db: Session = Depends(get_db),
    catalog: AnimeCatalogService = Depends(get_catalog_service)
):
    try:
        return PageService(db, catalog).get_browse_page(q, genres, parse_page(page))
    except Exception as e:
        raise handle_exception(e)

@router.get("/my-list", response_model=MyListPage)
def my_list(current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    try:
        return UserAnimeService(db).get_my_list(current_user.id)
    except Exception as e:
        raise handle_exception(e)

@router.get("/genres", response_model=List[JikanGenre])
def list_genres(catalog: AnimeCatalogService = Depends(get_catalog_service)):
    """Catalog genre list"""
    try:
        return catalog.get_genres()
    except Exception as e:
        raise handle_exception(e)
